"""Tests for the xlregress.calc in-memory sheet."""

from __future__ import annotations

import pytest
from xlregress.calc._protocol import AreaReference, CellReference
from xlregress.calc._sheet import Sheet


class TestCells:
    def test_write_and_read(self) -> None:
        ws = Sheet()
        ws.cell(2, 3, 42)
        assert ws.cell(2, 3) == 42
        assert ws.value(2, 3) == 42

    def test_blank_cell_is_none(self) -> None:
        assert Sheet().value(5, 5) is None

    def test_clear(self) -> None:
        ws = Sheet()
        ws.cell(1, 1, "x")
        ws.clear(1, 1)
        assert ws.value(1, 1) is None

    def test_append_rows(self) -> None:
        ws = Sheet()
        ws.append([1, "a"])
        ws.append([2, None])
        assert ws.value(1, 2) == "a"
        assert ws.value(2, 1) == 2
        assert ws.value(2, 2) is None

    def test_append_after_cell_write(self) -> None:
        ws = Sheet()
        ws.cell(3, 1, 9)
        ws.append([10])
        assert ws.value(4, 1) == 10

    def test_invalid_coordinates(self) -> None:
        with pytest.raises(ValueError, match=">= 1"):
            Sheet().cell(0, 1, 1)

    def test_title(self) -> None:
        assert Sheet("Data").title == "Data"


class TestReferences:
    def test_ref_satisfies_protocol(self) -> None:
        assert isinstance(Sheet().ref(1, 1), CellReference)

    def test_ref_is_live(self) -> None:
        ws = Sheet()
        ref = ws.ref(1, 1)
        assert ref.inner_value is None
        ws.cell(1, 1, 3)
        assert ref.inner_value == 3

    def test_area_satisfies_protocol(self) -> None:
        assert isinstance(Sheet().area(1, 1, 2, 2), AreaReference)

    def test_area_shape(self) -> None:
        area = Sheet().area(2, 3, 6, 4)
        assert area.width == 2
        assert area.height == 5

    def test_area_offsets(self) -> None:
        ws = Sheet()
        ws.cell(2, 2, 10)
        ws.cell(2, 3, 20)
        ws.cell(3, 2, 30)
        ws.cell(3, 3, 40)
        area = ws.area(2, 2, 3, 3)
        assert [area.get_value(r, c) for r in range(2) for c in range(2)] == [10, 20, 30, 40]

    def test_area_outside_raises(self) -> None:
        with pytest.raises(IndexError):
            Sheet().area(1, 1, 2, 2).get_value(2, 0)

    def test_inverted_area_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid area"):
            Sheet().area(3, 1, 1, 1)
