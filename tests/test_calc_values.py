"""Tests for xlregress.calc value sources and RangeValue."""

from __future__ import annotations

import pytest
from xlregress.calc._errors import ExcelError
from xlregress.calc._sheet import Sheet
from xlregress.calc._values import (
    AreaSource,
    RangeValue,
    ReferenceSource,
    ScalarSource,
    value_source,
)


class TestRangeValue:
    def test_from_rows(self) -> None:
        rv = RangeValue.from_rows([[10, 20], [30, 40]])
        assert rv.n_rows == 2
        assert rv.n_cols == 2
        assert rv.values == [10, 20, 30, 40]

    def test_shape_properties(self) -> None:
        rv = RangeValue(values=[1, 2, 3, 4, 5, 6], n_rows=2, n_cols=3)
        assert rv.width == 3
        assert rv.height == 2

    def test_get_value_zero_based(self) -> None:
        rv = RangeValue.from_rows([[10, 20], [30, 40]])
        assert rv.get_value(0, 0) == 10
        assert rv.get_value(1, 0) == 30

    def test_ragged_rows_rejected(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            RangeValue.from_rows([[1, 2], [3]])

    def test_wrong_value_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="2x2"):
            RangeValue(values=[1, 2, 3], n_rows=2, n_cols=2)


class TestValueSourceConstruction:
    def test_error_argument_is_returned(self) -> None:
        assert value_source(ExcelError.REF) is ExcelError.REF

    def test_range_builds_area_source(self) -> None:
        src = value_source(RangeValue.from_rows([[1], [2], [3]]))
        assert isinstance(src, AreaSource)
        assert src.size == 3

    def test_sheet_area_builds_area_source(self) -> None:
        ws = Sheet()
        src = value_source(ws.area(1, 1, 4, 2))
        assert isinstance(src, AreaSource)
        assert src.size == 8

    def test_reference_builds_reference_source(self) -> None:
        ws = Sheet()
        ws.cell(1, 1, 7)
        src = value_source(ws.ref(1, 1))
        assert isinstance(src, ReferenceSource)
        assert src.size == 1
        assert src.item(0) == 7

    @pytest.mark.parametrize("literal", [3.5, 0, "text", True, None])
    def test_literal_builds_scalar_source(self, literal: object) -> None:
        src = value_source(literal)
        assert isinstance(src, ScalarSource)
        assert src.size == 1
        assert src.item(0) == literal

    def test_flat_list_is_single_row(self) -> None:
        src = value_source([1, 2, 3])
        assert isinstance(src, AreaSource)
        assert list(src) == [1, 2, 3]

    def test_nested_list_is_grid(self) -> None:
        src = value_source([[1, 2], [3, 4]])
        assert isinstance(src, AreaSource)
        assert src.size == 4
        assert src.item(2) == 3

    def test_empty_list_has_size_zero(self) -> None:
        src = value_source([])
        assert isinstance(src, AreaSource)
        assert src.size == 0


class TestValueSourceAccess:
    def test_row_major_order(self) -> None:
        src = AreaSource(RangeValue.from_rows([[10, 20], [30, 40]]))
        assert [src.item(i) for i in range(4)] == [10, 20, 30, 40]

    def test_out_of_range_raises(self) -> None:
        src = AreaSource(RangeValue.from_rows([[10, 20], [30, 40]]))
        with pytest.raises(IndexError, match="outside range"):
            src.item(4)
        with pytest.raises(IndexError):
            src.item(-1)

    def test_scalar_out_of_range_raises(self) -> None:
        with pytest.raises(IndexError):
            ScalarSource(1.0).item(1)

    def test_len_matches_size(self) -> None:
        src = AreaSource(RangeValue(values=[1, 2, 3, 4, 5, 6], n_rows=3, n_cols=2))
        assert len(src) == src.size == 6

    def test_reference_reads_current_value(self) -> None:
        ws = Sheet()
        ws.cell(2, 3, 1.5)
        src = ReferenceSource(ws.ref(2, 3))
        assert src.item(0) == 1.5
        ws.cell(2, 3, 9.0)
        assert src.item(0) == 9.0

    def test_sheet_area_reads_live_values(self) -> None:
        ws = Sheet()
        ws.append([1, 2])
        ws.append([3, 4])
        src = AreaSource(ws.area(1, 1, 2, 2))
        ws.cell(2, 1, 30)
        assert list(src) == [1, 2, 30, 4]
