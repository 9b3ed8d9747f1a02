"""Value sources: one indexable view over scalar, reference and range arguments."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Sequence

from xlregress.calc._errors import ExcelError
from xlregress.calc._protocol import AreaReference, CellReference


# ---------------------------------------------------------------------------
# RangeValue: shape-aware 2D range container
# ---------------------------------------------------------------------------


@dataclass
class RangeValue:
    """A resolved cell range that preserves 2D shape metadata.

    ``values`` is stored row-major.  Satisfies :class:`AreaReference` through
    ``width``/``height``/``get_value``.
    """

    values: list[Any]
    n_rows: int
    n_cols: int

    def __post_init__(self) -> None:
        if len(self.values) != self.n_rows * self.n_cols:
            raise ValueError(
                f"RangeValue expects {self.n_rows}x{self.n_cols} values, "
                f"got {len(self.values)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> RangeValue:
        """Build a range from a list of equal-length rows."""
        if not rows:
            return cls(values=[], n_rows=0, n_cols=0)
        n_cols = len(rows[0])
        values: list[Any] = []
        for r in rows:
            if len(r) != n_cols:
                raise ValueError("Array rows must all have the same length")
            values.extend(r)
        return cls(values=values, n_rows=len(rows), n_cols=n_cols)

    @property
    def width(self) -> int:
        return self.n_cols

    @property
    def height(self) -> int:
        return self.n_rows

    def get_value(self, row: int, col: int) -> Any:
        """Get value at 0-based (row, col) position."""
        return self.values[row * self.n_cols + col]


# ---------------------------------------------------------------------------
# Value sources
# ---------------------------------------------------------------------------


class ValueSource(abc.ABC):
    """Fixed-size, zero-based view of the cell values of one argument."""

    __slots__ = ("_size",)

    def __init__(self, size: int) -> None:
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def item(self, index: int) -> Any:
        if index < 0 or index >= self._size:
            raise IndexError(
                f"Specified index {index} is outside range (0..{self._size - 1})"
            )
        return self._item(index)

    @abc.abstractmethod
    def _item(self, index: int) -> Any:
        ...

    def __len__(self) -> int:
        return self._size

    def __iter__(self):
        for i in range(self._size):
            yield self._item(i)


class ScalarSource(ValueSource):
    """A literal argument: one value."""

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        super().__init__(1)
        self._value = value

    def _item(self, index: int) -> Any:
        return self._value


class ReferenceSource(ValueSource):
    """A single-cell reference, re-read on every access."""

    __slots__ = ("_ref",)

    def __init__(self, ref: CellReference) -> None:
        super().__init__(1)
        self._ref = ref

    def _item(self, index: int) -> Any:
        return self._ref.inner_value


class AreaSource(ValueSource):
    """A rectangular area read row by row."""

    __slots__ = ("_area", "_width")

    def __init__(self, area: AreaReference) -> None:
        super().__init__(area.width * area.height)
        self._area = area
        self._width = area.width

    def _item(self, index: int) -> Any:
        row, col = divmod(index, self._width)
        return self._area.get_value(row, col)


def _array_constant(arg: list[Any] | tuple[Any, ...]) -> RangeValue:
    """Convert an inline array such as ``{1,2;3,4}`` to a RangeValue.

    A flat sequence is a single row; a sequence of sequences is a grid.
    """
    if arg and all(isinstance(r, (list, tuple)) for r in arg):
        return RangeValue.from_rows(arg)
    return RangeValue(values=list(arg), n_rows=1 if arg else 0, n_cols=len(arg))


def value_source(arg: Any) -> ValueSource | ExcelError:
    """Wrap a resolved formula argument in the matching ValueSource.

    An error argument is returned as-is: the caller must propagate it.
    """
    if isinstance(arg, ExcelError):
        return arg
    if isinstance(arg, AreaReference):
        return AreaSource(arg)
    if isinstance(arg, (list, tuple)):
        return AreaSource(_array_constant(arg))
    if isinstance(arg, CellReference):
        return ReferenceSource(arg)
    return ScalarSource(arg)
