"""In-memory sheet: a minimal cell store that hands out live references."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class Sheet:
    """A grid of cell values addressed by 1-based (row, column)."""

    __slots__ = ("_title", "_cells", "_next_append_row")

    def __init__(self, title: str = "Sheet1") -> None:
        self._title = title
        self._cells: dict[tuple[int, int], Any] = {}
        self._next_append_row: int = 1

    @property
    def title(self) -> str:
        return self._title

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def cell(self, row: int, column: int, value: Any = None) -> Any:
        """Get a cell's value, writing *value* first when given."""
        if row < 1 or column < 1:
            raise ValueError(f"Row and column must be >= 1, got ({row}, {column})")
        if value is not None:
            self._cells[(row, column)] = value
            if row >= self._next_append_row:
                self._next_append_row = row + 1
        return self._cells.get((row, column))

    def clear(self, row: int, column: int) -> None:
        """Blank a cell."""
        self._cells.pop((row, column), None)

    def append(self, iterable: Iterable[Any]) -> None:
        """Write a row of values below the last written row, from column 1."""
        row = self._next_append_row
        for col, value in enumerate(iterable, start=1):
            if value is None:
                self._cells.pop((row, col), None)
            else:
                self._cells[(row, col)] = value
        self._next_append_row = row + 1

    def value(self, row: int, column: int) -> Any:
        return self._cells.get((row, column))

    # ------------------------------------------------------------------
    # References
    # ------------------------------------------------------------------

    def ref(self, row: int, column: int) -> SheetCellRef:
        """A live reference to one cell."""
        if row < 1 or column < 1:
            raise ValueError(f"Row and column must be >= 1, got ({row}, {column})")
        return SheetCellRef(self, row, column)

    def area(self, min_row: int, min_col: int, max_row: int, max_col: int) -> SheetArea:
        """A live view of the rectangle spanning both corners (inclusive)."""
        if min_row < 1 or min_col < 1:
            raise ValueError(f"Row and column must be >= 1, got ({min_row}, {min_col})")
        if max_row < min_row or max_col < min_col:
            raise ValueError(
                f"Invalid area ({min_row}, {min_col}):({max_row}, {max_col})"
            )
        return SheetArea(self, min_row, min_col, max_row, max_col)

    def __repr__(self) -> str:
        return f"<Sheet {self._title!r}>"


class SheetCellRef:
    """Reference to a single sheet cell; reads the current value on access."""

    __slots__ = ("sheet", "row", "column")

    def __init__(self, sheet: Sheet, row: int, column: int) -> None:
        self.sheet = sheet
        self.row = row
        self.column = column

    @property
    def inner_value(self) -> Any:
        return self.sheet.value(self.row, self.column)

    def __repr__(self) -> str:
        return f"<SheetCellRef {self.sheet.title}!({self.row}, {self.column})>"


class SheetArea:
    """Rectangular view onto a sheet, addressed from its top-left corner."""

    __slots__ = ("sheet", "min_row", "min_col", "max_row", "max_col")

    def __init__(
        self, sheet: Sheet, min_row: int, min_col: int, max_row: int, max_col: int,
    ) -> None:
        self.sheet = sheet
        self.min_row = min_row
        self.min_col = min_col
        self.max_row = max_row
        self.max_col = max_col

    @property
    def width(self) -> int:
        return self.max_col - self.min_col + 1

    @property
    def height(self) -> int:
        return self.max_row - self.min_row + 1

    def get_value(self, row: int, col: int) -> Any:
        """Value at 0-based (row, col) inside the area."""
        if row < 0 or row >= self.height or col < 0 or col >= self.width:
            raise IndexError(f"({row}, {col}) is outside a {self.height}x{self.width} area")
        return self.sheet.value(self.min_row + row, self.min_col + col)

    def __repr__(self) -> str:
        return (
            f"<SheetArea {self.sheet.title}!({self.min_row}, {self.min_col})"
            f":({self.max_row}, {self.max_col})>"
        )
