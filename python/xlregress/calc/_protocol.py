"""Collaborator protocols and the regression result dataclass."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from xlregress.calc._errors import ExcelError


@runtime_checkable
class CellReference(Protocol):
    """A reference to one cell, dereferenced on demand."""

    @property
    def inner_value(self) -> Any:
        """The referenced cell's current value."""
        ...


@runtime_checkable
class AreaReference(Protocol):
    """A rectangular block of cells with zero-based addressing."""

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def get_value(self, row: int, col: int) -> Any:
        """Value at zero-based (row, col) relative to the area's top-left."""
        ...


class ErrorCategory(enum.Enum):
    """Why a regression produced an error instead of a number."""

    NOT_AVAILABLE = "not_available"  # empty input or size mismatch
    PROPAGATED_INPUT = "propagated_input"  # error already present in an input
    DIVISION_BY_ZERO = "division_by_zero"  # no valid numeric pair
    INVALID_NUMERIC_RESULT = "invalid_numeric_result"  # NaN or infinite


@dataclass(frozen=True)
class RegressionResult:
    """Outcome of a SLOPE/INTERCEPT evaluation.

    Exactly one of ``value`` and ``error`` is set.  ``category`` is set
    whenever ``error`` is.
    """

    value: float | None = None
    error: ExcelError | None = None
    category: ErrorCategory | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("RegressionResult needs exactly one of value and error")
        if (self.error is None) != (self.category is None):
            raise ValueError("RegressionResult category must accompany an error")

    @classmethod
    def success(cls, value: float) -> RegressionResult:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ExcelError, category: ErrorCategory) -> RegressionResult:
        return cls(error=error, category=category)

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_cell_value(self) -> float | ExcelError:
        """The value a formula cell would display: a number or an error."""
        return self.error if self.error is not None else self.value
