"""SLOPE and INTERCEPT: two-pass least-squares over paired value sources.

Error handling follows spreadsheet semantics: the x array is treated as
fully evaluated before y, so the first error in x always wins over any
error in y.  Pairs where either side is not a number are skipped, but the
means still divide by the full pair count.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Any, Iterator

from xlregress.calc._errors import ExcelError, first_error, is_error, is_number
from xlregress.calc._protocol import ErrorCategory, RegressionResult
from xlregress.calc._values import ValueSource, value_source

logger = logging.getLogger(__name__)


class RegressionKind(enum.Enum):
    """Which least-squares coefficient a function returns."""

    INTERCEPT = "INTERCEPT"
    SLOPE = "SLOPE"


def _as_float(value: Any) -> float:
    """Convert a number to float; integers beyond float range become +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


class _PairScan:
    """Walks two equal-size sources, recording the first error on each side."""

    __slots__ = ("x", "y", "size", "first_x_error", "first_y_error")

    def __init__(self, x: ValueSource, y: ValueSource) -> None:
        self.x = x
        self.y = y
        self.size = x.size
        self.first_x_error: ExcelError | None = None
        self.first_y_error: ExcelError | None = None

    def numeric_pairs(self) -> Iterator[tuple[float, float]]:
        """Yield ``(x_i, y_i)`` for every index where both sides are numbers."""
        for i in range(self.size):
            vx = self.x.item(i)
            vy = self.y.item(i)
            if is_error(vx) and self.first_x_error is None:
                self.first_x_error = vx
                continue
            if is_error(vy) and self.first_y_error is None:
                self.first_y_error = vy
                continue
            if is_number(vx) and is_number(vy):
                yield _as_float(vx), _as_float(vy)


def _coefficients(scan: _PairScan) -> tuple[float, float, bool]:
    """Return ``(slope, intercept, accumulated_some)``."""
    n = scan.size

    # first pass: means
    sum_x = 0.0
    sum_y = 0.0
    accumulated_some = False
    for vx, vy in scan.numeric_pairs():
        sum_x += vx
        sum_y += vy
        accumulated_some = True
    xbar = sum_x / n
    ybar = sum_y / n

    # second pass: centred sums of squares and cross-products
    sxx = 0.0
    sxy = 0.0
    for vx, vy in scan.numeric_pairs():
        dx = vx - xbar
        sxx += dx * dx
        sxy += dx * (vy - ybar)

    slope = sxy / sxx if sxx != 0 else math.nan
    intercept = ybar - slope * xbar
    return slope, intercept, accumulated_some


def evaluate_regression(
    kind: RegressionKind,
    x: ValueSource,
    y: ValueSource,
) -> RegressionResult:
    """Compute the *kind* coefficient of the least-squares line through (x, y)."""
    size = x.size
    if size == 0 or y.size != size:
        logger.debug("%s: shape mismatch (x=%d, y=%d)", kind.value, size, y.size)
        return RegressionResult.failure(ExcelError.NA, ErrorCategory.NOT_AVAILABLE)

    scan = _PairScan(x, y)
    slope, intercept, accumulated_some = _coefficients(scan)

    if scan.first_x_error is not None:
        return RegressionResult.failure(scan.first_x_error, ErrorCategory.PROPAGATED_INPUT)
    if scan.first_y_error is not None:
        return RegressionResult.failure(scan.first_y_error, ErrorCategory.PROPAGATED_INPUT)
    if not accumulated_some:
        logger.debug("%s: no numeric pairs among %d values", kind.value, size)
        return RegressionResult.failure(ExcelError.DIV0, ErrorCategory.DIVISION_BY_ZERO)

    result = intercept if kind is RegressionKind.INTERCEPT else slope
    if not math.isfinite(result):
        logger.debug("%s: non-finite result %r", kind.value, result)
        return RegressionResult.failure(ExcelError.NUM, ErrorCategory.INVALID_NUMERIC_RESULT)
    return RegressionResult.success(result)


def evaluate(kind: RegressionKind, arg0: Any, arg1: Any) -> RegressionResult:
    """Evaluate SLOPE/INTERCEPT on two resolved formula arguments.

    *arg0* holds the x values and *arg1* the y values.  Each may be a
    literal, an :class:`ExcelError`, a single-cell reference, a range or an
    inline array.
    """
    x = value_source(arg0)
    y = value_source(arg1)
    err = first_error(x, y)
    if err is not None:
        return RegressionResult.failure(err, ErrorCategory.PROPAGATED_INPUT)
    return evaluate_regression(kind, x, y)


def compute_slope(arg0: Any, arg1: Any) -> RegressionResult:
    return evaluate(RegressionKind.SLOPE, arg0, arg1)


def compute_intercept(arg0: Any, arg1: Any) -> RegressionResult:
    return evaluate(RegressionKind.INTERCEPT, arg0, arg1)
