"""xlregress — spreadsheet-exact SLOPE and INTERCEPT.

Usage::

    from xlregress import Sheet, compute_slope, compute_intercept

    ws = Sheet()
    for x, y in [(1, 2), (2, 4), (3, 5), (4, 4), (5, 5)]:
        ws.append([x, y])

    xs = ws.area(1, 1, 5, 1)
    ys = ws.area(1, 2, 5, 2)
    compute_slope(xs, ys).as_cell_value()      # 0.6
    compute_intercept(xs, ys).as_cell_value()  # 2.2
"""

from xlregress.calc import (
    ErrorCategory,
    ExcelError,
    FunctionRegistry,
    RangeValue,
    RegressionKind,
    RegressionResult,
    Sheet,
    compute_intercept,
    compute_slope,
    evaluate,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorCategory",
    "ExcelError",
    "FunctionRegistry",
    "RangeValue",
    "RegressionKind",
    "RegressionResult",
    "Sheet",
    "compute_intercept",
    "compute_slope",
    "evaluate",
]
