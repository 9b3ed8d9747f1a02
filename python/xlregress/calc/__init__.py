"""xlregress.calc - SLOPE/INTERCEPT evaluation with spreadsheet semantics."""

from xlregress.calc._errors import ExcelError, first_error, is_error, is_number
from xlregress.calc._functions import (
    FUNCTION_WHITELIST,
    FunctionRegistry,
    LinearRegressionFunction,
    is_supported,
)
from xlregress.calc._protocol import (
    AreaReference,
    CellReference,
    ErrorCategory,
    RegressionResult,
)
from xlregress.calc._regression import (
    RegressionKind,
    compute_intercept,
    compute_slope,
    evaluate,
    evaluate_regression,
)
from xlregress.calc._sheet import Sheet, SheetArea, SheetCellRef
from xlregress.calc._values import (
    AreaSource,
    RangeValue,
    ReferenceSource,
    ScalarSource,
    ValueSource,
    value_source,
)

__all__ = [
    "AreaReference",
    "AreaSource",
    "CellReference",
    "ErrorCategory",
    "ExcelError",
    "FUNCTION_WHITELIST",
    "FunctionRegistry",
    "LinearRegressionFunction",
    "RangeValue",
    "ReferenceSource",
    "RegressionKind",
    "RegressionResult",
    "ScalarSource",
    "Sheet",
    "SheetArea",
    "SheetCellRef",
    "ValueSource",
    "compute_intercept",
    "compute_slope",
    "evaluate",
    "evaluate_regression",
    "first_error",
    "is_error",
    "is_number",
    "is_supported",
    "value_source",
]
