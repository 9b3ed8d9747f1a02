"""Function whitelist, builtin regression functions and the function registry."""

from __future__ import annotations

import logging
from typing import Any, Callable

from xlregress.calc._errors import ExcelError
from xlregress.calc._regression import RegressionKind, evaluate

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Whitelist: functions the calc engine will attempt to evaluate.
# ---------------------------------------------------------------------------

FUNCTION_WHITELIST: dict[str, str] = {
    # Statistical (2)
    "INTERCEPT": "statistical",
    "SLOPE": "statistical",
}


def is_supported(func_name: str) -> bool:
    """Check if a function name is in the evaluation whitelist."""
    return func_name.upper() in FUNCTION_WHITELIST


# ---------------------------------------------------------------------------
# Builtins
# ---------------------------------------------------------------------------


class LinearRegressionFunction:
    """INTERCEPT(known_x, known_y) or SLOPE(known_x, known_y).

    Called like the other builtins, with the list of resolved arguments.
    Returns a float, or the ExcelError the formula cell would show.
    """

    __slots__ = ("kind",)

    def __init__(self, kind: RegressionKind) -> None:
        self.kind = kind

    @property
    def name(self) -> str:
        return self.kind.value

    def evaluate(self, arg0: Any, arg1: Any) -> float | ExcelError:
        return evaluate(self.kind, arg0, arg1).as_cell_value()

    def __call__(self, args: list[Any]) -> float | ExcelError:
        if len(args) != 2:
            raise ValueError(f"{self.name} requires exactly 2 arguments")
        return self.evaluate(args[0], args[1])

    def __repr__(self) -> str:
        return f"LinearRegressionFunction({self.name})"


_BUILTINS: dict[str, Callable[..., Any]] = {
    "INTERCEPT": LinearRegressionFunction(RegressionKind.INTERCEPT),
    "SLOPE": LinearRegressionFunction(RegressionKind.SLOPE),
}


class FunctionRegistry:
    """Registry of callable function implementations.

    Starts with builtins and can be extended with custom functions.
    """

    def __init__(self) -> None:
        self._functions: dict[str, Callable[..., Any]] = dict(_BUILTINS)

    def register(self, name: str, func: Callable[..., Any]) -> None:
        self._functions[name.upper()] = func

    def get(self, name: str) -> Callable[..., Any] | None:
        return self._functions.get(name.upper())

    def has(self, name: str) -> bool:
        return name.upper() in self._functions

    def call(self, name: str, args: list[Any]) -> Any:
        """Dispatch *name* with already-resolved *args*."""
        func = self.get(name)
        if func is None:
            logger.debug("Unsupported function: %s", name)
            raise KeyError(name.upper())
        return func(args)

    @property
    def supported_functions(self) -> frozenset[str]:
        return frozenset(self._functions.keys())
