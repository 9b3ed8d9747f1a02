"""Typed spreadsheet error values and cell-value classification helpers."""

from __future__ import annotations

import numbers
from typing import Any


class ExcelError:
    """Excel error value that propagates through formula chains.

    Use ``ExcelError.of(code)`` to get a cached singleton for each error code.
    Errors compare equal to their string code (e.g., ``ExcelError.NA == "#N/A"``).
    """

    __slots__ = ("code",)
    _cache: dict[str, ExcelError] = {}

    NA: ExcelError
    VALUE: ExcelError
    REF: ExcelError
    DIV0: ExcelError
    NUM: ExcelError
    NAME: ExcelError
    NULL: ExcelError

    def __init__(self, code: str) -> None:
        self.code = code

    @classmethod
    def of(cls, code: str) -> ExcelError:
        canon = code.upper()
        if canon not in cls._cache:
            cls._cache[canon] = cls(canon)
        return cls._cache[canon]

    def __repr__(self) -> str:
        return self.code

    def __str__(self) -> str:
        return self.code

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExcelError):
            return self.code == other.code
        if isinstance(other, str):
            return self.code == other.upper()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.code)


# Singletons
ExcelError.NA = ExcelError.of("#N/A")
ExcelError.VALUE = ExcelError.of("#VALUE!")
ExcelError.REF = ExcelError.of("#REF!")
ExcelError.DIV0 = ExcelError.of("#DIV/0!")
ExcelError.NUM = ExcelError.of("#NUM!")
ExcelError.NAME = ExcelError.of("#NAME?")
ExcelError.NULL = ExcelError.of("#NULL!")


def is_error(val: Any) -> bool:
    """Return True if *val* is an ExcelError instance."""
    return isinstance(val, ExcelError)


def is_number(val: Any) -> bool:
    """Return True if *val* is a numeric cell value.

    Any real scalar counts, numpy scalars included.  Booleans are
    excluded: a TRUE/FALSE cell is not a number in statistical functions
    that take arrays.
    """
    return isinstance(val, numbers.Real) and not isinstance(val, bool)


def first_error(*values: Any) -> ExcelError | None:
    """Return the first ExcelError found in *values*, or None."""
    for v in values:
        if isinstance(v, ExcelError):
            return v
    return None
