"""
errors.py – Compile error kinds for the .call compiler.

Every failure the compiler can report is a CompileError subclass tagged
with an ErrorKind.  Parser errors always carry the 1-based source line;
encoder errors get it attached by the compiler before they propagate.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    SYNTAX = "syntax"
    INVALID_ADDRESS = "invalid-address"
    INVALID_FUNCTION_SIGNATURE = "invalid-function-signature"
    ARGUMENT_COUNT_MISMATCH = "argument-count-mismatch"
    UNSUPPORTED_TYPE = "unsupported-type"
    NUMERIC_LITERAL = "numeric-literal"
    INVALID_BYTES = "invalid-bytes"


class CompileError(ValueError):
    """Base class for all errors raised while compiling a .call source."""

    # Set by each concrete subclass.
    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, lineno: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


class InvalidSyntaxError(CompileError):
    kind = ErrorKind.SYNTAX


class InvalidAddressError(CompileError):
    kind = ErrorKind.INVALID_ADDRESS


class InvalidFunctionSignatureError(CompileError):
    kind = ErrorKind.INVALID_FUNCTION_SIGNATURE


class ArgumentCountMismatchError(CompileError):
    kind = ErrorKind.ARGUMENT_COUNT_MISMATCH

    def __init__(self, expected: int, actual: int,
                 lineno: Optional[int] = None) -> None:
        super().__init__(
            f"Argument count mismatch: expected {expected}, got {actual}",
            lineno,
        )
        self.expected = expected
        self.actual = actual


class UnsupportedTypeError(CompileError):
    kind = ErrorKind.UNSUPPORTED_TYPE

    def __init__(self, type_name: str, lineno: Optional[int] = None) -> None:
        super().__init__(f"Unsupported type: {type_name}", lineno)
        self.type_name = type_name


class NumericLiteralError(CompileError):
    kind = ErrorKind.NUMERIC_LITERAL


class InvalidBytesError(CompileError):
    kind = ErrorKind.INVALID_BYTES
