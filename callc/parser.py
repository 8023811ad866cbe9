"""
parser.py – Line parser for .call source files.

Each physical line is classified as blank, comment or instruction.
Instruction lines have the shape::

    [label =] 0x<40 hex digits> name(type,type,...) arg arg ...

Entry points: ``parse_line(line, lineno)`` and ``parse_source(text)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from .errors import (
    InvalidAddressError,
    InvalidFunctionSignatureError,
    InvalidSyntaxError,
)


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------

ADDRESS_SIZE = 20

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    INSTRUCTION = "instruction"


@dataclass
class Instruction:
    """One parsed call instruction."""
    label: str
    address: bytes                  # 20 raw bytes
    function_name: str
    param_types: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)


@dataclass
class ParsedLine:
    lineno: int                     # 1-based
    kind: LineKind
    instruction: Optional[Instruction] = None


# ---------------------------------------------------------------------------
# Character helpers
# ---------------------------------------------------------------------------

def _is_ident_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == '_')


def is_hex(text: str) -> bool:
    """Return True if every character of *text* is an ASCII hex digit."""
    return all(ch in _HEX_DIGITS for ch in text)


class _LineScan:
    """Character-level scanner over a single trimmed source line."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.end = len(text)

    def eof(self) -> bool:
        return self.pos >= self.end

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < self.end else ''

    def skip_ws(self) -> None:
        while self.pos < self.end and self.text[self.pos].isspace():
            self.pos += 1

    def read_ident(self) -> str:
        """Read a run of identifier characters; may return ''."""
        start = self.pos
        while self.pos < self.end and _is_ident_char(self.text[self.pos]):
            self.pos += 1
        return self.text[start: self.pos]

    def rest(self) -> str:
        return self.text[self.pos:]


# ---------------------------------------------------------------------------
# Field recognisers
# ---------------------------------------------------------------------------

def _split_label(line: str) -> tuple[Optional[str], str]:
    """Split ``label = rest`` into (label, rest); (None, line) if no label."""
    scan = _LineScan(line)
    name = scan.read_ident()
    if not name:
        return None, line
    scan.skip_ws()
    if scan.peek() != '=':
        return None, line
    scan.pos += 1
    scan.skip_ws()
    if scan.eof():
        return None, line
    return name, scan.rest()


def _parse_address(token: str, lineno: int) -> bytes:
    digits = token[2:]
    if not (token.startswith('0x') and len(digits) == ADDRESS_SIZE * 2
            and is_hex(digits)):
        raise InvalidAddressError(f"Invalid address: {token}", lineno)
    return bytes.fromhex(digits)


def _parse_signature(token: str, lineno: int) -> tuple[str, list[str]]:
    """Split ``name(t1,t2)`` into the name and the trimmed type list."""
    scan = _LineScan(token)
    name = scan.read_ident()
    if not name or scan.peek() != '(' or not token.endswith(')'):
        raise InvalidFunctionSignatureError(
            f"Invalid function signature: {token}", lineno)
    inner = token[scan.pos + 1: -1]
    if '(' in inner or ')' in inner:
        raise InvalidFunctionSignatureError(
            f"Invalid function signature: {token}", lineno)
    if not inner:
        return name, []
    return name, [t.strip() for t in inner.split(',')]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_line(line: str, lineno: int) -> Instruction:
    """Parse one non-blank, non-comment line into an Instruction.

    *line* should already be trimmed.  Raises InvalidSyntaxError,
    InvalidAddressError or InvalidFunctionSignatureError, each carrying
    *lineno*.
    """
    label, rest = _split_label(line)

    parts = rest.split()
    if len(parts) < 2:
        raise InvalidSyntaxError(f"Invalid syntax: {line}", lineno)

    address = _parse_address(parts[0], lineno)
    name, types = _parse_signature(parts[1], lineno)

    return Instruction(
        label=label if label is not None else name,
        address=address,
        function_name=name,
        param_types=types,
        args=parts[2:],
    )


def classify(line: str) -> LineKind:
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith('#'):
        return LineKind.COMMENT
    return LineKind.INSTRUCTION


def parse_source(text: str) -> Iterator[ParsedLine]:
    """Yield one ParsedLine per physical line of *text*, in order.

    Parsing is lazy: an error on line N is raised only once lines
    1..N-1 have been yielded.
    """
    for idx, raw in enumerate(text.split('\n')):
        lineno = idx + 1
        kind = classify(raw)
        if kind is LineKind.INSTRUCTION:
            yield ParsedLine(lineno, kind, parse_line(raw.strip(), lineno))
        else:
            yield ParsedLine(lineno, kind)
