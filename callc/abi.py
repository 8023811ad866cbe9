"""
abi.py – Minimal ABI argument encoder.

Each argument becomes one 32-byte word, chosen by its declared type:

  address    right-aligned 20-byte value, zero-filled on the left
  uint256    big-endian unsigned integer (``uint`` is an alias)
  bytes32    left-aligned hex value, zero-filled on the right

The token ``$`` always encodes to the placeholder word (32 × 0xFF),
whatever the declared type.  It marks a value the interpreter fills in
from the result of a previous call.
"""

from __future__ import annotations

from .errors import (
    ArgumentCountMismatchError,
    InvalidAddressError,
    InvalidBytesError,
    NumericLiteralError,
    UnsupportedTypeError,
)
from .parser import ADDRESS_SIZE, is_hex


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

WORD_SIZE = 32

PLACEHOLDER = '$'
PLACEHOLDER_WORD = b'\xff' * WORD_SIZE

SUPPORTED_TYPES = frozenset({'address', 'uint256', 'uint', 'bytes32'})

_UINT_LIMIT = 1 << (WORD_SIZE * 8)
_DEC_DIGITS = frozenset('0123456789')

# Longest digit strings (leading zeros stripped) that can still fit in a word.
_MAX_DIGITS = {10: len(str(_UINT_LIMIT - 1)), 16: WORD_SIZE * 2}


def _strip_0x(token: str) -> str:
    return token[2:] if token.startswith('0x') else token


# ---------------------------------------------------------------------------
# Per-type encoders
# ---------------------------------------------------------------------------

def _encode_address(token: str) -> bytes:
    digits = _strip_0x(token)
    if not digits or len(digits) > ADDRESS_SIZE * 2 or not is_hex(digits):
        raise InvalidAddressError(f"Invalid address argument: {token}")
    return bytes.fromhex(digits.lower().rjust(WORD_SIZE * 2, '0'))


def parse_uint(token: str) -> int:
    """Parse a decimal or 0x-prefixed hex literal into a uint256 value."""
    if token[:2] in ('0x', '0X'):
        digits = token[2:]
        valid = bool(digits) and is_hex(digits)
        base = 16
    else:
        digits = token
        valid = bool(digits) and all(ch in _DEC_DIGITS for ch in digits)
        base = 10
    if not valid:
        raise NumericLiteralError(f"Invalid numeric literal: {token}")
    significant = digits.lstrip('0') or '0'
    if len(significant) > _MAX_DIGITS[base]:
        raise NumericLiteralError(f"Numeric literal out of uint256 range: {token}")
    value = int(significant, base)
    if value >= _UINT_LIMIT:
        raise NumericLiteralError(f"Numeric literal out of uint256 range: {token}")
    return value


def _encode_uint(token: str) -> bytes:
    return parse_uint(token).to_bytes(WORD_SIZE, 'big')


def _encode_bytes32(token: str) -> bytes:
    digits = _strip_0x(token)
    if len(digits) > WORD_SIZE * 2 or not is_hex(digits):
        raise InvalidBytesError(f"Invalid bytes32 argument: {token}")
    return bytes.fromhex(digits.lower().ljust(WORD_SIZE * 2, '0'))


_ENCODERS = {
    'address': _encode_address,
    'uint256': _encode_uint,
    'uint':    _encode_uint,
    'bytes32': _encode_bytes32,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def encode_word(type_name: str, token: str) -> bytes:
    """Encode a single argument *token* of *type_name* into a 32-byte word."""
    encoder = _ENCODERS.get(type_name)
    if encoder is None:
        raise UnsupportedTypeError(type_name)
    if token == PLACEHOLDER:
        return PLACEHOLDER_WORD
    return encoder(token)


def encode_arguments(selector: bytes, types: list[str], args: list[str]) -> bytes:
    """Encode *args* against *types* and return the concatenated words.

    *selector* is not part of the result; the caller prefixes it.
    """
    if len(args) != len(types):
        raise ArgumentCountMismatchError(len(types), len(args))
    for type_name in types:
        if type_name not in SUPPORTED_TYPES:
            raise UnsupportedTypeError(type_name)
    return b''.join(encode_word(t, a) for t, a in zip(types, args))
