"""
selector.py – Function selector derivation.

A selector is the first four bytes of the Keccak-256 digest of the
canonical signature string ``name(type1,type2,...)``.
"""

from __future__ import annotations

from Crypto.Hash import keccak

SELECTOR_SIZE = 4


def canonical_signature(name: str, types: list[str]) -> str:
    return f"{name}({','.join(types)})"


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest of *data* (pre-NIST padding)."""
    return keccak.new(digest_bits=256, data=data).digest()


def function_selector(name: str, types: list[str]) -> bytes:
    """Return the 4-byte selector for *name* called with *types*."""
    signature = canonical_signature(name, types)
    return keccak256(signature.encode('utf-8'))[:SELECTOR_SIZE]
