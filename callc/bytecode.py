"""
bytecode.py – Call bytecode record layout, encoding and reading.

Stream layout
-------------
The output is a flat concatenation of records:

  padding   1 byte   0xff                  (one per blank source line)
  call      1 byte   0x01                  opcode
           20 bytes  target address
            4 bytes  payload length, uint32 big-endian
            N bytes  payload = selector (4 bytes) ++ 32-byte argument words
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterator, Optional

from .abi import WORD_SIZE
from .parser import ADDRESS_SIZE
from .selector import SELECTOR_SIZE


# ---------------------------------------------------------------------------
# Opcode / layout constants
# ---------------------------------------------------------------------------

OP_CALL      = 0x01
PADDING_BYTE = 0xff
PADDING      = bytes([PADDING_BYTE])

_LENGTH      = struct.Struct(">I")
HEADER_SIZE  = 1 + ADDRESS_SIZE + _LENGTH.size   # 25 bytes before the payload


# ---------------------------------------------------------------------------
# Data structure
# ---------------------------------------------------------------------------

@dataclass
class CallRecord:
    address: bytes
    payload: bytes

    @property
    def selector(self) -> bytes:
        return self.payload[:SELECTOR_SIZE]

    @property
    def words(self) -> list[bytes]:
        body = self.payload[SELECTOR_SIZE:]
        return [body[i: i + WORD_SIZE] for i in range(0, len(body), WORD_SIZE)]


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def encode_call_record(address: bytes, payload: bytes) -> bytes:
    """Return the binary CALL record for *address* and *payload*."""
    if len(address) != ADDRESS_SIZE:
        raise ValueError(f"address must be {ADDRESS_SIZE} bytes, got {len(address)}")
    if len(payload) > 0xffffffff:
        raise ValueError(f"payload too large: {len(payload)} bytes")
    return bytes([OP_CALL]) + address + _LENGTH.pack(len(payload)) + payload


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def iter_records(data: bytes | bytearray) -> Iterator[Optional[CallRecord]]:
    """Walk a compiled stream, yielding a CallRecord per call and None per
    padding byte.

    Raises ValueError on an unknown opcode or a truncated record.
    """
    pos = 0
    end = len(data)
    while pos < end:
        op = data[pos]
        if op == PADDING_BYTE:
            yield None
            pos += 1
            continue
        if op != OP_CALL:
            raise ValueError(f"unknown opcode 0x{op:02x} at offset {pos}")
        if pos + HEADER_SIZE > end:
            raise ValueError(f"truncated record header at offset {pos}")
        address = bytes(data[pos + 1: pos + 1 + ADDRESS_SIZE])
        (length,) = _LENGTH.unpack_from(data, pos + 1 + ADDRESS_SIZE)
        start = pos + HEADER_SIZE
        if start + length > end:
            raise ValueError(f"truncated payload at offset {start}")
        yield CallRecord(address, bytes(data[start: start + length]))
        pos = start + length


def from_hex(text: str) -> bytes:
    """Decode a ``0x``-prefixed bytecode string back into raw bytes."""
    text = text.strip()
    if text.startswith('0x'):
        text = text[2:]
    return bytes.fromhex(text)
