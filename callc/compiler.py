"""
compiler.py – .call source compiler.

Turns a .call source text into call bytecode plus a label table.

Entry points: ``compile_source(text)``, ``try_compile(text)`` and
``compile_file(call_path)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .abi import encode_arguments
from .bytecode import PADDING, encode_call_record
from .errors import CompileError
from .parser import Instruction, LineKind, parse_source
from .selector import function_selector


# ---------------------------------------------------------------------------
# Compiler context
# ---------------------------------------------------------------------------

class CompilerContext:
    """State for a single compile pass.

    ``records`` is the ordered list of emitted records (calls and padding).
    ``labels`` maps a label to the index of its record in ``records``.
    """

    def __init__(self) -> None:
        self.records: list[bytes] = []
        self.labels: dict[str, int] = {}

    def emit_padding(self) -> None:
        self.records.append(PADDING)

    def emit_call(self, instr: Instruction) -> None:
        selector = function_selector(instr.function_name, instr.param_types)
        words = encode_arguments(selector, instr.param_types, instr.args)
        self.records.append(encode_call_record(instr.address, selector + words))
        self.labels[instr.label] = len(self.records) - 1

    def bytecode(self) -> bytes:
        return b''.join(self.records)


@dataclass
class CompileResult:
    bytecode: bytes = b''
    labels: dict[str, int] = field(default_factory=dict)
    error: Optional[CompileError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def hex(self) -> str:
        return '0x' + self.bytecode.hex()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def compile_source(text: str) -> CompileResult:
    """Compile *text* and return the bytecode and label table.

    Raises CompileError on the first invalid line.
    """
    ctx = CompilerContext()
    for line in parse_source(text):
        if line.kind is LineKind.BLANK:
            ctx.emit_padding()
        elif line.kind is LineKind.INSTRUCTION:
            try:
                ctx.emit_call(line.instruction)
            except CompileError as exc:
                if exc.lineno is None:
                    exc.lineno = line.lineno
                raise
    return CompileResult(ctx.bytecode(), dict(ctx.labels))


def try_compile(text: str) -> CompileResult:
    """Like compile_source, but report a CompileError in the result."""
    try:
        return compile_source(text)
    except CompileError as exc:
        return CompileResult(error=exc)


def output_path_for(call_path: str | Path) -> Path:
    """Return the .calldata path that sits next to *call_path*."""
    call_path = Path(call_path)
    name = call_path.name
    if name.endswith('.call'):
        name = name[:-len('.call')]
    return call_path.with_name(name + '.calldata')


def compile_file(call_path: str | Path) -> tuple[CompileResult, Path]:
    """Compile a .call file and write ``0x<hex>`` to its .calldata sibling.

    Returns the result and the path written.  Nothing is written when
    compilation fails; the CompileError propagates.
    """
    call_path = Path(call_path)
    text = call_path.read_text(encoding='utf-8')
    result = compile_source(text)
    out_path = output_path_for(call_path)
    out_path.write_text(result.hex(), encoding='ascii')
    return result, out_path
