"""
callc – compiler for .call contract-call scripts.

Public API re-exports:

  from callc.compiler import (CompilerContext, CompileResult, compile_source,
                              try_compile, compile_file, output_path_for)
  from callc.parser   import Instruction, LineKind, ParsedLine, parse_line, parse_source
  from callc.selector import canonical_signature, keccak256, function_selector
  from callc.abi      import PLACEHOLDER_WORD, SUPPORTED_TYPES, encode_word, encode_arguments
  from callc.bytecode import OP_CALL, PADDING_BYTE, CallRecord, encode_call_record, iter_records
  from callc.errors   import ErrorKind, CompileError, ...
"""

from .compiler import (
    CompilerContext,
    CompileResult,
    compile_source,
    try_compile,
    compile_file,
    output_path_for,
)
from .parser   import Instruction, LineKind, ParsedLine, parse_line, parse_source
from .selector import canonical_signature, keccak256, function_selector
from .abi      import PLACEHOLDER_WORD, SUPPORTED_TYPES, encode_word, encode_arguments
from .bytecode import OP_CALL, PADDING_BYTE, CallRecord, encode_call_record, iter_records
from .errors   import (
    ErrorKind,
    CompileError,
    InvalidSyntaxError,
    InvalidAddressError,
    InvalidFunctionSignatureError,
    ArgumentCountMismatchError,
    UnsupportedTypeError,
    NumericLiteralError,
    InvalidBytesError,
)

__all__ = [
    "CompilerContext", "CompileResult",
    "compile_source", "try_compile", "compile_file", "output_path_for",
    "Instruction", "LineKind", "ParsedLine", "parse_line", "parse_source",
    "canonical_signature", "keccak256", "function_selector",
    "PLACEHOLDER_WORD", "SUPPORTED_TYPES", "encode_word", "encode_arguments",
    "OP_CALL", "PADDING_BYTE", "CallRecord", "encode_call_record", "iter_records",
    "ErrorKind",
    "CompileError",
    "InvalidSyntaxError",
    "InvalidAddressError",
    "InvalidFunctionSignatureError",
    "ArgumentCountMismatchError",
    "UnsupportedTypeError",
    "NumericLiteralError",
    "InvalidBytesError",
]
