from __future__ import annotations

from linebasic.errors import (
    BasicError,
    BasicRuntimeError,
    ConfigError,
    DuplicateLineError,
    LineNotFoundError,
    ParseError,
    StepLimitError,
    UnknownVariableError,
)
from linebasic.instructions import GotoInstruction, LetInstruction, PrintInstruction
from linebasic.interpreter import Interpreter
from linebasic.parser import load_program, parse_line, parse_program
from linebasic.values import Reference, Value

__all__ = [
    "BasicError",
    "BasicRuntimeError",
    "ConfigError",
    "DuplicateLineError",
    "GotoInstruction",
    "Interpreter",
    "LetInstruction",
    "LineNotFoundError",
    "ParseError",
    "PrintInstruction",
    "Reference",
    "StepLimitError",
    "UnknownVariableError",
    "Value",
    "load_program",
    "parse_line",
    "parse_program",
]
