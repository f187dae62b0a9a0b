from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from linebasic.errors import ParseError
from linebasic.instructions import GotoInstruction, Instruction, LetInstruction, PrintInstruction
from linebasic.interpreter import Interpreter
from linebasic.values import Reference, Value, is_string_literal, parse_int32, unquote

log = logging.getLogger(__name__)


# ----- Grammars -----

# "<linenum> <KEYWORD><remainder>": the keyword stops at the first space or '"'
LINE_GRAMMAR = r"""
start: [LINENUM] _SEP [KEYWORD] [REMAINDER]

LINENUM: /[^ ]+/
_SEP: " "
KEYWORD: /[^ "]+/
REMAINDER: /[ "].*/s
"""

# LET argument, split at the first '='
LET_GRAMMAR = r"""
start: [NAME] "=" [RHS]

NAME: /[^=]+/
RHS: /.+/s
"""

# function call inside a PRINT list, e.g. TAB(8); anything after ')' is ignored
CALL_GRAMMAR = r"""
start: [FUNC] "(" [ARG] ")" [TAIL]

FUNC: /[^(]+/
ARG: /[^)]+/
TAIL: /.+/s
"""


@v_args(inline=True)
class LineTransformer(Transformer):
    # start: [LINENUM] _SEP [KEYWORD] [REMAINDER]
    def start(self, linenum, keyword, remainder):
        return (
            str(linenum) if linenum is not None else "",
            str(keyword) if keyword is not None else "",
            str(remainder).strip() if remainder is not None else "",
        )


@v_args(inline=True)
class LetTransformer(Transformer):
    # start: [NAME] "=" [RHS]
    def start(self, name, rhs):
        return ('LET', str(name or "").strip(), str(rhs or ""))


@v_args(inline=True)
class CallTransformer(Transformer):
    # start: [FUNC] "(" [ARG] ")" [TAIL]
    def start(self, func, arg, _tail):
        return ('CALL', str(func or ""), None if arg is None else str(arg))


_line_parser = Lark(LINE_GRAMMAR, parser="lalr", lexer="contextual", maybe_placeholders=True)
_let_parser = Lark(LET_GRAMMAR, parser="lalr", lexer="contextual", maybe_placeholders=True)
_call_parser = Lark(CALL_GRAMMAR, parser="lalr", lexer="contextual", maybe_placeholders=True)


# ----- PRINT -----

def _tab_width(segment: str) -> int:
    try:
        _, _func, arg = CallTransformer().transform(_call_parser.parse(segment))
    except UnexpectedInput:
        raise ParseError("incomplete tab command") from None
    if arg is None:
        raise ParseError("incomplete tab command")
    try:
        width = parse_int32(arg)
    except ValueError as err:
        raise ParseError("incomplete tab command") from err
    if width < 0:
        raise ParseError(f"tab width must not be negative: {width}")
    return width


def build_print(remainder: str) -> Optional[PrintInstruction]:
    remainder = remainder.strip()
    if not remainder:
        # bare PRINT: nothing to store
        return None
    no_newline = remainder.endswith(";")

    operands = []
    literal = ""
    for segment in remainder.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        if is_string_literal(segment):
            literal += unquote(segment)
        elif "(" in segment:
            if not segment.startswith("TAB("):
                raise ParseError(f"print: don't know how to handle func `{segment}`")
            literal += " " * _tab_width(segment)
        else:
            # variable reference
            if literal:
                operands.append(Value.of_str(literal))
                literal = ""
            operands.append(Reference(segment))

    if literal:
        operands.append(Value.of_str(literal))
    return PrintInstruction(tuple(operands), no_newline)


# ----- LET -----

def build_let(remainder: str) -> LetInstruction:
    # LET A=1000 / LET B$="TEXT"
    try:
        _, name, rhs = LetTransformer().transform(_let_parser.parse(remainder))
    except UnexpectedInput:
        raise ParseError("invalid let statement") from None
    if not name:
        raise ParseError("invalid let statement")
    if is_string_literal(rhs):
        return LetInstruction(name, Value.of_str(unquote(rhs)))
    try:
        n = parse_int32(rhs.strip())
    except ValueError as err:
        raise ParseError(f"let {name}: {err}") from err
    return LetInstruction(name, Value.of_int(n))


# ----- GOTO -----

def build_goto(remainder: str) -> GotoInstruction:
    try:
        return GotoInstruction(parse_int32(remainder))
    except ValueError as err:
        raise ParseError(f"goto has a bad line number `{remainder}`: {err}") from err


BUILDERS = {
    'PRINT': build_print,
    'LET': build_let,
    'GOTO': build_goto,
}


def parse_line(line: str) -> Optional[Tuple[int, Instruction]]:
    """Parse one source line into ``(line_number, instruction)``.

    Returns None for an empty line, and for a PRINT with no arguments.
    """
    if len(line) == 0:
        return None
    try:
        number_text, keyword, remainder = LineTransformer().transform(_line_parser.parse(line))
    except UnexpectedInput:
        raise ParseError("did not find a line number", source=line) from None

    try:
        line_number = parse_int32(number_text)
    except ValueError as err:
        raise ParseError(f"bad line number `{number_text}`: {err}", source=line) from err
    if line_number < 0:
        raise ParseError(f"bad line number `{number_text}`: must not be negative", source=line)

    build = BUILDERS.get(keyword)
    if build is None:
        raise ParseError(f"unknown instruction: `{keyword}` `{remainder}`", line_number=line_number, source=line)
    try:
        instruction = build(remainder)
    except ParseError as err:
        raise ParseError(err.message, line_number=line_number, source=line) from err
    if instruction is None:
        return None
    return line_number, instruction


# ----- program loading -----

def parse_program(
    source: Union[str, Iterable[str]],
    interp: Optional[Interpreter] = None,
    *,
    allow_redefinition: bool = True,
) -> Interpreter:
    if interp is None:
        interp = Interpreter(allow_redefinition=allow_redefinition)
    # only "\n" ends a line; other control characters stay inside the text
    lines = source.split("\n") if isinstance(source, str) else source
    for position, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line:
            continue
        try:
            parsed = parse_line(line)
            if parsed is None:
                continue
            line_number, instruction = parsed
            interp.insert(line_number, instruction)
        except ParseError as err:
            raise err.at_position(position)
        log.debug("line %d: %s", line_number, instruction.render())
    return interp


def load_program(path: Union[str, Path], *, allow_redefinition: bool = True) -> Interpreter:
    text = Path(path).read_text(encoding="utf-8")
    return parse_program(text, allow_redefinition=allow_redefinition)
