from __future__ import annotations

import logging
import sys
from bisect import bisect_left
from typing import Dict, List, Optional, TextIO

from linebasic.errors import BasicError, BasicRuntimeError, DuplicateLineError, LineNotFoundError, StepLimitError
from linebasic.instructions import Instruction
from linebasic.values import Value

log = logging.getLogger(__name__)


class Interpreter:
    """
    Program store, line index, program counter and variables for one run.
    Instructions receive the interpreter itself when they execute.
    """

    def __init__(self, out: Optional[TextIO] = None, *, allow_redefinition: bool = True):
        self.variables: Dict[str, Value] = {}
        self.instructions: Dict[int, Instruction] = {}
        self.out = out if out is not None else sys.stdout
        self.allow_redefinition = allow_redefinition
        self.pc = 0
        self._index: Optional[List[int]] = None

    # ----- program store -----

    def insert(self, line_number: int, instruction: Instruction) -> None:
        if self._index is not None:
            raise BasicError(f"cannot insert line {line_number}: the line index is already built")
        if not self.allow_redefinition and line_number in self.instructions:
            raise DuplicateLineError(f"line {line_number} is already defined", line_number=line_number)
        self.instructions[line_number] = instruction

    # ----- line index -----

    @property
    def index_built(self) -> bool:
        return self._index is not None

    @property
    def line_index(self) -> List[int]:
        self.build_index()
        return list(self._index)

    def build_index(self) -> None:
        if self._index is not None:
            return
        index = sorted(self.instructions)
        for prev, cur in zip(index, index[1:]):
            if prev == cur:
                raise DuplicateLineError(f"duplicate linenumber {cur} found", line_number=cur)
        self._index = index
        self.pc = 0
        log.debug("line index built: %d lines", len(index))

    def set_pc(self, line_number: int) -> None:
        self.build_index()
        i = bisect_left(self._index, line_number)
        if i == len(self._index) or self._index[i] != line_number:
            raise LineNotFoundError(line_number)
        log.debug("jump to line %d (pc=%d)", line_number, i)
        self.pc = i

    # ----- executor -----

    def run(self, max_steps: Optional[int] = None) -> None:
        self.build_index()
        steps = 0
        while self.pc < len(self._index):
            line_number = self._index[self.pc]
            if max_steps is not None and steps >= max_steps:
                raise StepLimitError(max_steps).at_line(line_number)
            self.pc += 1
            instruction = self.instructions[line_number]
            try:
                instruction.execute(self)
            except BasicRuntimeError as err:
                err.at_line(line_number)
                raise
            steps += 1
        log.debug("run finished after %d steps", steps)

    # ----- diagnostics -----

    def dump(self, out: Optional[TextIO] = None) -> None:
        out = out if out is not None else self.out
        out.write("Instructions:\n")
        self.build_index()
        if self._index:
            width = len(str(self._index[-1]))
            for line_number in self._index:
                out.write(f"{line_number:<{width}} {self.instructions[line_number].render()}\n")

        names = sorted(self.variables)
        width = max((len(name) for name in names), default=0)
        out.write("Variables:\n")
        for name in names:
            out.write(f"{name:>{width}} : {self.variables[name].render()}\n")
        out.write("done\n")
