from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

from linebasic.values import Reference, Value

Operand = Union[Value, Reference]


# ----- PRINT -----

@dataclass(frozen=True)
class PrintInstruction:
    operands: Tuple[Operand, ...] = field(default_factory=tuple)
    no_newline: bool = False

    def render(self) -> str:
        parts = []
        for i, op in enumerate(self.operands):
            text = op.render()
            if i == 0 and not text.startswith('"'):
                parts.append(" ")
            elif i != 0:
                parts.append(";")
            parts.append(text)
        semicolon = ";" if self.no_newline else ""
        return f"PRINT{''.join(parts)}{semicolon}"

    def execute(self, interp) -> None:
        # operands are written as they resolve; an unbound reference
        # leaves what was already written
        for op in self.operands:
            interp.out.write(op.resolve(interp))
        if not self.no_newline:
            interp.out.write("\n")


# ----- LET -----

@dataclass(frozen=True)
class LetInstruction:
    name: str
    value: Value

    def render(self) -> str:
        return f"LET {self.name}={self.value.render()}"

    def execute(self, interp) -> None:
        interp.variables[self.name] = self.value


# ----- GOTO -----

@dataclass(frozen=True)
class GotoInstruction:
    target: int

    def render(self) -> str:
        return f"GOTO {self.target}"

    def execute(self, interp) -> None:
        interp.set_pc(self.target)


Instruction = Union[PrintInstruction, LetInstruction, GotoInstruction]
