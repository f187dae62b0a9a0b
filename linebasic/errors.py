from __future__ import annotations


class BasicError(Exception):
    pass


class ParseError(BasicError):
    def __init__(self, message: str, *, line_number: int | None = None, source: str | None = None) -> None:
        self.line_number = line_number
        self.source = source
        self.position: int | None = None
        self.message = str(message)
        super().__init__(self._format())

    def _format(self) -> str:
        prefix = ""
        if self.position is not None:
            prefix = f"input line {self.position}: "
        if self.source is not None:
            prefix += f"`{self.source}`: "
        return prefix + self.message

    def at_position(self, position: int) -> "ParseError":
        self.position = position
        self.args = (self._format(),)
        return self


class DuplicateLineError(ParseError):
    pass


class BasicRuntimeError(BasicError):
    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        self.line_number = line_number
        self.message = str(message)
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"

    def at_line(self, line_number: int) -> "BasicRuntimeError":
        # first annotation wins
        if self.line_number is None:
            self.line_number = line_number
            self.args = (self._format(),)
        return self


class UnknownVariableError(BasicRuntimeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown var: {name}")


class LineNotFoundError(BasicRuntimeError):
    def __init__(self, target: int) -> None:
        self.target = target
        super().__init__(f"did not find line number: {target}")


class ConfigError(BasicError):
    pass


class StepLimitError(BasicRuntimeError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"step limit of {limit} instructions exceeded")
