from typing import Optional


def line_and_column(expression: str, location: int) -> tuple[int, int]:
    line_start = expression.rfind("\n", 0, location) + 1
    return expression.count("\n", 0, location) + 1, location - line_start + 1


def error_message(expression: str, location: int, message: str) -> str:
    line_start = expression.rfind("\n", 0, location) + 1
    line_end = expression.find("\n", location)
    if line_end == -1:
        line_end = len(expression)
    line = expression[line_start:line_end].rstrip("\r")
    # keep tabs so the caret lines up under tab-indented source
    padding = "".join(
        "\t" if char == "\t" else " " for char in line[: location - line_start]
    )
    messages = [f"{line}\n", f"{padding}^ {message}\n"]
    return "".join(messages)


class LexicalError(Exception):
    def __init__(
        self,
        message: str,
        text: str,
        offset: int,
        source: Optional[str] = None,
    ) -> None:
        self.message = message
        self.text = text
        self.offset = offset
        self.source = source
        self.line: Optional[int] = None
        self.column: Optional[int] = None
        prefix = ""
        if source is not None:
            self.line, self.column = line_and_column(source, offset)
            prefix = f"line {self.line} col {self.column}: "
        super().__init__(prefix + message)

    def diagnostic(self) -> str:
        if self.source is None:
            return f"{self.message}\n"
        return error_message(self.source, self.offset, self.message)
