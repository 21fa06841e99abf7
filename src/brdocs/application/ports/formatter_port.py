from typing import Protocol


class FormatterPort(Protocol):
    def format(self, value: str | None) -> str: ...
