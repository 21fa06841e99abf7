from __future__ import annotations

import re
from enum import Enum

_DIGITS = "0123456789"
_UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class CnpjType(Enum):
    """Structural variant of a CNPJ.

    Declaration order is the classification order: NUMERIC is a strict subset of
    ALPHANUMERIC, so it must be tried first.
    """

    NUMERIC = (
        r"[0-9]{2}\.[0-9]{3}\.[0-9]{3}/[0-9]{4}-[0-9]{2}",
        r"[0-9]{14}",
        _DIGITS,
    )
    ALPHANUMERIC = (
        r"[A-Z0-9]{2}\.[A-Z0-9]{3}\.[A-Z0-9]{3}/[A-Z0-9]{4}-[0-9]{2}",
        r"[A-Z0-9]{12}[0-9]{2}",
        _DIGITS + _UPPERCASE,
    )

    def __init__(self, formatted: str, unformatted: str, alphabet: str) -> None:
        self.formatted_pattern = re.compile(formatted)
        self.unformatted_pattern = re.compile(unformatted)
        self.alphabet = alphabet

    def matches(self, value: str | None) -> bool:
        if value is None:
            return False
        return bool(self.formatted_pattern.fullmatch(value) or self.unformatted_pattern.fullmatch(value))

    @classmethod
    def detect_from(cls, value: str | None) -> CnpjType | None:
        for member in cls:
            if member.matches(value):
                return member
        return None

    @classmethod
    def from_name(cls, name: str) -> CnpjType:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(m.name for m in cls)
            raise ValueError(f"Unknown CNPJ type '{name}'. Valid types: {valid}") from None
