from __future__ import annotations

from dataclasses import dataclass

from brdocs.domain.errors import ErrorKind, invalid_error_for


@dataclass(frozen=True)
class ValidationResult:
    status: str  # "VALID" | "INVALID"
    error: ErrorKind | None
    message: str

    @classmethod
    def valid(cls, document: str) -> ValidationResult:
        return cls("VALID", None, f"The {document} is valid")

    @classmethod
    def invalid(cls, kind: ErrorKind, message: str) -> ValidationResult:
        return cls("INVALID", kind, message)

    @property
    def is_valid(self) -> bool:
        return self.status == "VALID"

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise invalid_error_for(self.error)(self.message)

    def to_dict(self) -> dict[str, object]:
        return {
            "valid": self.is_valid,
            "error": self.error.value if self.error else None,
            "message": self.message,
        }
