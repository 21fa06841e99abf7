from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INPUT_MISSING = "INPUT_MISSING"
    STRUCTURAL_INVALID = "STRUCTURAL_INVALID"
    CHECK_DIGIT_MISMATCH = "CHECK_DIGIT_MISMATCH"
    BASE_MALFORMED = "BASE_MALFORMED"


class DocumentError(Exception):
    """Root of every error raised by brdocs."""

    kind: ErrorKind


class InputMissingError(DocumentError, ValueError):
    """None or blank input. Caller-contract violation, never caught internally."""

    kind = ErrorKind.INPUT_MISSING


class InvalidDocumentError(DocumentError):
    kind = ErrorKind.STRUCTURAL_INVALID


class StructuralInvalidError(InvalidDocumentError):
    kind = ErrorKind.STRUCTURAL_INVALID


class UnrecognizedCnpjTypeError(StructuralInvalidError):
    pass


class CheckDigitMismatchError(InvalidDocumentError):
    kind = ErrorKind.CHECK_DIGIT_MISMATCH


class BaseMalformedError(DocumentError):
    """A check-digit engine received a base that breaks its contract."""

    kind = ErrorKind.BASE_MALFORMED


_INVALID_BY_KIND: dict[ErrorKind, type[InvalidDocumentError]] = {
    ErrorKind.STRUCTURAL_INVALID: StructuralInvalidError,
    ErrorKind.CHECK_DIGIT_MISMATCH: CheckDigitMismatchError,
}


def invalid_error_for(kind: ErrorKind) -> type[InvalidDocumentError]:
    return _INVALID_BY_KIND[kind]


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def require_non_blank(value: str | None, message: str) -> str:
    if is_blank(value):
        raise InputMissingError(message)
    return value  # type: ignore[return-value]
