from __future__ import annotations

from typing import Protocol


class NormalizerPort(Protocol):
    """Strips formatting from a raw document string."""

    def clear(self, value: str | None) -> str:
        """Remove every character outside the document's alphabet. No length check."""
        ...

    def normalize(self, value: str | None) -> str:
        """Clear, case-fold where applicable and enforce the canonical length."""
        ...
