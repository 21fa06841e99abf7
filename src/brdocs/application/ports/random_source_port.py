from __future__ import annotations

from typing import Protocol


class RandomSourcePort(Protocol):
    """Uniform random source. Implementations must tolerate concurrent callers."""

    def choice(self, alphabet: str) -> str: ...
