from __future__ import annotations

import random

from brdocs.application.ports.random_source_port import RandomSourcePort


class SystemRandomSource(RandomSourcePort):
    """Mersenne Twister backed source; not for anything security related.

    choice() is Python code, but each draw bottoms out in a single getrandbits
    call that runs atomically in C, so one instance can be shared between threads.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def choice(self, alphabet: str) -> str:
        if not alphabet:
            raise ValueError("The alphabet must not be empty")
        return self._random.choice(alphabet)
