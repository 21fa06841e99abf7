from __future__ import annotations

import re

from brdocs.application.ports.normalizer_port import NormalizerPort
from brdocs.domain.errors import StructuralInvalidError, require_non_blank
from brdocs.domain.value_objects.cpf import LENGTH

# [^0-9] instead of \D so only ASCII digits survive
_NOT_CPF_CHAR = re.compile(r"[^0-9]")


class CpfNormalizer(NormalizerPort):
    def clear(self, value: str | None) -> str:
        return _NOT_CPF_CHAR.sub("", require_non_blank(value, "The CPF must not be null or blank"))

    def normalize(self, value: str | None) -> str:
        cleared = self.clear(value)
        if len(cleared) != LENGTH:
            raise StructuralInvalidError(f"The CPF must be {LENGTH} characters long")
        return cleared
