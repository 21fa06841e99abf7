from __future__ import annotations

import re

from brdocs.application.ports.normalizer_port import NormalizerPort
from brdocs.domain.errors import StructuralInvalidError, require_non_blank
from brdocs.domain.value_objects.cnpj import LENGTH

_NOT_CNPJ_CHAR = re.compile(r"[^a-zA-Z0-9]")


class CnpjNormalizer(NormalizerPort):
    """Turns '12.abc.345/01de-35' style input into '12ABC34501DE35'."""

    def clear(self, value: str | None) -> str:
        # keeps the original case; only normalize() upper-cases
        return _NOT_CNPJ_CHAR.sub("", require_non_blank(value, "The CNPJ must not be null or blank"))

    def normalize(self, value: str | None) -> str:
        cleared = self.clear(value).upper()
        if len(cleared) != LENGTH:
            raise StructuralInvalidError(f"The CNPJ must be {LENGTH} characters long")
        return cleared
