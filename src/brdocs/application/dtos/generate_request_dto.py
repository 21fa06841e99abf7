from __future__ import annotations

from dataclasses import dataclass

from brdocs.domain.value_objects.cnpj_type import CnpjType


@dataclass(frozen=True)
class GenerateRequestDTO:
    formatted: bool = False
    type: CnpjType = CnpjType.NUMERIC  # ignored for CPF
