from __future__ import annotations

from typing import Protocol

from brdocs.domain.value_objects.cnpj_type import CnpjType


class ClassifierPort(Protocol):
    def detect(self, value: str | None) -> CnpjType | None: ...
    def classify(self, value: str | None) -> CnpjType: ...
