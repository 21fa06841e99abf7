from __future__ import annotations

from brdocs.application.ports.formatter_port import FormatterPort
from brdocs.application.ports.normalizer_port import NormalizerPort
from brdocs.domain.value_objects.cnpj import Cnpj
from brdocs.domain.value_objects.cpf import Cpf


class CpfFormatter(FormatterPort):
    def __init__(self, normalizer: NormalizerPort) -> None:
        self.normalizer = normalizer

    def format(self, value: str | None) -> str:
        return Cpf.layout(self.normalizer.normalize(value))


class CnpjFormatter(FormatterPort):
    """'12ABC34501DE35' -> '12.ABC.345/01DE-35'. Letters are kept."""

    def __init__(self, normalizer: NormalizerPort) -> None:
        self.normalizer = normalizer

    def format(self, value: str | None) -> str:
        return Cnpj.layout(self.normalizer.normalize(value))
