from __future__ import annotations

from brdocs.application.ports.classifier_port import ClassifierPort
from brdocs.domain.errors import UnrecognizedCnpjTypeError, require_non_blank
from brdocs.domain.value_objects.cnpj_type import CnpjType


class CnpjClassifier(ClassifierPort):
    """Decides NUMERIC vs ALPHANUMERIC from the shape of a cleared CNPJ.

    Tried in order: numeric formatted, numeric raw, alphanumeric formatted,
    alphanumeric raw. An all-digit value is therefore always NUMERIC.
    """

    def detect(self, value: str | None) -> CnpjType | None:
        return CnpjType.detect_from(value)

    def classify(self, value: str | None) -> CnpjType:
        require_non_blank(value, "The CNPJ must not be null or blank")
        detected = self.detect(value)
        if detected is None:
            raise UnrecognizedCnpjTypeError(
                "The CNPJ does not match any valid pattern. Make sure to use a normalized CNPJ."
            )
        return detected
