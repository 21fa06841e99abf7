from __future__ import annotations

import logging

from brdocs.application.dtos.validation_result_dto import ValidationResult
from brdocs.application.ports.classifier_port import ClassifierPort
from brdocs.application.ports.normalizer_port import NormalizerPort
from brdocs.config import mask
from brdocs.domain.errors import ErrorKind, require_non_blank
from brdocs.domain.services import cnpj_check_digits
from brdocs.domain.services.digit_codec import is_repeated
from brdocs.domain.value_objects.cnpj import LENGTH, Cnpj
from brdocs.domain.value_objects.cnpj_type import CnpjType

logger = logging.getLogger(__name__)

_INVALID = "The CNPJ is invalid"


class ValidateCnpjUseCase:
    """Validates numeric and alphanumeric CNPJs.

    Without an explicit type the variant is the one the classifier detects on the
    cleared value. With one, the cleared value must match that variant's pattern;
    since NUMERIC is a subset of ALPHANUMERIC an all-digit CNPJ also passes as
    ALPHANUMERIC.
    """

    def __init__(self, normalizer: NormalizerPort, classifier: ClassifierPort) -> None:
        self.normalizer = normalizer
        self.classifier = classifier

    def execute(self, raw: str | None, type: CnpjType | None = None) -> ValidationResult:
        require_non_blank(raw, "The CNPJ must not be null or blank")
        cleared = self.normalizer.clear(raw)
        detected = self.classifier.detect(cleared)
        if detected is None:
            logger.debug("CNPJ rejected: unrecognized pattern (%d chars)", len(cleared))
            return ValidationResult.invalid(ErrorKind.STRUCTURAL_INVALID, _INVALID)
        if type is not None and not type.matches(cleared):
            logger.debug("CNPJ rejected: %s is not a %s CNPJ", mask(cleared), type.name)
            return ValidationResult.invalid(ErrorKind.STRUCTURAL_INVALID, _INVALID)
        if is_repeated(cleared):
            logger.debug("CNPJ rejected: repeated character %s", mask(cleared))
            return ValidationResult.invalid(ErrorKind.STRUCTURAL_INVALID, _INVALID)

        base, supplied = cleared[: LENGTH - 2], cleared[LENGTH - 2 :]
        expected = cnpj_check_digits.calculate_check_digits(base, type or detected)
        if expected != supplied:
            logger.debug("CNPJ rejected: check digit mismatch for %s", mask(cleared))
            return ValidationResult.invalid(ErrorKind.CHECK_DIGIT_MISMATCH, _INVALID)
        return ValidationResult.valid("CNPJ")

    def parse(self, raw: str | None) -> Cnpj:
        self.execute(raw).raise_for_error()
        normalized = self.normalizer.normalize(raw)
        return Cnpj.from_normalized(normalized, self.classifier.classify(normalized))
