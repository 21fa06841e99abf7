"""CNPJ entry points for both the numeric and the alphanumeric variant."""
from __future__ import annotations

from brdocs.application.dtos.generate_request_dto import GenerateRequestDTO
from brdocs.application.dtos.validation_result_dto import ValidationResult
from brdocs.application.use_cases.generate_cnpj import GenerateCnpjUseCase
from brdocs.application.use_cases.validate_cnpj import ValidateCnpjUseCase
from brdocs.config import settings
from brdocs.domain.value_objects.cnpj import Cnpj
from brdocs.domain.value_objects.cnpj_type import CnpjType
from brdocs.infrastructure.adapters.random.random_source import SystemRandomSource
from brdocs.infrastructure.adapters.text.cnpj_classifier import CnpjClassifier
from brdocs.infrastructure.adapters.text.cnpj_normalizer import CnpjNormalizer
from brdocs.infrastructure.adapters.text.formatters import CnpjFormatter

_normalizer = CnpjNormalizer()
_classifier = CnpjClassifier()
_formatter = CnpjFormatter(_normalizer)
_validator = ValidateCnpjUseCase(normalizer=_normalizer, classifier=_classifier)
_generator = GenerateCnpjUseCase(random_source=SystemRandomSource(settings.random_seed), formatter=_formatter)


def generate(type: CnpjType = CnpjType.NUMERIC, formatted: bool = False) -> str:
    """Random checksum-valid CNPJ of the given variant, for test data only."""
    return _generator.execute(GenerateRequestDTO(formatted=formatted, type=type))


def is_valid(raw: str | None, type: CnpjType | None = None) -> bool:
    return _validator.execute(raw, type).is_valid


def validate(raw: str | None, type: CnpjType | None = None) -> ValidationResult:
    return _validator.execute(raw, type)


def parse(raw: str | None) -> Cnpj:
    return _validator.parse(raw)


def classify(raw: str | None) -> CnpjType:
    return _classifier.classify(raw)


def clear(raw: str | None) -> str:
    return _normalizer.clear(raw)


def normalize(raw: str | None) -> str:
    return _normalizer.normalize(raw)


def format(raw: str | None) -> str:
    return _formatter.format(raw)
