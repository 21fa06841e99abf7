"""CPF entry points.

Collaborators are stateless and built once at import time, so these functions
can be shared freely between threads.
"""
from __future__ import annotations

from brdocs.application.dtos.generate_request_dto import GenerateRequestDTO
from brdocs.application.dtos.validation_result_dto import ValidationResult
from brdocs.application.use_cases.generate_cpf import GenerateCpfUseCase
from brdocs.application.use_cases.validate_cpf import ValidateCpfUseCase
from brdocs.config import settings
from brdocs.domain.value_objects.cpf import Cpf
from brdocs.infrastructure.adapters.random.random_source import SystemRandomSource
from brdocs.infrastructure.adapters.text.cpf_normalizer import CpfNormalizer
from brdocs.infrastructure.adapters.text.formatters import CpfFormatter

_normalizer = CpfNormalizer()
_formatter = CpfFormatter(_normalizer)
_validator = ValidateCpfUseCase(normalizer=_normalizer)
_generator = GenerateCpfUseCase(random_source=SystemRandomSource(settings.random_seed), formatter=_formatter)


def generate(formatted: bool = False) -> str:
    """Random checksum-valid CPF for test data. It does not identify anyone."""
    return _generator.execute(GenerateRequestDTO(formatted=formatted))


def is_valid(raw: str | None) -> bool:
    return _validator.execute(raw).is_valid


def validate(raw: str | None) -> ValidationResult:
    return _validator.execute(raw)


def parse(raw: str | None) -> Cpf:
    return _validator.parse(raw)


def clear(raw: str | None) -> str:
    return _normalizer.clear(raw)


def normalize(raw: str | None) -> str:
    return _normalizer.normalize(raw)


def format(raw: str | None) -> str:
    return _formatter.format(raw)
