from __future__ import annotations

import logging

from brdocs.application.dtos.generate_request_dto import GenerateRequestDTO
from brdocs.application.ports.formatter_port import FormatterPort
from brdocs.application.ports.random_source_port import RandomSourcePort
from brdocs.domain.services import cpf_check_digits
from brdocs.domain.services.digit_codec import digits_to_str, is_repeated

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class GenerateCpfUseCase:
    """Builds synthetic, checksum-valid CPFs for test data. Not real identifiers."""

    def __init__(self, random_source: RandomSourcePort, formatter: FormatterPort) -> None:
        self.random_source = random_source
        self.formatter = formatter

    def _draw_base(self) -> list[int]:
        return [int(self.random_source.choice(DIGITS)) for _ in range(cpf_check_digits.BASE_LENGTH)]

    def execute(self, req: GenerateRequestDTO | None = None) -> str:
        req = req or GenerateRequestDTO()
        while True:
            base = self._draw_base()
            value = digits_to_str(base) + digits_to_str(cpf_check_digits.calculate_check_digits(base))
            # a repeated base yields a repeated CPF, which validation rejects
            if not is_repeated(value):
                break
            logger.debug("Discarding repeated-digit CPF draw")
        return self.formatter.format(value) if req.formatted else value
