from __future__ import annotations

import logging

from brdocs.application.dtos.generate_request_dto import GenerateRequestDTO
from brdocs.application.ports.formatter_port import FormatterPort
from brdocs.application.ports.random_source_port import RandomSourcePort
from brdocs.domain.services import cnpj_check_digits
from brdocs.domain.services.digit_codec import is_repeated
from brdocs.domain.value_objects.cnpj_type import CnpjType

logger = logging.getLogger(__name__)


class GenerateCnpjUseCase:
    """Builds synthetic, checksum-valid CNPJs of either variant for test data."""

    def __init__(self, random_source: RandomSourcePort, formatter: FormatterPort) -> None:
        self.random_source = random_source
        self.formatter = formatter

    def _draw_base(self, type: CnpjType) -> str:
        return "".join(
            self.random_source.choice(type.alphabet) for _ in range(cnpj_check_digits.BASE_LENGTH)
        )

    def execute(self, req: GenerateRequestDTO | None = None) -> str:
        req = req or GenerateRequestDTO()
        while True:
            base = self._draw_base(req.type)
            value = base + cnpj_check_digits.calculate_check_digits(base, req.type)
            # an all-digit draw would classify as NUMERIC
            if not is_repeated(value) and CnpjType.detect_from(value) is req.type:
                break
            logger.debug("Discarding %s CNPJ draw that would not classify back", req.type.name)
        return self.formatter.format(value) if req.formatted else value
