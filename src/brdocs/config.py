from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


def _optional_int(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("BRDOCS_LOG_LEVEL", "WARNING")
    random_seed: int | None = _optional_int(os.getenv("BRDOCS_RANDOM_SEED"))
    default_cnpj_type: str = os.getenv("BRDOCS_DEFAULT_CNPJ_TYPE", "NUMERIC")


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def mask(value: str) -> str:
    """Hide all but the last two characters of an identifier before logging it."""
    return "*" * max(len(value) - 2, 0) + value[-2:]
