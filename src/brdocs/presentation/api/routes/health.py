from __future__ import annotations

from fastapi import APIRouter

from brdocs import cnpj, cpf

router = APIRouter(tags=["health"])

# known-good literals; a failing engine reports "degraded"
_SELF_CHECK = {
    "cpf": lambda: cpf.is_valid("01234567890"),
    "cnpj_numeric": lambda: cnpj.is_valid("00000000000191"),
    "cnpj_alphanumeric": lambda: cnpj.is_valid("12ABC34501DE35"),
}


@router.get("/health")
def health() -> dict[str, object]:  # type: ignore[misc]
    checks = {name: check() for name, check in _SELF_CHECK.items()}
    return {"status": "ok" if all(checks.values()) else "degraded", "service": "brdocs", "checks": checks}
