from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from brdocs import cnpj, cpf
from brdocs.config import settings
from brdocs.domain.errors import DocumentError, InputMissingError
from brdocs.domain.value_objects.cnpj_type import CnpjType
from brdocs.presentation.api.metrics import generations_total, validations_total

router = APIRouter(prefix="/v1/documents", tags=["documents"])

_MODULES = {"cpf": cpf, "cnpj": cnpj}


def _cnpj_type(name: object) -> CnpjType | None:
    if name is None or name == "":
        return None
    if not isinstance(name, str):
        raise HTTPException(status_code=422, detail="'type' must be a string")
    try:
        return CnpjType.from_name(name)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _value(body: dict[str, Any]) -> str:
    value = body.get("value")
    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail="'value' must be a string")
    return value


@router.post("/cpf/validate")
def validate_cpf(body: dict[str, Any]):  # type: ignore[misc]
    try:
        result = cpf.validate(_value(body))
    except InputMissingError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    validations_total.labels(kind="cpf", outcome=result.status).inc()
    return result.to_dict()


@router.post("/cnpj/validate")
def validate_cnpj(body: dict[str, Any]):  # type: ignore[misc]
    type_ = _cnpj_type(body.get("type"))
    try:
        result = cnpj.validate(_value(body), type_)
    except InputMissingError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    validations_total.labels(kind="cnpj", outcome=result.status).inc()
    return result.to_dict()


@router.get("/cpf/generate")
def generate_cpf(formatted: bool = False):  # type: ignore[misc]
    generations_total.labels(kind="cpf").inc()
    return {"value": cpf.generate(formatted=formatted), "synthetic": True}


@router.get("/cnpj/generate")
def generate_cnpj(type: str | None = None, formatted: bool = False):  # type: ignore[misc]
    type_ = _cnpj_type(type or settings.default_cnpj_type)
    generations_total.labels(kind="cnpj").inc()
    return {"value": cnpj.generate(type_, formatted=formatted), "type": type_.name, "synthetic": True}


@router.post("/cnpj/classify")
def classify_cnpj(body: dict[str, Any]):  # type: ignore[misc]
    try:
        return {"type": cnpj.classify(_value(body)).name}
    except DocumentError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/{kind}/format")
def format_document(kind: str, body: dict[str, Any]):  # type: ignore[misc]
    module = _MODULES.get(kind)
    if module is None:
        raise HTTPException(status_code=404, detail=f"Unknown document kind '{kind}'")
    try:
        return {"value": module.format(_value(body))}
    except DocumentError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
