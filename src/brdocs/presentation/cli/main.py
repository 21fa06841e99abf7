from __future__ import annotations

from enum import Enum

import typer

from brdocs import cnpj, cpf
from brdocs.config import configure_logging, settings
from brdocs.domain.errors import DocumentError
from brdocs.domain.value_objects.cnpj_type import CnpjType

app = typer.Typer(help="Brazilian CPF/CNPJ toolkit")


class Kind(str, Enum):
    cpf = "cpf"
    cnpj = "cnpj"


def _cnpj_type(name: str | None) -> CnpjType:
    try:
        return CnpjType.from_name(name or settings.default_cnpj_type)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level")) -> None:
    configure_logging(log_level)


@app.command()
def generate(
    kind: Kind,
    type: str = typer.Option(None, "--type", "-t", help="NUMERIC or ALPHANUMERIC (CNPJ only)"),
    formatted: bool = typer.Option(False, "--formatted", "-f"),
    count: int = typer.Option(1, "--count", "-n", min=1),
) -> None:
    """Print synthetic identifiers. They are valid by checksum only."""
    for _ in range(count):
        if kind is Kind.cpf:
            typer.echo(cpf.generate(formatted=formatted))
        else:
            typer.echo(cnpj.generate(_cnpj_type(type), formatted=formatted))


@app.command()
def validate(
    kind: Kind,
    value: str,
    type: str = typer.Option(None, "--type", "-t", help="NUMERIC or ALPHANUMERIC (CNPJ only)"),
) -> None:
    type_ = _cnpj_type(type) if kind is Kind.cnpj and type else None
    try:
        if kind is Kind.cpf:
            result = cpf.validate(value)
        else:
            result = cnpj.validate(value, type_)
    except DocumentError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2) from e
    typer.echo(result.message)
    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command()
def format(kind: Kind, value: str) -> None:
    try:
        typer.echo(cpf.format(value) if kind is Kind.cpf else cnpj.format(value))
    except DocumentError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2) from e


@app.command()
def normalize(kind: Kind, value: str) -> None:
    try:
        typer.echo(cpf.normalize(value) if kind is Kind.cpf else cnpj.normalize(value))
    except DocumentError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2) from e


@app.command()
def classify(value: str) -> None:
    """Print NUMERIC or ALPHANUMERIC for a cleared CNPJ."""
    try:
        typer.echo(cnpj.classify(value).name)
    except DocumentError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2) from e


if __name__ == "__main__":
    app()
