import logging

import pytest

from brdocs.domain.errors import (
    CheckDigitMismatchError,
    ErrorKind,
    InputMissingError,
    StructuralInvalidError,
)
from brdocs.domain.value_objects.cnpj_type import CnpjType
from brdocs.application.use_cases.validate_cnpj import ValidateCnpjUseCase
from brdocs.application.use_cases.validate_cpf import ValidateCpfUseCase
from brdocs.infrastructure.adapters.text.cnpj_classifier import CnpjClassifier
from brdocs.infrastructure.adapters.text.cnpj_normalizer import CnpjNormalizer
from brdocs.infrastructure.adapters.text.cpf_normalizer import CpfNormalizer


@pytest.fixture
def cpf_uc():
    return ValidateCpfUseCase(normalizer=CpfNormalizer())


@pytest.fixture
def cnpj_uc():
    return ValidateCnpjUseCase(normalizer=CnpjNormalizer(), classifier=CnpjClassifier())


def test_cpf_valid_inputs(cpf_uc):
    for raw in ("01234567890", "529.982.247-25", " 111.444.777-35 "):
        res = cpf_uc.execute(raw)
        assert res.is_valid, raw
        assert res.error is None


def test_cpf_rejections_keep_distinct_causes(cpf_uc):
    assert cpf_uc.execute("000.000.000-00").error is ErrorKind.STRUCTURAL_INVALID
    assert cpf_uc.execute("0123456789").error is ErrorKind.STRUCTURAL_INVALID
    mismatch = cpf_uc.execute("01234567891")
    assert mismatch.error is ErrorKind.CHECK_DIGIT_MISMATCH
    # same external message for both kinds
    assert mismatch.message == cpf_uc.execute("11111111111").message == "The CPF is invalid"


@pytest.mark.parametrize("digit", "0123456789")
def test_cpf_repeated_digits_rejected(cpf_uc, digit):
    assert cpf_uc.execute(digit * 11).is_valid is False


def test_cpf_blank_aborts(cpf_uc):
    with pytest.raises(InputMissingError):
        cpf_uc.execute("  ")


def test_cpf_parse(cpf_uc):
    doc = cpf_uc.parse("012.345.678-90")
    assert doc.base == "012345678"
    assert doc.check_digits == "90"
    with pytest.raises(CheckDigitMismatchError):
        cpf_uc.parse("01234567891")
    with pytest.raises(StructuralInvalidError):
        cpf_uc.parse("123")


def test_cnpj_valid_inputs(cnpj_uc):
    assert cnpj_uc.execute("00000000000191").is_valid
    assert cnpj_uc.execute("12.345.678/0001-95").is_valid
    assert cnpj_uc.execute("12ABC34501DE35").is_valid
    assert cnpj_uc.execute("12.ABC.345/01DE-35").is_valid


def test_cnpj_rejections(cnpj_uc):
    assert cnpj_uc.execute("12345678000196").error is ErrorKind.CHECK_DIGIT_MISMATCH
    assert cnpj_uc.execute("12ABC34501DE36").error is ErrorKind.CHECK_DIGIT_MISMATCH
    assert cnpj_uc.execute("1234567800019").error is ErrorKind.STRUCTURAL_INVALID
    assert cnpj_uc.execute("12ABC34501DEAB").error is ErrorKind.STRUCTURAL_INVALID
    assert cnpj_uc.execute("00000000000000").error is ErrorKind.STRUCTURAL_INVALID
    # clearing keeps case, so lowercase letters fail classification
    assert cnpj_uc.execute("12abc34501de35").error is ErrorKind.STRUCTURAL_INVALID


@pytest.mark.parametrize("char", "0123456789")
def test_cnpj_repeated_characters_rejected(cnpj_uc, char):
    assert cnpj_uc.execute(char * 14).is_valid is False


def test_cnpj_explicit_type(cnpj_uc):
    assert cnpj_uc.execute("12345678000195", CnpjType.NUMERIC).is_valid
    assert cnpj_uc.execute("12345678000195", CnpjType.ALPHANUMERIC).is_valid
    assert cnpj_uc.execute("12ABC34501DE35", CnpjType.ALPHANUMERIC).is_valid
    res = cnpj_uc.execute("12ABC34501DE35", CnpjType.NUMERIC)
    assert res.error is ErrorKind.STRUCTURAL_INVALID


def test_cnpj_parse(cnpj_uc):
    doc = cnpj_uc.parse("12.ABC.345/01DE-35")
    assert (doc.root, doc.order, doc.check_digits) == ("12ABC345", "01DE", "35")
    assert doc.type is CnpjType.ALPHANUMERIC
    with pytest.raises(InputMissingError):
        cnpj_uc.parse(None)


def test_mismatch_is_logged_without_full_value(cnpj_uc, caplog):
    with caplog.at_level(logging.DEBUG, logger="brdocs.application.use_cases.validate_cnpj"):
        cnpj_uc.execute("12345678000196")
    assert "check digit mismatch" in caplog.text
    assert "12345678000196" not in caplog.text


def test_validation_does_not_mutate_input(cpf_uc):
    raw = "529.982.247-25"
    cpf_uc.execute(raw)
    assert raw == "529.982.247-25"
