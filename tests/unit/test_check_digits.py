import pytest

from brdocs.domain.errors import BaseMalformedError
from brdocs.domain.services import cnpj_check_digits, cpf_check_digits
from brdocs.domain.value_objects.cnpj_type import CnpjType


def test_cpf_check_digits_known_values():
    assert cpf_check_digits.calculate_check_digits([0, 1, 2, 3, 4, 5, 6, 7, 8]) == (9, 0)
    assert cpf_check_digits.calculate_check_digits([5, 2, 9, 9, 8, 2, 2, 4, 7]) == (2, 5)
    assert cpf_check_digits.calculate_check_digits([1, 1, 1, 4, 4, 4, 7, 7, 7]) == (3, 5)


@pytest.mark.parametrize("base", [None, [], [1] * 8, [1] * 10, [1, 2, 3, 4, 5, 6, 7, 8, 10], [0] * 8 + [-1], ["1"] * 9])
def test_cpf_engine_rejects_malformed_base(base):
    with pytest.raises(BaseMalformedError):
        cpf_check_digits.calculate_check_digits(base)


def test_cnpj_check_digits_numeric():
    assert cnpj_check_digits.calculate_check_digits("123456780001", CnpjType.NUMERIC) == "95"
    assert cnpj_check_digits.calculate_check_digits("000000000001", CnpjType.NUMERIC) == "91"
    assert cnpj_check_digits.calculate_check_digits("112223330001", CnpjType.NUMERIC) == "81"


def test_cnpj_check_digits_letters_weigh_code_minus_zero():
    # 'A'..'E' count as 17..21, not 0..4 or 10..14
    assert cnpj_check_digits.calculate_check_digits("12ABC34501DE", CnpjType.ALPHANUMERIC) == "35"
    assert cnpj_check_digits.calculate_check_digit("A") == 0  # 34 % 11 == 1 collapses to 0
    assert cnpj_check_digits.calculate_check_digit("B") == 8  # 36 % 11 == 3


def test_cnpj_engine_digits_are_the_same_for_both_variants():
    base = "123456780001"
    assert cnpj_check_digits.calculate_check_digits(base, CnpjType.ALPHANUMERIC) == \
        cnpj_check_digits.calculate_check_digits(base, CnpjType.NUMERIC)


@pytest.mark.parametrize(
    "base, type_",
    [
        (None, CnpjType.NUMERIC),
        ("12345678000", CnpjType.NUMERIC),
        ("1234567800011", CnpjType.NUMERIC),
        ("12ABC34501DE", CnpjType.NUMERIC),
        ("12abc34501de", CnpjType.ALPHANUMERIC),
        ("123456780001", None),
    ],
)
def test_cnpj_engine_rejects_malformed_base(base, type_):
    with pytest.raises(BaseMalformedError):
        cnpj_check_digits.calculate_check_digits(base, type_)
