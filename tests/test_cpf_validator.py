"""Tests for the CPF check-digit validator."""

import pytest

from voteschallenge.utils.validators.cpf_validator import generate_cpf, is_valid_cpf, mask_cpf, normalize_cpf

FULLWIDTH_CPF = "\uff15\uff12\uff19\uff19\uff18\uff12\uff12\uff14\uff17\uff12\uff15"
ARABIC_INDIC_CPF = "\u0665\u0662\u0669\u0669\u0668\u0662\u0662\u0664\u0667\u0662\u0665"


class TestIsValidCpf:
    @pytest.mark.parametrize(
        "cpf",
        ["52998224725", "529.982.247-25", "11144477735", "111.444.777-35", " 529 982 247 25 "],
    )
    def test_accepts_valid_numbers(self, cpf):
        assert is_valid_cpf(cpf)

    @pytest.mark.parametrize(
        "cpf",
        [
            None,
            "",
            "123",
            "5299822472",  # 10 digits
            "529982247250",  # 12 digits
            "5299822472a",
            "00000000000",
            "000.000.000-00",
            "11111111111",
            "99999999999",
        ],
    )
    def test_rejects_malformed_numbers(self, cpf):
        assert not is_valid_cpf(cpf)

    def test_rejects_wrong_first_check_digit(self):
        assert not is_valid_cpf("52998224735")

    def test_rejects_wrong_second_check_digit(self):
        assert not is_valid_cpf("52998224724")

    def test_generated_numbers_are_valid(self):
        for _ in range(50):
            cpf = generate_cpf()
            assert len(cpf) == 11
            assert cpf.isdigit()
            assert is_valid_cpf(cpf)

    @pytest.mark.parametrize("position", [9, 10])
    def test_any_check_digit_mutation_is_rejected(self, position):
        for _ in range(20):
            cpf = generate_cpf()
            for digit in "0123456789":
                if digit == cpf[position]:
                    continue
                mutated = cpf[:position] + digit + cpf[position + 1 :]
                assert not is_valid_cpf(mutated), mutated


def test_normalize_strips_punctuation():
    assert normalize_cpf("529.982.247-25") == "52998224725"
    assert normalize_cpf(None) == ""


class TestNonAsciiDigits:
    @pytest.mark.parametrize(
        "cpf",
        [
            FULLWIDTH_CPF,
            ARABIC_INDIC_CPF,
            "529982247２5",
            "52998224725５",
        ],
    )
    def test_unicode_digits_are_rejected(self, cpf):
        assert not is_valid_cpf(cpf)

    def test_normalize_keeps_ascii_digits_only(self):
        assert normalize_cpf(FULLWIDTH_CPF) == ""
        assert normalize_cpf("529５982247-25") == "52998224725"


def test_mask_hides_middle_digits():
    assert mask_cpf("52998224725") == "529.***.***-25"
    assert mask_cpf("529.982.247-25") == "529.***.***-25"
    assert mask_cpf("123") == "***"
    assert mask_cpf(None) == "***"
