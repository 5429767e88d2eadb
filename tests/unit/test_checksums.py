"""Tests for the Luhn, CPF and CNPJ check-digit algorithms."""

import pytest

from assertation.rules import checksums


class TestLuhn:
    """Test suite for the Luhn check."""

    def test_should_accept_valid_card_number(self):
        """Should accept a number whose Luhn sum is a multiple of 10."""
        assert checksums.luhn_check("4532015112830366") is True

    def test_should_reject_mutated_card_number(self):
        """Should reject the same number with its last digit changed."""
        assert checksums.luhn_check("4532015112830367") is False

    def test_should_reject_non_digits(self):
        """Should reject empty and non-digit input."""
        assert checksums.luhn_check("") is False
        assert checksums.luhn_check("4532a15112830366") is False

    def test_should_normalize_spaced_card_number(self):
        """Should strip spaces before checking."""
        assert (
            checksums.normalize_card_number("4532 0151 1283 0366")
            == "4532015112830366"
        )

    @pytest.mark.parametrize(
        "number",
        [
            "0000000",  # too short, passes Luhn
            "00000000000000000000",  # too long, passes Luhn
            "4532-0151-1283-0366",  # dashes are not stripped
        ],
    )
    def test_should_reject_bad_card_numbers(self, number):
        """Should enforce the 8 to 19 digit length and digits-only input."""
        assert checksums.normalize_card_number(number) is None

    def test_should_accept_length_bounds(self):
        """Should accept the shortest and longest allowed lengths."""
        assert checksums.normalize_card_number("00000000") == "00000000"
        assert checksums.normalize_card_number("0" * 19) == "0" * 19


class TestCpf:
    """Test suite for CPF validation and formatting."""

    def test_should_accept_formatted_cpf(self):
        """Should accept a valid CPF written with punctuation."""
        assert checksums.normalize_cpf("111.444.777-35") == "11144477735"

    def test_should_accept_raw_cpf(self):
        """Should accept the raw digits."""
        assert checksums.normalize_cpf("11144477735") == "11144477735"

    def test_should_compute_check_digits(self):
        """Should compute both check digits from the first nine."""
        assert checksums.cpf_check_digits("111444777") == "35"

    def test_should_reject_wrong_check_digit(self):
        """Should reject a CPF whose last digit is off by one."""
        assert checksums.normalize_cpf("11144477736") is None

    def test_should_reject_repeated_digits(self):
        """Should reject all-identical digits regardless of checksum."""
        assert checksums.normalize_cpf("00000000000") is None
        assert checksums.normalize_cpf("111.111.111-11") is None

    def test_should_reject_too_many_digits(self):
        """Should reject input longer than 11 digits."""
        assert checksums.normalize_cpf("111444777350") is None

    def test_should_format_cpf(self):
        """Should format as XXX.XXX.XXX-XX."""
        assert checksums.format_cpf("11144477735") == "111.444.777-35"


class TestCnpj:
    """Test suite for CNPJ validation and formatting."""

    def test_should_accept_valid_cnpj(self):
        """Should accept a CNPJ with correct check digits."""
        assert checksums.normalize_cnpj("11.222.333/0001-81") == "11222333000181"

    def test_should_compute_check_digits(self):
        """Should compute both check digits from the first twelve."""
        assert checksums.cnpj_check_digits("112223330001") == "81"

    def test_should_reject_mutated_last_digit(self):
        """Should reject the same CNPJ with its last digit changed by one."""
        assert checksums.normalize_cnpj("11222333000182") is None

    def test_should_reject_repeated_digits(self):
        """Should reject all-identical digits."""
        assert checksums.normalize_cnpj("00000000000000") is None

    def test_should_zero_pad_short_input(self):
        """Should left-pad with zeros before checking."""
        # 00.000.000/0001-91 is valid
        assert checksums.normalize_cnpj("000191") == "00000000000191"

    def test_should_format_cnpj(self):
        """Should format as XX.XXX.XXX/XXXX-XX."""
        assert checksums.format_cnpj("11222333000181") == "11.222.333/0001-81"
