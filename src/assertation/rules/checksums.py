"""Luhn, CPF and CNPJ check-digit algorithms."""

import re
from typing import Optional

from assertation.utils.constants import Defaults

NON_DIGITS = re.compile(r"[^0-9]")
DIGITS = re.compile(r"[0-9]+")
SPACES = re.compile(r" +")


def luhn_check(digits: str) -> bool:
    """
    Standard Luhn (mod 10) check over a digits-only string.

    Every second digit from the rightmost is doubled, with 9 subtracted
    from doubled values above 9.
    """
    if not digits or not DIGITS.fullmatch(digits):
        return False

    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit

    return total % 10 == 0


def normalize_card_number(value: str) -> Optional[str]:
    """
    Strip spaces and validate a card number.

    Returns:
        The digits, or None when the number is malformed or fails Luhn
    """
    data = SPACES.sub("", value)

    if not DIGITS.fullmatch(data):
        return None

    if not (
        Defaults.CARD_NUMBER_MIN_LENGTH <= len(data) <= Defaults.CARD_NUMBER_MAX_LENGTH
    ):
        return None

    return data if luhn_check(data) else None


def _padded_digits(value: str, size: int) -> Optional[str]:
    raw = NON_DIGITS.sub("", value).rjust(size, "0")
    if len(raw) != size:
        return None
    # Repeated digits pass the checksum but are never issued
    if len(set(raw)) == 1:
        return None
    return raw


def cpf_check_digits(base: str) -> str:
    """Compute the two CPF check digits for the first nine digits."""
    digits = base
    for size in (9, 10):
        weighted = sum(int(digits[i]) * (size + 1 - i) for i in range(size))
        digits += str(((10 * weighted) % 11) % 10)
    return digits[9:]


def normalize_cpf(value: str) -> Optional[str]:
    """
    Validate a CPF (Brazilian individual taxpayer id).

    Returns:
        The 11 raw digits, or None when the CPF is invalid
    """
    raw = _padded_digits(value, Defaults.CPF_LENGTH)
    if raw is None:
        return None
    return raw if cpf_check_digits(raw[:9]) == raw[9:] else None


def format_cpf(raw: str) -> str:
    return f"{raw[0:3]}.{raw[3:6]}.{raw[6:9]}-{raw[9:11]}"


def _cnpj_digit(digits: str, first_weight: int) -> int:
    weight = first_weight
    total = 0
    for char in digits:
        total += int(char) * weight
        weight = 9 if weight == 2 else weight - 1
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def cnpj_check_digits(base: str) -> str:
    """Compute the two CNPJ check digits for the first twelve digits."""
    first = _cnpj_digit(base[:12], 5)
    second = _cnpj_digit(base[:12] + str(first), 6)
    return f"{first}{second}"


def normalize_cnpj(value: str) -> Optional[str]:
    """
    Validate a CNPJ (Brazilian company id).

    Returns:
        The 14 raw digits, or None when the CNPJ is invalid
    """
    raw = _padded_digits(value, Defaults.CNPJ_LENGTH)
    if raw is None:
        return None
    return raw if cnpj_check_digits(raw[:12]) == raw[12:] else None


def format_cnpj(raw: str) -> str:
    return f"{raw[0:2]}.{raw[2:5]}.{raw[5:8]}/{raw[8:12]}-{raw[12:14]}"
