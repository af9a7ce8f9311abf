# Standard library imports
import random
import re

CPF_LENGTH = 11

# ASCII digits only; str.isdigit() and \d also accept other scripts' digits
_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_cpf(value: str | None) -> str:
    """Strip punctuation, e.g. ``529.982.247-25`` -> ``52998224725``."""
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


def mask_cpf(value: str | None) -> str:
    """Hide the middle digits for logs, e.g. ``52998224725`` -> ``529.***.***-25``."""
    cpf = normalize_cpf(value)
    if len(cpf) != CPF_LENGTH:
        return "***"
    return f"{cpf[:3]}.***.***-{cpf[-2:]}"


def _check_digit(digits: str) -> int:
    # Weights run from len(digits) + 1 down to 2
    weight = len(digits) + 1
    total = sum(int(digit) * (weight - i) for i, digit in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(value: str | None) -> bool:
    """
    Validate a Brazilian CPF, with or without formatting.

    Rejects empty input, any non-ASCII character (full-width or other
    Unicode digits included), anything that is not 11 digits once punctuation
    is removed, repeated-digit sequences such as ``00000000000`` and numbers
    whose two check digits do not match the modulo-11 computation.
    """
    if not value or not str(value).isascii():
        return False

    cpf = normalize_cpf(value)

    if len(cpf) != CPF_LENGTH:
        return False

    if cpf == cpf[0] * CPF_LENGTH:
        return False

    if int(cpf[9]) != _check_digit(cpf[:9]):
        return False

    return int(cpf[10]) == _check_digit(cpf[:10])


def generate_cpf() -> str:
    """Generate a random CPF with valid check digits (unformatted)."""
    while True:
        base = "".join(str(random.randint(0, 9)) for _ in range(9))
        if base != base[0] * 9:
            break
    first = _check_digit(base)
    second = _check_digit(f"{base}{first}")
    return f"{base}{first}{second}"
