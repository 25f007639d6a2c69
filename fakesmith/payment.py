"""Credit card details."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from fakesmith.numbers import numerify
from fakesmith.randomness import get_rand_value, rand_int_range, replace_with_numbers

_LUHN_DOUBLED = (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)
_LUHN_ATTEMPTS = 100_000


@dataclass
class CreditCardInfo:
    """A set of credit card details."""

    card_type: str
    number: int
    exp: str
    cvv: str


def credit_card() -> CreditCardInfo:
    """Return a full set of random credit card details."""
    return CreditCardInfo(
        card_type=credit_card_type(),
        number=credit_card_number(),
        exp=credit_card_exp(),
        cvv=credit_card_cvv(),
    )


def credit_card_type() -> str:
    """Return a random card type."""
    return get_rand_value("payment", "card_type")


def credit_card_number() -> int:
    """Return a random card number drawn from a known issuer layout."""
    return int(replace_with_numbers(get_rand_value("payment", "number")))


def credit_card_number_luhn() -> int:
    """Return a random card number that passes the Luhn check."""
    candidate = ""
    for _ in range(_LUHN_ATTEMPTS):
        candidate = replace_with_numbers(get_rand_value("payment", "number"))
        if luhn(candidate):
            break
    return int(candidate)


def credit_card_exp() -> str:
    """Return an MM/YY expiry date one to ten years in the future."""
    current_year = datetime.date.today().year - 2000
    month = rand_int_range(1, 12)
    year = rand_int_range(current_year + 1, current_year + 10)
    return f"{month:02d}/{year}"


def credit_card_cvv() -> str:
    """Return a random three-digit card verification value."""
    return numerify("###")


def luhn(number: str) -> bool:
    """Tell whether a string of digits passes the Luhn checksum."""
    odd = len(number) & 1
    total = 0
    for index, char in enumerate(number):
        if not "0" <= char <= "9":
            return False
        value = ord(char) - ord("0")
        total += _LUHN_DOUBLED[value] if index & 1 == odd else value
    return total % 10 == 0