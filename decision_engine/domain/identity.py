"""Personal identification code decoding and validation.

Estonian-style personal codes are 11 digits::

    G YY MM DD SSS C

G selects the century, YYMMDD is the birth date, SSS is a serial number and
C is a modulo-11 check digit. The last four digits (SSSC) double as the
applicant's credit segment.
"""

from datetime import date
from typing import Protocol

from decision_engine.domain.exceptions import InvalidIdentityCodeError
from decision_engine.domain.models import CountryCode
from decision_engine.utils.date_utils import full_years_between

PERSONAL_CODE_LENGTH = 11

_FIRST_PASS_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
_SECOND_PASS_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


def decode_birth_date(personal_code: str) -> date:
    """
    Extract the birth date from a personal code.

    Century by first digit: up to 2 -> 1800s, 3-4 -> 1900s, otherwise 2000s.

    Raises:
        InvalidIdentityCodeError: If the digits do not form a calendar date
    """
    try:
        first_digit = personal_code[0]
        century = 1800 if first_digit <= "2" else 1900 if first_digit <= "4" else 2000
        year = century + int(personal_code[1:3])
        month = int(personal_code[3:5])
        day = int(personal_code[5:7])
        return date(year, month, day)
    except (IndexError, ValueError) as e:
        raise InvalidIdentityCodeError("Could not parse birth date from personal code") from e


def decode_country(personal_code: str) -> CountryCode:
    """Map the first digit to a country: 1-2 Estonia, 3-4 Latvia, anything else Lithuania"""
    first_digit = personal_code[0]
    if first_digit in ("1", "2"):
        return CountryCode.ESTONIA
    if first_digit in ("3", "4"):
        return CountryCode.LATVIA
    return CountryCode.LITHUANIA


def calculate_age(birth_date: date, today: date | None = None) -> int:
    """Age in full years on the given day (defaults to today)"""
    return full_years_between(birth_date, today or date.today())


def decode_segment(personal_code: str) -> int:
    """
    Last four digits of the code as an integer.

    Raises:
        InvalidIdentityCodeError: If the digits are not numeric
    """
    try:
        return int(personal_code[-4:])
    except ValueError as e:
        raise InvalidIdentityCodeError("Could not parse credit segment from personal code") from e


def mask_personal_code(personal_code: str) -> str:
    """Keep the birth-date prefix, hide the serial and check digit for logs"""
    return personal_code[:7] + "*" * max(len(personal_code) - 7, 0)


class IdentityValidator(Protocol):
    """Structural/checksum predicate for a national identity scheme"""

    def is_valid(self, personal_code: str) -> bool:
        ...


class EstonianPersonalCodeValidator:
    """
    Validate Estonian personal codes (isikukood).

    Rules:
    - Exactly 11 ASCII digits
    - First digit 1-6 (sex and century)
    - Digits 2-7 form a real calendar date
    - Last digit matches the two-pass modulo-11 checksum
    """

    def is_valid(self, personal_code: str) -> bool:
        if not isinstance(personal_code, str) or len(personal_code) != PERSONAL_CODE_LENGTH:
            return False

        if not (personal_code.isascii() and personal_code.isdigit()):
            return False

        if personal_code[0] not in "123456":
            return False

        try:
            decode_birth_date(personal_code)
        except InvalidIdentityCodeError:
            return False

        return calculate_check_digit(personal_code[:10]) == int(personal_code[10])


def calculate_check_digit(digits: str) -> int:
    """
    Compute the check digit for the first ten digits of a personal code.

    Algorithm:
    - Weighted sum with weights 1..9,1; remainder mod 11 is the check digit
    - If that remainder is 10, repeat with weights 3..9,1,2,3
    - If the second remainder is also 10, the check digit is 0
    """
    for weights in (_FIRST_PASS_WEIGHTS, _SECOND_PASS_WEIGHTS):
        remainder = sum(int(d) * w for d, w in zip(digits, weights)) % 11
        if remainder < 10:
            return remainder
    return 0
