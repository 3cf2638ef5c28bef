"""
Estonian (isikukood) and Lithuanian (asmens kodas) personal codes.

Both countries share the layout GYYMMDDSSSC:
- G: century and gender (1/2 = 1800s, 3/4 = 1900s, 5/6 = 2000s; odd male, even female)
- YYMMDD: birth date
- SSS: serial number
- C: check digit
"""

from datetime import date
from typing import Optional

from loan_gateway.domain.exceptions import InvalidIdentityCodeError
from loan_gateway.domain.models import Country, Gender
from loan_gateway.infrastructure.identity.base import IdentityCodeService

FIRST_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)

CENTURIES = {"1": 1800, "2": 1800, "3": 1900, "4": 1900, "5": 2000, "6": 2000}


def calc_check_digit(digits: str) -> int:
    """Two-pass modulo 11 check digit shared by EE and LT codes"""
    for weights in (FIRST_WEIGHTS, SECOND_WEIGHTS):
        check = sum(w * int(d) for w, d in zip(weights, digits)) % 11
        if check != 10:
            return check
    return 0


class BalticIdentityCodeService(IdentityCodeService):
    """Shared parsing rules for the EE/LT code format"""

    def calc_check_digit(self, digits: str) -> int:
        return calc_check_digit(digits)

    def get_birth_date(self, code: str) -> date:
        code = self.compact(code)
        century = CENTURIES.get(code[0])
        if century is None:
            raise InvalidIdentityCodeError(f"Invalid century digit in {self.country.value} identity code")
        try:
            return date(century + int(code[1:3]), int(code[3:5]), int(code[5:7]))
        except ValueError as e:
            raise InvalidIdentityCodeError(f"Invalid birth date in {self.country.value} identity code") from e

    def get_gender(self, code: str) -> Optional[Gender]:
        code = self.validate(code)
        return Gender.MALE if int(code[0]) % 2 else Gender.FEMALE


class EstonianIdentityCodeService(BalticIdentityCodeService):
    country = Country.EE


class LithuanianIdentityCodeService(BalticIdentityCodeService):
    country = Country.LT
