"""
Latvian personal codes (personas kods).

Legacy layout DDMMYY-CNNNN, hyphen optional, where C is the birth century
(0 = 1800s, 1 = 1900s, 2 = 2000s) and the last digit is a check digit.
Codes issued from July 2017 start with 32 and carry no birth date.
"""

from datetime import date
from typing import Optional

from loan_gateway.domain.exceptions import InvalidIdentityCodeError
from loan_gateway.domain.models import Country, Gender
from loan_gateway.infrastructure.identity.base import IdentityCodeService

WEIGHTS = (1, 6, 3, 7, 9, 10, 5, 8, 4, 2)

CENTURIES = {"0": 1800, "1": 1900, "2": 2000}


class LatvianIdentityCodeService(IdentityCodeService):
    country = Country.LV

    def compact(self, code: str) -> str:
        if code is not None and len(code.strip()) == 12 and code.strip()[6] == "-":
            code = code.strip().replace("-", "", 1)
        return super().compact(code)

    def calc_check_digit(self, digits: str) -> int:
        return (1101 - sum(w * int(d) for w, d in zip(WEIGHTS, digits))) % 11 % 10

    def get_birth_date(self, code: str) -> date:
        code = self.compact(code)
        if code.startswith("32"):
            raise InvalidIdentityCodeError("Latvian identity code does not contain a birth date")
        century = CENTURIES.get(code[6])
        if century is None:
            raise InvalidIdentityCodeError("Invalid century digit in LV identity code")
        try:
            return date(century + int(code[4:6]), int(code[2:4]), int(code[0:2]))
        except ValueError as e:
            raise InvalidIdentityCodeError("Invalid birth date in LV identity code") from e

    def get_gender(self, code: str) -> Optional[Gender]:
        self.validate(code)
        return None
