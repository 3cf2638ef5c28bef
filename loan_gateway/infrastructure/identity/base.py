"""Common interface for national identity code services"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from loan_gateway.domain.exceptions import InvalidIdentityCodeError
from loan_gateway.domain.models import Country, Gender
from loan_gateway.utils.date_utils import age_between


class IdentityCodeService(ABC):
    """
    Parses a country's personal identity codes.

    Implementations are stateless and may be shared between requests.
    Every method raises InvalidIdentityCodeError for codes that fail format
    or checksum validation.
    """

    country: Country
    code_length = 11

    def compact(self, code: str) -> str:
        """Strip surrounding whitespace and check length and digits"""
        if code is None:
            raise InvalidIdentityCodeError("Identity code is required")
        code = code.strip()
        if len(code) != self.code_length or not code.isdigit():
            raise InvalidIdentityCodeError(
                f"Identity code must be exactly {self.code_length} digits"
            )
        return code

    def validate(self, code: str) -> str:
        """Return the compacted code if its check digit and birth date are valid"""
        code = self.compact(code)
        expected = self.calc_check_digit(code[:-1])
        if int(code[-1]) != expected:
            raise InvalidIdentityCodeError(
                f"Invalid {self.country.value} identity code checksum"
            )
        self.get_birth_date(code)
        return code

    def get_age(self, code: str, today: date) -> relativedelta:
        birth_date = self.get_birth_date(self.validate(code))
        if birth_date > today:
            raise InvalidIdentityCodeError("Identity code birth date is in the future")
        return age_between(birth_date, today)

    @abstractmethod
    def calc_check_digit(self, digits: str) -> int:
        """Check digit for the first ten digits of a code"""

    @abstractmethod
    def get_birth_date(self, code: str) -> date:
        """Birth date encoded in the code"""

    @abstractmethod
    def get_gender(self, code: str) -> Optional[Gender]:
        """Gender encoded in the code, or None when the format does not carry one"""
