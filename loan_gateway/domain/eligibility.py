"""Age eligibility rules - minimum age and life expectancy bound on repayment"""

import logging
from datetime import date
from typing import Callable, Mapping, Optional, Tuple

from loan_gateway.domain.constants import LIFETIME_YEARS, UNDERAGE_PERIOD
from loan_gateway.domain.exceptions import (
    LifetimeExceededError,
    PayoffExceedsLifetimeError,
    UnderageError,
)
from loan_gateway.domain.models import ApplicantProfile, Country, Gender
from loan_gateway.infrastructure.identity.registry import IdentityCodeRegistry
from loan_gateway.utils.date_utils import add_months

logger = logging.getLogger(__name__)


class AgeEligibilityChecker:
    """
    Rejects applicants who are underage or who would reach their country's
    expected lifetime before paying off the loan.

    The identity code registry and the clock are injected so that the check is
    a pure function of its inputs.
    """

    def __init__(
        self,
        identity_codes: IdentityCodeRegistry,
        clock: Callable[[], date] = date.today,
        lifetime_years: Mapping[Tuple[Country, Optional[Gender]], int] = LIFETIME_YEARS,
    ):
        self.identity_codes = identity_codes
        self.clock = clock
        self.lifetime_years = lifetime_years

    def expected_lifetime(self, country: Country, gender: Optional[Gender]) -> int:
        # Countries without gender-specific figures are keyed by None
        key = (country, gender) if (country, gender) in self.lifetime_years else (country, None)
        return self.lifetime_years[key]

    def validate(self, identity_code: str, country: Country, loan_period_months: int) -> ApplicantProfile:
        """
        Check the applicant may take a loan over loan_period_months.

        Raises:
            InvalidIdentityCodeError: code does not parse for the country
            UnderageError: applicant is younger than 18
            LifetimeExceededError: applicant has already reached the expected lifetime
            PayoffExceedsLifetimeError: applicant reaches the expected lifetime before payoff
        """
        service = self.identity_codes.for_country(country)
        age = service.get_age(identity_code, self.clock())
        gender = service.get_gender(identity_code)
        expected_lifetime = self.expected_lifetime(country, gender)

        if age.years < UNDERAGE_PERIOD:
            raise UnderageError(UNDERAGE_PERIOD)

        payoff_age_years = add_months(age, loan_period_months).years

        if expected_lifetime <= age.years:
            raise LifetimeExceededError(expected_lifetime)

        if expected_lifetime <= payoff_age_years:
            raise PayoffExceedsLifetimeError(expected_lifetime)

        logger.debug(
            "Age eligibility passed",
            extra={"country": country.value, "age_years": age.years, "payoff_age_years": payoff_age_years},
        )
        return ApplicantProfile(
            age_years=age.years,
            age_months=age.months,
            expected_lifetime_years=expected_lifetime,
            payoff_age_years=payoff_age_years,
            gender=gender,
        )
