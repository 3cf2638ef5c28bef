"""Loan decision engine - core business logic for loan approvals"""

import logging
from dataclasses import dataclass

from loan_gateway.domain.constants import (
    CREDIT_SEGMENTS,
    MAXIMUM_LOAN_AMOUNT,
    MAXIMUM_LOAN_PERIOD,
    MINIMUM_LOAN_AMOUNT,
    MINIMUM_LOAN_PERIOD,
)
from loan_gateway.domain.eligibility import AgeEligibilityChecker
from loan_gateway.domain.exceptions import (
    AgeRestrictionError,
    InvalidIdentityCodeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    NoValidLoanError,
)
from loan_gateway.domain.models import Country, CreditSegment, Decision

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoanLimits:
    """Offered loan range; amounts in EUR, periods in months"""

    min_amount: int = MINIMUM_LOAN_AMOUNT
    max_amount: int = MAXIMUM_LOAN_AMOUNT
    min_period: int = MINIMUM_LOAN_PERIOD
    max_period: int = MAXIMUM_LOAN_PERIOD


def classify_segment(identity_code: str) -> CreditSegment:
    """
    Map an identity code to its credit segment.

    The last four digits of the code, read as a number, select the segment:
    - 0000-2499: segment 0, debt (no credit)
    - 2500-4999: segment 1, modifier 100
    - 5000-7499: segment 2, modifier 300
    - 7500-9999: segment 3, modifier 1000
    """
    tail = identity_code.strip()[-4:]
    if len(tail) != 4 or not tail.isdigit():
        raise InvalidIdentityCodeError("Identity code must end with four digits")

    value = int(tail)
    for upper_bound, segment, credit_modifier in CREDIT_SEGMENTS:
        if value < upper_bound:
            return CreditSegment(segment=segment, credit_modifier=credit_modifier)
    # Four digits never exceed the last bound
    raise AssertionError(f"Unreachable segment for {value}")


def highest_valid_loan_amount(credit_modifier: int, loan_period: int, limits: LoanLimits) -> int:
    """Largest amount the modifier supports over loan_period, capped at the maximum loan"""
    return min(credit_modifier * loan_period, limits.max_amount)


class LoanDecisionEngine:
    """
    Computes the loan an applicant can get.

    Stateless between calls: the only collaborators are the age eligibility
    checker and the configured loan limits.
    """

    def __init__(self, age_checker: AgeEligibilityChecker, limits: LoanLimits | None = None):
        self.age_checker = age_checker
        self.limits = limits or LoanLimits()

    def verify_inputs(self, identity_code: str, loan_amount: int, loan_period: int) -> None:
        if not identity_code or not identity_code.strip():
            raise InvalidIdentityCodeError("Invalid personal ID code!")
        if not self.limits.min_amount <= loan_amount <= self.limits.max_amount:
            raise InvalidLoanAmountError("Invalid loan amount!")
        if not self.limits.min_period <= loan_period <= self.limits.max_period:
            raise InvalidLoanPeriodError("Invalid loan period!")

    def check_age(self, identity_code: str, country: Country, loan_period: int) -> Decision | None:
        """Rejected Decision when the applicant fails the age rules for loan_period, else None"""
        try:
            self.age_checker.validate(identity_code, country, loan_period)
        except AgeRestrictionError as e:
            logger.info("Age restriction applied", extra={"country": country.value, "reason": str(e)})
            return Decision.rejected(str(e))
        return None

    def find_loan_period(self, credit_modifier: int) -> int:
        """Shortest period whose highest amount reaches the minimum loan"""
        for period in range(self.limits.min_period, self.limits.max_period + 1):
            if highest_valid_loan_amount(credit_modifier, period, self.limits) >= self.limits.min_amount:
                return period
        raise NoValidLoanError("No valid loan found!")

    def calculate_approved_loan(
        self,
        identity_code: str,
        loan_amount: int,
        loan_period: int,
        country: Country = Country.EE,
    ) -> Decision:
        """
        Main entry point: validate the request and decide the approved loan.

        Age rejections are returned as a Decision carrying the message; every
        other failure is raised.

        Raises:
            InvalidIdentityCodeError, InvalidLoanAmountError, InvalidLoanPeriodError:
                request is malformed
            NoValidLoanError: applicant's segment supports no loan within limits
        """
        self.verify_inputs(identity_code, loan_amount, loan_period)

        rejection = self.check_age(identity_code, country, loan_period)
        if rejection is not None:
            return rejection

        segment = classify_segment(identity_code)
        if not segment.has_credit:
            raise NoValidLoanError("No valid loan found!")

        # Honor the requested period when it already covers the requested amount
        amount = highest_valid_loan_amount(segment.credit_modifier, loan_period, self.limits)
        if amount >= loan_amount:
            return Decision.approved(amount, loan_period)

        period = self.find_loan_period(segment.credit_modifier)
        # The searched period must also end before the expected lifetime
        if period != loan_period:
            rejection = self.check_age(identity_code, country, period)
            if rejection is not None:
                return rejection

        return Decision.approved(highest_valid_loan_amount(segment.credit_modifier, period, self.limits), period)
