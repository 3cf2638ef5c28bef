"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidIdentityCodeError(DomainException):
    """Identity code is malformed or cannot be parsed for the given country"""

    pass


class InvalidLoanAmountError(DomainException):
    """Requested loan amount is outside the offered range"""

    pass


class InvalidLoanPeriodError(DomainException):
    """Requested loan period is outside the offered range"""

    pass


class NoValidLoanError(DomainException):
    """No loan amount and period combination can be offered to the applicant"""

    pass


class AgeRestrictionError(DomainException):
    """Applicant is rejected on age grounds; rendered into a Decision, not propagated"""

    pass


class UnderageError(AgeRestrictionError):
    def __init__(self, minimum_age: int):
        super().__init__(f"Loans are not offered to people under age {minimum_age}.")
        self.minimum_age = minimum_age


class LifetimeExceededError(AgeRestrictionError):
    def __init__(self, expected_lifetime_years: int):
        super().__init__("Your age exceeds the current expected lifetime in your country")
        self.expected_lifetime_years = expected_lifetime_years


class PayoffExceedsLifetimeError(AgeRestrictionError):
    def __init__(self, expected_lifetime_years: int):
        super().__init__(
            "Your age plus specified loan period exceeds expected "
            f"{expected_lifetime_years} years life time in your country. "
            "Try to request smaller loan period"
        )
        self.expected_lifetime_years = expected_lifetime_years
