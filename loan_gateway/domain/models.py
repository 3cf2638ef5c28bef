"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Country(str, Enum):
    """Countries the loan service operates in"""

    EE = "EE"
    LV = "LV"
    LT = "LT"


class Gender(str, Enum):
    FEMALE = "FEMALE"
    MALE = "MALE"


@dataclass(frozen=True)
class ApplicantProfile:
    """Age facts derived from an identity code for a single request"""

    age_years: int
    age_months: int
    expected_lifetime_years: int
    payoff_age_years: int
    gender: Optional[Gender] = None


@dataclass(frozen=True)
class CreditSegment:
    """Credit class of an applicant and the modifier it grants"""

    segment: int
    credit_modifier: int

    @property
    def has_credit(self) -> bool:
        return self.credit_modifier > 0


@dataclass(frozen=True)
class Decision:
    """
    Output of the loan decision engine.

    Either loan_amount and loan_period are set (approved) or error_message is
    set (rejected on age grounds), never both.
    """

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        approved = self.loan_amount is not None and self.loan_period is not None
        rejected = self.error_message is not None
        if approved == rejected:
            raise ValueError("Decision must carry either an approved loan or an error message")

    @classmethod
    def approved(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def rejected(cls, error_message: str) -> "Decision":
        return cls(error_message=error_message)

    @property
    def is_approved(self) -> bool:
        return self.error_message is None
