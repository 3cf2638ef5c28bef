"""Unit tests for loan decision logic"""

import dataclasses
import pytest
from datetime import date
from loan_gateway.domain.constants import (
    MAXIMUM_LOAN_AMOUNT,
    MAXIMUM_LOAN_PERIOD,
    MINIMUM_LOAN_AMOUNT,
    MINIMUM_LOAN_PERIOD,
)
from loan_gateway.domain.decision_engine import (
    LoanDecisionEngine,
    LoanLimits,
    classify_segment,
    highest_valid_loan_amount,
)
from loan_gateway.domain.exceptions import (
    InvalidIdentityCodeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    NoValidLoanError,
)
from loan_gateway.domain.models import Country, CreditSegment, Decision, Gender

DEBTOR_CODE = "37605030299"
SEGMENT_1_CODE = "50307172740"
SEGMENT_2_CODE = "38411266610"
SEGMENT_3_CODE = "35006069515"


def test_classify_segment_buckets():
    """Test last four digits select the credit segment"""
    assert classify_segment(DEBTOR_CODE) == CreditSegment(segment=0, credit_modifier=0)
    assert classify_segment(SEGMENT_1_CODE) == CreditSegment(segment=1, credit_modifier=100)
    assert classify_segment(SEGMENT_2_CODE) == CreditSegment(segment=2, credit_modifier=300)
    assert classify_segment(SEGMENT_3_CODE) == CreditSegment(segment=3, credit_modifier=1000)


def test_classify_segment_boundaries():
    assert classify_segment("00000002499").segment == 0
    assert classify_segment("00000002500").segment == 1
    assert classify_segment("00000004999").segment == 1
    assert classify_segment("00000005000").segment == 2
    assert classify_segment("00000007499").segment == 2
    assert classify_segment("00000007500").segment == 3
    assert classify_segment("00000009999").segment == 3


def test_highest_valid_loan_amount_is_capped():
    limits = LoanLimits()

    assert highest_valid_loan_amount(100, 12, limits) == 1200
    assert highest_valid_loan_amount(1000, 12, limits) == MAXIMUM_LOAN_AMOUNT


def test_debtor_code(engine):
    with pytest.raises(NoValidLoanError):
        engine.calculate_approved_loan(DEBTOR_CODE, 4000, 12, Country.EE)


def test_debtor_code_any_request(engine):
    with pytest.raises(NoValidLoanError):
        engine.calculate_approved_loan(DEBTOR_CODE, 10000, 60, Country.EE)


def test_segment_1_extends_period(engine):
    """Test search moves to the shortest period reaching the minimum loan"""
    decision = engine.calculate_approved_loan(SEGMENT_1_CODE, 4000, 12, Country.EE)

    assert decision.loan_amount == 2000
    assert decision.loan_period == 20
    assert decision.error_message is None


def test_segment_2_requested_period_works(engine):
    decision = engine.calculate_approved_loan(SEGMENT_2_CODE, 4000, 12, Country.LT)

    assert decision.loan_amount == 3600
    assert decision.loan_period == 12


def test_segment_2_offers_more_than_requested(engine):
    """Test the approved amount is the segment maximum, not the requested amount"""
    decision = engine.calculate_approved_loan(SEGMENT_2_CODE, 2000, 12, Country.LT)

    assert decision.loan_amount == 3600
    assert decision.loan_period == 12


def test_segment_3_capped_at_maximum(engine):
    decision = engine.calculate_approved_loan(SEGMENT_3_CODE, 4000, 12, Country.EE)

    assert decision.loan_amount == 10000
    assert decision.loan_period == 12


def test_requested_period_honored(engine):
    decision = engine.calculate_approved_loan(SEGMENT_1_CODE, 3000, 36, Country.EE)

    assert decision.loan_amount == 3600
    assert decision.loan_period == 36


def test_search_restarts_from_minimum_period(engine):
    """Test an unreachable amount falls back to the shortest viable period"""
    decision = engine.calculate_approved_loan(SEGMENT_1_CODE, 8000, 48, Country.EE)

    assert decision.loan_amount == 2000
    assert decision.loan_period == 20


def test_searched_period_rechecked_against_lifetime(engine, baltic_code):
    """Test a period extended past the expected lifetime is rejected, not approved"""
    # EE male aged 76y5m: 12 months ends at 77, the 20 month search result at 78
    code = baltic_code(Gender.MALE, date(1948, 1, 1))

    decision = engine.calculate_approved_loan(code, 4000, 12, Country.EE)

    assert decision.loan_amount is None
    assert decision.loan_period is None
    assert decision.error_message == (
        "Your age plus specified loan period exceeds expected 78 years "
        "life time in your country. Try to request smaller loan period"
    )


def test_searched_period_within_lifetime_approved(engine, baltic_code):
    # EE male aged 75y5m reaches only 77 over the 20 month search result
    code = baltic_code(Gender.MALE, date(1949, 1, 1))

    decision = engine.calculate_approved_loan(code, 4000, 12, Country.EE)

    assert decision.loan_amount == 2000
    assert decision.loan_period == 20


def test_no_period_reaches_minimum(age_checker):
    limits = LoanLimits(min_amount=2000, max_amount=10000, min_period=12, max_period=18)
    engine = LoanDecisionEngine(age_checker, limits)

    with pytest.raises(NoValidLoanError):
        engine.calculate_approved_loan(SEGMENT_1_CODE, 4000, 12, Country.EE)


def test_invalid_personal_code(engine):
    with pytest.raises(InvalidIdentityCodeError):
        engine.calculate_approved_loan("12345678901", 4000, 12, Country.EE)


@pytest.mark.parametrize("code", ["", "   "])
def test_empty_personal_code(engine, code):
    with pytest.raises(InvalidIdentityCodeError):
        engine.calculate_approved_loan(code, 4000, 12, Country.EE)


def test_invalid_loan_amount(engine):
    with pytest.raises(InvalidLoanAmountError):
        engine.calculate_approved_loan(SEGMENT_1_CODE, MINIMUM_LOAN_AMOUNT - 1, 12, Country.EE)

    with pytest.raises(InvalidLoanAmountError):
        engine.calculate_approved_loan(SEGMENT_1_CODE, MAXIMUM_LOAN_AMOUNT + 1, 12, Country.LT)


def test_invalid_loan_period(engine):
    with pytest.raises(InvalidLoanPeriodError):
        engine.calculate_approved_loan(SEGMENT_1_CODE, 4000, MINIMUM_LOAN_PERIOD - 1, Country.EE)

    with pytest.raises(InvalidLoanPeriodError):
        engine.calculate_approved_loan(SEGMENT_1_CODE, 4000, MAXIMUM_LOAN_PERIOD + 1, Country.EE)


def test_input_validation_runs_before_age_check(engine, baltic_code, today):
    """Test bounds errors win over age rejections"""
    underage_code = baltic_code(Gender.FEMALE, today)

    with pytest.raises(InvalidLoanAmountError):
        engine.calculate_approved_loan(underage_code, 1, 12, Country.EE)

    with pytest.raises(InvalidLoanPeriodError):
        engine.calculate_approved_loan(underage_code, 4000, 1, Country.EE)


def test_invalid_latvian_personal_code(engine):
    with pytest.raises(InvalidIdentityCodeError):
        engine.calculate_approved_loan(SEGMENT_2_CODE, 4000, 12, Country.LV)


def test_invalid_lithuanian_personal_code(engine, latvian_code):
    with pytest.raises(InvalidIdentityCodeError):
        engine.calculate_approved_loan(latvian_code(date(1985, 3, 9)), 4000, 12, Country.LT)


@pytest.mark.parametrize("country", [Country.EE, Country.LT])
def test_underage_decision(engine, baltic_code, today, country):
    code = baltic_code(Gender.FEMALE, today)

    decision = engine.calculate_approved_loan(code, 10000, 60, country)

    assert decision.error_message == "Loans are not offered to people under age 18."
    assert decision.loan_amount is None
    assert decision.loan_period is None


def test_latvian_underage_decision(engine, latvian_code):
    decision = engine.calculate_approved_loan(latvian_code(date(2016, 12, 3)), 10000, 60, Country.LV)

    assert decision.error_message == "Loans are not offered to people under age 18."


def test_lifetime_exceeded_decision(engine, baltic_code):
    code = baltic_code(Gender.MALE, date(1920, 1, 1))

    decision = engine.calculate_approved_loan(code, 10000, 60, Country.LT)

    assert decision.error_message == "Your age exceeds the current expected lifetime in your country"


def test_payoff_exceeds_lifetime_decision(engine, latvian_code):
    decision = engine.calculate_approved_loan(latvian_code(date(1956, 1, 1)), 10000, 60, Country.LV)

    assert decision.error_message == (
        "Your age plus specified loan period exceeds expected 70 years "
        "life time in your country. Try to request smaller loan period"
    )


def test_decision_is_idempotent(engine):
    first = engine.calculate_approved_loan(SEGMENT_1_CODE, 4000, 12, Country.EE)
    second = engine.calculate_approved_loan(SEGMENT_1_CODE, 4000, 12, Country.EE)

    assert first == second


def test_decision_is_immutable():
    decision = Decision.approved(2000, 20)

    with pytest.raises(dataclasses.FrozenInstanceError):
        decision.loan_amount = 5000


def test_decision_requires_exactly_one_outcome():
    with pytest.raises(ValueError):
        Decision()

    with pytest.raises(ValueError):
        Decision(loan_amount=2000, loan_period=20, error_message="rejected")
