"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable
from fastapi.testclient import TestClient

from loan_gateway.api.dependencies import get_decision_engine
from loan_gateway.api.main import create_app
from loan_gateway.domain.decision_engine import LoanDecisionEngine
from loan_gateway.domain.eligibility import AgeEligibilityChecker
from loan_gateway.domain.models import Gender
from loan_gateway.infrastructure.identity.baltic import calc_check_digit
from loan_gateway.infrastructure.identity.latvia import LatvianIdentityCodeService
from loan_gateway.infrastructure.identity.registry import IdentityCodeRegistry

# All age arithmetic in tests is pinned to this date
TODAY = date(2024, 6, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def registry() -> IdentityCodeRegistry:
    return IdentityCodeRegistry()


@pytest.fixture
def age_checker(registry: IdentityCodeRegistry) -> AgeEligibilityChecker:
    """Age checker with a fixed clock"""
    return AgeEligibilityChecker(registry, clock=lambda: TODAY)


@pytest.fixture
def engine(age_checker: AgeEligibilityChecker) -> LoanDecisionEngine:
    return LoanDecisionEngine(age_checker)


@pytest.fixture
def client(engine: LoanDecisionEngine) -> TestClient:
    """Create FastAPI test client using the fixed-clock engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)


@pytest.fixture
def baltic_code() -> Callable[..., str]:
    """Build a valid Estonian/Lithuanian code for a gender and birth date"""

    def build(gender: Gender, birth_date: date, serial: int = 274) -> str:
        century_offset = {1800: 1, 1900: 3, 2000: 5}[birth_date.year // 100 * 100]
        first = century_offset + (1 if gender == Gender.FEMALE else 0)
        digits = f"{first}{birth_date:%y%m%d}{serial:03d}"
        return digits + str(calc_check_digit(digits))

    return build


@pytest.fixture
def latvian_code() -> Callable[..., str]:
    """Build a valid legacy Latvian code for a birth date"""
    service = LatvianIdentityCodeService()

    def build(birth_date: date, serial: int = 274) -> str:
        century = {1800: 0, 1900: 1, 2000: 2}[birth_date.year // 100 * 100]
        digits = f"{birth_date:%d%m%y}{century}{serial:03d}"
        return digits + str(service.calc_check_digit(digits))

    return build
