"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from loan_gateway.config import settings
from loan_gateway.domain.decision_engine import LoanDecisionEngine, LoanLimits
from loan_gateway.domain.eligibility import AgeEligibilityChecker
from loan_gateway.infrastructure.identity.registry import IdentityCodeRegistry


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache
def get_identity_code_registry() -> IdentityCodeRegistry:
    """Provide the shared, stateless identity code services"""
    return IdentityCodeRegistry()


def get_decision_engine() -> LoanDecisionEngine:
    """Provide a loan decision engine configured from settings"""
    limits = LoanLimits(
        min_amount=settings.min_loan_amount,
        max_amount=settings.max_loan_amount,
        min_period=settings.min_loan_period,
        max_period=settings.max_loan_period,
    )
    return LoanDecisionEngine(AgeEligibilityChecker(get_identity_code_registry()), limits)
