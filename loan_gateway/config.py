"""Configuration management using Pydantic Settings"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_gateway.domain.constants import (
    MAXIMUM_LOAN_AMOUNT,
    MAXIMUM_LOAN_PERIOD,
    MINIMUM_LOAN_AMOUNT,
    MINIMUM_LOAN_PERIOD,
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"

    # Offered loan range (EUR / months)
    min_loan_amount: int = MINIMUM_LOAN_AMOUNT
    max_loan_amount: int = MAXIMUM_LOAN_AMOUNT
    min_loan_period: int = MINIMUM_LOAN_PERIOD
    max_loan_period: int = MAXIMUM_LOAN_PERIOD

    @model_validator(mode="after")
    def check_loan_bounds(self) -> "Settings":
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError("min_loan_amount must not exceed max_loan_amount")
        if self.min_loan_period > self.max_loan_period:
            raise ValueError("min_loan_period must not exceed max_loan_period")
        return self


settings = Settings()
