"""Configuration management using Pydantic Settings"""

from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-decision-engine"
    log_level: str = "INFO"

    # Loan bounds (whole currency units / months)
    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 48

    # Age restrictions
    minimum_age: int = 18

    # Credit segments: upper bounds (exclusive) on the last four digits of the code
    debtor_segment_ceiling: int = 2500
    segment_1_ceiling: int = 5000
    segment_2_ceiling: int = 7500

    # Credit modifiers per segment
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    # Expected lifetimes in years, keyed by country code (JSON in env)
    expected_lifetimes: Dict[str, int] = {"EE": 78, "LV": 75, "LT": 76}
    default_expected_lifetime: int = 75


settings = Settings()
