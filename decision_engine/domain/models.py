"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum

from decision_engine.config import Settings


class CountryCode(str, Enum):
    """Country designation derived from the first digit of a personal code"""

    ESTONIA = "EE"
    LATVIA = "LV"
    LITHUANIA = "LT"


@dataclass(frozen=True)
class Decision:
    """Approved loan: the largest amount available at the chosen period"""

    loan_amount: int
    loan_period: int


@dataclass(frozen=True)
class LoanPolicy:
    """Tunable bounds, segment thresholds and modifiers used by the engine"""

    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 48
    minimum_age: int = 18
    debtor_segment_ceiling: int = 2500
    segment_1_ceiling: int = 5000
    segment_2_ceiling: int = 7500
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoanPolicy":
        return cls(
            min_loan_amount=settings.min_loan_amount,
            max_loan_amount=settings.max_loan_amount,
            min_loan_period=settings.min_loan_period,
            max_loan_period=settings.max_loan_period,
            minimum_age=settings.minimum_age,
            debtor_segment_ceiling=settings.debtor_segment_ceiling,
            segment_1_ceiling=settings.segment_1_ceiling,
            segment_2_ceiling=settings.segment_2_ceiling,
            segment_1_credit_modifier=settings.segment_1_credit_modifier,
            segment_2_credit_modifier=settings.segment_2_credit_modifier,
            segment_3_credit_modifier=settings.segment_3_credit_modifier,
        )
