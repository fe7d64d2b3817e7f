"""Loan decision engine - eligibility checks and maximum loan search"""

from datetime import date

from decision_engine.config import Settings
from decision_engine.domain.exceptions import (
    InvalidAgeError,
    InvalidIdentityCodeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    NoValidLoanError,
)
from decision_engine.domain.identity import (
    EstonianPersonalCodeValidator,
    IdentityValidator,
    calculate_age,
    decode_birth_date,
    decode_country,
    decode_segment,
)
from decision_engine.domain.lifetime import ExpectedLifetimeTable
from decision_engine.domain.models import CountryCode, Decision, LoanPolicy
from decision_engine.utils.date_utils import months_to_years


def credit_modifier(personal_code: str, policy: LoanPolicy) -> int:
    """
    Map the last four digits of the personal code to a credit modifier.

    Segments (defaults):
    - 0000 - 2499: 0 (debtor, no loan)
    - 2500 - 4999: segment 1
    - 5000 - 7499: segment 2
    - 7500+:       segment 3
    """
    segment = decode_segment(personal_code)

    if segment < policy.debtor_segment_ceiling:
        return 0
    elif segment < policy.segment_1_ceiling:
        return policy.segment_1_credit_modifier
    elif segment < policy.segment_2_ceiling:
        return policy.segment_2_credit_modifier
    else:
        return policy.segment_3_credit_modifier


def check_age_window(
    age: int,
    country: CountryCode,
    loan_period: int,
    policy: LoanPolicy,
    lifetime_table: ExpectedLifetimeTable,
) -> None:
    """
    Reject applicants under the minimum age, or too old to outlive the loan.

    The ceiling is the country's expected lifetime minus the loan period in
    whole years (partial years round up).

    Raises:
        InvalidAgeError: If age falls outside the window
    """
    if age < policy.minimum_age:
        raise InvalidAgeError(
            f"Customer must be at least {policy.minimum_age} years old to apply for a loan."
        )

    expected_lifetime = lifetime_table.lookup(country)
    max_age = expected_lifetime - months_to_years(loan_period)

    if age > max_age:
        raise InvalidAgeError(
            "Based on the expected lifetime in your country, "
            f"we cannot offer loans with this period to customers over {max_age} years old."
        )


def validate_loan_bounds(loan_amount: int, loan_period: int, policy: LoanPolicy) -> None:
    """Amount first, then period; both bounds are inclusive"""
    if not policy.min_loan_amount <= loan_amount <= policy.max_loan_amount:
        raise InvalidLoanAmountError()

    if not policy.min_loan_period <= loan_period <= policy.max_loan_period:
        raise InvalidLoanPeriodError()


def find_max_loan(modifier: int, loan_period: int, policy: LoanPolicy) -> Decision:
    """
    Find the largest approvable loan, extending the period if needed.

    Capacity grows linearly with the period (modifier * period). Starting at
    the requested period, the period is extended one month at a time until
    capacity reaches the minimum loan amount. The period never shrinks.

    Raises:
        NoValidLoanError: If no period up to the maximum clears the minimum amount
    """
    period = loan_period
    while modifier * period < policy.min_loan_amount and period <= policy.max_loan_period:
        period += 1

    if period > policy.max_loan_period:
        raise NoValidLoanError()

    return Decision(
        loan_amount=min(policy.max_loan_amount, modifier * period),
        loan_period=period,
    )


class DecisionEngine:
    """
    Stateless loan decision engine.

    Collaborators are injected once and never mutated, so a single instance
    may serve concurrent callers.
    """

    def __init__(
        self,
        policy: LoanPolicy | None = None,
        validator: IdentityValidator | None = None,
        lifetime_table: ExpectedLifetimeTable | None = None,
    ):
        self.policy = policy or LoanPolicy()
        self.validator = validator or EstonianPersonalCodeValidator()
        self.lifetime_table = lifetime_table or ExpectedLifetimeTable()

    @classmethod
    def from_settings(cls, settings: Settings) -> "DecisionEngine":
        return cls(
            policy=LoanPolicy.from_settings(settings),
            lifetime_table=ExpectedLifetimeTable.from_settings(settings),
        )

    def evaluate(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int,
        today: date | None = None,
    ) -> Decision:
        """
        Main entry point: decide the maximum loan for a personal code.

        Check order (each may short-circuit the rest):
        1. Personal code validity
        2. Age window for the requested period
        3. Debtor segment
        4. Amount bounds, then period bounds
        5. Maximum loan search

        Raises:
            InvalidIdentityCodeError, InvalidAgeError, NoValidLoanError,
            InvalidLoanAmountError, InvalidLoanPeriodError
        """
        if not self.validator.is_valid(personal_code):
            raise InvalidIdentityCodeError()

        age = calculate_age(decode_birth_date(personal_code), today)
        check_age_window(age, decode_country(personal_code), loan_period, self.policy, self.lifetime_table)

        modifier = credit_modifier(personal_code, self.policy)
        if modifier == 0:
            raise NoValidLoanError()

        validate_loan_bounds(loan_amount, loan_period, self.policy)

        return find_max_loan(modifier, loan_period, self.policy)
