"""Unit tests for age restrictions and the expected lifetime table"""

import pytest
from decision_engine.domain.engine import check_age_window
from decision_engine.domain.exceptions import InvalidAgeError
from decision_engine.domain.lifetime import ExpectedLifetimeTable
from decision_engine.domain.models import CountryCode, LoanPolicy


def test_minimum_age_boundary(policy, lifetime_table):
    check_age_window(18, CountryCode.LITHUANIA, 24, policy, lifetime_table)

    with pytest.raises(InvalidAgeError) as exc_info:
        check_age_window(17, CountryCode.LITHUANIA, 24, policy, lifetime_table)
    assert "at least 18 years old" in str(exc_info.value)


def test_estonian_senior_boundary(policy, lifetime_table):
    """Estonia 78, 24 months (2 years) -> maximum age 76"""
    check_age_window(76, CountryCode.ESTONIA, 24, policy, lifetime_table)

    with pytest.raises(InvalidAgeError) as exc_info:
        check_age_window(77, CountryCode.ESTONIA, 24, policy, lifetime_table)
    assert "over 76 years old" in str(exc_info.value)


@pytest.mark.parametrize(
    "country, too_old",
    [
        (CountryCode.LATVIA, 74),  # 75 - 2
        (CountryCode.LITHUANIA, 75),  # 76 - 2
    ],
)
def test_senior_customer_rejected(country, too_old, policy, lifetime_table):
    check_age_window(too_old - 1, country, 24, policy, lifetime_table)

    with pytest.raises(InvalidAgeError):
        check_age_window(too_old, country, 24, policy, lifetime_table)


@pytest.mark.parametrize(
    "period_months, max_age",
    [
        (12, 77),
        (13, 76),
        (24, 76),
        (25, 75),
        (48, 74),
    ],
)
def test_partial_years_round_up(period_months, max_age, policy, lifetime_table):
    check_age_window(max_age, CountryCode.ESTONIA, period_months, policy, lifetime_table)

    with pytest.raises(InvalidAgeError):
        check_age_window(max_age + 1, CountryCode.ESTONIA, period_months, policy, lifetime_table)


def test_configured_minimum_age(lifetime_table):
    policy = LoanPolicy(minimum_age=21)
    with pytest.raises(InvalidAgeError):
        check_age_window(20, CountryCode.LATVIA, 12, policy, lifetime_table)


def test_lifetime_table_defaults():
    table = ExpectedLifetimeTable()
    assert table.lookup(CountryCode.ESTONIA) == 78
    assert table.lookup(CountryCode.LATVIA) == 75
    assert table.lookup(CountryCode.LITHUANIA) == 76


def test_lifetime_table_accepts_plain_codes():
    assert ExpectedLifetimeTable().lookup("EE") == 78


def test_lifetime_table_falls_back_to_default():
    table = ExpectedLifetimeTable(lifetimes={"EE": 80}, default=70)
    assert table.lookup(CountryCode.ESTONIA) == 80
    assert table.lookup(CountryCode.LATVIA) == 70
    assert table.lookup("FI") == 70


def test_custom_lifetime_table_changes_ceiling(policy):
    table = ExpectedLifetimeTable(lifetimes={"LV": 90})
    check_age_window(85, CountryCode.LATVIA, 48, policy, table)
