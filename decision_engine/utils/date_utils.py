"""Date manipulation utilities"""

from datetime import date


def full_years_between(start: date, end: date) -> int:
    """Whole calendar years elapsed from start to end (age in full years)"""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def months_to_years(months: int) -> int:
    """Loan period in years, rounding any partial year up"""
    return -(-months // 12)
