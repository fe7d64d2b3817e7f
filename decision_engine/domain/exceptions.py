"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    default_message = "Loan decision failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdentityCodeError(DomainException):
    """Personal code fails validation or cannot be decoded"""

    default_message = "Invalid personal ID code!"


class InvalidAgeError(DomainException):
    """Applicant is too young, or too old for the requested period"""

    default_message = "Invalid age!"


class NoValidLoanError(DomainException):
    """Applicant is a debtor or no period yields the minimum loan amount"""

    default_message = "No valid loan found!"


class InvalidLoanAmountError(DomainException):
    """Requested amount is outside the configured bounds"""

    default_message = "Invalid loan amount!"


class InvalidLoanPeriodError(DomainException):
    """Requested period is outside the configured bounds"""

    default_message = "Invalid loan period!"
