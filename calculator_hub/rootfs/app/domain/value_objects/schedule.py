"""Schedule row value objects.

Immutable period records produced by the loan and growth projections.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AmortizationEntry:
    """One period of a loan amortization schedule.

    Attributes:
        period: Payment number (0 is the opening state when present)
        payment: Total paid this period, extra payment included
        principal: Portion of the payment that reduced the balance
        interest: Interest charged this period
        balance: Balance remaining after the payment
        total_interest: Interest paid so far
        total_principal: Principal repaid so far
        extra_payment: Extra principal paid this period
        payment_date: Calendar date of the payment, if a start date was given
    """

    period: int
    payment: float
    principal: float
    interest: float
    balance: float
    total_interest: float
    total_principal: float
    extra_payment: float = 0.0
    payment_date: date | None = None

    def __post_init__(self) -> None:
        """Validate schedule row values."""
        if self.period < 0:
            raise ValueError(f"period must be non-negative, got {self.period}")
        if self.balance < 0:
            raise ValueError(f"balance must be non-negative, got {self.balance}")


@dataclass(frozen=True)
class GrowthEntry:
    """One period of a savings or investment projection.

    Attributes:
        period: Period number (month or year depending on the calculator)
        contribution: Amount added this period
        interest: Interest earned this period
        balance: Balance at the end of the period
        total_contributions: Contributions so far, initial deposit included
        total_interest: Interest earned so far
        withdrawal: Amount withdrawn this period
        inflation_adjusted_balance: Balance in today's money, when inflation applies
    """

    period: int
    contribution: float
    interest: float
    balance: float
    total_contributions: float
    total_interest: float
    withdrawal: float = 0.0
    inflation_adjusted_balance: float | None = None

    def __post_init__(self) -> None:
        """Validate schedule row values."""
        if self.period < 0:
            raise ValueError(f"period must be non-negative, got {self.period}")


@dataclass(frozen=True)
class CreditCardEntry:
    """One month of a credit card repayment plan.

    Attributes:
        month: Month number (0 is the opening balance)
        payment: Amount paid this month
        interest: Interest charged this month
        principal: Portion of the payment that reduced the balance
        balance: Balance after the payment
        total_interest: Interest paid so far
        total_paid: Payments made so far
    """

    month: int
    payment: float
    interest: float
    principal: float
    balance: float
    total_interest: float
    total_paid: float

    def __post_init__(self) -> None:
        """Validate schedule row values."""
        if self.month < 0:
            raise ValueError(f"month must be non-negative, got {self.month}")
        if self.balance < 0:
            raise ValueError(f"balance must be non-negative, got {self.balance}")
