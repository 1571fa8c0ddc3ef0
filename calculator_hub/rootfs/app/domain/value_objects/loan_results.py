"""Loan calculation result value objects."""

from dataclasses import dataclass, field
from datetime import date

from .schedule import AmortizationEntry, CreditCardEntry


@dataclass(frozen=True)
class MortgageResult:
    """Result of a mortgage calculation.

    Attributes:
        loan_amount: Home price minus down payment
        monthly_payment: Principal and interest payment
        total_monthly_payment: Payment including tax, insurance and PMI
        total_payment: Sum of all principal and interest payments
        total_interest: Interest paid over the life of the loan
        number_of_payments: Number of rows in the schedule
        schedule: Month-by-month amortization
    """

    loan_amount: float
    monthly_payment: float
    monthly_property_tax: float
    monthly_insurance: float
    monthly_pmi: float
    total_monthly_payment: float
    total_payment: float
    total_interest: float
    number_of_payments: int
    schedule: tuple[AmortizationEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AmortizationResult:
    """Result of a general amortization or boat loan calculation.

    Attributes:
        loan_amount: Amount borrowed
        periodic_payment: Scheduled payment per period, extra excluded
        periods_per_year: Payment frequency
        scheduled_payments: Number of payments without extra payments
        actual_payments: Number of payments actually made
        total_payment: Sum of all payments
        total_interest: Interest paid
        interest_saved: Interest avoided thanks to extra payments
        payoff_date: Date of the last payment, if a start date was given
        schedule: Period-by-period amortization
    """

    loan_amount: float
    periodic_payment: float
    periods_per_year: int
    scheduled_payments: int
    actual_payments: int
    total_payment: float
    total_interest: float
    interest_saved: float
    payoff_date: date | None = None
    schedule: tuple[AmortizationEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CarLoanResult:
    """Result of a car loan calculation."""

    sales_tax: float
    loan_amount: float
    monthly_payment: float
    total_payment: float
    total_interest: float
    total_cost: float
    schedule: tuple[AmortizationEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RefinanceResult:
    """Comparison of a current loan against a refinanced one.

    Attributes:
        current_payment: Monthly payment on the current loan
        new_payment: Monthly payment on the new loan
        monthly_savings: current_payment - new_payment
        break_even_months: Months until savings repay closing costs (0 if never)
        current_total_interest: Interest left to pay on the current loan
        new_total_interest: Interest on the new loan
        lifetime_savings: Difference in total cost, closing costs included
    """

    current_payment: float
    new_payment: float
    monthly_savings: float
    break_even_months: int
    current_total_interest: float
    new_total_interest: float
    lifetime_savings: float


@dataclass(frozen=True)
class LoanPayoffResult:
    """Result of a loan payoff calculation.

    Attributes:
        payment: Payment per period used for the schedule
        periods_per_year: Payment frequency
        number_of_payments: Payments needed to clear the loan
        years_to_payoff: number_of_payments expressed in years
        total_payment: Sum of all payments
        total_interest: Interest paid
        repayable: False when the payment never covers the interest
        warning: Explanation when the loan is not repayable
        schedule: Period-by-period amortization
    """

    payment: float
    periods_per_year: int
    number_of_payments: int
    years_to_payoff: float
    total_payment: float
    total_interest: float
    repayable: bool = True
    warning: str | None = None
    schedule: tuple[AmortizationEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CreditCardResult:
    """Result of a credit card repayment plan.

    Attributes:
        minimum_payment: Minimum payment due on the opening balance
        first_payment: Payment made in the first month
        months_to_payoff: Months until the balance reaches zero
        total_interest: Interest paid
        total_payment: Sum of all payments
        paid_off: False when the iteration cap was hit first
        schedule: Month-by-month plan, month 0 is the opening balance
    """

    minimum_payment: float
    first_payment: float
    months_to_payoff: int
    total_interest: float
    total_payment: float
    paid_off: bool
    schedule: tuple[CreditCardEntry, ...] = field(default_factory=tuple)
