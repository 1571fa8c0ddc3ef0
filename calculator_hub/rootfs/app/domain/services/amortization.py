"""Shared amortization helpers.

Every loan calculator builds its schedule with the same loop: charge
interest on the balance, apply the payment, stop when the balance is
cleared or the period cap is reached.
"""

import calendar
from datetime import date, timedelta
from typing import Callable

from domain.value_objects import AmortizationEntry, PaymentFrequency

# Rates below this are treated as zero to avoid dividing by (1+r)^n - 1
ZERO_RATE_EPSILON = 1e-10

# Residual balances below this are absorbed into the final payment
BALANCE_EPSILON = 1e-6


def periodic_payment(principal: float, periodic_rate: float, periods: int) -> float:
    """Level payment that clears a loan in a number of periods.

    Args:
        principal: Amount borrowed
        periodic_rate: Interest rate per period as a fraction
        periods: Number of payments

    Returns:
        Payment per period, principal / periods when the rate is zero
    """
    if principal <= 0 or periods <= 0:
        return 0.0
    if abs(periodic_rate) < ZERO_RATE_EPSILON:
        return principal / periods
    growth = (1 + periodic_rate) ** periods
    return principal * periodic_rate * growth / (growth - 1)


def add_months(start: date, months: int) -> date:
    """Add calendar months, clamping the day to the end of the month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def payment_date(start: date, period: int, frequency: PaymentFrequency) -> date:
    """Calendar date of a payment, period 1 being one step after start."""
    if frequency == PaymentFrequency.WEEKLY:
        return start + timedelta(days=7 * period)
    if frequency == PaymentFrequency.BI_WEEKLY:
        return start + timedelta(days=14 * period)
    if frequency == PaymentFrequency.SEMI_MONTHLY:
        return start + timedelta(days=15 * period)
    if frequency == PaymentFrequency.DAILY:
        return start + timedelta(days=period)
    return add_months(start, period * 12 // frequency.periods_per_year)


def build_amortization_schedule(
    principal: float,
    periodic_rate: float,
    payment: float,
    max_periods: int,
    extra_payment: Callable[[int], float] | None = None,
    dates: Callable[[int], date] | None = None,
    include_opening_row: bool = False,
) -> list[AmortizationEntry]:
    """Amortize a balance until it is cleared or the period cap is hit.

    The final payment is reduced so the balance ends at exactly zero.
    The loop also stops early when a payment no longer covers the
    interest charged, since the balance would never shrink.

    Args:
        principal: Opening balance
        periodic_rate: Interest rate per period as a fraction
        payment: Scheduled payment per period
        max_periods: Hard cap on the number of periods
        extra_payment: Optional extra principal for a given period number
        dates: Optional function giving the date of a period number
        include_opening_row: Prepend a period 0 row with the opening balance

    Returns:
        Schedule rows in period order
    """
    balance = max(principal, 0.0)
    total_interest = 0.0
    total_principal = 0.0
    rows: list[AmortizationEntry] = []

    if include_opening_row:
        rows.append(AmortizationEntry(
            period=0,
            payment=0.0,
            principal=0.0,
            interest=0.0,
            balance=balance,
            total_interest=0.0,
            total_principal=0.0,
        ))

    period = 0
    while balance > BALANCE_EPSILON and period < max_periods:
        period += 1
        interest = balance * periodic_rate
        extra = max(extra_payment(period), 0.0) if extra_payment else 0.0
        scheduled_principal = payment - interest
        principal_paid = scheduled_principal + extra
        if principal_paid <= 0:
            break
        if principal_paid >= balance - BALANCE_EPSILON:
            principal_paid = balance

        balance = balance - principal_paid if principal_paid < balance else 0.0
        total_interest += interest
        total_principal += principal_paid

        rows.append(AmortizationEntry(
            period=period,
            payment=principal_paid + interest,
            principal=principal_paid,
            interest=interest,
            balance=balance,
            total_interest=total_interest,
            total_principal=total_principal,
            extra_payment=max(0.0, principal_paid - max(scheduled_principal, 0.0)),
            payment_date=dates(period) if dates else None,
        ))

    return rows
