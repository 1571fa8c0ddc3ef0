"""Credit card repayment service.

Domain service that projects month-by-month repayment of a credit card
balance under one of several payment strategies.
"""

import logging

from domain.value_objects import (
    CreditCardEntry,
    CreditCardResult,
    MinimumPaymentType,
    RepaymentStrategy,
)

_LOGGER = logging.getLogger(__name__)

MAX_MONTHS = 600

# Below this monthly rate the fixed-period payment is balance / months
FIXED_PERIOD_RATE_EPSILON = 0.0001

# Balances below one cent are cleared by the final payment
CENT = 0.01


class CreditCardCalculator:
    """Project credit card repayment under different strategies.

    Strategies:
    - MINIMUM: pay the minimum due, recomputed on each month's balance
    - MINIMUM_PLUS: pay the minimum due plus a fixed additional amount
    - FIXED_AMOUNT: pay the additional amount every month
    - FIXED_PERIOD: pay the level amount that clears the card in N months
    - FIXED_PAYMENT: pay a chosen target amount every month

    Every payment is at least the month's interest plus one unit of
    currency, so the balance always shrinks.
    """

    def minimum_payment(
        self,
        balance: float,
        payment_type: MinimumPaymentType,
        minimum_percent: float,
        minimum_amount: float,
    ) -> float:
        """Minimum payment due on a balance.

        Args:
            balance: Current balance
            payment_type: PERCENTAGE or FIXED
            minimum_percent: Percentage of the balance due (PERCENTAGE type)
            minimum_amount: Floor for PERCENTAGE, flat amount for FIXED

        Returns:
            The minimum payment
        """
        if payment_type == MinimumPaymentType.PERCENTAGE:
            return max(balance * minimum_percent / 100, minimum_amount)
        return min(minimum_amount, balance)

    def fixed_period_payment(self, balance: float, months: int, annual_rate: float) -> float:
        """Level monthly payment that clears a balance in a number of months."""
        if months <= 0:
            return balance
        monthly_rate = annual_rate / 100 / 12
        if monthly_rate < FIXED_PERIOD_RATE_EPSILON:
            return balance / months
        return monthly_rate * balance / (1 - (1 + monthly_rate) ** -months)

    def repayment_plan(
        self,
        balance: float,
        annual_rate: float,
        strategy: RepaymentStrategy = RepaymentStrategy.MINIMUM,
        payment_type: MinimumPaymentType = MinimumPaymentType.PERCENTAGE,
        minimum_percent: float = 2.0,
        minimum_amount: float = 25.0,
        additional_payment: float = 0.0,
        target_months: int = 24,
        target_payment: float = 0.0,
    ) -> CreditCardResult:
        """Build a month-by-month repayment plan.

        Args:
            balance: Opening balance
            annual_rate: APR in percent
            strategy: Repayment strategy
            payment_type: How the minimum payment is computed
            minimum_percent: Percentage of the balance due each month
            minimum_amount: Minimum payment floor or flat amount
            additional_payment: Extra amount for MINIMUM_PLUS, the payment
                for FIXED_AMOUNT
            target_months: Payoff horizon for FIXED_PERIOD
            target_payment: Monthly payment for FIXED_PAYMENT

        Returns:
            Plan with totals and a schedule whose month 0 is the opening balance
        """
        monthly_rate = annual_rate / 100 / 12
        opening_minimum = self.minimum_payment(
            balance, payment_type, minimum_percent, minimum_amount
        )

        if strategy == RepaymentStrategy.FIXED_AMOUNT:
            planned = additional_payment
        elif strategy == RepaymentStrategy.FIXED_PERIOD:
            planned = self.fixed_period_payment(balance, target_months, annual_rate)
        elif strategy == RepaymentStrategy.FIXED_PAYMENT:
            planned = target_payment
        else:
            planned = 0.0

        remaining = max(balance, 0.0)
        total_interest = 0.0
        total_paid = 0.0
        schedule = [CreditCardEntry(
            month=0,
            payment=0.0,
            interest=0.0,
            principal=0.0,
            balance=remaining,
            total_interest=0.0,
            total_paid=0.0,
        )]

        month = 1
        while remaining > 0 and month <= MAX_MONTHS:
            interest = remaining * monthly_rate
            if strategy == RepaymentStrategy.MINIMUM:
                payment = self.minimum_payment(
                    remaining, payment_type, minimum_percent, minimum_amount
                )
            elif strategy == RepaymentStrategy.MINIMUM_PLUS:
                payment = self.minimum_payment(
                    remaining, payment_type, minimum_percent, minimum_amount
                ) + additional_payment
            else:
                payment = planned

            payment = max(payment, interest + 1)
            if payment > remaining + interest or remaining + interest - payment < CENT:
                payment = remaining + interest

            principal = payment - interest
            remaining = max(remaining - principal, 0.0)
            total_interest += interest
            total_paid += payment

            schedule.append(CreditCardEntry(
                month=month,
                payment=payment,
                interest=interest,
                principal=principal,
                balance=remaining,
                total_interest=total_interest,
                total_paid=total_paid,
            ))
            month += 1

        paid_off = remaining == 0
        if not paid_off:
            _LOGGER.warning(
                "Credit card balance %.2f not cleared within %d months", balance, MAX_MONTHS
            )

        return CreditCardResult(
            minimum_payment=opening_minimum,
            first_payment=schedule[1].payment if len(schedule) > 1 else 0.0,
            months_to_payoff=len(schedule) - 1,
            total_interest=total_interest,
            total_payment=total_paid,
            paid_off=paid_off,
            schedule=tuple(schedule),
        )
