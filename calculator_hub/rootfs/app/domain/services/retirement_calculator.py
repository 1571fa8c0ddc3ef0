"""Retirement calculator service.

Domain service for retirement savings plans and for drawdown, i.e. how
long a balance lasts under regular withdrawals.
"""

import logging

from domain.value_objects import (
    CompoundingFrequency,
    DrawdownResult,
    GrowthEntry,
    PaymentFrequency,
    RetirementPlanResult,
)

from .projection import events_in_period, period_growth_rate

_LOGGER = logging.getLogger(__name__)

MAX_DRAWDOWN_MONTHS = 1200
MAX_PLAN_YEARS = 100


class RetirementCalculator:
    """Project retirement savings and withdrawals."""

    def plan(
        self,
        current_age: int,
        retirement_age: int,
        current_savings: float,
        annual_contribution: float,
        annual_return: float,
        inflation_rate: float = 0.0,
        withdrawal_rate: float = 4.0,
    ) -> RetirementPlanResult:
        """Project savings up to retirement.

        Year 0 is today's balance. Every following year earns the
        expected return on its opening balance and receives the annual
        contribution. An empty result is returned when the retirement
        age is not after the current age.

        Args:
            current_age: Age today
            retirement_age: Age at retirement
            current_savings: Savings today
            annual_contribution: Amount saved each year
            annual_return: Expected yearly return in percent
            inflation_rate: Yearly inflation in percent
            withdrawal_rate: Share of the balance withdrawn each year in retirement

        Returns:
            Balance at retirement, income it supports and yearly rows
        """
        years = min(int(retirement_age) - int(current_age), MAX_PLAN_YEARS)
        if years <= 0:
            return RetirementPlanResult(
                years_to_retirement=0,
                retirement_balance=0.0,
                inflation_adjusted_balance=0.0,
                total_contributions=0.0,
                total_interest=0.0,
                annual_income=0.0,
                monthly_income=0.0,
            )

        balance = current_savings
        total_contributions = current_savings
        total_interest = 0.0
        schedule = [GrowthEntry(
            period=0,
            contribution=0.0,
            interest=0.0,
            balance=balance,
            total_contributions=total_contributions,
            total_interest=0.0,
        )]

        for year in range(1, years + 1):
            interest = balance * annual_return / 100
            balance += interest + annual_contribution
            total_contributions += annual_contribution
            total_interest += interest
            schedule.append(GrowthEntry(
                period=year,
                contribution=annual_contribution,
                interest=interest,
                balance=balance,
                total_contributions=total_contributions,
                total_interest=total_interest,
                inflation_adjusted_balance=balance / (1 + inflation_rate / 100) ** year,
            ))

        annual_income = balance * withdrawal_rate / 100
        return RetirementPlanResult(
            years_to_retirement=years,
            retirement_balance=balance,
            inflation_adjusted_balance=balance / (1 + inflation_rate / 100) ** years,
            total_contributions=total_contributions,
            total_interest=total_interest,
            annual_income=annual_income,
            monthly_income=annual_income / 12,
            schedule=tuple(schedule),
        )

    def drawdown(
        self,
        initial_balance: float,
        withdrawal_amount: float,
        annual_rate: float,
        withdrawal_frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
        compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
        inflation_rate: float = 0.0,
        adjust_for_inflation: bool = False,
    ) -> DrawdownResult:
        """Work out how long a balance lasts under regular withdrawals.

        Each month the withdrawals falling in it are taken (never more
        than the balance), then the month's interest is credited. With
        inflation adjustment the withdrawal grows by a twelfth of the
        yearly inflation rate every month after the first. The loop
        stops when the balance is gone, after 1200 months, or at a year
        end where that year's interest covered its withdrawals and the
        balance is back at or above its start (the money lasts forever).

        Returns:
            Duration, totals and monthly rows starting with month 0
        """
        monthly_rate = period_growth_rate(annual_rate / 100, compounding, 12)
        monthly_inflation = inflation_rate / 100 / 12 if adjust_for_inflation else 0.0
        withdrawals_per_year = withdrawal_frequency.periods_per_year

        balance = initial_balance
        current_withdrawal = withdrawal_amount
        total_withdrawals = 0.0
        total_interest = 0.0
        year_interest = 0.0
        year_withdrawals = 0.0
        lasts_forever = False
        schedule = [GrowthEntry(
            period=0,
            contribution=0.0,
            interest=0.0,
            balance=balance,
            total_contributions=initial_balance,
            total_interest=0.0,
        )]

        month = 0
        while balance > 0 and month < MAX_DRAWDOWN_MONTHS:
            month += 1
            if month > 1:
                current_withdrawal *= 1 + monthly_inflation

            withdrawn = 0.0
            for _ in range(events_in_period(month, withdrawals_per_year, 12)):
                amount = min(current_withdrawal, balance)
                balance -= amount
                withdrawn += amount

            interest = balance * monthly_rate
            balance += interest
            total_withdrawals += withdrawn
            total_interest += interest
            year_interest += interest
            year_withdrawals += withdrawn

            schedule.append(GrowthEntry(
                period=month,
                contribution=0.0,
                interest=interest,
                balance=balance,
                total_contributions=initial_balance,
                total_interest=total_interest,
                withdrawal=withdrawn,
            ))

            if month % 12 == 0:
                if (
                    month > 12
                    and year_interest >= year_withdrawals
                    and balance >= initial_balance
                ):
                    lasts_forever = True
                    break
                year_interest = 0.0
                year_withdrawals = 0.0

        _LOGGER.debug(
            "Drawdown of %.2f: %d months, forever=%s", initial_balance, month, lasts_forever
        )

        return DrawdownResult(
            lasts_forever=lasts_forever,
            months=month,
            years=month // 12,
            remaining_months=month % 12,
            final_balance=balance,
            total_withdrawals=total_withdrawals,
            total_interest=total_interest,
            schedule=tuple(schedule),
        )
