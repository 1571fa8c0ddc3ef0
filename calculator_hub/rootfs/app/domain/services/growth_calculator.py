"""Growth calculator service.

Domain service for savings and investment projections: SIP, savings
account, investment, compound interest, money market, savings goals and
time-to-save calculations.
"""

import logging
import math

from domain.value_objects import (
    CompoundingFrequency,
    CompoundInterestResult,
    DepositTiming,
    GrowthEntry,
    InvestmentResult,
    MoneyMarketResult,
    PaymentFrequency,
    SavingsGoalResult,
    SavingsResult,
    SipResult,
    TimeToSaveResult,
)

from .projection import effective_annual_rate, events_in_period, period_growth_rate

_LOGGER = logging.getLogger(__name__)

MAX_MONTHS = 600
MAX_YEARS = 100


class GrowthCalculator:
    """Project the growth of savings and investments.

    Rates are annual percentages. Each projection applies interest to
    the running balance period by period and records the running
    totals, so contributions plus interest always reconcile with the
    final balance.
    """

    def sip(
        self,
        monthly_investment: float,
        annual_return: float,
        years: int,
        inflation_rate: float = 0.0,
        annual_step_up: float = 0.0,
    ) -> SipResult:
        """Project a systematic investment plan.

        Each month the contribution is added and the month's return is
        earned on the balance including it. From the second year on the
        contribution grows by annual_step_up percent per year.

        Args:
            monthly_investment: Contribution in the first year
            annual_return: Expected return in percent
            years: Investment horizon
            inflation_rate: Inflation in percent, for the real value
            annual_step_up: Yearly contribution increase in percent

        Returns:
            Totals and one row per year
        """
        monthly_rate = annual_return / 100 / 12
        years = min(max(int(years), 0), MAX_YEARS)
        future_value = 0.0
        total_invested = 0.0
        total_returns = 0.0
        schedule = []

        for year in range(1, years + 1):
            contribution = monthly_investment * (1 + annual_step_up / 100) ** (year - 1)
            yearly_invested = 0.0
            yearly_returns = 0.0
            for _ in range(12):
                interest = (future_value + contribution) * monthly_rate
                future_value += contribution + interest
                yearly_invested += contribution
                yearly_returns += interest
            total_invested += yearly_invested
            total_returns += yearly_returns
            schedule.append(GrowthEntry(
                period=year,
                contribution=yearly_invested,
                interest=yearly_returns,
                balance=future_value,
                total_contributions=total_invested,
                total_interest=total_returns,
                inflation_adjusted_balance=future_value / (1 + inflation_rate / 100) ** year,
            ))

        return SipResult(
            total_invested=total_invested,
            total_returns=total_returns,
            future_value=future_value,
            inflation_adjusted_value=future_value / (1 + inflation_rate / 100) ** years,
            schedule=tuple(schedule),
        )

    def savings(
        self,
        initial_deposit: float,
        monthly_deposit: float,
        annual_rate: float,
        years: float,
        compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
    ) -> SavingsResult:
        """Project a savings account with monthly deposits.

        Interest accrues on the opening balance of each month, then the
        deposit is made at the end of the month.
        """
        monthly_rate = period_growth_rate(annual_rate / 100, compounding, 12)
        months = min(max(int(round(years * 12)), 0), MAX_MONTHS)
        balance = initial_deposit
        total_deposits = initial_deposit
        total_interest = 0.0
        schedule = []

        for month in range(1, months + 1):
            interest = balance * monthly_rate
            balance += interest + monthly_deposit
            total_deposits += monthly_deposit
            total_interest += interest
            schedule.append(GrowthEntry(
                period=month,
                contribution=monthly_deposit,
                interest=interest,
                balance=balance,
                total_contributions=total_deposits,
                total_interest=total_interest,
            ))

        return SavingsResult(
            final_balance=balance,
            total_deposits=total_deposits,
            total_interest=total_interest,
            schedule=tuple(schedule),
        )

    def investment(
        self,
        initial_investment: float,
        contribution: float,
        annual_return: float,
        years: int,
        contribution_frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
        compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
        contribution_increase: float = 0.0,
        inflation_rate: float = 0.0,
        tax_rate: float = 0.0,
    ) -> InvestmentResult:
        """Project an investment with recurring, yearly increasing contributions.

        Each compounding period earns interest on its opening balance,
        then receives the contributions that fall inside it.

        Args:
            initial_investment: Starting amount
            contribution: Amount per contribution in the first year
            annual_return: Expected return in percent
            years: Investment horizon
            contribution_frequency: How often contributions are made
            compounding: How often returns compound
            contribution_increase: Yearly contribution increase in percent
            inflation_rate: Inflation in percent
            tax_rate: Tax on gains in percent

        Returns:
            Nominal, real and after-tax balances with one row per year
        """
        if compounding == CompoundingFrequency.CONTINUOUSLY:
            compounding = CompoundingFrequency.DAILY
        compounds = compounding.periods_per_year
        contributions_per_year = contribution_frequency.periods_per_year
        rate = period_growth_rate(annual_return / 100, compounding, compounds)
        years = min(max(int(years), 0), MAX_YEARS)

        balance = initial_investment
        total_contributions = initial_investment
        total_interest = 0.0
        schedule = []

        for year in range(1, years + 1):
            per_contribution = contribution * (1 + contribution_increase / 100) ** (year - 1)
            yearly_contribution = 0.0
            yearly_interest = 0.0
            for period in range(1, compounds + 1):
                interest = balance * rate
                deposit = per_contribution * events_in_period(
                    period, contributions_per_year, compounds
                )
                balance += interest + deposit
                yearly_interest += interest
                yearly_contribution += deposit
            total_contributions += yearly_contribution
            total_interest += yearly_interest
            schedule.append(GrowthEntry(
                period=year,
                contribution=yearly_contribution,
                interest=yearly_interest,
                balance=balance,
                total_contributions=total_contributions,
                total_interest=total_interest,
                inflation_adjusted_balance=balance / (1 + inflation_rate / 100) ** year,
            ))

        gains = max(balance - total_contributions, 0.0)
        return InvestmentResult(
            final_balance=balance,
            total_contributions=total_contributions,
            total_interest=total_interest,
            inflation_adjusted_balance=balance / (1 + inflation_rate / 100) ** years,
            after_tax_balance=balance - gains * tax_rate / 100,
            schedule=tuple(schedule),
        )

    def compound_interest(
        self,
        principal: float,
        annual_rate: float,
        years: int,
        months: int = 0,
        compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
        deposit: float = 0.0,
        deposit_frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
        deposit_timing: DepositTiming = DepositTiming.END,
        deposit_increase: float = 0.0,
        withdrawal: float = 0.0,
        withdrawal_frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
        withdrawal_increase: float = 0.0,
    ) -> CompoundInterestResult:
        """Project compound interest with optional deposits and withdrawals.

        The projection steps through compounding periods (continuous
        compounding is stepped daily). Deposits made at the beginning of
        a period earn that period's interest; deposits at the end do not.
        Withdrawals come out at the end of a period and only when the
        balance covers them. Deposit and withdrawal amounts grow by
        their yearly increase percentages.

        Returns:
            Totals, effective annual rate, time to double and yearly rows
        """
        steps_per_year = compounding.periods_per_year or 365
        step_rate = period_growth_rate(annual_rate / 100, compounding, steps_per_year)
        total_months = min(max(int(years), 0) * 12 + max(int(months), 0), MAX_YEARS * 12)
        total_steps = int(round(total_months * steps_per_year / 12))
        deposits_per_year = deposit_frequency.periods_per_year if deposit > 0 else 0
        withdrawals_per_year = withdrawal_frequency.periods_per_year if withdrawal > 0 else 0

        balance = principal
        total_deposits = 0.0
        total_withdrawals = 0.0
        total_interest = 0.0
        year_deposits = year_withdrawals = year_interest = 0.0
        schedule = []

        for step in range(1, total_steps + 1):
            year_index = (step - 1) // steps_per_year
            step_in_year = (step - 1) % steps_per_year + 1
            deposit_now = deposit * (1 + deposit_increase / 100) ** year_index * events_in_period(
                step_in_year, deposits_per_year, steps_per_year
            )
            withdrawal_amount = withdrawal * (1 + withdrawal_increase / 100) ** year_index
            withdrawal_count = events_in_period(step_in_year, withdrawals_per_year, steps_per_year)

            if deposit_timing == DepositTiming.BEGINNING:
                balance += deposit_now
            interest = balance * step_rate
            balance += interest
            if deposit_timing == DepositTiming.END:
                balance += deposit_now

            withdrawn = 0.0
            for _ in range(withdrawal_count):
                if balance > withdrawal_amount:
                    balance -= withdrawal_amount
                    withdrawn += withdrawal_amount

            total_deposits += deposit_now
            total_withdrawals += withdrawn
            total_interest += interest
            year_deposits += deposit_now
            year_withdrawals += withdrawn
            year_interest += interest

            if step_in_year == steps_per_year or step == total_steps:
                schedule.append(GrowthEntry(
                    period=year_index + 1,
                    contribution=year_deposits,
                    interest=year_interest,
                    balance=balance,
                    total_contributions=principal + total_deposits,
                    total_interest=total_interest,
                    withdrawal=year_withdrawals,
                ))
                year_deposits = year_withdrawals = year_interest = 0.0

        effective = effective_annual_rate(annual_rate / 100, compounding)
        return CompoundInterestResult(
            final_balance=balance,
            total_deposits=total_deposits,
            total_withdrawals=total_withdrawals,
            total_interest=total_interest,
            effective_annual_rate=effective * 100,
            total_return_percent=(balance / principal - 1) * 100 if principal > 0 else 0.0,
            time_to_double_years=math.log(2) / math.log(1 + effective) if effective > 0 else None,
            schedule=tuple(schedule),
        )

    def money_market(
        self,
        initial_deposit: float,
        monthly_deposit: float,
        annual_rate: float,
        years: float,
        compounding: CompoundingFrequency = CompoundingFrequency.DAILY,
    ) -> MoneyMarketResult:
        """Project a money market account.

        The advertised rate is converted to its effective annual yield and
        credited monthly at a twelfth of that yield, after the month's
        deposit.
        """
        effective = effective_annual_rate(annual_rate / 100, compounding)
        monthly_rate = effective / 12
        months = min(max(int(round(years * 12)), 0), MAX_MONTHS)
        balance = initial_deposit
        total_contributions = initial_deposit
        total_interest = 0.0
        schedule = []

        for month in range(1, months + 1):
            balance += monthly_deposit
            interest = balance * monthly_rate
            balance += interest
            total_contributions += monthly_deposit
            total_interest += interest
            schedule.append(GrowthEntry(
                period=month,
                contribution=monthly_deposit,
                interest=interest,
                balance=balance,
                total_contributions=total_contributions,
                total_interest=total_interest,
            ))

        return MoneyMarketResult(
            final_balance=balance,
            total_contributions=total_contributions,
            total_interest=total_interest,
            effective_annual_rate=effective * 100,
            schedule=tuple(schedule),
        )

    def savings_goal(
        self,
        goal_amount: float,
        current_savings: float,
        monthly_contribution: float,
        annual_rate: float,
        target_months: int = 12,
        compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
    ) -> SavingsGoalResult:
        """Work out when a savings goal is reached and what it takes to reach it sooner.

        Each month the contribution is added, then interest is credited
        on compounding months at the periodic rate. The required
        contribution for target_months is solved exactly: the balance
        after N months is linear in the contribution, so two projections
        give the answer.

        Args:
            goal_amount: Amount to save
            current_savings: Amount already saved
            monthly_contribution: Planned monthly contribution
            annual_rate: Interest rate in percent
            target_months: Horizon for the required contribution
            compounding: MONTHLY, QUARTERLY or ANNUALLY crediting

        Returns:
            Months to goal, required contribution and monthly rows
        """
        if compounding not in (
            CompoundingFrequency.MONTHLY,
            CompoundingFrequency.QUARTERLY,
            CompoundingFrequency.ANNUALLY,
        ):
            compounding = CompoundingFrequency.MONTHLY
        compounds = compounding.periods_per_year
        months_per_compound = 12 // compounds
        periodic_rate = annual_rate / 100 / compounds

        def project(contribution: float, months: int, stop_at_goal: bool) -> list[GrowthEntry]:
            balance = current_savings
            total_contributions = current_savings
            total_interest = 0.0
            rows = []
            for month in range(1, months + 1):
                if stop_at_goal and balance >= goal_amount:
                    break
                balance += contribution
                interest = balance * periodic_rate if month % months_per_compound == 0 else 0.0
                balance += interest
                total_contributions += contribution
                total_interest += interest
                rows.append(GrowthEntry(
                    period=month,
                    contribution=contribution,
                    interest=interest,
                    balance=balance,
                    total_contributions=total_contributions,
                    total_interest=total_interest,
                ))
            return rows

        target_months = min(max(int(target_months), 1), MAX_MONTHS)
        without_contributions = project(0.0, target_months, stop_at_goal=False)
        with_unit = project(1.0, target_months, stop_at_goal=False)
        base = without_contributions[-1].balance
        per_unit = with_unit[-1].balance - base
        required = max((goal_amount - base) / per_unit, 0.0) if per_unit > 0 else 0.0

        if current_savings >= goal_amount:
            schedule: list[GrowthEntry] = []
            goal_reached, months_to_goal = True, 0
        else:
            schedule = project(monthly_contribution, MAX_MONTHS, stop_at_goal=True)
            goal_reached = bool(schedule) and schedule[-1].balance >= goal_amount
            months_to_goal = len(schedule) if goal_reached else None

        return SavingsGoalResult(
            goal_reached=goal_reached,
            months_to_goal=months_to_goal,
            required_monthly_contribution=required,
            target_months=target_months,
            total_contributions=schedule[-1].total_contributions if schedule else current_savings,
            total_interest=schedule[-1].total_interest if schedule else 0.0,
            schedule=tuple(schedule),
        )

    def time_to_save(
        self,
        target_amount: float,
        initial_amount: float,
        contribution: float,
        annual_rate: float,
        contribution_frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
        compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
    ) -> TimeToSaveResult:
        """Count the months needed to reach a savings target.

        Contributions falling in a month are added first, then the
        month's interest is credited. Stops at the target or after 600
        months, in which case the target is reported unreachable.
        """
        monthly_rate = period_growth_rate(annual_rate / 100, compounding, 12)
        contributions_per_year = contribution_frequency.periods_per_year
        balance = initial_amount
        total_contributions = initial_amount
        total_interest = 0.0
        schedule = []
        month = 0

        while balance < target_amount and month < MAX_MONTHS:
            month += 1
            deposit = contribution * events_in_period(month, contributions_per_year, 12)
            balance += deposit
            interest = balance * monthly_rate
            balance += interest
            total_contributions += deposit
            total_interest += interest
            schedule.append(GrowthEntry(
                period=month,
                contribution=deposit,
                interest=interest,
                balance=balance,
                total_contributions=total_contributions,
                total_interest=total_interest,
            ))

        reachable = balance >= target_amount
        if not reachable:
            _LOGGER.info("Target %.2f not reached within %d months", target_amount, MAX_MONTHS)

        return TimeToSaveResult(
            reachable=reachable,
            months=month,
            years=month // 12,
            remaining_months=month % 12,
            final_balance=balance,
            total_contributions=total_contributions,
            total_interest=total_interest,
            schedule=tuple(schedule),
        )
