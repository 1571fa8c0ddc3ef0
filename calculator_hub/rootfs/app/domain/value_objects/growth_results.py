"""Savings, investment and retirement result value objects."""

from dataclasses import dataclass, field

from .schedule import GrowthEntry


@dataclass(frozen=True)
class SipResult:
    """Result of a systematic investment plan projection.

    Attributes:
        total_invested: Sum of all monthly contributions
        total_returns: Interest earned
        future_value: Value at the end of the horizon
        inflation_adjusted_value: Future value in today's money
        schedule: One row per year
    """

    total_invested: float
    total_returns: float
    future_value: float
    inflation_adjusted_value: float
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SavingsResult:
    """Result of a savings account projection."""

    final_balance: float
    total_deposits: float
    total_interest: float
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class InvestmentResult:
    """Result of an investment growth projection.

    Attributes:
        final_balance: Nominal balance at the end of the horizon
        total_contributions: Contributions, initial investment included
        total_interest: Growth earned
        inflation_adjusted_balance: Final balance in today's money
        after_tax_balance: Final balance with tax taken from the gains
        schedule: One row per year
    """

    final_balance: float
    total_contributions: float
    total_interest: float
    inflation_adjusted_balance: float
    after_tax_balance: float
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CompoundInterestResult:
    """Result of a compound interest projection with deposits and withdrawals.

    Attributes:
        final_balance: Balance at the end of the horizon
        total_deposits: Deposits made, principal excluded
        total_withdrawals: Withdrawals actually made
        total_interest: Interest earned
        effective_annual_rate: Annual yield in percent
        total_return_percent: Final balance relative to principal, in percent
        time_to_double_years: Years to double at the effective rate, if growing
        schedule: One row per year (the last row may be a partial year)
    """

    final_balance: float
    total_deposits: float
    total_withdrawals: float
    total_interest: float
    effective_annual_rate: float
    total_return_percent: float
    time_to_double_years: float | None
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MoneyMarketResult:
    """Result of a money market account projection."""

    final_balance: float
    total_contributions: float
    total_interest: float
    effective_annual_rate: float
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SavingsGoalResult:
    """Result of a savings goal calculation.

    Attributes:
        goal_reached: Whether the goal is reached within the month cap
        months_to_goal: Months needed at the given contribution, None if never
        required_monthly_contribution: Contribution needed to reach the goal
            within target_months
        target_months: Horizon used for the required contribution
        total_contributions: Contributions made until the goal, start included
        total_interest: Interest earned until the goal
        schedule: Monthly rows until the goal or the cap
    """

    goal_reached: bool
    months_to_goal: int | None
    required_monthly_contribution: float
    target_months: int
    total_contributions: float
    total_interest: float
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TimeToSaveResult:
    """Result of a how-long-to-save calculation."""

    reachable: bool
    months: int
    years: int
    remaining_months: int
    final_balance: float
    total_contributions: float
    total_interest: float
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RetirementPlanResult:
    """Result of a retirement savings plan.

    Attributes:
        years_to_retirement: Years between current and retirement age
        retirement_balance: Projected balance at retirement
        inflation_adjusted_balance: Retirement balance in today's money
        total_contributions: Contributions, current savings included
        total_interest: Growth earned
        annual_income: Yearly income at the chosen withdrawal rate
        monthly_income: annual_income / 12
        schedule: Year 0 is the current state, then one row per year
    """

    years_to_retirement: int
    retirement_balance: float
    inflation_adjusted_balance: float
    total_contributions: float
    total_interest: float
    annual_income: float
    monthly_income: float
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DrawdownResult:
    """Result of a how-long-will-my-money-last calculation.

    Attributes:
        lasts_forever: True when a year's interest covers its withdrawals
            and the balance has not dropped below the start
        months: Months simulated until depletion or the stop condition
        years: Whole years in months
        remaining_months: months modulo 12
        final_balance: Balance when the simulation stopped
        total_withdrawals: Money withdrawn
        total_interest: Interest earned
        schedule: Month 0 is the opening balance, then one row per month
    """

    lasts_forever: bool
    months: int
    years: int
    remaining_months: int
    final_balance: float
    total_withdrawals: float
    total_interest: float
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)
