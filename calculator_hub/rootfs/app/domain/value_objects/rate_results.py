"""Rate and return result value objects."""

from dataclasses import dataclass, field

from .schedule import GrowthEntry


@dataclass(frozen=True)
class ApyComparison:
    """Annual yield of a nominal rate under one compounding frequency."""

    compounding: str
    apy: float


@dataclass(frozen=True)
class ApyResult:
    """Result of an APY calculation.

    Attributes:
        apy: Annual percentage yield in percent
        final_balance: Principal grown at the APY over the horizon
        interest_earned: final_balance - principal
        comparison: APY for every compounding frequency
    """

    apy: float
    final_balance: float
    interest_earned: float
    comparison: tuple[ApyComparison, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ProjectionPoint:
    """Value of an investment at the end of a year."""

    year: int
    value: float


@dataclass(frozen=True)
class CagrResult:
    """Result of a compound annual growth rate calculation.

    Attributes:
        cagr: Compound annual growth rate in percent
        total_growth: Overall growth in percent
        multiplier: final_value / initial_value
        projection: Value at the end of each year at the CAGR
    """

    cagr: float
    total_growth: float
    multiplier: float
    projection: tuple[ProjectionPoint, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class IrrResult:
    """Result of an internal rate of return calculation.

    Attributes:
        irr: Internal rate of return in percent, None when it cannot be found
        npv: Net present value at discount_rate
        discount_rate: Rate used for npv, in percent
        warning: Non-fatal remark about the cash flows
        error: Why irr could not be computed
    """

    irr: float | None
    npv: float
    discount_rate: float
    warning: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class InterestRateResult:
    """Result of solving for the rate that reaches a target balance.

    Attributes:
        annual_rate: Required nominal annual rate in percent, None on error
        final_balance: Balance reached at that rate
        total_contributions: Contributions, initial amount included
        total_interest: Interest earned
        error: Why no rate could be found
        schedule: One row per year at the solved rate
    """

    annual_rate: float | None
    final_balance: float
    total_contributions: float
    total_interest: float
    error: str | None = None
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SimpleInterestResult:
    """Result of a simple interest calculation, with the solved variable filled in."""

    principal: float
    annual_rate: float
    years: float
    interest: float
    total_amount: float
    schedule: tuple[GrowthEntry, ...] = field(default_factory=tuple)
