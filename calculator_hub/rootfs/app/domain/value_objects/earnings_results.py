"""Earnings and everyday money result value objects."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PayRaiseResult:
    """New pay after a raise, expressed for every pay period."""

    raise_amount: float
    new_salary: float
    annual_salary: float
    monthly_salary: float
    biweekly_salary: float
    weekly_salary: float
    hourly_salary: float


@dataclass(frozen=True)
class PayBreakdown:
    """The same pay expressed per hour, day, week, fortnight, month and year."""

    hourly: float
    daily: float
    weekly: float
    biweekly: float
    monthly: float
    annual: float


@dataclass(frozen=True)
class OvertimeResult:
    """Pay for a week with regular, overtime and double time hours.

    Attributes:
        regular_pay: Regular hours at the base rate
        overtime_pay: Overtime hours at the overtime multiplier
        double_time_pay: Double time hours at the double time multiplier
        total_pay: Sum of the three
        total_hours: All hours worked
        effective_hourly_rate: total_pay / total_hours, 0 with no hours
    """

    regular_pay: float
    overtime_pay: float
    double_time_pay: float
    total_pay: float
    total_hours: float
    effective_hourly_rate: float


@dataclass(frozen=True)
class CashBackCategory:
    """Monthly spending and cash back in one spending category."""

    name: str
    monthly_spending: float
    rate: float
    monthly_cashback: float


@dataclass(frozen=True)
class CashBackResult:
    """Cash back earned on card spending.

    Attributes:
        monthly_cashback: Cash back per month
        annual_cashback: monthly_cashback * 12
        net_annual_cashback: annual_cashback minus the annual fee
        effective_rate: Cash back as a percentage of spending
        categories: Per-category breakdown, empty for a flat rate
    """

    monthly_cashback: float
    annual_cashback: float
    net_annual_cashback: float
    effective_rate: float
    categories: tuple[CashBackCategory, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MarginResult:
    """Profit at each level of the income statement and its margin in percent."""

    gross_profit: float
    gross_margin: float
    operating_profit: float
    operating_margin: float
    net_profit: float
    net_margin: float


@dataclass(frozen=True)
class DenominationCount:
    """Count of one note or coin denomination."""

    kind: str
    value: float
    count: int
    subtotal: float

    def __post_init__(self) -> None:
        if self.kind not in ("note", "coin"):
            raise ValueError(f"kind must be 'note' or 'coin', got {self.kind}")
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")


@dataclass(frozen=True)
class MoneyCountResult:
    """Total value of counted cash."""

    currency: str
    notes_total: float
    coins_total: float
    total: float
    pieces: int
    breakdown: tuple[DenominationCount, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PricePerAreaResult:
    """Property price per unit of floor area."""

    total_square_feet: float
    price_per_square_foot: float
    price_per_square_meter: float
