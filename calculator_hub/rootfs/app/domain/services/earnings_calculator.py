"""Earnings calculator service.

Domain service for pay, overtime, cash back, margins, counting cash and
price per square foot.
"""

from typing import Mapping, Sequence

from domain.value_objects import (
    CashBackCategory,
    CashBackResult,
    DenominationCount,
    MarginResult,
    MoneyCountResult,
    MoneyCurrency,
    OvertimeResult,
    PayBreakdown,
    PayRaiseResult,
    PricePerAreaResult,
    RaiseType,
    SalaryPeriod,
    parse_int,
    parse_number,
)

WEEKS_PER_YEAR = 52
SQUARE_FEET_PER_SQUARE_METER = 10.7639

# Notes and coins in circulation, largest first
DENOMINATIONS: dict[MoneyCurrency, dict[str, tuple[float, ...]]] = {
    MoneyCurrency.USD: {
        "note": (100, 50, 20, 10, 5, 2, 1),
        "coin": (1, 0.5, 0.25, 0.1, 0.05, 0.01),
    },
    MoneyCurrency.EUR: {
        "note": (500, 200, 100, 50, 20, 10, 5),
        "coin": (2, 1, 0.5, 0.2, 0.1, 0.05, 0.02, 0.01),
    },
    MoneyCurrency.GBP: {
        "note": (50, 20, 10, 5),
        "coin": (2, 1, 0.5, 0.2, 0.1, 0.05, 0.02, 0.01),
    },
    MoneyCurrency.INR: {
        "note": (2000, 500, 200, 100, 50, 20, 10, 5, 2, 1),
        "coin": (10, 5, 2, 1, 0.5),
    },
}


class EarningsCalculator:
    """Calculate pay and everyday money figures."""

    def pay_raise(
        self,
        current_salary: float,
        raise_type: RaiseType = RaiseType.PERCENTAGE,
        raise_percent: float = 0.0,
        raise_amount: float = 0.0,
        period: SalaryPeriod = SalaryPeriod.YEARLY,
        hours_per_week: float = 40.0,
    ) -> PayRaiseResult:
        """Apply a raise and express the new pay for every period.

        Args:
            current_salary: Pay per period before the raise
            raise_type: Percentage of the salary or a flat amount
            raise_percent: Raise in percent, for the percentage type
            raise_amount: Raise per period, for the amount type
            period: Period current_salary and raise_amount refer to
            hours_per_week: Hours worked, for hourly conversion

        Returns:
            The raise and the new pay per year, month, fortnight, week and hour
        """
        if raise_type == RaiseType.PERCENTAGE:
            raise_total = current_salary * raise_percent / 100
        else:
            raise_total = raise_amount
        new_salary = current_salary + raise_total

        annual = new_salary * _periods_per_year(period, hours_per_week)
        hourly = annual / (hours_per_week * WEEKS_PER_YEAR) if hours_per_week > 0 else 0.0
        return PayRaiseResult(
            raise_amount=raise_total,
            new_salary=new_salary,
            annual_salary=annual,
            monthly_salary=annual / 12,
            biweekly_salary=annual / 26,
            weekly_salary=annual / WEEKS_PER_YEAR,
            hourly_salary=hourly,
        )

    def hourly_to_salary(
        self,
        hourly_rate: float,
        hours_per_week: float = 40.0,
        weeks_per_year: float = 52.0,
        days_per_week: float = 5.0,
        overtime_hours: float = 0.0,
        overtime_rate: float = 1.5,
    ) -> PayBreakdown:
        """Turn an hourly wage into weekly, monthly and annual pay.

        Overtime hours are part of hours_per_week and are paid at
        overtime_rate times the base rate. A zero overtime_rate means 1.5.
        """
        overtime_rate = overtime_rate or 1.5
        regular_pay = (hours_per_week - overtime_hours) * hourly_rate
        weekly = regular_pay + overtime_hours * hourly_rate * overtime_rate
        return PayBreakdown(
            hourly=hourly_rate,
            daily=weekly / days_per_week if days_per_week > 0 else 0.0,
            weekly=weekly,
            biweekly=weekly * 2,
            monthly=weekly * weeks_per_year / 12,
            annual=weekly * weeks_per_year,
        )

    def salary_to_hourly(
        self,
        annual_salary: float,
        hours_per_week: float = 40.0,
        weeks_per_year: float = 52.0,
        days_per_week: float = 5.0,
    ) -> PayBreakdown:
        """Break an annual salary down to hourly, daily, weekly and monthly pay.

        Everything is zero when no hours are worked in the year.
        """
        hours_per_year = hours_per_week * weeks_per_year
        if hours_per_year <= 0:
            return PayBreakdown(
                hourly=0.0, daily=0.0, weekly=0.0, biweekly=0.0, monthly=0.0, annual=annual_salary
            )

        weekly = annual_salary / weeks_per_year
        days_per_year = weeks_per_year * days_per_week
        return PayBreakdown(
            hourly=annual_salary / hours_per_year,
            daily=annual_salary / days_per_year if days_per_year > 0 else 0.0,
            weekly=weekly,
            biweekly=weekly * 2,
            monthly=annual_salary / 12,
            annual=annual_salary,
        )

    def overtime(
        self,
        hourly_rate: float,
        regular_hours: float = 40.0,
        overtime_hours: float = 0.0,
        overtime_rate: float = 1.5,
        double_time_hours: float = 0.0,
        double_time_rate: float = 2.0,
    ) -> OvertimeResult:
        """Pay for regular, overtime and double time hours."""
        overtime_rate = overtime_rate or 1.5
        double_time_rate = double_time_rate or 2.0
        regular_pay = hourly_rate * regular_hours
        overtime_pay = hourly_rate * overtime_hours * overtime_rate
        double_time_pay = hourly_rate * double_time_hours * double_time_rate
        total_pay = regular_pay + overtime_pay + double_time_pay
        total_hours = regular_hours + overtime_hours + double_time_hours
        return OvertimeResult(
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            double_time_pay=double_time_pay,
            total_pay=total_pay,
            total_hours=total_hours,
            effective_hourly_rate=total_pay / total_hours if total_hours > 0 else 0.0,
        )

    def time_and_a_half(
        self, hourly_rate: float, regular_hours: float = 40.0, overtime_hours: float = 0.0
    ) -> OvertimeResult:
        """Overtime paid at exactly 1.5 times the base rate."""
        return self.overtime(
            hourly_rate,
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            overtime_rate=1.5,
        )

    def cash_back(
        self,
        monthly_spending: float = 0.0,
        cashback_rate: float = 0.0,
        annual_fee: float = 0.0,
        categories: Sequence[Mapping] | None = None,
    ) -> CashBackResult:
        """Cash back from a flat rate or from per-category rates.

        Args:
            monthly_spending: Spending per month, for the flat rate
            cashback_rate: Flat cash back rate in percent
            annual_fee: Card fee per year
            categories: Optional rows of name, monthly_spending and rate;
                when given they replace the flat rate

        Returns:
            Monthly, annual and net cash back with the effective rate
        """
        if categories:
            rows = []
            for index, category in enumerate(categories):
                spending = parse_number(category.get("monthly_spending"))
                rate = parse_number(category.get("rate"))
                rows.append(CashBackCategory(
                    name=str(category.get("name") or f"Category {index + 1}"),
                    monthly_spending=spending,
                    rate=rate,
                    monthly_cashback=spending * rate / 100,
                ))
            total_spending = sum(row.monthly_spending for row in rows)
            monthly = sum(row.monthly_cashback for row in rows)
            effective_rate = monthly / total_spending * 100 if total_spending > 0 else 0.0
        else:
            rows = []
            monthly = monthly_spending * cashback_rate / 100
            effective_rate = cashback_rate

        annual = monthly * 12
        return CashBackResult(
            monthly_cashback=monthly,
            annual_cashback=annual,
            net_annual_cashback=annual - annual_fee,
            effective_rate=effective_rate,
            categories=tuple(rows),
        )

    def margin(
        self,
        revenue: float,
        cost_of_goods: float,
        operating_expenses: float = 0.0,
        other_expenses: float = 0.0,
    ) -> MarginResult:
        """Gross, operating and net profit with margins (0 when revenue is 0)."""
        gross = revenue - cost_of_goods
        operating = gross - operating_expenses
        net = operating - other_expenses

        def share(profit: float) -> float:
            return profit / revenue * 100 if revenue > 0 else 0.0

        return MarginResult(
            gross_profit=gross,
            gross_margin=share(gross),
            operating_profit=operating,
            operating_margin=share(operating),
            net_profit=net,
            net_margin=share(net),
        )

    def count_money(
        self,
        currency: MoneyCurrency = MoneyCurrency.USD,
        notes: Mapping | None = None,
        coins: Mapping | None = None,
    ) -> MoneyCountResult:
        """Total counted cash.

        Args:
            currency: Currency whose denominations are counted
            notes: Count per note value, keyed by the value as text or number
            coins: Count per coin value, keyed the same way

        Returns:
            Totals per kind and a row for every denomination
        """
        counted = {"note": notes or {}, "coin": coins or {}}
        breakdown = []
        totals = {"note": 0.0, "coin": 0.0}
        for kind, values in DENOMINATIONS[currency].items():
            counts = {parse_number(key): value for key, value in counted[kind].items()}
            for value in values:
                count = parse_int(counts.get(float(value)))
                subtotal = count * value
                totals[kind] += subtotal
                breakdown.append(DenominationCount(
                    kind=kind, value=float(value), count=count, subtotal=subtotal
                ))

        return MoneyCountResult(
            currency=currency.value,
            notes_total=round(totals["note"], 2),
            coins_total=round(totals["coin"], 2),
            total=round(totals["note"] + totals["coin"], 2),
            pieces=sum(row.count for row in breakdown),
            breakdown=tuple(breakdown),
        )

    def price_per_square_foot(
        self,
        property_price: float,
        square_feet: float,
        exterior_square_feet: float = 0.0,
        include_exterior: bool = False,
    ) -> PricePerAreaResult:
        """Property price per square foot (and per square meter)."""
        total = square_feet + exterior_square_feet if include_exterior else square_feet
        per_foot = property_price / total if total > 0 else 0.0
        return PricePerAreaResult(
            total_square_feet=total,
            price_per_square_foot=per_foot,
            price_per_square_meter=per_foot * SQUARE_FEET_PER_SQUARE_METER,
        )


def _periods_per_year(period: SalaryPeriod, hours_per_week: float) -> float:
    if period == SalaryPeriod.MONTHLY:
        return 12
    if period == SalaryPeriod.BI_WEEKLY:
        return 26
    if period == SalaryPeriod.WEEKLY:
        return WEEKS_PER_YEAR
    if period == SalaryPeriod.HOURLY:
        return hours_per_week * WEEKS_PER_YEAR
    return 1
