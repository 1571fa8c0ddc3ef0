"""Tests for the earnings calculator service."""

import pytest
from domain.services import EarningsCalculator
from domain.value_objects import MoneyCurrency, RaiseType, SalaryPeriod


@pytest.fixture
def earnings() -> EarningsCalculator:
    return EarningsCalculator()


class TestPayRaise:
    """Tests for pay raises."""

    def test_percentage_raise_on_yearly_salary(self, earnings: EarningsCalculator) -> None:
        result = earnings.pay_raise(50000, RaiseType.PERCENTAGE, raise_percent=5)

        assert result.raise_amount == pytest.approx(2500)
        assert result.new_salary == pytest.approx(52500)
        assert result.monthly_salary == pytest.approx(4375)
        assert result.hourly_salary == pytest.approx(52500 / 2080)

    def test_flat_raise_on_hourly_pay(self, earnings: EarningsCalculator) -> None:
        result = earnings.pay_raise(
            20, RaiseType.AMOUNT, raise_amount=2, period=SalaryPeriod.HOURLY, hours_per_week=40
        )

        assert result.new_salary == pytest.approx(22)
        assert result.annual_salary == pytest.approx(22 * 2080)
        assert result.hourly_salary == pytest.approx(22)

    def test_zero_hours_gives_zero_hourly(self, earnings: EarningsCalculator) -> None:
        result = earnings.pay_raise(50000, raise_percent=5, hours_per_week=0)

        assert result.hourly_salary == 0.0


class TestHourlyAndSalary:
    """Tests for hourly and salary conversions."""

    def test_hourly_to_salary(self, earnings: EarningsCalculator) -> None:
        result = earnings.hourly_to_salary(20)

        assert result.weekly == pytest.approx(800)
        assert result.daily == pytest.approx(160)
        assert result.annual == pytest.approx(41600)
        assert result.monthly == pytest.approx(41600 / 12)

    def test_overtime_hours_included_in_week(self, earnings: EarningsCalculator) -> None:
        """5 of the 40 hours at time and a half."""
        result = earnings.hourly_to_salary(20, overtime_hours=5, overtime_rate=1.5)

        assert result.weekly == pytest.approx(35 * 20 + 5 * 30)

    def test_salary_to_hourly(self, earnings: EarningsCalculator) -> None:
        result = earnings.salary_to_hourly(41600)

        assert result.hourly == pytest.approx(20)
        assert result.daily == pytest.approx(160)
        assert result.weekly == pytest.approx(800)

    def test_salary_without_hours(self, earnings: EarningsCalculator) -> None:
        result = earnings.salary_to_hourly(41600, hours_per_week=0)

        assert result.hourly == 0.0
        assert result.annual == 41600


class TestOvertime:
    """Tests for overtime pay."""

    def test_overtime_and_double_time(self, earnings: EarningsCalculator) -> None:
        result = earnings.overtime(20, 40, 10, 1.5, 2, 2.0)

        assert result.regular_pay == pytest.approx(800)
        assert result.overtime_pay == pytest.approx(300)
        assert result.double_time_pay == pytest.approx(80)
        assert result.total_hours == 52
        assert result.effective_hourly_rate == pytest.approx(1180 / 52)

    def test_zero_multiplier_means_default(self, earnings: EarningsCalculator) -> None:
        result = earnings.overtime(20, 40, 10, 0)

        assert result.overtime_pay == pytest.approx(300)

    def test_time_and_a_half(self, earnings: EarningsCalculator) -> None:
        result = earnings.time_and_a_half(20, 40, 5)

        assert result.total_pay == pytest.approx(950)

    def test_no_hours(self, earnings: EarningsCalculator) -> None:
        result = earnings.overtime(20, 0)

        assert result.effective_hourly_rate == 0.0


class TestCashBack:
    """Tests for cash back rewards."""

    def test_flat_rate(self, earnings: EarningsCalculator) -> None:
        result = earnings.cash_back(2000, 2, annual_fee=95)

        assert result.monthly_cashback == pytest.approx(40)
        assert result.annual_cashback == pytest.approx(480)
        assert result.net_annual_cashback == pytest.approx(385)
        assert result.effective_rate == 2

    def test_categories_replace_flat_rate(self, earnings: EarningsCalculator) -> None:
        result = earnings.cash_back(
            2000,
            2,
            categories=[
                {"name": "Groceries", "monthly_spending": 600, "rate": 3},
                {"monthly_spending": "400", "rate": "1"},
            ],
        )

        assert result.monthly_cashback == pytest.approx(22)
        assert result.effective_rate == pytest.approx(2.2)
        assert result.categories[1].name == "Category 2"


class TestMargin:
    """Tests for profit margins."""

    def test_margins(self, earnings: EarningsCalculator) -> None:
        result = earnings.margin(100000, 60000, 20000, 5000)

        assert result.gross_margin == pytest.approx(40)
        assert result.operating_margin == pytest.approx(20)
        assert result.net_profit == pytest.approx(15000)
        assert result.net_margin == pytest.approx(15)

    def test_zero_revenue(self, earnings: EarningsCalculator) -> None:
        result = earnings.margin(0, 100)

        assert result.gross_profit == -100
        assert result.gross_margin == 0.0


class TestMoneyCounter:
    """Tests for counting cash."""

    def test_usd_count(self, earnings: EarningsCalculator) -> None:
        result = earnings.count_money(
            MoneyCurrency.USD,
            notes={"20": 3, "5": 2, "1": "x"},
            coins={"0.25": 4, 1: 2},
        )

        assert result.notes_total == 70
        assert result.coins_total == 3
        assert result.total == 73
        assert result.pieces == 11

    def test_breakdown_lists_every_denomination(self, earnings: EarningsCalculator) -> None:
        result = earnings.count_money(MoneyCurrency.GBP)

        assert len(result.breakdown) == 12
        assert result.total == 0


class TestPricePerSquareFoot:
    """Tests for property price per area."""

    def test_price_per_area(self, earnings: EarningsCalculator) -> None:
        result = earnings.price_per_square_foot(350000, 2000)

        assert result.price_per_square_foot == pytest.approx(175)
        assert result.price_per_square_meter == pytest.approx(175 * 10.7639)

    def test_exterior_only_when_included(self, earnings: EarningsCalculator) -> None:
        excluded = earnings.price_per_square_foot(350000, 2000, 500, False)
        included = earnings.price_per_square_foot(350000, 2000, 500, True)

        assert excluded.total_square_feet == 2000
        assert included.total_square_feet == 2500

    def test_zero_area(self, earnings: EarningsCalculator) -> None:
        assert earnings.price_per_square_foot(350000, 0).price_per_square_foot == 0.0
