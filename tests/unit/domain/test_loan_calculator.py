"""Tests for the loan and credit card calculators."""

import math
from datetime import date

import pytest
from domain.services import CreditCardCalculator, LoanCalculator
from domain.services.credit_card_calculator import MAX_MONTHS
from domain.services.loan_calculator import (
    MAX_MONTHLY_PERIODS,
    NOT_CLEARED_WARNING,
    NOT_REPAYABLE_WARNING,
)
from domain.value_objects import (
    CompoundingFrequency,
    MinimumPaymentType,
    PaymentFrequency,
    RepaymentStrategy,
)


@pytest.fixture
def loans() -> LoanCalculator:
    return LoanCalculator()


@pytest.fixture
def cards() -> CreditCardCalculator:
    return CreditCardCalculator()


class TestMortgage:
    """Tests for the mortgage calculation."""

    def test_reference_payment_to_the_cent(self, loans: LoanCalculator) -> None:
        """$240,000 at 4.5% over 30 years costs $1,216.04 a month."""
        result = loans.mortgage(300000, 60000, 4.5, 30)

        assert result.loan_amount == 240000
        assert round(result.monthly_payment, 2) == 1216.04
        assert result.number_of_payments == 360

    def test_schedule_reconciles_with_totals(self, loans: LoanCalculator) -> None:
        """Principal repaid equals the loan, payments equal principal plus interest."""
        result = loans.mortgage(300000, 60000, 4.5, 30)

        principal = sum(row.principal for row in result.schedule)
        interest = sum(row.interest for row in result.schedule)
        assert principal == pytest.approx(result.loan_amount, abs=1e-6)
        assert interest == pytest.approx(result.total_interest, abs=1e-6)
        assert result.total_payment == pytest.approx(result.loan_amount + result.total_interest, abs=1e-6)
        assert result.schedule[-1].balance == 0.0

    def test_last_payment_is_clamped_to_balance(self, loans: LoanCalculator) -> None:
        """The final row never pays more principal than was owed."""
        result = loans.mortgage(300000, 60000, 4.5, 30)

        last = result.schedule[-1]
        previous = result.schedule[-2]
        assert last.principal == pytest.approx(previous.balance)

    def test_zero_rate_divides_linearly(self, loans: LoanCalculator) -> None:
        """A zero rate spreads the principal evenly."""
        result = loans.mortgage(130000, 10000, 0, 10)

        assert result.monthly_payment == pytest.approx(1000.0)
        assert result.total_interest == 0.0
        assert result.number_of_payments == 120

    def test_escrow_costs_added_to_monthly_total(self, loans: LoanCalculator) -> None:
        """Tax, insurance and PMI are added on top of the loan payment."""
        result = loans.mortgage(300000, 60000, 4.5, 30, 3600, 1200, 100)

        assert result.monthly_property_tax == pytest.approx(300)
        assert result.monthly_insurance == pytest.approx(100)
        assert result.total_monthly_payment == pytest.approx(result.monthly_payment + 500)

    def test_down_payment_above_price_gives_empty_loan(self, loans: LoanCalculator) -> None:
        """A negative loan is floored at zero."""
        result = loans.mortgage(100000, 150000, 4.5, 30)

        assert result.loan_amount == 0.0
        assert result.monthly_payment == 0.0
        assert result.schedule == ()

    def test_term_is_capped(self, loans: LoanCalculator) -> None:
        """Absurd terms stop at the iteration cap."""
        result = loans.mortgage(300000, 0, 4.5, 1000)

        assert result.number_of_payments <= MAX_MONTHLY_PERIODS


class TestAmortization:
    """Tests for the amortization calculation."""

    def test_monthly_schedule_without_extra(self, loans: LoanCalculator) -> None:
        result = loans.amortization(240000, 4.5, 30)

        assert round(result.periodic_payment, 2) == 1216.04
        assert result.actual_payments == result.scheduled_payments == 360
        assert result.interest_saved == pytest.approx(0.0, abs=1e-6)

    def test_extra_payment_shortens_loan(self, loans: LoanCalculator) -> None:
        """Extra principal every period means fewer payments and less interest."""
        base = loans.amortization(240000, 4.5, 30)
        faster = loans.amortization(240000, 4.5, 30, extra_payment=200)

        assert faster.actual_payments < base.actual_payments
        assert faster.total_interest < base.total_interest
        assert faster.interest_saved == pytest.approx(base.total_interest - faster.total_interest, rel=1e-9)

    def test_bi_weekly_frequency(self, loans: LoanCalculator) -> None:
        """Rate and count follow the payment frequency."""
        result = loans.amortization(100000, 5.2, 10, frequency=PaymentFrequency.BI_WEEKLY)

        assert result.periods_per_year == 26
        assert result.scheduled_payments == 260
        assert result.schedule[0].interest == pytest.approx(100000 * 0.052 / 26)

    def test_payment_dates_follow_start_date(self, loans: LoanCalculator) -> None:
        result = loans.amortization(12000, 6, 1, start_date=date(2024, 1, 31))

        assert result.schedule[0].payment_date == date(2024, 2, 29)
        assert result.schedule[1].payment_date == date(2024, 3, 31)
        assert result.payoff_date == date(2025, 1, 31)

    def test_no_dates_without_start_date(self, loans: LoanCalculator) -> None:
        result = loans.amortization(12000, 6, 1)

        assert result.payoff_date is None
        assert all(row.payment_date is None for row in result.schedule)

    def test_zero_amount(self, loans: LoanCalculator) -> None:
        result = loans.amortization(0, 4.5, 30)

        assert result.periodic_payment == 0.0
        assert result.schedule == ()


class TestCarAndBoatLoans:
    """Tests for vehicle loans."""

    def test_car_loan_amount_includes_tax(self, loans: LoanCalculator) -> None:
        result = loans.car_loan(30000, 5000, 2000, 6, 4.5, 60)

        assert result.sales_tax == pytest.approx(1800)
        assert result.loan_amount == pytest.approx(24800)
        assert len(result.schedule) == 60
        assert result.total_cost == pytest.approx(7000 + result.total_payment)

    def test_car_loan_floor_at_zero(self, loans: LoanCalculator) -> None:
        result = loans.car_loan(10000, 8000, 5000, 0, 4.5, 60)

        assert result.loan_amount == 0.0
        assert result.monthly_payment == 0.0

    def test_boat_loan_has_opening_row(self, loans: LoanCalculator) -> None:
        result = loans.boat_loan(25000, 6.5, 5)

        assert result.schedule[0].period == 0
        assert result.schedule[0].balance == 25000
        assert result.actual_payments == 60
        assert len(result.schedule) == 61

    def test_boat_loan_term_combines_years_and_months(self, loans: LoanCalculator) -> None:
        result = loans.boat_loan(12000, 0, 1, months=6)

        assert result.scheduled_payments == 18
        assert result.periodic_payment == pytest.approx(12000 / 18)

    def test_quarterly_extra_applies_every_third_payment(self, loans: LoanCalculator) -> None:
        result = loans.boat_loan(
            25000, 6.5, 5, extra_payment=300, extra_frequency=PaymentFrequency.QUARTERLY
        )

        paid = result.schedule[1:]
        assert paid[0].extra_payment == 0.0
        assert paid[2].extra_payment == pytest.approx(300)
        assert result.actual_payments < 60

    def test_one_time_payment_reduces_interest(self, loans: LoanCalculator) -> None:
        base = loans.boat_loan(25000, 6.5, 5)
        lump = loans.boat_loan(25000, 6.5, 5, one_time_payment=5000, one_time_payment_number=12)

        assert lump.schedule[12].extra_payment == pytest.approx(5000)
        assert lump.total_interest < base.total_interest


class TestRefinance:
    """Tests for refinance comparison."""

    def test_break_even_month(self, loans: LoanCalculator) -> None:
        result = loans.refinance(250000, 5.5, 25, 4.0, 30, 5000)

        assert result.monthly_savings > 0
        assert result.break_even_months == math.ceil(5000 / result.monthly_savings)
        assert result.break_even_months == 15

    def test_no_savings_means_no_break_even(self, loans: LoanCalculator) -> None:
        result = loans.refinance(250000, 4.0, 30, 5.0, 30, 5000)

        assert result.monthly_savings < 0
        assert result.break_even_months == 0

    def test_lifetime_savings_subtracts_closing_costs(self, loans: LoanCalculator) -> None:
        result = loans.refinance(200000, 6, 20, 6, 20, 3000)

        assert result.monthly_savings == pytest.approx(0.0)
        assert result.lifetime_savings == pytest.approx(-3000)


class TestLoanPayoff:
    """Tests for loan payoff projections."""

    def test_fixed_payment_pays_off(self, loans: LoanCalculator) -> None:
        result = loans.loan_payoff(10000, 5, 200)

        assert result.repayable is True
        assert result.warning is None
        assert result.total_payment == pytest.approx(10000 + result.total_interest, abs=1e-6)
        assert result.years_to_payoff == pytest.approx(result.number_of_payments / 12)

    def test_extra_payment_is_added(self, loans: LoanCalculator) -> None:
        result = loans.loan_payoff(10000, 5, 200, extra_payment=100)

        assert result.payment == 300

    def test_payment_below_interest_is_not_repayable(self, loans: LoanCalculator) -> None:
        result = loans.loan_payoff(10000, 12, 50)

        assert result.repayable is False
        assert result.warning == NOT_REPAYABLE_WARNING
        assert result.schedule == ()

    def test_target_term_solves_payment(self, loans: LoanCalculator) -> None:
        result = loans.loan_payoff(12000, 0, 10, target_months=12)

        assert result.payment == pytest.approx(1000)
        assert result.number_of_payments == 12

    def test_target_term_never_below_minimum(self, loans: LoanCalculator) -> None:
        result = loans.loan_payoff(1200, 0, 500, target_months=12)

        assert result.payment == 500
        assert result.number_of_payments == 3

    def test_target_term_beyond_default_cap(self, loans: LoanCalculator) -> None:
        """A 75-year target is honoured instead of stopping at 600 payments."""
        result = loans.loan_payoff(10000, 5, 10, target_months=900)

        assert result.payment > 10000 * 0.05 / 12
        assert result.repayable is True
        assert result.warning is None
        assert result.number_of_payments == 900
        assert result.schedule[-1].balance == 0.0

    def test_payment_barely_above_interest_hits_cap(self, loans: LoanCalculator) -> None:
        """Covering the interest but not clearing within the cap gets its own warning."""
        result = loans.loan_payoff(10000, 5, 41.7)

        assert result.repayable is False
        assert result.number_of_payments == MAX_MONTHLY_PERIODS
        assert result.warning == NOT_CLEARED_WARNING.format(payments=MAX_MONTHLY_PERIODS)
        assert result.schedule[-1].balance > 0

    def test_compounding_changes_periodic_rate(self, loans: LoanCalculator) -> None:
        """Daily compounding charges a little more than monthly."""
        monthly = loans.loan_payoff(10000, 6, 300)
        daily = loans.loan_payoff(10000, 6, 300, compounding=CompoundingFrequency.DAILY)

        assert daily.schedule[0].interest > monthly.schedule[0].interest
        assert monthly.schedule[0].interest == pytest.approx(50.0)


class TestCreditCard:
    """Tests for credit card repayment plans."""

    def test_minimum_payment_percentage_with_floor(self, cards: CreditCardCalculator) -> None:
        assert cards.minimum_payment(5000, MinimumPaymentType.PERCENTAGE, 2, 25) == pytest.approx(100)
        assert cards.minimum_payment(500, MinimumPaymentType.PERCENTAGE, 2, 25) == 25

    def test_minimum_payment_fixed_capped_at_balance(self, cards: CreditCardCalculator) -> None:
        assert cards.minimum_payment(5000, MinimumPaymentType.FIXED, 2, 25) == 25
        assert cards.minimum_payment(10, MinimumPaymentType.FIXED, 2, 25) == 10

    def test_fixed_period_payment_zero_rate(self, cards: CreditCardCalculator) -> None:
        assert cards.fixed_period_payment(1200, 12, 0) == pytest.approx(100)

    def test_minimum_strategy_terminates_and_reconciles(self, cards: CreditCardCalculator) -> None:
        result = cards.repayment_plan(5000, 18.99)

        assert result.schedule[0].month == 0
        assert result.schedule[0].balance == 5000
        assert result.paid_off is True
        assert result.months_to_payoff <= 600
        assert result.total_payment == pytest.approx(5000 + result.total_interest, abs=1e-6)

    def test_fixed_amount_zero_rate(self, cards: CreditCardCalculator) -> None:
        result = cards.repayment_plan(
            1000, 0, strategy=RepaymentStrategy.FIXED_AMOUNT, additional_payment=100
        )

        assert result.months_to_payoff == 10
        assert result.total_interest == 0.0

    def test_fixed_period_clears_in_target_months(self, cards: CreditCardCalculator) -> None:
        result = cards.repayment_plan(
            5000, 18.99, strategy=RepaymentStrategy.FIXED_PERIOD, target_months=12
        )

        assert result.months_to_payoff == 12
        assert result.schedule[-1].balance == 0.0

    def test_minimum_plus_is_faster_than_minimum(self, cards: CreditCardCalculator) -> None:
        minimum = cards.repayment_plan(5000, 18.99)
        plus = cards.repayment_plan(
            5000, 18.99, strategy=RepaymentStrategy.MINIMUM_PLUS, additional_payment=100
        )

        assert plus.months_to_payoff < minimum.months_to_payoff
        assert plus.total_interest < minimum.total_interest

    def test_payment_always_exceeds_interest(self, cards: CreditCardCalculator) -> None:
        """A target payment below the interest is raised to interest + 1."""
        result = cards.repayment_plan(
            5000, 24, strategy=RepaymentStrategy.FIXED_PAYMENT, target_payment=10
        )

        first = result.schedule[1]
        assert first.payment == pytest.approx(first.interest + 1)
        assert result.months_to_payoff <= 600

    def test_zero_balance(self, cards: CreditCardCalculator) -> None:
        result = cards.repayment_plan(0, 18.99)

        assert result.months_to_payoff == 0
        assert result.first_payment == 0.0
        assert result.paid_off is True

    def test_tiny_payments_stop_at_month_cap(self, cards: CreditCardCalculator) -> None:
        """With no minimum the payment is interest + 1, so a large balance outlives the cap."""
        result = cards.repayment_plan(1_000_000, 0, minimum_percent=0, minimum_amount=0)

        assert result.months_to_payoff == MAX_MONTHS
        assert result.paid_off is False
        assert result.schedule[-1].balance == pytest.approx(1_000_000 - MAX_MONTHS)
        assert result.schedule[-1].balance > 0
