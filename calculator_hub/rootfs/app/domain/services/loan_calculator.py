"""Loan calculator service.

Domain service for mortgage, general amortization, car loan, boat loan,
refinance and loan payoff calculations.
"""

import logging
import math
from datetime import date

from domain.value_objects import (
    AmortizationResult,
    CarLoanResult,
    CompoundingFrequency,
    LoanPayoffResult,
    MortgageResult,
    PaymentFrequency,
    RefinanceResult,
)

from .amortization import (
    build_amortization_schedule,
    payment_date,
    periodic_payment,
)
from .projection import period_growth_rate

_LOGGER = logging.getLogger(__name__)

MAX_MONTHLY_PERIODS = 600
MAX_TARGET_MONTHS = 1200

NOT_REPAYABLE_WARNING = (
    "The payment does not cover the interest charged each period. "
    "The loan will never be paid off."
)

NOT_CLEARED_WARNING = "The loan is not cleared within {payments} payments."


class LoanCalculator:
    """Calculate loan payments and amortization schedules.

    All rates are annual percentages (4.5 means 4.5%). Amounts that
    would make a loan negative are floored at zero.
    """

    def mortgage(
        self,
        home_price: float,
        down_payment: float,
        annual_rate: float,
        years: float,
        property_tax_yearly: float = 0.0,
        insurance_yearly: float = 0.0,
        pmi_monthly: float = 0.0,
    ) -> MortgageResult:
        """Calculate a fixed-rate mortgage.

        Args:
            home_price: Purchase price
            down_payment: Amount paid up front
            annual_rate: APR in percent
            years: Loan term in years
            property_tax_yearly: Yearly property tax
            insurance_yearly: Yearly home insurance premium
            pmi_monthly: Monthly private mortgage insurance

        Returns:
            Mortgage payment, totals and monthly schedule
        """
        loan_amount = max(home_price - down_payment, 0.0)
        monthly_rate = annual_rate / 100 / 12
        periods = min(int(round(years * 12)), MAX_MONTHLY_PERIODS)

        payment = periodic_payment(loan_amount, monthly_rate, periods)
        schedule = build_amortization_schedule(
            loan_amount, monthly_rate, payment, max_periods=MAX_MONTHLY_PERIODS
        ) if payment > 0 else []

        monthly_tax = property_tax_yearly / 12
        monthly_insurance = insurance_yearly / 12
        total_payment = sum(row.payment for row in schedule)
        total_interest = schedule[-1].total_interest if schedule else 0.0

        _LOGGER.debug(
            "Mortgage: loan=%.2f rate=%.4f%% periods=%d payment=%.2f",
            loan_amount, annual_rate, periods, payment,
        )

        return MortgageResult(
            loan_amount=loan_amount,
            monthly_payment=payment,
            monthly_property_tax=monthly_tax,
            monthly_insurance=monthly_insurance,
            monthly_pmi=pmi_monthly,
            total_monthly_payment=payment + monthly_tax + monthly_insurance + pmi_monthly,
            total_payment=total_payment,
            total_interest=total_interest,
            number_of_payments=len(schedule),
            schedule=tuple(schedule),
        )

    def amortization(
        self,
        loan_amount: float,
        annual_rate: float,
        years: float,
        frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
        extra_payment: float = 0.0,
        start_date: date | None = None,
    ) -> AmortizationResult:
        """Amortize a loan at any payment frequency with optional extra payments.

        The schedule is capped at twice the number of scheduled payments.

        Args:
            loan_amount: Amount borrowed
            annual_rate: APR in percent
            years: Loan term in years
            frequency: Payment frequency
            extra_payment: Extra principal paid every period
            start_date: Loan start date, used to date each payment

        Returns:
            Payment, totals, interest saved and the schedule
        """
        periods_per_year = frequency.periods_per_year
        periodic_rate = annual_rate / 100 / periods_per_year
        scheduled = int(round(min(years, MAX_MONTHLY_PERIODS / 12) * periods_per_year))
        payment = periodic_payment(loan_amount, periodic_rate, scheduled)
        cap = max(scheduled * 2, 1)

        if payment <= 0:
            return AmortizationResult(
                loan_amount=max(loan_amount, 0.0),
                periodic_payment=0.0,
                periods_per_year=periods_per_year,
                scheduled_payments=scheduled,
                actual_payments=0,
                total_payment=0.0,
                total_interest=0.0,
                interest_saved=0.0,
            )

        dates = (lambda n: payment_date(start_date, n, frequency)) if start_date else None
        schedule = build_amortization_schedule(
            loan_amount,
            periodic_rate,
            payment,
            max_periods=cap,
            extra_payment=(lambda _: extra_payment) if extra_payment > 0 else None,
            dates=dates,
        )
        baseline_interest = payment * scheduled - loan_amount
        total_interest = schedule[-1].total_interest if schedule else 0.0

        return AmortizationResult(
            loan_amount=loan_amount,
            periodic_payment=payment,
            periods_per_year=periods_per_year,
            scheduled_payments=scheduled,
            actual_payments=len(schedule),
            total_payment=sum(row.payment for row in schedule),
            total_interest=total_interest,
            interest_saved=max(baseline_interest - total_interest, 0.0),
            payoff_date=schedule[-1].payment_date if schedule else None,
            schedule=tuple(schedule),
        )

    def car_loan(
        self,
        vehicle_price: float,
        down_payment: float,
        trade_in_value: float,
        sales_tax_rate: float,
        annual_rate: float,
        months: int,
    ) -> CarLoanResult:
        """Calculate a car loan with sales tax, down payment and trade-in."""
        sales_tax = vehicle_price * sales_tax_rate / 100
        loan_amount = max(vehicle_price + sales_tax - down_payment - trade_in_value, 0.0)
        monthly_rate = annual_rate / 100 / 12
        periods = min(max(int(months), 0), MAX_MONTHLY_PERIODS)

        payment = periodic_payment(loan_amount, monthly_rate, periods)
        schedule = build_amortization_schedule(
            loan_amount, monthly_rate, payment, max_periods=MAX_MONTHLY_PERIODS
        ) if payment > 0 else []
        total_payment = sum(row.payment for row in schedule)

        return CarLoanResult(
            sales_tax=sales_tax,
            loan_amount=loan_amount,
            monthly_payment=payment,
            total_payment=total_payment,
            total_interest=schedule[-1].total_interest if schedule else 0.0,
            total_cost=down_payment + trade_in_value + total_payment,
            schedule=tuple(schedule),
        )

    def boat_loan(
        self,
        loan_amount: float,
        annual_rate: float,
        years: int,
        months: int = 0,
        extra_payment: float = 0.0,
        extra_frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
        one_time_payment: float = 0.0,
        one_time_payment_number: int = 0,
    ) -> AmortizationResult:
        """Calculate a monthly boat loan with recurring and one-time extra payments.

        Args:
            loan_amount: Amount borrowed
            annual_rate: APR in percent
            years: Whole years of the term
            months: Additional months of the term
            extra_payment: Recurring extra principal
            extra_frequency: MONTHLY, QUARTERLY (every 3rd payment) or
                ANNUALLY (every 12th payment)
            one_time_payment: Lump sum paid once
            one_time_payment_number: Payment number carrying the lump sum;
                0 or beyond the term means the last scheduled payment

        Returns:
            Amortization result, schedule starting with a period 0 row
        """
        term = min(max(int(years) * 12 + int(months), 0), MAX_MONTHLY_PERIODS)
        monthly_rate = annual_rate / 100 / 12
        payment = periodic_payment(loan_amount, monthly_rate, term)

        step = {
            PaymentFrequency.QUARTERLY: 3,
            PaymentFrequency.ANNUALLY: 12,
        }.get(extra_frequency, 1)
        lump_at = one_time_payment_number if 0 < one_time_payment_number <= term else term

        def extra_for(period: int) -> float:
            amount = extra_payment if extra_payment > 0 and period % step == 0 else 0.0
            if one_time_payment > 0 and period == lump_at:
                amount += one_time_payment
            return amount

        schedule = build_amortization_schedule(
            loan_amount,
            monthly_rate,
            payment,
            max_periods=MAX_MONTHLY_PERIODS,
            extra_payment=extra_for,
            include_opening_row=True,
        ) if payment > 0 else []
        paid_rows = schedule[1:]
        total_interest = paid_rows[-1].total_interest if paid_rows else 0.0

        return AmortizationResult(
            loan_amount=max(loan_amount, 0.0),
            periodic_payment=payment,
            periods_per_year=12,
            scheduled_payments=term,
            actual_payments=len(paid_rows),
            total_payment=sum(row.payment for row in paid_rows),
            total_interest=total_interest,
            interest_saved=max(payment * term - max(loan_amount, 0.0) - total_interest, 0.0),
            schedule=tuple(schedule),
        )

    def refinance(
        self,
        current_balance: float,
        current_rate: float,
        current_remaining_years: float,
        new_rate: float,
        new_term_years: float,
        closing_costs: float = 0.0,
    ) -> RefinanceResult:
        """Compare keeping the current loan against refinancing it."""
        current_periods = int(round(current_remaining_years * 12))
        new_periods = int(round(new_term_years * 12))
        current_payment = periodic_payment(current_balance, current_rate / 1200, current_periods)
        new_payment = periodic_payment(current_balance, new_rate / 1200, new_periods)

        monthly_savings = current_payment - new_payment
        break_even = (
            math.ceil(closing_costs / monthly_savings) if monthly_savings > 0 else 0
        )
        current_total = current_payment * current_periods
        new_total = new_payment * new_periods

        return RefinanceResult(
            current_payment=current_payment,
            new_payment=new_payment,
            monthly_savings=monthly_savings,
            break_even_months=break_even,
            current_total_interest=max(current_total - current_balance, 0.0),
            new_total_interest=max(new_total - current_balance, 0.0),
            lifetime_savings=current_total - new_total - closing_costs,
        )

    def loan_payoff(
        self,
        balance: float,
        annual_rate: float,
        minimum_payment: float,
        extra_payment: float = 0.0,
        frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
        compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
        target_months: int | None = None,
    ) -> LoanPayoffResult:
        """Work out how long a loan takes to repay, or what it takes to hit a date.

        With target_months set, the payment needed to clear the loan in
        that many months is used, never less than the minimum payment.
        Otherwise minimum_payment + extra_payment is used.

        Args:
            balance: Outstanding balance
            annual_rate: APR in percent
            minimum_payment: Minimum payment per period
            extra_payment: Extra paid on top of the minimum each period
            frequency: Payment frequency
            compounding: Interest compounding frequency
            target_months: Desired payoff horizon in months

        Returns:
            Payoff result, with repayable False and a warning when the
            payment never covers the interest or the loan outlasts the
            period cap
        """
        periods_per_year = frequency.periods_per_year
        rate = period_growth_rate(annual_rate / 100, compounding, periods_per_year)

        cap = MAX_MONTHLY_PERIODS * max(periods_per_year // 12, 1)
        if target_months:
            target_months = min(target_months, MAX_TARGET_MONTHS)
            target_periods = max(int(round(target_months * periods_per_year / 12)), 1)
            cap = max(cap, target_periods)
            payment = max(periodic_payment(balance, rate, target_periods), minimum_payment)
        else:
            payment = minimum_payment + extra_payment

        if balance <= 0:
            return LoanPayoffResult(
                payment=payment,
                periods_per_year=periods_per_year,
                number_of_payments=0,
                years_to_payoff=0.0,
                total_payment=0.0,
                total_interest=0.0,
            )

        if payment <= balance * rate:
            _LOGGER.info("Loan of %.2f is not repayable with payment %.2f", balance, payment)
            return LoanPayoffResult(
                payment=payment,
                periods_per_year=periods_per_year,
                number_of_payments=0,
                years_to_payoff=0.0,
                total_payment=0.0,
                total_interest=0.0,
                repayable=False,
                warning=NOT_REPAYABLE_WARNING,
            )

        schedule = build_amortization_schedule(balance, rate, payment, max_periods=cap)
        paid_off = bool(schedule) and schedule[-1].balance == 0.0

        return LoanPayoffResult(
            payment=payment,
            periods_per_year=periods_per_year,
            number_of_payments=len(schedule),
            years_to_payoff=len(schedule) / periods_per_year,
            total_payment=sum(row.payment for row in schedule),
            total_interest=schedule[-1].total_interest if schedule else 0.0,
            repayable=paid_off,
            warning=None if paid_off else NOT_CLEARED_WARNING.format(payments=cap),
            schedule=tuple(schedule),
        )
