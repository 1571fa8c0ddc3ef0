"""Rate calculator service.

Domain service for yields, growth rates, internal rate of return,
rate solving and simple interest.
"""

import logging
import math
from typing import Sequence

import numpy as np

from domain.value_objects import (
    ApyComparison,
    ApyResult,
    CagrResult,
    CompoundingFrequency,
    GrowthEntry,
    InterestRateResult,
    IrrResult,
    PaymentFrequency,
    ProjectionPoint,
    SimpleInterestResult,
    SimpleInterestTarget,
)

from .projection import effective_annual_rate, events_in_period

_LOGGER = logging.getLogger(__name__)

IRR_INITIAL_GUESS = 10.0
IRR_MAX_ITERATIONS = 100
IRR_TOLERANCE = 1e-4
IRR_DERIVATIVE_DELTA = 1e-4
IRR_RATE_LIMIT = 1000.0
MAX_YEARS = 100

IRR_SIGN_ERROR = (
    "IRR calculation requires at least one positive and one negative cash flow"
)
IRR_FIRST_FLOW_WARNING = (
    "The first cash flow should typically be negative "
    "(representing an initial investment)"
)
IRR_CONVERGENCE_ERROR = "Could not calculate IRR. Try adjusting your cash flows."

RATE_SEARCH_MIN = -0.99
RATE_SEARCH_MAX = 1.0
RATE_SEARCH_START = 0.05
RATE_SEARCH_ITERATIONS = 100
RATE_SEARCH_TOLERANCE = 1e-4

INVALID_RATE_INPUTS = (
    "Please enter valid positive values for initial amount, target amount, "
    "and time period."
)
TARGET_NEEDS_GROWTH = (
    "Target amount must be greater than initial amount if there are no contributions."
)
TARGET_UNREACHABLE = (
    "Target amount cannot be reached within the given time period, "
    "even with 100% interest rate."
)
TARGET_TOO_LOW = "Target amount is too low for the given time period and contributions."


class RateCalculator:
    """Calculate yields, growth rates and returns."""

    def apy(
        self,
        annual_rate: float,
        compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
        principal: float = 0.0,
        years: float = 1.0,
    ) -> ApyResult:
        """Annual percentage yield of a nominal rate.

        Args:
            annual_rate: Nominal rate in percent
            compounding: Compounding frequency
            principal: Deposit to grow at the yield
            years: Horizon for the final balance

        Returns:
            APY, final balance and a comparison across frequencies
        """
        rate = annual_rate / 100
        apy = effective_annual_rate(rate, compounding)
        final_balance = principal * (1 + apy) ** years
        comparison = tuple(
            ApyComparison(compounding=frequency.value, apy=effective_annual_rate(rate, frequency) * 100)
            for frequency in CompoundingFrequency
        )
        return ApyResult(
            apy=apy * 100,
            final_balance=final_balance,
            interest_earned=final_balance - principal,
            comparison=comparison,
        )

    def cagr(self, initial_value: float, final_value: float, years: float) -> CagrResult:
        """Compound annual growth rate between two values.

        All inputs must be positive; otherwise every figure is zero.
        """
        if initial_value <= 0 or final_value <= 0 or years <= 0:
            return CagrResult(cagr=0.0, total_growth=0.0, multiplier=0.0)

        multiplier = final_value / initial_value
        rate = multiplier ** (1 / years) - 1
        projection = tuple(
            ProjectionPoint(year=year, value=initial_value * (1 + rate) ** year)
            for year in range(0, min(int(math.ceil(years)), MAX_YEARS) + 1)
        )
        return CagrResult(
            cagr=rate * 100,
            total_growth=(multiplier - 1) * 100,
            multiplier=multiplier,
            projection=projection,
        )

    def npv(self, rate: float, cash_flows: Sequence[float]) -> float:
        """Net present value of yearly cash flows, the first at year 0.

        Args:
            rate: Discount rate in percent (must be above -100)
            cash_flows: Amount for each year

        Returns:
            Sum of cf_t / (1 + rate/100)^t
        """
        flows = np.asarray(cash_flows, dtype=float)
        if flows.size == 0:
            return 0.0
        discount = np.power(1 + rate / 100, np.arange(flows.size))
        return float(np.sum(flows / discount))

    def irr(self, cash_flows: Sequence[float], discount_rate: float = 10.0) -> IrrResult:
        """Internal rate of return of yearly cash flows.

        Uses Newton iteration from a 10% guess with a numeric derivative.
        Gives up after 100 iterations or once the guess leaves the range
        (-100%, 1000%].

        Args:
            cash_flows: Amount for each year, the first at year 0
            discount_rate: Rate for the reported NPV, in percent

        Returns:
            IRR in percent or an error message
        """
        flows = [float(flow) for flow in cash_flows]
        npv = self.npv(discount_rate, flows) if discount_rate > -100 else 0.0

        if not any(flow > 0 for flow in flows) or not any(flow < 0 for flow in flows):
            return IrrResult(irr=None, npv=npv, discount_rate=discount_rate, error=IRR_SIGN_ERROR)

        warning = IRR_FIRST_FLOW_WARNING if flows[0] > 0 else None
        guess = IRR_INITIAL_GUESS
        for _ in range(IRR_MAX_ITERATIONS):
            value = self.npv(guess, flows)
            if abs(value) < IRR_TOLERANCE:
                return IrrResult(irr=guess, npv=npv, discount_rate=discount_rate, warning=warning)

            derivative = (self.npv(guess + IRR_DERIVATIVE_DELTA, flows) - value) / IRR_DERIVATIVE_DELTA
            if abs(derivative) < 1e-10:
                break

            new_guess = guess - value / derivative
            if abs(new_guess - guess) < IRR_TOLERANCE:
                return IrrResult(irr=new_guess, npv=npv, discount_rate=discount_rate, warning=warning)

            guess = new_guess
            if guess > IRR_RATE_LIMIT or guess <= -100:
                break

        _LOGGER.info("IRR did not converge for %d cash flows", len(flows))
        return IrrResult(
            irr=None,
            npv=npv,
            discount_rate=discount_rate,
            warning=warning,
            error=IRR_CONVERGENCE_ERROR,
        )

    def solve_interest_rate(
        self,
        initial_amount: float,
        target_amount: float,
        years: int,
        contribution: float = 0.0,
        contribution_frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
        compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY,
    ) -> InterestRateResult:
        """Find the annual rate that grows savings to a target.

        Bisects the nominal rate over [-99%, 100%] until the projected
        balance is within 0.01% of the target.

        Args:
            initial_amount: Starting balance
            target_amount: Balance to reach
            years: Horizon in whole years
            contribution: Amount added at each contribution date
            contribution_frequency: How often contributions are made
            compounding: How often interest compounds

        Returns:
            Required rate and a yearly schedule, or an error message
        """
        if compounding == CompoundingFrequency.CONTINUOUSLY:
            compounding = CompoundingFrequency.DAILY
        compounds = compounding.periods_per_year
        contributions_per_year = contribution_frequency.periods_per_year
        years = min(int(years), MAX_YEARS)

        def empty(error: str) -> InterestRateResult:
            return InterestRateResult(
                annual_rate=None,
                final_balance=0.0,
                total_contributions=0.0,
                total_interest=0.0,
                error=error,
            )

        if initial_amount < 0 or target_amount <= 0 or years <= 0:
            return empty(INVALID_RATE_INPUTS)
        if target_amount <= initial_amount and contribution <= 0:
            return empty(TARGET_NEEDS_GROWTH)

        def project(rate: float) -> list[GrowthEntry]:
            periodic_rate = rate / compounds
            balance = initial_amount
            total_contributions = initial_amount
            total_interest = 0.0
            rows = []
            for year in range(1, years + 1):
                year_contribution = 0.0
                year_interest = 0.0
                for period in range(1, compounds + 1):
                    interest = balance * periodic_rate
                    deposit = contribution * events_in_period(
                        period, contributions_per_year, compounds
                    )
                    balance += interest + deposit
                    year_interest += interest
                    year_contribution += deposit
                total_contributions += year_contribution
                total_interest += year_interest
                rows.append(GrowthEntry(
                    period=year,
                    contribution=year_contribution,
                    interest=year_interest,
                    balance=balance,
                    total_contributions=total_contributions,
                    total_interest=total_interest,
                ))
            return rows

        if project(RATE_SEARCH_MAX)[-1].balance < target_amount:
            return empty(TARGET_UNREACHABLE)
        if project(RATE_SEARCH_MIN)[-1].balance > target_amount:
            return empty(TARGET_TOO_LOW)

        low, high = RATE_SEARCH_MIN, RATE_SEARCH_MAX
        rate = RATE_SEARCH_START
        schedule = project(rate)
        for _ in range(RATE_SEARCH_ITERATIONS):
            balance = schedule[-1].balance
            if abs(balance - target_amount) / target_amount < RATE_SEARCH_TOLERANCE:
                break
            if balance < target_amount:
                low = rate
            else:
                high = rate
            rate = (low + high) / 2
            schedule = project(rate)

        final = schedule[-1]
        return InterestRateResult(
            annual_rate=rate * 100,
            final_balance=final.balance,
            total_contributions=final.total_contributions,
            total_interest=final.total_interest,
            schedule=tuple(schedule),
        )

    def simple_interest(
        self,
        principal: float,
        annual_rate: float,
        years: float,
        interest: float = 0.0,
        solve_for: SimpleInterestTarget = SimpleInterestTarget.INTEREST,
    ) -> SimpleInterestResult:
        """Simple interest I = P * R * T / 100, solved for any one variable.

        The variable named by solve_for is computed from the other three;
        its own input is ignored. A zero divisor yields zero.
        """
        if solve_for == SimpleInterestTarget.PRINCIPAL:
            divisor = annual_rate * years
            principal = interest * 100 / divisor if divisor else 0.0
        elif solve_for == SimpleInterestTarget.RATE:
            divisor = principal * years
            annual_rate = interest * 100 / divisor if divisor else 0.0
        elif solve_for == SimpleInterestTarget.TIME:
            divisor = principal * annual_rate
            years = interest * 100 / divisor if divisor else 0.0
        else:
            interest = principal * annual_rate * years / 100

        yearly_interest = principal * annual_rate / 100
        schedule = []
        whole_years = min(int(math.ceil(years)), MAX_YEARS)
        for year in range(1, whole_years + 1):
            elapsed = min(year, years)
            schedule.append(GrowthEntry(
                period=year,
                contribution=0.0,
                interest=yearly_interest * (elapsed - (year - 1)),
                balance=principal + yearly_interest * elapsed,
                total_contributions=principal,
                total_interest=yearly_interest * elapsed,
            ))

        return SimpleInterestResult(
            principal=principal,
            annual_rate=annual_rate,
            years=years,
            interest=interest,
            total_amount=principal + interest,
            schedule=tuple(schedule),
        )
