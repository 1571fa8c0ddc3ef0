"""Finance calculators of the catalog.

Loans, savings and investment growth, retirement, rates and returns,
earnings and currency.
"""

from datetime import date, datetime
from typing import Any

from domain.services import (
    CreditCardCalculator,
    CurrencyConverter,
    EarningsCalculator,
    GrowthCalculator,
    LoanCalculator,
    RateCalculator,
    RetirementCalculator,
)
from domain.value_objects import (
    CURRENCY_CODES,
    CalculatorDefinition,
    Category,
    CompoundingFrequency,
    DepositTiming,
    ExchangeRates,
    LoanPayoffMode,
    MinimumPaymentType,
    MoneyCurrency,
    NumberScale,
    PaymentFrequency,
    RaiseType,
    RepaymentStrategy,
    SalaryPeriod,
    SimpleInterestTarget,
)

from .calculator_registry import (
    CalculatorRegistry,
    date_input,
    flag,
    mapping,
    number,
    number_list,
    select,
    table,
)

_LOANS = LoanCalculator()
_CREDIT_CARDS = CreditCardCalculator()
_GROWTH = GrowthCalculator()
_RETIREMENT = RetirementCalculator()
_RATES = RateCalculator()
_EARNINGS = EarningsCalculator()
_CURRENCY = CurrencyConverter()

LOAN_FREQUENCIES = (
    PaymentFrequency.MONTHLY,
    PaymentFrequency.SEMI_MONTHLY,
    PaymentFrequency.BI_WEEKLY,
    PaymentFrequency.WEEKLY,
    PaymentFrequency.QUARTERLY,
    PaymentFrequency.ANNUALLY,
)
EXTRA_PAYMENT_FREQUENCIES = (
    PaymentFrequency.MONTHLY,
    PaymentFrequency.QUARTERLY,
    PaymentFrequency.ANNUALLY,
)
CONTRIBUTION_FREQUENCIES = (
    PaymentFrequency.ANNUALLY,
    PaymentFrequency.QUARTERLY,
    PaymentFrequency.MONTHLY,
    PaymentFrequency.BI_WEEKLY,
    PaymentFrequency.WEEKLY,
)
SAVINGS_COMPOUNDING = (
    CompoundingFrequency.DAILY,
    CompoundingFrequency.MONTHLY,
    CompoundingFrequency.QUARTERLY,
    CompoundingFrequency.ANNUALLY,
)
GOAL_COMPOUNDING = (
    CompoundingFrequency.MONTHLY,
    CompoundingFrequency.QUARTERLY,
    CompoundingFrequency.ANNUALLY,
)


def register_finance_calculators(registry: CalculatorRegistry) -> None:
    """Register every finance calculator."""
    _register_loans(registry)
    _register_growth(registry)
    _register_retirement(registry)
    _register_rates(registry)
    _register_earnings(registry)
    _register_currency(registry)


def _register_loans(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "mortgage",
            "Mortgage Calculator",
            "Monthly payment, total interest and amortization schedule of a home loan.",
            Category.FINANCE,
            (
                number("home_price", "Home price", 300000, "currency"),
                number("down_payment", "Down payment", 60000, "currency"),
                number("annual_rate", "Interest rate", 4.5, "%"),
                number("years", "Loan term", 30, "years"),
                number("property_tax_yearly", "Property tax per year", 0, "currency"),
                number("insurance_yearly", "Home insurance per year", 0, "currency"),
                number("pmi_monthly", "PMI per month", 0, "currency"),
            ),
            "M = P * r(1+r)^n / ((1+r)^n - 1), r = APR / 1200, n = years * 12",
        ),
        lambda values: _LOANS.mortgage(**values),
    )
    registry.register(
        CalculatorDefinition(
            "amortization",
            "Amortization Calculator",
            "Payment schedule of a loan with optional extra payments.",
            Category.FINANCE,
            (
                number("loan_amount", "Loan amount", 250000, "currency"),
                number("annual_rate", "Interest rate", 4.5, "%"),
                number("years", "Loan term", 30, "years"),
                select("frequency", "Payment frequency", LOAN_FREQUENCIES, PaymentFrequency.MONTHLY),
                number("extra_payment", "Extra payment per period", 0, "currency"),
                date_input("start_date", "Loan start date"),
            ),
            "Periodic rate = APR / payments per year; extra payments reduce principal",
        ),
        _amortization,
    )
    registry.register(
        CalculatorDefinition(
            "car-loan",
            "Car Loan Calculator",
            "Monthly payment and total cost of a vehicle loan including sales tax.",
            Category.FINANCE,
            (
                number("vehicle_price", "Vehicle price", 30000, "currency"),
                number("down_payment", "Down payment", 5000, "currency"),
                number("trade_in_value", "Trade-in value", 0, "currency"),
                number("sales_tax_rate", "Sales tax", 6, "%"),
                number("annual_rate", "Interest rate", 4.5, "%"),
                number("months", "Loan term", 60, "months"),
            ),
            "Loan = price + tax - down payment - trade-in",
        ),
        lambda values: _LOANS.car_loan(**{**values, "months": int(values["months"])}),
    )
    registry.register(
        CalculatorDefinition(
            "boat-loan",
            "Boat Loan Calculator",
            "Boat loan schedule with recurring and one-time extra payments.",
            Category.FINANCE,
            (
                number("loan_amount", "Loan amount", 25000, "currency"),
                number("annual_rate", "Interest rate", 6.5, "%"),
                number("years", "Loan term years", 5, "years"),
                number("months", "Loan term months", 0, "months"),
                number("extra_payment", "Extra payment", 0, "currency"),
                select(
                    "extra_frequency", "Extra payment frequency",
                    EXTRA_PAYMENT_FREQUENCIES, PaymentFrequency.MONTHLY,
                ),
                number("one_time_payment", "One-time payment", 0, "currency"),
                number("one_time_payment_number", "One-time payment number", 0),
            ),
            "Standard amortization over years * 12 + months payments",
        ),
        _boat_loan,
    )
    registry.register(
        CalculatorDefinition(
            "refinance",
            "Mortgage Refinance Calculator",
            "Monthly savings, break-even month and lifetime savings of a refinance.",
            Category.FINANCE,
            (
                number("current_balance", "Current balance", 250000, "currency"),
                number("current_rate", "Current interest rate", 5.5, "%"),
                number("current_remaining_years", "Remaining term", 25, "years"),
                number("new_rate", "New interest rate", 4.0, "%"),
                number("new_term_years", "New term", 30, "years"),
                number("closing_costs", "Closing costs", 5000, "currency"),
            ),
            "Break-even month = ceil(closing costs / monthly savings)",
        ),
        lambda values: _LOANS.refinance(**values),
    )
    registry.register(
        CalculatorDefinition(
            "loan-payoff",
            "Loan Payoff Calculator",
            "Time to pay off a loan, or the payment needed to clear it by a target date.",
            Category.FINANCE,
            (
                number("balance", "Loan balance", 10000, "currency"),
                number("annual_rate", "Interest rate", 5, "%"),
                number("minimum_payment", "Payment", 200, "currency"),
                number("extra_payment", "Extra payment", 0, "currency"),
                select("frequency", "Payment frequency", PaymentFrequency, PaymentFrequency.MONTHLY),
                select("compounding", "Compounding", CompoundingFrequency, CompoundingFrequency.MONTHLY),
                select("mode", "Strategy", LoanPayoffMode, LoanPayoffMode.FIXED_PAYMENT),
                number("target_months", "Target payoff time", 36, "months"),
            ),
            "Rate per payment = (1 + r/m)^(m/n) - 1",
        ),
        _loan_payoff,
    )
    registry.register(
        CalculatorDefinition(
            "credit-card",
            "Credit Card Repayment Calculator",
            "Months and interest needed to clear a credit card balance.",
            Category.FINANCE,
            (
                number("balance", "Balance", 5000, "currency"),
                number("annual_rate", "APR", 18.99, "%"),
                select("payment_type", "Minimum payment type", MinimumPaymentType, MinimumPaymentType.PERCENTAGE),
                number("minimum_percent", "Minimum payment", 2, "%"),
                number("minimum_amount", "Minimum payment floor", 25, "currency"),
                number("additional_payment", "Additional payment", 0, "currency"),
                select("strategy", "Repayment strategy", RepaymentStrategy, RepaymentStrategy.MINIMUM),
                number("target_months", "Target months", 12, "months"),
                number("target_payment", "Fixed payment", 0, "currency"),
            ),
            "Payment = r * B / (1 - (1 + r)^-n) for a fixed period",
        ),
        _credit_card,
    )


def _amortization(values: dict[str, Any]):
    return _LOANS.amortization(
        loan_amount=values["loan_amount"],
        annual_rate=values["annual_rate"],
        years=values["years"],
        frequency=PaymentFrequency(values["frequency"]),
        extra_payment=values["extra_payment"],
        start_date=_loan_start(values["start_date"]),
    )


def _loan_start(value: date | None) -> date:
    """Loans start today unless a start date is given."""
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    return value


def _boat_loan(values: dict[str, Any]):
    return _LOANS.boat_loan(
        loan_amount=values["loan_amount"],
        annual_rate=values["annual_rate"],
        years=int(values["years"]),
        months=int(values["months"]),
        extra_payment=values["extra_payment"],
        extra_frequency=PaymentFrequency(values["extra_frequency"]),
        one_time_payment=values["one_time_payment"],
        one_time_payment_number=int(values["one_time_payment_number"]),
    )


def _loan_payoff(values: dict[str, Any]):
    target_term = LoanPayoffMode(values["mode"]) == LoanPayoffMode.TARGET_TERM
    return _LOANS.loan_payoff(
        balance=values["balance"],
        annual_rate=values["annual_rate"],
        minimum_payment=values["minimum_payment"],
        extra_payment=values["extra_payment"],
        frequency=PaymentFrequency(values["frequency"]),
        compounding=CompoundingFrequency(values["compounding"]),
        target_months=int(values["target_months"]) if target_term else None,
    )


def _credit_card(values: dict[str, Any]):
    return _CREDIT_CARDS.repayment_plan(
        balance=values["balance"],
        annual_rate=values["annual_rate"],
        strategy=RepaymentStrategy(values["strategy"]),
        payment_type=MinimumPaymentType(values["payment_type"]),
        minimum_percent=values["minimum_percent"],
        minimum_amount=values["minimum_amount"],
        additional_payment=values["additional_payment"],
        target_months=int(values["target_months"]),
        target_payment=values["target_payment"],
    )


def _register_growth(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "sip",
            "SIP Calculator",
            "Future value of a monthly investment plan with a yearly step-up.",
            Category.FINANCE,
            (
                number("monthly_investment", "Monthly investment", 1000, "currency"),
                number("annual_return", "Expected return", 12, "%"),
                number("years", "Investment period", 10, "years"),
                number("inflation_rate", "Inflation", 3, "%"),
                number("annual_step_up", "Yearly step-up", 0, "%"),
            ),
            "Monthly interest on value plus contribution at annual return / 12",
        ),
        lambda values: _GROWTH.sip(**{**values, "years": int(values["years"])}),
    )
    registry.register(
        CalculatorDefinition(
            "savings",
            "Savings Calculator",
            "Growth of a savings account with monthly deposits.",
            Category.FINANCE,
            (
                number("initial_deposit", "Initial deposit", 1000, "currency"),
                number("monthly_deposit", "Monthly deposit", 100, "currency"),
                number("annual_rate", "Interest rate", 5, "%"),
                number("years", "Years", 5, "years"),
                select("compounding", "Compounding", SAVINGS_COMPOUNDING, CompoundingFrequency.MONTHLY),
            ),
            "Monthly rate = (1 + r/n)^(n/12) - 1",
        ),
        lambda values: _GROWTH.savings(
            **{**values, "compounding": CompoundingFrequency(values["compounding"])}
        ),
    )
    registry.register(
        CalculatorDefinition(
            "investment",
            "Investment Calculator",
            "Investment growth with rising contributions, inflation and tax on gains.",
            Category.FINANCE,
            (
                number("initial_investment", "Initial investment", 10000, "currency"),
                number("contribution", "Contribution", 500, "currency"),
                select(
                    "contribution_frequency", "Contribution frequency",
                    CONTRIBUTION_FREQUENCIES, PaymentFrequency.MONTHLY,
                ),
                number("contribution_increase", "Yearly contribution increase", 0, "%"),
                number("annual_return", "Expected return", 7, "%"),
                select(
                    "compounding", "Compounding",
                    (
                        CompoundingFrequency.ANNUALLY,
                        CompoundingFrequency.SEMI_ANNUALLY,
                        CompoundingFrequency.QUARTERLY,
                        CompoundingFrequency.MONTHLY,
                        CompoundingFrequency.DAILY,
                    ),
                    CompoundingFrequency.MONTHLY,
                ),
                number("years", "Years", 20, "years"),
                number("inflation_rate", "Inflation", 2.5, "%"),
                number("tax_rate", "Tax on gains", 0, "%"),
            ),
            "Yearly rows of start balance, contributions, returns and end balance",
        ),
        _investment,
    )
    registry.register(
        CalculatorDefinition(
            "compound-interest",
            "Compound Interest Calculator",
            "Compound growth with regular deposits and withdrawals.",
            Category.FINANCE,
            (
                number("principal", "Initial investment", 5000, "currency"),
                number("annual_rate", "Interest rate", 5, "%"),
                select("compounding", "Compounding", CompoundingFrequency, CompoundingFrequency.MONTHLY),
                number("years", "Years", 5, "years"),
                number("months", "Months", 0, "months"),
                number("deposit", "Deposit", 0, "currency"),
                select("deposit_frequency", "Deposit frequency", PaymentFrequency, PaymentFrequency.MONTHLY),
                select("deposit_timing", "Deposit timing", DepositTiming, DepositTiming.BEGINNING),
                number("deposit_increase", "Yearly deposit increase", 0, "%"),
                number("withdrawal", "Withdrawal", 0, "currency"),
                select(
                    "withdrawal_frequency", "Withdrawal frequency",
                    PaymentFrequency, PaymentFrequency.MONTHLY,
                ),
                number("withdrawal_increase", "Yearly withdrawal increase", 0, "%"),
            ),
            "Effective annual rate = (1 + r/n)^n - 1; doubling time = ln 2 / ln(1 + EAR)",
        ),
        _compound_interest,
    )
    registry.register(
        CalculatorDefinition(
            "money-market",
            "Money Market Account Calculator",
            "Growth of a money market account with monthly deposits.",
            Category.FINANCE,
            (
                number("initial_deposit", "Initial deposit", 10000, "currency"),
                number("monthly_deposit", "Monthly deposit", 0, "currency"),
                number("annual_rate", "Interest rate", 3.5, "%"),
                number("years", "Years", 5, "years"),
                select("compounding", "Compounding", SAVINGS_COMPOUNDING, CompoundingFrequency.MONTHLY),
            ),
            "Monthly rate = ((1 + r/n)^n - 1) / 12",
        ),
        lambda values: _GROWTH.money_market(
            **{**values, "compounding": CompoundingFrequency(values["compounding"])}
        ),
    )
    registry.register(
        CalculatorDefinition(
            "savings-goal",
            "Savings Goal Calculator",
            "Time to reach a savings goal and the contribution needed to reach it on time.",
            Category.FINANCE,
            (
                number("goal_amount", "Savings goal", 25000, "currency"),
                number("current_savings", "Current savings", 5000, "currency"),
                number("monthly_contribution", "Monthly contribution", 500, "currency"),
                number("annual_rate", "Interest rate", 3, "%"),
                number("target_months", "Target time", 60, "months"),
                select("compounding", "Compounding", GOAL_COMPOUNDING, CompoundingFrequency.MONTHLY),
            ),
            "Required contribution from the future value of a series",
        ),
        lambda values: _GROWTH.savings_goal(**{
            **values,
            "target_months": int(values["target_months"]),
            "compounding": CompoundingFrequency(values["compounding"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "how-long-to-save",
            "How Long to Save Calculator",
            "Time needed to save a target amount with periodic contributions.",
            Category.FINANCE,
            (
                number("target_amount", "Savings target", 10000, "currency"),
                number("initial_amount", "Starting amount", 1000, "currency"),
                number("contribution", "Contribution", 500, "currency"),
                select(
                    "contribution_frequency", "Contribution frequency",
                    CONTRIBUTION_FREQUENCIES, PaymentFrequency.MONTHLY,
                ),
                number("annual_rate", "Interest rate", 5, "%"),
                select("compounding", "Compounding", CompoundingFrequency, CompoundingFrequency.MONTHLY),
            ),
            "Monthly simulation capped at 50 years",
        ),
        lambda values: _GROWTH.time_to_save(**{
            **values,
            "contribution_frequency": PaymentFrequency(values["contribution_frequency"]),
            "compounding": CompoundingFrequency(values["compounding"]),
        }),
    )


def _investment(values: dict[str, Any]):
    return _GROWTH.investment(
        initial_investment=values["initial_investment"],
        contribution=values["contribution"],
        annual_return=values["annual_return"],
        years=int(values["years"]),
        contribution_frequency=PaymentFrequency(values["contribution_frequency"]),
        compounding=CompoundingFrequency(values["compounding"]),
        contribution_increase=values["contribution_increase"],
        inflation_rate=values["inflation_rate"],
        tax_rate=values["tax_rate"],
    )


def _compound_interest(values: dict[str, Any]):
    return _GROWTH.compound_interest(
        principal=values["principal"],
        annual_rate=values["annual_rate"],
        years=int(values["years"]),
        months=int(values["months"]),
        compounding=CompoundingFrequency(values["compounding"]),
        deposit=values["deposit"],
        deposit_frequency=PaymentFrequency(values["deposit_frequency"]),
        deposit_timing=DepositTiming(values["deposit_timing"]),
        deposit_increase=values["deposit_increase"],
        withdrawal=values["withdrawal"],
        withdrawal_frequency=PaymentFrequency(values["withdrawal_frequency"]),
        withdrawal_increase=values["withdrawal_increase"],
    )


def _register_retirement(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "retirement-planning",
            "Retirement Planning Calculator",
            "Savings at retirement and the income they can sustain.",
            Category.FINANCE,
            (
                number("current_age", "Current age", 30, "years"),
                number("retirement_age", "Retirement age", 65, "years"),
                number("current_savings", "Current savings", 50000, "currency"),
                number("annual_contribution", "Yearly contribution", 6000, "currency"),
                number("annual_return", "Expected return", 7, "%"),
                number("inflation_rate", "Inflation", 2.5, "%"),
                number("withdrawal_rate", "Withdrawal rate", 4, "%"),
            ),
            "Yearly growth plus contributions; income = balance * withdrawal rate",
        ),
        lambda values: _RETIREMENT.plan(**{
            **values,
            "current_age": int(values["current_age"]),
            "retirement_age": int(values["retirement_age"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "money-last",
            "How Long Will Money Last Calculator",
            "How long savings last under regular withdrawals.",
            Category.FINANCE,
            (
                number("initial_balance", "Savings", 500000, "currency"),
                number("withdrawal_amount", "Withdrawal", 2500, "currency"),
                select(
                    "withdrawal_frequency", "Withdrawal frequency",
                    CONTRIBUTION_FREQUENCIES, PaymentFrequency.MONTHLY,
                ),
                number("annual_rate", "Interest rate", 4, "%"),
                select("compounding", "Compounding", CompoundingFrequency, CompoundingFrequency.MONTHLY),
                number("inflation_rate", "Inflation", 2.5, "%"),
                flag("adjust_for_inflation", "Increase withdrawals with inflation"),
            ),
            "Monthly simulation capped at 100 years",
        ),
        lambda values: _RETIREMENT.drawdown(**{
            **values,
            "withdrawal_frequency": PaymentFrequency(values["withdrawal_frequency"]),
            "compounding": CompoundingFrequency(values["compounding"]),
        }),
    )


def _register_rates(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "apy",
            "APY Calculator",
            "Annual percentage yield of a nominal rate for every compounding frequency.",
            Category.FINANCE,
            (
                number("principal", "Deposit", 10000, "currency"),
                number("annual_rate", "Interest rate", 5, "%"),
                select("compounding", "Compounding", CompoundingFrequency, CompoundingFrequency.ANNUALLY),
                number("years", "Years", 1, "years"),
            ),
            "APY = (1 + r/n)^n - 1, or e^r - 1 when continuous",
        ),
        lambda values: _RATES.apy(**{**values, "compounding": CompoundingFrequency(values["compounding"])}),
    )
    registry.register(
        CalculatorDefinition(
            "cagr",
            "CAGR Calculator",
            "Compound annual growth rate between two values.",
            Category.FINANCE,
            (
                number("initial_value", "Initial value", 10000, "currency"),
                number("final_value", "Final value", 25000, "currency"),
                number("years", "Years", 5, "years"),
            ),
            "CAGR = (final / initial)^(1 / years) - 1",
        ),
        lambda values: _RATES.cagr(**values),
    )
    registry.register(
        CalculatorDefinition(
            "irr",
            "IRR Calculator",
            "Internal rate of return and net present value of a series of cash flows.",
            Category.FINANCE,
            (
                number_list(
                    "cash_flows", "Cash flows",
                    (-10000, 3000, 4000, 5000, 6000), allow_negative=True,
                ),
                number("discount_rate", "Discount rate", 10, "%"),
            ),
            "NPV = sum(CF_t / (1 + r)^t); IRR solves NPV = 0 by Newton iteration",
        ),
        lambda values: _RATES.irr(**values),
    )
    registry.register(
        CalculatorDefinition(
            "interest-rate",
            "Interest Rate Calculator",
            "Annual rate needed to grow savings and contributions to a target.",
            Category.FINANCE,
            (
                number("initial_amount", "Initial amount", 10000, "currency"),
                number("target_amount", "Target amount", 50000, "currency"),
                number("contribution", "Contribution", 200, "currency"),
                select(
                    "contribution_frequency", "Contribution frequency",
                    CONTRIBUTION_FREQUENCIES, PaymentFrequency.MONTHLY,
                ),
                number("years", "Years", 10, "years"),
                select("compounding", "Compounding", CompoundingFrequency, CompoundingFrequency.MONTHLY),
            ),
            "Bisection over -99% to 100% on the projected final balance",
        ),
        lambda values: _RATES.solve_interest_rate(**{
            **values,
            "years": int(values["years"]),
            "contribution_frequency": PaymentFrequency(values["contribution_frequency"]),
            "compounding": CompoundingFrequency(values["compounding"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "simple-interest",
            "Simple Interest Calculator",
            "Simple interest, or the principal, rate or time that produces it.",
            Category.FINANCE,
            (
                number("principal", "Principal", 10000, "currency"),
                number("annual_rate", "Interest rate", 5, "%"),
                number("years", "Time", 3, "years"),
                number("interest", "Interest", 0, "currency"),
                select("solve_for", "Solve for", SimpleInterestTarget, SimpleInterestTarget.INTEREST),
            ),
            "I = P * R * T / 100",
        ),
        lambda values: _RATES.simple_interest(
            **{**values, "solve_for": SimpleInterestTarget(values["solve_for"])}
        ),
    )


def _register_earnings(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "pay-raise",
            "Pay Raise Calculator",
            "New salary after a raise, for every pay period.",
            Category.FINANCE,
            (
                number("current_salary", "Current salary", 50000, "currency"),
                select("raise_type", "Raise type", RaiseType, RaiseType.PERCENTAGE),
                number("raise_percent", "Raise", 5, "%"),
                number("raise_amount", "Raise amount", 2500, "currency"),
                select("period", "Salary period", SalaryPeriod, SalaryPeriod.YEARLY),
                number("hours_per_week", "Hours per week", 40, "hours"),
            ),
            "New salary = salary * (1 + raise / 100), or salary + amount",
        ),
        lambda values: _EARNINGS.pay_raise(**{
            **values,
            "raise_type": RaiseType(values["raise_type"]),
            "period": SalaryPeriod(values["period"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "hourly-to-salary",
            "Hourly to Salary Calculator",
            "Yearly, monthly and weekly pay from an hourly wage.",
            Category.FINANCE,
            (
                number("hourly_rate", "Hourly wage", 20, "currency"),
                number("hours_per_week", "Hours per week", 40, "hours"),
                number("weeks_per_year", "Weeks per year", 52, "weeks"),
                number("days_per_week", "Days per week", 5, "days"),
                number("overtime_rate", "Overtime multiplier", 1.5),
                number("overtime_hours", "Overtime hours per week", 0, "hours"),
            ),
            "Annual = rate * hours * weeks + overtime",
        ),
        lambda values: _EARNINGS.hourly_to_salary(**values),
    )
    registry.register(
        CalculatorDefinition(
            "salary-to-hourly",
            "Salary to Hourly Calculator",
            "Hourly, daily and weekly pay from a yearly salary.",
            Category.FINANCE,
            (
                number("annual_salary", "Yearly salary", 50000, "currency"),
                number("hours_per_week", "Hours per week", 40, "hours"),
                number("weeks_per_year", "Weeks per year", 52, "weeks"),
                number("days_per_week", "Days per week", 5, "days"),
            ),
            "Hourly = salary / (hours per week * weeks per year)",
        ),
        lambda values: _EARNINGS.salary_to_hourly(**values),
    )
    registry.register(
        CalculatorDefinition(
            "overtime",
            "Overtime Calculator",
            "Pay for regular, overtime and double-time hours.",
            Category.FINANCE,
            (
                number("hourly_rate", "Hourly wage", 20, "currency"),
                number("regular_hours", "Regular hours", 40, "hours"),
                number("overtime_hours", "Overtime hours", 10, "hours"),
                number("overtime_rate", "Overtime multiplier", 1.5),
                number("double_time_hours", "Double-time hours", 0, "hours"),
                number("double_time_rate", "Double-time multiplier", 2),
            ),
            "Total = regular + overtime * 1.5 + double time * 2",
        ),
        lambda values: _EARNINGS.overtime(**values),
    )
    registry.register(
        CalculatorDefinition(
            "time-and-a-half",
            "Time and a Half Calculator",
            "Pay with overtime hours at one and a half times the hourly wage.",
            Category.FINANCE,
            (
                number("hourly_rate", "Hourly wage", 20, "currency"),
                number("regular_hours", "Regular hours", 40, "hours"),
                number("overtime_hours", "Overtime hours", 5, "hours"),
            ),
            "Overtime pay = hours * rate * 1.5",
        ),
        lambda values: _EARNINGS.time_and_a_half(**values),
    )
    registry.register(
        CalculatorDefinition(
            "cash-back",
            "Cash Back Calculator",
            "Monthly and yearly cash back net of the card fee.",
            Category.FINANCE,
            (
                number("monthly_spending", "Monthly spending", 2000, "currency"),
                number("cashback_rate", "Cash back rate", 2, "%"),
                number("annual_fee", "Annual fee", 0, "currency"),
                table("categories", "Spending categories"),
            ),
            "Cash back = spending * rate / 100, per category when given",
        ),
        lambda values: _EARNINGS.cash_back(**values),
    )
    registry.register(
        CalculatorDefinition(
            "margin",
            "Margin Calculator",
            "Gross, operating and net profit margins.",
            Category.FINANCE,
            (
                number("revenue", "Revenue", 100000, "currency"),
                number("cost_of_goods", "Cost of goods sold", 60000, "currency"),
                number("operating_expenses", "Operating expenses", 20000, "currency"),
                number("other_expenses", "Other expenses", 5000, "currency"),
            ),
            "Margin = profit / revenue * 100",
        ),
        lambda values: _EARNINGS.margin(**values),
    )
    registry.register(
        CalculatorDefinition(
            "money-counter",
            "Money Counter",
            "Total of counted bank notes and coins.",
            Category.FINANCE,
            (
                select("currency", "Currency", MoneyCurrency, MoneyCurrency.USD),
                mapping("notes", "Notes counted per value"),
                mapping("coins", "Coins counted per value"),
            ),
            "Total = sum(count * denomination)",
        ),
        lambda values: _EARNINGS.count_money(**{**values, "currency": MoneyCurrency(values["currency"])}),
    )
    registry.register(
        CalculatorDefinition(
            "price-per-square-foot",
            "Price per Square Foot Calculator",
            "Property price per square foot and per square meter.",
            Category.FINANCE,
            (
                number("property_price", "Property price", 350000, "currency"),
                number("square_feet", "Living area", 2000, "sq ft"),
                flag("include_exterior", "Include exterior area"),
                number("exterior_square_feet", "Exterior area", 500, "sq ft"),
            ),
            "Price / area",
        ),
        lambda values: _EARNINGS.price_per_square_foot(**values),
    )


def _register_currency(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "currency-converter",
            "Currency Converter",
            "Convert an amount between currencies at current exchange rates.",
            Category.FINANCE,
            (
                number("amount", "Amount", 1000, "currency"),
                select("from_currency", "From", CURRENCY_CODES, "USD"),
                select("to_currency", "To", CURRENCY_CODES, "EUR"),
            ),
            "Result = amount * rate[to] / rate[from]",
        ),
        _currency_conversion,
        needs_rates=True,
    )
    registry.register(
        CalculatorDefinition(
            "million-to-billion",
            "Million to Billion Converter",
            "Move large amounts between thousands, millions, billions and trillions.",
            Category.FINANCE,
            (
                number("amount", "Amount", 1),
                select("from_scale", "From", NumberScale, NumberScale.MILLION),
                select("to_scale", "To", NumberScale, NumberScale.BILLION),
                select("currency", "Currency", CURRENCY_CODES, "USD"),
                flag("convert_currency", "Show in other currencies"),
            ),
            "1 billion = 1000 million",
        ),
        _scale_conversion,
        needs_rates=True,
        rates_when=lambda values: values["convert_currency"],
    )


def _currency_conversion(values: dict[str, Any], rates: ExchangeRates):
    for code in (values["from_currency"], values["to_currency"]):
        if code != rates.base and code not in rates.rates:
            raise ValueError(f"currency must have an exchange rate, got {code}")
    return _CURRENCY.convert(values["amount"], values["from_currency"], values["to_currency"], rates)


def _scale_conversion(values: dict[str, Any], rates: ExchangeRates):
    return _CURRENCY.convert_scale(
        amount=values["amount"],
        from_scale=NumberScale(values["from_scale"]),
        to_scale=NumberScale(values["to_scale"]),
        currency=values["currency"],
        rates=rates if values["convert_currency"] else None,
    )
