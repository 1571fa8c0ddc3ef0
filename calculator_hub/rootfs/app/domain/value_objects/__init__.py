"""Value objects for the calculator domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .calculator_definition import (
    CalculatorDefinition,
    Category,
    InputField,
    InputKind,
)
from .choice import ChoiceEnum
from .conversion_results import (
    ConversionResult,
    FeetInchesResult,
    StonePoundsResult,
    WaterWeightResult,
)
from .cooking_results import (
    AirFryerResult,
    ButterConversionResult,
    CookingConversionResult,
    OvenTemperatureResult,
)
from .currency import (
    CurrencyConversionResult,
    CurrencyInfo,
    CURRENCY_CODES,
    ExchangeRates,
    FALLBACK_BASE,
    FALLBACK_MESSAGE,
    FALLBACK_RATES,
    ScaleConversionResult,
    SUPPORTED_CURRENCIES,
)
from .earnings_results import (
    CashBackCategory,
    CashBackResult,
    DenominationCount,
    MarginResult,
    MoneyCountResult,
    OvertimeResult,
    PayBreakdown,
    PayRaiseResult,
    PricePerAreaResult,
)
from .frequency import CompoundingFrequency, PaymentFrequency
from .growth_results import (
    CompoundInterestResult,
    DrawdownResult,
    InvestmentResult,
    MoneyMarketResult,
    RetirementPlanResult,
    SavingsGoalResult,
    SavingsResult,
    SipResult,
    TimeToSaveResult,
)
from .health_results import (
    BmiResult,
    BmrResult,
    FoodEnergyResult,
    StepCaloriesResult,
    StepsResult,
    WaistHipResult,
    WalkingTimeResult,
)
from .life_event_results import (
    Milestone,
    PregnancyResult,
    SobrietyResult,
)
from .loan_results import (
    AmortizationResult,
    CarLoanResult,
    CreditCardResult,
    LoanPayoffResult,
    MortgageResult,
    RefinanceResult,
)
from .numeric_input import parse_int, parse_number
from .options import (
    ActivityLevel,
    AggregateMaterial,
    AreaShape,
    BmrFormula,
    DepositTiming,
    DepthUnit,
    DimensionUnit,
    DistanceUnit,
    EfficiencyMetric,
    FitnessLevel,
    FloorUnit,
    FoodEnergyUnit,
    FoodType,
    LoanPayoffMode,
    MinimumPaymentType,
    MoneyCurrency,
    NumberScale,
    OvenSetting,
    OvenType,
    PowerUnit,
    PregnancyMethod,
    RaiseType,
    RepaymentStrategy,
    SalaryPeriod,
    Sex,
    SimpleInterestTarget,
    TemperatureScale,
    Terrain,
    UnitSystem,
    UsageUnit,
    VolumeUnit,
    WalkingPace,
)
from .rate_results import (
    ApyComparison,
    ApyResult,
    CagrResult,
    InterestRateResult,
    IrrResult,
    ProjectionPoint,
    SimpleInterestResult,
)
from .schedule import (
    AmortizationEntry,
    CreditCardEntry,
    GrowthEntry,
)
from .utility_results import (
    AggregateResult,
    AreaPriceResult,
    CurrentResult,
    ElectricityCostResult,
    EvEfficiencyResult,
    FillVolumeResult,
    FlooringResult,
    LedSavingsResult,
    LumensResult,
    MaterialWeightResult,
    MulchResult,
    PeriodResult,
    SquareFootageResult,
    VolumeResult,
)

__all__ = [
    "ActivityLevel",
    "AggregateMaterial",
    "AggregateResult",
    "AreaPriceResult",
    "AreaShape",
    "AirFryerResult",
    "AmortizationEntry",
    "AmortizationResult",
    "ApyComparison",
    "ApyResult",
    "BmiResult",
    "BmrFormula",
    "BmrResult",
    "ButterConversionResult",
    "CagrResult",
    "CalculatorDefinition",
    "CarLoanResult",
    "CashBackCategory",
    "CashBackResult",
    "Category",
    "ChoiceEnum",
    "CompoundingFrequency",
    "CompoundInterestResult",
    "ConversionResult",
    "CookingConversionResult",
    "CreditCardEntry",
    "CreditCardResult",
    "CurrencyConversionResult",
    "CurrencyInfo",
    "CURRENCY_CODES",
    "CurrentResult",
    "DenominationCount",
    "DepositTiming",
    "DepthUnit",
    "DimensionUnit",
    "DistanceUnit",
    "DrawdownResult",
    "EfficiencyMetric",
    "ElectricityCostResult",
    "EvEfficiencyResult",
    "ExchangeRates",
    "FALLBACK_BASE",
    "FALLBACK_MESSAGE",
    "FALLBACK_RATES",
    "FeetInchesResult",
    "FillVolumeResult",
    "FitnessLevel",
    "FlooringResult",
    "FloorUnit",
    "FoodEnergyResult",
    "FoodEnergyUnit",
    "FoodType",
    "GrowthEntry",
    "InputField",
    "InputKind",
    "InterestRateResult",
    "InvestmentResult",
    "IrrResult",
    "LedSavingsResult",
    "LoanPayoffMode",
    "LoanPayoffResult",
    "LumensResult",
    "MarginResult",
    "MaterialWeightResult",
    "Milestone",
    "MinimumPaymentType",
    "MoneyCountResult",
    "MoneyCurrency",
    "MoneyMarketResult",
    "MortgageResult",
    "MulchResult",
    "NumberScale",
    "OvenSetting",
    "OvenTemperatureResult",
    "OvenType",
    "OvertimeResult",
    "parse_int",
    "parse_number",
    "PayBreakdown",
    "PaymentFrequency",
    "PayRaiseResult",
    "PeriodResult",
    "PowerUnit",
    "PregnancyMethod",
    "PregnancyResult",
    "PricePerAreaResult",
    "ProjectionPoint",
    "RaiseType",
    "RefinanceResult",
    "RepaymentStrategy",
    "RetirementPlanResult",
    "SalaryPeriod",
    "SavingsGoalResult",
    "SavingsResult",
    "ScaleConversionResult",
    "Sex",
    "SimpleInterestResult",
    "SimpleInterestTarget",
    "SipResult",
    "SobrietyResult",
    "SquareFootageResult",
    "StepCaloriesResult",
    "StepsResult",
    "StonePoundsResult",
    "SUPPORTED_CURRENCIES",
    "TemperatureScale",
    "Terrain",
    "TimeToSaveResult",
    "UnitSystem",
    "UsageUnit",
    "VolumeResult",
    "VolumeUnit",
    "WaistHipResult",
    "WalkingPace",
    "WalkingTimeResult",
    "WaterWeightResult",
]
