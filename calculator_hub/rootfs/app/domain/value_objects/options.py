"""Categorical calculator options.

Every select input of the catalog is one of these enums. Values are
the strings accepted on the wire.
"""

from .choice import ChoiceEnum


class RepaymentStrategy(ChoiceEnum):
    """How a credit card balance is paid down."""

    MINIMUM = "minimum"
    MINIMUM_PLUS = "minimum_plus"
    FIXED_AMOUNT = "fixed_amount"
    FIXED_PERIOD = "fixed_period"
    FIXED_PAYMENT = "fixed_payment"


class MinimumPaymentType(ChoiceEnum):
    """Percentage of the balance with a floor, or a flat amount."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


class DepositTiming(ChoiceEnum):
    """Whether deposits land before or after the period's interest."""

    BEGINNING = "beginning"
    END = "end"


class SimpleInterestTarget(ChoiceEnum):
    """Variable solved by the simple interest calculator."""

    INTEREST = "interest"
    PRINCIPAL = "principal"
    RATE = "rate"
    TIME = "time"


class LoanPayoffMode(ChoiceEnum):
    """Pay a fixed amount, or find the payment for a target term."""

    FIXED_PAYMENT = "fixed_payment"
    TARGET_TERM = "target_term"


class RaiseType(ChoiceEnum):
    """Pay raise given as a percentage or as a flat amount."""

    PERCENTAGE = "percentage"
    AMOUNT = "amount"


class SalaryPeriod(ChoiceEnum):
    """Period a salary figure refers to."""

    YEARLY = "yearly"
    MONTHLY = "monthly"
    BI_WEEKLY = "bi-weekly"
    WEEKLY = "weekly"
    HOURLY = "hourly"


class MoneyCurrency(ChoiceEnum):
    """Currencies with a denomination set for counting cash."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    INR = "INR"


class NumberScale(ChoiceEnum):
    """Short-scale magnitudes used for large amounts."""

    THOUSAND = "thousand"
    MILLION = "million"
    BILLION = "billion"
    TRILLION = "trillion"


class UnitSystem(ChoiceEnum):
    """Metric or US customary measurements."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class Sex(ChoiceEnum):
    """Biological sex used by body composition formulas."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(ChoiceEnum):
    """Daily activity level for TDEE."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class BmrFormula(ChoiceEnum):
    """Basal metabolic rate equation."""

    MIFFLIN_ST_JEOR = "mifflin-st-jeor"
    HARRIS_BENEDICT = "harris-benedict"
    KATCH_MCARDLE = "katch-mcardle"


class FoodEnergyUnit(ChoiceEnum):
    """Unit of a food energy value."""

    KILOJOULES = "kj"
    KILOCALORIES = "kcal"


class WalkingPace(ChoiceEnum):
    """Walking pace for step calorie estimates."""

    CASUAL = "casual"
    AVERAGE = "average"
    BRISK = "brisk"
    POWER = "power"


class Terrain(ChoiceEnum):
    """Surface walked on."""

    FLAT = "flat"
    UPHILL = "uphill"
    DOWNHILL = "downhill"
    SAND = "sand"
    SNOW = "snow"


class FitnessLevel(ChoiceEnum):
    """Walker fitness."""

    BEGINNER = "beginner"
    AVERAGE = "average"
    FIT = "fit"
    ATHLETIC = "athletic"


class DistanceUnit(ChoiceEnum):
    """Unit of a travelled distance."""

    MILES = "miles"
    KILOMETERS = "km"


class PregnancyMethod(ChoiceEnum):
    """Reference date used to date a pregnancy."""

    LAST_PERIOD = "lmp"
    CONCEPTION = "conception"
    IVF = "ivf"
    ULTRASOUND = "ultrasound"


class OvenType(ChoiceEnum):
    """Conventional oven, or one with a fan (convection)."""

    CONVENTIONAL = "conventional"
    FAN = "fan"


class TemperatureScale(ChoiceEnum):
    """Scale a cooking temperature is given in."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class OvenSetting(ChoiceEnum):
    """Ways of expressing an oven temperature."""

    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"
    FAN_CELSIUS = "fan_celsius"
    GAS_MARK = "gas_mark"


class FoodType(ChoiceEnum):
    """Kind of food cooked in an air fryer."""

    MEAT = "meat"
    POULTRY = "poultry"
    FISH = "fish"
    VEGETABLES = "vegetables"
    BAKED_GOODS = "baked_goods"
    FROZEN_FOODS = "frozen_foods"


class PowerUnit(ChoiceEnum):
    """Unit of an appliance power rating."""

    WATTS = "watts"
    KILOWATTS = "kilowatts"


class UsageUnit(ChoiceEnum):
    """Unit of daily usage time."""

    HOURS = "hours"
    MINUTES = "minutes"


class EfficiencyMetric(ChoiceEnum):
    """How an electric vehicle efficiency figure is stated."""

    EFFICIENCY = "efficiency"
    CONSUMPTION = "consumption"


class AggregateMaterial(ChoiceEnum):
    """Loose material ordered for landscaping."""

    GRAVEL = "gravel"
    GRAVEL_SAND = "gravel_sand"
    SAND = "sand"


class FloorUnit(ChoiceEnum):
    """Unit of room dimensions."""

    METERS = "meters"
    FEET = "feet"


class AreaShape(ChoiceEnum):
    """Outline of a floor or plot."""

    RECTANGLE = "rectangle"
    SQUARE = "square"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    TRAPEZOID = "trapezoid"


class DimensionUnit(ChoiceEnum):
    """Unit of a measured length."""

    FEET = "feet"
    INCHES = "inches"
    YARDS = "yards"
    METERS = "meters"
    CENTIMETERS = "centimeters"
    MILLIMETERS = "millimeters"


class VolumeUnit(ChoiceEnum):
    """Unit of a box volume."""

    CUBIC_FEET = "cubic_feet"
    CUBIC_METERS = "cubic_meters"
    CUBIC_YARDS = "cubic_yards"


class DepthUnit(ChoiceEnum):
    """Unit of a fill depth."""

    FEET = "feet"
    INCHES = "inches"
