"""Health and fitness result value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BmiResult:
    """Body mass index with its category.

    Attributes:
        bmi: Weight in kg over height in m squared
        category: WHO weight category
        risk: Health risk associated with the category
        ideal_weight_min: Lowest healthy weight for the height, in the input unit
        ideal_weight_max: Highest healthy weight for the height, in the input unit
    """

    bmi: float
    category: str
    risk: str
    ideal_weight_min: float
    ideal_weight_max: float


@dataclass(frozen=True)
class BmrResult:
    """Basal metabolic rate and total daily energy expenditure in kcal/day."""

    bmr: float
    tdee: float
    formula: str
    activity_multiplier: float


@dataclass(frozen=True)
class WaistHipResult:
    """Waist-to-hip ratio with its health risk.

    Attributes:
        ratio: Waist over hip circumference
        risk: "Low Risk", "Moderate Risk" or "High Risk"
        ideal_waist: Waist for a healthy ratio at the given hip size
    """

    ratio: float
    risk: str
    ideal_waist: float

    def __post_init__(self) -> None:
        if self.ratio < 0:
            raise ValueError(f"ratio must be non-negative, got {self.ratio}")


@dataclass(frozen=True)
class FoodEnergyResult:
    """A food energy value converted between kilojoules and kilocalories."""

    value: float
    from_unit: str
    to_unit: str
    result: float


@dataclass(frozen=True)
class StepsResult:
    """Steps and distance for a stride length.

    Attributes:
        stride_inches: Stride length used, in inches
        steps_per_mile: Steps in one mile
        steps_per_km: Steps in one kilometer
        steps: Steps for the requested distance
        distance_miles: Distance covered, in miles
        distance_km: Distance covered, in kilometers
    """

    stride_inches: float
    steps_per_mile: int
    steps_per_km: int
    steps: int
    distance_miles: float
    distance_km: float


@dataclass(frozen=True)
class StepCaloriesResult:
    """Calories burned walking a number of steps."""

    steps_per_mile: int
    distance_miles: float
    minutes: int
    calories: int
    met: float


@dataclass(frozen=True)
class WalkingTimeResult:
    """Time needed to walk a distance.

    Attributes:
        total_seconds: Walking time in whole seconds
        minutes: Whole minutes of the walking time
        seconds: Remaining seconds
        adjusted_pace: Pace after terrain, fitness and age adjustments
        calories: Estimated calories burned by a 70 kg walker
    """

    total_seconds: int
    minutes: int
    seconds: int
    adjusted_pace: float
    calories: int
