"""Tests for the health and activity calculators."""

import pytest
from domain.services import ActivityCalculator, HealthCalculator
from domain.value_objects import (
    ActivityLevel,
    BmrFormula,
    DistanceUnit,
    FitnessLevel,
    FoodEnergyUnit,
    Sex,
    Terrain,
    UnitSystem,
)


@pytest.fixture
def health() -> HealthCalculator:
    return HealthCalculator()


@pytest.fixture
def activity() -> ActivityCalculator:
    return ActivityCalculator()


class TestBmi:
    """Tests for body mass index."""

    def test_metric(self, health: HealthCalculator) -> None:
        result = health.bmi(70, 175)

        assert result.bmi == pytest.approx(22.857, abs=1e-3)
        assert result.category == "Normal weight"
        assert result.ideal_weight_min == pytest.approx(18.5 * 1.75 ** 2)
        assert result.ideal_weight_max == pytest.approx(24.9 * 1.75 ** 2)

    def test_imperial_ideal_range_in_pounds(self, health: HealthCalculator) -> None:
        result = health.bmi(154, 69, UnitSystem.IMPERIAL)

        assert result.bmi == pytest.approx(22.74, abs=0.01)
        assert isinstance(result.ideal_weight_min, int)
        assert result.ideal_weight_min < 154 < result.ideal_weight_max

    @pytest.mark.parametrize(
        "weight, category",
        [(50, "Underweight"), (80, "Overweight"), (100, "Obesity (Class 1)"), (150, "Obesity (Class 3)")],
    )
    def test_categories(self, health: HealthCalculator, weight: float, category: str) -> None:
        assert health.bmi(weight, 175).category == category

    def test_zero_height(self, health: HealthCalculator) -> None:
        result = health.bmi(70, 0)

        assert result.bmi == 0.0
        assert result.category == ""


class TestBmr:
    """Tests for basal metabolic rate."""

    def test_mifflin_st_jeor(self, health: HealthCalculator) -> None:
        male = health.bmr(30, Sex.MALE, 70, 175)
        female = health.bmr(30, Sex.FEMALE, 70, 175)

        assert male.bmr == pytest.approx(1648.75)
        assert female.bmr == pytest.approx(1482.75)
        assert male.tdee == pytest.approx(1648.75 * 1.55)

    def test_harris_benedict(self, health: HealthCalculator) -> None:
        result = health.bmr(30, Sex.MALE, 70, 175, formula=BmrFormula.HARRIS_BENEDICT)

        assert result.bmr == pytest.approx(1695.667, abs=1e-3)

    def test_katch_mcardle_uses_lean_mass(self, health: HealthCalculator) -> None:
        result = health.bmr(
            30, Sex.MALE, 70, 175,
            formula=BmrFormula.KATCH_MCARDLE,
            activity_level=ActivityLevel.SEDENTARY,
            body_fat_percent=15,
        )

        assert result.bmr == pytest.approx(370 + 21.6 * 59.5)
        assert result.activity_multiplier == 1.2


class TestWaistHipRatio:
    """Tests for waist-to-hip ratio."""

    def test_risk_depends_on_sex(self, health: HealthCalculator) -> None:
        male = health.waist_hip_ratio(80, 95, Sex.MALE)
        female = health.waist_hip_ratio(80, 95, Sex.FEMALE)

        assert male.ratio == pytest.approx(80 / 95)
        assert male.risk == "Low Risk"
        assert female.risk == "Moderate Risk"
        assert male.ideal_waist == pytest.approx(85.5)

    def test_high_risk(self, health: HealthCalculator) -> None:
        assert health.waist_hip_ratio(110, 100, Sex.MALE).risk == "High Risk"

    def test_zero_hip(self, health: HealthCalculator) -> None:
        assert health.waist_hip_ratio(80, 0, Sex.MALE).ratio == 0.0


class TestFoodEnergy:
    """Tests for kJ and kcal conversion."""

    def test_both_directions(self, health: HealthCalculator) -> None:
        assert health.food_energy(1000, FoodEnergyUnit.KILOJOULES).result == pytest.approx(239.006)
        assert health.food_energy(100, FoodEnergyUnit.KILOCALORIES).result == pytest.approx(418.4)


class TestSteps:
    """Tests for step and stride calculations."""

    def test_stride_from_height(self, activity: ActivityCalculator) -> None:
        imperial = activity.stride_length(69, Sex.MALE)
        metric = activity.stride_length(69 * 2.54, Sex.MALE, UnitSystem.METRIC)

        assert imperial == pytest.approx(69 * 0.415)
        assert metric == pytest.approx(imperial)

    def test_steps_for_distance_and_back(self, activity: ActivityCalculator) -> None:
        result = activity.steps(30, distance=1, steps=2112)

        assert result.steps_per_mile == 2112
        assert result.steps_per_km == 1312
        assert result.steps == 2112
        assert result.distance_miles == pytest.approx(1.0)

    def test_kilometers(self, activity: ActivityCalculator) -> None:
        result = activity.steps(30, distance=1.60934, distance_unit=DistanceUnit.KILOMETERS)

        assert result.steps == 2112

    def test_zero_stride(self, activity: ActivityCalculator) -> None:
        result = activity.steps(0, distance=1)

        assert result.steps == 0
        assert result.steps_per_mile == 0

    def test_steps_to_calories_imperial(self, activity: ActivityCalculator) -> None:
        """Height 5.6 means five feet six inches."""
        result = activity.steps_to_calories(10000, 150, 5.6)

        assert result.steps_per_mile == 2324
        assert result.minutes == 86
        assert result.calories == 293
        assert result.met == 3.0


class TestWalkingTime:
    """Tests for walking time estimates."""

    def test_baseline(self, activity: ActivityCalculator) -> None:
        result = activity.walking_time(3, 3, age=30)

        assert result.total_seconds == 3600
        assert (result.minutes, result.seconds) == (60, 0)
        assert result.calories == 245

    def test_adjustments_stretch_time(self, activity: ActivityCalculator) -> None:
        result = activity.walking_time(
            3, 3, age=75, fitness=FitnessLevel.BEGINNER, terrain=Terrain.UPHILL
        )

        assert result.total_seconds == round(3600 * 1.6 * 1.15 * 1.2)
        assert result.adjusted_pace == pytest.approx(3 / (1.6 * 1.15 * 1.2))

    def test_zero_pace(self, activity: ActivityCalculator) -> None:
        assert activity.walking_time(3, 0).total_seconds == 0
