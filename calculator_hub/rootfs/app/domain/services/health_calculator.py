"""Health calculator service.

Domain service for body measurements: BMI, basal metabolic rate,
waist-to-hip ratio and food energy units.
"""

from domain.value_objects import (
    ActivityLevel,
    BmiResult,
    BmrFormula,
    BmrResult,
    FoodEnergyResult,
    FoodEnergyUnit,
    Sex,
    UnitSystem,
    WaistHipResult,
)

POUNDS_PER_KG = 2.20462
CM_PER_INCH = 2.54
KCAL_PER_KJ = 0.239006
KJ_PER_KCAL = 4.184

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9

# Upper bound of each BMI band
BMI_CATEGORIES = (
    (18.5, "Underweight", "Increased risk for some health problems"),
    (25.0, "Normal weight", "Lowest risk for health problems"),
    (30.0, "Overweight", "Increased risk for health problems"),
    (35.0, "Obesity (Class 1)", "High risk for health problems"),
    (40.0, "Obesity (Class 2)", "Very high risk for health problems"),
)
SEVERE_OBESITY = ("Obesity (Class 3)", "Extremely high risk for health problems")

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# Highest low-risk and moderate-risk ratios, and the healthy target
WHR_THRESHOLDS = {
    Sex.MALE: (0.95, 1.0, 0.9),
    Sex.FEMALE: (0.80, 0.85, 0.75),
}


class HealthCalculator:
    """Calculate body composition figures."""

    def bmi(self, weight: float, height: float, unit_system: UnitSystem = UnitSystem.METRIC) -> BmiResult:
        """Body mass index.

        Args:
            weight: Weight in kg (metric) or lb (imperial)
            height: Height in cm (metric) or in (imperial)
            unit_system: Units of weight and height

        Returns:
            BMI, category and healthy weight range; all zero without a height
        """
        weight_kg, height_cm = _to_metric(weight, height, unit_system)
        height_m = height_cm / 100
        if height_m <= 0:
            return BmiResult(bmi=0.0, category="", risk="", ideal_weight_min=0.0, ideal_weight_max=0.0)

        bmi = weight_kg / height_m ** 2
        category, risk = next(
            ((name, risk) for bound, name, risk in BMI_CATEGORIES if bmi < bound), SEVERE_OBESITY
        )
        ideal_min = HEALTHY_BMI_MIN * height_m ** 2
        ideal_max = HEALTHY_BMI_MAX * height_m ** 2
        if unit_system == UnitSystem.IMPERIAL:
            ideal_min = round(ideal_min * POUNDS_PER_KG)
            ideal_max = round(ideal_max * POUNDS_PER_KG)
        return BmiResult(
            bmi=bmi,
            category=category,
            risk=risk,
            ideal_weight_min=ideal_min,
            ideal_weight_max=ideal_max,
        )

    def bmr(
        self,
        age: float,
        sex: Sex,
        weight: float,
        height: float,
        unit_system: UnitSystem = UnitSystem.METRIC,
        formula: BmrFormula = BmrFormula.MIFFLIN_ST_JEOR,
        activity_level: ActivityLevel = ActivityLevel.MODERATE,
        body_fat_percent: float = 0.0,
    ) -> BmrResult:
        """Basal metabolic rate and TDEE.

        Katch-McArdle uses lean body mass from body_fat_percent and
        ignores age, sex and height.
        """
        weight_kg, height_cm = _to_metric(weight, height, unit_system)
        if formula == BmrFormula.KATCH_MCARDLE:
            lean_mass = weight_kg * (1 - body_fat_percent / 100)
            bmr = 370 + 21.6 * lean_mass
        elif formula == BmrFormula.HARRIS_BENEDICT:
            if sex == Sex.MALE:
                bmr = 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age + 88.362
            else:
                bmr = 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age + 447.593
        else:
            bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
            bmr += 5 if sex == Sex.MALE else -161

        multiplier = ACTIVITY_MULTIPLIERS[activity_level]
        return BmrResult(
            bmr=bmr,
            tdee=bmr * multiplier,
            formula=formula.value,
            activity_multiplier=multiplier,
        )

    def waist_hip_ratio(self, waist: float, hip: float, sex: Sex) -> WaistHipResult:
        """Waist-to-hip ratio; zero with a zero hip measurement."""
        low, moderate, target = WHR_THRESHOLDS[sex]
        ratio = waist / hip if hip > 0 else 0.0
        if ratio <= low:
            risk = "Low Risk"
        elif ratio <= moderate:
            risk = "Moderate Risk"
        else:
            risk = "High Risk"
        return WaistHipResult(ratio=ratio, risk=risk, ideal_waist=hip * target)

    def food_energy(self, value: float, from_unit: FoodEnergyUnit) -> FoodEnergyResult:
        """Convert kJ to kcal or kcal to kJ."""
        if from_unit == FoodEnergyUnit.KILOJOULES:
            return FoodEnergyResult(value, from_unit.value, FoodEnergyUnit.KILOCALORIES.value, value * KCAL_PER_KJ)
        return FoodEnergyResult(value, from_unit.value, FoodEnergyUnit.KILOJOULES.value, value * KJ_PER_KCAL)


def _to_metric(weight: float, height: float, unit_system: UnitSystem) -> tuple[float, float]:
    if unit_system == UnitSystem.IMPERIAL:
        return weight / POUNDS_PER_KG, height * CM_PER_INCH
    return weight, height
