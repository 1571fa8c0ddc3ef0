"""Activity calculator service.

Domain service for walking: steps from stride length, calories burned
from steps, and time to walk a distance. Calorie estimates use MET
values: calories = MET * weight in kg * hours.
"""

import math

from domain.value_objects import (
    DistanceUnit,
    FitnessLevel,
    Sex,
    StepCaloriesResult,
    StepsResult,
    Terrain,
    UnitSystem,
    WalkingPace,
    WalkingTimeResult,
)

INCHES_PER_MILE = 63360
INCHES_PER_KM = 39370
CM_PER_INCH = 2.54
KM_PER_MILE = 1.60934
POUNDS_PER_KG = 2.20462
DEFAULT_STEPS_PER_MILE = 2000
REFERENCE_WEIGHT_KG = 70

# Stride length as a share of height
STRIDE_RATIOS = {Sex.MALE: 0.415, Sex.FEMALE: 0.413}

# MET and speed in mph for each walking pace
PACE_PROFILES = {
    WalkingPace.CASUAL: (2.0, 2.0),
    WalkingPace.AVERAGE: (3.0, 3.0),
    WalkingPace.BRISK: (4.3, 4.0),
    WalkingPace.POWER: (6.0, 5.0),
}

TERRAIN_FACTORS = {
    Terrain.FLAT: 1.0,
    Terrain.UPHILL: 1.6,
    Terrain.DOWNHILL: 0.85,
    Terrain.SAND: 1.8,
    Terrain.SNOW: 1.7,
}

FITNESS_FACTORS = {
    FitnessLevel.BEGINNER: 1.15,
    FitnessLevel.AVERAGE: 1.0,
    FitnessLevel.FIT: 0.9,
    FitnessLevel.ATHLETIC: 0.8,
}


class ActivityCalculator:
    """Calculate walking figures."""

    def stride_length(self, height: float, sex: Sex, unit_system: UnitSystem = UnitSystem.IMPERIAL) -> float:
        """Estimated stride in inches from height in inches or cm."""
        height_inches = height / CM_PER_INCH if unit_system == UnitSystem.METRIC else height
        return height_inches * STRIDE_RATIOS[sex]

    def steps(
        self,
        stride_inches: float,
        distance: float = 0.0,
        distance_unit: DistanceUnit = DistanceUnit.MILES,
        steps: float = 0.0,
    ) -> StepsResult:
        """Steps for a distance and distance for a number of steps.

        Args:
            stride_inches: Stride length in inches
            distance: Distance to convert into steps
            distance_unit: Unit of distance
            steps: Step count to convert into a distance

        Returns:
            Steps per mile and km, steps for distance and distance for
            steps; all zero without a stride
        """
        if stride_inches <= 0:
            return StepsResult(stride_inches, 0, 0, 0, 0.0, 0.0)

        steps_per_mile = round(INCHES_PER_MILE / stride_inches)
        steps_per_km = round(INCHES_PER_KM / stride_inches)
        miles = distance / KM_PER_MILE if distance_unit == DistanceUnit.KILOMETERS else distance
        distance_inches = steps * stride_inches
        return StepsResult(
            stride_inches=stride_inches,
            steps_per_mile=steps_per_mile,
            steps_per_km=steps_per_km,
            steps=round(miles * INCHES_PER_MILE / stride_inches),
            distance_miles=distance_inches / INCHES_PER_MILE,
            distance_km=distance_inches / INCHES_PER_KM,
        )

    def steps_to_calories(
        self,
        steps: float,
        weight: float,
        height: float,
        pace: WalkingPace = WalkingPace.AVERAGE,
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
    ) -> StepCaloriesResult:
        """Calories burned walking a number of steps.

        Args:
            steps: Step count
            weight: Weight in lb (imperial) or kg (metric)
            height: Height in cm (metric) or in feet.inches notation
                (imperial), so 5.9 is five feet nine
            pace: Walking pace
            unit_system: Units of weight and height

        Returns:
            Distance, time and calories
        """
        if unit_system == UnitSystem.IMPERIAL:
            weight_kg = weight / POUNDS_PER_KG
            feet = math.floor(height)
            height_inches = feet * 12 + round((height - feet) * 10)
        else:
            weight_kg = weight
            height_inches = height / CM_PER_INCH

        stride = height_inches * STRIDE_RATIOS[Sex.FEMALE]
        steps_per_mile = round(INCHES_PER_MILE / stride) if stride > 0 else DEFAULT_STEPS_PER_MILE

        met, speed_mph = PACE_PROFILES[pace]
        miles = steps / steps_per_mile if steps_per_mile else 0.0
        hours = miles / speed_mph
        return StepCaloriesResult(
            steps_per_mile=steps_per_mile,
            distance_miles=miles,
            minutes=round(hours * 60),
            calories=round(met * weight_kg * hours),
            met=met,
        )

    def walking_time(
        self,
        distance: float,
        pace: float,
        age: float = 30,
        fitness: FitnessLevel = FitnessLevel.AVERAGE,
        terrain: Terrain = Terrain.FLAT,
    ) -> WalkingTimeResult:
        """Time to walk a distance at a pace, in the same distance unit.

        Terrain, fitness and age stretch or shrink the time. Calories
        use a MET picked from the pace, scaled by the terrain.
        """
        if pace <= 0:
            return WalkingTimeResult(0, 0, 0, 0.0, 0)

        factor = TERRAIN_FACTORS[terrain] * FITNESS_FACTORS[fitness] * _age_factor(age)
        hours = distance / pace * factor
        total_seconds = round(hours * 3600)
        met = _pace_met(pace) * TERRAIN_FACTORS[terrain]
        return WalkingTimeResult(
            total_seconds=total_seconds,
            minutes=total_seconds // 60,
            seconds=total_seconds % 60,
            adjusted_pace=pace / factor,
            calories=round(met * REFERENCE_WEIGHT_KG * hours),
        )


def _age_factor(age: float) -> float:
    if age < 30:
        return 0.95
    if age < 50:
        return 1.0
    if age < 70:
        return 1.1
    return 1.2


def _pace_met(pace: float) -> float:
    if pace < 2.0:
        return 2.0
    if pace < 3.0:
        return 2.5
    if pace < 4.0:
        return 3.5
    if pace < 5.0:
        return 4.3
    return 5.0
