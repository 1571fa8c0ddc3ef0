"""Cooking converter service.

Domain service for kitchen measures: volume and weight units with
ingredient densities, butter measures, oven scales and air fryer
settings.
"""

import math

from domain.value_objects import (
    AirFryerResult,
    ButterConversionResult,
    CookingConversionResult,
    FoodType,
    OvenSetting,
    OvenTemperatureResult,
    OvenType,
    TemperatureScale,
)

# Milliliters per unit
VOLUME_UNITS: dict[str, float] = {
    "teaspoon": 4.93,
    "tablespoon": 14.79,
    "fluid_ounce": 29.57,
    "cup": 236.59,
    "pint": 473.18,
    "quart": 946.35,
    "gallon": 3785.41,
    "teaspoon_uk": 5.92,
    "tablespoon_uk": 17.76,
    "fluid_ounce_uk": 28.41,
    "cup_uk": 284.13,
    "pint_uk": 568.26,
    "quart_uk": 1136.52,
    "gallon_uk": 4546.09,
    "gill": 142.07,
    "milliliter": 1.0,
    "liter": 1000.0,
    "cup_metric": 250.0,
}

# Grams per unit
WEIGHT_UNITS: dict[str, float] = {
    "gram": 1.0,
    "kilogram": 1000.0,
    "ounce_weight": 28.35,
    "pound": 453.59,
}

# Grams per milliliter
INGREDIENT_DENSITIES: dict[str, float] = {
    "water": 1.0,
    "milk": 1.03,
    "flour": 0.53,
    "sugar": 0.85,
    "brown_sugar": 0.72,
    "butter": 0.96,
    "oil": 0.92,
    "honey": 1.42,
    "salt": 1.22,
    "rice": 0.78,
}
DEFAULT_INGREDIENT = "water"

# Grams per butter measure
BUTTER_UNITS: dict[str, float] = {
    "sticks": 113.4,
    "cups": 226.8,
    "tablespoons": 14.2,
    "teaspoons": 4.7,
    "grams": 1.0,
    "ounces": 28.35,
    "pounds": 453.6,
}

FAN_OFFSET_CELSIUS = 20
GAS_MARK_BASE_CELSIUS = 135
GAS_MARK_STEP_CELSIUS = 25

# Upper bound in °C of each heat band
OVEN_HEAT_BANDS = (
    (120, "Very Low - Slow cooking, dehydrating"),
    (150, "Very Low - Slow cooking, keeping food warm"),
    (160, "Low - Slow roasting, some bread proofing"),
    (180, "Moderate - Baking cakes, cookies, bread"),
    (190, "Moderate - Most baking, roasting vegetables"),
    (220, "Moderately Hot - Roasting meats, pizza"),
    (240, "Hot - Crispy roast potatoes, quick roasting"),
    (260, "Very Hot - Pizza, flatbreads, quick browning"),
)
EXTREME_HEAT = "Extremely Hot - High-heat cooking, some bread baking"

# Temperature drop from an oven recipe, per oven type and scale
AIR_FRYER_REDUCTION = {
    (OvenType.CONVENTIONAL, TemperatureScale.CELSIUS): 15,
    (OvenType.CONVENTIONAL, TemperatureScale.FAHRENHEIT): 25,
    (OvenType.FAN, TemperatureScale.CELSIUS): 5,
    (OvenType.FAN, TemperatureScale.FAHRENHEIT): 10,
}
AIR_FRYER_LIMITS = {
    TemperatureScale.CELSIUS: (80, 230),
    TemperatureScale.FAHRENHEIT: (170, 450),
}
AIR_FRYER_TIME_FACTORS = {
    FoodType.MEAT: 0.7,
    FoodType.POULTRY: 0.7,
    FoodType.FISH: 0.65,
    FoodType.VEGETABLES: 0.6,
    FoodType.BAKED_GOODS: 0.75,
    FoodType.FROZEN_FOODS: 0.8,
}
SPREAD_FLAT_REDUCTION = 0.05


class CookingConverter:
    """Convert kitchen measures and cooking temperatures."""

    def convert(
        self,
        amount: float,
        from_unit: str,
        to_unit: str,
        ingredient: str = DEFAULT_INGREDIENT,
    ) -> CookingConversionResult:
        """Convert between kitchen volume and weight units.

        Volume to weight (and back) goes through the ingredient's
        density; an unknown ingredient counts as water.

        Raises:
            ValueError: If a unit is unknown
        """
        for unit in (from_unit, to_unit):
            if unit not in VOLUME_UNITS and unit not in WEIGHT_UNITS:
                raise ValueError(f"unit must be a kitchen volume or weight unit, got {unit}")

        from_volume = from_unit in VOLUME_UNITS
        to_volume = to_unit in VOLUME_UNITS
        if from_volume and to_volume:
            result = amount * VOLUME_UNITS[from_unit] / VOLUME_UNITS[to_unit]
            return CookingConversionResult(amount, from_unit, to_unit, result)
        if not from_volume and not to_volume:
            result = amount * WEIGHT_UNITS[from_unit] / WEIGHT_UNITS[to_unit]
            return CookingConversionResult(amount, from_unit, to_unit, result)

        if ingredient not in INGREDIENT_DENSITIES:
            ingredient = DEFAULT_INGREDIENT
        density = INGREDIENT_DENSITIES[ingredient]
        if from_volume:
            grams = amount * VOLUME_UNITS[from_unit] * density
            result = grams / WEIGHT_UNITS[to_unit]
        else:
            milliliters = amount * WEIGHT_UNITS[from_unit] / density
            result = milliliters / VOLUME_UNITS[to_unit]
        return CookingConversionResult(
            amount, from_unit, to_unit, result, ingredient=ingredient, density=density
        )

    def convert_butter(self, amount: float, from_unit: str) -> ButterConversionResult:
        """Express an amount of butter in every butter measure.

        Raises:
            ValueError: If from_unit is not a butter measure
        """
        if from_unit not in BUTTER_UNITS:
            raise ValueError(f"from_unit must be one of {tuple(BUTTER_UNITS)}, got {from_unit}")
        grams = amount * BUTTER_UNITS[from_unit]
        return ButterConversionResult(
            amount=amount,
            from_unit=from_unit,
            grams=grams,
            measures={unit: grams / factor for unit, factor in BUTTER_UNITS.items()},
        )

    def oven_temperature(self, temperature: float, setting: OvenSetting) -> OvenTemperatureResult:
        """Express an oven temperature in °F, °C, fan °C and gas mark."""
        if setting == OvenSetting.FAHRENHEIT:
            celsius = (temperature - 32) * 5 / 9
        elif setting == OvenSetting.FAN_CELSIUS:
            celsius = temperature + FAN_OFFSET_CELSIUS
        elif setting == OvenSetting.GAS_MARK:
            celsius = temperature * GAS_MARK_STEP_CELSIUS + GAS_MARK_BASE_CELSIUS
        else:
            celsius = temperature

        description = next(
            (text for bound, text in OVEN_HEAT_BANDS if celsius < bound), EXTREME_HEAT
        )
        return OvenTemperatureResult(
            fahrenheit=_round_half_up(celsius * 9 / 5 + 32),
            celsius=_round_half_up(celsius),
            fan_celsius=_round_half_up(celsius - FAN_OFFSET_CELSIUS),
            gas_mark=(celsius - GAS_MARK_BASE_CELSIUS) / GAS_MARK_STEP_CELSIUS,
            description=description,
        )

    def air_fryer(
        self,
        oven_temperature: float,
        cooking_minutes: float,
        oven_type: OvenType = OvenType.CONVENTIONAL,
        scale: TemperatureScale = TemperatureScale.CELSIUS,
        food_type: FoodType = FoodType.MEAT,
        spread_flat: bool = False,
    ) -> AirFryerResult:
        """Adapt an oven recipe to an air fryer.

        The temperature drops by a fixed amount depending on the oven
        type and is clamped to the air fryer's range. The time shrinks by
        a food-specific factor, a little more when the food is spread in
        a single layer.
        """
        low, high = AIR_FRYER_LIMITS[scale]
        temperature = int(oven_temperature) - AIR_FRYER_REDUCTION[(oven_type, scale)]
        temperature = max(low, min(temperature, high))

        factor = AIR_FRYER_TIME_FACTORS.get(food_type, 0.75)
        if spread_flat:
            factor -= SPREAD_FLAT_REDUCTION
        minutes = _round_half_up(int(cooking_minutes) * factor)
        return AirFryerResult(
            temperature=temperature,
            scale=scale.value,
            cooking_minutes=minutes,
            min_minutes=max(1, math.floor(minutes * 0.9)),
            max_minutes=math.ceil(minutes * 1.1),
        )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
