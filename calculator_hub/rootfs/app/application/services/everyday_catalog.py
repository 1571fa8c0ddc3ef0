"""Everyday calculators of the catalog.

Unit conversions, cooking, health and fitness, electricity and home
projects.
"""

from datetime import date, datetime
from typing import Any

from domain.services import (
    ActivityCalculator,
    CookingConverter,
    EnergyCalculator,
    HealthCalculator,
    HomeGardenCalculator,
    LifeEventCalculator,
    UnitConverter,
)
from domain.services.cooking_converter import (
    BUTTER_UNITS,
    INGREDIENT_DENSITIES,
    VOLUME_UNITS,
    WEIGHT_UNITS,
)
from domain.services.energy_calculator import LUMENS_PER_WATT
from domain.services.home_garden_calculator import MATERIAL_DENSITIES
from domain.services.unit_converter import WATER_VOLUME_UNITS, WATER_WEIGHT_UNITS
from domain.value_objects import (
    ActivityLevel,
    AggregateMaterial,
    AreaShape,
    BmrFormula,
    CalculatorDefinition,
    Category,
    DepthUnit,
    DimensionUnit,
    DistanceUnit,
    EfficiencyMetric,
    FitnessLevel,
    FloorUnit,
    FoodEnergyUnit,
    FoodType,
    OvenSetting,
    OvenType,
    PowerUnit,
    PregnancyMethod,
    Sex,
    TemperatureScale,
    Terrain,
    UnitSystem,
    UsageUnit,
    VolumeUnit,
    WalkingPace,
)

from .calculator_registry import (
    CalculatorRegistry,
    date_input,
    flag,
    number,
    select,
)

_UNITS = UnitConverter()
_COOKING = CookingConverter()
_HEALTH = HealthCalculator()
_ACTIVITY = ActivityCalculator()
_LIFE_EVENTS = LifeEventCalculator()
_ENERGY = EnergyCalculator()
_HOME = HomeGardenCalculator()

# quantity: (display name, default from unit, default to unit)
CONVERTERS = {
    "length": ("Length", "m", "ft"),
    "mass": ("Mass and Weight", "kg", "lb"),
    "volume": ("Liquid Volume", "l", "gal_us"),
    "area": ("Area", "m2", "ft2"),
    "energy": ("Energy", "kj", "kcal"),
    "power": ("Power", "kw", "hp"),
    "pressure": ("Pressure", "bar", "psi"),
    "time": ("Time", "h", "min"),
    "velocity": ("Speed", "km_h", "mph"),
    "data_storage": ("Data Storage", "GB", "MB"),
    "data_transfer": ("Data Transfer Rate", "mbps", "kbps"),
    "acceleration": ("Acceleration", "mps2", "g"),
    "temperature": ("Temperature", "c", "f"),
    "fuel": ("Fuel Consumption", "mpg_us", "l_100km"),
    "gold_weight": ("Gold Weight", "oz_t", "g"),
}

KITCHEN_UNITS = tuple(VOLUME_UNITS) + tuple(WEIGHT_UNITS)
WATER_UNITS = tuple(WATER_VOLUME_UNITS) + tuple(WATER_WEIGHT_UNITS)

CONVERTER_KEYWORDS = {
    "mass": ("weight",),
    "velocity": ("speed",),
    "gold_weight": ("troy ounce", "pennyweight", "tola", "tael", "baht", "bullion"),
}


def register_everyday_calculators(registry: CalculatorRegistry) -> None:
    """Register conversion, cooking, health, utility and home calculators."""
    _register_conversions(registry)
    _register_cooking(registry)
    _register_health(registry)
    _register_utility(registry)
    _register_home(registry)


def _register_conversions(registry: CalculatorRegistry) -> None:
    for quantity, (name, from_unit, to_unit) in CONVERTERS.items():
        units = _UNITS.units(quantity)
        registry.register(
            CalculatorDefinition(
                f"{quantity.replace('_', '-')}-converter",
                f"{name} Converter",
                f"Convert {name.lower()} between units.",
                Category.CONVERSION,
                (
                    number("value", "Value", 1, allow_negative=quantity == "temperature"),
                    select("from_unit", "From", units, from_unit),
                    select("to_unit", "To", units, to_unit),
                ),
                _conversion_formula(quantity),
                CONVERTER_KEYWORDS.get(quantity, ()),
            ),
            _converter(quantity),
        )

    registry.register(
        CalculatorDefinition(
            "meters-to-feet-inches",
            "Meters to Feet and Inches",
            "Express a height or length in feet and inches.",
            Category.CONVERSION,
            (number("meters", "Meters", 1.75, "m"),),
            "1 ft = 0.3048 m, 1 in = 0.0254 m",
        ),
        lambda values: _UNITS.to_feet_and_inches(values["meters"]),
    )
    registry.register(
        CalculatorDefinition(
            "kg-to-stone",
            "Kilograms to Stone and Pounds",
            "Express a body weight in stone and pounds.",
            Category.CONVERSION,
            (number("kilograms", "Kilograms", 70, "kg"),),
            "1 st = 14 lb, 1 lb = 0.45359237 kg",
        ),
        lambda values: _UNITS.to_stone_and_pounds(values["kilograms"]),
    )
    registry.register(
        CalculatorDefinition(
            "water-weight",
            "Water Weight Converter",
            "Convert water between volume and weight at a given temperature.",
            Category.CONVERSION,
            (
                number("value", "Amount", 1),
                select("from_unit", "From", WATER_UNITS, "gal_us"),
                select("to_unit", "To", WATER_UNITS, "lb"),
                number("temperature_c", "Water temperature", 20, "°C"),
            ),
            "Density (kg/L) = (1000 - 0.1 * (T - 4)^1.5) / 1000",
            ("gallon of water", "liters", "density"),
        ),
        lambda values: _UNITS.water_weight(**values),
    )


def _converter(quantity: str):
    def convert(values: dict[str, Any]):
        return _UNITS.convert(quantity, values["value"], values["from_unit"], values["to_unit"])
    return convert


def _conversion_formula(quantity: str) -> str:
    if quantity == "temperature":
        return "Converted through Kelvin"
    if quantity == "fuel":
        return "Converted through litres per 100 km"
    return "Result = value * factor[from] / factor[to]"


def _register_cooking(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "cooking-converter",
            "Cooking Converter",
            "Convert kitchen volumes and weights, using ingredient densities between them.",
            Category.FOOD_COOKING,
            (
                number("amount", "Amount", 1),
                select("from_unit", "From", KITCHEN_UNITS, "cup"),
                select("to_unit", "To", KITCHEN_UNITS, "gram"),
                select("ingredient", "Ingredient", tuple(INGREDIENT_DENSITIES), "flour"),
            ),
            "grams = milliliters * density",
        ),
        lambda values: _COOKING.convert(**values),
    )
    registry.register(
        CalculatorDefinition(
            "butter-converter",
            "Butter Converter",
            "Express an amount of butter in sticks, cups, spoons and weight.",
            Category.FOOD_COOKING,
            (
                number("amount", "Amount", 1),
                select("from_unit", "Unit", tuple(BUTTER_UNITS), "sticks"),
            ),
            "1 stick = 113.4 g = 8 tablespoons",
        ),
        lambda values: _COOKING.convert_butter(**values),
    )
    registry.register(
        CalculatorDefinition(
            "oven-temperature",
            "Oven Temperature Converter",
            "Convert between Fahrenheit, Celsius, fan oven and gas mark.",
            Category.FOOD_COOKING,
            (
                number("temperature", "Temperature", 180),
                select("setting", "Scale", OvenSetting, OvenSetting.CELSIUS),
            ),
            "Fan = C - 20; gas mark = (C - 135) / 25",
        ),
        lambda values: _COOKING.oven_temperature(values["temperature"], OvenSetting(values["setting"])),
    )
    registry.register(
        CalculatorDefinition(
            "air-fryer",
            "Air Fryer Converter",
            "Air fryer temperature and time for an oven recipe.",
            Category.FOOD_COOKING,
            (
                select("oven_type", "Oven type", OvenType, OvenType.CONVENTIONAL),
                select("scale", "Temperature scale", TemperatureScale, TemperatureScale.CELSIUS),
                number("oven_temperature", "Oven temperature", 180),
                number("cooking_minutes", "Oven time", 30, "minutes"),
                flag("spread_flat", "Food spread in a single layer"),
                select("food_type", "Food", FoodType, FoodType.MEAT),
            ),
            "Temperature lowered by 25F/15C (conventional) or 10F/5C (fan)",
        ),
        lambda values: _COOKING.air_fryer(**{
            **values,
            "oven_type": OvenType(values["oven_type"]),
            "scale": TemperatureScale(values["scale"]),
            "food_type": FoodType(values["food_type"]),
        }),
    )


def _register_health(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "bmi",
            "BMI Calculator",
            "Body mass index, its category and the healthy weight range.",
            Category.HEALTH_FITNESS,
            (
                select("unit_system", "Units", UnitSystem, UnitSystem.METRIC),
                number("weight", "Weight", 70, "kg or lb"),
                number("height", "Height", 175, "cm or in"),
            ),
            "BMI = kg / m^2",
        ),
        lambda values: _HEALTH.bmi(values["weight"], values["height"], UnitSystem(values["unit_system"])),
    )
    registry.register(
        CalculatorDefinition(
            "bmr",
            "BMR Calculator",
            "Basal metabolic rate and total daily energy expenditure.",
            Category.HEALTH_FITNESS,
            (
                select("unit_system", "Units", UnitSystem, UnitSystem.METRIC),
                number("age", "Age", 30, "years"),
                select("sex", "Sex", Sex, Sex.MALE),
                number("weight", "Weight", 70, "kg or lb"),
                number("height", "Height", 175, "cm or in"),
                number("body_fat_percent", "Body fat", 15, "%"),
                select("formula", "Formula", BmrFormula, BmrFormula.MIFFLIN_ST_JEOR),
                select("activity_level", "Activity level", ActivityLevel, ActivityLevel.MODERATE),
            ),
            "Mifflin-St Jeor: 10W + 6.25H - 5A + 5 (men) or - 161 (women)",
        ),
        _bmr,
    )
    registry.register(
        CalculatorDefinition(
            "whr",
            "Waist to Hip Ratio Calculator",
            "Waist-to-hip ratio and the health risk it indicates.",
            Category.HEALTH_FITNESS,
            (
                number("waist", "Waist", 80, "cm or in"),
                number("hip", "Hip", 95, "cm or in"),
                select("sex", "Sex", Sex, Sex.MALE),
            ),
            "WHR = waist / hip",
        ),
        lambda values: _HEALTH.waist_hip_ratio(values["waist"], values["hip"], Sex(values["sex"])),
    )
    registry.register(
        CalculatorDefinition(
            "kj-to-kcal",
            "Kilojoules to Calories Converter",
            "Convert food energy between kilojoules and kilocalories.",
            Category.HEALTH_FITNESS,
            (
                number("value", "Energy", 1000),
                select("from_unit", "From", FoodEnergyUnit, FoodEnergyUnit.KILOJOULES),
            ),
            "1 kcal = 4.184 kJ",
        ),
        lambda values: _HEALTH.food_energy(values["value"], FoodEnergyUnit(values["from_unit"])),
    )
    stride_inputs = (
        select("unit_system", "Units", UnitSystem, UnitSystem.IMPERIAL),
        select("sex", "Sex", Sex, Sex.MALE),
        number("height", "Height", 69, "in or cm"),
        number("stride_length", "Stride length, 0 to estimate from height", 0, "in"),
    )
    registry.register(
        CalculatorDefinition(
            "miles-to-steps",
            "Miles to Steps Calculator",
            "Steps needed to walk a distance.",
            Category.HEALTH_FITNESS,
            stride_inputs + (
                number("distance", "Distance", 1),
                select("distance_unit", "Distance unit", DistanceUnit, DistanceUnit.MILES),
            ),
            "Steps = distance / stride; stride = height * 0.415 (men) or 0.413 (women)",
        ),
        lambda values: _ACTIVITY.steps(
            _stride(values),
            distance=values["distance"],
            distance_unit=DistanceUnit(values["distance_unit"]),
        ),
    )
    registry.register(
        CalculatorDefinition(
            "steps-to-km",
            "Steps to Kilometers Calculator",
            "Distance covered by a number of steps.",
            Category.HEALTH_FITNESS,
            stride_inputs + (number("steps", "Steps", 10000),),
            "Distance = steps * stride",
        ),
        lambda values: _ACTIVITY.steps(_stride(values), steps=values["steps"]),
    )
    registry.register(
        CalculatorDefinition(
            "steps-to-calories",
            "Steps to Calories Calculator",
            "Calories burned walking a number of steps.",
            Category.HEALTH_FITNESS,
            (
                select("unit_system", "Units", UnitSystem, UnitSystem.IMPERIAL),
                number("steps", "Steps", 10000),
                number("weight", "Weight", 150, "lb or kg"),
                number("height", "Height", 5.6, "ft.in or cm"),
                select("pace", "Pace", WalkingPace, WalkingPace.AVERAGE),
            ),
            "Calories = MET * kg * hours",
        ),
        lambda values: _ACTIVITY.steps_to_calories(**{
            **values,
            "pace": WalkingPace(values["pace"]),
            "unit_system": UnitSystem(values["unit_system"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "walking-time",
            "Walking Time Calculator",
            "Time to walk a distance at a pace, adjusted for terrain, fitness and age.",
            Category.HEALTH_FITNESS,
            (
                number("distance", "Distance", 1),
                number("pace", "Speed", 3),
                number("age", "Age", 30, "years"),
                select("fitness", "Fitness level", FitnessLevel, FitnessLevel.AVERAGE),
                select("terrain", "Terrain", Terrain, Terrain.FLAT),
            ),
            "Time = distance / (speed * terrain * fitness * age factors)",
        ),
        lambda values: _ACTIVITY.walking_time(**{
            **values,
            "fitness": FitnessLevel(values["fitness"]),
            "terrain": Terrain(values["terrain"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "pregnancy",
            "Pregnancy Calculator",
            "Due date, current week, trimester and milestones of a pregnancy.",
            Category.HEALTH_FITNESS,
            (
                select("method", "Based on", PregnancyMethod, PregnancyMethod.LAST_PERIOD),
                date_input("reference_date", "Date"),
                number("cycle_length", "Cycle length", 28, "days"),
                number("ultrasound_weeks", "Weeks at ultrasound", 8, "weeks"),
                number("ultrasound_days", "Days at ultrasound", 0, "days"),
                date_input("as_of", "Progress measured on"),
            ),
            "Due date = last period + 280 days",
        ),
        _pregnancy,
    )
    registry.register(
        CalculatorDefinition(
            "sobriety",
            "Sobriety Calculator",
            "Time sober, milestones reached and money saved.",
            Category.HEALTH_FITNESS,
            (
                date_input("start", "Sober since"),
                number("daily_spending", "Daily spending avoided", 10, "currency"),
                date_input("as_of", "Measured on"),
            ),
            "Money saved = days * daily spending",
        ),
        _sobriety,
    )


def _bmr(values: dict[str, Any]):
    return _HEALTH.bmr(
        age=values["age"],
        sex=Sex(values["sex"]),
        weight=values["weight"],
        height=values["height"],
        unit_system=UnitSystem(values["unit_system"]),
        formula=BmrFormula(values["formula"]),
        activity_level=ActivityLevel(values["activity_level"]),
        body_fat_percent=values["body_fat_percent"],
    )


def _stride(values: dict[str, Any]) -> float:
    if values["stride_length"] > 0:
        return values["stride_length"]
    return _ACTIVITY.stride_length(values["height"], Sex(values["sex"]), UnitSystem(values["unit_system"]))


def _as_date(value: date | None) -> date:
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    return value


def _as_datetime(value: date | None) -> datetime:
    if value is None:
        return datetime.now()
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, datetime.min.time())


def _pregnancy(values: dict[str, Any]):
    return _LIFE_EVENTS.pregnancy(
        method=PregnancyMethod(values["method"]),
        reference_date=_as_date(values["reference_date"]),
        as_of=_as_date(values["as_of"]),
        cycle_length=int(values["cycle_length"]),
        ultrasound_weeks=int(values["ultrasound_weeks"]),
        ultrasound_days=int(values["ultrasound_days"]),
    )


def _sobriety(values: dict[str, Any]):
    as_of = _as_datetime(values["as_of"])
    start = _as_datetime(values["start"]) if values["start"] is not None else as_of
    return _LIFE_EVENTS.sobriety(start, as_of, values["daily_spending"])


def _register_utility(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "electricity-cost",
            "Electricity Cost Calculator",
            "Running cost of an appliance per day, week, month and year.",
            Category.UTILITY,
            (
                number("power", "Power", 150),
                select("power_unit", "Power unit", PowerUnit, PowerUnit.WATTS),
                number("usage", "Daily usage", 24),
                select("usage_unit", "Usage unit", UsageUnit, UsageUnit.HOURS),
                number("days_per_week", "Days per week", 7, "days"),
                number("rate", "Electricity price", 0.15, "currency/kWh"),
            ),
            "Cost = kW * hours * price",
        ),
        lambda values: _ENERGY.electricity_cost(**{
            **values,
            "power_unit": PowerUnit(values["power_unit"]),
            "usage_unit": UsageUnit(values["usage_unit"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "led-savings",
            "LED Savings Calculator",
            "Energy, money and CO2 saved by switching bulbs to LEDs.",
            Category.UTILITY,
            (
                number("bulbs", "Number of bulbs", 10),
                number("existing_watts", "Current bulb wattage", 60, "W"),
                number("led_watts", "LED wattage", 10, "W"),
                number("hours_per_day", "Hours per day", 5, "hours"),
                number("days_per_week", "Days per week", 7, "days"),
                number("cents_per_kwh", "Energy cost", 15, "cents/kWh"),
                number("led_price", "LED bulb price", 5, "currency"),
                flag("include_bulb_price", "Include bulb price", True),
            ),
            "kWh saved = watts saved * bulbs * hours per year / 1000",
        ),
        lambda values: _ENERGY.led_savings(**{**values, "bulbs": int(values["bulbs"])}),
    )
    registry.register(
        CalculatorDefinition(
            "watts-to-amps",
            "Watts to Amps Calculator",
            "Current drawn by a load.",
            Category.UTILITY,
            (
                number("watts", "Power", 1200, "W"),
                number("volts", "Voltage", 120, "V"),
                number("power_factor", "Power factor", 1),
            ),
            "I = P / (V * PF)",
        ),
        lambda values: _ENERGY.watts_to_amps(**values),
    )
    registry.register(
        CalculatorDefinition(
            "amps-to-watts",
            "Amps to Watts Calculator",
            "Power drawn by a load.",
            Category.UTILITY,
            (
                number("amps", "Current", 10, "A"),
                number("volts", "Voltage", 120, "V"),
                number("power_factor", "Power factor", 1),
            ),
            "P = I * V * PF",
        ),
        lambda values: _ENERGY.amps_to_watts(**values),
    )
    registry.register(
        CalculatorDefinition(
            "lumens-to-watts",
            "Lumens to Watts Calculator",
            "Wattage needed for a brightness.",
            Category.UTILITY,
            (
                number("lumens", "Brightness", 800, "lm"),
                select("light_source", "Light source", tuple(LUMENS_PER_WATT), "led"),
                number("efficacy", "Efficacy, 0 for the typical value", 0, "lm/W"),
            ),
            "W = lm / (lm/W)",
        ),
        lambda values: _ENERGY.lumens_to_watts(**values),
    )
    registry.register(
        CalculatorDefinition(
            "hertz-to-seconds",
            "Hertz to Seconds Calculator",
            "Period of a frequency.",
            Category.UTILITY,
            (number("hertz", "Frequency", 60, "Hz"),),
            "T = 1 / f",
        ),
        lambda values: _ENERGY.hertz_to_seconds(values["hertz"]),
    )
    registry.register(
        CalculatorDefinition(
            "mpge",
            "MPGe Calculator",
            "Electric vehicle efficiency as MPGe, kWh per 100 miles and more.",
            Category.UTILITY,
            (
                number("value", "Efficiency or consumption", 4),
                select("metric", "Figure", EfficiencyMetric, EfficiencyMetric.EFFICIENCY),
                select("unit_system", "Units", UnitSystem, UnitSystem.IMPERIAL),
            ),
            "MPGe = miles per kWh * 33.7",
        ),
        lambda values: _ENERGY.mpge(
            values["value"], EfficiencyMetric(values["metric"]), UnitSystem(values["unit_system"])
        ),
    )
    registry.register(
        CalculatorDefinition(
            "miles-per-kwh",
            "Miles per kWh Calculator",
            "Efficiency and cost of an electric vehicle trip.",
            Category.UTILITY,
            (
                number("distance", "Distance", 100),
                select("distance_unit", "Distance unit", DistanceUnit, DistanceUnit.MILES),
                number("energy_kwh", "Energy used", 25, "kWh"),
                number("price_per_kwh", "Electricity price", 0.15, "currency/kWh"),
            ),
            "Efficiency = distance / kWh",
        ),
        lambda values: _ENERGY.miles_per_kwh(
            **{**values, "distance_unit": DistanceUnit(values["distance_unit"])}
        ),
    )


def _register_home(registry: CalculatorRegistry) -> None:
    registry.register(
        CalculatorDefinition(
            "gravel",
            "Gravel Calculator",
            "Volume, weight and cost of gravel or sand for an area.",
            Category.HOME_GARDEN,
            (
                select("unit_system", "Units", UnitSystem, UnitSystem.IMPERIAL),
                number("width", "Width", 10, "ft or m"),
                number("length", "Length", 10, "ft or m"),
                number("depth", "Depth", 2, "in or cm"),
                select("material", "Material", AggregateMaterial, AggregateMaterial.GRAVEL),
                number("price_per_unit", "Price per cubic yard or meter", 50, "currency"),
            ),
            "Volume = width * length * depth; weight = volume * density",
        ),
        lambda values: _HOME.gravel(**{
            **values,
            "unit_system": UnitSystem(values["unit_system"]),
            "material": AggregateMaterial(values["material"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "mulch",
            "Mulch Calculator",
            "Mulch volume and bags for a bed.",
            Category.HOME_GARDEN,
            (
                select("unit_system", "Units", UnitSystem, UnitSystem.IMPERIAL),
                number("area", "Area", 100, "sq ft or sq m"),
                number("depth", "Depth", 3, "in or cm"),
            ),
            "Cubic feet = area * depth / 12; 2 cu ft per bag",
        ),
        lambda values: _HOME.mulch(values["area"], values["depth"], UnitSystem(values["unit_system"])),
    )
    registry.register(
        CalculatorDefinition(
            "flooring",
            "Flooring Calculator",
            "Flooring needed for a room including wastage.",
            Category.HOME_GARDEN,
            (
                number("width", "Width", 5),
                number("length", "Length", 4),
                number("wastage_percent", "Wastage", 10, "%"),
                select("unit", "Unit", FloorUnit, FloorUnit.METERS),
            ),
            "Area * (1 + wastage / 100)",
        ),
        lambda values: _HOME.flooring(**{**values, "unit": FloorUnit(values["unit"])}),
    )
    registry.register(
        CalculatorDefinition(
            "cubic-yards-to-tons",
            "Cubic Yards to Tons Calculator",
            "Weight of a volume of bulk material.",
            Category.HOME_GARDEN,
            (
                number("cubic_yards", "Volume", 1, "cu yd"),
                select("material", "Material", tuple(MATERIAL_DENSITIES), "gravel"),
            ),
            "Tons = cubic yards * density",
        ),
        lambda values: _HOME.cubic_yards_to_tons(**values),
    )
    registry.register(
        CalculatorDefinition(
            "square-footage",
            "Square Footage Calculator",
            "Area of a rectangle, square, circle, triangle or trapezoid in square feet.",
            Category.HOME_GARDEN,
            (
                select("shape", "Shape", AreaShape, AreaShape.RECTANGLE),
                select("unit", "Unit", DimensionUnit, DimensionUnit.FEET),
                number("width", "Width", 10),
                number("length", "Length", 12),
                number("radius", "Radius", 5),
                number("height", "Height", 8),
                number("top", "Top width", 8),
                number("bottom", "Bottom width", 12),
                flag("border_only", "Border only"),
            ),
            "Area by shape, converted to square feet; a border is one unit wide",
            ("area", "sq ft", "room size"),
        ),
        lambda values: _HOME.square_footage(**{
            **values,
            "shape": AreaShape(values["shape"]),
            "unit": DimensionUnit(values["unit"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "cubic-volume",
            "Cubic Feet Calculator",
            "Volume of a box in cubic feet, meters or yards, with gallons and liters.",
            Category.HOME_GARDEN,
            (
                select("unit", "Unit", VolumeUnit, VolumeUnit.CUBIC_FEET),
                number("length", "Length", 10),
                number("width", "Width", 10),
                number("height", "Height", 10),
            ),
            "Volume = length * width * height",
            ("cubic feet", "cubic meters", "cubic yards", "gallons", "liters"),
        ),
        lambda values: _HOME.volume(**{**values, "unit": VolumeUnit(values["unit"])}),
    )
    registry.register(
        CalculatorDefinition(
            "square-feet-to-cubic-yards",
            "Square Feet to Cubic Yards Calculator",
            "Fill needed to cover an area to a depth.",
            Category.HOME_GARDEN,
            (
                number("square_feet", "Area", 100, "sq ft"),
                number("depth", "Depth", 1),
                select("depth_unit", "Depth unit", DepthUnit, DepthUnit.FEET),
            ),
            "Cubic yards = square feet * depth in feet / 27",
            ("cubic feet", "fill", "soil", "concrete"),
        ),
        lambda values: _HOME.square_feet_to_cubic_yards(**{
            **values,
            "depth_unit": DepthUnit(values["depth_unit"]),
        }),
    )
    registry.register(
        CalculatorDefinition(
            "shop-price-converter",
            "Shop Price Converter",
            "Restate a price per square yard per square meter and total it.",
            Category.HOME_GARDEN,
            (
                number("price_per_square_yard", "Price per square yard", 25.99, "currency"),
                number("square_meters", "Area needed", 10, "sq m"),
            ),
            "Price per sq m = price per sq yd * 1.19599",
            ("carpet", "flooring price", "square yard", "square meter"),
        ),
        lambda values: _HOME.price_per_square_meter(**values),
    )
