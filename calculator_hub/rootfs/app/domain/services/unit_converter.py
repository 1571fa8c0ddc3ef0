"""Unit converter service.

Linear quantities convert through a base unit: the value is multiplied
by the factor of its unit and divided by the factor of the target unit.
Temperature goes through Kelvin and fuel consumption through litres per
100 km, since neither is a plain scale.
"""

import math

from domain.value_objects import (
    ConversionResult,
    FeetInchesResult,
    StonePoundsResult,
    WaterWeightResult,
)

KM_PER_MILE = 1.60934
LITERS_PER_US_GALLON = 3.78541
LITERS_PER_UK_GALLON = 4.54609
INCHES_PER_FOOT = 12
METERS_PER_INCH = 0.0254
KG_PER_POUND = 0.45359237
POUNDS_PER_STONE = 14

# Factor of each unit in the quantity's base unit
UNIT_FACTORS: dict[str, dict[str, float]] = {
    # meters
    "length": {
        "mm": 0.001,
        "cm": 0.01,
        "m": 1.0,
        "km": 1000.0,
        "in": 0.0254,
        "ft": 0.3048,
        "yd": 0.9144,
        "mi": 1609.34,
        "nm": 1852.0,
        "league": 4828.03,
    },
    # grams
    "mass": {
        "mg": 0.001,
        "g": 1.0,
        "kg": 1000.0,
        "oz": 28.349523125,
        "lb": 453.59237,
        "st": 6350.29318,
        "ton": 1_000_000.0,
        "ton_us": 907184.74,
        "ton_uk": 1016046.9088,
        "ct": 0.2,
    },
    # milliliters
    "volume": {
        "ml": 1.0,
        "l": 1000.0,
        "fl_oz_us": 29.5735,
        "fl_oz_uk": 28.4131,
        "cup_us": 236.588,
        "cup_uk": 284.131,
        "pint_us": 473.176,
        "pint_uk": 568.261,
        "quart_us": 946.353,
        "quart_uk": 1136.52,
        "gal_us": 3785.41,
        "gal_uk": 4546.09,
    },
    # square meters
    "area": {
        "mm2": 1e-6,
        "cm2": 1e-4,
        "m2": 1.0,
        "km2": 1e6,
        "hectare": 1e4,
        "are": 100.0,
        "in2": 0.00064516,
        "ft2": 0.09290304,
        "yd2": 0.83612736,
        "mi2": 2589988.11,
        "acre": 4046.8564224,
        "rod2": 25.2929,
        "chain2": 404.6873,
    },
    # joules
    "energy": {
        "j": 1.0,
        "kj": 1000.0,
        "cal": 4.184,
        "kcal": 4184.0,
        "wh": 3600.0,
        "kwh": 3.6e6,
        "mwh": 3.6e9,
        "btu": 1055.06,
        "therm": 105_506_000.0,
        "ft_lb": 1.35582,
    },
    # watts
    "power": {
        "w": 1.0,
        "kw": 1000.0,
        "mw": 1e6,
        "hp": 745.7,
        "hp_uk": 745.7,
        "ft_lb_s": 1.35582,
        "btu_h": 0.29307107,
        "cal_s": 4.184,
        "kcal_h": 1.163,
        "j_s": 1.0,
    },
    # pascals
    "pressure": {
        "pa": 1.0,
        "kpa": 1000.0,
        "mpa": 1e6,
        "bar": 1e5,
        "psi": 6894.76,
        "atm": 101325.0,
        "torr": 133.322,
        "mmhg": 133.322,
        "inhg": 3386.39,
        "mmh2o": 9.80665,
    },
    # seconds
    "time": {
        "ns": 1e-9,
        "us": 1e-6,
        "ms": 0.001,
        "s": 1.0,
        "min": 60.0,
        "h": 3600.0,
        "d": 86400.0,
        "wk": 604800.0,
        "mo": 2629746.0,
        "yr": 31556952.0,
    },
    # meters per second
    "velocity": {
        "m_s": 1.0,
        "km_h": 1 / 3.6,
        "mph": 0.44704,
        "ft_s": 0.3048,
        "knot": 0.514444,
    },
    # bytes
    "data_storage": {
        "B": 1.0,
        "KB": 2.0 ** 10,
        "MB": 2.0 ** 20,
        "GB": 2.0 ** 30,
        "TB": 2.0 ** 40,
        "PB": 2.0 ** 50,
        "KiB": 2.0 ** 10,
        "MiB": 2.0 ** 20,
        "GiB": 2.0 ** 30,
        "TiB": 2.0 ** 40,
        "PiB": 2.0 ** 50,
        "kB": 1e3,
        "MB_10": 1e6,
        "GB_10": 1e9,
        "TB_10": 1e12,
        "PB_10": 1e15,
    },
    # bits per second
    "data_transfer": {
        "bps": 1.0,
        "kbps": 1e3,
        "mbps": 1e6,
        "gbps": 1e9,
        "tbps": 1e12,
        "Bps": 8.0,
        "kBps": 8e3,
        "mBps": 8e6,
        "gBps": 8e9,
        "tBps": 8e12,
        "Kibps": 2.0 ** 10,
        "Mibps": 2.0 ** 20,
        "Gibps": 2.0 ** 30,
        "Tibps": 2.0 ** 40,
        "KiBps": 8 * 2.0 ** 10,
        "MiBps": 8 * 2.0 ** 20,
        "GiBps": 8 * 2.0 ** 30,
        "TiBps": 8 * 2.0 ** 40,
    },
    # meters per second squared
    "acceleration": {
        "mps2": 1.0,
        "g": 9.80665,
        "ftps2": 0.3048,
        "inps2": 0.0254,
        "kmph2": 7.716e-4,
        "mph2": 1.2417e-3,
        "gal": 0.01,
        "kgf_per_kg": 9.80665,
        "lbf_per_lb": 4.448222,
    },
    # grams, including troy and Asian bullion units
    "gold_weight": {
        "g": 1.0,
        "kg": 1000.0,
        "oz_t": 31.1035,
        "oz": 28.3495,
        "lb": 453.592,
        "dwt": 1.55517,
        "grain": 0.06479891,
        "tola": 11.6638,
        "tael": 37.429,
        "baht": 15.244,
    },
}

TEMPERATURE_UNITS = ("c", "f", "k", "r", "re")
FUEL_UNITS = ("mpg_us", "mpg_uk", "l_100km", "km_l", "miles_l", "gal_100miles")

# liters per unit
WATER_VOLUME_UNITS = {
    "ml": 0.001,
    "l": 1.0,
    "gal_us": 3.78541,
    "gal_uk": 4.54609,
    "cu_ft": 28.3168,
    "cu_in": 0.0163871,
    "cu_m": 1000.0,
}
# kilograms per unit
WATER_WEIGHT_UNITS = {
    "kg": 1.0,
    "g": 0.001,
    "lb": 0.453592,
    "oz": 0.0283495,
}
WATER_TEMPERATURE_RANGE = (0.0, 100.0)


class UnitConverter:
    """Convert values between units of the same quantity."""

    def units(self, quantity: str) -> tuple[str, ...]:
        """Units known for a quantity.

        Raises:
            ValueError: If the quantity is unknown
        """
        if quantity == "temperature":
            return TEMPERATURE_UNITS
        if quantity == "fuel":
            return FUEL_UNITS
        if quantity not in UNIT_FACTORS:
            raise ValueError(f"quantity must be one of {self.quantities()}, got {quantity}")
        return tuple(UNIT_FACTORS[quantity])

    def quantities(self) -> tuple[str, ...]:
        """Every quantity this converter handles."""
        return tuple(UNIT_FACTORS) + ("temperature", "fuel")

    def convert(self, quantity: str, value: float, from_unit: str, to_unit: str) -> ConversionResult:
        """Convert a value and express it in every unit of the quantity.

        Args:
            quantity: Key of the quantity, e.g. "length" or "temperature"
            value: Value in from_unit
            from_unit: Unit of value
            to_unit: Unit to convert to

        Returns:
            The converted value with the full unit table

        Raises:
            ValueError: If the quantity or a unit is unknown
        """
        units = self.units(quantity)
        for unit in (from_unit, to_unit):
            if unit not in units:
                raise ValueError(f"unit must be one of {units}, got {unit}")

        all_units = {unit: self._convert(quantity, value, from_unit, unit) for unit in units}
        return ConversionResult(
            quantity=quantity,
            value=value,
            from_unit=from_unit,
            to_unit=to_unit,
            result=all_units[to_unit],
            all_units=all_units,
        )

    def _convert(self, quantity: str, value: float, from_unit: str, to_unit: str) -> float:
        if from_unit == to_unit:
            return value
        if quantity == "temperature":
            return from_kelvin(to_kelvin(value, from_unit), to_unit)
        if quantity == "fuel":
            return from_liters_per_100km(to_liters_per_100km(value, from_unit), to_unit)
        factors = UNIT_FACTORS[quantity]
        return value * factors[from_unit] / factors[to_unit]

    def to_feet_and_inches(self, meters: float) -> FeetInchesResult:
        """Split a length in meters into feet and inches."""
        total_inches = meters / METERS_PER_INCH
        feet = int(total_inches // INCHES_PER_FOOT)
        return FeetInchesResult(
            meters=meters,
            total_inches=total_inches,
            feet=feet,
            inches=total_inches - feet * INCHES_PER_FOOT,
        )

    def to_stone_and_pounds(self, kilograms: float) -> StonePoundsResult:
        """Split a mass in kilograms into stone and pounds."""
        total_pounds = kilograms / KG_PER_POUND
        stone = int(total_pounds // POUNDS_PER_STONE)
        return StonePoundsResult(
            kilograms=kilograms,
            total_pounds=total_pounds,
            stone=stone,
            pounds=total_pounds - stone * POUNDS_PER_STONE,
        )

    def water_weight(
        self,
        value: float,
        from_unit: str,
        to_unit: str,
        temperature_c: float = 20.0,
    ) -> WaterWeightResult:
        """Convert an amount of water between volume and weight units.

        Volumes and weights convert among themselves by their factors; a
        volume turns into a weight (and back) through the density of
        water at temperature_c, clamped to 0-100 °C. Density peaks at
        4 °C, so colder water is taken at its 4 °C density.

        Raises:
            ValueError: If a unit is neither a volume nor a weight unit
        """
        units = tuple(WATER_VOLUME_UNITS) + tuple(WATER_WEIGHT_UNITS)
        for unit in (from_unit, to_unit):
            if unit not in units:
                raise ValueError(f"unit must be one of {units}, got {unit}")

        low, high = WATER_TEMPERATURE_RANGE
        temperature_c = min(max(temperature_c, low), high)
        density = water_density(temperature_c)
        if from_unit in WATER_VOLUME_UNITS:
            liters = value * WATER_VOLUME_UNITS[from_unit]
            kilograms = liters * density
        else:
            kilograms = value * WATER_WEIGHT_UNITS[from_unit]
            liters = kilograms / density

        if to_unit in WATER_VOLUME_UNITS:
            result = liters / WATER_VOLUME_UNITS[to_unit]
        else:
            result = kilograms / WATER_WEIGHT_UNITS[to_unit]
        return WaterWeightResult(
            value=value,
            from_unit=from_unit,
            to_unit=to_unit,
            result=result,
            temperature_c=temperature_c,
            density_kg_per_l=density,
        )


def water_density(temperature_c: float) -> float:
    """Density of water in kg per liter."""
    return (1000 - 0.1 * max(temperature_c - 4, 0) ** 1.5) / 1000


def to_kelvin(value: float, unit: str) -> float:
    if unit == "c":
        return value + 273.15
    if unit == "f":
        return (value + 459.67) * 5 / 9
    if unit == "r":
        return value * 5 / 9
    if unit == "re":
        return value * 1.25 + 273.15
    return value


def from_kelvin(kelvin: float, unit: str) -> float:
    if unit == "c":
        return kelvin - 273.15
    if unit == "f":
        return kelvin * 9 / 5 - 459.67
    if unit == "r":
        return kelvin * 9 / 5
    if unit == "re":
        return (kelvin - 273.15) * 0.8
    return kelvin


def to_liters_per_100km(value: float, unit: str) -> float:
    """Fuel consumption in L/100km; zero stays zero for inverse units."""
    if unit == "l_100km":
        return value
    if unit == "gal_100miles":
        return value * LITERS_PER_US_GALLON / KM_PER_MILE
    if value == 0:
        return 0.0
    if unit == "mpg_us":
        return 100 * LITERS_PER_US_GALLON / (value * KM_PER_MILE)
    if unit == "mpg_uk":
        return 100 * LITERS_PER_UK_GALLON / (value * KM_PER_MILE)
    if unit == "km_l":
        return 100 / value
    return 100 / (value * KM_PER_MILE)


def from_liters_per_100km(value: float, unit: str) -> float:
    if unit == "l_100km":
        return value
    if unit == "gal_100miles":
        return value * KM_PER_MILE / LITERS_PER_US_GALLON
    if value == 0 or not math.isfinite(value):
        return 0.0
    if unit == "mpg_us":
        return 100 * LITERS_PER_US_GALLON / (value * KM_PER_MILE)
    if unit == "mpg_uk":
        return 100 * LITERS_PER_UK_GALLON / (value * KM_PER_MILE)
    if unit == "km_l":
        return 100 / value
    return 100 / (value * KM_PER_MILE)
