"""Unit conversion result value objects."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConversionResult:
    """A value converted between two units of one quantity.

    Attributes:
        quantity: Quantity converted (length, mass, temperature...)
        value: Input value
        from_unit: Unit of value
        to_unit: Unit of result
        result: Converted value
        all_units: value expressed in every unit of the quantity
    """

    quantity: str
    value: float
    from_unit: str
    to_unit: str
    result: float
    all_units: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class FeetInchesResult:
    """A length split into whole feet and remaining inches."""

    meters: float
    total_inches: float
    feet: int
    inches: float


@dataclass(frozen=True)
class StonePoundsResult:
    """A mass split into whole stone and remaining pounds."""

    kilograms: float
    total_pounds: float
    stone: int
    pounds: float


@dataclass(frozen=True)
class WaterWeightResult:
    """Water converted between volume and weight at a temperature.

    Attributes:
        value: Input amount
        from_unit: Unit of value
        to_unit: Unit of result
        result: Converted amount
        temperature_c: Water temperature used for the density
        density_kg_per_l: Density of water at that temperature
    """

    value: float
    from_unit: str
    to_unit: str
    result: float
    temperature_c: float
    density_kg_per_l: float
