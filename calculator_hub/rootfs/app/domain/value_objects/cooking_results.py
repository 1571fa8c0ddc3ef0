"""Cooking conversion result value objects."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CookingConversionResult:
    """A kitchen measure converted to another unit.

    Attributes:
        amount: Input amount
        from_unit: Unit of amount
        to_unit: Unit of result
        result: Converted amount
        ingredient: Ingredient whose density was used, None when no
            volume/weight crossing happened
        density: Grams per milliliter used for the crossing
    """

    amount: float
    from_unit: str
    to_unit: str
    result: float
    ingredient: str | None = None
    density: float | None = None


@dataclass(frozen=True)
class ButterConversionResult:
    """An amount of butter expressed in every butter measure."""

    amount: float
    from_unit: str
    grams: float
    measures: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class OvenTemperatureResult:
    """An oven temperature expressed on every oven scale.

    Attributes:
        fahrenheit: Rounded conventional oven temperature in °F
        celsius: Rounded conventional oven temperature in °C
        fan_celsius: Rounded fan oven temperature in °C
        gas_mark: Unrounded gas mark
        description: Heat band and typical uses
    """

    fahrenheit: int
    celsius: int
    fan_celsius: int
    gas_mark: float
    description: str


@dataclass(frozen=True)
class AirFryerResult:
    """Air fryer settings equivalent to an oven recipe.

    Attributes:
        temperature: Air fryer temperature in the input scale
        scale: Scale of temperature
        cooking_minutes: Suggested cooking time
        min_minutes: Low end of the time range
        max_minutes: High end of the time range
    """

    temperature: float
    scale: str
    cooking_minutes: int
    min_minutes: int
    max_minutes: int

    def __post_init__(self) -> None:
        if self.min_minutes > self.max_minutes and self.cooking_minutes > 0:
            raise ValueError(
                f"min_minutes must not exceed max_minutes, got {self.min_minutes} > {self.max_minutes}"
            )
