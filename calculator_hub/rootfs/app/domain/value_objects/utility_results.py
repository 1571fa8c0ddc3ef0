"""Energy and home project result value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ElectricityCostResult:
    """Energy use and cost of an appliance over several periods."""

    daily_kwh: float
    weekly_kwh: float
    monthly_kwh: float
    annual_kwh: float
    daily_cost: float
    weekly_cost: float
    monthly_cost: float
    annual_cost: float


@dataclass(frozen=True)
class LedSavingsResult:
    """Savings from replacing bulbs with LEDs.

    Attributes:
        annual_kwh_saved: Energy saved per year
        annual_money_saved: Money saved per year
        total_bulb_cost: Cost of the LED bulbs, 0 when excluded
        payback_years: Years until the bulbs pay for themselves
        co2_saved_kg: CO2 avoided per year
        trees_equivalent: Trees absorbing the same CO2 in a year
    """

    annual_kwh_saved: float
    annual_money_saved: float
    total_bulb_cost: float
    payback_years: float
    co2_saved_kg: float
    trees_equivalent: float


@dataclass(frozen=True)
class CurrentResult:
    """Current drawn by a load."""

    watts: float
    volts: float
    power_factor: float
    amps: float


@dataclass(frozen=True)
class LumensResult:
    """Power a light source needs for a brightness."""

    lumens: float
    lumens_per_watt: float
    watts: float


@dataclass(frozen=True)
class PeriodResult:
    """Period of a frequency."""

    hertz: float
    seconds: float
    milliseconds: float


@dataclass(frozen=True)
class EvEfficiencyResult:
    """Electric vehicle efficiency in every common form.

    Attributes:
        miles_per_kwh: Distance per energy, imperial
        kwh_per_100_miles: Energy per distance, imperial
        km_per_kwh: Distance per energy, metric
        kwh_per_100_km: Energy per distance, metric
        wh_per_mile: Watt-hours per mile
        mpge: Miles per gallon of gasoline equivalent
        liters_per_100_km: Gasoline-equivalent consumption
        trip_cost: Energy cost of the trip, when an energy total is known
    """

    miles_per_kwh: float
    kwh_per_100_miles: float
    km_per_kwh: float
    kwh_per_100_km: float
    wh_per_mile: float
    mpge: float
    liters_per_100_km: float
    trip_cost: float = 0.0


@dataclass(frozen=True)
class AggregateResult:
    """Loose material needed to fill an area.

    Attributes:
        cubic_yards: Volume in cubic yards
        cubic_meters: Volume in cubic meters
        tons: Weight in US tons
        tonnes: Weight in metric tonnes
        cost: Price of the material
    """

    cubic_yards: float
    cubic_meters: float
    tons: float
    tonnes: float
    cost: float


@dataclass(frozen=True)
class MulchResult:
    """Mulch needed to cover an area."""

    cubic_feet: float
    cubic_yards: float
    cubic_meters: float
    bags: int


@dataclass(frozen=True)
class FlooringResult:
    """Flooring needed for a room.

    Attributes:
        area: Floor area in the input unit squared
        area_with_wastage: Area plus the wastage allowance
        square_feet: Area with wastage in square feet
        square_yards: Area with wastage in square yards
    """

    area: float
    area_with_wastage: float
    square_feet: float
    square_yards: float


@dataclass(frozen=True)
class MaterialWeightResult:
    """Weight of a volume of material."""

    cubic_yards: float
    material: str
    tons_per_cubic_yard: float
    tons: float


@dataclass(frozen=True)
class SquareFootageResult:
    """Area of a shape.

    Attributes:
        shape: Outline measured
        area: Area in the input unit squared
        square_feet: Area in square feet, less the inner area for a border
        square_meters: square_feet in square meters
        square_yards: square_feet in square yards
        border_only: Whether only a one unit wide border was measured
    """

    shape: str
    area: float
    square_feet: float
    square_meters: float
    square_yards: float
    border_only: bool = False


@dataclass(frozen=True)
class VolumeResult:
    """Volume of a box in its own unit and common equivalents."""

    volume: float
    unit: str
    cubic_feet: float
    cubic_meters: float
    cubic_yards: float
    gallons_us: float
    liters: float


@dataclass(frozen=True)
class FillVolumeResult:
    """Fill needed to cover an area to a depth."""

    square_feet: float
    depth_feet: float
    cubic_feet: float
    cubic_yards: float
    cubic_meters: float


@dataclass(frozen=True)
class AreaPriceResult:
    """Shop price per square yard restated per square meter."""

    price_per_square_yard: float
    price_per_square_meter: float
    square_meters: float
    total_cost: float
