"""Home and garden calculator service.

Domain service for landscaping and flooring quantities, floor areas and
box volumes.
"""

import math

from domain.value_objects import (
    AggregateMaterial,
    AggregateResult,
    AreaPriceResult,
    AreaShape,
    DepthUnit,
    DimensionUnit,
    FillVolumeResult,
    FloorUnit,
    FlooringResult,
    MaterialWeightResult,
    MulchResult,
    SquareFootageResult,
    UnitSystem,
    VolumeResult,
    VolumeUnit,
)

CUBIC_METERS_PER_CUBIC_YARD = 0.764555
CUBIC_YARDS_PER_CUBIC_METER = 1.30795
CUBIC_FEET_PER_CUBIC_YARD = 27
CUBIC_FEET_PER_MULCH_BAG = 2
KG_PER_US_TON = 907.185
US_TONS_PER_TONNE = 1.10231
SQUARE_FEET_PER_SQUARE_METER = 10.7639
SQUARE_YARDS_PER_SQUARE_METER = 1.19599
SQUARE_METERS_PER_SQUARE_FOOT = 0.092903
SQUARE_FEET_PER_SQUARE_YARD = 9
CUBIC_METERS_PER_CUBIC_FOOT = 0.0283168
INCHES_PER_FOOT = 12

# Square feet per square unit of a dimension
SQUARE_FEET_PER_UNIT = {
    DimensionUnit.FEET: 1.0,
    DimensionUnit.INCHES: 1 / 144,
    DimensionUnit.YARDS: 9.0,
    DimensionUnit.METERS: 10.7639,
    DimensionUnit.CENTIMETERS: 0.00107639,
    DimensionUnit.MILLIMETERS: 0.0000107639,
}

# cubic feet, cubic meters, cubic yards, US gallons and liters per unit
VOLUME_EQUIVALENTS = {
    VolumeUnit.CUBIC_FEET: (1.0, 0.0283168, 0.037037, 7.48052, 28.3168),
    VolumeUnit.CUBIC_METERS: (35.3147, 1.0, 1.30795, 264.172, 1000.0),
    VolumeUnit.CUBIC_YARDS: (27.0, 0.764555, 1.0, 201.974, 764.555),
}

# Inner area of a triangle or trapezoid left by a border
BORDER_INNER_SHARE = 0.8

# US tons per cubic yard and tonnes per cubic meter
AGGREGATE_DENSITIES = {
    AggregateMaterial.GRAVEL: (1.4, 1.68),
    AggregateMaterial.GRAVEL_SAND: (1.5, 1.8),
    AggregateMaterial.SAND: (1.3, 1.56),
}

# US tons per cubic yard
MATERIAL_DENSITIES = {
    "gravel": 1.4,
    "sand": 1.3,
    "stone": 1.5,
    "dirt": 1.1,
    "concrete": 2.0,
    "asphalt": 1.9,
    "mulch": 0.4,
    "topsoil": 0.9,
}


class HomeGardenCalculator:
    """Calculate material quantities for home projects."""

    def gravel(
        self,
        width: float,
        length: float,
        depth: float,
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
        material: AggregateMaterial = AggregateMaterial.GRAVEL,
        price_per_unit: float = 0.0,
    ) -> AggregateResult:
        """Volume and weight of gravel or sand for a rectangular area.

        Args:
            width: Width in feet (imperial) or meters (metric)
            length: Length in feet (imperial) or meters (metric)
            depth: Depth in inches (imperial) or centimeters (metric)
            unit_system: Units of the dimensions
            material: Material laid
            price_per_unit: Price per cubic yard (imperial) or per cubic
                meter (metric)
        """
        tons_per_yard, tonnes_per_meter = AGGREGATE_DENSITIES[material]
        if unit_system == UnitSystem.IMPERIAL:
            cubic_yards = width * length * depth / 12 / CUBIC_FEET_PER_CUBIC_YARD
            cubic_meters = cubic_yards * CUBIC_METERS_PER_CUBIC_YARD
            tons = cubic_yards * tons_per_yard
            tonnes = tons * KG_PER_US_TON / 1000
            cost = cubic_yards * price_per_unit
        else:
            cubic_meters = width * length * depth / 100
            cubic_yards = cubic_meters * CUBIC_YARDS_PER_CUBIC_METER
            tonnes = cubic_meters * tonnes_per_meter
            tons = tonnes * US_TONS_PER_TONNE
            cost = cubic_meters * price_per_unit
        return AggregateResult(
            cubic_yards=cubic_yards,
            cubic_meters=cubic_meters,
            tons=tons,
            tonnes=tonnes,
            cost=cost,
        )

    def mulch(self, area: float, depth: float, unit_system: UnitSystem = UnitSystem.IMPERIAL) -> MulchResult:
        """Mulch for an area in sq ft and inches, or sq m and cm.

        Bags hold two cubic feet and are rounded up.
        """
        if unit_system == UnitSystem.IMPERIAL:
            cubic_feet = area * depth / 12
            cubic_yards = cubic_feet / CUBIC_FEET_PER_CUBIC_YARD
            cubic_meters = cubic_yards * CUBIC_METERS_PER_CUBIC_YARD
        else:
            cubic_meters = area * depth / 100
            cubic_yards = cubic_meters / CUBIC_METERS_PER_CUBIC_YARD
            cubic_feet = cubic_yards * CUBIC_FEET_PER_CUBIC_YARD
        return MulchResult(
            cubic_feet=cubic_feet,
            cubic_yards=cubic_yards,
            cubic_meters=cubic_meters,
            bags=math.ceil(cubic_feet / CUBIC_FEET_PER_MULCH_BAG),
        )

    def flooring(
        self,
        width: float,
        length: float,
        wastage_percent: float = 10.0,
        unit: FloorUnit = FloorUnit.METERS,
    ) -> FlooringResult:
        """Flooring for a rectangular room with a wastage allowance."""
        area = width * length
        with_wastage = area * (1 + wastage_percent / 100)
        square_meters = with_wastage if unit == FloorUnit.METERS else with_wastage * SQUARE_METERS_PER_SQUARE_FOOT
        return FlooringResult(
            area=area,
            area_with_wastage=with_wastage,
            square_feet=square_meters * SQUARE_FEET_PER_SQUARE_METER,
            square_yards=square_meters * SQUARE_YARDS_PER_SQUARE_METER,
        )

    def cubic_yards_to_tons(self, cubic_yards: float, material: str = "gravel") -> MaterialWeightResult:
        """Weight of a volume of bulk material; unknown materials count as gravel."""
        if material not in MATERIAL_DENSITIES:
            material = "gravel"
        density = MATERIAL_DENSITIES[material]
        return MaterialWeightResult(
            cubic_yards=cubic_yards,
            material=material,
            tons_per_cubic_yard=density,
            tons=cubic_yards * density,
        )

    def square_footage(
        self,
        shape: AreaShape = AreaShape.RECTANGLE,
        unit: DimensionUnit = DimensionUnit.FEET,
        width: float = 10.0,
        length: float = 12.0,
        radius: float = 5.0,
        height: float = 8.0,
        top: float = 8.0,
        bottom: float = 12.0,
        border_only: bool = False,
    ) -> SquareFootageResult:
        """Area of a shape measured in any length unit.

        Rectangles use width and length, squares width, circles radius,
        triangles width and height, trapezoids top, bottom and height.
        With border_only the area of a one unit wide border is returned:
        the inner shape is removed, and for triangles and trapezoids the
        inner shape is taken as 80% of the whole.
        """
        if shape == AreaShape.SQUARE:
            area = width ** 2
        elif shape == AreaShape.CIRCLE:
            area = math.pi * radius ** 2
        elif shape == AreaShape.TRIANGLE:
            area = width * height / 2
        elif shape == AreaShape.TRAPEZOID:
            area = (top + bottom) / 2 * height
        else:
            area = width * length

        factor = SQUARE_FEET_PER_UNIT[unit]
        square_feet = area * factor
        if border_only:
            square_feet -= _inner_area(shape, area, width, length, radius) * factor
        return SquareFootageResult(
            shape=shape.value,
            area=area,
            square_feet=square_feet,
            square_meters=square_feet * SQUARE_METERS_PER_SQUARE_FOOT,
            square_yards=square_feet / SQUARE_FEET_PER_SQUARE_YARD,
            border_only=border_only,
        )

    def volume(
        self,
        length: float,
        width: float,
        height: float,
        unit: VolumeUnit = VolumeUnit.CUBIC_FEET,
    ) -> VolumeResult:
        """Volume of a box with its dimensions in feet, meters or yards."""
        volume = length * width * height
        cubic_feet, cubic_meters, cubic_yards, gallons, liters = (
            volume * factor for factor in VOLUME_EQUIVALENTS[unit]
        )
        return VolumeResult(
            volume=volume,
            unit=unit.value,
            cubic_feet=cubic_feet,
            cubic_meters=cubic_meters,
            cubic_yards=cubic_yards,
            gallons_us=gallons,
            liters=liters,
        )

    def square_feet_to_cubic_yards(
        self,
        square_feet: float,
        depth: float,
        depth_unit: DepthUnit = DepthUnit.FEET,
    ) -> FillVolumeResult:
        """Fill needed to cover an area in square feet to a depth."""
        depth_feet = depth / INCHES_PER_FOOT if depth_unit == DepthUnit.INCHES else depth
        cubic_feet = square_feet * depth_feet
        return FillVolumeResult(
            square_feet=square_feet,
            depth_feet=depth_feet,
            cubic_feet=cubic_feet,
            cubic_yards=cubic_feet / CUBIC_FEET_PER_CUBIC_YARD,
            cubic_meters=cubic_feet * CUBIC_METERS_PER_CUBIC_FOOT,
        )

    def price_per_square_meter(self, price_per_square_yard: float, square_meters: float) -> AreaPriceResult:
        """Restate a price per square yard per square meter and total it."""
        per_meter = price_per_square_yard * SQUARE_YARDS_PER_SQUARE_METER
        return AreaPriceResult(
            price_per_square_yard=price_per_square_yard,
            price_per_square_meter=per_meter,
            square_meters=square_meters,
            total_cost=per_meter * square_meters,
        )


def _inner_area(shape: AreaShape, area: float, width: float, length: float, radius: float) -> float:
    if shape == AreaShape.RECTANGLE:
        return max(0.0, width - 2) * max(0.0, length - 2)
    if shape == AreaShape.SQUARE:
        return max(0.0, width - 2) ** 2
    if shape == AreaShape.CIRCLE:
        return math.pi * max(0.0, radius - 1) ** 2
    return area * BORDER_INNER_SHARE
