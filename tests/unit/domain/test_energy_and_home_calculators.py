"""Tests for the energy and home and garden calculators."""

import math

import pytest
from domain.services import EnergyCalculator, HomeGardenCalculator
from domain.value_objects import (
    AggregateMaterial,
    AreaShape,
    DepthUnit,
    DimensionUnit,
    DistanceUnit,
    EfficiencyMetric,
    FloorUnit,
    PowerUnit,
    UnitSystem,
    UsageUnit,
    VolumeUnit,
)


@pytest.fixture
def energy() -> EnergyCalculator:
    return EnergyCalculator()


@pytest.fixture
def home() -> HomeGardenCalculator:
    return HomeGardenCalculator()


class TestElectricityCost:
    """Tests for appliance running costs."""

    def test_daily_to_annual(self, energy: EnergyCalculator) -> None:
        result = energy.electricity_cost(150, 24, 0.15)

        assert result.daily_kwh == pytest.approx(3.6)
        assert result.daily_cost == pytest.approx(0.54)
        assert result.annual_kwh == pytest.approx(3.6 * 365)
        assert result.monthly_kwh == pytest.approx(3.6 * 30.44)

    def test_kilowatts_and_minutes(self, energy: EnergyCalculator) -> None:
        result = energy.electricity_cost(
            2, 30, 0.2, power_unit=PowerUnit.KILOWATTS, usage_unit=UsageUnit.MINUTES, days_per_week=5
        )

        assert result.daily_kwh == pytest.approx(1.0)
        assert result.weekly_kwh == pytest.approx(5.0)


class TestLedSavings:
    """Tests for LED replacement savings."""

    def test_savings_and_payback(self, energy: EnergyCalculator) -> None:
        result = energy.led_savings(10, 60, 10, 5, 7, 15, led_price=5)

        hours = 5 * 7 * 52.143
        assert result.annual_kwh_saved == pytest.approx(500 * hours / 1000)
        assert result.annual_money_saved == pytest.approx(result.annual_kwh_saved * 0.15)
        assert result.payback_years == pytest.approx(50 / result.annual_money_saved)
        assert result.trees_equivalent == pytest.approx(result.co2_saved_kg / 21)

    def test_no_savings_no_payback(self, energy: EnergyCalculator) -> None:
        assert energy.led_savings(10, 10, 10, 5, 7, 15, led_price=5).payback_years == 0.0


class TestElectricalConversions:
    """Tests for watts, amps, lumens and hertz."""

    def test_watts_and_amps(self, energy: EnergyCalculator) -> None:
        assert energy.watts_to_amps(1200, 120).amps == pytest.approx(10)
        assert energy.amps_to_watts(10, 120, 0.8).watts == pytest.approx(960)
        assert energy.watts_to_amps(1200, 0).amps == 0.0

    def test_lumens(self, energy: EnergyCalculator) -> None:
        assert energy.lumens_to_watts(800).watts == pytest.approx(10)
        assert energy.lumens_to_watts(800, "incandescent").watts == pytest.approx(800 / 15)
        assert energy.lumens_to_watts(800, "led", efficacy=100).watts == pytest.approx(8)

    def test_hertz(self, energy: EnergyCalculator) -> None:
        result = energy.hertz_to_seconds(50)

        assert result.seconds == pytest.approx(0.02)
        assert result.milliseconds == pytest.approx(20)
        assert energy.hertz_to_seconds(0).seconds == 0.0


class TestEvEfficiency:
    """Tests for electric vehicle efficiency."""

    def test_mpge_from_efficiency(self, energy: EnergyCalculator) -> None:
        result = energy.mpge(4)

        assert result.mpge == pytest.approx(4 * 33.7)
        assert result.kwh_per_100_miles == pytest.approx(25)
        assert result.wh_per_mile == pytest.approx(250)

    def test_consumption_and_metric(self, energy: EnergyCalculator) -> None:
        imperial = energy.mpge(4)
        metric = energy.mpge(100 / (4 * 1.60934), EfficiencyMetric.CONSUMPTION, UnitSystem.METRIC)

        assert metric.miles_per_kwh == pytest.approx(imperial.miles_per_kwh)

    def test_zero_value(self, energy: EnergyCalculator) -> None:
        assert energy.mpge(0).mpge == 0.0

    def test_trip(self, energy: EnergyCalculator) -> None:
        result = energy.miles_per_kwh(100, 25, price_per_kwh=0.15)

        assert result.miles_per_kwh == pytest.approx(4)
        assert result.trip_cost == pytest.approx(3.75)
        assert energy.miles_per_kwh(160.934, 25, DistanceUnit.KILOMETERS).miles_per_kwh == pytest.approx(4)


class TestGravel:
    """Tests for aggregate quantities."""

    def test_imperial(self, home: HomeGardenCalculator) -> None:
        result = home.gravel(10, 10, 2, price_per_unit=50)

        cubic_yards = 10 * 10 * 2 / 12 / 27
        assert result.cubic_yards == pytest.approx(cubic_yards)
        assert result.tons == pytest.approx(cubic_yards * 1.4)
        assert result.cost == pytest.approx(cubic_yards * 50)

    def test_metric_sand(self, home: HomeGardenCalculator) -> None:
        result = home.gravel(2, 5, 10, UnitSystem.METRIC, AggregateMaterial.SAND)

        assert result.cubic_meters == pytest.approx(1.0)
        assert result.tonnes == pytest.approx(1.56)


class TestMulchAndFlooring:
    """Tests for mulch and flooring quantities."""

    def test_mulch_bags_rounded_up(self, home: HomeGardenCalculator) -> None:
        result = home.mulch(100, 3)

        assert result.cubic_feet == pytest.approx(25)
        assert result.bags == 13

    def test_mulch_metric(self, home: HomeGardenCalculator) -> None:
        result = home.mulch(10, 10, UnitSystem.METRIC)

        assert result.cubic_meters == pytest.approx(1.0)

    def test_flooring_wastage(self, home: HomeGardenCalculator) -> None:
        result = home.flooring(5, 4, 10)

        assert result.area == 20
        assert result.area_with_wastage == pytest.approx(22)
        assert result.square_feet == pytest.approx(22 * 10.7639)

    def test_flooring_in_feet(self, home: HomeGardenCalculator) -> None:
        result = home.flooring(10, 10, 0, FloorUnit.FEET)

        assert result.square_feet == pytest.approx(100, rel=1e-4)

    def test_cubic_yards_to_tons(self, home: HomeGardenCalculator) -> None:
        assert home.cubic_yards_to_tons(2, "concrete").tons == pytest.approx(4)
        assert home.cubic_yards_to_tons(1, "moon rock").material == "gravel"


class TestSquareFootage:
    """Tests for areas by shape."""

    def test_rectangle_in_feet(self, home: HomeGardenCalculator) -> None:
        result = home.square_footage()

        assert result.shape == "rectangle"
        assert result.area == 120
        assert result.square_feet == 120
        assert result.square_meters == pytest.approx(120 * 0.092903)
        assert result.square_yards == pytest.approx(120 / 9)

    @pytest.mark.parametrize("shape,expected", [
        (AreaShape.SQUARE, 100),
        (AreaShape.CIRCLE, math.pi * 25),
        (AreaShape.TRIANGLE, 40),
        (AreaShape.TRAPEZOID, 80),
    ])
    def test_shapes(self, home: HomeGardenCalculator, shape: AreaShape, expected: float) -> None:
        assert home.square_footage(shape).area == pytest.approx(expected)

    def test_metric_dimensions_reported_in_square_feet(self, home: HomeGardenCalculator) -> None:
        result = home.square_footage(unit=DimensionUnit.METERS)

        assert result.area == 120
        assert result.square_feet == pytest.approx(120 * 10.7639)

    @pytest.mark.parametrize("shape,expected", [
        (AreaShape.RECTANGLE, 120 - 8 * 10),
        (AreaShape.SQUARE, 100 - 64),
        (AreaShape.CIRCLE, math.pi * (25 - 16)),
        (AreaShape.TRIANGLE, 40 * 0.2),
    ])
    def test_border_only(self, home: HomeGardenCalculator, shape: AreaShape, expected: float) -> None:
        result = home.square_footage(shape, border_only=True)

        assert result.border_only is True
        assert result.square_feet == pytest.approx(expected)

    def test_border_wider_than_shape(self, home: HomeGardenCalculator) -> None:
        """A shape narrower than two border widths is all border."""
        result = home.square_footage(width=1.5, length=12, border_only=True)

        assert result.square_feet == pytest.approx(18)


class TestVolume:
    """Tests for box volumes and fill quantities."""

    def test_cubic_feet_equivalents(self, home: HomeGardenCalculator) -> None:
        result = home.volume(10, 10, 10)

        assert result.volume == 1000
        assert result.unit == "cubic_feet"
        assert result.cubic_feet == 1000
        assert result.cubic_meters == pytest.approx(28.3168)
        assert result.cubic_yards == pytest.approx(37.037)
        assert result.gallons_us == pytest.approx(7480.52)
        assert result.liters == pytest.approx(28316.8)

    def test_cubic_yards(self, home: HomeGardenCalculator) -> None:
        result = home.volume(1, 1, 1, VolumeUnit.CUBIC_YARDS)

        assert result.cubic_feet == 27
        assert result.cubic_yards == 1

    def test_fill_depth_in_feet(self, home: HomeGardenCalculator) -> None:
        result = home.square_feet_to_cubic_yards(100, 1)

        assert result.cubic_feet == 100
        assert result.cubic_yards == pytest.approx(100 / 27)

    def test_fill_depth_in_inches(self, home: HomeGardenCalculator) -> None:
        result = home.square_feet_to_cubic_yards(324, 4, DepthUnit.INCHES)

        assert result.depth_feet == pytest.approx(1 / 3)
        assert result.cubic_yards == pytest.approx(4)


class TestShopPrice:
    """Tests for restating shop prices per square meter."""

    def test_price_per_square_meter(self, home: HomeGardenCalculator) -> None:
        result = home.price_per_square_meter(25.99, 10)

        assert result.price_per_square_meter == pytest.approx(25.99 * 1.19599)
        assert result.total_cost == pytest.approx(25.99 * 1.19599 * 10)

    def test_no_area_costs_nothing(self, home: HomeGardenCalculator) -> None:
        assert home.price_per_square_meter(25.99, 0).total_cost == 0
