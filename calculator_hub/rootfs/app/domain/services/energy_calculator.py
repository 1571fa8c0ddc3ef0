"""Energy calculator service.

Domain service for electricity: appliance running costs, LED savings,
electrical conversions and electric vehicle efficiency.
"""

from domain.value_objects import (
    CurrentResult,
    DistanceUnit,
    EfficiencyMetric,
    ElectricityCostResult,
    EvEfficiencyResult,
    LedSavingsResult,
    LumensResult,
    PeriodResult,
    PowerUnit,
    UnitSystem,
    UsageUnit,
)

DAYS_PER_MONTH = 30.44
WEEKS_PER_YEAR = 52.143
CO2_KG_PER_KWH = 0.85
CO2_KG_PER_TREE = 21
KWH_PER_GALLON = 33.7
KM_PER_MILE = 1.60934
LITERS_PER_GALLON = 3.78541

LUMENS_PER_WATT = {
    "incandescent": 15,
    "halogen": 20,
    "cfl": 60,
    "led": 80,
    "metal_halide": 85,
    "high_pressure_sodium": 100,
    "low_pressure_sodium": 150,
}


class EnergyCalculator:
    """Calculate electricity use and efficiency."""

    def electricity_cost(
        self,
        power: float,
        usage: float,
        rate: float,
        power_unit: PowerUnit = PowerUnit.WATTS,
        usage_unit: UsageUnit = UsageUnit.HOURS,
        days_per_week: float = 7,
    ) -> ElectricityCostResult:
        """Running cost of an appliance.

        Args:
            power: Power rating
            usage: Daily usage time
            rate: Price per kWh
            power_unit: Unit of power
            usage_unit: Unit of usage
            days_per_week: Days the appliance runs each week

        Returns:
            Energy and cost per day, week, month and year
        """
        kilowatts = power / 1000 if power_unit == PowerUnit.WATTS else power
        hours = usage / 60 if usage_unit == UsageUnit.MINUTES else usage

        daily = kilowatts * hours
        weekly = daily * days_per_week
        monthly = weekly / 7 * DAYS_PER_MONTH
        annual = weekly / 7 * 365
        return ElectricityCostResult(
            daily_kwh=daily,
            weekly_kwh=weekly,
            monthly_kwh=monthly,
            annual_kwh=annual,
            daily_cost=daily * rate,
            weekly_cost=weekly * rate,
            monthly_cost=monthly * rate,
            annual_cost=annual * rate,
        )

    def led_savings(
        self,
        bulbs: int,
        existing_watts: float,
        led_watts: float,
        hours_per_day: float,
        days_per_week: float,
        cents_per_kwh: float,
        led_price: float = 0.0,
        include_bulb_price: bool = True,
    ) -> LedSavingsResult:
        """Yearly savings from switching bulbs to LEDs.

        Energy cost is in cents (or pence) per kWh; savings are in whole
        currency units.
        """
        hours_per_year = hours_per_day * days_per_week * WEEKS_PER_YEAR
        kwh_saved = (existing_watts - led_watts) * bulbs * hours_per_year / 1000
        money_saved = kwh_saved * cents_per_kwh / 100
        bulb_cost = bulbs * led_price if include_bulb_price else 0.0
        co2 = kwh_saved * CO2_KG_PER_KWH
        return LedSavingsResult(
            annual_kwh_saved=kwh_saved,
            annual_money_saved=money_saved,
            total_bulb_cost=bulb_cost,
            payback_years=bulb_cost / money_saved if money_saved > 0 else 0.0,
            co2_saved_kg=co2,
            trees_equivalent=co2 / CO2_KG_PER_TREE,
        )

    def watts_to_amps(self, watts: float, volts: float, power_factor: float = 1.0) -> CurrentResult:
        """I = P / (V * PF); zero when V * PF is zero."""
        divisor = volts * power_factor
        return CurrentResult(
            watts=watts,
            volts=volts,
            power_factor=power_factor,
            amps=watts / divisor if divisor > 0 else 0.0,
        )

    def amps_to_watts(self, amps: float, volts: float, power_factor: float = 1.0) -> CurrentResult:
        """P = I * V * PF."""
        return CurrentResult(
            watts=amps * volts * power_factor, volts=volts, power_factor=power_factor, amps=amps
        )

    def lumens_to_watts(self, lumens: float, light_source: str = "led", efficacy: float = 0.0) -> LumensResult:
        """Watts needed for a brightness.

        A positive efficacy (lumens per watt) overrides the typical
        value of the light source.
        """
        lumens_per_watt = efficacy if efficacy > 0 else LUMENS_PER_WATT.get(light_source, LUMENS_PER_WATT["led"])
        return LumensResult(lumens=lumens, lumens_per_watt=lumens_per_watt, watts=lumens / lumens_per_watt)

    def hertz_to_seconds(self, hertz: float) -> PeriodResult:
        """Period T = 1 / f; zero for a zero frequency."""
        seconds = 1 / hertz if hertz > 0 else 0.0
        return PeriodResult(hertz=hertz, seconds=seconds, milliseconds=seconds * 1000)

    def mpge(
        self,
        value: float,
        metric: EfficiencyMetric = EfficiencyMetric.EFFICIENCY,
        unit_system: UnitSystem = UnitSystem.IMPERIAL,
    ) -> EvEfficiencyResult:
        """Express an EV efficiency figure in every form, MPGe included.

        Args:
            value: mi/kWh or km/kWh for efficiency, kWh/100mi or kWh/100km
                for consumption
            metric: Whether value is an efficiency or a consumption
            unit_system: Imperial (miles) or metric (km)
        """
        if value <= 0:
            return _ev_efficiency(0.0)
        if metric == EfficiencyMetric.EFFICIENCY:
            distance_per_kwh = value
        else:
            distance_per_kwh = 100 / value
        if unit_system == UnitSystem.METRIC:
            return _ev_efficiency(distance_per_kwh / KM_PER_MILE)
        return _ev_efficiency(distance_per_kwh)

    def miles_per_kwh(
        self,
        distance: float,
        energy_kwh: float,
        distance_unit: DistanceUnit = DistanceUnit.MILES,
        price_per_kwh: float = 0.0,
    ) -> EvEfficiencyResult:
        """Efficiency of a trip from its distance and the energy it used."""
        miles = distance / KM_PER_MILE if distance_unit == DistanceUnit.KILOMETERS else distance
        if miles <= 0 or energy_kwh <= 0:
            return _ev_efficiency(0.0, trip_cost=energy_kwh * price_per_kwh)
        return _ev_efficiency(miles / energy_kwh, trip_cost=energy_kwh * price_per_kwh)


def _ev_efficiency(miles_per_kwh: float, trip_cost: float = 0.0) -> EvEfficiencyResult:
    if miles_per_kwh <= 0:
        return EvEfficiencyResult(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, trip_cost)
    km_per_kwh = miles_per_kwh * KM_PER_MILE
    mpge = miles_per_kwh * KWH_PER_GALLON
    return EvEfficiencyResult(
        miles_per_kwh=miles_per_kwh,
        kwh_per_100_miles=100 / miles_per_kwh,
        km_per_kwh=km_per_kwh,
        kwh_per_100_km=100 / km_per_kwh,
        wh_per_mile=1000 / miles_per_kwh,
        mpge=mpge,
        liters_per_100_km=LITERS_PER_GALLON * 100 / mpge,
        trip_cost=trip_cost,
    )
