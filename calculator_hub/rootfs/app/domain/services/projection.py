"""Shared growth projection helpers."""

import math

from domain.value_objects import CompoundingFrequency


def events_in_period(period: int, events_per_year: int, periods_per_year: int) -> int:
    """Number of evenly spaced yearly events that fall in a period.

    Spreads events_per_year across periods_per_year so that each year
    receives exactly events_per_year events. With 52 weekly deposits
    over 12 monthly periods, months receive 4 or 5 deposits.

    Args:
        period: 1-based period number, may run past the first year
        events_per_year: How many events happen in a year
        periods_per_year: How many periods make up a year

    Returns:
        Event count for the period
    """
    if events_per_year <= 0 or periods_per_year <= 0 or period <= 0:
        return 0
    return (period * events_per_year) // periods_per_year - (
        (period - 1) * events_per_year
    ) // periods_per_year


def period_growth_rate(
    annual_rate: float, compounding: CompoundingFrequency, periods_per_year: int
) -> float:
    """Growth rate over one of periods_per_year equal periods.

    Args:
        annual_rate: Nominal annual rate as a fraction
        compounding: How often interest is compounded
        periods_per_year: Length of the period the rate is wanted for

    Returns:
        (1 + r/m)^(m/p) - 1, or e^(r/p) - 1 for continuous compounding
    """
    if periods_per_year <= 0:
        return 0.0
    if compounding == CompoundingFrequency.CONTINUOUSLY:
        return math.exp(annual_rate / periods_per_year) - 1
    compounds = compounding.periods_per_year
    if compounds == periods_per_year:
        return annual_rate / compounds
    return (1 + annual_rate / compounds) ** (compounds / periods_per_year) - 1


def effective_annual_rate(annual_rate: float, compounding: CompoundingFrequency) -> float:
    """Effective annual yield of a nominal rate, as a fraction."""
    if compounding == CompoundingFrequency.CONTINUOUSLY:
        return math.exp(annual_rate) - 1
    compounds = compounding.periods_per_year
    return (1 + annual_rate / compounds) ** compounds - 1
