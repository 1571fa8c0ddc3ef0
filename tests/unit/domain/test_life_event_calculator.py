"""Tests for pregnancy and sobriety calculations."""

from datetime import date, datetime

import pytest
from domain.services import LifeEventCalculator
from domain.value_objects import PregnancyMethod


@pytest.fixture
def events() -> LifeEventCalculator:
    return LifeEventCalculator()


class TestPregnancy:
    """Tests for pregnancy dating."""

    def test_last_period(self, events: LifeEventCalculator) -> None:
        result = events.pregnancy(PregnancyMethod.LAST_PERIOD, date(2024, 1, 1), date(2024, 3, 1))

        assert result.due_date == date(2024, 10, 7)
        assert result.conception_date == date(2024, 1, 14)
        assert (result.current_week, result.current_day) == (8, 5)
        assert result.trimester == 1
        assert result.first_trimester_end == date(2024, 4, 1)
        assert result.days_until_due == 220

    def test_milestones_reached_by_week(self, events: LifeEventCalculator) -> None:
        result = events.pregnancy(PregnancyMethod.LAST_PERIOD, date(2024, 1, 1), date(2024, 3, 1))

        reached = {milestone.threshold: milestone.reached for milestone in result.milestones}
        assert reached[8] is True
        assert reached[12] is False
        assert result.milestones[-1].reached_on == result.due_date

    def test_conception_and_ultrasound_agree(self, events: LifeEventCalculator) -> None:
        """Every method lands on the same due date for the same pregnancy."""
        conception = events.pregnancy(PregnancyMethod.CONCEPTION, date(2024, 1, 15), date(2024, 3, 1))
        ultrasound = events.pregnancy(
            PregnancyMethod.ULTRASOUND, date(2024, 3, 1), date(2024, 3, 1),
            ultrasound_weeks=8, ultrasound_days=4,
        )

        assert conception.due_date == date(2024, 10, 7)
        assert ultrasound.due_date == date(2024, 10, 7)

    def test_before_conception(self, events: LifeEventCalculator) -> None:
        result = events.pregnancy(PregnancyMethod.LAST_PERIOD, date(2024, 1, 1), date(2024, 1, 5))

        assert result.current_week == 0
        assert result.trimester == 0
        assert result.first_trimester_end is None


class TestSobriety:
    """Tests for sober time."""

    def test_elapsed_time(self, events: LifeEventCalculator) -> None:
        result = events.sobriety(datetime(2024, 1, 15, 8, 0), datetime(2024, 3, 20, 10, 30))

        assert result.total_days == 65
        assert (result.years, result.months, result.days) == (0, 2, 5)
        assert (result.hours, result.minutes) == (2, 30)
        assert result.next_milestone == "90 Days"
        assert result.days_until_next_milestone == 25
        assert result.money_saved == pytest.approx(650)
        assert len(result.health_benefits) == 4

    def test_month_end_anniversary(self, events: LifeEventCalculator) -> None:
        """Jan 31 to Mar 1 is one month (to Feb 29) and one day."""
        result = events.sobriety(datetime(2024, 1, 31), datetime(2024, 3, 1))

        assert (result.months, result.days) == (1, 1)

    def test_future_start_counts_as_zero(self, events: LifeEventCalculator) -> None:
        result = events.sobriety(datetime(2030, 1, 1), datetime(2024, 1, 1))

        assert result.total_days == 0
        assert result.next_milestone == "24 Hours"
        assert result.days_until_next_milestone == 1
        assert result.health_benefits == ()

    def test_all_milestones_reached(self, events: LifeEventCalculator) -> None:
        result = events.sobriety(datetime(2000, 1, 1), datetime(2024, 1, 1))

        assert result.years == 24
        assert result.next_milestone is None
        assert all(milestone.reached for milestone in result.milestones)
