"""Pregnancy and sobriety result value objects."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Milestone:
    """A dated milestone.

    Attributes:
        title: Short name of the milestone
        description: What the milestone means
        threshold: Week (pregnancy) or day (sobriety) it is reached
        reached_on: Calendar date it is reached
        reached: Whether it has been reached as of the reference date
    """

    title: str
    description: str
    threshold: int
    reached_on: date
    reached: bool


@dataclass(frozen=True)
class PregnancyResult:
    """Dating of a pregnancy.

    Attributes:
        due_date: Estimated due date
        conception_date: Estimated conception date
        current_week: Gestational week counted from the last period, 0 if
            conception is still ahead
        current_day: Days into the current week
        trimester: 1, 2 or 3, 0 if conception is still ahead
        first_trimester_end: End of week 13
        second_trimester_end: End of week 26
        third_trimester_end: The due date
        days_until_due: Days from the reference date to the due date
        milestones: Weekly milestones with their dates
    """

    due_date: date
    conception_date: date
    current_week: int
    current_day: int
    trimester: int
    first_trimester_end: date | None
    second_trimester_end: date | None
    third_trimester_end: date | None
    days_until_due: int
    milestones: tuple[Milestone, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not 0 <= self.current_day < 7:
            raise ValueError(f"current_day must be in [0, 7), got {self.current_day}")
        if self.trimester not in (0, 1, 2, 3):
            raise ValueError(f"trimester must be 0, 1, 2 or 3, got {self.trimester}")


@dataclass(frozen=True)
class SobrietyResult:
    """Time sober and what it is worth.

    Attributes:
        total_days: Whole days since the sobriety start
        years: Whole years
        months: Whole months after the years
        days: Days after the whole months
        hours: Hours after the whole days
        minutes: Minutes after the whole hours
        next_milestone: First milestone not yet reached
        days_until_next_milestone: Days left until it
        money_saved: total_days times the daily spending
        health_benefits: Up to four benefits reached so far
        milestones: Every milestone with its date
    """

    total_days: int
    years: int
    months: int
    days: int
    hours: int
    minutes: int
    next_milestone: str | None
    days_until_next_milestone: int
    money_saved: float
    health_benefits: tuple[str, ...] = field(default_factory=tuple)
    milestones: tuple[Milestone, ...] = field(default_factory=tuple)
