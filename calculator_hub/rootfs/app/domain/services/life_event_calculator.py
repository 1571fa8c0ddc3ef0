"""Life event calculator service.

Domain service for date-based calculators: pregnancy dating and
sobriety time. Both take an explicit reference time so results are
reproducible; callers pass "now" when they want live figures.
"""

from datetime import date, datetime, timedelta

from domain.value_objects import Milestone, PregnancyMethod, PregnancyResult, SobrietyResult

from .amortization import add_months

PREGNANCY_DAYS = 280
DAYS_FROM_CONCEPTION = 266
DEFAULT_CYCLE_DAYS = 28
OVULATION_DAY = 14

PREGNANCY_MILESTONES = (
    (4, "Implantation Complete", "The embryo has implanted in the uterine wall."),
    (8, "All Essential Organs Formed", "Basic organ systems have begun to develop."),
    (12, "End of First Trimester", "Risk of miscarriage decreases significantly."),
    (16, "Gender May Be Visible", "An ultrasound may reveal the baby's gender."),
    (20, "Halfway Point", "You're halfway through your pregnancy."),
    (24, "Viability Milestone", "Baby has a chance of survival if born prematurely."),
    (28, "Third Trimester Begins", "Baby's brain and nervous system are developing rapidly."),
    (37, "Full Term", "Baby is considered full term and ready for birth."),
    (40, "Due Date", "Your estimated due date has arrived."),
)

SOBRIETY_MILESTONES = (
    (1, "24 Hours", "The first day is often the hardest. Making it 24 hours is a significant achievement."),
    (7, "1 Week", "Physical withdrawal symptoms often begin to subside. Sleep may improve."),
    (30, "1 Month", "Many people notice improved mental clarity, energy levels, and mood stability."),
    (90, "90 Days", "The brain begins to heal more significantly. New habits are becoming established."),
    (180, "6 Months", "Many people report significant improvements in relationships and work performance."),
    (365, "1 Year", "A major milestone. You've navigated through all seasonal triggers and annual events."),
    (730, "2 Years", "Long-term recovery is taking hold. Many find increased confidence in their sobriety."),
    (1095, "3 Years", "Sobriety has become a way of life. Many report significant life improvements."),
    (1825, "5 Years", "Relapse rates drop significantly after 5 years of continuous sobriety."),
    (3650, "10 Years", "A decade of sobriety represents a profound life transformation."),
)

# Days sober before each benefit usually appears
HEALTH_BENEFITS = (
    (1, "Blood sugar levels begin to normalize"),
    (3, "Blood pressure may start to reduce"),
    (7, "Sleep quality often improves"),
    (14, "Skin appearance may improve"),
    (30, "Liver function begins to improve"),
    (90, "Brain chemistry starts to normalize"),
    (180, "Immune system strengthens"),
    (365, "Risk of heart disease begins to decrease"),
)
MAX_HEALTH_BENEFITS = 4


class LifeEventCalculator:
    """Date pregnancies and count sober time."""

    def pregnancy(
        self,
        method: PregnancyMethod,
        reference_date: date,
        as_of: date,
        cycle_length: int = DEFAULT_CYCLE_DAYS,
        ultrasound_weeks: int = 0,
        ultrasound_days: int = 0,
    ) -> PregnancyResult:
        """Estimate due date and progress of a pregnancy.

        Args:
            method: What reference_date is
            reference_date: First day of the last period, conception date,
                IVF transfer date or ultrasound date
            as_of: Date progress is measured at
            cycle_length: Menstrual cycle length, for the last period method
            ultrasound_weeks: Gestational weeks measured at the ultrasound
            ultrasound_days: Extra days measured at the ultrasound

        Returns:
            Due date, current week and trimester, trimester ends and milestones
        """
        if method == PregnancyMethod.LAST_PERIOD:
            cycle_length = cycle_length or DEFAULT_CYCLE_DAYS
            last_period = reference_date
            conception = reference_date + timedelta(days=cycle_length // 2 - 1)
            due = reference_date + timedelta(days=PREGNANCY_DAYS)
        elif method == PregnancyMethod.ULTRASOUND:
            last_period = reference_date - timedelta(days=ultrasound_weeks * 7 + ultrasound_days)
            conception = last_period + timedelta(days=OVULATION_DAY)
            due = last_period + timedelta(days=PREGNANCY_DAYS)
        else:
            conception = reference_date
            due = reference_date + timedelta(days=DAYS_FROM_CONCEPTION)
            last_period = due - timedelta(days=PREGNANCY_DAYS)

        days_since_conception = (as_of - conception).days
        if days_since_conception >= 0:
            current_week = days_since_conception // 7 + 2
            current_day = days_since_conception % 7
            trimester = 1 if current_week < 14 else 2 if current_week < 28 else 3
            first_end = last_period + timedelta(weeks=13)
            second_end = last_period + timedelta(weeks=26)
            third_end = due
        else:
            current_week = current_day = trimester = 0
            first_end = second_end = third_end = None

        milestones = tuple(
            Milestone(
                title=title,
                description=description,
                threshold=week,
                reached_on=last_period + timedelta(weeks=week),
                reached=current_week >= week,
            )
            for week, title, description in PREGNANCY_MILESTONES
        )
        return PregnancyResult(
            due_date=due,
            conception_date=conception,
            current_week=current_week,
            current_day=current_day,
            trimester=trimester,
            first_trimester_end=first_end,
            second_trimester_end=second_end,
            third_trimester_end=third_end,
            days_until_due=(due - as_of).days,
            milestones=milestones,
        )

    def sobriety(self, start: datetime, as_of: datetime, daily_spending: float = 10.0) -> SobrietyResult:
        """Time sober since start, with milestones and money saved.

        A start in the future counts as zero time.
        """
        if start > as_of:
            start = as_of

        elapsed = as_of - start
        total_days = elapsed.days
        whole_months = _whole_months(start, as_of)
        anniversary = add_months(start.date(), whole_months)
        leftover = as_of - datetime.combine(anniversary, start.time(), tzinfo=start.tzinfo)

        upcoming = next(
            ((days, title) for days, title, _ in SOBRIETY_MILESTONES if days > total_days), None
        )
        milestones = tuple(
            Milestone(
                title=title,
                description=description,
                threshold=days,
                reached_on=start.date() + timedelta(days=days),
                reached=total_days >= days,
            )
            for days, title, description in SOBRIETY_MILESTONES
        )
        return SobrietyResult(
            total_days=total_days,
            years=whole_months // 12,
            months=whole_months % 12,
            days=leftover.days,
            hours=elapsed.seconds // 3600,
            minutes=elapsed.seconds % 3600 // 60,
            next_milestone=upcoming[1] if upcoming else None,
            days_until_next_milestone=upcoming[0] - total_days if upcoming else 0,
            money_saved=total_days * daily_spending,
            health_benefits=tuple(
                text for days, text in HEALTH_BENEFITS if total_days >= days
            )[:MAX_HEALTH_BENEFITS],
            milestones=milestones,
        )


def _whole_months(start: datetime, end: datetime) -> int:
    months = (end.year - start.year) * 12 + end.month - start.month
    if months > 0:
        anniversary = add_months(start.date(), months)
        if datetime.combine(anniversary, start.time(), tzinfo=start.tzinfo) > end:
            months -= 1
    return max(months, 0)
