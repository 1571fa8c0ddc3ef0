"""Payment and compounding frequency value objects."""

from .choice import ChoiceEnum


class PaymentFrequency(ChoiceEnum):
    """How often a payment or contribution is made.

    Attributes:
        ANNUALLY: Once a year
        SEMI_ANNUALLY: Twice a year
        QUARTERLY: Four times a year
        MONTHLY: Twelve times a year
        SEMI_MONTHLY: Twice a month
        BI_WEEKLY: Every two weeks
        WEEKLY: Every week
        DAILY: Every day
    """

    ANNUALLY = "annually"
    SEMI_ANNUALLY = "semi-annually"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    SEMI_MONTHLY = "semi-monthly"
    BI_WEEKLY = "bi-weekly"
    WEEKLY = "weekly"
    DAILY = "daily"

    @property
    def periods_per_year(self) -> int:
        """Number of periods in one year."""
        return _PAYMENT_PERIODS[self]


class CompoundingFrequency(ChoiceEnum):
    """How often interest is compounded.

    CONTINUOUSLY has no period count; callers use the exponential
    formula for it.
    """

    ANNUALLY = "annually"
    SEMI_ANNUALLY = "semi-annually"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"
    CONTINUOUSLY = "continuously"

    @property
    def periods_per_year(self) -> int:
        """Number of compounding periods in one year (0 for continuous)."""
        return _COMPOUNDING_PERIODS[self]


_PAYMENT_PERIODS = {
    PaymentFrequency.ANNUALLY: 1,
    PaymentFrequency.SEMI_ANNUALLY: 2,
    PaymentFrequency.QUARTERLY: 4,
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.SEMI_MONTHLY: 24,
    PaymentFrequency.BI_WEEKLY: 26,
    PaymentFrequency.WEEKLY: 52,
    PaymentFrequency.DAILY: 365,
}

_COMPOUNDING_PERIODS = {
    CompoundingFrequency.ANNUALLY: 1,
    CompoundingFrequency.SEMI_ANNUALLY: 2,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.WEEKLY: 52,
    CompoundingFrequency.DAILY: 365,
    CompoundingFrequency.CONTINUOUSLY: 0,
}
