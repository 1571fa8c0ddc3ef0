"""Base class for categorical calculator choices."""

from enum import Enum
from typing import Any, TypeVar

_ChoiceT = TypeVar("_ChoiceT", bound="ChoiceEnum")


class ChoiceEnum(str, Enum):
    """String enum that parses loosely typed input.

    Matching ignores case, surrounding whitespace, and the difference
    between "-", "_" and no separator at all, so "bi-weekly",
    "bi_weekly" and "BIWEEKLY" are the same choice.
    """

    @classmethod
    def parse(cls: type[_ChoiceT], value: Any, default: _ChoiceT) -> _ChoiceT:
        """Parse a choice, falling back to default when unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return default
        key = _normalize(value)
        for member in cls:
            if _normalize(member.value) == key:
                return member
        return default


def _normalize(text: str) -> str:
    return text.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
