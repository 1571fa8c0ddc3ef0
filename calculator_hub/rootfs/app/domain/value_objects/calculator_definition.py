"""Calculator catalog value objects.

A calculator definition describes one entry of the catalog: what it is
called, where it is listed and which inputs it takes.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from .choice import ChoiceEnum
from .numeric_input import parse_number

_TRUE_FLAGS = frozenset({"true", "1", "yes", "on"})


class Category(ChoiceEnum):
    """Catalog section a calculator is listed under."""

    FINANCE = "finance"
    HEALTH_FITNESS = "health-fitness"
    FOOD_COOKING = "food-cooking"
    CONVERSION = "conversion"
    UTILITY = "utility"
    HOME_GARDEN = "home-garden"


class InputKind(ChoiceEnum):
    """Shape of an input value.

    Attributes:
        NUMBER: A number; malformed values count as zero
        SELECT: One of a fixed set of options
        DATE: An ISO 8601 date or date-time
        FLAG: A boolean switch
        LIST: A list of numbers
        MAPPING: Counts keyed by a label
        TABLE: A list of rows with named numeric columns
    """

    NUMBER = "number"
    SELECT = "select"
    DATE = "date"
    FLAG = "flag"
    LIST = "list"
    MAPPING = "mapping"
    TABLE = "table"


@dataclass(frozen=True)
class InputField:
    """One named input of a calculator.

    Attributes:
        key: Name of the input in request payloads
        label: Human readable name
        kind: Shape of the value
        default: Value used when the input is missing or invalid
        unit: Unit of a numeric value, if any
        options: Allowed values of a select input
        allow_negative: Whether a number may be negative
    """

    key: str
    label: str
    kind: InputKind = InputKind.NUMBER
    default: Any = 0
    unit: str | None = None
    options: tuple[str, ...] = ()
    allow_negative: bool = False

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key must be non-empty, got empty string")
        if self.kind == InputKind.SELECT:
            if not self.options:
                raise ValueError(f"options must be non-empty for select input {self.key}")
            if self.default not in self.options:
                raise ValueError(
                    f"default must be one of {self.options}, got {self.default}"
                )

    def coerce(self, value: Any) -> Any:
        """Turn a raw request value into the value handed to a calculator.

        Missing or malformed values never fail: numbers become zero,
        unknown options and unreadable dates, lists and mappings become
        the default.
        """
        if value is None:
            return self.default
        if self.kind == InputKind.NUMBER:
            return parse_number(value, allow_negative=self.allow_negative)
        if self.kind == InputKind.SELECT:
            text = str(value).strip()
            if text in self.options:
                return text
            # Unit symbols such as "KB" and "kB" differ only by case
            matches = [option for option in self.options if option.lower() == text.lower()]
            return matches[0] if len(matches) == 1 else self.default
        if self.kind == InputKind.FLAG:
            if isinstance(value, str):
                return value.strip().lower() in _TRUE_FLAGS
            return bool(value)
        if self.kind == InputKind.DATE:
            return _parse_date(value, self.default)
        if self.kind == InputKind.LIST:
            if not isinstance(value, (list, tuple)):
                return list(self.default)
            return [parse_number(item, allow_negative=self.allow_negative) for item in value]
        if self.kind == InputKind.MAPPING:
            return dict(value) if isinstance(value, dict) else self.default
        if isinstance(value, (list, tuple)):
            return [row for row in value if isinstance(row, dict)]
        return self.default

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "key": self.key,
            "label": self.label,
            "kind": self.kind.value,
            "default": self.default,
            "unit": self.unit,
            "options": list(self.options),
            "allow_negative": self.allow_negative,
        }


@dataclass(frozen=True)
class CalculatorDefinition:
    """Catalog entry of a calculator.

    Attributes:
        calculator_id: Unique slug, e.g. "mortgage"
        name: Display name
        description: One sentence on what it computes
        category: Catalog section
        inputs: Input fields in display order
        formula: Formula or method used, as plain text
        keywords: Extra search terms besides the name and description
    """

    calculator_id: str
    name: str
    description: str
    category: Category
    inputs: tuple[InputField, ...] = field(default_factory=tuple)
    formula: str = ""
    keywords: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.calculator_id:
            raise ValueError("calculator_id must be non-empty, got empty string")
        keys = [item.key for item in self.inputs]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"input keys must be unique, got duplicates {duplicates}")

    def defaults(self) -> dict[str, Any]:
        """Default value of every input."""
        return {item.key: item.default for item in self.inputs}

    def coerce(self, raw_inputs: dict[str, Any] | None) -> dict[str, Any]:
        """Coerce every input, ignoring keys the calculator does not take."""
        raw_inputs = raw_inputs or {}
        return {item.key: item.coerce(raw_inputs.get(item.key)) for item in self.inputs}

    def search_terms(self) -> tuple[str, ...]:
        """Lowercase keywords, followed by the words of the id."""
        terms = [keyword.lower() for keyword in self.keywords]
        for word in self.calculator_id.split("-"):
            if word not in terms:
                terms.append(word)
        return tuple(terms)

    def search_rank(self, query: str) -> int | None:
        """Rank of a lowercase query against this entry; lower ranks first.

        0 exact name, 1 name prefix, 2 keyword, 3 description, 4 any other
        part of the name. None when nothing contains the query.
        """
        name = self.name.lower()
        if name == query:
            return 0
        if name.startswith(query):
            return 1
        if any(query in term for term in self.search_terms()):
            return 2
        if query in self.description.lower():
            return 3
        if query in name:
            return 4
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.calculator_id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "formula": self.formula,
            "inputs": [item.to_dict() for item in self.inputs],
            "keywords": list(self.search_terms()),
        }


def _parse_date(value: Any, default: Any) -> Any:
    """Parse an ISO 8601 date or date-time into a naive value."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return default
    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).replace(tzinfo=None)
    except ValueError:
        return default
