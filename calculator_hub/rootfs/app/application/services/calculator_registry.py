"""Calculator registry.

Maps calculator ids to their catalog definition and the handler that runs
the matching domain service with coerced inputs.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from domain.value_objects import (
    CalculatorDefinition,
    Category,
    InputField,
    InputKind,
)

# handler(values) or, for entries needing rates, handler(values, rates)
Handler = Callable[..., Any]
# Decides from the coerced inputs whether exchange rates are needed
RatesPredicate = Callable[[dict[str, Any]], bool]

SEARCH_LIMIT = 30
MIN_QUERY_LENGTH = 2


class UnknownCalculatorError(KeyError):
    """No calculator is registered under the requested id."""


@dataclass(frozen=True)
class CalculatorEntry:
    """A registered calculator.

    Attributes:
        definition: Catalog entry describing the calculator
        handler: Callable receiving the coerced input values
        needs_rates: Whether the handler also takes an ExchangeRates snapshot
        rates_when: Limits fetching rates to inputs it accepts; the
            handler then receives None instead of a snapshot
    """

    definition: CalculatorDefinition
    handler: Handler
    needs_rates: bool = False
    rates_when: RatesPredicate | None = None

    def uses_rates(self, values: dict[str, Any]) -> bool:
        """Whether running with these inputs needs exchange rates."""
        if not self.needs_rates:
            return False
        return self.rates_when is None or self.rates_when(values)


class CalculatorRegistry:
    """Catalog of calculators keyed by id, in registration order."""

    def __init__(self) -> None:
        self._entries: dict[str, CalculatorEntry] = {}

    def register(
        self,
        definition: CalculatorDefinition,
        handler: Handler,
        needs_rates: bool = False,
        rates_when: RatesPredicate | None = None,
    ) -> None:
        """Add a calculator.

        Raises:
            ValueError: If a calculator with the same id is registered
        """
        calculator_id = definition.calculator_id
        if calculator_id in self._entries:
            raise ValueError(f"calculator_id must be unique, got duplicate {calculator_id}")
        self._entries[calculator_id] = CalculatorEntry(definition, handler, needs_rates, rates_when)

    def get(self, calculator_id: str) -> CalculatorEntry:
        """Look up a calculator.

        Raises:
            UnknownCalculatorError: If no calculator has this id
        """
        try:
            return self._entries[calculator_id]
        except KeyError:
            raise UnknownCalculatorError(calculator_id) from None

    def definitions(self, category: Category | None = None) -> list[CalculatorDefinition]:
        """Registered definitions, optionally limited to one category."""
        return [
            entry.definition
            for entry in self._entries.values()
            if category is None or entry.definition.category == category
        ]

    def search(self, query: str, limit: int = SEARCH_LIMIT) -> list[CalculatorDefinition]:
        """Definitions matching a free text query, best matches first.

        Queries shorter than MIN_QUERY_LENGTH after stripping match
        nothing. Equal ranks are ordered by name.
        """
        query = query.strip().lower()
        if len(query) < MIN_QUERY_LENGTH:
            return []
        ranked = []
        for entry in self._entries.values():
            rank = entry.definition.search_rank(query)
            if rank is not None:
                ranked.append((rank, entry.definition.name.lower(), entry.definition))
        ranked.sort(key=lambda item: item[:2])
        return [definition for _, _, definition in ranked[:limit]]

    def categories(self) -> list[str]:
        """Categories that have at least one calculator, in catalog order."""
        used = {entry.definition.category for entry in self._entries.values()}
        return [category.value for category in Category if category in used]

    def __contains__(self, calculator_id: object) -> bool:
        return calculator_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def number(
    key: str,
    label: str,
    default: float = 0,
    unit: str | None = None,
    allow_negative: bool = False,
) -> InputField:
    """Numeric input field."""
    return InputField(key, label, InputKind.NUMBER, default, unit, (), allow_negative)


def select(key: str, label: str, options: type[Enum] | tuple[Any, ...], default: Any) -> InputField:
    """Select input field; options may be a choice enum or explicit values."""
    if isinstance(options, type) and issubclass(options, Enum):
        values = tuple(member.value for member in options)
    else:
        values = tuple(option.value if isinstance(option, Enum) else option for option in options)
    if isinstance(default, Enum):
        default = default.value
    return InputField(key, label, InputKind.SELECT, default, None, values)


def flag(key: str, label: str, default: bool = False) -> InputField:
    """Boolean input field."""
    return InputField(key, label, InputKind.FLAG, default)


def date_input(key: str, label: str) -> InputField:
    """Date input field; a missing date means today."""
    return InputField(key, label, InputKind.DATE, None)


def number_list(key: str, label: str, default: tuple[float, ...], allow_negative: bool = False) -> InputField:
    """Input field holding a list of numbers."""
    return InputField(key, label, InputKind.LIST, default, None, (), allow_negative)


def mapping(key: str, label: str) -> InputField:
    """Input field holding counts keyed by a label."""
    return InputField(key, label, InputKind.MAPPING, {})


def table(key: str, label: str) -> InputField:
    """Input field holding rows with named columns."""
    return InputField(key, label, InputKind.TABLE, [])
