"""Calculator Application Service.

Main application service that coordinates the calculator catalog, the
domain calculators and the exchange rate provider.
"""

import dataclasses
import logging
import math
from datetime import date, datetime
from enum import Enum
from typing import Any

from domain.interfaces import IExchangeRateProvider
from domain.value_objects import (
    CURRENCY_CODES,
    SUPPORTED_CURRENCIES,
    CalculatorDefinition,
    Category,
    ExchangeRates,
)

from .calculator_registry import CalculatorRegistry
from .everyday_catalog import register_everyday_calculators
from .finance_catalog import register_finance_calculators

_LOGGER = logging.getLogger(__name__)


def build_default_registry() -> CalculatorRegistry:
    """Registry holding every calculator of the catalog."""
    registry = CalculatorRegistry()
    register_finance_calculators(registry)
    register_everyday_calculators(registry)
    return registry


class CalculatorApplicationService:
    """Application service for calculator operations.

    This service is the main entry point for listing and running
    calculators. It coerces raw inputs, fetches exchange rates for the
    calculators that need them and turns results into plain data.
    """

    def __init__(
        self,
        exchange_rate_provider: IExchangeRateProvider,
        registry: CalculatorRegistry | None = None,
    ) -> None:
        """Initialize the calculator application service.

        Args:
            exchange_rate_provider: Source of currency exchange rates
            registry: Calculator catalog (defaults to the full catalog)
        """
        self._exchange_rate_provider = exchange_rate_provider
        self._registry = registry or build_default_registry()
        _LOGGER.info("Calculator catalog loaded with %d calculators", len(self._registry))

    async def list_calculators(self, category: str | None = None) -> list[dict[str, Any]]:
        """List catalog entries.

        Args:
            category: Optional category value to filter on

        Returns:
            Serialized definitions in catalog order

        Raises:
            ValueError: If the category is unknown
        """
        selected = None
        if category:
            selected = Category.parse(category, None)
            if selected is None:
                raise ValueError(
                    f"category must be one of {[c.value for c in Category]}, got {category}"
                )
        return [definition.to_dict() for definition in self._registry.definitions(selected)]

    async def search_calculators(self, query: str) -> list[dict[str, Any]]:
        """Catalog entries matching a free text query, best matches first."""
        results = self._registry.search(query)
        _LOGGER.debug("Search %r matched %d calculators", query, len(results))
        return [definition.to_dict() for definition in results]

    async def get_calculator(self, calculator_id: str) -> dict[str, Any]:
        """Get one catalog entry.

        Raises:
            UnknownCalculatorError: If no calculator has this id
        """
        return self._definition(calculator_id).to_dict()

    async def calculate(self, calculator_id: str, raw_inputs: dict[str, Any] | None) -> dict[str, Any]:
        """Run a calculator.

        Missing inputs take their defaults and malformed numbers count
        as zero, so any payload produces a result.

        Args:
            calculator_id: Id of the calculator
            raw_inputs: Input values as received, keyed by input key

        Returns:
            Dictionary with the calculator id, the inputs used and the result

        Raises:
            UnknownCalculatorError: If no calculator has this id
            ValueError: If the inputs cannot be used, e.g. a currency
                without an exchange rate
        """
        entry = self._registry.get(calculator_id)
        values = entry.definition.coerce(raw_inputs)
        _LOGGER.debug("Calculating %s with %s", calculator_id, values)

        rates = None
        if entry.uses_rates(values):
            rates = await self._exchange_rate_provider.fetch_rates(values.get("currency", "USD"))
            if rates.is_fallback:
                _LOGGER.warning("Calculating %s with fallback exchange rates", calculator_id)

        try:
            result = entry.handler(values, rates) if entry.needs_rates else entry.handler(values)
        except OverflowError as err:
            raise ValueError(f"inputs must keep results within float range, got {err}") from err

        _LOGGER.info("Calculated %s", calculator_id)
        return {
            "calculator_id": calculator_id,
            "inputs": to_serializable(values),
            "result": to_serializable(result),
        }

    async def get_exchange_rates(self, base: str = "USD") -> dict[str, Any]:
        """Get exchange rates for a base currency.

        Raises:
            ValueError: If the base currency is not supported
        """
        base = base.strip().upper()
        if base not in CURRENCY_CODES:
            raise ValueError(f"base must be one of {list(CURRENCY_CODES)}, got {base}")
        rates = await self._exchange_rate_provider.fetch_rates(base)
        return _rates_to_dict(rates)

    async def get_status(self) -> dict[str, Any]:
        """Get the status of the service.

        Returns:
            Dictionary with catalog size, categories and exchange rate state
        """
        return {
            "calculators": len(self._registry),
            "categories": self._registry.categories(),
            "currencies": [dataclasses.asdict(currency) for currency in SUPPORTED_CURRENCIES],
            "exchange_rates": {
                "available": await self._exchange_rate_provider.is_available(),
                "cache": self._exchange_rate_provider.cache_info(),
            },
        }

    def _definition(self, calculator_id: str) -> CalculatorDefinition:
        return self._registry.get(calculator_id).definition


def _rates_to_dict(rates: ExchangeRates) -> dict[str, Any]:
    return {
        "base": rates.base,
        "rates": dict(rates.rates),
        "fetched_at": rates.fetched_at.isoformat(),
        "is_fallback": rates.is_fallback,
        "error": rates.error,
    }


def to_serializable(value: Any) -> Any:
    """Convert results to JSON-compatible data.

    Dataclasses become dicts, tuples become lists, enums their values and
    dates ISO 8601 strings.

    Raises:
        ValueError: If a float is infinite or NaN, which JSON cannot carry
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"inputs must keep results within float range, got {value}")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            item.name: to_serializable(getattr(value, item.name))
            for item in dataclasses.fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(key): to_serializable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_serializable(item) for item in value]
    return value
