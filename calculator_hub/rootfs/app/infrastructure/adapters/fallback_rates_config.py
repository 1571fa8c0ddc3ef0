"""Fallback exchange rate configuration loader.

Loads the exchange rate table used when live rates cannot be fetched,
from an optional JSON file with the shape
{"base": "USD", "rates": {"EUR": 0.85, ...}}.
"""

import json
import logging
from pathlib import Path

from domain.value_objects import FALLBACK_BASE, FALLBACK_MESSAGE, FALLBACK_RATES, ExchangeRates

_LOGGER = logging.getLogger(__name__)


class FallbackRatesConfig:
    """Loads and serves the fallback exchange rate table."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        """Initialize fallback rate configuration.

        Args:
            config_path: Path to the fallback rates JSON file. If None, the
                built-in table is used.
        """
        self._config_path = Path(config_path) if config_path else None
        self._base = FALLBACK_BASE
        self._rates: dict[str, float] = dict(FALLBACK_RATES)
        if self._config_path is not None:
            self._load_config()

    def _load_config(self) -> None:
        """Load the fallback table from disk."""
        if not self._config_path.exists():
            _LOGGER.warning(
                "Fallback rates file not found at %s. Using built-in rates.",
                self._config_path
            )
            return

        try:
            with open(self._config_path, "r") as f:
                config_data = json.load(f)

            base = str(config_data.get("base", FALLBACK_BASE)).upper()
            rates = {}
            for code, rate in config_data.get("rates", {}).items():
                if not isinstance(rate, (int, float)) or isinstance(rate, bool) or rate <= 0:
                    _LOGGER.warning(
                        "Invalid fallback rate for %s, expected positive number, got %s",
                        code, rate
                    )
                    continue
                rates[str(code).upper()] = float(rate)
            rates[base] = 1.0

            self._base = base
            self._rates = rates
            _LOGGER.info(
                "Loaded %d fallback exchange rates from %s",
                len(self._rates), self._config_path
            )
        except (json.JSONDecodeError, OSError, AttributeError) as e:
            _LOGGER.error("Failed to load fallback rates from %s: %s", self._config_path, e)

    def rates(self, base: str = FALLBACK_BASE, error: str | None = FALLBACK_MESSAGE) -> ExchangeRates:
        """Fallback rates, rebased on base when the table has it.

        Args:
            base: Currency the rates should be quoted against
            error: Message attached to the snapshot

        Returns:
            ExchangeRates flagged as fallback
        """
        table = ExchangeRates(base=self._base, rates=dict(self._rates), is_fallback=True, error=error)
        if base in self._rates:
            return table.rebased(base)
        return table

    @property
    def base(self) -> str:
        """Currency the table is quoted against."""
        return self._base
