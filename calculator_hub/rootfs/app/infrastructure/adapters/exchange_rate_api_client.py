"""Exchange rate API client adapter.

Infrastructure adapter that implements IExchangeRateProvider using the
exchangerate-api.com REST API.

Note: This adapter uses the synchronous requests library. While the methods
are declared async to match the interface, they run synchronously within
the Flask application context (which uses asyncio.run() for async routes).
"""

import logging
import os
from datetime import datetime, timedelta
from typing import Any

import requests
from domain.interfaces import IExchangeRateProvider
from domain.value_objects import ExchangeRates

from .fallback_rates_config import FallbackRatesConfig

_LOGGER = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.exchangerate-api.com/v4/latest"
DEFAULT_TIMEOUT = 10
DEFAULT_CACHE_SECONDS = 3600


class ExchangeRateApiClient(IExchangeRateProvider):
    """exchangerate-api.com implementation of the exchange rate provider.

    Rates are cached per base currency. When a request fails or returns
    an unusable payload, the fallback table is returned instead and is
    not cached, so the next call tries the API again.
    """

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        cache_seconds: float | None = None,
        fallback: FallbackRatesConfig | None = None,
    ) -> None:
        """Initialize the exchange rate client.

        Args:
            api_url: Endpoint base; the base currency is appended to it
            timeout: Request timeout in seconds
            cache_seconds: How long fetched rates are reused
            fallback: Fallback table (defaults to the built-in rates)
        """
        self._api_url = (api_url or os.getenv("EXCHANGE_RATE_API_URL", DEFAULT_API_URL)).rstrip("/")
        self._timeout = timeout if timeout is not None else float(
            os.getenv("EXCHANGE_RATE_TIMEOUT", str(DEFAULT_TIMEOUT))
        )
        self._cache_lifetime = timedelta(seconds=cache_seconds if cache_seconds is not None else float(
            os.getenv("EXCHANGE_RATE_CACHE_SECONDS", str(DEFAULT_CACHE_SECONDS))
        ))
        self._fallback = fallback or FallbackRatesConfig()
        self._cache: dict[str, ExchangeRates] = {}

        _LOGGER.info("Exchange rate client initialized with URL: %s", self._api_url)

    async def fetch_rates(self, base: str = "USD") -> ExchangeRates:
        """Get rates for a base currency, from cache when fresh.

        Args:
            base: ISO 4217 code of the base currency

        Returns:
            Live rates, or the fallback table with an error message
        """
        base = base.upper()
        cached = self._cache.get(base)
        if cached is not None and datetime.now() - cached.fetched_at < self._cache_lifetime:
            _LOGGER.debug("Using cached exchange rates for %s", base)
            return cached

        url = f"{self._api_url}/{base}"
        _LOGGER.debug("Fetching exchange rates from: %s", url)
        try:
            response = requests.get(url, timeout=self._timeout)
            response.raise_for_status()
            rates = self._parse_rates(base, response.json())
        except requests.RequestException as e:
            _LOGGER.error("Exchange rate API error: %s", e)
            return self._use_fallback(base)
        except (ValueError, KeyError, TypeError) as e:
            _LOGGER.error("Invalid exchange rate payload for %s: %s", base, e)
            return self._use_fallback(base)

        self._cache[base] = rates
        _LOGGER.info("Refreshed exchange rates for %s (%d currencies)", base, len(rates.rates))
        return rates

    async def is_available(self) -> bool:
        """Check if the exchange rate API answers."""
        try:
            response = requests.get(f"{self._api_url}/USD", timeout=self._timeout)
            return response.status_code == 200
        except requests.RequestException as e:
            _LOGGER.error("Exchange rate API error: %s", e)
            return False

    def cache_info(self) -> dict[str, Any]:
        """Describe cached snapshots."""
        return {
            "lifetime_seconds": self._cache_lifetime.total_seconds(),
            "entries": {
                base: rates.fetched_at.isoformat() for base, rates in self._cache.items()
            },
        }

    def clear_cache(self) -> None:
        """Drop every cached snapshot."""
        self._cache = {}

    def _parse_rates(self, base: str, payload: dict[str, Any]) -> ExchangeRates:
        """Build a snapshot from an API payload.

        Raises:
            KeyError: If the payload has no rates
            ValueError: If a rate is not a positive number
        """
        rates = {
            str(code): float(rate)
            for code, rate in payload["rates"].items()
            if code != base
        }
        return ExchangeRates(base=base, rates=rates)

    def _use_fallback(self, base: str) -> ExchangeRates:
        _LOGGER.warning("Using fallback exchange rates for %s", base)
        return self._fallback.rates(base)
