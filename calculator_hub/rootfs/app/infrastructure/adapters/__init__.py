"""Infrastructure adapters for calculator operations.

These adapters implement domain interfaces using external services
like the exchange rate REST API and local configuration files.
"""

from .exchange_rate_api_client import ExchangeRateApiClient
from .fallback_rates_config import FallbackRatesConfig

__all__ = [
    "ExchangeRateApiClient",
    "FallbackRatesConfig",
]
