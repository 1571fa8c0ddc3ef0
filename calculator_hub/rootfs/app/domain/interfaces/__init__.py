"""Domain interfaces for calculations.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .exchange_rate_provider import IExchangeRateProvider

__all__ = [
    "IExchangeRateProvider",
]
