"""Exchange rate provider interface.

Contract for obtaining currency exchange rates.
"""

from abc import ABC, abstractmethod

from domain.value_objects import ExchangeRates


class IExchangeRateProvider(ABC):
    """Contract for obtaining exchange rates against a base currency.

    Implementations never raise on network or payload failures: they
    return the built-in fallback table flagged with is_fallback and an
    error message instead.
    """

    @abstractmethod
    async def fetch_rates(self, base: str = "USD") -> ExchangeRates:
        """Get rates quoted against a base currency.

        Args:
            base: ISO 4217 code of the base currency

        Returns:
            ExchangeRates snapshot, live or fallback
        """
        pass

    @abstractmethod
    async def is_available(self) -> bool:
        """Check if the live rate source can be reached.

        Returns:
            True if live rates can be fetched
        """
        pass

    @abstractmethod
    def cache_info(self) -> dict:
        """Describe the cached rate snapshots.

        Returns:
            Dictionary with the cache lifetime and, per cached base, the
            time the rates were fetched
        """
        pass
