"""Currency value objects.

Supported currencies, the built-in fallback rate table and the
exchange rate snapshot handed to currency calculators.
"""

from dataclasses import dataclass, field
from datetime import datetime


FALLBACK_MESSAGE = "Failed to load exchange rates. Using default USD values."
FALLBACK_BASE = "USD"


@dataclass(frozen=True)
class CurrencyInfo:
    """A supported currency."""

    code: str
    name: str
    symbol: str


SUPPORTED_CURRENCIES: tuple[CurrencyInfo, ...] = (
    CurrencyInfo("USD", "US Dollar", "$"),
    CurrencyInfo("EUR", "Euro", "€"),
    CurrencyInfo("GBP", "British Pound", "£"),
    CurrencyInfo("JPY", "Japanese Yen", "¥"),
    CurrencyInfo("CAD", "Canadian Dollar", "C$"),
    CurrencyInfo("AUD", "Australian Dollar", "A$"),
    CurrencyInfo("CHF", "Swiss Franc", "Fr"),
    CurrencyInfo("CNY", "Chinese Yuan", "¥"),
    CurrencyInfo("INR", "Indian Rupee", "₹"),
    CurrencyInfo("MXN", "Mexican Peso", "$"),
    CurrencyInfo("BRL", "Brazilian Real", "R$"),
    CurrencyInfo("RUB", "Russian Ruble", "₽"),
    CurrencyInfo("KRW", "South Korean Won", "₩"),
    CurrencyInfo("SGD", "Singapore Dollar", "S$"),
    CurrencyInfo("NZD", "New Zealand Dollar", "NZ$"),
    CurrencyInfo("HKD", "Hong Kong Dollar", "HK$"),
)

CURRENCY_CODES: tuple[str, ...] = tuple(currency.code for currency in SUPPORTED_CURRENCIES)

# Units of each currency per US dollar
FALLBACK_RATES: dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.85,
    "GBP": 0.75,
    "JPY": 110.0,
    "CAD": 1.25,
    "AUD": 1.35,
    "CHF": 0.92,
    "CNY": 6.5,
    "INR": 75.0,
    "MXN": 20.0,
    "BRL": 5.2,
    "RUB": 75.0,
    "KRW": 1200.0,
    "SGD": 1.35,
    "NZD": 1.45,
    "HKD": 7.8,
}


@dataclass(frozen=True)
class ExchangeRates:
    """Snapshot of exchange rates against a base currency.

    Attributes:
        base: Currency the rates are quoted against
        rates: Units of each currency per one unit of base
        fetched_at: When the rates were obtained
        is_fallback: Whether these are the built-in rates
        error: Message shown when live rates could not be loaded
    """

    base: str
    rates: dict[str, float]
    fetched_at: datetime = field(default_factory=datetime.now)
    is_fallback: bool = False
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.base:
            raise ValueError("base must be a currency code, got empty string")
        for code, rate in self.rates.items():
            if rate <= 0:
                raise ValueError(f"rate for {code} must be positive, got {rate}")

    def rate(self, code: str) -> float:
        """Units of code per unit of base.

        Raises:
            KeyError: If the currency has no rate
        """
        if code == self.base:
            return 1.0
        return self.rates[code]

    def rebased(self, base: str) -> "ExchangeRates":
        """The same rates quoted against another currency in the table."""
        if base == self.base:
            return self
        pivot = self.rate(base)
        rates = {code: rate / pivot for code, rate in self.rates.items()}
        rates[self.base] = 1 / pivot
        rates[base] = 1.0
        return ExchangeRates(
            base=base,
            rates=rates,
            fetched_at=self.fetched_at,
            is_fallback=self.is_fallback,
            error=self.error,
        )

    @classmethod
    def fallback(cls, base: str = FALLBACK_BASE, error: str | None = FALLBACK_MESSAGE) -> "ExchangeRates":
        """Built-in rates, rebased on base when it is a supported currency."""
        rates = cls(base=FALLBACK_BASE, rates=dict(FALLBACK_RATES), is_fallback=True, error=error)
        if base in FALLBACK_RATES:
            return rates.rebased(base)
        return rates


@dataclass(frozen=True)
class CurrencyConversionResult:
    """An amount converted between two currencies."""

    amount: float
    from_currency: str
    to_currency: str
    rate: float
    result: float
    is_fallback: bool = False
    error: str | None = None


@dataclass(frozen=True)
class ScaleConversionResult:
    """A large amount moved between number scales.

    Attributes:
        amount: Input amount in from_scale units
        from_scale: Scale of amount
        to_scale: Scale of result
        result: Amount in to_scale units
        full_value: Amount written out in units
        currency: Currency of the amount
        converted: full_value in every supported currency, empty when
            no rates are available
    """

    amount: float
    from_scale: str
    to_scale: str
    result: float
    full_value: float
    currency: str = FALLBACK_BASE
    converted: dict[str, float] = field(default_factory=dict)
