"""Currency converter service.

Domain service converting amounts between currencies with a rate
snapshot, and between number scales (thousand to trillion).
"""

from domain.value_objects import (
    CURRENCY_CODES,
    CurrencyConversionResult,
    ExchangeRates,
    NumberScale,
    ScaleConversionResult,
)

SCALE_FACTORS = {
    NumberScale.THOUSAND: 1e3,
    NumberScale.MILLION: 1e6,
    NumberScale.BILLION: 1e9,
    NumberScale.TRILLION: 1e12,
}


class CurrencyConverter:
    """Convert money between currencies and number scales."""

    def convert(
        self, amount: float, from_currency: str, to_currency: str, rates: ExchangeRates
    ) -> CurrencyConversionResult:
        """amount * rate[to] / rate[from], the identity when both match.

        Raises:
            KeyError: If either currency has no rate
        """
        if from_currency == to_currency:
            rate = 1.0
        else:
            rate = rates.rate(to_currency) / rates.rate(from_currency)
        return CurrencyConversionResult(
            amount=amount,
            from_currency=from_currency,
            to_currency=to_currency,
            rate=rate,
            result=amount * rate,
            is_fallback=rates.is_fallback,
            error=rates.error,
        )

    def convert_scale(
        self,
        amount: float,
        from_scale: NumberScale,
        to_scale: NumberScale,
        currency: str = "USD",
        rates: ExchangeRates | None = None,
    ) -> ScaleConversionResult:
        """Move an amount between scales, e.g. 2500 million to 2.5 billion.

        With rates, the full amount is also expressed in every supported
        currency that has a rate.
        """
        full_value = amount * SCALE_FACTORS[from_scale]
        converted = {}
        if rates is not None and _has_rate(rates, currency):
            for code in CURRENCY_CODES:
                if _has_rate(rates, code):
                    converted[code] = self.convert(full_value, currency, code, rates).result
        return ScaleConversionResult(
            amount=amount,
            from_scale=from_scale.value,
            to_scale=to_scale.value,
            result=full_value / SCALE_FACTORS[to_scale],
            full_value=full_value,
            currency=currency,
            converted=converted,
        )


def _has_rate(rates: ExchangeRates, code: str) -> bool:
    return code == rates.base or code in rates.rates
