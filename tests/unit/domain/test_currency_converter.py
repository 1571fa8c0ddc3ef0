"""Tests for currency conversion and exchange rate snapshots."""

import pytest
from domain.services import CurrencyConverter
from domain.value_objects import (
    CURRENCY_CODES,
    FALLBACK_MESSAGE,
    ExchangeRates,
    NumberScale,
)


@pytest.fixture
def converter() -> CurrencyConverter:
    return CurrencyConverter()


@pytest.fixture
def live_rates() -> ExchangeRates:
    return ExchangeRates(base="USD", rates={"EUR": 0.9, "GBP": 0.8, "JPY": 150.0})


class TestExchangeRates:
    """Tests for the ExchangeRates value object."""

    def test_base_rate_is_one(self, live_rates: ExchangeRates) -> None:
        assert live_rates.rate("USD") == 1.0
        assert live_rates.rate("EUR") == 0.9

    def test_missing_rate_raises_key_error(self, live_rates: ExchangeRates) -> None:
        with pytest.raises(KeyError):
            live_rates.rate("CHF")

    def test_non_positive_rate_rejected(self) -> None:
        with pytest.raises(ValueError, match="rate for EUR must be positive"):
            ExchangeRates(base="USD", rates={"EUR": 0})

    def test_empty_base_rejected(self) -> None:
        with pytest.raises(ValueError, match="base must be a currency code"):
            ExchangeRates(base="", rates={})

    def test_rebased(self, live_rates: ExchangeRates) -> None:
        rebased = live_rates.rebased("EUR")

        assert rebased.base == "EUR"
        assert rebased.rate("USD") == pytest.approx(1 / 0.9)
        assert rebased.rate("GBP") == pytest.approx(0.8 / 0.9)

    def test_fallback_table(self) -> None:
        rates = ExchangeRates.fallback()

        assert rates.is_fallback is True
        assert rates.error == FALLBACK_MESSAGE
        assert rates.rate("INR") == 75.0
        assert set(CURRENCY_CODES) <= set(rates.rates)

    def test_fallback_rebased_on_request(self) -> None:
        rates = ExchangeRates.fallback("GBP")

        assert rates.base == "GBP"
        assert rates.rate("USD") == pytest.approx(1 / 0.75)


class TestCurrencyConversion:
    """Tests for converting between currencies."""

    def test_from_base(self, converter: CurrencyConverter, live_rates: ExchangeRates) -> None:
        result = converter.convert(1000, "USD", "EUR", live_rates)

        assert result.result == pytest.approx(900)
        assert result.is_fallback is False
        assert result.error is None

    def test_cross_rate(self, converter: CurrencyConverter, live_rates: ExchangeRates) -> None:
        result = converter.convert(100, "EUR", "GBP", live_rates)

        assert result.rate == pytest.approx(0.8 / 0.9)

    def test_same_currency_is_identity(self, converter: CurrencyConverter, live_rates: ExchangeRates) -> None:
        result = converter.convert(123.45, "CHF", "CHF", live_rates)

        assert result.rate == 1.0
        assert result.result == 123.45

    def test_fallback_flag_carried(self, converter: CurrencyConverter) -> None:
        result = converter.convert(1000, "USD", "EUR", ExchangeRates.fallback())

        assert result.result == pytest.approx(850)
        assert result.is_fallback is True
        assert result.error == FALLBACK_MESSAGE


class TestScaleConversion:
    """Tests for number scale conversion."""

    def test_million_to_billion(self, converter: CurrencyConverter) -> None:
        result = converter.convert_scale(2500, NumberScale.MILLION, NumberScale.BILLION)

        assert result.result == pytest.approx(2.5)
        assert result.full_value == pytest.approx(2.5e9)
        assert result.converted == {}

    def test_converted_into_every_currency_with_rate(self, converter: CurrencyConverter, live_rates: ExchangeRates) -> None:
        result = converter.convert_scale(
            1, NumberScale.MILLION, NumberScale.THOUSAND, "USD", live_rates
        )

        assert result.result == pytest.approx(1000)
        assert set(result.converted) == {"USD", "EUR", "GBP", "JPY"}
        assert result.converted["JPY"] == pytest.approx(150e6)

    def test_currency_without_rate_skips_conversion(self, converter: CurrencyConverter, live_rates: ExchangeRates) -> None:
        result = converter.convert_scale(
            1, NumberScale.BILLION, NumberScale.MILLION, "CHF", live_rates
        )

        assert result.converted == {}
