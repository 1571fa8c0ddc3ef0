"""Tests for the calculator application service.

The exchange rate provider is mocked so no network access is needed.
"""

import json
from datetime import date
from unittest.mock import Mock

import pytest
from application.services import (
    CalculatorApplicationService,
    UnknownCalculatorError,
    build_default_registry,
)
from domain.interfaces import IExchangeRateProvider
from domain.value_objects import FALLBACK_MESSAGE, ExchangeRates, InputKind

CATALOG = build_default_registry()
ALL_CALCULATORS = [definition.calculator_id for definition in CATALOG.definitions()]
UNDATED_CALCULATORS = [
    definition.calculator_id
    for definition in CATALOG.definitions()
    if all(field.kind != InputKind.DATE for field in definition.inputs)
]


def _provider(rates_for=None, available: bool = True) -> Mock:
    """Exchange rate provider returning fixed snapshots."""
    provider = Mock(spec=IExchangeRateProvider)
    provider.fetch_rates.side_effect = rates_for or (
        lambda base="USD": ExchangeRates(base="USD", rates={"EUR": 0.9, "GBP": 0.8}).rebased(base)
    )
    provider.is_available.return_value = available
    provider.cache_info.return_value = {"lifetime_seconds": 3600.0, "entries": {}}
    return provider


async def _outcome(service: CalculatorApplicationService, calculator_id: str, inputs: dict) -> object:
    """Response of a calculation, or the error it raised."""
    try:
        return await service.calculate(calculator_id, inputs)
    except ValueError as err:
        return (type(err), str(err))


@pytest.fixture
def service() -> CalculatorApplicationService:
    return CalculatorApplicationService(_provider())


class TestCalculate:
    """Tests for running calculators."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("calculator_id", ALL_CALCULATORS)
    async def test_every_calculator_computes_with_defaults(
        self, service: CalculatorApplicationService, calculator_id: str
    ) -> None:
        """An empty payload runs on default inputs and serializes to JSON."""
        response = await service.calculate(calculator_id, {})

        assert response["calculator_id"] == calculator_id
        assert set(response["inputs"]) == {field.key for field in CATALOG.get(calculator_id).definition.inputs}
        json.dumps(response)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("calculator_id", UNDATED_CALCULATORS)
    async def test_malformed_numbers_equal_zero(
        self, service: CalculatorApplicationService, calculator_id: str
    ) -> None:
        """Garbage in every numeric input gives the same answer as zeros."""
        numeric = [
            field.key
            for field in CATALOG.get(calculator_id).definition.inputs
            if field.kind == InputKind.NUMBER
        ]

        garbage = await _outcome(service, calculator_id, {key: "not a number" for key in numeric})
        zeros = await _outcome(service, calculator_id, {key: 0 for key in numeric})

        assert garbage == zeros

    @pytest.mark.asyncio
    async def test_mortgage_defaults(self, service: CalculatorApplicationService) -> None:
        response = await service.calculate("mortgage", {})

        result = response["result"]
        assert result["loan_amount"] == 240000
        assert round(result["monthly_payment"], 2) == 1216.04
        assert len(result["schedule"]) == 360

    @pytest.mark.asyncio
    async def test_string_inputs_coerced(self, service: CalculatorApplicationService) -> None:
        response = await service.calculate(
            "amortization",
            {"loan_amount": "12000", "annual_rate": "0", "years": "1", "frequency": "MONTHLY", "start_date": "2024-01-15"},
        )

        result = response["result"]
        assert result["periodic_payment"] == pytest.approx(1000)
        assert result["schedule"][0]["payment_date"] == "2024-02-15"
        assert response["inputs"]["frequency"] == "monthly"

    @pytest.mark.asyncio
    async def test_amortization_starts_today_without_start_date(
        self, service: CalculatorApplicationService
    ) -> None:
        response = await service.calculate("amortization", {"loan_amount": 12000, "years": 1})

        schedule = response["result"]["schedule"]
        assert response["inputs"]["start_date"] is None
        assert date.fromisoformat(schedule[0]["payment_date"]) > date.today()
        assert schedule[-1]["payment_date"] is not None

    @pytest.mark.asyncio
    async def test_unknown_calculator(self, service: CalculatorApplicationService) -> None:
        with pytest.raises(UnknownCalculatorError):
            await service.calculate("warp-drive", {})

    @pytest.mark.asyncio
    async def test_overflow_reported_as_value_error(self, service: CalculatorApplicationService) -> None:
        with pytest.raises(ValueError, match="float range"):
            await service.calculate("apy", {"annual_rate": 10000, "years": 1000, "principal": 1})

    @pytest.mark.asyncio
    async def test_infinite_result_reported_as_value_error(self, service: CalculatorApplicationService) -> None:
        """Results that grow past float range by multiplication are rejected too."""
        with pytest.raises(ValueError, match="float range"):
            await service.calculate("sip", {"annual_return": 1000000})


class TestCurrencyCalculators:
    """Tests for calculators that need exchange rates."""

    @pytest.mark.asyncio
    async def test_live_rates(self, service: CalculatorApplicationService) -> None:
        response = await service.calculate("currency-converter", {"amount": 1000})

        result = response["result"]
        assert result["result"] == pytest.approx(900)
        assert result["is_fallback"] is False

    @pytest.mark.asyncio
    async def test_fallback_rates_still_compute(self) -> None:
        provider = _provider(rates_for=lambda base="USD": ExchangeRates.fallback(base))
        service = CalculatorApplicationService(provider)

        response = await service.calculate("currency-converter", {"amount": 1000})

        result = response["result"]
        assert result["result"] == pytest.approx(850)
        assert result["is_fallback"] is True
        assert result["error"] == FALLBACK_MESSAGE

    @pytest.mark.asyncio
    async def test_currency_without_rate(self, service: CalculatorApplicationService) -> None:
        with pytest.raises(ValueError, match="currency must have an exchange rate"):
            await service.calculate("currency-converter", {"to_currency": "JPY"})

    @pytest.mark.asyncio
    async def test_scale_conversion_uses_rates_only_when_asked(self, service: CalculatorApplicationService) -> None:
        plain = await service.calculate("million-to-billion", {"amount": 2500})
        converted = await service.calculate("million-to-billion", {"amount": 2500, "convert_currency": True})

        assert plain["result"]["result"] == pytest.approx(2.5)
        assert plain["result"]["converted"] == {}
        assert converted["result"]["converted"]["EUR"] == pytest.approx(2.25e9)

    @pytest.mark.asyncio
    async def test_rates_fetched_for_scale_currency(self) -> None:
        provider = _provider()
        service = CalculatorApplicationService(provider)

        await service.calculate("million-to-billion", {"currency": "EUR", "convert_currency": "true"})

        provider.fetch_rates.assert_awaited_once_with("EUR")

    @pytest.mark.asyncio
    async def test_plain_scale_conversion_skips_rate_provider(self) -> None:
        """Without currency conversion no rates are requested."""
        provider = _provider()
        service = CalculatorApplicationService(provider)

        response = await service.calculate("million-to-billion", {"amount": 2500, "convert_currency": False})

        provider.fetch_rates.assert_not_awaited()
        assert response["result"]["result"] == pytest.approx(2.5)


class TestCatalogQueries:
    """Tests for listing calculators, rates and status."""

    @pytest.mark.asyncio
    async def test_list_by_category(self, service: CalculatorApplicationService) -> None:
        calculators = await service.list_calculators("home-garden")

        assert {item["id"] for item in calculators} == {
            "gravel",
            "mulch",
            "flooring",
            "cubic-yards-to-tons",
            "square-footage",
            "cubic-volume",
            "square-feet-to-cubic-yards",
            "shop-price-converter",
        }

    @pytest.mark.asyncio
    async def test_search_ranks_name_matches_first(self, service: CalculatorApplicationService) -> None:
        results = await service.search_calculators("  Mortgage ")

        assert results[0]["id"] == "mortgage"
        assert all("mortgage" in json.dumps(item).lower() for item in results)

    @pytest.mark.asyncio
    async def test_search_matches_keywords(self, service: CalculatorApplicationService) -> None:
        results = await service.search_calculators("tola")

        assert [item["id"] for item in results] == ["gold-weight-converter"]

    @pytest.mark.asyncio
    async def test_search_ignores_short_queries(self, service: CalculatorApplicationService) -> None:
        assert await service.search_calculators(" a ") == []
        assert await service.search_calculators("") == []

    @pytest.mark.asyncio
    async def test_search_limited(self, service: CalculatorApplicationService) -> None:
        assert len(await service.search_calculators("calculator")) == 30

    @pytest.mark.asyncio
    async def test_list_all(self, service: CalculatorApplicationService) -> None:
        assert len(await service.list_calculators()) == len(ALL_CALCULATORS)

    @pytest.mark.asyncio
    async def test_unknown_category(self, service: CalculatorApplicationService) -> None:
        with pytest.raises(ValueError, match="category must be one of"):
            await service.list_calculators("astrology")

    @pytest.mark.asyncio
    async def test_get_calculator(self, service: CalculatorApplicationService) -> None:
        definition = await service.get_calculator("bmi")

        assert definition["category"] == "health-fitness"
        assert [item["key"] for item in definition["inputs"]][:3] == ["unit_system", "weight", "height"]

    @pytest.mark.asyncio
    async def test_get_exchange_rates_normalizes_base(self, service: CalculatorApplicationService) -> None:
        rates = await service.get_exchange_rates(" eur ")

        assert rates["base"] == "EUR"
        assert rates["rates"]["USD"] == pytest.approx(1 / 0.9)

    @pytest.mark.asyncio
    async def test_get_exchange_rates_unsupported_base(self, service: CalculatorApplicationService) -> None:
        with pytest.raises(ValueError, match="base must be one of"):
            await service.get_exchange_rates("XYZ")

    @pytest.mark.asyncio
    async def test_status(self, service: CalculatorApplicationService) -> None:
        status = await service.get_status()

        assert status["calculators"] == len(ALL_CALCULATORS)
        assert "finance" in status["categories"]
        assert status["exchange_rates"]["available"] is True
        assert status["currencies"][0]["code"] == "USD"
