"""Unit tests for the exchange rate API client adapter."""

from datetime import datetime, timedelta
from unittest.mock import Mock, patch

import pytest
import requests
from domain.value_objects import FALLBACK_MESSAGE
from infrastructure.adapters.exchange_rate_api_client import ExchangeRateApiClient

PAYLOAD = {"base": "USD", "date": "2024-06-01", "rates": {"USD": 1, "EUR": 0.92, "GBP": 0.79, "JPY": 157.1}}


def _response(payload=None, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = PAYLOAD if payload is None else payload
    return response


class TestExchangeRateApiClient:
    """Test the exchange rate API client."""

    def test_initialization_with_env(self):
        """Test configuration from environment variables."""
        with patch.dict('os.environ', {
            'EXCHANGE_RATE_API_URL': 'http://rates.local/latest/',
            'EXCHANGE_RATE_TIMEOUT': '3',
            'EXCHANGE_RATE_CACHE_SECONDS': '60',
        }):
            client = ExchangeRateApiClient()

        assert client._api_url == 'http://rates.local/latest'
        assert client._timeout == 3
        assert client.cache_info()['lifetime_seconds'] == 60

    @pytest.mark.asyncio
    async def test_fetch_rates_success(self):
        """Test that live rates are parsed and the base is appended to the URL."""
        client = ExchangeRateApiClient(api_url='http://rates.local/latest', timeout=5)

        with patch('infrastructure.adapters.exchange_rate_api_client.requests.get') as mock_get:
            mock_get.return_value = _response()

            rates = await client.fetch_rates('usd')

        mock_get.assert_called_once_with('http://rates.local/latest/USD', timeout=5)
        assert rates.base == 'USD'
        assert rates.is_fallback is False
        assert rates.error is None
        assert rates.rate('EUR') == 0.92
        assert 'USD' not in rates.rates

    @pytest.mark.asyncio
    async def test_fetch_rates_uses_cache(self):
        """Test that a fresh snapshot is served without a second request."""
        client = ExchangeRateApiClient(api_url='http://rates.local/latest')

        with patch('infrastructure.adapters.exchange_rate_api_client.requests.get') as mock_get:
            mock_get.return_value = _response()

            first = await client.fetch_rates('USD')
            second = await client.fetch_rates('USD')

        assert mock_get.call_count == 1
        assert second is first
        assert list(client.cache_info()['entries']) == ['USD']

    @pytest.mark.asyncio
    async def test_expired_cache_refetched(self):
        """Test that stale snapshots are fetched again."""
        client = ExchangeRateApiClient(api_url='http://rates.local/latest', cache_seconds=60)

        with patch('infrastructure.adapters.exchange_rate_api_client.requests.get') as mock_get:
            mock_get.return_value = _response()
            await client.fetch_rates('USD')

            stale = client._cache['USD']
            client._cache['USD'] = type(stale)(
                base=stale.base, rates=stale.rates, fetched_at=datetime.now() - timedelta(seconds=120)
            )
            await client.fetch_rates('USD')

        assert mock_get.call_count == 2

    @pytest.mark.asyncio
    async def test_request_error_returns_fallback(self):
        """Test that network failures give the fallback table, uncached."""
        client = ExchangeRateApiClient(api_url='http://rates.local/latest')

        with patch('infrastructure.adapters.exchange_rate_api_client.requests.get') as mock_get:
            mock_get.side_effect = requests.ConnectionError("unreachable")

            rates = await client.fetch_rates('USD')
            await client.fetch_rates('USD')

        assert rates.is_fallback is True
        assert rates.error == FALLBACK_MESSAGE
        assert rates.rate('EUR') == 0.85
        assert mock_get.call_count == 2
        assert client.cache_info()['entries'] == {}

    @pytest.mark.asyncio
    async def test_http_error_returns_fallback(self):
        """Test that error statuses give the fallback table."""
        client = ExchangeRateApiClient(api_url='http://rates.local/latest')

        with patch('infrastructure.adapters.exchange_rate_api_client.requests.get') as mock_get:
            response = _response(status_code=503)
            response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
            mock_get.return_value = response

            rates = await client.fetch_rates('GBP')

        assert rates.is_fallback is True
        assert rates.base == 'GBP'

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"base": "USD"},
        {"rates": {"EUR": "not a rate"}},
        {"rates": {"EUR": 0}},
    ])
    async def test_invalid_payload_returns_fallback(self, payload):
        """Test that unusable payloads give the fallback table."""
        client = ExchangeRateApiClient(api_url='http://rates.local/latest')

        with patch('infrastructure.adapters.exchange_rate_api_client.requests.get') as mock_get:
            mock_get.return_value = _response(payload)

            rates = await client.fetch_rates('USD')

        assert rates.is_fallback is True

    @pytest.mark.asyncio
    async def test_is_available(self):
        """Test availability check against the USD endpoint."""
        client = ExchangeRateApiClient(api_url='http://rates.local/latest')

        with patch('infrastructure.adapters.exchange_rate_api_client.requests.get') as mock_get:
            mock_get.return_value = _response()
            assert await client.is_available() is True
            assert mock_get.call_args[0][0] == 'http://rates.local/latest/USD'

            mock_get.return_value = _response(status_code=500)
            assert await client.is_available() is False

            mock_get.side_effect = requests.Timeout("slow")
            assert await client.is_available() is False

    @pytest.mark.asyncio
    async def test_clear_cache(self):
        """Test that clearing the cache forces a new request."""
        client = ExchangeRateApiClient(api_url='http://rates.local/latest')

        with patch('infrastructure.adapters.exchange_rate_api_client.requests.get') as mock_get:
            mock_get.return_value = _response()
            await client.fetch_rates('USD')
            client.clear_cache()
            await client.fetch_rates('USD')

        assert mock_get.call_count == 2
