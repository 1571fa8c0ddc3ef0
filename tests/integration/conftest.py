"""Pytest fixtures for integration tests.

This module provides fixtures for testing the Flask API with a mocked
exchange rate provider, so no request leaves the test process.
"""

from typing import Any, Dict
from unittest.mock import Mock, patch

import pytest

from application.services import CalculatorApplicationService
from domain.interfaces import IExchangeRateProvider
from domain.value_objects import ExchangeRates


@pytest.fixture
def mock_rate_provider() -> Mock:
    """Create a mock exchange rate provider serving the fallback table."""
    provider = Mock(spec=IExchangeRateProvider)
    provider.fetch_rates.side_effect = lambda base="USD": ExchangeRates.fallback(base)
    provider.is_available.return_value = False
    provider.cache_info.return_value = {"lifetime_seconds": 3600.0, "entries": {}}
    return provider


@pytest.fixture
def calculator_service(mock_rate_provider: Mock) -> CalculatorApplicationService:
    """Create a CalculatorApplicationService with mocked dependencies."""
    return CalculatorApplicationService(mock_rate_provider)


@pytest.fixture
def flask_app(calculator_service: CalculatorApplicationService) -> Any:
    """Create a Flask test app with mocked services.

    This fixture patches the global calculator_service in the server module.
    """
    import infrastructure.api.server as server_module

    with patch.object(server_module, 'calculator_service', calculator_service):
        app = server_module.app
        app.config['TESTING'] = True
        yield app


@pytest.fixture
def client(flask_app: Any) -> Any:
    """Create a Flask test client."""
    return flask_app.test_client()


@pytest.fixture
def sample_mortgage_request() -> Dict[str, Any]:
    """Sample mortgage calculation payload."""
    return {
        "home_price": 300000,
        "down_payment": 60000,
        "annual_rate": 4.5,
        "years": 30,
    }
