"""Flask HTTP API Server.

HTTP API for the calculator catalog.
Provides endpoints for listing calculators, running them and reading
exchange rates.
"""

import asyncio
import logging
import os
import sys
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any, Callable

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import CalculatorApplicationService, UnknownCalculatorError
from infrastructure.adapters import ExchangeRateApiClient, FallbackRatesConfig

# Configure logging
log_level = os.getenv("LOG_LEVEL", "info").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
_LOGGER = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)

# Initialize services
fallback_rates = FallbackRatesConfig(os.getenv("FALLBACK_RATES_PATH"))
exchange_rate_client = ExchangeRateApiClient(fallback=fallback_rates)
calculator_service = CalculatorApplicationService(exchange_rate_client)


def async_route(f: Callable) -> Callable:
    """Decorator to run async functions in Flask routes.

    Uses asyncio.run() for proper event loop lifecycle management.
    """
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))
    return wrapper


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    })


@app.route("/api/v1/status", methods=["GET"])
@async_route
async def get_status() -> Response:
    """Get calculator service status."""
    try:
        status = await calculator_service.get_status()
        return jsonify(status)
    except Exception as e:
        _LOGGER.exception("Error getting status")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/calculators", methods=["GET"])
@async_route
async def list_calculators() -> Response:
    """List calculators, optionally for one category or a search.

    Query parameters:
        category: finance, health-fitness, food-cooking, conversion,
            utility or home-garden
        q: Free text search over names, descriptions and keywords;
            takes precedence over category
    """
    try:
        query = request.args.get("q")
        if query is not None:
            calculators = await calculator_service.search_calculators(query)
            return jsonify({"query": query, "calculators": calculators, "count": len(calculators)})
        calculators = await calculator_service.list_calculators(request.args.get("category"))
        return jsonify({"calculators": calculators, "count": len(calculators)})
    except ValueError as e:
        _LOGGER.warning("Invalid catalog request: %s", e)
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        _LOGGER.exception("Error listing calculators")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/calculators/<calculator_id>", methods=["GET"])
@async_route
async def get_calculator(calculator_id: str) -> Response:
    """Get the definition of one calculator."""
    try:
        definition = await calculator_service.get_calculator(calculator_id)
        return jsonify(definition)
    except UnknownCalculatorError:
        return jsonify({"error": f"Calculator not found: {calculator_id}"}), 404
    except Exception as e:
        _LOGGER.exception("Error getting calculator %s", calculator_id)
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/calculators/<calculator_id>/calculate", methods=["POST"])
@async_route
async def calculate(calculator_id: str) -> Response:
    """Run a calculator.

    Request body:
    {
        "<input key>": number | str | bool | list | object,
        ...
    }

    Missing inputs take their defaults. Inputs may also be nested under
    an "inputs" key.
    """
    try:
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        raw_inputs = data.get("inputs", data)
        if not isinstance(raw_inputs, dict):
            return jsonify({"error": "inputs must be a JSON object"}), 400

        result = await calculator_service.calculate(calculator_id, raw_inputs)
        return jsonify(result)

    except UnknownCalculatorError:
        return jsonify({"error": f"Calculator not found: {calculator_id}"}), 404
    except ValueError as e:
        _LOGGER.warning("Invalid calculation request for %s: %s", calculator_id, e)
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        _LOGGER.exception("Error calculating %s", calculator_id)
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/exchange-rates", methods=["GET"])
@async_route
async def get_exchange_rates() -> Response:
    """Get exchange rates.

    Query parameters:
        base: Base currency code (default USD)
    """
    try:
        rates = await calculator_service.get_exchange_rates(request.args.get("base", "USD"))
        return jsonify(rates)
    except ValueError as e:
        _LOGGER.warning("Invalid exchange rate request: %s", e)
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        _LOGGER.exception("Error getting exchange rates")
        return jsonify({"error": str(e)}), 500


def main() -> None:
    """Main entry point for the server."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "5000"))

    _LOGGER.info("Starting Calculator Hub API server on %s:%d", host, port)

    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
