"""Application services for calculator operations.

These services orchestrate the calculator catalog, domain services and
infrastructure adapters to fulfill use cases.
"""

from .calculator_application_service import (
    CalculatorApplicationService,
    build_default_registry,
    to_serializable,
)
from .calculator_registry import CalculatorEntry, CalculatorRegistry, UnknownCalculatorError

__all__ = [
    "CalculatorApplicationService",
    "CalculatorEntry",
    "CalculatorRegistry",
    "build_default_registry",
    "to_serializable",
    "UnknownCalculatorError",
]
