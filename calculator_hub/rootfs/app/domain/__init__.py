"""Domain layer for Calculator Hub.

This package contains the calculation logic for every calculator in the
catalog, following Domain-Driven Design (DDD) principles.

The domain layer is pure Python with no dependencies on Flask, HTTP
clients, or any infrastructure concerns.
"""
