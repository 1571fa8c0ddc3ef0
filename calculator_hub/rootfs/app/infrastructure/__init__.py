"""Infrastructure layer for Calculator Hub.

This package contains implementations of domain interfaces
that interact with external systems (exchange rate API, files, HTTP API).
"""
