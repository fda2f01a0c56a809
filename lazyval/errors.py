"""Lazy value error types."""


class LazyError(Exception):
    """Base error for lazy value failures."""


class InvalidSupplierError(LazyError, TypeError):
    """Raised when a lazy value is constructed without a callable supplier."""
