"""Custom exceptions for the Splurge Base58 library."""


class Base58Error(Exception):
    """Base exception for all Splurge Base58 errors."""


class ValidationError(Base58Error):
    """Raised when data validation fails."""
