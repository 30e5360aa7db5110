"""Splurge Base58 - Base-58 encoding for binary identifiers.

This package renders arbitrary bytes (hashes, keys, addresses) as compact
Base58 text using the Bitcoin alphabet, preserving leading zero bytes.
"""

from splurge_base58.base58 import Base58, Base58ValidationError
from splurge_base58.exceptions import (
    Base58Error,
    ValidationError,
)

try:
    from importlib.metadata import version
    __version__ = version("splurge-base58")
except ImportError:
    # Fallback for environments without importlib.metadata
    __version__ = "unknown"

__all__ = [
    "Base58",
    "Base58Error",
    "Base58ValidationError",
    "ValidationError",
]
