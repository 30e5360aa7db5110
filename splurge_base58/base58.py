"""Base-58 encoding utilities."""

import logging
from typing import Any

from splurge_base58.constants import Constants
from splurge_base58.exceptions import ValidationError

logger = logging.getLogger(__name__)


class Base58ValidationError(ValidationError):
    """Raised when base-58 validation fails."""


class Base58:
    """
    A class for base-58 encoding operations.

    Base-58 is a binary-to-text encoding scheme that uses 58 characters
    to represent binary data. It's commonly used for hashes, keys and
    addresses that need to be copied or read aloud without confusing
    similar-looking characters.

    This implementation uses the Bitcoin alphabet:
    "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

    The input is treated as one big-endian base-256 number and converted
    into a fixed-size buffer of base-58 digits, one byte at a time, so no
    arbitrary-precision integer is ever built. Each leading zero byte is
    rendered as one leading "1".
    """

    _ALPHABET = Constants.BASE58_ALPHABET()
    _BASE = Constants.BASE58_RADIX()

    @classmethod
    def max_encoded_length(cls, length: int) -> int:
        """
        Return the number of digit slots needed to encode ``length`` bytes.

        The value is ``ceil(length * log(256) / log(58))`` approximated as
        ``length * 138 // 100`` plus one guard digit, which is never smaller
        than the real encoded length.

        Args:
            length: Number of input bytes

        Returns:
            Upper bound on the encoded length

        Raises:
            Base58ValidationError: If length is negative
        """
        if length < 0:
            raise Base58ValidationError("Length cannot be negative")

        return (
            length * Constants.SIZE_FACTOR_NUMERATOR() // Constants.SIZE_FACTOR_DENOMINATOR()
            + Constants.SIZE_GUARD_DIGITS()
        )

    @classmethod
    def encode(cls, data: Any) -> str:
        """
        Encode binary data to base-58 string.

        Args:
            data: Binary data to encode (bytes-like or iterable of byte values)

        Returns:
            Base-58 encoded string, empty for empty input

        Raises:
            TypeError: If data is a str or an int
            Base58ValidationError: If data is None or holds non-byte values
        """
        data = cls._to_bytes(data)

        size = cls.max_encoded_length(len(data))
        buffer = bytearray(size)
        byte_radix = Constants.BYTE_RADIX()

        # Multiply the accumulated value by 256 and add the next byte,
        # working directly on the base-58 digits from the tail backward.
        length = 0
        for byte in data:
            carry = byte
            visited = 0
            for position in range(size - 1, -1, -1):
                if carry == 0 and visited >= length:
                    break
                visited += 1

                carry += byte_radix * buffer[position]
                buffer[position] = carry % cls._BASE
                carry //= cls._BASE

            length = visited

        leading_zeros = cls._count_leading_zeros(data)
        skip = cls._count_leading_zeros(buffer) - leading_zeros

        result = "".join(cls._ALPHABET[digit] for digit in buffer[skip:])

        logger.debug(f"Encoded {len(data)} bytes to {len(result)} base-58 characters", extra={
            "input_length": len(data),
            "output_length": len(result),
            "leading_zeros": leading_zeros,
        })

        return result

    @classmethod
    def is_valid(cls, base58_data: str) -> bool:
        """
        Check if a string is valid base-58.

        Args:
            base58_data: String to validate

        Returns:
            True if valid base-58, False otherwise
        """
        if not isinstance(base58_data, str):
            return False

        if not base58_data:
            return False

        return all(char in cls._ALPHABET for char in base58_data)

    @classmethod
    def is_valid_base58(cls, base58_data: str) -> bool:
        """
        Check if a string is valid base-58 (alias for is_valid).

        Args:
            base58_data: String to validate

        Returns:
            True if valid base-58, False otherwise
        """
        return cls.is_valid(base58_data)

    @classmethod
    def _to_bytes(cls, data: Any) -> bytes:
        """Normalize supported inputs to bytes."""
        if data is None:
            logger.debug("Rejected base-58 input: None")
            raise Base58ValidationError("Input cannot be None")

        # A str needs an explicit encoding and bytes(n) would read an int as a length
        if isinstance(data, (str, int)):
            logger.debug(f"Rejected base-58 input of type {type(data).__name__}")
            raise TypeError(
                f"Input must be bytes-like or an iterable of byte values, not {type(data).__name__}"
            )

        if isinstance(data, bytes):
            return data

        try:
            return bytes(data)
        except (TypeError, ValueError) as e:
            logger.debug(f"Rejected base-58 input: {e}")
            raise Base58ValidationError(f"Input must contain byte values in range 0-255: {e}") from e

    @staticmethod
    def _count_leading_zeros(values: bytes | bytearray) -> int:
        count = 0
        for value in values:
            if value != 0:
                break
            count += 1
        return count
