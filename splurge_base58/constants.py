"""Library-wide constants.

These constants centralize the alphabet and buffer-sizing values used by
the encoder so they are defined in exactly one place.
"""



class Constants:

    # Alphabet (Bitcoin variant: no 0, O, I or l)
    _BASE58_ALPHABET: str = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
    _BASE58_RADIX: int = 58
    _BYTE_RADIX: int = 256

    # Buffer sizing: log(256) / log(58) ~= 1.365, rounded up to 138 / 100
    _SIZE_FACTOR_NUMERATOR: int = 138
    _SIZE_FACTOR_DENOMINATOR: int = 100
    _SIZE_GUARD_DIGITS: int = 1

    @classmethod
    def BASE58_ALPHABET(cls) -> str:
        return cls._BASE58_ALPHABET

    @classmethod
    def BASE58_RADIX(cls) -> int:
        return cls._BASE58_RADIX

    # Radix of the input digits (one byte)
    @classmethod
    def BYTE_RADIX(cls) -> int:
        return cls._BYTE_RADIX

    @classmethod
    def SIZE_FACTOR_NUMERATOR(cls) -> int:
        return cls._SIZE_FACTOR_NUMERATOR

    @classmethod
    def SIZE_FACTOR_DENOMINATOR(cls) -> int:
        return cls._SIZE_FACTOR_DENOMINATOR

    # Extra digit slot added on top of the scaled input length
    @classmethod
    def SIZE_GUARD_DIGITS(cls) -> int:
        return cls._SIZE_GUARD_DIGITS
