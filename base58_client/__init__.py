"""Base58 Client - encode and decode Base58 from the command line."""

from .core.base58 import (
    ALPHABET,
    InvalidCharacterError,
    decode,
    decode_string,
    encode,
    encode_string,
    is_valid_base58,
)

__version__ = '0.1.0'

__all__ = [
    'ALPHABET',
    'InvalidCharacterError',
    'decode',
    'decode_string',
    'encode',
    'encode_string',
    'is_valid_base58',
]
