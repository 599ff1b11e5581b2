"""Base58 encoding/decoding.

Uses the Bitcoin alphabet: digits and ASCII letters minus the look-alike
glyphs '0', 'O', 'I' and 'l' - 58 characters.

The input bytes are read as one big-endian integer and written out in
base 58. Leading zero bytes carry no weight in that integer, so each one
is emitted as a leading '1' (alphabet[0]) and restored on decode.
"""

from types import MappingProxyType

ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'
ALPHABET_INDEX = MappingProxyType({char: index for index, char in enumerate(ALPHABET)})

_BASE = len(ALPHABET)


class InvalidCharacterError(ValueError):
    """Raised when a string to decode contains a non-Base58 character.

    Attributes:
        char: The offending character
        position: Its 0-based index in the input string
    """

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid Base58 character {char!r} at position {position}")


def encode(data: bytes) -> str:
    """Encode bytes to a Base58 string."""
    data = bytes(data)
    value = int.from_bytes(data, 'big')

    result = []
    while value:
        value, remainder = divmod(value, _BASE)
        result.append(ALPHABET[remainder])

    # One '1' per leading zero byte
    zeros = len(data) - len(data.lstrip(b'\x00'))
    result.extend(ALPHABET[0] * zeros)
    return ''.join(reversed(result))


def decode(encoded: str) -> bytes:
    """Decode a Base58 string back to bytes.

    Raises:
        InvalidCharacterError: On the first character outside the alphabet
    """
    value = 0
    for position, char in enumerate(encoded):
        index = ALPHABET_INDEX.get(char)
        if index is None:
            raise InvalidCharacterError(char, position)
        value = value * _BASE + index

    decoded = value.to_bytes((value.bit_length() + 7) // 8, 'big')
    zeros = len(encoded) - len(encoded.lstrip(ALPHABET[0]))
    return b'\x00' * zeros + decoded


def encode_string(text: str) -> str:
    """Encode a UTF-8 string to Base58."""
    return encode(text.encode('utf-8'))


def decode_string(encoded: str, errors: str = 'strict') -> str:
    """Decode Base58 to a UTF-8 string.

    Args:
        encoded: Base58 string
        errors: Handler for bytes that are not valid UTF-8, as for
            bytes.decode(). 'strict' raises UnicodeDecodeError, 'replace'
            substitutes U+FFFD.
    """
    return decode(encoded).decode('utf-8', errors)


def is_valid_base58(text: str) -> bool:
    """Check that text is non-empty and uses only Base58 characters."""
    return bool(text) and all(char in ALPHABET_INDEX for char in text)


def find_invalid_character(text: str):
    """Return (position, char) of the first non-Base58 character, or None."""
    for position, char in enumerate(text):
        if char not in ALPHABET_INDEX:
            return position, char
    return None
