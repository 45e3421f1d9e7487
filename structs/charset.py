from typing import Iterable, List

from structs.errors import InvalidCharacterError, MixedCaseError

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
CHARSET_REV = {char: value for value, char in enumerate(CHARSET)}


def encode_char(value: int) -> str:
    if not 0 <= value < len(CHARSET):
        raise ValueError(f"Group value {value} is outside 0..31.")
    return CHARSET[value]


def decode_char(char: str) -> int:
    """Maps one data character back to its 5-bit value. 'b', 'i', 'o' and '1' are never data."""
    if not char.isascii():
        raise InvalidCharacterError(f"Invalid data character {char!r}.")
    try:
        return CHARSET_REV[char.lower()]
    except KeyError:
        raise InvalidCharacterError(f"Invalid data character {char!r}.") from None


def check_case(text: str) -> None:
    if text.lower() != text and text.upper() != text:
        raise MixedCaseError(f"Mixed upper and lower case in {text!r}.")


def encode_chars(groups: Iterable[int]) -> str:
    return ''.join(encode_char(value) for value in groups)


def decode_chars(text: str) -> List[int]:
    return [decode_char(char) for char in text]
