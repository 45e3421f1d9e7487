from typing import Iterable, List, Optional, Sequence, Tuple

from structs.charset import check_case, decode_chars, encode_chars
from structs.checksum import CHECKSUM_LENGTH, Variant, create_checksum, detect_variant, verify_checksum
from structs.convert_bits import bytes_to_groups, groups_to_bytes
from structs.errors import (
    ChecksumMismatchError,
    DataPartTooShortError,
    HrpInvalidError,
    InvalidCharacterError,
    SeparatorNotFoundError,
    TotalLengthExceededError,
)

SEPARATOR = '1'
MAX_LENGTH = 90
MAX_HRP_LENGTH = 83


def _check_printable(text: str) -> None:
    for char in text:
        if ord(char) < 33 or ord(char) > 126:
            raise InvalidCharacterError(f"Character {char!r} is outside the printable ASCII range.")


def _check_hrp(hrp: str) -> str:
    if not hrp or len(hrp) > MAX_HRP_LENGTH:
        raise HrpInvalidError(f"Human-readable part must be 1 to {MAX_HRP_LENGTH} characters long.")
    if any(ord(x) < 33 or ord(x) > 126 for x in hrp):
        raise HrpInvalidError(f"Human-readable part {hrp!r} contains non-printable characters.")
    return hrp.lower()


def _check_length(length: int, max_length: int) -> None:
    if length > max_length:
        raise TotalLengthExceededError(f"Encoded string would be {length} characters, limit is {max_length}.")


def bech32_encode(hrp: str, data: Sequence[int], variant: Variant = Variant.BECH32M,
                  max_length: int = MAX_LENGTH) -> str:
    """Encodes data that is already in 5-bit groups."""
    hrp = _check_hrp(hrp)
    _check_length(len(hrp) + 1 + len(data) + CHECKSUM_LENGTH, max_length)
    checksum = create_checksum(hrp, data, variant)
    return hrp + SEPARATOR + encode_chars(list(data) + checksum)


def bech32_decode(bechstr: str, variant: Optional[Variant] = None,
                  max_length: int = MAX_LENGTH) -> Tuple[str, List[int], Variant]:
    """
    Decodes a bech32 string down to its 5-bit groups.

    Args:
        bechstr (str): The encoded string, all lowercase or all uppercase.
        variant (Optional[Variant]): Accept only this checksum variant. Any known variant when None.
        max_length (int): Longest string accepted.

    Returns:
        Tuple[str, List[int], Variant]: The lowercase human-readable part, the data groups with the
                                        checksum stripped, and the variant the checksum matched.
    """
    _check_printable(bechstr)
    check_case(bechstr)
    _check_length(len(bechstr), max_length)
    bechstr = bechstr.lower()
    pos = bechstr.rfind(SEPARATOR)
    if pos < 0:
        raise SeparatorNotFoundError(f"No separator '{SEPARATOR}' in {bechstr!r}.")
    hrp = bechstr[:pos]
    if not hrp or len(hrp) > MAX_HRP_LENGTH:
        raise HrpInvalidError(f"Human-readable part must be 1 to {MAX_HRP_LENGTH} characters long.")
    if len(bechstr) - pos - 1 < CHECKSUM_LENGTH:
        raise DataPartTooShortError(f"Data part of {bechstr!r} is shorter than the checksum.")
    data = decode_chars(bechstr[pos + 1:])
    if variant is None:
        variant = detect_variant(hrp, data)
        if variant is None:
            raise ChecksumMismatchError(f"Checksum of {bechstr!r} does not match any known variant.")
    elif not verify_checksum(hrp, data, variant):
        raise ChecksumMismatchError(f"Checksum of {bechstr!r} does not match {variant.name}.")
    return hrp, data[:-CHECKSUM_LENGTH], variant


def encode(hrp: str, payload: Iterable[int], variant: Variant = Variant.BECH32M,
           max_length: int = MAX_LENGTH) -> str:
    """Encode bytes to bech32m (or bech32) format."""
    if isinstance(payload, (int, str)):
        raise TypeError(f"Payload must be bytes or an iterable of ints, got {type(payload).__name__}.")
    payload = bytes(payload)
    hrp = _check_hrp(hrp)
    _check_length(len(hrp) + 1 + (len(payload) * 8 + 4) // 5 + CHECKSUM_LENGTH, max_length)
    return bech32_encode(hrp, bytes_to_groups(payload), variant, max_length)


def decode(bechstr: str, variant: Optional[Variant] = None,
           max_length: int = MAX_LENGTH) -> Tuple[str, bytes]:
    """Decode a bech32m (or bech32) string into its human-readable part and payload bytes."""
    hrp, data, _ = bech32_decode(bechstr, variant, max_length)
    return hrp, groups_to_bytes(data)
