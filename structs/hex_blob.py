import binascii

from structs.errors import InvalidHexError


def blob_from_hex(text: str) -> bytes:
    """Parses a hex string, failing on odd length or non-hex digits."""
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise InvalidHexError(f"Invalid hex string {text!r}: {e}") from e
