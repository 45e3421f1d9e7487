import logging
from typing import Optional

from chia_lib.result import Result
from structs.bech32m import decode
from structs.checksum import Variant
from structs.errors import Bech32Error

logger = logging.getLogger(__name__)


def check_address(address: str, hrp: Optional[str] = None, variant: Optional[Variant] = None) -> Result:
    """
    Validates an encoded address and returns its decoded parts.

    :param address: The bech32 or bech32m string to check.
    :param hrp: If given, the address must carry this human-readable part.
    :param variant: If given, the checksum must be of this variant.
    :return: Result with data (hrp, payload) on success, or the reason for failure in error.
    """
    address = address.strip()
    try:
        decoded_hrp, payload = decode(address, variant)
    except Bech32Error as e:
        logger.debug(f"Rejected address {address!r}: {e}")
        return Result(False, error=f"{e.__class__.__name__}: {e}")
    if hrp is not None and decoded_hrp != hrp.lower():
        return Result(
            success=False,
            error=f"Address prefix '{decoded_hrp}' does not match the expected '{hrp.lower()}'."
        )
    return Result(True, (decoded_hrp, payload))
