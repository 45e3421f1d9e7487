from enum import IntEnum
from typing import List, Optional, Sequence

# bech32/bech32m polynomial constants
GENERATOR = (0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3)
CHECKSUM_LENGTH = 6


class Variant(IntEnum):
    """Checksum variants. The value of each member is the target constant of its checksum."""
    BECH32 = 1
    BECH32M = 0x2bc830a3


def polymod(values: Sequence[int]) -> int:
    """Internal polynomial modulus operation for checksum calculation."""
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1ffffff) << 5) ^ value
        for i in range(5):
            if top & (1 << i):
                checksum ^= GENERATOR[i]
    return checksum


def hrp_expand(hrp: str) -> List[int]:
    """Expands the human-readable part for checksum calculation."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def create_checksum(hrp: str, data: Sequence[int], variant: Variant = Variant.BECH32M) -> List[int]:
    """Computes the six checksum groups to append to `data`."""
    values = hrp_expand(hrp) + list(data)
    residue = polymod(values + [0] * CHECKSUM_LENGTH) ^ variant
    return [(residue >> 5 * (CHECKSUM_LENGTH - 1 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def verify_checksum(hrp: str, data: Sequence[int], variant: Variant = Variant.BECH32M) -> bool:
    """Checks `data`, which ends with its six checksum groups, against one variant."""
    return polymod(hrp_expand(hrp) + list(data)) == variant


def detect_variant(hrp: str, data: Sequence[int]) -> Optional[Variant]:
    """Returns the variant whose checksum `data` carries, or None if it carries none."""
    residue = polymod(hrp_expand(hrp) + list(data))
    for variant in Variant:
        if residue == variant:
            return variant
    return None
