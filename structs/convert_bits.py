from typing import Iterable, List

from structs.errors import IncompleteGroupError, NonZeroPaddingError


def convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool = True) -> List[int]:
    """
    Regroups a stream of `from_bits`-wide values into `to_bits`-wide values, most significant bit first.

    Args:
        data (Iterable[int]): Values, each in the range 0 .. 2**from_bits - 1.
        from_bits (int): Width of the input values.
        to_bits (int): Width of the output values.
        pad (bool): Right-pad an incomplete final output value with zero bits. When False the
                    leftover bits must be legal padding: fewer than `from_bits` of them, all zero.

    Returns:
        List[int]: The regrouped values.
    """
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value < 0 or (value >> from_bits):
            raise ValueError(f"Value {value} does not fit in {from_bits} bits.")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits:
        raise IncompleteGroupError(f"{bits} trailing bits do not form a whole {to_bits}-bit value.")
    elif (acc << (to_bits - bits)) & maxv:
        raise NonZeroPaddingError("Padding bits of the final group are not zero.")
    return ret


def bytes_to_groups(data: Iterable[int]) -> List[int]:
    """Splits bytes into 5-bit groups, zero-padding the last group."""
    return convert_bits(data, 8, 5, pad=True)


def groups_to_bytes(groups: Iterable[int]) -> bytes:
    """Joins 5-bit groups back into bytes, rejecting anything but zero padding."""
    return bytes(convert_bits(groups, 5, 8, pad=False))
