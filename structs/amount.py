from construct import ConstructError, Int64ub, Struct, Terminated

from structs.errors import AmountError

# coin_record.amount: a uint64 stored as 8 big-endian bytes
CoinAmount = Struct(
    'mojos' / Int64ub,
    Terminated,
)

MAX_SQL_INTEGER = (1 << 63) - 1


def parse_amount(blob: bytes) -> int:
    """
    Parses an 8-byte big-endian unsigned amount.

    Args:
        blob (bytes): Exactly eight bytes.

    Returns:
        int: The amount in mojos, never negative.
    """
    try:
        mojos = CoinAmount.parse(blob).mojos
    except ConstructError as e:
        raise AmountError(f"Amount must be exactly 8 bytes, got {len(blob)}.") from e
    if mojos > MAX_SQL_INTEGER:
        raise AmountError(f"Amount {mojos} does not fit in a signed 64-bit integer.")
    return mojos
