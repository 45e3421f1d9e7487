import functools
import hashlib
import logging
import sqlite3
from typing import Callable, Dict, Tuple

from config.settings import BECH32_MAX_LENGTH
from structs.amount import parse_amount
from structs.bech32m import decode, encode
from structs.checksum import Variant
from structs.compression import zstd_decompress
from structs.full_block import full_block_json
from structs.hex_blob import blob_from_hex

logger = logging.getLogger(__name__)

# name -> (number of arguments, implementation)
FUNCTIONS: Dict[str, Tuple[int, Callable]] = {}


def sql_function(name: str, nargs: int):
    """
    Registers a scalar SQL function. A NULL argument short-circuits to NULL, and any failure
    is logged before it is handed back to sqlite.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args):
            if any(arg is None for arg in args):
                return None
            try:
                return func(*args)
            except Exception as e:
                logger.error(f"{name} failed: {e.__class__.__name__}: {e}")
                raise
        FUNCTIONS[name] = (nargs, wrapper)
        return wrapper
    return decorator


def _text(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be TEXT, got {type(value).__name__}.")
    return value


def _blob(value, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be BLOB, got {type(value).__name__}.")
    return bytes(value)


@sql_function("bech32m_encode", 2)
def bech32m_encode_fn(hrp, data):
    return encode(_text(hrp, "hrp"), _blob(data, "data"), Variant.BECH32M, BECH32_MAX_LENGTH)


@sql_function("bech32m_decode", 1)
def bech32m_decode_fn(address):
    _hrp, payload = decode(_text(address, "address"), max_length=BECH32_MAX_LENGTH)
    return payload


@sql_function("blob_from_hex", 1)
def blob_from_hex_fn(text):
    return blob_from_hex(_text(text, "hex"))


@sql_function("chia_amount_int", 1)
def chia_amount_int_fn(amount):
    return parse_amount(_blob(amount, "amount"))


@sql_function("chia_fullblock_json", 1)
def chia_fullblock_json_fn(block):
    return full_block_json(_blob(block, "block"))


@sql_function("sha256sum", 1)
def sha256sum_fn(data):
    return hashlib.sha256(_blob(data, "data")).digest()


@sql_function("zstd_decompress_blob", 1)
def zstd_decompress_blob_fn(data):
    return zstd_decompress(_blob(data, "data"))


def create_functions(conn: sqlite3.Connection) -> None:
    for name, (nargs, func) in FUNCTIONS.items():
        conn.create_function(name, nargs, func, deterministic=True)
    logger.debug(f"Registered {len(FUNCTIONS)} SQL functions.")
