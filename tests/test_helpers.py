import json
from unittest.mock import patch

import pytest

from structs.amount import parse_amount
from structs.compression import zstd_decompress
from structs.errors import AmountError, BlockDecodeError, ChiaDataError, DecompressError, InvalidHexError
from structs.full_block import full_block_json, parse_full_block
from structs.hex_blob import blob_from_hex

CAFE_FRAME = bytes.fromhex("28b52ffd0458110000cafe23ae5cb0")


def test_parse_amount():
    assert parse_amount(bytes.fromhex("00000502D3B618FD")) == 5509699999997
    assert parse_amount(bytes(8)) == 0
    assert parse_amount(bytes.fromhex("7fffffffffffffff")) == (1 << 63) - 1


def test_parse_amount_is_unsigned():
    # the top bit set must never come back as a negative number
    with pytest.raises(AmountError):
        parse_amount(bytes.fromhex("8000000000000000"))


@pytest.mark.parametrize("blob", [b"", bytes(7), bytes(9)])
def test_parse_amount_wrong_length(blob):
    with pytest.raises(AmountError):
        parse_amount(blob)


def test_blob_from_hex():
    assert blob_from_hex("cafe") == b"\xca\xfe"
    assert blob_from_hex("CAFE") == b"\xca\xfe"
    assert blob_from_hex("") == b""


@pytest.mark.parametrize("text", ["caf", "zz", "ca fe", "0xcafe"])
def test_blob_from_hex_rejects(text):
    with pytest.raises(InvalidHexError):
        blob_from_hex(text)


def test_zstd_decompress():
    assert zstd_decompress(CAFE_FRAME) == b"\xca\xfe"
    assert zstd_decompress(CAFE_FRAME + CAFE_FRAME) == b"\xca\xfe\xca\xfe"
    assert zstd_decompress(b"") == b""


def test_zstd_decompress_rejects_corrupt_frames():
    with pytest.raises(DecompressError):
        zstd_decompress(b"definitely not zstd")
    with pytest.raises(DecompressError):
        zstd_decompress(CAFE_FRAME[:-4])


def test_full_block_rejects_garbage():
    with pytest.raises(BlockDecodeError):
        parse_full_block(b"\x00\x01\x02")
    with pytest.raises(ChiaDataError):
        full_block_json(b"")


@patch("structs.full_block.FullBlock")
def test_full_block_json_renders_parsed_block(mock_full_block):
    block_dict = {"header_hash": "0x" + "00" * 32, "height": 42, "transactions_info": None}
    mock_full_block.from_bytes.return_value.to_json_dict.return_value = block_dict

    assert json.loads(full_block_json(b"\xca\xfe")) == block_dict
    mock_full_block.from_bytes.assert_called_once_with(b"\xca\xfe")
