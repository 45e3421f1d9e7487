import pytest

from structs.convert_bits import bytes_to_groups, convert_bits, groups_to_bytes
from structs.errors import IncompleteGroupError, NonZeroPaddingError


def test_bytes_to_groups_pads_last_group():
    # 0xcafe = 11001 01011 11111 0(0000)
    assert bytes_to_groups(b"\xca\xfe") == [25, 11, 31, 0]


def test_bytes_to_groups_empty():
    assert bytes_to_groups(b"") == []


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 6, 20, 32])
def test_group_count(length):
    assert len(bytes_to_groups(bytes(length))) == (8 * length + 4) // 5


def test_groups_to_bytes_round_trip():
    payload = bytes(range(256))
    assert groups_to_bytes(bytes_to_groups(payload)) == payload


def test_groups_to_bytes_accepts_zero_padding():
    assert groups_to_bytes([0, 0]) == b"\x00"
    assert groups_to_bytes([25, 11, 31, 0]) == b"\xca\xfe"


def test_groups_to_bytes_rejects_non_zero_padding():
    with pytest.raises(NonZeroPaddingError):
        groups_to_bytes([0, 1])
    with pytest.raises(NonZeroPaddingError):
        groups_to_bytes([25, 11, 31, 1])


def test_groups_to_bytes_rejects_incomplete_group():
    # a lone group is 5 bits: too many to be padding, too few for a byte
    with pytest.raises(IncompleteGroupError):
        groups_to_bytes([0])
    with pytest.raises(IncompleteGroupError):
        groups_to_bytes([0, 0, 0, 0, 0, 0, 0, 0, 0])


def test_convert_bits_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        convert_bits([32], 5, 8)
    with pytest.raises(ValueError):
        convert_bits([-1], 8, 5)
