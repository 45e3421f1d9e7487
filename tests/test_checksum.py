from structs.charset import decode_chars
from structs.checksum import (
    Variant,
    create_checksum,
    detect_variant,
    hrp_expand,
    polymod,
    verify_checksum,
)


def test_variant_constants():
    assert Variant.BECH32 == 1
    assert Variant.BECH32M == 0x2bc830a3


def test_hrp_expand():
    # 'x' = 0x78, 'c' = 0x63, 'h' = 0x68
    assert hrp_expand("xch") == [3, 3, 3, 0, 24, 3, 8]


def test_polymod_of_nothing_is_one():
    assert polymod([]) == 1


def test_empty_payload_checksum():
    assert create_checksum("xch", [], Variant.BECH32M) == decode_chars("jlgazv")


def test_checksum_verifies_with_its_own_variant_only():
    data = [25, 11, 31, 0]
    for variant in Variant:
        full = data + create_checksum("xch", data, variant)
        assert verify_checksum("xch", full, variant)
        assert detect_variant("xch", full) is variant
        other = Variant.BECH32 if variant is Variant.BECH32M else Variant.BECH32M
        assert not verify_checksum("xch", full, other)


def test_checksum_depends_on_hrp():
    data = [1, 2, 3]
    full = data + create_checksum("xch", data)
    assert not verify_checksum("txch", full)
    assert detect_variant("txch", full) is None
