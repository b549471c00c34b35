import pytest

from probenorm.domain.policies.dynamic_range import classify_dynamic_range


@pytest.mark.parametrize("codec_id", ["dvhe", "dvh1", "DVHE", "Dvh1"])
def test_dolby_vision_always_hdr(codec_id):
    assert classify_dynamic_range(codec_id, 8, None, None) == "HDR"


@pytest.mark.parametrize("transfer", ["smpte2084", "PQ", "HLG", "SMPTE2084", "hlg"])
def test_ten_bit_bt2020_with_hdr_transfer(transfer):
    assert classify_dynamic_range("hev1", 10, "bt2020", transfer) == "HDR"


def test_twelve_bit_counts():
    assert classify_dynamic_range(None, 12, "BT2020", "smpte2084") == "HDR"


def test_eight_bit_is_not_hdr():
    assert classify_dynamic_range("hev1", 8, "bt2020", "smpte2084") == ""


@pytest.mark.parametrize(
    "primaries,transfer",
    [
        ("bt709", "smpte2084"),
        ("bt2020", "bt709"),
        ("bt2020", ""),
        ("", "smpte2084"),
        (None, "smpte2084"),
        ("bt2020", None),
        ("  ", "PQ"),
    ],
)
def test_other_combinations_are_not_hdr(primaries, transfer):
    assert classify_dynamic_range("hev1", 10, primaries, transfer) == ""


def test_missing_everything():
    assert classify_dynamic_range(None, None, None, None) == ""
