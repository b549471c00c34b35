# probenorm/domain/policies/dynamic_range.py
from __future__ import annotations

from typing import Optional

from probenorm.domain.entities.media_info import VIDEO_DYNAMIC_RANGE_HDR

DOLBY_VISION_CODEC_IDS = frozenset({"dvhe", "dvh1"})
HDR_COLOUR_PRIMARIES = "bt2020"
HDR_TRANSFER_FUNCTIONS = ("PQ", "HLG", "smpte2084")


def classify_dynamic_range(
    codec_id: Optional[str],
    bit_depth: Optional[int],
    colour_primaries: Optional[str],
    transfer_characteristics: Optional[str],
) -> str:
    """Return "HDR" or ""; Dolby Vision wins regardless of the other fields."""
    if codec_id and codec_id.strip().lower() in DOLBY_VISION_CODEC_IDS:
        return VIDEO_DYNAMIC_RANGE_HDR

    if (bit_depth or 0) < 10:
        return ""
    if not colour_primaries or not colour_primaries.strip():
        return ""
    if not transfer_characteristics or not transfer_characteristics.strip():
        return ""

    transfer = transfer_characteristics.lower()
    if colour_primaries.strip().lower() == HDR_COLOUR_PRIMARIES and any(
        fn.lower() in transfer for fn in HDR_TRANSFER_FUNCTIONS
    ):
        return VIDEO_DYNAMIC_RANGE_HDR
    return ""
