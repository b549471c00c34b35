# probenorm/domain/entities/media_info.py
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

from probenorm.domain.enums.language import Language

# Records stamped below MINIMUM_SUPPORTED_SCHEMA_REVISION must be re-derived
# from a fresh probe by whoever persists them.
MINIMUM_SUPPORTED_SCHEMA_REVISION = 4
CURRENT_SCHEMA_REVISION = 7

VIDEO_DYNAMIC_RANGE_HDR = "HDR"


@dataclass(frozen=True)
class NormalizedMediaInfo:
    """
    Canonical technical attributes of one media file, derived once from a
    ProbeResult and never mutated afterwards. Raw probe strings are kept next
    to their canonical labels so a stale label can be traced back.
    """
    container_format: Optional[str] = None

    video_format: Optional[str] = None
    video_codec_id: Optional[str] = None
    video_profile: Optional[str] = None
    video_codec: Optional[str] = None
    video_dynamic_range: str = ""
    width: int = 0
    height: int = 0
    video_bit_depth: int = 0
    video_bitrate: int = 0
    video_fps: float = 0.0
    video_multi_view_count: int = 0
    scan_type: Optional[str] = None

    audio_format: Optional[str] = None
    audio_codec_id: Optional[str] = None
    audio_profile: Optional[str] = None
    audio_codec: Optional[str] = None
    audio_bitrate: int = 0
    audio_stream_count: int = 0
    audio_channels: float = 0.0
    audio_channel_positions: Optional[str] = None

    run_time: float = 0.0  # seconds

    # None = no stream data; empty frozenset = streams present, nothing recognized
    audio_languages: Optional[FrozenSet[Language]] = None
    subtitle_languages: Optional[FrozenSet[Language]] = None

    schema_revision: int = CURRENT_SCHEMA_REVISION

    def __post_init__(self):
        if self.video_dynamic_range not in ("", VIDEO_DYNAMIC_RANGE_HDR):
            raise ValueError(f"video_dynamic_range must be '' or 'HDR', got {self.video_dynamic_range!r}")
        if self.audio_channels < 0:
            raise ValueError("audio_channels must be >= 0")
        if self.run_time < 0:
            raise ValueError("run_time must be >= 0")
