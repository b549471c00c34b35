# probenorm/services/schemas/mediainfo.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FFprobeFormat(BaseModel):
    """The `format` block of ffprobe JSON. Numbers are kept as text, as ffprobe prints them."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    format_name: Optional[str] = None
    format_long_name: Optional[str] = None
    duration: Optional[str] = None
    bit_rate: Optional[str] = None
    tags: Dict[str, Optional[str]] = Field(default_factory=dict)


class FFprobeStream(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    index: Optional[str] = None
    codec_type: Optional[str] = None
    codec_name: Optional[str] = None
    codec_tag_string: Optional[str] = None
    profile: Optional[str] = None
    bit_rate: Optional[str] = None
    duration: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    pix_fmt: Optional[str] = None
    bits_per_raw_sample: Optional[str] = None
    avg_frame_rate: Optional[str] = None
    r_frame_rate: Optional[str] = None
    field_order: Optional[str] = None
    color_primaries: Optional[str] = None
    color_transfer: Optional[str] = None
    channels: Optional[str] = None
    channel_layout: Optional[str] = None
    tags: Dict[str, Optional[str]] = Field(default_factory=dict)


class FFprobeDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    format: FFprobeFormat = Field(default_factory=FFprobeFormat)
    streams: List[FFprobeStream] = Field(default_factory=list)

    def as_ffprobe_json(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class NormalizeRequest(BaseModel):
    probe: FFprobeDocument = Field(
        ...,
        description="Raw `ffprobe -show_format -show_streams -print_format json` output",
        examples=[{"format": {"format_name": "matroska,webm", "duration": "5400.0"}, "streams": []}],
    )
    release_name: Optional[str] = Field(
        None, description="Release/file name used to disambiguate codec labels",
        examples=["Movie.Title.2019.1080p.BluRay.x264-GROUP.mkv"],
    )


class ProbeRequest(BaseModel):
    path: str = Field(..., description="Absolute path of the media file to probe",
                      examples=["/media/movies/Movie.Title.2019.mkv"])
    release_name: Optional[str] = Field(None, description="Defaults to the file name")


class MediaInfoRead(BaseModel):
    container_format: Optional[str] = None

    video_format: Optional[str] = None
    video_codec_id: Optional[str] = None
    video_profile: Optional[str] = None
    video_codec: Optional[str] = Field(None, examples=["x264", "x265", "AV1"])
    video_dynamic_range: str = Field("", examples=["HDR", ""])
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
    audio_codec: Optional[str] = Field(None, examples=["DTS-HD MA", "EAC3 Atmos"])
    audio_bitrate: int = 0
    audio_stream_count: int = 0
    audio_channels: float = Field(0.0, ge=0, examples=[5.1, 2.0])
    audio_channel_positions: Optional[str] = None

    run_time: float = Field(0.0, ge=0, description="Seconds")

    # null = no stream data; [] = streams present but no language recognized
    audio_languages: Optional[List[str]] = None
    subtitle_languages: Optional[List[str]] = None

    schema_revision: int
    requires_rederive: bool = False
