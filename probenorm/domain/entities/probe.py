# probenorm/domain/entities/probe.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StreamDescriptor:
    """
    One stream (video, audio or subtitle) as reported by the prober.
    Framework-free and read-only: produced by an adapter, consumed by the
    normalization policies. Fields that do not apply to a kind stay None.
    """
    index: int
    format: Optional[str] = None            # codec name, e.g. "h264", "dts"
    codec_id: Optional[str] = None          # codec tag, e.g. "avc1", "dvhe", "ec+3"
    profile: Optional[str] = None
    codec_library: Optional[str] = None     # encoder marker, e.g. "x264 core 164"
    bitrate: Optional[int] = None
    duration: Optional[float] = None        # seconds

    # video
    width: Optional[int] = None
    height: Optional[int] = None
    bit_depth: Optional[int] = None
    frame_rate: Optional[float] = None
    field_order: Optional[str] = None
    colour_primaries: Optional[str] = None
    transfer_characteristics: Optional[str] = None

    # audio
    channels: Optional[int] = None
    channel_layout: Optional[str] = None

    # audio / subtitle
    language: Optional[str] = None


@dataclass(frozen=True)
class ContainerDescriptor:
    format_name: Optional[str] = None       # e.g. "matroska,webm"
    format_long_name: Optional[str] = None  # e.g. "Matroska / WebM"
    duration: Optional[float] = None
    bitrate: Optional[int] = None


@dataclass(frozen=True)
class ProbeResult:
    """
    Structured probe of one media file: the container plus per-kind stream lists.
    A stream list of None means the prober gave no data for that kind, which is
    not the same as an empty tuple (probed, none found).
    """
    container: ContainerDescriptor = ContainerDescriptor()
    video_streams: Optional[Tuple[StreamDescriptor, ...]] = None
    audio_streams: Optional[Tuple[StreamDescriptor, ...]] = None
    subtitle_streams: Optional[Tuple[StreamDescriptor, ...]] = None
