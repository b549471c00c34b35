# probenorm/domain/policies/stream_selector.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from probenorm.domain.entities.probe import ProbeResult, StreamDescriptor


@dataclass(frozen=True)
class PrimaryStreams:
    video: Optional[StreamDescriptor] = None
    audio: Optional[StreamDescriptor] = None
    subtitle: Optional[StreamDescriptor] = None


def select_primary(streams: Optional[Iterable[StreamDescriptor]]) -> Optional[StreamDescriptor]:
    """Lowest `index` wins; indexes are unique within one probe result."""
    if not streams:
        return None
    return min(streams, key=lambda s: s.index, default=None)


def select_primaries(probe: ProbeResult) -> PrimaryStreams:
    return PrimaryStreams(
        video=select_primary(probe.video_streams),
        audio=select_primary(probe.audio_streams),
        subtitle=select_primary(probe.subtitle_streams),
    )
