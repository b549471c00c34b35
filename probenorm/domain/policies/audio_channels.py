# probenorm/domain/policies/audio_channels.py
from __future__ import annotations

import re
from typing import Optional

from probenorm.domain.dataclasses.codec import split_format

# "5.1(side)", "7.1", "2.0" ... anchored at the start of the layout string
_POSITION_RE = re.compile(r"^(?P<position>\d\.\d)")


def channels_from_layout(channel_layout: Optional[str]) -> float:
    if not channel_layout:
        return 0.0
    m = _POSITION_RE.match(channel_layout)
    if not m:
        return 0.0
    try:
        return float(m.group("position"))
    except ValueError:
        return 0.0


def channels_from_count(channels: Optional[int], audio_format: Optional[str]) -> float:
    # 6-channel FLAC is nearly always 5.1
    if channels == 6 and any(t.lower() == "flac" for t in split_format(audio_format)):
        return 5.1
    return float(channels or 0)


def resolve_audio_channels(
    channel_layout: Optional[str],
    channels: Optional[int],
    audio_format: Optional[str],
) -> float:
    """Layout position ("5.1") first; otherwise the discrete channel count."""
    resolved = channels_from_layout(channel_layout)
    if resolved == 0:
        resolved = channels_from_count(channels, audio_format)
    return max(0.0, resolved)
