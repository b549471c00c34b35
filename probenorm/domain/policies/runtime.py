# probenorm/domain/policies/runtime.py
from __future__ import annotations

from typing import Optional


def reconcile_runtime(
    audio: Optional[float],
    video: Optional[float],
    container: Optional[float],
) -> float:
    """
    Pick the most trustworthy duration (seconds): video stream, then audio
    stream, then container. The winner is returned as-is, never averaged.
    """
    if video and video > 0:
        return video
    if audio and audio > 0:
        return audio
    return max(0.0, container or 0.0)
