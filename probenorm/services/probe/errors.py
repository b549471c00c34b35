# probenorm/services/probe/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourceUnavailableError(RuntimeError):
    """The media could not be probed; normalization never runs for it."""
    message: str
    stderr: Optional[str] = None
    rc: Optional[int] = None

    def __str__(self) -> str:
        return self.message


class MediaFileNotFoundError(SourceUnavailableError):
    """The path to probe does not exist or is not a file."""


class ProbeToolNotFoundError(SourceUnavailableError):
    """ffprobe is not installed or not on PATH."""


class ProbeFailedError(SourceUnavailableError):
    """ffprobe ran but failed: non-zero exit, timeout, or unreadable output."""
