# probenorm/common/probe/ffprobe_helpers.py
from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, List, Optional


def build_ffprobe_cmd(
    input_path: str | Path,
    *,
    ffprobe_bin: str = "ffprobe",
    log_level: str = "error",
    extra_args: Iterable[str] | None = None,
) -> List[str]:
    """
    Build an ffprobe command that emits the format + streams JSON the adapter parses.
    """
    cmd = [
        ffprobe_bin,
        "-v", log_level,
        "-show_streams",
        "-show_format",
        "-print_format", "json",
    ]
    if extra_args:
        cmd.extend(extra_args)
    # Stop option parsing in case of weird filenames
    cmd.extend(["--", str(input_path)])
    return cmd


def parse_float(x) -> Optional[float]:
    if x is None:
        return None
    try:
        f = float(x)
    except (TypeError, ValueError):
        return None
    # ffprobe can print "nan"/"inf" for broken timestamps
    return f if math.isfinite(f) else None


def parse_int(x) -> Optional[int]:
    f = parse_float(x)
    return int(f) if f is not None else None


def parse_rate(rate: Optional[str]) -> Optional[float]:
    """ffprobe frame rates come as "num/den" (e.g. "24000/1001"); "0/0" means unknown."""
    if not rate:
        return None
    if not isinstance(rate, str) or "/" not in rate:
        return parse_float(rate)
    n, d = rate.split("/", 1)
    num, den = parse_float(n), parse_float(d)
    if num is None or not den:
        return None
    return num / den


def get_tag(obj: dict | None, key: str) -> Optional[str]:
    """Case-insensitive lookup in an ffprobe `tags` block (mkv writes "ENCODER", mp4 "encoder")."""
    if not obj:
        return None
    tags = obj.get("tags") or {}
    if not isinstance(tags, dict):
        return None
    for k, v in tags.items():
        if str(k).lower() == key.lower() and v is not None:
            return str(v)
    return None
