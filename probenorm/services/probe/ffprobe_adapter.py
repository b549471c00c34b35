# probenorm/services/probe/ffprobe_adapter.py
from __future__ import annotations

import json
import re
import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from probenorm.common.logging import get_logger
from probenorm.common.probe.ffprobe_helpers import (
    build_ffprobe_cmd,
    get_tag,
    parse_float,
    parse_int,
    parse_rate,
)
from probenorm.common.settings import get_settings
from probenorm.domain.entities.probe import ContainerDescriptor, ProbeResult, StreamDescriptor
from probenorm.domain.ports.probe import MediaProbePort
from probenorm.services.probe.errors import (
    MediaFileNotFoundError,
    ProbeFailedError,
    ProbeToolNotFoundError,
)

logger = get_logger(__name__)

# ffprobe spells HLG by its ARIB name
_TRANSFER_ALIASES = {"arib-std-b67": "HLG"}
_PIX_FMT_DEPTH_RE = re.compile(r"p(?P<depth>\d{2})(?:le|be)$")
_HMS_RE = re.compile(r"^(?P<h>\d+):(?P<m>\d{2}):(?P<s>\d{2}(?:\.\d+)?)$")


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.
    Every failure surfaces as a SourceUnavailableError subclass, so callers
    can tell "file missing" from "tool missing" from "probe failed".
    Safe for use from ThreadManager (I/O-bound).
    """

    def __init__(self, ffprobe_bin: Optional[str] = None, timeout_sec: Optional[int] = None):
        cfg = get_settings()
        self.ffprobe_bin = ffprobe_bin or cfg.ffprobe.bin
        self.timeout_sec = int(timeout_sec or cfg.ffprobe.timeout_sec or 15)
        self.log_level = cfg.ffprobe.log_level

    def resolve_bin(self) -> str:
        resolved = shutil.which(self.ffprobe_bin)
        if not resolved:
            raise ProbeToolNotFoundError(
                f"ffprobe not found ({self.ffprobe_bin!r}); set FFPROBE__BIN or install ffmpeg."
            )
        return resolved

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: Path) -> ProbeResult:
        if not path or not Path(path).is_file():
            raise MediaFileNotFoundError(f"Media file does not exist: {path}")

        cmd = build_ffprobe_cmd(path, ffprobe_bin=self.resolve_bin(), log_level=self.log_level)
        logger.debug("Getting media info from %s", path)

        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout_sec,
                check=False,  # we handle rc manually to attach stderr
            )
        except subprocess.TimeoutExpired as e:
            raise ProbeFailedError(f"ffprobe timed out after {self.timeout_sec}s", stderr=str(e)) from e
        except FileNotFoundError as e:
            raise ProbeToolNotFoundError("ffprobe vanished from PATH", stderr=str(e)) from e
        except OSError as e:
            raise ProbeFailedError("Failed to execute ffprobe (OS error).", stderr=str(e)) from e

        if proc.returncode != 0:
            raise ProbeFailedError("ffprobe returned non-zero exit code", stderr=proc.stderr, rc=proc.returncode)

        try:
            data = json.loads(proc.stdout or "{}")
        except json.JSONDecodeError as e:
            raise ProbeFailedError("ffprobe produced invalid JSON", stderr=proc.stdout) from e

        return parse_ffprobe_json(data)


# ---- Parsing ------------------------------------------------------------------
def parse_ffprobe_json(data: Dict[str, Any]) -> ProbeResult:
    """
    Turn `ffprobe -show_format -show_streams` JSON into a ProbeResult.
    Pure; safe to call in unit tests with fixture JSON.
    """
    data = data if isinstance(data, dict) else {}
    fmt = data.get("format")
    fmt = fmt if isinstance(fmt, dict) else {}
    raw_streams = data.get("streams")
    streams = [s for s in raw_streams if isinstance(s, dict)] if isinstance(raw_streams, list) else []

    def _of_type(kind: str) -> Tuple[StreamDescriptor, ...]:
        return tuple(
            _to_stream(s, position)
            for position, s in enumerate(streams)
            if s.get("codec_type") == kind
        )

    return ProbeResult(
        container=ContainerDescriptor(
            format_name=_text(fmt.get("format_name")),
            format_long_name=_text(fmt.get("format_long_name")),
            duration=parse_float(fmt.get("duration")),
            bitrate=parse_int(fmt.get("bit_rate")),
        ),
        video_streams=_of_type("video"),
        audio_streams=_of_type("audio"),
        subtitle_streams=_of_type("subtitle"),
    )


def _to_stream(s: Dict[str, Any], position: int) -> StreamDescriptor:
    index = parse_int(s.get("index"))
    codec_id = _text(s.get("codec_tag_string"))
    # ffprobe prints "[0][0][0][0]" for streams without a fourcc
    if codec_id and codec_id.startswith("["):
        codec_id = None

    return StreamDescriptor(
        index=index if index is not None else position,
        format=_text(s.get("codec_name")),
        codec_id=codec_id,
        profile=_text(s.get("profile")),
        codec_library=get_tag(s, "encoder"),
        bitrate=parse_int(s.get("bit_rate")) or parse_int(get_tag(s, "BPS")),
        duration=parse_float(s.get("duration")) or _parse_hms(get_tag(s, "DURATION")),
        width=parse_int(s.get("width")),
        height=parse_int(s.get("height")),
        bit_depth=_bit_depth(s),
        frame_rate=parse_rate(s.get("avg_frame_rate")) or parse_rate(s.get("r_frame_rate")),
        field_order=_text(s.get("field_order")),
        colour_primaries=_text(s.get("color_primaries")),
        transfer_characteristics=_transfer(s.get("color_transfer")),
        channels=parse_int(s.get("channels")),
        channel_layout=_text(s.get("channel_layout")),
        language=get_tag(s, "language"),
    )


def _text(value: Any) -> Optional[str]:
    """Scalars as text; anything else (lists, objects) counts as missing."""
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)


def _transfer(value: Any) -> Optional[str]:
    transfer = _text(value)
    return _TRANSFER_ALIASES.get(transfer, transfer) if transfer else transfer


def _bit_depth(s: Dict[str, Any]) -> Optional[int]:
    depth = parse_int(s.get("bits_per_raw_sample"))
    if depth:
        return depth
    m = _PIX_FMT_DEPTH_RE.search(_text(s.get("pix_fmt")) or "")
    if m:
        return int(m.group("depth"))
    return 8 if s.get("codec_type") == "video" and _text(s.get("pix_fmt")) else None


def _parse_hms(value: Optional[str]) -> Optional[float]:
    """Matroska stores stream durations as a tag: "01:52:30.041000000"."""
    if not value:
        return None
    m = _HMS_RE.match(value.strip())
    if not m:
        return None
    return int(m.group("h")) * 3600 + int(m.group("m")) * 60 + float(m.group("s"))
