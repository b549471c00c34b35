# tests/services/conftest.py
from __future__ import annotations

from typing import Any, Dict

import pytest

@pytest.fixture()
def uhd_remux_json() -> Dict[str, Any]:
    """Trimmed ffprobe JSON of a 2160p HDR10 HEVC remux with TrueHD Atmos."""
    return {
        "format": {
            "format_name": "matroska,webm",
            "format_long_name": "Matroska / WebM",
            "duration": "7245.120000",
            "bit_rate": "58213456",
        },
        "streams": [
            {
                "index": 0,
                "codec_type": "video",
                "codec_name": "hevc",
                "profile": "Main 10",
                "codec_tag_string": "[0][0][0][0]",
                "width": 3840,
                "height": 2160,
                "pix_fmt": "yuv420p10le",
                "color_primaries": "bt2020",
                "color_transfer": "smpte2084",
                "field_order": "progressive",
                "r_frame_rate": "24000/1001",
                "avg_frame_rate": "24000/1001",
                "tags": {"BPS": "52000000", "DURATION": "02:00:45.083000000"},
            },
            {
                "index": 1,
                "codec_type": "audio",
                "codec_name": "truehd",
                "codec_tag_string": "[0][0][0][0]",
                "channels": 8,
                "channel_layout": "7.1",
                "tags": {"language": "eng", "DURATION": "02:00:45.100000000"},
            },
            {
                "index": 2,
                "codec_type": "audio",
                "codec_name": "ac3",
                "channels": 6,
                "channel_layout": "5.1(side)",
                "bit_rate": "640000",
                "tags": {"language": "ger"},
            },
            {"index": 3, "codec_type": "subtitle", "codec_name": "hdmv_pgs_subtitle", "tags": {"language": "eng"}},
            {"index": 4, "codec_type": "subtitle", "codec_name": "hdmv_pgs_subtitle", "tags": {"language": "fre"}},
            {"index": 5, "codec_type": "subtitle", "codec_name": "subrip", "tags": {"language": "pirate"}},
        ],
    }


@pytest.fixture()
def sd_avi_json() -> Dict[str, Any]:
    """Old interlaced MPEG-4 part 2 AVI with MP3 audio and no language tags."""
    return {
        "format": {"format_name": "avi", "format_long_name": "AVI (Audio Video Interleaved)", "duration": "2640.5"},
        "streams": [
            {
                "index": 0,
                "codec_type": "video",
                "codec_name": "mpeg4",
                "codec_tag_string": "XVID",
                "width": 640,
                "height": 480,
                "pix_fmt": "yuv420p",
                "field_order": "tt",
                "r_frame_rate": "25/1",
            },
            {"index": 1, "codec_type": "audio", "codec_name": "mp3", "channels": 2, "channel_layout": "stereo"},
        ],
    }
