# probenorm/domain/policies/release_name.py
from __future__ import annotations

import re
from typing import Optional

# Only these are treated as a file extension; "Movie.x264" must keep ".x264".
MEDIA_FILE_EXTENSIONS = frozenset({
    # video
    ".webm", ".m4v", ".3gp", ".nsv", ".ty", ".strm", ".rm", ".rmvb", ".m3u", ".ifo",
    ".mov", ".qt", ".divx", ".xvid", ".bivx", ".nrg", ".pva", ".wmv", ".asf", ".asx",
    ".ogm", ".ogv", ".m2v", ".avi", ".bin", ".dat", ".dvr-ms", ".mpg", ".mpeg", ".mp4",
    ".avc", ".vp3", ".svq3", ".nuv", ".viv", ".dv", ".fli", ".flv", ".wpl", ".img",
    ".iso", ".vob", ".mkv", ".mk3d", ".ts", ".wtv", ".m2ts",
    # usenet leftovers
    ".par2", ".nzb",
})

_EXTENSION_RE = re.compile(r"\.[a-z0-9-]{2,6}$", re.IGNORECASE)


def remove_file_extension(name: str) -> str:
    m = _EXTENSION_RE.search(name)
    if m and m.group(0).lower() in MEDIA_FILE_EXTENSIONS:
        return name[: m.start()]
    return name


def match_release_name(release_name: Optional[str], *tokens: str) -> str:
    """
    Return the first token found (case-insensitive substring) in the release
    name, after stripping a media file extension. With no match the last token
    is returned: callers put their default there.
    """
    if not tokens:
        raise ValueError("match_release_name() needs at least one token")
    name = remove_file_extension(release_name.strip()) if release_name and release_name.strip() else ""
    lowered = name.lower()
    for token in tokens:
        if token.lower() in lowered:
            return token
    return tokens[-1]
