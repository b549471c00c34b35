# probenorm/services/mediainfo/augment.py
from __future__ import annotations

from typing import FrozenSet, Optional

from probenorm.domain.entities.media_info import NormalizedMediaInfo
from probenorm.domain.enums.language import Language


def augment_languages(media_info: Optional[NormalizedMediaInfo]) -> Optional[FrozenSet[Language]]:
    """
    Languages an import should take from the media info, or None when the
    caller should keep what it already has: no media info, no audio stream
    data, or audio streams whose tags were all unrecognized.
    """
    if media_info is None:
        return None
    languages = media_info.audio_languages
    if not languages:
        return None
    return languages
