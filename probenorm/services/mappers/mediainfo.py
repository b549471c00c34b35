# probenorm/services/mappers/mediainfo.py
from __future__ import annotations

from dataclasses import asdict
from typing import FrozenSet, List, Optional

from probenorm.domain.entities.media_info import NormalizedMediaInfo
from probenorm.domain.enums.language import Language
from probenorm.services.mediainfo.revision import requires_rederive
from probenorm.services.schemas.mediainfo import MediaInfoRead


def _languages(langs: Optional[FrozenSet[Language]]) -> Optional[List[str]]:
    if langs is None:
        return None
    # sets are unordered; sort so responses are stable
    return sorted(lang.value for lang in langs)


def to_media_info_read(info: NormalizedMediaInfo) -> MediaInfoRead:
    data = asdict(info)
    data["audio_languages"] = _languages(info.audio_languages)
    data["subtitle_languages"] = _languages(info.subtitle_languages)
    data["requires_rederive"] = requires_rederive(info)
    return MediaInfoRead(**data)
