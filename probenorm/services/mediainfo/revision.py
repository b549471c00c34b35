# probenorm/services/mediainfo/revision.py
from __future__ import annotations

from typing import Optional

from probenorm.domain.entities.media_info import MINIMUM_SUPPORTED_SCHEMA_REVISION, NormalizedMediaInfo


def requires_rederive(
    info: Optional[NormalizedMediaInfo],
    minimum: int = MINIMUM_SUPPORTED_SCHEMA_REVISION,
) -> bool:
    """True when a stored record is missing or was produced by a retired ruleset."""
    if info is None:
        return True
    return info.schema_revision < minimum
