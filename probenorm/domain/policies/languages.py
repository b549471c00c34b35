# probenorm/domain/policies/languages.py
from __future__ import annotations

from typing import FrozenSet, Iterable, Optional

from probenorm.domain.enums.language import Language, lookup_language


def aggregate_languages(tags: Optional[Iterable[Optional[str]]]) -> Optional[FrozenSet[Language]]:
    """
    Map raw per-stream language tags to known Languages.

    - None in -> None out: the probe gave no stream data at all.
    - Otherwise a frozenset of recognized languages; unknown tags ("pirate",
      "und") are dropped, so the set may be empty.
    """
    if tags is None:
        return None
    return frozenset(lang for lang in (lookup_language(t) for t in tags) if lang is not None)
