from probenorm.domain.enums.language import Language, LANGUAGE_CODES, lookup_language
from probenorm.domain.enums.stream_kind import StreamKind
__all__ = [
    "Language",
    "LANGUAGE_CODES",
    "lookup_language",
    "StreamKind",
]
