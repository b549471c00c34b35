# probenorm/domain/enums/language.py
from __future__ import annotations

from enum import StrEnum
from typing import Dict, Optional


class Language(StrEnum):
    English = "English"
    French = "French"
    Spanish = "Spanish"
    German = "German"
    Italian = "Italian"
    Danish = "Danish"
    Dutch = "Dutch"
    Japanese = "Japanese"
    Icelandic = "Icelandic"
    Chinese = "Chinese"
    Russian = "Russian"
    Polish = "Polish"
    Vietnamese = "Vietnamese"
    Swedish = "Swedish"
    Norwegian = "Norwegian"
    Finnish = "Finnish"
    Turkish = "Turkish"
    Portuguese = "Portuguese"
    Flemish = "Flemish"
    Greek = "Greek"
    Korean = "Korean"
    Hungarian = "Hungarian"
    Hebrew = "Hebrew"
    Lithuanian = "Lithuanian"
    Czech = "Czech"
    Hindi = "Hindi"
    Romanian = "Romanian"
    Thai = "Thai"
    Bulgarian = "Bulgarian"
    Arabic = "Arabic"
    Ukrainian = "Ukrainian"
    Persian = "Persian"
    Bengali = "Bengali"
    Slovak = "Slovak"
    Latvian = "Latvian"
    Indonesian = "Indonesian"
    Catalan = "Catalan"
    Croatian = "Croatian"
    Serbian = "Serbian"
    Estonian = "Estonian"
    Tamil = "Tamil"
    Telugu = "Telugu"
    Malay = "Malay"


# ISO 639-1, ISO 639-2/B and ISO 639-2/T codes -> Language.
# Keys are lowercase; lookups lowercase the probe tag first.
LANGUAGE_CODES: Dict[str, Language] = {
    "en": Language.English, "eng": Language.English,
    "fr": Language.French, "fre": Language.French, "fra": Language.French,
    "es": Language.Spanish, "spa": Language.Spanish,
    "de": Language.German, "ger": Language.German, "deu": Language.German,
    "it": Language.Italian, "ita": Language.Italian,
    "da": Language.Danish, "dan": Language.Danish,
    "nl": Language.Dutch, "dut": Language.Dutch, "nld": Language.Dutch,
    "ja": Language.Japanese, "jpn": Language.Japanese,
    "is": Language.Icelandic, "ice": Language.Icelandic, "isl": Language.Icelandic,
    "zh": Language.Chinese, "chi": Language.Chinese, "zho": Language.Chinese,
    "ru": Language.Russian, "rus": Language.Russian,
    "pl": Language.Polish, "pol": Language.Polish,
    "vi": Language.Vietnamese, "vie": Language.Vietnamese,
    "sv": Language.Swedish, "swe": Language.Swedish,
    "no": Language.Norwegian, "nor": Language.Norwegian,
    "nb": Language.Norwegian, "nob": Language.Norwegian,
    "nn": Language.Norwegian, "nno": Language.Norwegian,
    "fi": Language.Finnish, "fin": Language.Finnish,
    "tr": Language.Turkish, "tur": Language.Turkish,
    "pt": Language.Portuguese, "por": Language.Portuguese,
    "vls": Language.Flemish,
    "el": Language.Greek, "gre": Language.Greek, "ell": Language.Greek,
    "ko": Language.Korean, "kor": Language.Korean,
    "hu": Language.Hungarian, "hun": Language.Hungarian,
    "he": Language.Hebrew, "heb": Language.Hebrew,
    "lt": Language.Lithuanian, "lit": Language.Lithuanian,
    "cs": Language.Czech, "cze": Language.Czech, "ces": Language.Czech,
    "hi": Language.Hindi, "hin": Language.Hindi,
    "ro": Language.Romanian, "rum": Language.Romanian, "ron": Language.Romanian,
    "th": Language.Thai, "tha": Language.Thai,
    "bg": Language.Bulgarian, "bul": Language.Bulgarian,
    "ar": Language.Arabic, "ara": Language.Arabic,
    "uk": Language.Ukrainian, "ukr": Language.Ukrainian,
    "fa": Language.Persian, "per": Language.Persian, "fas": Language.Persian,
    "bn": Language.Bengali, "ben": Language.Bengali,
    "sk": Language.Slovak, "slo": Language.Slovak, "slk": Language.Slovak,
    "lv": Language.Latvian, "lav": Language.Latvian,
    "id": Language.Indonesian, "ind": Language.Indonesian,
    "ca": Language.Catalan, "cat": Language.Catalan,
    "hr": Language.Croatian, "hrv": Language.Croatian,
    "sr": Language.Serbian, "srp": Language.Serbian,
    "et": Language.Estonian, "est": Language.Estonian,
    "ta": Language.Tamil, "tam": Language.Tamil,
    "te": Language.Telugu, "tel": Language.Telugu,
    "ms": Language.Malay, "may": Language.Malay, "msa": Language.Malay,
}


def lookup_language(tag: Optional[str]) -> Optional[Language]:
    """Map a raw probe language tag ("eng", "ger", "English") to a Language, or None."""
    if not tag or not tag.strip():
        return None
    key = tag.strip().lower()
    found = LANGUAGE_CODES.get(key)
    if found is not None:
        return found
    # Some muxers write the English name instead of a code.
    for lang in Language:
        if lang.value.lower() == key:
            return lang
    return None
