# probenorm/domain/policies/codec_rules.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from probenorm.common.logging import get_logger
from probenorm.domain.dataclasses.codec import CodecSignature, UnknownCodecEvent
from probenorm.domain.enums.stream_kind import StreamKind
from probenorm.domain.policies.release_name import match_release_name
from probenorm.domain.ports.diagnostics import DiagnosticsPort

logger = get_logger(__name__)

Predicate = Callable[[CodecSignature, Optional[str]], bool]
Outcome = Union[str, Callable[[CodecSignature, Optional[str]], str]]


@dataclass(frozen=True)
class CodecRule:
    """
    One row of a codec table. `when(signature, release_name)` decides whether
    the row applies; `then` is the label, or a callable producing it.
    """
    name: str
    when: Predicate
    then: Outcome

    def label(self, sig: CodecSignature, release_name: Optional[str]) -> str:
        return self.then(sig, release_name) if callable(self.then) else self.then


def _token(*names: str) -> Predicate:
    return lambda sig, _: sig.has_token(*names)


def _codec_id(*needles: str) -> Predicate:
    return lambda sig, _: sig.codec_id_contains(*needles)


# ---------------------------------------------------------------------------
# Audio
# ---------------------------------------------------------------------------
DTS_PROFILES = {
    "DTS:X": "DTS-X",
    "DTS-HD MA": "DTS-HD MA",
    "DTS-ES": "DTS-ES",
    "DTS-HD HRA": "DTS-HD HRA",
    "DTS Express": "DTS Express",
    "DTS 96/24": "DTS 96/24",
}


def _dts(sig: CodecSignature, _: Optional[str]) -> str:
    return DTS_PROFILES.get(sig.profile, "DTS")


def _aac(sig: CodecSignature, _: Optional[str]) -> str:
    return "HE-AAC" if sig.codec_id == "A_AAC/MPEG4/LC/SBR" else "AAC"


# Order is priority: e.g. "thd+" must beat plain TrueHD, "ec+3" must beat EAC3.
AUDIO_RULES: Tuple[CodecRule, ...] = (
    CodecRule("truehd-atmos", _codec_id("thd+"), "TrueHD Atmos"),
    CodecRule("truehd", _token("truehd"), "TrueHD"),
    CodecRule("flac", _token("flac"), "FLAC"),
    CodecRule("dts", _token("dts"), _dts),
    CodecRule("eac3-atmos", _codec_id("ec+3"), "EAC3 Atmos"),
    CodecRule("eac3", _token("eac3"), "EAC3"),
    CodecRule("ac3", _token("ac3"), "AC3"),
    CodecRule("aac", _token("aac"), _aac),
    CodecRule("mp3", _token("mp3"), "MP3"),
    CodecRule("mp2", _token("mp2"), "MP2"),
    CodecRule("opus", _token("opus"), "Opus"),
    CodecRule("pcm", _token("pcm", "adpcm"), "PCM"),
    CodecRule("vorbis", _token("vorbis"), "Vorbis"),
    CodecRule("wma", _token("wmav2"), "WMA"),
    CodecRule("quicktime", _token("A_QUICKTIME"), ""),
)


# ---------------------------------------------------------------------------
# Video
# ---------------------------------------------------------------------------
def _avc(sig: CodecSignature, release_name: Optional[str]) -> str:
    if sig.library_startswith("x264"):
        return "x264"
    return match_release_name(release_name, "AVC", "x264", "h264")


def _hevc(sig: CodecSignature, release_name: Optional[str]) -> str:
    if sig.library_startswith("x265"):
        return "x265"
    return match_release_name(release_name, "HEVC", "x265", "h265")


def _is_xvid(sig: CodecSignature, _: Optional[str]) -> bool:
    return sig.has_token("m4v") and (sig.codec_id_contains("XVID") or sig.library_startswith("XviD"))


def _is_divx(sig: CodecSignature, _: Optional[str]) -> bool:
    return sig.has_token("m4v") and (
        sig.codec_id_contains("DIV3", "DIVX", "DX50") or sig.library_startswith("DivX")
    )


def _m4v_release_name(sig: CodecSignature, release_name: Optional[str]) -> str:
    return match_release_name(release_name, "XviD", "DivX", "")


def _is_m4v_named_in_release(sig: CodecSignature, release_name: Optional[str]) -> bool:
    return sig.has_token("m4v") and _m4v_release_name(sig, release_name) != ""


# libavcodec, NeroDigital, Intel IPP and a couple of GUI encoders write plain
# MPEG-4 part 2 that has no better label.
M4V_UNLABELED_LIBRARIES = ("Lavc", "em4v", "Intel(R) IPP", "ZJMedia", "DigiArty")


def _is_m4v_unlabeled(sig: CodecSignature, _: Optional[str]) -> bool:
    if not sig.has_token("m4v"):
        return False
    if not sig.codec_library:
        return True
    return any(marker in sig.codec_library for marker in M4V_UNLABELED_LIBRARIES)


def _vp_first_char(sig: CodecSignature, _: Optional[str]) -> str:
    return sig.tokens[0][:1].upper()


# Recognised formats with no canonical label; unmatched streams of these
# formats still report a diagnostic but come back as "".
UNLABELED_VIDEO_TOKENS = ("m4v",)


VIDEO_RULES: Tuple[CodecRule, ...] = (
    CodecRule("h264", _token("h264"), "x264"),
    CodecRule("avc", _token("avc", "V.MPEG4/ISO/AVC"), _avc),
    CodecRule("hevc", _token("hevc", "V_MPEGH/ISO/HEVC"), _hevc),
    CodecRule("mpeg2", _token("mpegvideo"), "MPEG2"),
    CodecRule("m4v-xvid", _is_xvid, "XviD"),
    CodecRule("m4v-divx", _is_divx, "DivX"),
    CodecRule("m4v-release-name", _is_m4v_named_in_release, _m4v_release_name),
    CodecRule("m4v-unlabeled", _is_m4v_unlabeled, ""),
    CodecRule("vc1", _token("vc1"), "VC1"),
    CodecRule("av1", _token("av1"), "AV1"),
    CodecRule("vp", _token("VP6", "VP7", "VP8", "VP9"), _vp_first_char),
    CodecRule("wmv", _token("WMV1", "WMV2"), "WMV"),
    CodecRule("divx", _token("DivX", "div3"), "DivX"),
    CodecRule("xvid", _token("XviD"), "XviD"),
    CodecRule("quicktime-real", _token("V_QUICKTIME", "RealVideo 4"), ""),
    CodecRule("ms-mpeg4", _token("mp42", "mp43"), ""),
)


class CodecClassifier:
    """
    Maps a CodecSignature to a canonical label by walking an ordered rule
    table; the first matching rule wins. When nothing matches, the raw format
    is returned and an UnknownCodecEvent goes to the diagnostics sink. Formats
    listed in `unlabeled_tokens` are still reported but come back as "".
    """

    def __init__(
        self,
        kind: StreamKind,
        rules: Sequence[CodecRule],
        diagnostics: Optional[DiagnosticsPort] = None,
        unlabeled_tokens: Sequence[str] = (),
    ) -> None:
        self.kind = kind
        self.rules: Tuple[CodecRule, ...] = tuple(rules)
        self.diagnostics = diagnostics
        self.unlabeled_tokens: Tuple[str, ...] = tuple(unlabeled_tokens)

    def match(self, sig: CodecSignature, release_name: Optional[str] = None) -> Optional[CodecRule]:
        return next((r for r in self.rules if r.when(sig, release_name)), None)

    def classify(self, sig: CodecSignature, release_name: Optional[str] = None) -> Optional[str]:
        if sig.format is None:
            return None

        if not sig.tokens:
            return "" if self.kind == StreamKind.audio else sig.format.strip()

        rule = self.match(sig, release_name)
        if rule is not None:
            return rule.label(sig, release_name)

        self._report_unknown(sig, release_name)
        if self.unlabeled_tokens and sig.has_token(*self.unlabeled_tokens):
            return ""
        return sig.format if self.kind == StreamKind.audio else sig.format.strip()

    def _report_unknown(self, sig: CodecSignature, release_name: Optional[str]) -> None:
        logger.debug(
            "Unknown %s format: '%s' in '%s'.",
            self.kind.value,
            ", ".join([sig.format or "", sig.codec_id, sig.profile, sig.codec_library]),
            release_name,
        )
        if self.diagnostics is None:
            return
        event = UnknownCodecEvent(
            kind=self.kind,
            format=sig.format,
            codec_id=sig.codec_id,
            profile=sig.profile,
            codec_library=sig.codec_library,
            container_format=sig.container_format,
            release_name=release_name,
        )
        try:
            self.diagnostics.unknown_codec(event)
        except Exception as e:
            # the sink is observational only; the label stands either way
            logger.warning("diagnostics sink failed for %s: %s", event.channel, e)


def build_video_classifier(diagnostics: Optional[DiagnosticsPort] = None) -> CodecClassifier:
    return CodecClassifier(StreamKind.video, VIDEO_RULES, diagnostics, UNLABELED_VIDEO_TOKENS)


def build_audio_classifier(diagnostics: Optional[DiagnosticsPort] = None) -> CodecClassifier:
    return CodecClassifier(StreamKind.audio, AUDIO_RULES, diagnostics)
