import pytest

from probenorm.domain.dataclasses.codec import CodecSignature
from probenorm.domain.enums.stream_kind import StreamKind
from probenorm.domain.policies.codec_rules import AUDIO_RULES, build_audio_classifier


def _classify(fmt, codec_id=None, profile=None, library=None, diagnostics=None):
    clf = build_audio_classifier(diagnostics)
    return clf.classify(CodecSignature.of(fmt, codec_id, profile, library, "Matroska / WebM"))


@pytest.mark.parametrize(
    "fmt,codec_id,profile,expected",
    [
        ("truehd", "thd+", None, "TrueHD Atmos"),
        ("truehd", None, None, "TrueHD"),
        ("flac", None, None, "FLAC"),
        ("dts", None, "DTS:X", "DTS-X"),
        ("dts", None, "DTS-HD MA", "DTS-HD MA"),
        ("dts", None, "DTS-ES", "DTS-ES"),
        ("dts", None, "DTS-HD HRA", "DTS-HD HRA"),
        ("dts", None, "DTS Express", "DTS Express"),
        ("dts", None, "DTS 96/24", "DTS 96/24"),
        ("dts", None, None, "DTS"),
        ("dts", None, "dts-hd ma", "DTS"),  # profile compare is exact
        ("eac3", "ec+3", None, "EAC3 Atmos"),
        ("eac3", None, None, "EAC3"),
        ("ac3", None, None, "AC3"),
        ("AC-3 / ac3", None, None, "AC3"),
        ("aac", "A_AAC/MPEG4/LC/SBR", None, "HE-AAC"),
        ("aac", "mp4a", "LC", "AAC"),
        ("mp3", None, None, "MP3"),
        ("mp2", None, None, "MP2"),
        ("opus", None, None, "Opus"),
        ("pcm", None, None, "PCM"),
        ("adpcm", None, None, "PCM"),
        ("vorbis", None, None, "Vorbis"),
        ("wmav2", None, None, "WMA"),
        ("A_QUICKTIME", None, None, ""),
    ],
)
def test_audio_table(fmt, codec_id, profile, expected):
    assert _classify(fmt, codec_id, profile) == expected


def test_priority_atmos_tag_beats_format():
    # a "thd+" tag wins even on a stream whose format names another codec
    assert _classify("flac", codec_id="thd+") == "TrueHD Atmos"
    assert _classify("ac3", codec_id="EC+3") == "EAC3 Atmos"


def test_dts_beats_eac3_atmos_tag():
    assert _classify("dts", codec_id="ec+3", profile="DTS-HD MA") == "DTS-HD MA"


def test_none_format_is_none():
    assert _classify(None) is None


def test_blank_format_is_empty_label(diagnostics):
    assert _classify("   ", diagnostics=diagnostics) == ""
    assert diagnostics.events == []


def test_unknown_returns_raw_and_emits_once(diagnostics):
    assert _classify("xyz123", codec_id="abcd", profile="p", library="lib", diagnostics=diagnostics) == "xyz123"
    assert len(diagnostics.events) == 1
    ev = diagnostics.events[0]
    assert ev.kind == StreamKind.audio
    assert ev.channel == "UnknownAudioFormatFFProbe"
    assert (ev.format, ev.codec_id, ev.profile, ev.codec_library) == ("xyz123", "abcd", "p", "lib")
    assert ev.container_format == "Matroska / WebM"


def test_unknown_emits_per_call(diagnostics):
    for _ in range(3):
        _classify("xyz123", diagnostics=diagnostics)
    assert len(diagnostics.events) == 3


def test_known_format_emits_nothing(diagnostics):
    _classify("aac", diagnostics=diagnostics)
    assert diagnostics.events == []


def test_failing_sink_does_not_change_label():
    class _Broken:
        def unknown_codec(self, event):
            raise RuntimeError("sink down")

    assert _classify("xyz123", diagnostics=_Broken()) == "xyz123"


def test_rule_names_are_unique():
    names = [r.name for r in AUDIO_RULES]
    assert len(names) == len(set(names))
