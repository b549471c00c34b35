from probenorm.domain.entities.probe import ProbeResult, StreamDescriptor
from probenorm.domain.policies.stream_selector import select_primaries, select_primary


def test_lowest_index_wins_regardless_of_order():
    streams = (
        StreamDescriptor(index=3, format="ac3"),
        StreamDescriptor(index=1, format="dts"),
        StreamDescriptor(index=2, format="aac"),
    )
    assert select_primary(streams).format == "dts"


def test_absent_or_empty_has_no_primary():
    assert select_primary(None) is None
    assert select_primary(()) is None


def test_select_primaries_per_kind():
    probe = ProbeResult(
        video_streams=(StreamDescriptor(index=0, format="hevc"),),
        audio_streams=(StreamDescriptor(index=2, format="eac3"), StreamDescriptor(index=1, format="truehd")),
        subtitle_streams=None,
    )
    p = select_primaries(probe)
    assert p.video.format == "hevc"
    assert p.audio.format == "truehd"
    assert p.subtitle is None
