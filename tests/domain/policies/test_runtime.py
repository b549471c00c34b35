import pytest

from probenorm.domain.policies.runtime import reconcile_runtime


def test_container_when_streams_have_nothing():
    assert reconcile_runtime(audio=0, video=0, container=120) == 120


def test_video_wins_even_if_audio_is_longer():
    assert reconcile_runtime(audio=95, video=90, container=100) == 90


def test_audio_when_no_video():
    assert reconcile_runtime(audio=95, video=None, container=100) == 95


@pytest.mark.parametrize("container", [None, 0, -3])
def test_never_negative(container):
    assert reconcile_runtime(None, None, container) == 0


def test_negative_stream_durations_are_ignored():
    assert reconcile_runtime(audio=-1, video=-1, container=42.5) == 42.5


def test_value_is_returned_verbatim():
    assert reconcile_runtime(audio=5399.984, video=5400.041, container=5400.1) == 5400.041
