import dataclasses

import pytest

from probenorm.domain.entities.probe import ContainerDescriptor, ProbeResult, StreamDescriptor


def test_probe_result_defaults_mean_no_data():
    pr = ProbeResult()
    assert pr.container == ContainerDescriptor()
    assert pr.video_streams is None
    assert pr.audio_streams is None
    assert pr.subtitle_streams is None


def test_stream_descriptor_is_read_only():
    s = StreamDescriptor(index=0, format="h264")
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.format = "hevc"  # type: ignore[misc]
