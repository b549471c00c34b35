import dataclasses

import pytest

from probenorm.domain.entities.media_info import (
    CURRENT_SCHEMA_REVISION,
    MINIMUM_SUPPORTED_SCHEMA_REVISION,
    NormalizedMediaInfo,
)


def test_defaults_are_empty_and_current():
    info = NormalizedMediaInfo()
    assert info.video_codec is None
    assert info.audio_codec is None
    assert info.video_dynamic_range == ""
    assert info.audio_channels == 0
    assert info.run_time == 0
    assert info.audio_languages is None
    assert info.schema_revision == CURRENT_SCHEMA_REVISION


def test_revision_constants_are_ordered():
    assert MINIMUM_SUPPORTED_SCHEMA_REVISION <= CURRENT_SCHEMA_REVISION


def test_record_is_immutable():
    info = NormalizedMediaInfo()
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.schema_revision = 1  # type: ignore[misc]


@pytest.mark.parametrize("bad", ["SDR", "hdr", "HDR10", "Dolby Vision"])
def test_dynamic_range_is_binary(bad):
    with pytest.raises(ValueError):
        NormalizedMediaInfo(video_dynamic_range=bad)


@pytest.mark.parametrize("field", ["audio_channels", "run_time"])
def test_negative_numbers_rejected(field):
    with pytest.raises(ValueError):
        NormalizedMediaInfo(**{field: -1})
