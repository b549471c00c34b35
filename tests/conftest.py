# tests/conftest.py
from __future__ import annotations

from typing import List

import pytest

from probenorm.common import settings as settings_mod
from probenorm.domain.dataclasses.codec import UnknownCodecEvent


class RecordingDiagnostics:
    """DiagnosticsPort double that keeps every event it receives."""
    def __init__(self):
        self.events: List[UnknownCodecEvent] = []

    def unknown_codec(self, event: UnknownCodecEvent) -> None:
        self.events.append(event)


@pytest.fixture()
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture()
def fresh_settings():
    """Clear the cached Settings before and after a test that tweaks env vars."""
    settings_mod.get_settings.cache_clear()
    yield settings_mod.get_settings
    settings_mod.get_settings.cache_clear()
