# probenorm/services/api/deps.py
from __future__ import annotations

from functools import lru_cache

from probenorm.domain.ports.probe import MediaProbePort
from probenorm.services.diagnostics.log_sink import LoggingDiagnosticsSink
from probenorm.services.mediainfo.normalizer import MediaInfoNormalizer
from probenorm.services.probe.ffprobe_adapter import FFprobeAdapter


def get_media_probe() -> MediaProbePort:
    """
    Provide a MediaProbePort implementation (ffprobe) via DI.
    Swappable in tests through app.dependency_overrides.
    """
    return FFprobeAdapter()


@lru_cache(maxsize=1)
def get_normalizer() -> MediaInfoNormalizer:
    # one process-wide sink so unknown-codec dedupe spans requests
    return MediaInfoNormalizer(diagnostics=LoggingDiagnosticsSink())
