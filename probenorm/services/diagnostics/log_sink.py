# probenorm/services/diagnostics/log_sink.py
from __future__ import annotations

import threading
from typing import Optional, Set, Tuple

from probenorm.common.logging import get_logger
from probenorm.common.settings import get_settings
from probenorm.domain.dataclasses.codec import UnknownCodecEvent
from probenorm.domain.ports.diagnostics import DiagnosticsPort

logger = get_logger("probenorm.diagnostics")


class LoggingDiagnosticsSink(DiagnosticsPort):
    """
    Writes unknown codec signatures to the log so the rule tables can be
    extended later. With dedupe on, a signature is logged at WARNING the first
    time and at DEBUG afterwards. Shared across threads.
    """

    def __init__(self, dedupe: Optional[bool] = None) -> None:
        if dedupe is None:
            dedupe = get_settings().diagnostics.dedupe_unknown_codecs
        self.dedupe = dedupe
        self._seen: Set[Tuple[str, ...]] = set()
        self._lock = threading.Lock()

    def unknown_codec(self, event: UnknownCodecEvent) -> None:
        first = True
        if self.dedupe:
            with self._lock:
                first = event.signature not in self._seen
                self._seen.add(event.signature)

        level = "warning" if first else "debug"
        getattr(logger, level)(
            "%s container=%r format=%r codec_id=%r profile=%r library=%r release=%r",
            event.channel,
            event.container_format,
            event.format,
            event.codec_id,
            event.profile,
            event.codec_library,
            event.release_name,
        )

    def seen_count(self) -> int:
        with self._lock:
            return len(self._seen)
