from __future__ import annotations
from typing import Protocol
from probenorm.domain.dataclasses.codec import UnknownCodecEvent

class DiagnosticsPort(Protocol):
    """Fire-and-forget sink for codec signatures no rule recognized."""
    def unknown_codec(self, event: UnknownCodecEvent) -> None: ...
