# probenorm/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple


@dataclass
class ProbeReport:
    """Counters for a batch probe + normalize run."""
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    planned: int = 0
    probed_ok: int = 0
    not_supported: int = 0     # extensions we skip
    missing_files: int = 0
    tool_missing: int = 0
    errors: int = 0
    # Each tuple is (path, message)
    error_details: List[Tuple[str, str]] = field(default_factory=list)

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def add_error(self, subject: str, message: str) -> None:
        self.error_details.append((subject, message))
