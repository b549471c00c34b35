# probenorm/services/mediainfo/batch.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple

from probenorm.common.concurrency.thread_manager import ThreadManager
from probenorm.common.logging import get_logger
from probenorm.common.settings import get_settings
from probenorm.domain.dataclasses.reports import ProbeReport
from probenorm.domain.entities.media_info import NormalizedMediaInfo
from probenorm.domain.ports.probe import MediaProbePort
from probenorm.services.mediainfo.normalizer import MediaInfoNormalizer
from probenorm.services.probe.errors import (
    MediaFileNotFoundError,
    ProbeToolNotFoundError,
    SourceUnavailableError,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class _Outcome:
    path: Path
    info: Optional[NormalizedMediaInfo] = None
    error: Optional[SourceUnavailableError] = None


class BatchProbeRunner:
    """
    Probe + normalize many files on a bounded thread pool.
    Per-file source failures are counted in the ProbeReport, never raised.
    """

    def __init__(
        self,
        probe: MediaProbePort,
        normalizer: Optional[MediaInfoNormalizer] = None,
        workers: Optional[int] = None,
    ) -> None:
        cfg = get_settings()
        self.probe = probe
        self.normalizer = normalizer or MediaInfoNormalizer()
        self.workers = max(1, int(workers or cfg.concurrency.ffprobe_workers or 1))
        self.max_queue = cfg.concurrency.thread_queue_maxsize
        self.video_exts = set(cfg.video_exts)

    def is_supported(self, path: Path) -> bool:
        return path.suffix.lower().lstrip(".") in self.video_exts

    def _one(self, item: Tuple[Path, Optional[str]]) -> _Outcome:
        path, release_name = item
        try:
            probed = self.probe.probe(path)
        except SourceUnavailableError as e:
            return _Outcome(path=path, error=e)
        return _Outcome(path=path, info=self.normalizer.normalize(probed, release_name or path.name))

    def run(
        self,
        paths: Iterable[Path | str],
        release_names: Optional[Mapping[str, str]] = None,
    ) -> Tuple[Dict[Path, NormalizedMediaInfo], ProbeReport]:
        """
        `release_names` maps str(path) -> release name hint; by default the
        file name itself is the hint.
        """
        rep = ProbeReport()
        rep.start()
        names = dict(release_names or {})

        todo = []
        for p in paths:
            path = Path(p)
            rep.planned += 1
            if not self.is_supported(path):
                rep.not_supported += 1
                continue
            todo.append((path, names.get(str(path))))

        results: Dict[Path, NormalizedMediaInfo] = {}
        with ThreadManager(name="probe", max_workers=self.workers, max_queue=self.max_queue) as tm:
            for out in tm.imap_unordered(self._one, todo):
                if out.info is not None:
                    results[out.path] = out.info
                    rep.probed_ok += 1
                    continue
                if isinstance(out.error, MediaFileNotFoundError):
                    rep.missing_files += 1
                elif isinstance(out.error, ProbeToolNotFoundError):
                    rep.tool_missing += 1
                else:
                    rep.errors += 1
                rep.add_error(str(out.path), str(out.error))
                logger.warning("probe failed for %s: %s", out.path, out.error)

        rep.stop()
        return results, rep
