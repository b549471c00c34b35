import logging
from concurrent.futures import ThreadPoolExecutor

from probenorm.domain.dataclasses.codec import UnknownCodecEvent
from probenorm.domain.enums.stream_kind import StreamKind
from probenorm.services.diagnostics.log_sink import LoggingDiagnosticsSink

LOGGER = "probenorm.diagnostics"


def _event(fmt="xyz123", kind=StreamKind.audio):
    return UnknownCodecEvent(kind=kind, format=fmt, codec_id="abcd", container_format="Matroska / WebM")


def test_first_sighting_is_a_warning(caplog):
    sink = LoggingDiagnosticsSink(dedupe=True)
    with caplog.at_level(logging.DEBUG, logger=LOGGER):
        sink.unknown_codec(_event())
        sink.unknown_codec(_event())
    levels = [r.levelno for r in caplog.records if r.name == LOGGER]
    assert levels == [logging.WARNING, logging.DEBUG]
    assert "UnknownAudioFormatFFProbe" in caplog.records[0].getMessage()
    assert "xyz123" in caplog.records[0].getMessage()


def test_without_dedupe_every_event_warns(caplog):
    sink = LoggingDiagnosticsSink(dedupe=False)
    with caplog.at_level(logging.DEBUG, logger=LOGGER):
        sink.unknown_codec(_event())
        sink.unknown_codec(_event())
    levels = [r.levelno for r in caplog.records if r.name == LOGGER]
    assert levels == [logging.WARNING, logging.WARNING]


def test_signatures_differ_by_kind():
    sink = LoggingDiagnosticsSink(dedupe=True)
    sink.unknown_codec(_event(kind=StreamKind.audio))
    sink.unknown_codec(_event(kind=StreamKind.video))
    assert sink.seen_count() == 2


def test_concurrent_use():
    sink = LoggingDiagnosticsSink(dedupe=True)
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: sink.unknown_codec(_event(fmt=f"fmt{i % 5}")), range(200)))
    assert sink.seen_count() == 5
