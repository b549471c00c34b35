# probenorm/services/mediainfo/normalizer.py
from __future__ import annotations

from typing import Optional, Sequence

from probenorm.common.logging import get_logger
from probenorm.domain.dataclasses.codec import CodecSignature
from probenorm.domain.entities.media_info import CURRENT_SCHEMA_REVISION, NormalizedMediaInfo
from probenorm.domain.entities.probe import ProbeResult, StreamDescriptor
from probenorm.domain.policies.audio_channels import resolve_audio_channels
from probenorm.domain.policies.codec_rules import build_audio_classifier, build_video_classifier
from probenorm.domain.policies.dynamic_range import classify_dynamic_range
from probenorm.domain.policies.languages import aggregate_languages
from probenorm.domain.policies.runtime import reconcile_runtime
from probenorm.domain.policies.stream_selector import select_primaries
from probenorm.domain.ports.diagnostics import DiagnosticsPort

logger = get_logger(__name__)

INTERLACED_FIELD_ORDERS = frozenset({"tt", "bb", "tb", "bt"})


def _languages_of(streams: Optional[Sequence[StreamDescriptor]]):
    if streams is None:
        return None
    return aggregate_languages(s.language for s in streams)


def _scan_type(video: Optional[StreamDescriptor]) -> Optional[str]:
    if video is None:
        return None
    if (video.field_order or "").lower() in INTERLACED_FIELD_ORDERS:
        return "Interlaced"
    return "Progressive"


class MediaInfoNormalizer:
    """
    Builds one NormalizedMediaInfo per ProbeResult.

    Stateless apart from the diagnostics sink, so a single instance can be
    shared by worker threads. `release_name` is only used to disambiguate
    AVC/HEVC/MPEG-4 labels when the stream metadata does not say.
    """

    def __init__(self, diagnostics: Optional[DiagnosticsPort] = None) -> None:
        self.video_classifier = build_video_classifier(diagnostics)
        self.audio_classifier = build_audio_classifier(diagnostics)

    def normalize(self, probe: ProbeResult, release_name: Optional[str] = None) -> NormalizedMediaInfo:
        primary = select_primaries(probe)
        video, audio = primary.video, primary.audio
        container_format = probe.container.format_long_name or probe.container.format_name

        video_codec = None
        dynamic_range = ""
        if video is not None:
            video_codec = self.video_classifier.classify(
                CodecSignature.of(
                    video.format,
                    video.codec_id,
                    video.profile,
                    video.codec_library,
                    container_format,
                ),
                release_name,
            )
            dynamic_range = classify_dynamic_range(
                video.codec_id,
                video.bit_depth,
                video.colour_primaries,
                video.transfer_characteristics,
            )

        audio_codec = None
        audio_channels = 0.0
        if audio is not None:
            audio_codec = self.audio_classifier.classify(
                CodecSignature.of(
                    audio.format,
                    audio.codec_id,
                    audio.profile,
                    audio.codec_library,
                    container_format,
                ),
                release_name,
            )
            audio_channels = resolve_audio_channels(audio.channel_layout, audio.channels, audio.format)

        run_time = reconcile_runtime(
            audio.duration if audio else None,
            video.duration if video else None,
            probe.container.duration,
        )

        info = NormalizedMediaInfo(
            container_format=container_format,
            video_format=video.format if video else None,
            video_codec_id=video.codec_id if video else None,
            video_profile=video.profile if video else None,
            video_codec=video_codec,
            video_dynamic_range=dynamic_range,
            width=(video.width or 0) if video else 0,
            height=(video.height or 0) if video else 0,
            video_bit_depth=(video.bit_depth or 0) if video else 0,
            video_bitrate=(video.bitrate or 0) if video else 0,
            video_fps=(video.frame_rate or 0.0) if video else 0.0,
            video_multi_view_count=len(probe.video_streams or ()),
            scan_type=_scan_type(video),
            audio_format=audio.format if audio else None,
            audio_codec_id=audio.codec_id if audio else None,
            audio_profile=audio.profile if audio else None,
            audio_codec=audio_codec,
            audio_bitrate=(audio.bitrate or 0) if audio else 0,
            audio_stream_count=len(probe.audio_streams or ()),
            audio_channels=audio_channels,
            audio_channel_positions=audio.channel_layout if audio else None,
            run_time=run_time,
            audio_languages=_languages_of(probe.audio_streams),
            subtitle_languages=_languages_of(probe.subtitle_streams),
            schema_revision=CURRENT_SCHEMA_REVISION,
        )
        logger.debug(
            "normalized: video=%s audio=%s channels=%s hdr=%r runtime=%.3fs",
            info.video_codec, info.audio_codec, info.audio_channels, info.video_dynamic_range, info.run_time,
        )
        return info
