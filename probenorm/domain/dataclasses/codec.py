# probenorm/domain/dataclasses/codec.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from probenorm.domain.enums.stream_kind import StreamKind


def split_format(raw: Optional[str]) -> Tuple[str, ...]:
    """Probe formats may list aliases joined by " / " (e.g. "AC-3 / ac3")."""
    if raw is None:
        return ()
    return tuple(p for p in raw.strip().split(" / ") if p)


@dataclass(frozen=True)
class CodecSignature:
    """Raw codec strings of one primary stream, as fed to a CodecClassifier."""
    format: Optional[str]
    codec_id: str = ""
    profile: str = ""
    codec_library: str = ""
    container_format: Optional[str] = None
    tokens: Tuple[str, ...] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "tokens", split_format(self.format))

    @classmethod
    def of(
        cls,
        format: Optional[str],
        codec_id: Optional[str] = None,
        profile: Optional[str] = None,
        codec_library: Optional[str] = None,
        container_format: Optional[str] = None,
    ) -> "CodecSignature":
        return cls(
            format=format,
            codec_id=codec_id or "",
            profile=profile or "",
            codec_library=codec_library or "",
            container_format=container_format,
        )

    # ---- matching helpers used by the rule tables -----------------------------
    def has_token(self, *names: str) -> bool:
        """Whole-token, case-insensitive match against the split format."""
        wanted = {n.lower() for n in names}
        return any(t.lower() in wanted for t in self.tokens)

    def codec_id_contains(self, *needles: str) -> bool:
        cid = self.codec_id.lower()
        return any(n.lower() in cid for n in needles)

    def library_startswith(self, prefix: str) -> bool:
        return self.codec_library.lower().startswith(prefix.lower())


@dataclass(frozen=True)
class UnknownCodecEvent:
    """Emitted when no rule matched a codec signature."""
    kind: StreamKind
    format: Optional[str]
    codec_id: str = ""
    profile: str = ""
    codec_library: str = ""
    container_format: Optional[str] = None
    release_name: Optional[str] = None

    @property
    def channel(self) -> str:
        return "UnknownVideoFormatFFProbe" if self.kind == StreamKind.video else "UnknownAudioFormatFFProbe"

    @property
    def signature(self) -> Tuple[str, ...]:
        """Dedupe key: the raw strings that would need a new rule."""
        return (self.kind.value, self.format or "", self.codec_id, self.profile, self.codec_library)
