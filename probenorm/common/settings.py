# probenorm/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Annotated, List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from probenorm.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class FFProbeConfig(BaseModel):
    timeout_sec: int = 30
    log_level: str = "error"  # quiet|panic|fatal|error|warning|info|verbose|debug|trace
    bin: str = "ffprobe"  # env: FFPROBE__BIN


class ConcurrencyConfig(BaseModel):
    ffprobe_workers: int = 4
    thread_queue_maxsize: int = 64


class DiagnosticsConfig(BaseModel):
    # Log each unknown codec signature once at WARNING, repeats at DEBUG.
    dedupe_unknown_codecs: bool = True

    @field_validator("dedupe_unknown_codecs", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "probenorm"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Allowed extensions (batch probing) --------
    video_exts: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["mkv", "mp4", "m4v", "avi", "mov", "wmv", "ts", "m2ts", "webm", "mpg", "mpeg", "vob", "flv", "ogm"]
    )

    @field_validator("video_exts", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return [e.lower().lstrip(".") for e in csv_to_list(v)]

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffprobe: FFProbeConfig = FFProbeConfig()
    concurrency: ConcurrencyConfig = ConcurrencyConfig()
    diagnostics: DiagnosticsConfig = DiagnosticsConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from probenorm.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
