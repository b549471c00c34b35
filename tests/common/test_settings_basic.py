from probenorm.common.settings import Settings


def test_settings_defaults(fresh_settings, monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    cfg = fresh_settings()
    assert cfg.app_name == "probenorm"
    assert cfg.api.prefix == "/api"
    assert cfg.ffprobe.timeout_sec >= 1
    assert cfg.concurrency.ffprobe_workers >= 1
    assert "mkv" in cfg.video_exts


def test_settings_cached(fresh_settings):
    assert fresh_settings() is fresh_settings()


def test_settings_env_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("FFPROBE__BIN", "/opt/ffmpeg/bin/ffprobe")
    monkeypatch.setenv("FFPROBE__TIMEOUT_SEC", "5")
    monkeypatch.setenv("DIAGNOSTICS__DEDUPE_UNKNOWN_CODECS", "no")

    cfg = fresh_settings()
    assert cfg.app_env == "test"
    assert cfg.ffprobe.bin == "/opt/ffmpeg/bin/ffprobe"
    assert cfg.ffprobe.timeout_sec == 5
    assert cfg.diagnostics.dedupe_unknown_codecs is False


def test_video_exts_accepts_csv(monkeypatch):
    monkeypatch.setenv("VIDEO_EXTS", " .MKV, mp4 ,, avi ")
    cfg = Settings()
    assert cfg.video_exts == ["mkv", "mp4", "avi"]
