# probenorm/services/api/routers/mediainfo.py
from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status

from probenorm.common.settings import get_settings
from probenorm.domain.ports.probe import MediaProbePort
from probenorm.services.api.deps import get_media_probe, get_normalizer
from probenorm.services.mappers.mediainfo import to_media_info_read
from probenorm.services.mediainfo.normalizer import MediaInfoNormalizer
from probenorm.services.probe.errors import (
    MediaFileNotFoundError,
    ProbeToolNotFoundError,
    SourceUnavailableError,
)
from probenorm.services.probe.ffprobe_adapter import parse_ffprobe_json
from probenorm.services.schemas.mediainfo import MediaInfoRead, NormalizeRequest, ProbeRequest

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/mediainfo", tags=["mediainfo"])


@router.post("/normalize", response_model=MediaInfoRead)
def normalize(
    req: NormalizeRequest,
    normalizer: MediaInfoNormalizer = Depends(get_normalizer),
) -> MediaInfoRead:
    info = normalizer.normalize(parse_ffprobe_json(req.probe.as_ffprobe_json()), req.release_name)
    return to_media_info_read(info)


@router.post("/probe", response_model=MediaInfoRead)
def probe(
    req: ProbeRequest,
    prober: MediaProbePort = Depends(get_media_probe),
    normalizer: MediaInfoNormalizer = Depends(get_normalizer),
) -> MediaInfoRead:
    path = Path(req.path)
    try:
        probed = prober.probe(path)
    except MediaFileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ProbeToolNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)) from e
    except SourceUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    info = normalizer.normalize(probed, req.release_name or path.name)
    return to_media_info_read(info)
