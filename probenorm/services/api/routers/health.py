# probenorm/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter
from probenorm.common.settings import get_settings
from probenorm.domain.entities.media_info import CURRENT_SCHEMA_REVISION, MINIMUM_SUPPORTED_SCHEMA_REVISION

router = APIRouter()

@router.get("/healthz")
def healthz():
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "schema_revision": CURRENT_SCHEMA_REVISION,
        "minimum_schema_revision": MINIMUM_SUPPORTED_SCHEMA_REVISION,
    }
