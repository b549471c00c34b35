from probenorm.services.schemas.mediainfo import (
    FFprobeDocument,
    FFprobeFormat,
    FFprobeStream,
    MediaInfoRead,
    NormalizeRequest,
    ProbeRequest,
)

__all__ = [
    "FFprobeDocument",
    "FFprobeFormat",
    "FFprobeStream",
    "MediaInfoRead",
    "NormalizeRequest",
    "ProbeRequest",
]
