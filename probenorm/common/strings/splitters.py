from typing import List

def csv_to_list(v: str | List[str] | None) -> List[str]:
    """Accept "mkv, mp4" from env or ["mkv", "mp4"] from code; drop blanks."""
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(s).strip() for s in v if s is not None and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]
