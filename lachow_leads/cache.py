import hashlib
import json
import time
from pathlib import Path
from typing import Any, Optional


def search_cache_key(query: str, num_results: int) -> str:
    raw = f"serpapi::{query.strip()}::{int(num_results)}"
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()[:16]


def load_cached_payload(cache_dir: str, key: str, max_age_s: Optional[float] = None) -> Optional[dict]:
    """Return a cached search payload, or None when missing, stale or unreadable."""
    p = Path(cache_dir) / f"{key}.json"
    if not p.exists():
        return None
    if max_age_s is not None and time.time() - p.stat().st_mtime > max_age_s:
        return None
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    return data if isinstance(data, dict) else None


def store_payload(cache_dir: str, key: str, payload: Any) -> str:
    Path(cache_dir).mkdir(parents=True, exist_ok=True)
    p = Path(cache_dir) / f"{key}.json"
    p.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return str(p)
