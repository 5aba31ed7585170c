"""
Nominatim search results kept as json-on-disk, with atomic writes, a TTL
and a file lock per entry.
"""
from __future__ import annotations
import datetime as _dt
import hashlib
import json, os, shutil, tempfile
from pathlib import Path
from typing import Any

import structlog
from filelock import FileLock

from config import BOUNDARY_DIR, CACHE_PURGE_D, LOCK_TIMEOUT_SEC

logger = structlog.get_logger(__name__)


def _now() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ───────────────────────────────── helpers ──────────────────────────────────
def _atomic_write(path: Path, data: dict) -> None:
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
    with os.fdopen(fd, "w", encoding="utf-8") as fh:
        json.dump(data, fh, ensure_ascii=False)
    shutil.move(tmp, path)                       # atomic rename on same FS


def _read(path: Path) -> dict | None:
    """Parsed entry, or None when the file is gone or unreadable (and then removed)."""
    try:
        meta = json.loads(path.read_text(encoding="utf-8"))
        meta["ts"] = _dt.datetime.fromisoformat(meta["ts"])
        if meta["ts"].tzinfo is None:
            raise ValueError("timestamp without timezone")
        return meta
    except FileNotFoundError:
        return None
    except (ValueError, KeyError, TypeError) as exc:
        logger.warning("boundary_cache_corrupt", path=str(path), error=str(exc))
        path.unlink(missing_ok=True)
        return None


def purge_expired(max_age_d: int = CACHE_PURGE_D) -> int:
    """Drop entries older than *max_age_d* days; returns how many went."""
    cutoff  = _now() - _dt.timedelta(days=max_age_d)
    removed = 0
    for fp in BOUNDARY_DIR.glob("*.json"):
        meta = _read(fp)
        if meta is None:
            removed += 1
        elif meta["ts"] < cutoff:
            fp.unlink(missing_ok=True)
            removed += 1
    if removed:
        logger.info("boundary_cache_purged", removed=removed)
    return removed


# ───────────────────────────────── public api ───────────────────────────────
def cache_key(query: str) -> str:
    return hashlib.sha1(query.encode("utf-8")).hexdigest()


def cache_path(key: str) -> Path:
    return BOUNDARY_DIR / f"{key}.json"


def load(key: str, max_age_h: int) -> list[dict[str, Any]] | None:
    meta = _read(cache_path(key))
    if meta is None:
        return None
    if _now() - meta["ts"] < _dt.timedelta(hours=max_age_h):
        return meta["raw"]
    return None


def save(key: str, raw: list[dict[str, Any]]) -> None:
    payload = {"ts": _now().isoformat(), "raw": raw}
    _atomic_write(cache_path(key), payload)
    purge_expired()


def with_lock(path: Path) -> FileLock:
    """Return a FileLock guarding *path* (json) with sane timeout."""
    return FileLock(str(path) + ".lock", timeout=LOCK_TIMEOUT_SEC)
