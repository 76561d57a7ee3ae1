"""Locations of the tracker directory, database and artifacts."""

from __future__ import annotations

from pathlib import Path

TT_DIR = ".tt"
DB_FILE = "tt.db"
ARTIFACTS_DIR = "artifacts"


def get_tt_dir() -> Path:
    """The tracker directory, relative to the current directory."""
    return Path(TT_DIR)


def get_db_path() -> Path:
    """The database file, relative to the current directory."""
    return get_tt_dir() / DB_FILE


def find_db_path(start: str | Path | None = None) -> Path | None:
    """Search upward from ``start`` (default: the current directory) for the database."""
    base = Path(start) if start is not None else Path.cwd()
    base = base.resolve()
    for directory in (base, *base.parents):
        candidate = directory / TT_DIR / DB_FILE
        if candidate.exists():
            return candidate
    return None


def get_artifacts_dir(start: str | Path | None = None) -> Path | None:
    """The artifacts directory next to the database found from ``start``."""
    db_path = find_db_path(start)
    if db_path is None:
        return None
    return db_path.parent / ARTIFACTS_DIR


def is_initialized(start: str | Path | None = None) -> bool:
    """Whether a database exists at or above ``start``."""
    return find_db_path(start) is not None