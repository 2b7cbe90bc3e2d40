"""Append-only debug log shared by the order core and the Textual app."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from app.config import resolve_debug_log_path


def log_debug(message: str) -> None:
    """Append one timestamped line to the debug log."""
    try:
        ts = datetime.now(timezone.utc).isoformat()
        log_path = Path(resolve_debug_log_path())
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except OSError:
        # Logging must never interfere with order flow.
        return
