import json
from pathlib import Path
from typing import Any, Dict, Optional

# Path to the JSON-lines audit log; None disables it. Set from settings at startup.
_LOG_PATH: Optional[Path] = None


def set_log_path(path: Optional[str | Path]) -> None:
    """Override the log file path (useful for tests). ``None`` disables the log."""
    global _LOG_PATH
    _LOG_PATH = Path(path) if path else None


def get_log_path() -> Optional[Path]:
    """Return the current log file path."""
    return _LOG_PATH


def log_event(event: str, data: Dict[str, Any], *, identity: Optional[str] = None) -> None:
    """Append an event to the log as a JSON line.

    The write is synchronous and runs on the event loop, so the log stays off
    unless ``CARE360_EVENT_LOG_PATH`` is set.

    Parameters
    ----------
    event:
        Type of the event (e.g., "command", "callback").
    data:
        Arbitrary JSON-serializable payload.
    identity:
        Masked bot identity the event was handled by.
    """
    if _LOG_PATH is None:
        return
    record = {"identity": identity, "event": event, **data}
    _LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with _LOG_PATH.open("a", encoding="utf-8") as f:
        json.dump(record, f, ensure_ascii=False)
        f.write("\n")
