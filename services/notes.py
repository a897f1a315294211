from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from constants import NOTE_TTL_HOURS
from logging_config import get_logger
from store import MockCollection

logger = get_logger(__name__)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def purge_expired_notes(
    notes: MockCollection,
    now: Optional[datetime] = None,
    ttl_hours: int = NOTE_TTL_HOURS,
) -> List[Dict[str, Any]]:
    """Delete notes created more than ``ttl_hours`` ago.

    Notes whose ``created_at`` cannot be parsed are kept.
    """
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(hours=ttl_hours)

    def expired(note: Dict[str, Any]) -> bool:
        created_at = _parse_timestamp(note.get("created_at"))
        if created_at is None:
            logger.warning(f"Note {note.get('id')} has unreadable created_at {note.get('created_at')!r}, keeping it")
            return False
        return created_at <= cutoff

    removed = notes.remove_where(expired)
    logger.info(f"Note cleanup removed {len(removed)} note(s) older than {ttl_hours}h")
    return removed
