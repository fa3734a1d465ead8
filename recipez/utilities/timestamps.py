from datetime import datetime, timezone

from recipez.utilities.constants import TIMESTAMP_TIMESPEC


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with a 'Z' suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec=TIMESTAMP_TIMESPEC).replace('+00:00', 'Z')
