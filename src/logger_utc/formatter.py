from datetime import datetime, timezone

TIMESTAMP_FORMAT = "[%Y-%m-%d] - [%H:%M-%S]"
DATE_FORMAT = "%Y-%m-%d"

def utc_now(now: datetime | None = None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    # naive datetimes are taken as UTC already
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)

def format_timestamp(now: datetime | None = None) -> str:
    return utc_now(now).strftime(TIMESTAMP_FORMAT)

def format_date(now: datetime | None = None) -> str:
    return utc_now(now).strftime(DATE_FORMAT)

def compose_line(prefix: str, message: str) -> str:
    return f"{prefix} - {message}"

def make_line(message: str, now: datetime | None = None) -> str:
    """Timestamped log line for `message`, without a trailing newline."""
    return compose_line(format_timestamp(now), message)
