from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from coursegate.config import settings


def resolve_viewer_now(at: str | None = None, tz: str | None = None) -> datetime:
    """Return the viewer's local wall-clock reading as a naive datetime.

    Priority: an explicit ``at`` (ISO datetime as read off the viewer's own
    clock; any offset is dropped, the wall-clock fields are kept) > ``tz``
    (IANA zone name, current time there) > ``settings.default_timezone`` >
    server local time.

    Raises ``ValueError`` for an unparseable ``at`` or an unknown zone.
    """
    if at:
        try:
            return datetime.fromisoformat(at).replace(tzinfo=None)
        except ValueError as e:
            raise ValueError(f"Invalid local time '{at}': expected ISO format") from e

    zone_name = tz or settings.default_timezone
    if zone_name:
        try:
            zone = ZoneInfo(zone_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{zone_name}'") from e
        return datetime.now(zone).replace(tzinfo=None)

    return datetime.now()
