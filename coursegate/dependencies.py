from datetime import datetime

from fastapi import HTTPException, Query

from coursegate.config import settings
from coursegate.services.clock import resolve_viewer_now
from coursegate.store import CourseStore


def get_store() -> CourseStore:
    return CourseStore(settings.database_path)


def viewer_now(
    at: str | None = Query(None, description="Viewer's local time, ISO 8601"),
    tz: str | None = Query(None, description="Viewer's IANA timezone"),
) -> datetime:
    """The viewer's wall clock, from request parameters."""
    try:
        return resolve_viewer_now(at, tz)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
