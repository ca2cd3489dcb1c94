import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from coursegate.dependencies import get_store, viewer_now
from coursegate.models import LANGUAGES, Course
from coursegate.scheduling import is_batch_accessible
from coursegate.services.catalog import course_card, course_detail
from coursegate.store import CourseStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["courses"])


class ViewCreate(BaseModel):
    batch_name: str


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


async def _get_active_course_or_404(store: CourseStore, course_id: int) -> Course:
    course = await store.get_course(course_id)
    if course is None or course.status != "active":
        raise HTTPException(status_code=404, detail=f"Course {course_id} not found")
    return course


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------


@router.get("/languages")
async def list_languages() -> list[dict]:
    return [{"id": lang, "label": label} for lang, label in LANGUAGES.items()]


@router.get("/courses")
async def list_courses(
    language: str | None = None,
    now: datetime = Depends(viewer_now),
    store: CourseStore = Depends(get_store),
) -> list[dict]:
    """Active courses with per-batch live/scheduled state at the viewer's clock."""
    if language == "all":
        language = None
    courses = await store.list_courses(language=language)
    return [course_card(course, now) for course in courses]


@router.get("/courses/{course_id}")
async def get_course(
    course_id: int,
    batch: str | None = None,
    now: datetime = Depends(viewer_now),
    store: CourseStore = Depends(get_store),
) -> dict:
    """Course detail; the player is only filled in when the selected batch is open."""
    course = await _get_active_course_or_404(store, course_id)
    return course_detail(course, now, selected=batch)


@router.post("/courses/{course_id}/views")
async def record_view(
    course_id: int,
    body: ViewCreate,
    now: datetime = Depends(viewer_now),
    store: CourseStore = Depends(get_store),
) -> dict:
    """Count one view of a batch. Only open batches can be watched."""
    course = await _get_active_course_or_404(store, course_id)
    batch = next((b for b in course.batches if b.batch_name == body.batch_name), None)
    if batch is None:
        raise HTTPException(
            status_code=404,
            detail=f"Batch '{body.batch_name}' not found in course {course_id}",
        )
    if not is_batch_accessible(batch, now):
        logger.info(
            "Refused view of locked batch %r of course %s at %s",
            batch.batch_name, course_id, now.isoformat(timespec="minutes"),
        )
        raise HTTPException(
            status_code=403,
            detail=f"Batch '{batch.batch_name}' is not accessible now",
        )

    views = await store.record_view(course_id, batch.batch_name)
    return {"course_id": course_id, "batch_name": batch.batch_name, "views": views}
