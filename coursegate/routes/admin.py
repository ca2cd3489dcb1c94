import logging
from dataclasses import asdict
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator, model_validator

from coursegate.auth import require_admin
from coursegate.dependencies import get_store
from coursegate.models import LANGUAGES, WEEKDAYS, Batch, CourseDraft
from coursegate.scheduling import parse_time
from coursegate.services.youtube import extract_youtube_id
from coursegate.store import CourseStore

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)]
)


# ------------------------------------------------------------------
# Request bodies
# ------------------------------------------------------------------


class BatchIn(BaseModel):
    batch_name: str | None = None
    time: str
    days: list[str]

    @field_validator("time")
    @classmethod
    def _normalise_time(cls, value: str) -> str:
        parsed = parse_time(value)
        if parsed is None:
            raise ValueError("time must be a 24-hour HH:MM value")
        return f"{parsed[0]:02d}:{parsed[1]:02d}"

    @field_validator("days")
    @classmethod
    def _check_days(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("select at least one day")
        unknown = [d for d in value if d not in WEEKDAYS]
        if unknown:
            raise ValueError(f"unknown day(s): {', '.join(unknown)}")
        return list(dict.fromkeys(value))


class CourseIn(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    content: str = ""
    video: str
    duration: int = Field(default=60, ge=1, le=600)
    languages: list[str] = ["english"]
    batches: list[BatchIn] = Field(min_length=1)

    @field_validator("video")
    @classmethod
    def _extract_video_id(cls, value: str) -> str:
        video_id = extract_youtube_id(value)
        if video_id is None:
            raise ValueError("not a valid YouTube link or video id")
        return video_id

    @field_validator("languages")
    @classmethod
    def _check_languages(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("select at least one language")
        unknown = [lang for lang in value if lang not in LANGUAGES]
        if unknown:
            raise ValueError(f"unsupported language(s): {', '.join(unknown)}")
        return list(dict.fromkeys(value))

    @model_validator(mode="after")
    def _name_batches(self) -> "CourseIn":
        for index, batch in enumerate(self.batches):
            if not batch.batch_name or not batch.batch_name.strip():
                batch.batch_name = f"Batch {index + 1}"
            else:
                batch.batch_name = batch.batch_name.strip()
        names = [b.batch_name for b in self.batches]
        if len(set(names)) != len(names):
            raise ValueError("batch names must be unique within a course")
        return self

    def to_draft(self) -> CourseDraft:
        return CourseDraft(
            title=self.title,
            description=self.description,
            content=self.content,
            video_id=self.video,
            duration=self.duration,
            languages=self.languages,
            batches=[Batch(b.batch_name, b.time, b.days) for b in self.batches],
        )


class StatusUpdate(BaseModel):
    status: Literal["active", "inactive"]


# ------------------------------------------------------------------
# Course endpoints
# ------------------------------------------------------------------


@router.get("/courses")
async def list_courses(store: CourseStore = Depends(get_store)) -> list[dict]:
    courses = await store.list_courses(include_inactive=True)
    return [asdict(course) for course in courses]


@router.post("/courses", status_code=201)
async def create_course(body: CourseIn, store: CourseStore = Depends(get_store)) -> dict:
    course = await store.create_course(body.to_draft())
    return asdict(course)


@router.put("/courses/{course_id}")
async def update_course(
    course_id: int, body: CourseIn, store: CourseStore = Depends(get_store)
) -> dict:
    course = await store.update_course(course_id, body.to_draft())
    if course is None:
        raise HTTPException(status_code=404, detail=f"Course {course_id} not found")
    return asdict(course)


@router.delete("/courses/{course_id}")
async def delete_course(course_id: int, store: CourseStore = Depends(get_store)) -> dict:
    if not await store.delete_course(course_id):
        raise HTTPException(status_code=404, detail=f"Course {course_id} not found")
    return {"id": course_id, "status": "deleted"}


@router.patch("/courses/{course_id}/status")
async def set_status(
    course_id: int, body: StatusUpdate, store: CourseStore = Depends(get_store)
) -> dict:
    course = await store.set_status(course_id, body.status)
    if course is None:
        raise HTTPException(status_code=404, detail=f"Course {course_id} not found")
    return asdict(course)


# ------------------------------------------------------------------
# Analytics
# ------------------------------------------------------------------


@router.get("/analytics")
async def analytics(store: CourseStore = Depends(get_store)) -> dict:
    """View counts per batch and per course, across all statuses."""
    courses = await store.list_courses(include_inactive=True)
    rows = []
    for course in courses:
        per_batch = {b.batch_name: course.view_stats.get(b.batch_name, 0) for b in course.batches}
        rows.append(
            {
                "id": course.id,
                "title": course.title,
                "status": course.status,
                "total_views": sum(per_batch.values()),
                "batches": per_batch,
            }
        )
    return {
        "total_views": sum(row["total_views"] for row in rows),
        "courses": rows,
    }
