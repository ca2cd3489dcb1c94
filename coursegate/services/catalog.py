from datetime import datetime

from coursegate.models import LANGUAGES, Batch, Course
from coursegate.scheduling import (
    is_accessible,
    is_batch_accessible,
    schedule_label,
    select_batch,
)
from coursegate.services.youtube import embed_url

LIVE_BADGE = "Live Now"
SCHEDULED_BADGE = "Scheduled"


def _batch_view(batch: Batch, now: datetime) -> dict:
    accessible = is_batch_accessible(batch, now)
    return {
        "batch_name": batch.batch_name,
        "time": batch.time,
        "days": batch.days,
        "accessible": accessible,
        "badge": LIVE_BADGE if accessible else SCHEDULED_BADGE,
        "schedule": schedule_label(batch),
    }


def course_card(course: Course, now: datetime) -> dict:
    """Listing entry: course summary plus a live/scheduled flag per batch."""
    accessible = is_accessible(course.batches, now)
    return {
        "id": course.id,
        "title": course.title,
        "description": course.description,
        "duration": course.duration,
        "languages": [
            {"id": lang, "label": LANGUAGES.get(lang, lang)} for lang in course.languages
        ],
        "accessible": accessible,
        "action": "Access Course" if accessible else "View Course",
        "batches": [_batch_view(b, now) for b in course.batches],
    }


def course_detail(course: Course, now: datetime, selected: str | None = None) -> dict:
    """Detail page payload.

    ``selected`` is the batch tab the viewer asked for; unknown or absent
    names fall back to the automatic choice.  The video reference is only
    included when the selected batch is open.
    """
    batch = next((b for b in course.batches if b.batch_name == selected), None)
    if batch is not None:
        accessible = is_batch_accessible(batch, now)
    else:
        selection = select_batch(course.batches, now)
        batch = selection.batch if selection else None
        accessible = selection.accessible if selection else False

    player = None
    locked = None
    if batch is not None and accessible:
        player = {"video_id": course.video_id, "embed_url": embed_url(course.video_id)}
    elif batch is not None:
        locked = {
            "batch_name": batch.batch_name,
            "time": batch.time,
            "days": batch.days,
            "schedule": schedule_label(batch),
        }

    return {
        "id": course.id,
        "title": course.title,
        "description": course.description,
        "content": course.content,
        "duration": course.duration,
        "languages": course.languages,
        "accessible": is_accessible(course.batches, now),
        "batches": [_batch_view(b, now) for b in course.batches],
        "selected_batch": batch.batch_name if batch is not None else None,
        "player": player,
        "locked": locked,
        "evaluated_at": now.isoformat(timespec="minutes"),
    }
