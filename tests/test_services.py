from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from coursegate.config import settings
from coursegate.models import Batch, Course
from coursegate.services.catalog import course_card, course_detail
from coursegate.services.clock import resolve_viewer_now
from coursegate.services.youtube import embed_url, extract_youtube_id

MONDAY_0710 = datetime(2025, 1, 6, 7, 10)
MONDAY_1200 = datetime(2025, 1, 6, 12, 0)


def _course() -> Course:
    return Course(
        id=1,
        title="Morning Energizing Flow",
        description="Gentle flowing movements.",
        content="Morning yoga practices...",
        video_id="dQw4w9WgXcQ",
        duration=60,
        languages=["english", "hindi"],
        batches=[
            Batch("Batch 1", "07:00", ["Monday", "Wednesday", "Friday"]),
            Batch("Batch 2", "18:00", ["Tuesday", "Thursday"]),
        ],
    )


# ------------------------------------------------------------------
# Viewer clock
# ------------------------------------------------------------------


def test_explicit_local_time_keeps_wall_clock() -> None:
    now = resolve_viewer_now("2025-01-06T07:10:00+05:30")
    assert now == MONDAY_0710
    assert now.tzinfo is None


def test_explicit_local_time_wins_over_timezone() -> None:
    assert resolve_viewer_now("2025-01-06T07:10", "Asia/Kolkata") == MONDAY_0710


def test_timezone_gives_naive_local_now() -> None:
    now = resolve_viewer_now(tz="Asia/Kolkata")
    expected = datetime.now(ZoneInfo("Asia/Kolkata")).replace(tzinfo=None)
    assert now.tzinfo is None
    assert abs(expected - now) < timedelta(minutes=1)


def test_default_timezone_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "default_timezone", "Not/AZone")
    with pytest.raises(ValueError, match="Unknown timezone"):
        resolve_viewer_now()


@pytest.mark.parametrize("at,tz", [("yesterday", None), (None, "Mars/Olympus_Mons")])
def test_bad_clock_parameters(at: str | None, tz: str | None) -> None:
    with pytest.raises(ValueError):
        resolve_viewer_now(at, tz)


# ------------------------------------------------------------------
# YouTube references
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "value",
    [
        "dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?t=42",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "  https://www.youtube.com/v/dQw4w9WgXcQ  ",
    ],
)
def test_extract_youtube_id(value: str) -> None:
    assert extract_youtube_id(value) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("value", ["", None, "https://example.com/video", "https://youtu.be/short"])
def test_extract_youtube_id_rejects(value: str | None) -> None:
    assert extract_youtube_id(value) is None


def test_embed_url() -> None:
    assert embed_url("dQw4w9WgXcQ") == "https://www.youtube.com/embed/dQw4w9WgXcQ"


# ------------------------------------------------------------------
# Presentation
# ------------------------------------------------------------------


def test_course_card_live_badges() -> None:
    card = course_card(_course(), MONDAY_0710)
    assert card["accessible"] is True
    assert card["action"] == "Access Course"
    assert [b["badge"] for b in card["batches"]] == ["Live Now", "Scheduled"]
    assert card["batches"][1]["schedule"] == "18:00 on Tuesday, Thursday"
    assert card["languages"][0] == {"id": "english", "label": "English"}


def test_course_card_scheduled() -> None:
    card = course_card(_course(), MONDAY_1200)
    assert card["accessible"] is False
    assert card["action"] == "View Course"


def test_detail_open_batch_has_player() -> None:
    detail = course_detail(_course(), MONDAY_0710)
    assert detail["selected_batch"] == "Batch 1"
    assert detail["player"]["video_id"] == "dQw4w9WgXcQ"
    assert detail["locked"] is None


def test_detail_locked_falls_back_to_first_batch_without_video() -> None:
    detail = course_detail(_course(), MONDAY_1200)
    assert detail["selected_batch"] == "Batch 1"
    assert detail["player"] is None
    assert detail["locked"] == {
        "batch_name": "Batch 1",
        "time": "07:00",
        "days": ["Monday", "Wednesday", "Friday"],
        "schedule": "07:00 on Monday, Wednesday, Friday",
    }
    assert "dQw4w9WgXcQ" not in str(detail)


def test_detail_explicit_locked_tab() -> None:
    detail = course_detail(_course(), MONDAY_0710, selected="Batch 2")
    assert detail["selected_batch"] == "Batch 2"
    assert detail["player"] is None
    assert detail["locked"]["schedule"] == "18:00 on Tuesday, Thursday"
    assert detail["accessible"] is True


def test_detail_unknown_tab_uses_auto_selection() -> None:
    detail = course_detail(_course(), MONDAY_0710, selected="Batch 9")
    assert detail["selected_batch"] == "Batch 1"
    assert detail["player"] is not None
