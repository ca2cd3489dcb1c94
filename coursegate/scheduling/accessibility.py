"""Decide whether a course's batches are open at the viewer's local clock.

A batch stores a wall-clock ``time`` ("HH:MM") and a list of weekday names.
The same stored value means the same local time for every viewer, so the
functions here never convert timezones: they read the weekday, hour and
minute straight off the ``now`` they are given.

Everything is pure and recomputed per call.  Malformed batches are treated
as closed rather than raising.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from coursegate.models import WEEKDAYS, Batch

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


@dataclass(frozen=True)
class BatchSelection:
    batch: Batch
    accessible: bool


def parse_time(value: object) -> tuple[int, int] | None:
    """'07:30' -> (7, 30).  Returns None for anything that is not H:MM / HH:MM."""
    if not isinstance(value, str):
        return None
    match = _TIME_RE.match(value)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour, minute


def _days(batch: Batch) -> list[str]:
    days = getattr(batch, "days", None)
    if not isinstance(days, (list, tuple, set)):
        return []
    return list(days)


def weekday_name(now: datetime) -> str:
    """English day name for *now*, independent of the process locale."""
    return WEEKDAYS[now.weekday()]


def is_batch_accessible(batch: Batch, now: datetime) -> bool:
    """Apply the access window rule to a single batch.

    The whole scheduled clock hour is open.  The half hour before it opens
    only when the scheduled minute is <= 30, and the half hour after it only
    when the scheduled minute is >= 30.  So a 07:00 batch is open from 06:30
    to 07:59, but not at 08:00.
    """
    if weekday_name(now) not in _days(batch):
        return False

    scheduled = parse_time(getattr(batch, "time", None))
    if scheduled is None:
        return False
    hours, minutes = scheduled

    if now.hour == hours:
        return True
    if now.hour == hours - 1 and now.minute >= 30 and minutes <= 30:
        return True
    if now.hour == hours + 1 and now.minute <= 30 and minutes >= 30:
        return True
    return False


def accessible_batches(batches: Sequence[Batch] | None, now: datetime) -> list[Batch]:
    """Batches open at *now*, in list order."""
    return [b for b in batches or [] if is_batch_accessible(b, now)]


def is_accessible(batches: Sequence[Batch] | None, now: datetime) -> bool:
    """True when any batch of the course is open at *now*."""
    return any(is_batch_accessible(b, now) for b in batches or [])


def select_batch(batches: Sequence[Batch] | None, now: datetime) -> BatchSelection | None:
    """Pick the batch a viewer lands on.

    First open batch in list order; otherwise the first batch, flagged as
    locked.  None only when there are no batches at all.
    """
    if not batches:
        return None
    for batch in batches:
        if is_batch_accessible(batch, now):
            return BatchSelection(batch=batch, accessible=True)
    return BatchSelection(batch=batches[0], accessible=False)


def schedule_label(batch: Batch) -> str:
    """'07:00 on Monday, Wednesday, Friday'"""
    time = getattr(batch, "time", None) or ""
    return f"{time} on {', '.join(str(d) for d in _days(batch))}"
