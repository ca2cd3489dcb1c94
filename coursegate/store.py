import json
import logging

import aiosqlite

from coursegate.database import get_async_conn, init_db
from coursegate.models import Batch, Course, CourseDraft

logger = logging.getLogger(__name__)


class CourseStore:
    """Course repository on SQLite.

    Every method opens its own connection and closes it before returning,
    so one instance can be shared across requests.  Missing rows come back
    as ``None`` / ``False``; database errors propagate.
    """

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    async def init(self) -> None:
        await init_db(self.db_path)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_courses(
        self, *, include_inactive: bool = False, language: str | None = None
    ) -> list[Course]:
        conn = await get_async_conn(self.db_path)
        try:
            if include_inactive:
                rows = await conn.execute(
                    "SELECT * FROM courses ORDER BY created_at DESC, id DESC"
                )
            else:
                rows = await conn.execute(
                    "SELECT * FROM courses WHERE status = 'active' "
                    "ORDER BY created_at DESC, id DESC"
                )
            courses = [await self._hydrate(conn, row) for row in await rows.fetchall()]
        finally:
            await conn.close()

        if language:
            courses = [c for c in courses if language in c.languages]
        return courses

    async def get_course(self, course_id: int) -> Course | None:
        conn = await get_async_conn(self.db_path)
        try:
            return await self._get(conn, course_id)
        finally:
            await conn.close()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_course(self, draft: CourseDraft) -> Course:
        conn = await get_async_conn(self.db_path)
        try:
            cursor = await conn.execute(
                "INSERT INTO courses "
                "(title, description, content, video_id, duration, languages_json) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (
                    draft.title,
                    draft.description,
                    draft.content,
                    draft.video_id,
                    draft.duration,
                    json.dumps(draft.languages),
                ),
            )
            course_id = cursor.lastrowid
            await self._insert_batches(conn, course_id, draft.batches)
            await conn.commit()
            logger.info(
                "Created course %s (%r) with %d batches",
                course_id, draft.title, len(draft.batches),
            )
            return await self._get(conn, course_id)
        finally:
            await conn.close()

    async def update_course(self, course_id: int, draft: CourseDraft) -> Course | None:
        """Replace a course's fields and batch list.

        View counters follow batch names: names that survive the edit keep
        their counts, names that disappear lose them.
        """
        conn = await get_async_conn(self.db_path)
        try:
            cursor = await conn.execute(
                "UPDATE courses SET title = ?, description = ?, content = ?, "
                "video_id = ?, duration = ?, languages_json = ? WHERE id = ?",
                (
                    draft.title,
                    draft.description,
                    draft.content,
                    draft.video_id,
                    draft.duration,
                    json.dumps(draft.languages),
                    course_id,
                ),
            )
            if cursor.rowcount == 0:
                return None

            await conn.execute("DELETE FROM batches WHERE course_id = ?", (course_id,))
            await self._insert_batches(conn, course_id, draft.batches)

            names = [b.batch_name for b in draft.batches]
            placeholders = ", ".join("?" for _ in names)
            await conn.execute(
                f"DELETE FROM batch_views WHERE course_id = ? "
                f"AND batch_name NOT IN ({placeholders})",
                (course_id, *names),
            )
            await conn.commit()
            logger.info("Updated course %s", course_id)
            return await self._get(conn, course_id)
        finally:
            await conn.close()

    async def delete_course(self, course_id: int) -> bool:
        conn = await get_async_conn(self.db_path)
        try:
            cursor = await conn.execute("DELETE FROM courses WHERE id = ?", (course_id,))
            await conn.commit()
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("Deleted course %s", course_id)
            return deleted
        finally:
            await conn.close()

    async def set_status(self, course_id: int, status: str) -> Course | None:
        conn = await get_async_conn(self.db_path)
        try:
            cursor = await conn.execute(
                "UPDATE courses SET status = ? WHERE id = ?", (status, course_id)
            )
            if cursor.rowcount == 0:
                return None
            await conn.commit()
            logger.info("Course %s is now %s", course_id, status)
            return await self._get(conn, course_id)
        finally:
            await conn.close()

    async def record_view(self, course_id: int, batch_name: str) -> int:
        """Increment the view counter for one batch and return the new count."""
        conn = await get_async_conn(self.db_path)
        try:
            await conn.execute(
                "INSERT INTO batch_views (course_id, batch_name, views) VALUES (?, ?, 1) "
                "ON CONFLICT(course_id, batch_name) DO UPDATE SET views = views + 1",
                (course_id, batch_name),
            )
            await conn.commit()
            row = await conn.execute(
                "SELECT views FROM batch_views WHERE course_id = ? AND batch_name = ?",
                (course_id, batch_name),
            )
            return (await row.fetchone())["views"]
        finally:
            await conn.close()

    async def seed(self, drafts: list[CourseDraft]) -> int:
        """Insert *drafts* only if there are no courses yet. Returns how many were added."""
        conn = await get_async_conn(self.db_path)
        try:
            row = await conn.execute("SELECT COUNT(*) AS n FROM courses")
            if (await row.fetchone())["n"] > 0:
                return 0
        finally:
            await conn.close()

        for draft in drafts:
            await self.create_course(draft)
        return len(drafts)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    async def _insert_batches(
        conn: aiosqlite.Connection, course_id: int, batches: list[Batch]
    ) -> None:
        await conn.executemany(
            "INSERT INTO batches (course_id, position, batch_name, time, days_json) "
            "VALUES (?, ?, ?, ?, ?)",
            [
                (course_id, position, b.batch_name, b.time, json.dumps(b.days))
                for position, b in enumerate(batches)
            ],
        )

    async def _get(self, conn: aiosqlite.Connection, course_id: int) -> Course | None:
        row = await conn.execute("SELECT * FROM courses WHERE id = ?", (course_id,))
        course = await row.fetchone()
        if not course:
            return None
        return await self._hydrate(conn, course)

    @staticmethod
    async def _hydrate(conn: aiosqlite.Connection, row: aiosqlite.Row) -> Course:
        batch_rows = await conn.execute(
            "SELECT * FROM batches WHERE course_id = ? ORDER BY position",
            (row["id"],),
        )
        batches = [
            Batch(
                batch_name=b["batch_name"],
                time=b["time"],
                days=json.loads(b["days_json"]),
            )
            for b in await batch_rows.fetchall()
        ]
        view_rows = await conn.execute(
            "SELECT batch_name, views FROM batch_views WHERE course_id = ?",
            (row["id"],),
        )
        view_stats = {v["batch_name"]: v["views"] for v in await view_rows.fetchall()}
        return Course(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            content=row["content"],
            video_id=row["video_id"],
            duration=row["duration"],
            languages=json.loads(row["languages_json"]),
            batches=batches,
            status=row["status"],
            view_stats=view_stats,
            created_at=str(row["created_at"]),
        )
