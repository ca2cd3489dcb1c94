import aiosqlite

from coursegate.config import settings

CREATE_COURSES = """
CREATE TABLE IF NOT EXISTS courses (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    content TEXT NOT NULL DEFAULT '',
    video_id TEXT NOT NULL,
    duration INTEGER NOT NULL,
    languages_json TEXT NOT NULL DEFAULT '[]',
    status TEXT NOT NULL DEFAULT 'active',
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

CREATE_BATCHES = """
CREATE TABLE IF NOT EXISTS batches (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    course_id INTEGER NOT NULL,
    position INTEGER NOT NULL,
    batch_name TEXT NOT NULL,
    time TEXT NOT NULL,
    days_json TEXT NOT NULL DEFAULT '[]',
    FOREIGN KEY (course_id) REFERENCES courses(id) ON DELETE CASCADE,
    UNIQUE(course_id, batch_name)
)
"""

CREATE_BATCH_VIEWS = """
CREATE TABLE IF NOT EXISTS batch_views (
    course_id INTEGER NOT NULL,
    batch_name TEXT NOT NULL,
    views INTEGER NOT NULL DEFAULT 0,
    PRIMARY KEY (course_id, batch_name),
    FOREIGN KEY (course_id) REFERENCES courses(id) ON DELETE CASCADE
)
"""

_DDL = [CREATE_COURSES, CREATE_BATCHES, CREATE_BATCH_VIEWS]


async def init_db(db_path: str | None = None) -> None:
    """Create all tables. Called once at server startup via FastAPI lifespan."""
    async with aiosqlite.connect(db_path or settings.database_path) as db:
        for stmt in _DDL:
            await db.execute(stmt)
        await db.commit()


async def get_async_conn(db_path: str | None = None) -> aiosqlite.Connection:
    """Async connection with row access by name and cascading deletes on."""
    conn = await aiosqlite.connect(db_path or settings.database_path)
    await conn.execute("PRAGMA busy_timeout = 5000")
    await conn.execute("PRAGMA foreign_keys = ON")
    conn.row_factory = aiosqlite.Row
    return conn
