import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from coursegate.config import settings
from coursegate.routes import admin, catalog
from coursegate.seed import DEMO_COURSES
from coursegate.store import CourseStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Configure logging, create SQLite tables and seed the demo catalogue."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    store = CourseStore(settings.database_path)
    await store.init()
    if settings.seed_demo_courses:
        added = await store.seed(DEMO_COURSES)
        if added:
            logger.info("Seeded %d demo courses into %s", added, settings.database_path)
    yield


app = FastAPI(
    title="coursegate",
    description="Video courses that open only during their scheduled batch windows",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(catalog.router)
app.include_router(admin.router)


@app.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}
