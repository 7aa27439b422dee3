from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logs import configure_logging
from app.db.session import engine, init_db
from app.api.v1.waitlist import router as waitlist_router
from app.api.v1.comments import router as comments_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    if settings.DB_AUTO_CREATE:
        await init_db(engine)
        logger.info("Database tables ensured on %s", engine.url.render_as_string(hide_password=True))
    yield
    await engine.dispose()


app = FastAPI(
    title="Landing API",
    version="1.0.0",
    description="Waitlist signups and feedback comments for the product landing page.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(waitlist_router, prefix=settings.API_PREFIX)
app.include_router(comments_router, prefix=settings.API_PREFIX)


@app.get("/health", tags=["meta"])
async def health_check():
    return {"status": "ok", "version": app.version}
