from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from app.config import settings
from app.database import init_db, close_db
from app.web.telecalling_routes import router as telecalling_router
from app.web.admin import counter_router
from contextlib import asynccontextmanager
from pathlib import Path

import logging


def configure_logging(log_dir: str) -> Path:
    """Log to stdout and to app.log under log_dir, creating it if needed."""
    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(path / "app.log"), logging.StreamHandler()],
    )
    return path


configure_logging(settings.LOG_DIR)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown events"""
    logger.info("[>>] Starting %s...", settings.APP_NAME)
    init_db()
    logger.info("[OK] Database initialized")
    if settings.ALLOW_COUNTER_RESET:
        logger.warning("[WARN] Appointment counter reset endpoint is enabled")
    yield
    logger.info("[<<] Shutting down %s...", settings.APP_NAME)
    close_db()
    logger.info("[OK] Database connections closed")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Backend API for telecalling records and appointment IDs",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log every unhandled exception"""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=True,
    )
    return PlainTextResponse(
        "Internal Server Error. Please contact support if the problem persists.",
        status_code=500,
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}


app.include_router(telecalling_router)
app.include_router(counter_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
