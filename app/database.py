"""
Database configuration and session management.

Transaction management pattern:
- This module is the ONLY place that commits transactions (via get_db())
- Services use db.add() to stage changes and db.flush() to write them
- The get_db() dependency commits at the end of each successful request
  and rolls back on any error

Appointment-ID allocation relies on this: the pool claim, the counter
increment and the record insert share one transaction, so a failed
creation returns the claimed id to the pool and releases the increment.
"""

from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from app.config import settings


def build_engine_args(database_url: str) -> dict[str, Any]:
    """Engine keyword arguments for the given database URL."""
    engine_args: dict[str, Any] = {
        "echo": settings.DEBUG,
    }

    if database_url.startswith("sqlite"):
        # SQLite needs check_same_thread=False for multi-threading.
        # timeout is the busy wait for concurrent writers.
        engine_args["connect_args"] = {
            "check_same_thread": False,
            "timeout": settings.SQLITE_BUSY_TIMEOUT,
        }
    elif database_url.startswith("postgresql"):
        engine_args["pool_pre_ping"] = True
        if settings.LOW_MEMORY_MODE:
            engine_args["pool_size"] = 3
            engine_args["max_overflow"] = 2
        else:
            engine_args["pool_size"] = 10
            engine_args["max_overflow"] = 20
        engine_args["pool_recycle"] = 3600
    else:
        engine_args["pool_pre_ping"] = True

    return engine_args


engine = create_engine(settings.DATABASE_URL, **build_engine_args(settings.DATABASE_URL))

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,  # Manual flush for better control over transaction boundaries
    bind=engine,
)


class Base(DeclarativeBase):
    """Base class for all database models"""

    pass


def get_db():
    """
    Dependency that provides a database session.

    Commits on successful completion, rolls back on error so allocation
    and record writes are atomic per request.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db():
    """Initialize database tables"""
    Base.metadata.create_all(bind=engine)


def close_db():
    """Close database connections"""
    engine.dispose()
