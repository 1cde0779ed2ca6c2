"""
Day log storage.

One SQLite file holds every day log. All reads and writes go through
session_scope so the ingest layer commits or rolls back a whole save.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from lifeos.core.config import Config
from lifeos.core.models import Base


def get_engine(config: Config):
    """
    Engine for the day log database at config.database_path.

    Creates the parent directory on first use and switches SQLite to WAL
    so the dashboard can read while a day is being saved.
    """
    db_path = Path(config.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )

    with engine.connect() as conn:
        conn.execute(text("PRAGMA journal_mode=WAL"))
        conn.commit()

    return engine


def init_db(config: Config) -> None:
    """Create the day_logs table if it does not exist yet."""
    engine = get_engine(config)
    Base.metadata.create_all(engine)


def get_session(config: Config) -> Session:
    """
    New session on the day log database.

    Objects stay readable after the session closes, so callers can
    hand loaded day logs straight to the discipline engine.
    """
    engine = get_engine(config)
    SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)
    return SessionLocal()


@contextmanager
def session_scope(config: Config) -> Generator[Session, None, None]:
    """
    One transaction around a day log read or save.

    Usage:
        with session_scope(config) as session:
            log = session.query(DayLog).filter(DayLog.date == day).first()
            log.answers = answers
    """
    session = get_session(config)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
