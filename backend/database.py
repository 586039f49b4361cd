from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from config import settings


def _engine_options(url: str) -> dict:
    """Build create_engine keyword arguments for the configured backend."""
    options = {
        'echo': settings.SQL_ECHO,
        'pool_pre_ping': True,  # Verify connections are alive before using
    }
    parsed = make_url(url)
    if parsed.get_backend_name() == 'sqlite':
        options['connect_args'] = {'check_same_thread': False}
        if parsed.database and parsed.database != ':memory:':
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    else:
        options.update(pool_size=10, max_overflow=20, pool_recycle=3600)
    return options


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))


@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable foreign keys (and WAL for file databases) on every SQLite connection"""
    if engine.dialect.name != 'sqlite':
        return
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    if engine.url.database and engine.url.database != ':memory:':
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


SessionLocal = sessionmaker(bind=engine, autoflush=False)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes; commits on success, rolls back on error"""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
