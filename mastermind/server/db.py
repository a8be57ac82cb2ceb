"""
Single place to:
- Read DATABASE_URL (via config.get_settings, which also loads .env)
- Create a SQLAlchemy Engine
- Create a Session factory (SessionLocal) for per-request DB sessions
- Provide get_db() dependency for FastAPI routes

The default URL is an in-memory SQLite database: games live only as long as
the server process does.
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from ..config import get_settings

DATABASE_URL = get_settings().database_url


def make_engine(url: str):
    """
    SQLite needs check_same_thread=False because FastAPI runs sync routes in a
    threadpool; an in-memory SQLite DB also needs StaticPool so every thread
    shares ONE connection (otherwise each sees a different empty DB).
    """
    kwargs = {"pool_pre_ping": True, "echo": False, "future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = make_engine(DATABASE_URL)

# autocommit=False, autoflush=False are the usual FastAPI/SQLAlchemy defaults.
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


class Base(DeclarativeBase):
    pass


# FastAPI dependency: one session per request, always closed afterwards
def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
