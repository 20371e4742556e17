"""Database engine and session management."""
from typing import Callable

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from company_erp.config.settings import Settings

SessionFactory = Callable[[], Session]


def build_engine(settings: Settings) -> Engine:
    """
    Create the database engine described by ``settings``.

    SQLite connections are shared across threads; an in-memory SQLite
    database is pinned to a single connection so every session sees it.
    """
    url = settings.DATABASE_URL

    if settings.is_sqlite():
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=settings.DEBUG, **kwargs)

    return create_engine(
        url,
        echo=settings.DEBUG,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_POOL_OVERFLOW,
        pool_recycle=300,
    )


def build_session_factory(engine: Engine) -> SessionFactory:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
