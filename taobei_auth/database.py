from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

from .core.config import settings
from .db import models  # noqa: F401  registers the tables on SQLModel.metadata


def create_db_engine(db_url: str, timeout_seconds: int, echo: bool = False, **extra) -> Engine:
    """Build an engine whose connects and lock waits are bounded by timeout_seconds."""
    engine_kwargs = {}

    if db_url.startswith("sqlite"):
        # SQLite specific connect args; timeout bounds the wait on a locked database
        engine_kwargs.update({
            "connect_args": {"check_same_thread": False, "timeout": timeout_seconds}
        })
    else:
        connect_args = {"connect_timeout": timeout_seconds}
        if db_url.startswith("postgresql"):
            # Server-side cap on any single statement, lock waits included
            connect_args["options"] = f"-c statement_timeout={timeout_seconds * 1000}"
        # Better resiliency for managed Postgres
        engine_kwargs.update({
            "connect_args": connect_args,
            "pool_pre_ping": True,
            "pool_recycle": 300,
            "pool_size": 5,
            "max_overflow": 10,
            "pool_timeout": timeout_seconds,
        })

    engine_kwargs.update(extra)
    return create_engine(db_url, echo=echo, **engine_kwargs)


engine = create_db_engine(settings.DATABASE_URL, settings.DB_TIMEOUT_SECONDS, echo=settings.DEBUG)


def create_db_and_tables(bind: Engine = None):
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    with Session(engine) as session:
        yield session
