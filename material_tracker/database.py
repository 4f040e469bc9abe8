# material_tracker/database.py

from typing import Iterator

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from .config import settings


def make_engine(database_url: str):
    """
    SQLite engines are shared across FastAPI's worker threads, so the
    same-thread check is disabled. In-memory databases need a single
    connection or every session would see its own empty database.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


engine = make_engine(settings.database_url)


def create_db_and_tables(bind=None) -> None:
    # register table models before create_all
    from .models import storage  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


def get_session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session
