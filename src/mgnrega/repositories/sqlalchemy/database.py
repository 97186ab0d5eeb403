"""Database engine and session factory construction."""

from sqlalchemy import create_engine, Engine, StaticPool
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for ``database_url``.

    In-memory SQLite gets a single shared connection so every session sees
    the same database.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}, "echo": echo}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to ``engine``."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def init_db(engine: Engine) -> None:
    """Create tables that do not exist yet."""
    from mgnrega.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
