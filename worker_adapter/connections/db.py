"""ORM model and session helpers for the connection table."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Integer, String, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


class ConnectionRow(Base):
    __tablename__ = "connections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    class_name: Mapped[str] = mapped_column("class", String(255), nullable=False)
    config: Mapped[str | None] = mapped_column(Text, nullable=True)


def create_db_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    if url.drivername.startswith("sqlite"):
        if url.database and url.database != ":memory:":
            Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)
            return create_engine(database_url, future=True, connect_args={"check_same_thread": False})
        return create_engine(
            database_url,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, future=True, pool_pre_ping=True)


def init_schema(engine: Engine) -> None:
    Base.metadata.create_all(engine)


def create_session_factory(database_url: str) -> sessionmaker:
    """Create the engine, ensure the schema and return a session factory."""

    engine = create_db_engine(database_url)
    init_schema(engine)
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        future=True,
        expire_on_commit=False,
    )


__all__ = [
    "Base",
    "ConnectionRow",
    "create_db_engine",
    "create_session_factory",
    "init_schema",
]
