from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()


def build_engine(database_url: str, echo: bool = False):
    """Create an engine for ``database_url``.

    SQLite connections are shared with FastAPI's worker threads, so the
    same-thread check has to be disabled for them.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


def build_session_factory(engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Yield a database session scoped to a single request.

    Sessions come from the factory that ``create_app`` stores on ``app.state``.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
