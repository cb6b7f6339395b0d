from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import Session


@contextmanager
def session_scope(db: SQLAlchemy) -> Iterator[Session]:
    """Unit of work over the request-scoped session: commit, or roll back and re-raise."""
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
