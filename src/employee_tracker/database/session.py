from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from .extensions import db


@contextmanager
def session_scope() -> Iterator[Session]:
    """Yield the request session; commit on success, roll back and re-raise on error."""
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
