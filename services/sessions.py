# Session lookup shared by hints, submissions and the detail view.

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from errors import NotFoundError, PersistenceError, ValidationError
from models import ProblemSession


def coerce_session_id(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        raise ValidationError("Missing required fields")
    if isinstance(value, (int, str)):
        s = str(value).strip()
        if s:
            return s
    raise ValidationError("Missing required fields")


def require_session(db: Session, session_id: str) -> ProblemSession:
    try:
        session = db.get(ProblemSession, session_id)
    except SQLAlchemyError as e:
        raise PersistenceError(f"session lookup failed: {type(e).__name__}") from e
    if session is None:
        raise NotFoundError("Session not found")
    return session


def get_session_detail(db: Session, session_id: Any) -> ProblemSession:
    """Load one session with its submissions (oldest first)."""
    sid = coerce_session_id(session_id)
    stmt = (
        select(ProblemSession)
        .options(selectinload(ProblemSession.submissions))
        .where(ProblemSession.id == sid)
    )
    try:
        session = db.scalars(stmt).first()
    except SQLAlchemyError as e:
        raise PersistenceError(f"session lookup failed: {type(e).__name__}") from e
    if session is None:
        raise NotFoundError("Session not found")
    return session
