from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import List, Optional

import sqlalchemy as sa
from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(UTC)


class ProblemSession(Base):
    """One generated word problem. Written once, never updated."""

    __tablename__ = "math_problem_sessions"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, index=True
    )
    problem_text: Mapped[str] = mapped_column(Text)
    correct_answer: Mapped[float] = mapped_column(Float)
    difficulty: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)

    submissions: Mapped[List["Submission"]] = relationship(
        back_populates="session", order_by="Submission.created_at"
    )


class Submission(Base):
    __tablename__ = "math_problem_submissions"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, index=True
    )
    session_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("math_problem_sessions.id"), index=True
    )
    # NULL when the learner typed something that is not a number
    user_answer: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    is_correct: Mapped[bool] = mapped_column(Boolean)
    feedback_text: Mapped[str] = mapped_column(Text)
    hints_used: Mapped[int] = mapped_column(Integer, default=0, server_default=sa.text("0"))

    session: Mapped[ProblemSession] = relationship(back_populates="submissions")
