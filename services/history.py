"""History listing and summary statistics."""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, contains_eager

from errors import PersistenceError
from models import ProblemSession, Submission
from prompts import DIFFICULTIES
from schemas.history import HistoryItem, HistoryResponse, HistoryStats


def format_accuracy(correct: int, total: int):
    """One-decimal percentage string, or 0 when nothing has been attempted."""
    if total <= 0:
        return 0
    return f"{correct / total * 100:.1f}"


def difficulty_breakdown(sessions: List[ProblemSession]) -> Dict[str, int]:
    """Count easy/medium/hard over distinct sessions; other values are ignored."""
    counts = {d: 0 for d in DIFFICULTIES}
    seen = set()
    for s in sessions:
        if s.id in seen:
            continue
        seen.add(s.id)
        if s.difficulty in counts:
            counts[s.difficulty] += 1
    return counts


def list_history(
    db: Session,
    limit: int = 50,
    offset: int = 0,
    difficulty: Optional[str] = None,
    correct_only: bool = False,
) -> HistoryResponse:
    stmt = (
        select(Submission)
        .join(Submission.session)
        .options(contains_eager(Submission.session))
        .order_by(Submission.created_at.desc())
    )
    if correct_only:
        stmt = stmt.where(Submission.is_correct.is_(True))
    if difficulty:
        stmt = stmt.where(ProblemSession.difficulty == difficulty)
    stmt = stmt.offset(max(offset, 0)).limit(max(limit, 0))

    try:
        rows = list(db.scalars(stmt).all())
        # Totals are global: neither filters nor paging apply
        total = db.scalar(select(func.count()).select_from(Submission)) or 0
        correct = (
            db.scalar(
                select(func.count())
                .select_from(Submission)
                .where(Submission.is_correct.is_(True))
            )
            or 0
        )
    except SQLAlchemyError as e:
        raise PersistenceError("Failed to fetch history") from e

    stats = HistoryStats(
        total_attempts=total,
        correct_attempts=correct,
        accuracy=format_accuracy(correct, total),
        difficulty_breakdown=difficulty_breakdown([r.session for r in rows]),
    )
    return HistoryResponse(
        history=[HistoryItem.model_validate(r) for r in rows],
        stats=stats,
    )
