"""Answer submission: score against the stored answer, get feedback, persist."""

from __future__ import annotations

import logging
import math
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import PersistenceError, ValidationError
from grading import clean_number, is_correct, parse_answer
from llm import TextGenerator
from models import Submission
from prompts import MAX_HINT_LEVEL, build_feedback_prompt
from schemas.submissions import SubmitAnswerResponse
from services.sessions import coerce_session_id, require_session

logger = logging.getLogger(__name__)


def coerce_hints_used(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("hintsUsed must be an integer")
    if not 0 <= value <= MAX_HINT_LEVEL:
        raise ValidationError(f"hintsUsed must be between 0 and {MAX_HINT_LEVEL}")
    return value


def submit_answer(
    db: Session,
    llm: TextGenerator,
    session_id: Any,
    user_answer: Any,
    hints_used: Any = 0,
) -> SubmitAnswerResponse:
    if session_id is None or session_id == "" or user_answer is None:
        raise ValidationError("Missing required fields")
    sid = coerce_session_id(session_id)
    hints = coerce_hints_used(hints_used)
    session = require_session(db, sid)

    answer = parse_answer(user_answer)
    correct = is_correct(answer, session.correct_answer)

    feedback = llm.generate(
        build_feedback_prompt(
            session.problem_text, session.correct_answer, answer, hints, correct
        )
    ).strip()

    submission = Submission(
        session_id=session.id,
        user_answer=answer if math.isfinite(answer) else None,
        is_correct=correct,
        feedback_text=feedback,
        hints_used=hints,
    )
    try:
        db.add(submission)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistenceError("Failed to save submission") from e

    logger.info("submission for session %s (correct=%s, hints=%d)", sid, correct, hints)
    return SubmitAnswerResponse(
        is_correct=correct,
        feedback=feedback,
        correct_answer=clean_number(session.correct_answer),
    )
