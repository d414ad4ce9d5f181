# Tiered hints. Read-only: nothing here writes to the store.

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from errors import ValidationError
from llm import TextGenerator
from prompts import MAX_HINT_LEVEL, build_hint_prompt
from schemas.hints import HintResponse
from services.sessions import coerce_session_id, require_session


def coerce_hint_level(value: Any) -> int:
    if value is None or isinstance(value, bool) or value == "" or value == 0:
        raise ValidationError("Missing required fields")
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or not 1 <= value <= MAX_HINT_LEVEL:
        raise ValidationError("Invalid hint level")
    return value


def get_hint(db: Session, llm: TextGenerator, session_id: Any, hint_level: Any) -> HintResponse:
    if session_id is None or session_id == "":
        raise ValidationError("Missing required fields")
    level = coerce_hint_level(hint_level)
    session = require_session(db, coerce_session_id(session_id))

    prompt = build_hint_prompt(
        session.problem_text, session.correct_answer, session.difficulty, level
    )
    hint = llm.generate(prompt).strip()
    return HintResponse(hint=hint, hint_level=level, problem_text=session.problem_text)
