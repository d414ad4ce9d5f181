"""Problem generation: topic pick, prompt, model call, parse, persist."""

from __future__ import annotations

import json
import logging
import math
import random
import re
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import GenerationFormatError, PersistenceError
from llm import TextGenerator
from models import ProblemSession
from prompts import PRIMARY_5_TOPICS, build_problem_prompt, normalize_difficulty
from schemas.problems import GenerateProblemResponse, ProblemPayload

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```json\n?|```\n?")


def pick_topic(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(PRIMARY_5_TOPICS)


def parse_problem_reply(text: str) -> Dict[str, Any]:
    """
    Decode the model's JSON reply, tolerating Markdown code fences.
    Returns {"problem_text": str, "final_answer": int | float}.
    """
    cleaned = _FENCE_RE.sub("", text or "").strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise GenerationFormatError("Invalid AI response format") from e

    if not isinstance(data, dict):
        raise GenerationFormatError("Invalid problem data structure")

    problem_text = data.get("problem_text")
    final_answer = data.get("final_answer")
    if not isinstance(problem_text, str) or not problem_text.strip():
        raise GenerationFormatError("Invalid problem data structure")
    # bool is an int subclass; JSON true is not an answer
    if isinstance(final_answer, bool) or not isinstance(final_answer, (int, float)):
        raise GenerationFormatError("Invalid problem data structure")
    if not math.isfinite(final_answer):
        raise GenerationFormatError("Invalid problem data structure")

    return {"problem_text": problem_text.strip(), "final_answer": final_answer}


def generate_problem(
    db: Session,
    llm: TextGenerator,
    difficulty: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> GenerateProblemResponse:
    difficulty = normalize_difficulty(difficulty)
    topic = pick_topic(rng)

    text = llm.generate(build_problem_prompt(topic, difficulty))
    try:
        problem = parse_problem_reply(text)
    except GenerationFormatError:
        logger.warning("unparseable problem reply for topic=%r: %r", topic, text)
        raise

    session = ProblemSession(
        problem_text=problem["problem_text"],
        correct_answer=float(problem["final_answer"]),
        difficulty=difficulty,
    )
    try:
        db.add(session)
        db.commit()
        db.refresh(session)
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistenceError("Failed to save problem to database") from e

    logger.info("session %s created (topic=%s, difficulty=%s)", session.id, topic, difficulty)
    return GenerateProblemResponse(
        session_id=session.id,
        problem=ProblemPayload(**problem),
        difficulty=difficulty,
    )
