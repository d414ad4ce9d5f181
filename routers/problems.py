# routers/problems.py
from __future__ import annotations

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from db import get_db
from errors import WorkflowError
from llm import TextGenerator, get_text_generator
from routers.submissions import submit_or_raise
from schemas.problems import GenerateProblemRequest, GenerateProblemResponse, MathProblemRequest
from schemas.submissions import SubmitAnswerResponse
from services.problems import generate_problem

logger = logging.getLogger(__name__)

router = APIRouter(tags=["problems"])


def _generate_or_raise(
    db: Session, llm: TextGenerator, difficulty: Optional[str]
) -> GenerateProblemResponse:
    try:
        return generate_problem(db, llm, difficulty)
    except WorkflowError:
        logger.exception("problem generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate problem")


@router.post("/generate-problem", response_model=GenerateProblemResponse)
def post_generate_problem(
    req: Optional[GenerateProblemRequest] = None,
    db: Session = Depends(get_db),
    llm: TextGenerator = Depends(get_text_generator),
):
    return _generate_or_raise(db, llm, req.difficulty if req else None)


@router.post(
    "/math-problem", response_model=Union[GenerateProblemResponse, SubmitAnswerResponse]
)
def post_math_problem(
    req: MathProblemRequest,
    db: Session = Depends(get_db),
    llm: TextGenerator = Depends(get_text_generator),
):
    # one endpoint for both steps, keyed on "action"
    if req.action == "submit":
        return submit_or_raise(db, llm, req.session_id, req.user_answer, req.hints_used)
    return _generate_or_raise(db, llm, req.difficulty)
