# routers/submissions.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from db import get_db
from errors import NotFoundError, ValidationError, WorkflowError
from llm import TextGenerator, get_text_generator
from schemas.submissions import SubmitAnswerRequest, SubmitAnswerResponse
from services.submissions import submit_answer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["submissions"])


def submit_or_raise(
    db: Session, llm: TextGenerator, session_id: Any, user_answer: Any, hints_used: Any
) -> SubmitAnswerResponse:
    try:
        return submit_answer(db, llm, session_id, user_answer, hints_used)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except WorkflowError:
        # feedback may have been generated; it is dropped with the failed write
        logger.exception("submission failed for session %r", session_id)
        raise HTTPException(status_code=500, detail="Failed to process submission")


@router.post("/submit-answer", response_model=SubmitAnswerResponse)
def post_submit_answer(
    req: SubmitAnswerRequest,
    db: Session = Depends(get_db),
    llm: TextGenerator = Depends(get_text_generator),
):
    return submit_or_raise(db, llm, req.session_id, req.user_answer, req.hints_used)
