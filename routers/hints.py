# routers/hints.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from db import get_db
from errors import NotFoundError, ValidationError, WorkflowError
from llm import TextGenerator, get_hint_text_generator
from schemas.hints import HintRequest, HintResponse
from services.hints import get_hint

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hints"])


@router.post("/get-hint", response_model=HintResponse)
def post_get_hint(
    req: HintRequest,
    db: Session = Depends(get_db),
    llm: TextGenerator = Depends(get_hint_text_generator),
):
    try:
        return get_hint(db, llm, req.session_id, req.hint_level)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except WorkflowError:
        logger.exception("hint generation failed for session %r", req.session_id)
        raise HTTPException(status_code=500, detail="Failed to generate hint")
