# routers/history.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from db import get_db
from errors import WorkflowError
from schemas.history import HistoryResponse
from services.history import list_history

logger = logging.getLogger(__name__)

router = APIRouter(tags=["history"])


@router.get("/history", response_model=HistoryResponse)
def get_history(
    db: Session = Depends(get_db),
    limit: int = Query(default=50, ge=0),
    offset: int = Query(default=0, ge=0),
    difficulty: Optional[str] = None,
    correct_only: bool = Query(default=False, alias="correctOnly"),
):
    try:
        return list_history(
            db, limit=limit, offset=offset, difficulty=difficulty, correct_only=correct_only
        )
    except WorkflowError:
        logger.exception("history query failed")
        raise HTTPException(status_code=500, detail="Failed to fetch history")
