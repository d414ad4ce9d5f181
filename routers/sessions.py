# routers/sessions.py

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from db import get_db
from errors import NotFoundError, PersistenceError, ValidationError
from schemas.sessions import SessionOut
from services.sessions import get_session_detail

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("/{session_id}", response_model=SessionOut)
def get_session(session_id: str, db: Session = Depends(get_db)):
    try:
        s = get_session_detail(db, session_id)
    except (ValidationError, NotFoundError):
        raise HTTPException(status_code=404, detail="Session not found")
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to fetch session")
    return SessionOut.model_validate(s)
