# schemas/sessions.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class SubmissionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    user_answer: Optional[float] = None
    is_correct: bool
    feedback_text: str
    hints_used: int
    created_at: Optional[datetime] = None


class SessionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    problem_text: str
    correct_answer: float
    difficulty: Optional[str] = None
    created_at: Optional[datetime] = None
    submissions: List[SubmissionOut] = []
