# schemas/history.py
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SessionSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    problem_text: str
    correct_answer: float
    difficulty: Optional[str] = None
    created_at: Optional[datetime] = None


class HistoryItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    session_id: str
    user_answer: Optional[float] = None
    is_correct: bool
    feedback_text: str
    hints_used: int
    created_at: Optional[datetime] = None
    # the history page reads the joined row under this key
    session: SessionSummary = Field(
        validation_alias=AliasChoices("session", "math_problem_sessions"),
        serialization_alias="math_problem_sessions",
    )


class HistoryStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    total_attempts: int = Field(alias="totalAttempts")
    correct_attempts: int = Field(alias="correctAttempts")
    # "75.0" when there are attempts, 0 when there are none
    accuracy: Union[str, int]
    difficulty_breakdown: Dict[str, int] = Field(alias="difficultyBreakdown")


class HistoryResponse(BaseModel):
    history: List[HistoryItem]
    stats: HistoryStats
