# schemas/submissions.py
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SubmitAnswerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    session_id: Optional[Any] = Field(default=None, alias="sessionId")
    # number or free text; text is parsed leniently by the service
    user_answer: Optional[Any] = Field(default=None, alias="userAnswer")
    hints_used: Optional[Any] = Field(default=0, alias="hintsUsed")


class SubmitAnswerResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    is_correct: bool = Field(alias="isCorrect")
    feedback: str
    correct_answer: Union[int, float] = Field(alias="correctAnswer")
