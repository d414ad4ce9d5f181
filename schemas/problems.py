# schemas/problems.py
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class GenerateProblemRequest(BaseModel):
    # unrecognized values fall back to "medium" in the service
    difficulty: Optional[Any] = None


class ProblemPayload(BaseModel):
    problem_text: str
    final_answer: Union[int, float]


class GenerateProblemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    session_id: str = Field(alias="sessionId")
    problem: ProblemPayload
    difficulty: str


class MathProblemRequest(BaseModel):
    """Combined endpoint body: ``action == "submit"`` grades, anything else generates."""

    model_config = ConfigDict(populate_by_name=True)
    action: Optional[str] = None
    difficulty: Optional[Any] = None
    session_id: Optional[Any] = Field(default=None, alias="sessionId")
    user_answer: Optional[Any] = Field(default=None, alias="userAnswer")
    hints_used: Optional[Any] = Field(default=None, alias="hintsUsed")
