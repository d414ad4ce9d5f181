# schemas/hints.py
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class HintRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    # required, but checked by the service so a missing field is a 400
    session_id: Optional[Any] = Field(default=None, alias="sessionId")
    hint_level: Optional[Any] = Field(default=None, alias="hintLevel")


class HintResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    hint: str
    hint_level: int = Field(alias="hintLevel")
    problem_text: str = Field(alias="problemText")
