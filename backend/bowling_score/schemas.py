from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GameSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    frames: List[List[int]]
    scores: List[Optional[int]]
    cumulative: List[Optional[int]]
    total: Optional[int] = None
    complete: bool
    rolls_made: int = Field(..., alias="rollsMade", ge=0)
    rolls_required: int = Field(..., alias="rollsRequired", ge=0)
