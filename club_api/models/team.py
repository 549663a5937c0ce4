"""
Pydantic models for team requests and responses.
"""

from typing import Any, List, Optional
from pydantic import Field, StrictInt, model_validator

from .base import ClubModel
from .player import PlayerResponse


class PlayerRef(ClubModel):
    """Reference to an existing player inside a team body: {"id": 5} or just 5."""
    id: StrictInt

    @model_validator(mode="before")
    @classmethod
    def accept_bare_id(cls, data: Any) -> Any:
        if isinstance(data, int) and not isinstance(data, bool):
            return {"id": data}
        return data


class TeamIn(ClubModel):
    """Request body for creating or replacing a team. Any id is ignored."""
    name: str = Field(..., min_length=1, max_length=100, description="Team name")
    ground: str = Field(..., min_length=1, max_length=100, description="Home ground")
    coach: str = Field(..., min_length=1, max_length=100, description="Coach name")
    founded_year: int = Field(..., description="Year the team was founded")
    region: Optional[str] = Field(None, max_length=100, description="Region the team is based in")
    players: Optional[List[PlayerRef]] = Field(
        None, description="Full roster to sign; omit or leave empty to keep the current one"
    )

    @property
    def player_ids(self) -> List[int]:
        return [ref.id for ref in self.players or []]


class TeamResponse(ClubModel):
    """Response model for team data with its current players."""
    id: int
    name: str
    ground: str
    coach: str
    founded_year: int
    region: Optional[str]
    players: List[PlayerResponse] = []
