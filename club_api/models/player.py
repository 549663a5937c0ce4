"""
Pydantic models for player requests and responses.
"""

from typing import Optional
from datetime import date
from pydantic import Field

from .base import ClubModel


class PlayerIn(ClubModel):
    """Request body for creating or replacing a player. Any id is ignored."""
    name: str = Field(..., min_length=1, max_length=100, description="Player's name")
    birth_date: date = Field(..., description="Date of birth")
    height: int = Field(..., gt=0, description="Height in cm")
    weight: int = Field(..., gt=0, description="Weight in kg")
    place_of_birth: Optional[str] = Field(None, max_length=100, description="Place of birth")
    team_id: Optional[int] = Field(None, description="Team the player is signed with, null if unsigned")


class PlayerResponse(ClubModel):
    """Response model for player data."""
    id: int
    name: str
    birth_date: date
    height: int
    weight: int
    place_of_birth: Optional[str]
    team_id: Optional[int]
