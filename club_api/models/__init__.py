"""
Pydantic models for request/response validation.
"""

from .base import ClubModel

from .player import (
    PlayerIn,
    PlayerResponse
)

from .team import (
    PlayerRef,
    TeamIn,
    TeamResponse
)

__all__ = [
    "ClubModel",

    # Player models
    "PlayerIn",
    "PlayerResponse",

    # Team models
    "PlayerRef",
    "TeamIn",
    "TeamResponse"
]
