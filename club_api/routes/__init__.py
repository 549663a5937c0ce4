"""
API route modules.
"""

from .players import router as players_router
from .teams import router as teams_router

__all__ = [
    "players_router",
    "teams_router"
]
