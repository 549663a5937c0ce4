"""
FastAPI dependencies shared by the routers.
"""

from fastapi import Request

from club_api.store import ClubStore


def get_store(request: Request) -> ClubStore:
    """Return the store owned by the running application."""
    return request.app.state.store
