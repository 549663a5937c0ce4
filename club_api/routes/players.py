"""
Player routes.

Provides CRUD endpoints for players plus lookups of a player's team and
of players by age.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from typing import List

from club_api.dependencies import get_store
from club_api.models.player import PlayerIn, PlayerResponse
from club_api.models.team import TeamResponse
from club_api.routes.teams import team_response
from club_api.store import ClubStore, InvalidReference
from club_api.utils.audit_log import log_invalid_reference, log_record_change

router = APIRouter(prefix="/players", tags=["Players"])


@router.get("", response_model=List[PlayerResponse])
async def list_players(store: ClubStore = Depends(get_store)):
    """List all players."""
    return [PlayerResponse.model_validate(p) for p in store.list_players()]


@router.get("/playerteam/{player_id}", response_model=TeamResponse)
async def get_player_team(player_id: int, store: ClubStore = Depends(get_store)):
    """
    Get the team a player is signed with.

    Returns 404 if the player does not exist or is not signed to an
    existing team.
    """
    return team_response(store.team_of_player(player_id))


@router.get("/getage/{age}", response_model=List[PlayerResponse])
async def get_players_by_age(age: int, store: ClubStore = Depends(get_store)):
    """
    Get players of a given age.

    Age is the current year minus the birth year, so a player turns a year
    older on 1 January rather than on their birthday.
    """
    return [PlayerResponse.model_validate(p) for p in store.players_aged(age)]


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: int, store: ClubStore = Depends(get_store)):
    """Get a single player."""
    return PlayerResponse.model_validate(store.get_player(player_id))


@router.post("", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
async def create_player(
    player: PlayerIn,
    request: Request,
    response: Response,
    store: ClubStore = Depends(get_store)
):
    """
    Create a new player.

    The store assigns the id; the new resource's path is returned in the
    Location header.
    """
    try:
        created = store.add_player(
            name=player.name,
            birth_date=player.birth_date,
            height=player.height,
            weight=player.weight,
            place_of_birth=player.place_of_birth,
            team_id=player.team_id
        )
    except InvalidReference as exc:
        log_invalid_reference("create", "player", None, str(exc), request)
        raise

    log_record_change("create", "player", created.id, request)
    response.headers["Location"] = f"/players/{created.id}"
    return PlayerResponse.model_validate(created)


@router.put("/{player_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_player(
    player_id: int,
    player: PlayerIn,
    request: Request,
    store: ClubStore = Depends(get_store)
):
    """
    Replace a player's details.

    teamId must reference an existing team (400 otherwise) or be null to
    leave the player unsigned.
    """
    try:
        store.update_player(
            player_id,
            name=player.name,
            birth_date=player.birth_date,
            height=player.height,
            weight=player.weight,
            place_of_birth=player.place_of_birth,
            team_id=player.team_id
        )
    except InvalidReference as exc:
        log_invalid_reference("update", "player", player_id, str(exc), request)
        raise

    log_record_change("update", "player", player_id, request, details=f"team_id={player.team_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_player(player_id: int, request: Request, store: ClubStore = Depends(get_store)):
    """Delete a player."""
    store.delete_player(player_id)
    log_record_change("delete", "player", player_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
