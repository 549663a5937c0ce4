"""
Team routes.

Provides CRUD endpoints for teams, with each team's current players
attached, and a lookup of players by coach.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from typing import List

from club_api.dependencies import get_store
from club_api.models.player import PlayerResponse
from club_api.models.team import TeamIn, TeamResponse
from club_api.store import ClubStore, InvalidReference, TeamRoster
from club_api.utils.audit_log import log_invalid_reference, log_record_change

router = APIRouter(prefix="/teams", tags=["Teams"])


def team_response(entry: TeamRoster) -> TeamResponse:
    team, players = entry
    return TeamResponse(
        id=team.id,
        name=team.name,
        ground=team.ground,
        coach=team.coach,
        founded_year=team.founded_year,
        region=team.region,
        players=[PlayerResponse.model_validate(p) for p in players]
    )


@router.get("", response_model=List[TeamResponse])
async def list_teams(store: ClubStore = Depends(get_store)):
    """List all teams with their players."""
    return [team_response(entry) for entry in store.list_teams()]


@router.get("/getcoachplayers/{coach_name}", response_model=List[PlayerResponse])
async def get_coach_players(coach_name: str, store: ClubStore = Depends(get_store)):
    """
    Get every player on a team coached by ``coach_name``.

    The coach name must match exactly, including case.
    """
    return [PlayerResponse.model_validate(p) for p in store.players_coached_by(coach_name)]


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(team_id: int, store: ClubStore = Depends(get_store)):
    """Get a team with its players."""
    return team_response(store.get_team(team_id))


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(
    team: TeamIn,
    request: Request,
    response: Response,
    store: ClubStore = Depends(get_store)
):
    """
    Create a new team.

    Players listed in the body must already exist and are signed to the
    new team.
    """
    try:
        created = store.add_team(
            name=team.name,
            ground=team.ground,
            coach=team.coach,
            founded_year=team.founded_year,
            region=team.region,
            player_ids=team.player_ids
        )
    except InvalidReference as exc:
        log_invalid_reference("create", "team", None, str(exc), request)
        raise

    log_record_change("create", "team", created.team.id, request)
    response.headers["Location"] = f"/teams/{created.team.id}"
    return team_response(created)


@router.put("/{team_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_team(
    team_id: int,
    team: TeamIn,
    request: Request,
    store: ClubStore = Depends(get_store)
):
    """
    Replace a team's details.

    A non-empty players list replaces the roster: listed players move to
    this team, players not listed are released. Unknown player ids are
    rejected with 400 and nothing is changed.
    """
    try:
        store.update_team(
            team_id,
            name=team.name,
            ground=team.ground,
            coach=team.coach,
            founded_year=team.founded_year,
            region=team.region,
            player_ids=team.player_ids
        )
    except InvalidReference as exc:
        log_invalid_reference("update", "team", team_id, str(exc), request)
        raise

    details = f"roster={team.player_ids}" if team.player_ids else None
    log_record_change("update", "team", team_id, request, details=details)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_team(team_id: int, request: Request, store: ClubStore = Depends(get_store)):
    """
    Delete a team.

    Players signed to the team become unsigned.
    """
    released = store.delete_team(team_id)
    log_record_change("delete", "team", team_id, request, details=f"released_players={len(released)}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
