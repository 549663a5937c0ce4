"""
In-memory store for players and teams.

``ClubStore`` owns two tables keyed by integer id and hands out copies of
its records. A team's roster is never stored: it is computed from the
players whose ``team_id`` points at the team.
"""

import threading
from dataclasses import dataclass, replace
from datetime import date
from typing import Dict, Iterable, List, NamedTuple, Optional


class ClubError(Exception):
    """Base class for store errors."""


class EntityNotFound(ClubError):
    """Requested player or team id does not exist."""

    def __init__(self, entity: str, entity_id: Optional[int], message: Optional[str] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} {entity_id} not found")


class PlayerNotSigned(EntityNotFound):
    """A player has no team to look up."""

    def __init__(self, player_id: int):
        super().__init__("Player", player_id, f"Player {player_id} is not signed to a team")


class InvalidReference(ClubError):
    """A reference in a request body points at a record that does not exist."""


@dataclass
class Player:
    id: int
    name: str
    birth_date: date
    height: int
    weight: int
    place_of_birth: Optional[str] = None
    team_id: Optional[int] = None


@dataclass
class Team:
    id: int
    name: str
    ground: str
    coach: str
    founded_year: int
    region: Optional[str] = None


class TeamRoster(NamedTuple):
    """A team together with the players signed to it when it was read."""
    team: Team
    players: List[Player]


class ClubStore:
    """
    Player and team tables guarded by a single lock.

    Every public method holds the lock for its whole read, validate and
    write sequence. Ids come from per-table counters and are never reused.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._players: Dict[int, Player] = {}
        self._teams: Dict[int, Team] = {}
        self._next_player_id = 1
        self._next_team_id = 1

    # Players

    def list_players(self) -> List[Player]:
        with self._lock:
            return [replace(p) for p in self._sorted_players()]

    def get_player(self, player_id: int) -> Player:
        with self._lock:
            return replace(self._require_player(player_id))

    def add_player(
        self,
        name: str,
        birth_date: date,
        height: int,
        weight: int,
        place_of_birth: Optional[str] = None,
        team_id: Optional[int] = None,
    ) -> Player:
        with self._lock:
            self._check_team_reference(team_id)
            player = Player(
                id=self._next_player_id,
                name=name,
                birth_date=birth_date,
                height=height,
                weight=weight,
                place_of_birth=place_of_birth,
                team_id=team_id,
            )
            self._players[player.id] = player
            self._next_player_id += 1
            return replace(player)

    def update_player(
        self,
        player_id: int,
        name: str,
        birth_date: date,
        height: int,
        weight: int,
        place_of_birth: Optional[str] = None,
        team_id: Optional[int] = None,
    ) -> Player:
        """
        Overwrite a player's fields.

        ``team_id`` must name an existing team or be None (unsigned). The
        reference is checked before anything is written.
        """
        with self._lock:
            player = self._require_player(player_id)
            self._check_team_reference(team_id)

            player.name = name
            player.birth_date = birth_date
            player.height = height
            player.weight = weight
            player.place_of_birth = place_of_birth
            player.team_id = team_id
            return replace(player)

    def delete_player(self, player_id: int) -> Player:
        with self._lock:
            player = self._require_player(player_id)
            del self._players[player_id]
            return replace(player)

    def team_of_player(self, player_id: int) -> TeamRoster:
        with self._lock:
            player = self._require_player(player_id)
            if player.team_id is None:
                raise PlayerNotSigned(player_id)
            team = self._teams.get(player.team_id)
            if team is None:
                raise EntityNotFound("Team", player.team_id)
            return self._with_roster(team)

    def players_aged(self, age: int, today: Optional[date] = None) -> List[Player]:
        """Players whose birth year is ``age`` calendar years before this year."""
        year = (today or date.today()).year
        with self._lock:
            return [
                replace(p) for p in self._sorted_players()
                if year - p.birth_date.year == age
            ]

    # Teams

    def list_teams(self) -> List[TeamRoster]:
        with self._lock:
            return [self._with_roster(self._teams[tid]) for tid in sorted(self._teams)]

    def get_team(self, team_id: int) -> TeamRoster:
        with self._lock:
            return self._with_roster(self._require_team(team_id))

    def roster(self, team_id: int) -> List[Player]:
        """Players currently signed to ``team_id``, ordered by id."""
        with self._lock:
            return [replace(p) for p in self._sorted_players() if p.team_id == team_id]

    def add_team(
        self,
        name: str,
        ground: str,
        coach: str,
        founded_year: int,
        region: Optional[str] = None,
        player_ids: Optional[Iterable[int]] = None,
    ) -> TeamRoster:
        with self._lock:
            player_ids = self._check_player_references(player_ids)
            team = Team(
                id=self._next_team_id,
                name=name,
                ground=ground,
                coach=coach,
                founded_year=founded_year,
                region=region,
            )
            self._teams[team.id] = team
            self._next_team_id += 1
            if player_ids:
                self._replace_roster(team.id, player_ids)
            return self._with_roster(team)

    def update_team(
        self,
        team_id: int,
        name: str,
        ground: str,
        coach: str,
        founded_year: int,
        region: Optional[str] = None,
        player_ids: Optional[Iterable[int]] = None,
    ) -> Team:
        """
        Overwrite a team's fields and optionally replace its roster.

        A non-empty ``player_ids`` becomes the full roster: listed players
        are moved to this team and anyone else on it is released. An empty
        or missing list leaves the roster alone.
        """
        with self._lock:
            team = self._require_team(team_id)
            player_ids = self._check_player_references(player_ids)

            team.name = name
            team.ground = ground
            team.coach = coach
            team.founded_year = founded_year
            team.region = region
            if player_ids:
                self._replace_roster(team_id, player_ids)
            return replace(team)

    def delete_team(self, team_id: int) -> List[int]:
        """Remove a team and release its players. Returns the released ids."""
        with self._lock:
            self._require_team(team_id)
            del self._teams[team_id]
            released = []
            for player in self._sorted_players():
                if player.team_id == team_id:
                    player.team_id = None
                    released.append(player.id)
            return released

    def players_coached_by(self, coach: str) -> List[Player]:
        with self._lock:
            team_ids = [tid for tid in sorted(self._teams) if self._teams[tid].coach == coach]
            players = []
            for tid in team_ids:
                players.extend(replace(p) for p in self._sorted_players() if p.team_id == tid)
            return players

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {"players": len(self._players), "teams": len(self._teams)}

    # Internal helpers; callers hold the lock

    def _sorted_players(self) -> List[Player]:
        return [self._players[pid] for pid in sorted(self._players)]

    def _with_roster(self, team: Team) -> TeamRoster:
        players = [replace(p) for p in self._sorted_players() if p.team_id == team.id]
        return TeamRoster(replace(team), players)

    def _require_player(self, player_id: int) -> Player:
        player = self._players.get(player_id)
        if player is None:
            raise EntityNotFound("Player", player_id)
        return player

    def _require_team(self, team_id: int) -> Team:
        team = self._teams.get(team_id)
        if team is None:
            raise EntityNotFound("Team", team_id)
        return team

    def _check_team_reference(self, team_id: Optional[int]) -> None:
        if team_id is not None and team_id not in self._teams:
            raise InvalidReference(f"Team with id {team_id} does not exist")

    def _check_player_references(self, player_ids: Optional[Iterable[int]]) -> List[int]:
        ids = list(dict.fromkeys(player_ids or []))
        missing = [pid for pid in ids if pid not in self._players]
        if missing:
            raise InvalidReference(
                "One or more players do not exist: " + ", ".join(str(pid) for pid in missing)
            )
        return ids

    def _replace_roster(self, team_id: int, player_ids: List[int]) -> None:
        keep = set(player_ids)
        for player in self._players.values():
            if player.id in keep:
                player.team_id = team_id
            elif player.team_id == team_id:
                player.team_id = None
