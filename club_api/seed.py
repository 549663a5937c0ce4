"""
Sample data for a fresh store.

The number of players and teams is fixed by the caller; names, dates and
the player-to-team draw are random. Pass a seeded ``random.Random`` to get
reproducible data.
"""

import logging
import random
from datetime import date, timedelta
from typing import Dict, Optional

from club_api.store import ClubStore

logger = logging.getLogger(__name__)

N_PLAYERS = 90
N_TEAMS = 6
TEAM_SIZE = 15


def years_before(day: date, years: int) -> date:
    """Same calendar day ``years`` earlier; 29 February falls back to the 28th."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def seed_store(
    store: ClubStore,
    n_players: int = N_PLAYERS,
    n_teams: int = N_TEAMS,
    team_size: int = TEAM_SIZE,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> Dict[str, int]:
    """
    Fill ``store`` with random players and teams.

    Each team in turn draws up to ``team_size`` players without replacement
    from the unsigned pool. Players left over once every team is full stay
    unsigned.

    Returns:
        Counts of created players, teams and signed players.
    """
    rng = rng or random.Random()
    today = today or date.today()

    pool = []
    for i in range(1, n_players + 1):
        birth_date = years_before(today, rng.randrange(18, 40)) - timedelta(days=rng.randrange(0, 365))
        player = store.add_player(
            name=f"Player {i}",
            birth_date=birth_date,
            height=rng.randrange(170, 210),
            weight=rng.randrange(60, 100),
            place_of_birth=f"City {rng.randrange(1, 10)}",
        )
        pool.append(player.id)

    signed = 0
    for i in range(1, n_teams + 1):
        draw = min(team_size, len(pool))
        roster = []
        for _ in range(draw):
            roster.append(pool.pop(rng.randrange(len(pool))))

        store.add_team(
            name=f"Team {i}",
            ground=f"Stadium {rng.randrange(1, 5)}",
            coach=f"Coach {rng.randrange(1, 10)}",
            founded_year=1900 + rng.randrange(0, 122),
            region=f"Region {rng.randrange(1, 5)}",
            player_ids=roster,
        )
        signed += len(roster)

    logger.info(
        "Seeded %d players and %d teams (%d signed, %d unsigned)",
        n_players, n_teams, signed, len(pool)
    )
    return {"players": n_players, "teams": n_teams, "signed": signed}
