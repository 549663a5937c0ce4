"""
Unit tests for the in-memory store.

These tests exercise ClubStore directly, without the HTTP layer.
"""

import pytest
from dataclasses import replace
from datetime import date

from club_api.store import ClubStore, EntityNotFound, InvalidReference, PlayerNotSigned


def make_player(store, name="Player", team_id=None, birth_date=date(1990, 1, 1)):
    return store.add_player(name=name, birth_date=birth_date, height=180, weight=80, team_id=team_id)


def make_team(store, name="Team", coach="Coach 1", player_ids=None):
    return store.add_team(
        name=name, ground="Ground", coach=coach, founded_year=1950, player_ids=player_ids
    ).team


@pytest.mark.unit
class TestPlayers:
    """Test player operations."""

    def test_ids_are_sequential(self, store):
        assert [make_player(store).id for _ in range(3)] == [1, 2, 3]

    def test_get_returns_copy(self, store):
        """Test that mutating a returned record does not touch the store."""
        player = make_player(store, name="Original")
        player.name = "Changed"

        assert store.get_player(player.id).name == "Original"

    def test_get_missing(self, store):
        with pytest.raises(EntityNotFound) as exc_info:
            store.get_player(5)

        assert exc_info.value.entity == "Player"
        assert exc_info.value.entity_id == 5
        assert str(exc_info.value) == "Player 5 not found"

    def test_update_overwrites_fields(self, store):
        team = make_team(store)
        player = make_player(store)

        updated = store.update_player(
            player.id, name="New", birth_date=date(2000, 5, 5), height=190, weight=95,
            place_of_birth="Cork", team_id=team.id
        )

        assert updated.name == "New"
        assert updated.birth_date == date(2000, 5, 5)
        assert updated.height == 190
        assert updated.weight == 95
        assert updated.place_of_birth == "Cork"
        assert updated.team_id == team.id

    def test_update_with_missing_team_changes_nothing(self, store):
        player = make_player(store, name="Original")

        with pytest.raises(InvalidReference):
            store.update_player(player.id, name="New", birth_date=date(2000, 1, 1), height=1, weight=1, team_id=42)

        assert store.get_player(player.id) == player

    def test_add_with_missing_team(self, store):
        with pytest.raises(InvalidReference):
            make_player(store, team_id=3)

        assert store.list_players() == []

    def test_delete(self, store):
        player = make_player(store)

        store.delete_player(player.id)

        with pytest.raises(EntityNotFound):
            store.get_player(player.id)
        with pytest.raises(EntityNotFound):
            store.delete_player(player.id)

    def test_delete_returns_copy(self, store):
        player = make_player(store, name="Gone")

        deleted = store.delete_player(player.id)
        deleted.name = "Changed"

        assert deleted == replace(player, name="Changed")
        assert store.list_players() == []

    def test_ids_not_reused_after_delete(self, store):
        first = make_player(store)
        store.delete_player(first.id)

        assert make_player(store).id == 2

    def test_team_of_player(self, store):
        team = make_team(store)
        player = make_player(store, team_id=team.id)

        entry = store.team_of_player(player.id)

        assert entry.team == team
        assert [p.id for p in entry.players] == [player.id]

    def test_team_of_unsigned_player(self, store):
        player = make_player(store)

        with pytest.raises(PlayerNotSigned) as exc_info:
            store.team_of_player(player.id)

        assert exc_info.value.entity == "Player"
        assert exc_info.value.entity_id == player.id
        assert str(exc_info.value) == f"Player {player.id} is not signed to a team"

    def test_players_aged(self, store):
        today = date(2024, 6, 1)
        match_early = make_player(store, birth_date=date(2001, 1, 1))
        match_late = make_player(store, birth_date=date(2001, 12, 31))
        make_player(store, birth_date=date(2000, 12, 31))

        result = store.players_aged(23, today=today)

        assert [p.id for p in result] == [match_early.id, match_late.id]


@pytest.mark.unit
class TestTeams:
    """Test team operations and rosters."""

    def test_roster_is_derived_from_players(self, store):
        team = make_team(store)
        signed = make_player(store, team_id=team.id)
        make_player(store)

        assert [p.id for p in store.roster(team.id)] == [signed.id]
        assert [p.id for p in store.get_team(team.id).players] == [signed.id]

    def test_list_teams_with_rosters(self, store):
        first = make_team(store, name="First")
        second = make_team(store, name="Second")
        p1 = make_player(store, team_id=second.id)

        entries = store.list_teams()

        assert [e.team.id for e in entries] == [first.id, second.id]
        assert entries[0].players == []
        assert [p.id for p in entries[1].players] == [p1.id]

    def test_add_team_with_players(self, store):
        players = [make_player(store) for _ in range(3)]

        entry = store.add_team(
            name="T", ground="G", coach="C", founded_year=1999, player_ids=[p.id for p in players]
        )

        assert [p.id for p in entry.players] == [p.id for p in players]

    def test_update_team_replaces_roster(self, store):
        team = make_team(store)
        other = make_team(store, name="Other")
        stays = make_player(store, team_id=team.id)
        leaves = make_player(store, team_id=team.id)
        joins = make_player(store, team_id=other.id)

        store.update_team(
            team.id, name="Renamed", ground="G", coach="C", founded_year=1990,
            player_ids=[stays.id, joins.id]
        )

        assert [p.id for p in store.roster(team.id)] == [stays.id, joins.id]
        assert store.get_player(leaves.id).team_id is None
        assert store.roster(other.id) == []

    def test_update_team_duplicate_ids(self, store):
        team = make_team(store)
        player = make_player(store)

        store.update_team(team.id, name="T", ground="G", coach="C", founded_year=1990, player_ids=[player.id, player.id])

        assert [p.id for p in store.roster(team.id)] == [player.id]

    def test_update_team_missing_player_changes_nothing(self, store):
        team = make_team(store, name="Original")
        player = make_player(store)

        with pytest.raises(InvalidReference) as exc_info:
            store.update_team(
                team.id, name="New", ground="G", coach="C", founded_year=1990,
                player_ids=[player.id, 77]
            )

        assert "77" in str(exc_info.value)
        assert store.get_team(team.id).team.name == "Original"
        assert store.get_player(player.id).team_id is None

    def test_update_missing_team(self, store):
        with pytest.raises(EntityNotFound):
            store.update_team(9, name="T", ground="G", coach="C", founded_year=1990)

    def test_delete_team_releases_players(self, store):
        team = make_team(store)
        players = [make_player(store, team_id=team.id) for _ in range(2)]

        released = store.delete_team(team.id)

        assert released == [p.id for p in players]
        assert all(store.get_player(p.id).team_id is None for p in players)
        with pytest.raises(EntityNotFound):
            store.get_team(team.id)

    def test_players_coached_by(self, store):
        first = make_team(store, coach="Coach 2")
        make_team(store, coach="Coach 5")
        third = make_team(store, coach="Coach 2")
        a = make_player(store, team_id=third.id)
        b = make_player(store, team_id=first.id)

        assert [p.id for p in store.players_coached_by("Coach 2")] == [b.id, a.id]
        assert store.players_coached_by("coach 2") == []

    def test_counts(self, store):
        make_team(store)
        make_player(store)
        make_player(store)

        assert store.counts() == {"players": 2, "teams": 1}


def test_separate_stores_are_independent():
    first, second = ClubStore(), ClubStore()
    make_player(first)

    assert second.list_players() == []
