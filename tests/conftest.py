import itertools

import pytest

from clubpairing.models.player import Player
from clubpairing.models.team import Team

CLUBS = [
    ("Arsenal", "Premier League"),
    ("Liverpool", "Premier League"),
    ("Chelsea", "Premier League"),
    ("Real Madrid", "La Liga"),
    ("Barcelona", "La Liga"),
    ("AC Milan", "Serie A"),
    ("Juventus", "Serie A"),
    ("Bayern Munich", "Bundesliga"),
    ("Lyon", "Ligue 1"),
    ("Marseille", "Ligue 1"),
    ("AS Monaco", "Ligue 1"),
    ("Porto", "Primeira Liga"),
    ("Benfica", "Primeira Liga"),
    ("Ajax", "Eredivisie"),
    ("PSV", "Eredivisie"),
    ("Celtic", "Premiership"),
    ("Rangers", "Premiership"),
]


def raw_record(player_id, club="Arsenal", league="Premier League", **overrides):
    """Storage-shaped player row with every field filled in."""
    record = {
        "id": player_id,
        "firstName": f"First{player_id}",
        "lastName": f"Last{player_id}",
        "email": f"player{player_id}@example.com",
        "address": f"{player_id} Main St",
        "league": league,
        "club": club,
        "code": f"c{player_id:04d}",
        "createdAt": f"2025-11-{(player_id % 28) + 1:02d}T10:00:00Z",
    }
    record.update(overrides)
    return record


def make_team(club, league="League", size=1, first_id=1):
    players = tuple(
        Player(
            id=first_id + i,
            first_name=f"First{first_id + i}",
            last_name=f"Last{first_id + i}",
            league=league,
            club=club,
        )
        for i in range(size)
    )
    return Team(club=club, players=players)


@pytest.fixture
def make_teams():
    """Return a factory building ``n`` single-player teams with distinct clubs."""

    def _make(n, size=1):
        ids = itertools.count(1, size)
        extra = [(f"Club {i}", "Open League") for i in range(len(CLUBS) + 1, n + 1)]
        return [
            make_team(club, league, size=size, first_id=next(ids))
            for club, league in (CLUBS + extra)[:n]
        ]

    return _make


@pytest.fixture
def records():
    """A small registration export: three clubs, one incomplete row."""
    return [
        raw_record(1, "Arsenal"),
        raw_record(2, "Liverpool"),
        raw_record(3, "Arsenal"),
        raw_record(4, "Real Madrid", league="La Liga"),
        raw_record(5, "Liverpool", address="  "),
    ]
