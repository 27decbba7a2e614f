from clubpairing.models.player import RegistrationRecord
from clubpairing.pairing.team_builder import build_teams, qualifying_players

from tests.conftest import raw_record


def test_groups_players_by_club_in_first_appearance_order(records):
    teams = build_teams(records)

    assert [t.club for t in teams] == ["Arsenal", "Liverpool", "Real Madrid"]
    assert [p.id for p in teams[0].players] == [1, 3]
    assert teams[2].league == "La Liga"


def test_every_player_shares_the_team_club(records):
    for team in build_teams(records):
        assert all(p.club == team.club for p in team.players)


def test_incomplete_records_are_dropped():
    rows = [
        raw_record(1, "Arsenal", firstName=""),
        raw_record(2, "Arsenal", email=None),
        raw_record(3, "Arsenal", code="   "),
        raw_record(4, "Chelsea", league=""),
        raw_record(5, "Chelsea"),
    ]
    teams = build_teams(rows)

    assert [t.club for t in teams] == ["Chelsea"]
    assert [p.id for p in teams[0].players] == [5]


def test_club_and_names_are_trimmed():
    rows = [
        raw_record(1, "  Arsenal "),
        raw_record(2, "Arsenal", firstName="  Emma ", lastName=" Johnson"),
    ]
    teams = build_teams(rows)

    assert len(teams) == 1
    assert teams[0].club == "Arsenal"
    assert teams[0].players[1].full_name == "Emma Johnson"


def test_club_grouping_is_case_sensitive():
    teams = build_teams([raw_record(1, "Arsenal"), raw_record(2, "arsenal")])

    assert [t.club for t in teams] == ["Arsenal", "arsenal"]


def test_duplicate_ids_and_emails_keep_first_occurrence():
    rows = [
        raw_record(1, "Arsenal"),
        raw_record(1, "Chelsea", email="other@example.com"),
        raw_record(2, "Chelsea", email=" PLAYER1@example.com "),
        raw_record(3, "Chelsea"),
    ]
    players = qualifying_players(rows)

    assert [p.id for p in players] == [1, 3]
    assert players[0].club == "Arsenal"


def test_unreadable_records_are_filtered_not_raised():
    rows = ["not a record", None, raw_record(1, "Arsenal", id="seven"), raw_record(2)]

    teams = build_teams(rows)

    assert [p.id for t in teams for p in t.players] == [2]


def test_accepts_registration_record_instances():
    record = RegistrationRecord.from_dict(raw_record(9, "Lyon", league="Ligue 1"))

    teams = build_teams([record])

    assert teams[0].club == "Lyon"
    assert teams[0].league == "Ligue 1"


def test_building_twice_gives_equal_teams(records):
    assert build_teams(records) == build_teams(records)


def test_no_records_gives_no_teams():
    assert build_teams([]) == []
