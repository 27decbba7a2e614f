import pytest

from clubpairing.controllers.schedule_manager import ScheduleManager
from clubpairing.models.config import SchedulerConfig
from clubpairing.models.results import RoundRobinSchedule, TournamentResult
from clubpairing.pairing.knockout import RecordedResultsResolver

from tests.conftest import CLUBS, raw_record


@pytest.fixture
def league_records():
    rows = []
    for i, (club, league) in enumerate(CLUBS[:6], start=1):
        rows.append(raw_record(i, club, league=league))
        rows.append(raw_record(100 + i, club, league=league))
    rows.append(raw_record(999, "   "))
    return rows


def test_defaults_to_round_robin(league_records):
    result = ScheduleManager().schedule(league_records)

    assert isinstance(result, RoundRobinSchedule)
    assert result.total == 15
    assert result.total_rounds == 5


def test_knockout_format(league_records):
    manager = ScheduleManager(SchedulerConfig(format="knockout", seed=1))

    result = manager.schedule(league_records)

    assert isinstance(result, TournamentResult)
    assert result.teams_count == 6
    assert result.registered_players_count == 12
    assert result.total_stages == 3


def test_seeded_knockout_is_reproducible(league_records):
    config = SchedulerConfig(format="knockout", seed=77)

    first = ScheduleManager(config).schedule(league_records).to_dict()
    second = ScheduleManager(config).schedule(league_records).to_dict()

    assert first == second


def test_winner_resolver_is_threaded_through(league_records):
    teams = ScheduleManager().build_teams(league_records[:4])
    config = SchedulerConfig(
        format="knockout",
        seed=0,
        winner_resolver=RecordedResultsResolver({"stage-1-match-1": teams[1].club}),
    )

    result = ScheduleManager(config).schedule_teams(teams)

    assert result.stages[0].matches[0].winner == teams[1]


def test_too_few_teams_is_empty():
    result = ScheduleManager().schedule([raw_record(1, "Arsenal"), raw_record(2, "Arsenal")])

    assert result.to_dict()["total"] == 0


def test_playoffs_draw_over_players(league_records):
    manager = ScheduleManager(SchedulerConfig(seed=4))

    result = manager.playoffs(league_records)

    assert len(result.matches) == 6
    assert result.bye_player is None


def test_unsupported_format_after_construction(league_records):
    config = SchedulerConfig()
    config.format = "swiss"

    with pytest.raises(NotImplementedError):
        ScheduleManager(config).schedule(league_records)


def test_roster_page_uses_configured_page_size(league_records):
    manager = ScheduleManager(SchedulerConfig(page_size=5))

    page = manager.roster_page(league_records, page=3)

    assert page.total == 13
    assert page.total_pages == 3
    assert len(page.players) == 3


def test_newest_registration_leads_the_rotation():
    rows = [
        raw_record(1, "Arsenal", createdAt="2025-11-01T10:00:00Z"),
        raw_record(2, "Liverpool", createdAt="2025-11-02T10:00:00Z"),
        raw_record(3, "Real Madrid", league="La Liga", createdAt="2025-11-03T10:00:00Z"),
        raw_record(4, "Chelsea", createdAt="2025-11-04T10:00:00Z"),
    ]

    result = ScheduleManager().schedule(rows)

    first = result.rounds[0].matches[0]
    assert first.team1.club == "Chelsea"
    assert first.team2.club == "Arsenal"


def test_file_order_does_not_change_the_schedule(league_records):
    forward = ScheduleManager().schedule(league_records).to_dict()
    backward = ScheduleManager().schedule(list(reversed(league_records))).to_dict()

    assert forward == backward


def test_playoffs_skip_incomplete_and_duplicate_records():
    rows = [
        raw_record(1),
        raw_record(2, address=""),
        raw_record(3, email="PLAYER1@example.com "),
        raw_record(4, "Liverpool"),
    ]

    result = ScheduleManager(SchedulerConfig(seed=2)).playoffs(rows)

    drawn = {result.matches[0].player1.id, result.matches[0].player2.id}
    assert drawn == {1, 4}
    assert result.bye_player is None
