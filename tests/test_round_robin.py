import itertools

import pytest

from clubpairing.pairing.round_robin import RoundRobin, generate_round_robin, next_rotation


def _club_pairs(schedule):
    return [frozenset({m.team1.club, m.team2.club}) for m in schedule.pairings]


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7, 8, 11, 16])
def test_every_pair_meets_exactly_once(make_teams, n):
    teams = make_teams(n)
    schedule = generate_round_robin(teams)

    pairs = _club_pairs(schedule)
    expected = {frozenset({a.club, b.club}) for a, b in itertools.combinations(teams, 2)}
    assert len(pairs) == n * (n - 1) // 2
    assert set(pairs) == expected
    assert schedule.total == len(pairs)


@pytest.mark.parametrize("n", [2, 4, 6, 8, 16])
def test_even_count_gives_n_minus_one_full_rounds(make_teams, n):
    schedule = generate_round_robin(make_teams(n))

    assert schedule.total_rounds == n - 1
    assert all(len(r.matches) == n // 2 for r in schedule.rounds)
    assert all(r.bye_team is None for r in schedule.rounds)


@pytest.mark.parametrize("n", [3, 5, 7, 11])
def test_odd_count_gives_n_rounds_with_a_bye(make_teams, n):
    schedule = generate_round_robin(make_teams(n))

    assert schedule.total_rounds == n
    assert all(len(r.matches) == (n - 1) // 2 for r in schedule.rounds)
    bye_clubs = [r.bye_team.club for r in schedule.rounds]
    assert sorted(bye_clubs) == sorted(t.club for t in make_teams(n))


@pytest.mark.parametrize("n", [3, 4, 5, 6, 9, 10])
def test_no_team_plays_twice_in_a_round(make_teams, n):
    for round_data in generate_round_robin(make_teams(n)).rounds:
        clubs = [c for m in round_data.matches for c in (m.team1.club, m.team2.club)]
        assert len(clubs) == len(set(clubs))
        if round_data.bye_team is not None:
            assert round_data.bye_team.club not in clubs


def test_three_teams_one_match_per_matchday(make_teams):
    schedule = generate_round_robin(make_teams(3))

    assert [r.round_number for r in schedule.rounds] == [1, 2, 3]
    assert [r.matchday for r in schedule.rounds] == [
        "Matchday 1",
        "Matchday 2",
        "Matchday 3",
    ]
    assert [len(r.matches) for r in schedule.rounds] == [1, 1, 1]
    assert schedule.total == 3


def test_four_teams_first_round_follows_the_circle(make_teams):
    a, b, c, d = make_teams(4)
    schedule = generate_round_robin([a, b, c, d])

    first = schedule.rounds[0].matches
    assert {frozenset({m.team1.club, m.team2.club}) for m in first} == {
        frozenset({a.club, d.club}),
        frozenset({b.club, c.club}),
    }
    assert schedule.total == 6
    assert schedule.total_rounds == 3


def test_match_orientation_follows_input_order(make_teams):
    teams = make_teams(6)
    position = {t.club: i for i, t in enumerate(teams)}

    for match in generate_round_robin(teams).pairings:
        assert position[match.team1.club] < position[match.team2.club]


def test_schedule_is_deterministic(make_teams):
    teams = make_teams(7)

    assert generate_round_robin(teams).to_dict() == generate_round_robin(teams).to_dict()


@pytest.mark.parametrize("n", [0, 1])
def test_fewer_than_two_teams_is_empty(make_teams, n):
    schedule = generate_round_robin(make_teams(n))

    assert schedule.rounds == []
    assert schedule.to_dict() == {"rounds": [], "pairings": [], "total": 0, "totalRounds": 0}


def test_next_rotation_keeps_pivot_for_even_count():
    assert next_rotation((0, 1, 2, 3)) == (0, 3, 1, 2)


def test_next_rotation_turns_whole_circle_for_odd_count():
    assert next_rotation((0, 1, 2)) == (2, 0, 1)


def test_number_of_rounds(make_teams):
    assert RoundRobin(make_teams(1)).number_of_rounds == 0
    assert RoundRobin(make_teams(4)).number_of_rounds == 3
    assert RoundRobin(make_teams(5)).number_of_rounds == 5


def test_to_dict_shape(make_teams):
    data = generate_round_robin(make_teams(3)).to_dict()

    assert data["total"] == 3
    assert data["totalRounds"] == 3
    assert len(data["pairings"]) == 3
    first_round = data["rounds"][0]
    assert set(first_round) == {"round", "matchday", "matches", "bye"}
    match = first_round["matches"][0]
    assert set(match) == {"team1", "team2"}
    assert set(match["team1"]) == {"club", "players", "league"}
    assert set(match["team1"]["players"][0]) == {
        "id",
        "firstName",
        "lastName",
        "league",
        "club",
    }
