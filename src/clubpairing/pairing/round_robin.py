"""Round robin scheduling with the circle method (Berger tables)."""

# Club Pairing
# Copyright (C) 2025  Club Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from itertools import combinations
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from clubpairing.constants import MATCHDAY_LABEL, MIN_PARTICIPANTS
from clubpairing.models.match import Match
from clubpairing.models.results import RoundRobinSchedule
from clubpairing.models.round_data import Round
from clubpairing.models.team import Team
from clubpairing.utils import setup_logger

logger = setup_logger(__name__)

# Positions into the team list, one entry per team
Rotation = Tuple[int, ...]


def _pair_key(team1: Team, team2: Team) -> frozenset:
    return frozenset({team1.club, team2.club})


def next_rotation(rotation: Rotation) -> Rotation:
    """Advance the circle by one step.

    With an even count the first slot stays fixed and the last entry moves
    to slot 1. With an odd count the whole circle turns: the last entry moves
    to slot 0.
    """
    if len(rotation) < 2:
        return rotation
    if len(rotation) % 2 == 0:
        return (rotation[0], rotation[-1]) + rotation[1:-1]
    return (rotation[-1],) + rotation[:-1]


class RoundRobin:
    """Every team plays every other team once, split into matchdays.

    Teams keep their input order; index 0 is the fixed pivot of the circle
    for an even count. With an odd count the team in slot 0 sits out each
    round, so ``N`` rounds are needed instead of ``N - 1``.

    Example::

        schedule = RoundRobin(teams).schedule()
        for round_data in schedule.rounds:
            print(round_data.matchday, len(round_data.matches))
    """

    def __init__(self, teams: Sequence[Team]):
        self.teams: List[Team] = list(teams)
        self._pairings: Dict[frozenset, Match] = self._build_pairings()

    @property
    def team_count(self) -> int:
        return len(self.teams)

    @property
    def number_of_rounds(self) -> int:
        """N - 1 rounds for an even count, N for an odd one, 0 below two."""
        if self.team_count < MIN_PARTICIPANTS:
            return 0
        if self.team_count % 2 == 0:
            return self.team_count - 1
        return self.team_count

    @property
    def matches_per_round(self) -> int:
        return self.team_count // 2

    def _build_pairings(self) -> Dict[frozenset, Match]:
        """All C(N, 2) matches keyed by the unordered pair of clubs."""
        pairings: Dict[frozenset, Match] = {}
        for team1, team2 in combinations(self.teams, 2):
            if team1.club == team2.club:
                continue
            pairings[_pair_key(team1, team2)] = Match(team1=team1, team2=team2)
        return pairings

    def rotations(self) -> Iterator[Rotation]:
        """Yield the rotation used for each round, starting from input order."""
        rotation: Rotation = tuple(range(self.team_count))
        for _ in range(self.number_of_rounds):
            yield rotation
            rotation = next_rotation(rotation)

    def _round_matches(self, rotation: Rotation) -> Tuple[List[Match], Optional[Team]]:
        n = self.team_count
        start = 0 if n % 2 == 0 else 1
        bye_team = None if n % 2 == 0 else self.teams[rotation[0]]

        matches: List[Match] = []
        for i in range(self.matches_per_round):
            idx1 = rotation[start + i]
            idx2 = rotation[n - 1 - i]
            if idx1 == idx2:
                continue
            match = self._pairings.get(_pair_key(self.teams[idx1], self.teams[idx2]))
            if match is not None:
                matches.append(match)
        return matches, bye_team

    def schedule(self) -> RoundRobinSchedule:
        """Build the full schedule; rounds without matches are left out."""
        rounds: List[Round] = []
        for index, rotation in enumerate(self.rotations()):
            matches, bye_team = self._round_matches(rotation)
            if not matches:
                continue
            round_number = index + 1
            rounds.append(
                Round(
                    round_number=round_number,
                    matchday=MATCHDAY_LABEL.format(number=round_number),
                    matches=matches,
                    bye_team=bye_team,
                )
            )

        schedule = RoundRobinSchedule(rounds=rounds)
        logger.info(
            f"Round robin for {self.team_count} teams: "
            f"{schedule.total} matches over {schedule.total_rounds} matchdays"
        )
        return schedule


def generate_round_robin(teams: Sequence[Team]) -> RoundRobinSchedule:
    """Schedule every pairing of ``teams`` into matchdays.

    Args:
        teams: Teams in the order they should be indexed (not shuffled)

    Returns:
        The schedule; empty when fewer than two teams are given
    """
    if len(teams) < MIN_PARTICIPANTS:
        return RoundRobinSchedule()
    return RoundRobin(teams).schedule()
