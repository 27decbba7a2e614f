"""Single-elimination knockout brackets."""

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

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Sequence, Tuple

from clubpairing.constants import MATCH_ID_FORMAT, MIN_PARTICIPANTS
from clubpairing.exceptions import InvalidWinnerException
from clubpairing.models.match import Match
from clubpairing.models.results import TournamentResult
from clubpairing.models.round_data import Stage
from clubpairing.models.team import Team
from clubpairing.pairing.stage_names import stage_name
from clubpairing.utils import setup_logger

logger = setup_logger(__name__)


class WinnerResolver(ABC):
    """Decides which team of a knockout match advances.

    The bracket generator asks the resolver once per non-bye match and never
    inspects how the answer was reached, so recorded results and placeholders
    are interchangeable.
    """

    @abstractmethod
    def decide(self, match_id: str, team1: Team, team2: Team) -> Team:
        """Return the winner of ``match_id``; must be ``team1`` or ``team2``."""


class FirstTeamAdvances(WinnerResolver):
    """Placeholder policy: team1 always advances.

    No result is computed. This reproduces the bracket the registration
    site has always shown until real results are available.
    """

    def decide(self, match_id: str, team1: Team, team2: Team) -> Team:
        return team1


class RecordedResultsResolver(WinnerResolver):
    """Advance the club recorded for each match id.

    Matches without a recorded result fall back to ``fallback``.
    """

    def __init__(
        self,
        winners_by_match: Mapping[str, str],
        fallback: Optional[WinnerResolver] = None,
    ):
        self.winners_by_match = dict(winners_by_match)
        self.fallback = fallback or FirstTeamAdvances()

    def decide(self, match_id: str, team1: Team, team2: Team) -> Team:
        club = self.winners_by_match.get(match_id)
        if club is None:
            return self.fallback.decide(match_id, team1, team2)
        if club == team1.club:
            return team1
        if club == team2.club:
            return team2
        raise InvalidWinnerException(
            f"Recorded winner '{club}' of {match_id} played neither "
            f"'{team1.club}' nor '{team2.club}'"
        )


def _play_stage(
    stage_number: int,
    participants: List[Team],
    resolver: WinnerResolver,
) -> Tuple[Stage, List[Team]]:
    """Pair ``participants`` two at a time and collect who advances."""
    matches: List[Match] = []
    advancing: List[Team] = []

    for index in range(0, len(participants), 2):
        match_number = index // 2 + 1
        match_id = MATCH_ID_FORMAT.format(stage=stage_number, number=match_number)
        team1 = participants[index]
        team2 = participants[index + 1] if index + 1 < len(participants) else None

        if team2 is None:
            winner = team1
        else:
            winner = resolver.decide(match_id, team1, team2)
            if winner != team1 and winner != team2:
                raise InvalidWinnerException(
                    f"Winner of {match_id} must be '{team1.club}' or "
                    f"'{team2.club}', got '{winner}'"
                )

        matches.append(
            Match(
                team1=team1,
                team2=team2,
                match_id=match_id,
                stage=stage_number,
                match_number=match_number,
                winner=winner,
            )
        )
        advancing.append(winner)

    stage = Stage(
        stage_number=stage_number,
        stage_name=stage_name(stage_number, len(participants)),
        matches=matches,
        is_complete=False,
    )
    return stage, advancing


def generate_knockout(
    teams: Sequence[Team],
    rng: Optional[random.Random] = None,
    resolver: Optional[WinnerResolver] = None,
) -> TournamentResult:
    """Build a single-elimination bracket down to one remaining team.

    The teams are shuffled once before the first stage. Each stage pairs the
    current participants in order; an odd participant out gets a bye and
    advances. Stages are labelled from the number of teams entering them.

    Parameters
    ----------
    teams : sequence of Team
        Participating teams; the sequence itself is not modified.
    rng : random.Random, optional
        Source for the initial shuffle. Pass a seeded instance for a
        reproducible draw.
    resolver : WinnerResolver, optional
        Decides each non-bye match. Defaults to :class:`FirstTeamAdvances`.

    Returns
    -------
    TournamentResult
        Empty (no stages) when fewer than two teams are given.
    """
    if len(teams) < MIN_PARTICIPANTS:
        return TournamentResult(teams_count=len(teams))

    rng = rng or random.Random()
    resolver = resolver or FirstTeamAdvances()

    participants = list(teams)
    rng.shuffle(participants)

    stages: List[Stage] = []
    stage_number = 1
    while len(participants) > 1:
        stage, participants = _play_stage(stage_number, participants, resolver)
        logger.debug(
            f"{stage.stage_name}: {len(stage.matches)} matches, "
            f"{len(stage.byes)} byes"
        )
        stages.append(stage)
        stage_number += 1

    result = TournamentResult(
        stages=stages,
        registered_players_count=sum(len(team.players) for team in teams),
        teams_count=len(teams),
    )
    logger.info(
        f"Knockout for {result.teams_count} teams: "
        f"{result.total_matches} matches over {result.total_stages} stages"
    )
    return result
