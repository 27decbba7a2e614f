"""Top-level results handed back to the request layer."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from clubpairing.constants import PLAYOFF_ROUND_LABEL
from clubpairing.models.match import Match, PlayoffMatch
from clubpairing.models.player import Player
from clubpairing.models.round_data import Round, Stage


@dataclass
class RoundRobinSchedule:
    """A full round robin split into matchdays."""

    rounds: List[Round] = field(default_factory=list)

    @property
    def pairings(self) -> List[Match]:
        """All matches of all rounds, in round order."""
        return [match for round_data in self.rounds for match in round_data.matches]

    @property
    def total(self) -> int:
        return sum(len(round_data.matches) for round_data in self.rounds)

    @property
    def total_rounds(self) -> int:
        return len(self.rounds)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize schedule to dictionary."""
        return {
            "rounds": [r.to_dict() for r in self.rounds],
            "pairings": [m.to_dict() for m in self.pairings],
            "total": self.total,
            "totalRounds": self.total_rounds,
        }


@dataclass
class TournamentResult:
    """A knockout bracket with its summary counts.

    Attributes
    ----------
    stages : list of Stage
        Stages in the order they are played.
    registered_players_count : int
        Players across all participating teams.
    teams_count : int
        Teams handed to the scheduler.
    """

    stages: List[Stage] = field(default_factory=list)
    registered_players_count: int = 0
    teams_count: int = 0

    @property
    def total_stages(self) -> int:
        return len(self.stages)

    @property
    def total_matches(self) -> int:
        """Every match entry, byes included."""
        return sum(len(stage.matches) for stage in self.stages)

    @property
    def played_matches(self) -> int:
        """Matches with two teams, i.e. one elimination each."""
        return sum(
            1 for stage in self.stages for match in stage.matches if not match.is_bye
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament result to dictionary."""
        return {
            "stages": [s.to_dict() for s in self.stages],
            "totalStages": self.total_stages,
            "totalMatches": self.total_matches,
            "playedMatches": self.played_matches,
            "registeredPlayersCount": self.registered_players_count,
            "teamsCount": self.teams_count,
        }


@dataclass
class PlayoffResult:
    """A single randomly drawn playoff round over individual players."""

    matches: List[PlayoffMatch] = field(default_factory=list)
    bye_player: Optional[Player] = None
    round_label: str = PLAYOFF_ROUND_LABEL

    def to_dict(self) -> Dict[str, Any]:
        """Serialize playoff round to dictionary."""
        data: Dict[str, Any] = {
            "round": self.round_label,
            "matches": [m.to_dict() for m in self.matches],
        }
        if self.bye_player is not None:
            data["bye"] = {"player": self.bye_player.display_label}
        return data
