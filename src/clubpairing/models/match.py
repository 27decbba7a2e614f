"""Match data classes for team and playoff pairings."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from clubpairing.models.player import Player
from clubpairing.models.team import Team


@dataclass(frozen=True)
class Match:
    """A pairing of two teams, or one team and a bye.

    Attributes
    ----------
    team1 : Team
        First (home) team.
    team2 : Team or None
        Opponent, or None when ``team1`` has a bye.
    match_id : str or None
        ``stage-<stage>-match-<n>`` for knockout matches, None in a round robin.
    stage : int or None
        Knockout stage number (1-indexed).
    match_number : int or None
        Position within the stage (1-indexed).
    winner : Team or None
        Team that advanced, when a result has been decided.
    """

    team1: Team
    team2: Optional[Team] = None
    match_id: Optional[str] = None
    stage: Optional[int] = None
    match_number: Optional[int] = None
    winner: Optional[Team] = None

    @property
    def is_bye(self) -> bool:
        return self.team2 is None

    def involves(self, team: Team) -> bool:
        """Check whether ``team`` plays in this match."""
        return team == self.team1 or (self.team2 is not None and team == self.team2)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        data: Dict[str, Any] = {
            "team1": self.team1.to_dict(),
            "team2": self.team2.to_dict() if self.team2 else None,
        }
        if self.match_id is not None:
            data["matchId"] = self.match_id
            data["stage"] = self.stage
            data["matchNumber"] = self.match_number
            data["isBye"] = self.is_bye
            if self.winner is not None:
                data["winner"] = self.winner.to_dict()
        return data


@dataclass(frozen=True)
class PlayoffMatch:
    """Two individual players drawn against each other."""

    player1: Player
    player2: Player

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player1": self.player1.display_label,
            "player2": self.player2.display_label,
        }
