"""Data models for round robin matchdays and knockout stages."""

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

from clubpairing.models.match import Match
from clubpairing.models.team import Team


@dataclass
class Round:
    """One matchday of a round robin schedule.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    matchday : str
        Display label, e.g. ``Matchday 3``.
    matches : list of Match
        Matches played on this matchday.
    bye_team : Team or None
        Team sitting this round out when the team count is odd.
    """

    round_number: int
    matchday: str
    matches: List[Match] = field(default_factory=list)
    bye_team: Optional[Team] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round to dictionary."""
        data: Dict[str, Any] = {
            "round": self.round_number,
            "matchday": self.matchday,
            "matches": [m.to_dict() for m in self.matches],
        }
        if self.bye_team is not None:
            data["bye"] = self.bye_team.to_dict()
        return data


@dataclass
class Stage:
    """One stage of a knockout bracket.

    Attributes
    ----------
    stage_number : int
        Stage number (1-indexed).
    stage_name : str
        Label derived from the participant count, e.g. ``Semi-Finals``.
    matches : list of Match
        Matches of this stage, byes included.
    is_complete : bool
        Whether every match has a recorded result. Always False for a
        freshly generated bracket.
    """

    stage_number: int
    stage_name: str
    matches: List[Match] = field(default_factory=list)
    is_complete: bool = False

    @property
    def byes(self) -> List[Match]:
        return [m for m in self.matches if m.is_bye]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize stage to dictionary."""
        return {
            "stage": self.stage_number,
            "stageName": self.stage_name,
            "matches": [m.to_dict() for m in self.matches],
            "isComplete": self.is_complete,
        }
