"""Team data class."""

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
from typing import Any, Dict, Tuple

from clubpairing.models.player import Player


@dataclass(frozen=True)
class Team:
    """All qualifying players of one club.

    Attributes
    ----------
    club : str
        Trimmed, case-sensitive club name. Unique within one build.
    players : tuple of Player
        Players in registration order; every one has ``club`` as its club.
    """

    club: str
    players: Tuple[Player, ...] = field(default_factory=tuple)

    @property
    def league(self) -> str:
        """League of the first player, or an empty string for no players."""
        return self.players[0].league if self.players else ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "club": self.club,
            "players": [p.to_dict() for p in self.players],
            "league": self.league,
        }

    def __str__(self) -> str:
        return self.club
