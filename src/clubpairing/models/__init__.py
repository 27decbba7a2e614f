"""Data models shared by the schedulers."""

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

from clubpairing.models.config import SchedulerConfig
from clubpairing.models.match import Match, PlayoffMatch
from clubpairing.models.player import Player, RegistrationRecord
from clubpairing.models.results import PlayoffResult, RoundRobinSchedule, TournamentResult
from clubpairing.models.round_data import Round, Stage
from clubpairing.models.team import Team

__all__ = [
    "Match",
    "Player",
    "PlayoffMatch",
    "PlayoffResult",
    "RegistrationRecord",
    "Round",
    "RoundRobinSchedule",
    "SchedulerConfig",
    "Stage",
    "Team",
    "TournamentResult",
]
