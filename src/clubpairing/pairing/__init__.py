"""Pairing algorithms: team building, round robin, knockout and playoffs."""

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

from clubpairing.pairing.knockout import (
    FirstTeamAdvances,
    RecordedResultsResolver,
    WinnerResolver,
    generate_knockout,
)
from clubpairing.pairing.playoffs import generate_playoffs
from clubpairing.pairing.round_robin import RoundRobin, generate_round_robin
from clubpairing.pairing.stage_names import stage_name
from clubpairing.pairing.team_builder import build_teams, qualifying_players

__all__ = [
    "FirstTeamAdvances",
    "RecordedResultsResolver",
    "RoundRobin",
    "WinnerResolver",
    "build_teams",
    "generate_knockout",
    "generate_playoffs",
    "generate_round_robin",
    "qualifying_players",
    "stage_name",
]
