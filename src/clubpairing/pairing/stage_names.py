"""Human readable knockout stage names."""

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

from clubpairing.constants import (
    NAMED_STAGES,
    ROUND_OF_LABEL,
    ROUND_OF_LIMIT,
    STAGE_LABEL,
)


def stage_name(stage_number: int, participant_count: int) -> str:
    """Name a knockout stage from the number of teams entering it.

    2 -> Final, 4 -> Semi-Finals, 8 -> Quarter-Finals, up to 16 -> Round of K,
    anything larger falls back to ``Stage <stage_number>``.
    """
    if participant_count in NAMED_STAGES:
        return NAMED_STAGES[participant_count]
    if participant_count <= ROUND_OF_LIMIT:
        return ROUND_OF_LABEL.format(count=participant_count)
    return STAGE_LABEL.format(number=stage_number)
