"""Random single-round playoff draw over individual players."""

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

import random
from typing import List, Optional, Sequence

from clubpairing.models.match import PlayoffMatch
from clubpairing.models.player import Player
from clubpairing.models.results import PlayoffResult
from clubpairing.utils import setup_logger

logger = setup_logger(__name__)


def generate_playoffs(
    players: Sequence[Player], rng: Optional[random.Random] = None
) -> PlayoffResult:
    """Shuffle players and pair them two at a time.

    With an odd count the last player after the shuffle takes the bye.
    Nothing is remembered between calls.

    Args:
        players: Players to draw; the sequence itself is not modified
        rng: Source for the shuffle, seeded for a reproducible draw

    Returns:
        The drawn playoff round
    """
    rng = rng or random.Random()
    shuffled: List[Player] = list(players)
    rng.shuffle(shuffled)

    bye_player = shuffled.pop() if len(shuffled) % 2 else None
    matches = [
        PlayoffMatch(player1=shuffled[i], player2=shuffled[i + 1])
        for i in range(0, len(shuffled), 2)
    ]

    logger.info(
        f"Playoff draw: {len(matches)} matches, "
        f"bye: {bye_player.full_name if bye_player else 'None'}"
    )
    return PlayoffResult(matches=matches, bye_player=bye_player)
