"""Group registered players into one team per club."""

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

from typing import Dict, Iterable, List, Optional, Set

from clubpairing.exceptions import InvalidPlayerDataException
from clubpairing.models.player import Player, RegistrationRecord
from clubpairing.models.team import Team
from clubpairing.type_hints import RecordLike
from clubpairing.utils import setup_logger

logger = setup_logger(__name__)


def _as_record(raw: RecordLike) -> Optional[RegistrationRecord]:
    if isinstance(raw, RegistrationRecord):
        return raw
    try:
        return RegistrationRecord.from_dict(raw)
    except InvalidPlayerDataException as e:
        logger.debug(f"Dropping unreadable player record: {e}")
        return None


def qualifying_players(records: Iterable[RecordLike]) -> List[Player]:
    """Return the trimmed players of all complete, non-duplicate records.

    A record is dropped when it is incomplete, when its id was already seen,
    or when its email (trimmed, lowercased) was already seen. The first
    occurrence wins.

    Args:
        records: Raw records or RegistrationRecord instances, in storage order

    Returns:
        Players in input order
    """
    seen_ids: Set[int] = set()
    seen_emails: Set[str] = set()
    players: List[Player] = []

    for raw in records:
        record = _as_record(raw)
        if record is None:
            continue
        if not record.is_complete():
            logger.debug(f"Dropping incomplete player record {record.id}")
            continue

        email_key = record.email.strip().lower()
        if record.id in seen_ids or email_key in seen_emails:
            logger.debug(f"Dropping duplicate player record {record.id}")
            continue
        seen_ids.add(record.id)
        seen_emails.add(email_key)
        players.append(record.to_player())

    return players


def build_teams(records: Iterable[RecordLike]) -> List[Team]:
    """Group qualifying players into teams keyed by their trimmed club.

    Clubs compare exactly (case-sensitive). Teams come out in the order
    their club first appears; teams without a qualifying player never
    appear. Pure: the same input always yields equal teams.

    Args:
        records: Raw player records, possibly incomplete or duplicated

    Returns:
        List of teams, one per club
    """
    rosters: Dict[str, List[Player]] = {}
    for player in qualifying_players(records):
        rosters.setdefault(player.club, []).append(player)

    teams = [
        Team(club=club, players=tuple(p for p in members if p.club == club))
        for club, members in rosters.items()
        if club
    ]
    teams = [team for team in teams if team.players]

    logger.info(
        f"Built {len(teams)} teams from "
        f"{sum(len(team.players) for team in teams)} registered players"
    )
    return teams
