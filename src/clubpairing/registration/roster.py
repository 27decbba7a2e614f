"""Roster views: registration order, pages and search."""

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

import math
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Iterable, List

from dateutil import tz

from clubpairing.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from clubpairing.exceptions import InvalidPlayerDataException
from clubpairing.models.match import Match
from clubpairing.models.player import RegistrationRecord
from clubpairing.models.results import RoundRobinSchedule
from clubpairing.models.team import Team
from clubpairing.type_hints import RecordLike
from clubpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class RosterPage:
    """One page of the registered players table.

    Attributes:
        players: Records on this page, newest registration first
        total: Number of records across all pages
        page: 1-indexed page number
        total_pages: Number of pages for the requested page size
    """

    players: List[RegistrationRecord] = field(default_factory=list)
    total: int = 0
    page: int = DEFAULT_PAGE
    total_pages: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "players": [p.to_dict() for p in self.players],
            "total": self.total,
            "page": self.page,
            "totalPages": self.total_pages,
        }


def _records(records: Iterable[RecordLike]) -> List[RegistrationRecord]:
    result = []
    for raw in records:
        if isinstance(raw, RegistrationRecord):
            result.append(raw)
            continue
        try:
            result.append(RegistrationRecord.from_dict(raw))
        except InvalidPlayerDataException as e:
            logger.debug(f"Skipping unreadable roster record: {e}")
    return result


def _aware(moment: datetime) -> datetime:
    # Naive timestamps from storage are UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz.UTC)
    return moment


def order_by_registration(records: Iterable[RecordLike]) -> List[RegistrationRecord]:
    """Newest registration first; records without a timestamp go last."""
    parsed = _records(records)
    dated = [r for r in parsed if r.created_at is not None]
    undated = [r for r in parsed if r.created_at is None]
    dated.sort(key=lambda r: _aware(r.created_at), reverse=True)
    return dated + undated


def parse_page_param(value: Any, default: int) -> int:
    """Read a page or limit query value, falling back to ``default``."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def paginate_roster(
    records: Iterable[RecordLike],
    page: Any = DEFAULT_PAGE,
    limit: Any = DEFAULT_PAGE_SIZE,
) -> RosterPage:
    """Slice the roster, newest registration first.

    Args:
        records: All player records
        page: Requested page (1-indexed), leniently parsed
        limit: Page size, leniently parsed

    Returns:
        The requested page; pages past the end are empty
    """
    page = parse_page_param(page, DEFAULT_PAGE)
    limit = parse_page_param(limit, DEFAULT_PAGE_SIZE)

    ordered = order_by_registration(records)
    skip = (page - 1) * limit
    return RosterPage(
        players=ordered[skip : skip + limit],
        total=len(ordered),
        page=page,
        total_pages=math.ceil(len(ordered) / limit),
    )


def search_players(
    records: Iterable[RecordLike], query: str
) -> List[RegistrationRecord]:
    """Case-insensitive search over full name, email and address."""
    parsed = _records(records)
    needle = (query or "").strip().lower()
    if not needle:
        return parsed

    def matches(record: RegistrationRecord) -> bool:
        haystacks = (
            f"{record.first_name or ''} {record.last_name or ''}",
            record.email or "",
            record.address or "",
        )
        return any(needle in text.lower() for text in haystacks)

    return [r for r in parsed if matches(r)]


def _team_matches(team: Team, needle: str) -> bool:
    if needle in team.club.lower() or needle in team.league.lower():
        return True
    return any(needle in p.full_name.lower() for p in team.players)


def _match_matches(match: Match, needle: str) -> bool:
    teams = [match.team1] if match.team2 is None else [match.team1, match.team2]
    return any(_team_matches(team, needle) for team in teams)


def filter_schedule(schedule: RoundRobinSchedule, query: str) -> RoundRobinSchedule:
    """Keep matches where a club, league or player name contains ``query``.

    Rounds left without matches are dropped. A blank query returns the
    schedule unchanged.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return schedule

    rounds = []
    for round_data in schedule.rounds:
        kept = [m for m in round_data.matches if _match_matches(m, needle)]
        if kept:
            rounds.append(replace(round_data, matches=kept))
    return RoundRobinSchedule(rounds=rounds)
