"""Schedule management for registered players.

This module is the single entry point the request layer calls: it turns raw
player records into teams and hands them to the scheduler the configuration
asks for.
"""

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

from typing import Any, Iterable, List, Optional, Union

from clubpairing.constants import DEFAULT_PAGE, FORMAT_KNOCKOUT, FORMAT_ROUND_ROBIN
from clubpairing.models.config import SchedulerConfig
from clubpairing.models.results import PlayoffResult, RoundRobinSchedule, TournamentResult
from clubpairing.models.team import Team
from clubpairing.pairing.knockout import generate_knockout
from clubpairing.pairing.playoffs import generate_playoffs
from clubpairing.pairing.round_robin import generate_round_robin
from clubpairing.pairing.team_builder import build_teams, qualifying_players
from clubpairing.registration.roster import (
    RosterPage,
    order_by_registration,
    paginate_roster,
)
from clubpairing.type_hints import RecordLike
from clubpairing.utils import setup_logger

logger = setup_logger(__name__)

ScheduleResult = Union[RoundRobinSchedule, TournamentResult]


class ScheduleManager:
    """Builds teams from player records and schedules them.

    This class is responsible for:
    - Filtering and grouping raw records into teams
    - Dispatching to the round robin or knockout scheduler
    - Threading the configured random source and winner resolver through

    Every call works on its own copy of the data; a manager can be shared
    between requests.
    """

    def __init__(self, config: Optional[SchedulerConfig] = None):
        """Initialize the schedule manager.

        Args:
            config: Scheduling configuration, defaults to a round robin
        """
        self.config = config or SchedulerConfig()

    def build_teams(self, records: Iterable[RecordLike]) -> List[Team]:
        """Group the qualifying records into teams."""
        return build_teams(records)

    def schedule(self, records: Iterable[RecordLike]) -> ScheduleResult:
        """Build teams and schedule them in the configured format.

        Records are taken newest registration first, so the most recently
        registered club leads the rotation or draw.

        Args:
            records: Raw player records as fetched from storage

        Returns:
            RoundRobinSchedule or TournamentResult, depending on the format

        Raises:
            NotImplementedError: If the configured format has no scheduler
        """
        teams = self.build_teams(order_by_registration(records))
        return self.schedule_teams(teams)

    def schedule_teams(self, teams: List[Team]) -> ScheduleResult:
        """Schedule already built teams in the configured format."""
        logger.info(f"Scheduling {len(teams)} teams as {self.config.format}")

        if self.config.format == FORMAT_ROUND_ROBIN:
            return generate_round_robin(teams)
        elif self.config.format == FORMAT_KNOCKOUT:
            return generate_knockout(
                teams,
                rng=self.config.make_random(),
                resolver=self.config.winner_resolver,
            )
        raise NotImplementedError(
            f"Schedule format '{self.config.format}' is not implemented"
        )

    def playoffs(self, records: Iterable[RecordLike]) -> PlayoffResult:
        """Draw a playoff round over every qualifying player."""
        players = qualifying_players(records)
        return generate_playoffs(players, rng=self.config.make_random())

    def roster_page(self, records: Iterable[RecordLike], page: Any = DEFAULT_PAGE) -> RosterPage:
        """One page of the roster using the configured page size."""
        return paginate_roster(records, page=page, limit=self.config.page_size)
