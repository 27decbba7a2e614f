"""Scheduler configuration."""

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
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from clubpairing.constants import DEFAULT_FORMAT, DEFAULT_PAGE_SIZE, SCHEDULE_FORMATS
from clubpairing.exceptions import InvalidConfigurationException

if TYPE_CHECKING:
    from clubpairing.pairing.knockout import WinnerResolver


@dataclass
class SchedulerConfig:
    """Configuration settings for a scheduling request.

    Attributes:
        format: Schedule format ('round_robin' or 'knockout')
        seed: Seed for the shuffle in knockout and playoff draws; None draws
            from fresh entropy
        winner_resolver: Decides knockout matches; None advances team1
        page_size: Roster page size
    """

    format: str = DEFAULT_FORMAT
    seed: Optional[int] = None
    winner_resolver: Optional["WinnerResolver"] = None
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.format not in SCHEDULE_FORMATS:
            raise InvalidConfigurationException(
                f"Unknown schedule format '{self.format}', "
                f"expected one of {', '.join(SCHEDULE_FORMATS)}"
            )
        if self.page_size < 1:
            raise InvalidConfigurationException(
                f"Page size must be positive, got {self.page_size}"
            )

    def make_random(self) -> random.Random:
        """Create the random source for one scheduling call."""
        if self.seed is not None:
            return random.Random(self.seed)
        return random.Random()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "format": self.format,
            "seed": self.seed,
            "page_size": self.page_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchedulerConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            format=data.get("format", DEFAULT_FORMAT),
            seed=data.get("seed"),
            page_size=data.get("page_size", DEFAULT_PAGE_SIZE),
        )
