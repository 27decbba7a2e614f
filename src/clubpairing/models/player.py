"""Player and raw registration record data classes."""

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

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil import parser as date_parser

from clubpairing.constants import PLAYER_LABEL_SEPARATOR
from clubpairing.exceptions import InvalidPlayerDataException
from clubpairing.utils import setup_logger

logger = setup_logger(__name__)

# Storage uses camelCase, Python callers tend to use snake_case
_FIELD_ALIASES = {
    "first_name": ("firstName", "first_name"),
    "last_name": ("lastName", "last_name"),
    "email": ("email",),
    "address": ("address",),
    "league": ("league",),
    "club": ("club",),
    "code": ("code",),
    "created_at": ("createdAt", "created_at"),
}


@dataclass(frozen=True)
class Player:
    """A registered player as seen by the scheduling core.

    Attributes
    ----------
    id : int
        Storage identifier.
    first_name : str
        Trimmed first name.
    last_name : str
        Trimmed last name.
    league : str
        League the player's club plays in.
    club : str
        Trimmed club name; the key teams are grouped on.
    """

    id: int
    first_name: str
    last_name: str
    league: str
    club: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def display_label(self) -> str:
        """Label used in playoff listings, e.g. ``John Smith – Arsenal``."""
        return f"{self.full_name}{PLAYER_LABEL_SEPARATOR}{self.club}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "league": self.league,
            "club": self.club,
        }


@dataclass(frozen=True)
class RegistrationRecord:
    """A player record exactly as storage hands it over.

    Any field may be missing or blank; the team builder decides what
    qualifies.
    """

    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    league: Optional[str] = None
    club: Optional[str] = None
    code: Optional[str] = None
    created_at: Optional[datetime] = None

    def is_complete(self) -> bool:
        """True when every registration field is present and non-blank."""
        if self.id is None:
            return False
        fields = (
            self.first_name,
            self.last_name,
            self.email,
            self.address,
            self.league,
            self.club,
            self.code,
        )
        return all(isinstance(value, str) and value.strip() for value in fields)

    def to_player(self) -> Player:
        """Build the trimmed Player for a complete record."""
        return Player(
            id=self.id,
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            league=self.league.strip(),
            club=self.club.strip(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize record to dictionary using storage key names."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "address": self.address,
            "league": self.league,
            "club": self.club,
            "code": self.code,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "RegistrationRecord":
        """Deserialize a record from a storage row.

        Args:
            data: Mapping with camelCase or snake_case keys

        Returns:
            The parsed record

        Raises:
            InvalidPlayerDataException: If data is not a mapping or the id is
                not an integer
        """
        if not isinstance(data, Mapping):
            raise InvalidPlayerDataException(
                f"Player record must be a mapping, got {type(data).__name__}"
            )

        record_id = data.get("id")
        if record_id is not None:
            if isinstance(record_id, bool) or not isinstance(record_id, int):
                raise InvalidPlayerDataException(
                    f"Player id must be an integer: {record_id!r}"
                )

        values: Dict[str, Any] = {}
        for name, keys in _FIELD_ALIASES.items():
            values[name] = next((data[key] for key in keys if key in data), None)

        values["created_at"] = parse_timestamp(values["created_at"])
        for name, value in values.items():
            if name != "created_at" and value is not None and not isinstance(value, str):
                values[name] = str(value)

        return cls(id=record_id, **values)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a storage timestamp, returning None when it cannot be read."""
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        logger.warning(f"Invalid registration timestamp: {value!r}")
        return None
    try:
        return date_parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        logger.warning(f"Invalid registration timestamp: {value!r}")
        return None
