"""Exceptions for use in Club Pairing"""

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


# ========== Base Application Exception ==========


class ClubPairingException(Exception):
    """Base exception for all Club Pairing errors.

    Scheduling itself never raises for bad data; these exceptions mark
    programming errors at the seams (bad configuration, a misbehaving
    winner resolver, a record that is not a record at all).
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(ClubPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidWinnerException(PairingException):
    """Raised when a winner resolver names a team that is not in the match."""

    pass


# ========== Player Exceptions ==========


class PlayerException(ClubPairingException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when a player record cannot be read at all."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(ClubPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
