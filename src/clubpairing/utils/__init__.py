"""Shared utilities: logger setup and environment helpers."""

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

import logging
import os
from typing import Optional

from clubpairing.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

_PACKAGE_LOGGER = "clubpairing"


def get_log_level(default: str = DEFAULT_LOG_LEVEL) -> int:
    """Resolve the package log level from the environment.

    Unknown level names fall back to ``default``.
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, default).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.getLevelName(default)


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a logger for ``name`` under the package root logger.

    The package root logger gets a single stream handler the first time this
    is called; later calls only hand out children.

    Args:
        name: Usually ``__name__`` of the calling module
        level: Explicit level for the package root, overriding the environment

    Returns:
        The configured logger
    """
    root = logging.getLogger(_PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(get_log_level())
    if level is not None:
        root.setLevel(level)
    return logging.getLogger(name)


__all__ = ["get_log_level", "setup_logger"]
