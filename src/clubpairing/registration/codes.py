"""Registration code generation."""

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
import string
import time
from typing import Callable, Optional

from clubpairing.constants import (
    CODE_ALPHABET,
    CODE_FALLBACK_RANDOM_CHARS,
    CODE_LENGTH,
    CODE_MAX_ATTEMPTS,
)
from clubpairing.utils import setup_logger

logger = setup_logger(__name__)

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    """Render a non-negative integer in base 36 (0-9a-z)."""
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def _random_code(rng: random.Random, length: int) -> str:
    return "".join(rng.choice(CODE_ALPHABET) for _ in range(length))


def generate_registration_code(
    exists: Callable[[str], bool],
    rng: Optional[random.Random] = None,
    clock: Callable[[], float] = time.time,
) -> str:
    """Generate a short registration code not yet taken.

    Codes are five characters from 1-9 and a-z. After
    ``CODE_MAX_ATTEMPTS`` collisions the code falls back to three random
    characters plus the tail of the current timestamp, which is not checked
    against ``exists`` again.

    Args:
        exists: Returns True when a code is already assigned
        rng: Random source, seeded for reproducible codes
        clock: Seconds since the epoch, used by the fallback

    Returns:
        The registration code
    """
    rng = rng or random.Random()

    for _ in range(CODE_MAX_ATTEMPTS):
        code = _random_code(rng, CODE_LENGTH)
        if not exists(code):
            return code

    logger.warning(
        f"No free registration code after {CODE_MAX_ATTEMPTS} attempts, "
        "using timestamp fallback"
    )
    timestamp = to_base36(int(clock() * 1000))[-2:]
    code = _random_code(rng, CODE_FALLBACK_RANDOM_CHARS)
    return (code + timestamp)[:CODE_LENGTH]
