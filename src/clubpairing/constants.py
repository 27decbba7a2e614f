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

# --- Schedule formats ---
FORMAT_ROUND_ROBIN = "round_robin"
FORMAT_KNOCKOUT = "knockout"
SCHEDULE_FORMATS = (FORMAT_ROUND_ROBIN, FORMAT_KNOCKOUT)
DEFAULT_FORMAT = FORMAT_ROUND_ROBIN

# Fewest participants that can produce a match
MIN_PARTICIPANTS = 2

# Round robin labels
MATCHDAY_LABEL = "Matchday {number}"

# Knockout labels, keyed by participant count before the stage
STAGE_FINAL = "Final"
STAGE_SEMI_FINALS = "Semi-Finals"
STAGE_QUARTER_FINALS = "Quarter-Finals"
NAMED_STAGES = {
    2: STAGE_FINAL,
    4: STAGE_SEMI_FINALS,
    8: STAGE_QUARTER_FINALS,
}
ROUND_OF_LIMIT = 16
ROUND_OF_LABEL = "Round of {count}"
STAGE_LABEL = "Stage {number}"
MATCH_ID_FORMAT = "stage-{stage}-match-{number}"

# Playoffs
PLAYOFF_ROUND_LABEL = "Playoffs Round 1"
PLAYER_LABEL_SEPARATOR = " – "

# Registration codes (no zero, lowercase only)
CODE_ALPHABET = "123456789abcdefghijklmnopqrstuvwxyz"
CODE_LENGTH = 5
CODE_MAX_ATTEMPTS = 100
CODE_FALLBACK_RANDOM_CHARS = 3

# Roster pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# Logging
LOG_LEVEL_ENV_VAR = "CLUBPAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
