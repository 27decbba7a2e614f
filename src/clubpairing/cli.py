"""Command line interface for scheduling from a JSON player export.

Usage examples:

  clubpairing round-robin players.json
  clubpairing knockout players.json --seed 42 --output bracket.json
  clubpairing playoffs players.json --seed 7
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

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from clubpairing.constants import FORMAT_KNOCKOUT, FORMAT_ROUND_ROBIN
from clubpairing.controllers.schedule_manager import ScheduleManager
from clubpairing.models.config import SchedulerConfig
from clubpairing.utils import setup_logger

logger = setup_logger(__name__)

COMMAND_FORMATS = {
    "round-robin": FORMAT_ROUND_ROBIN,
    "knockout": FORMAT_KNOCKOUT,
}
PLAYOFFS_COMMAND = "playoffs"


def load_records(path: Path) -> List[Any]:
    """Load a JSON list of player records.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not a JSON list
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and "players" in data:
        data = data["players"]
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of player records")
    return data


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="clubpairing",
        description="Pair registered club teams into a schedule",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "command",
        choices=sorted([*COMMAND_FORMATS, PLAYOFFS_COMMAND]),
        help="Schedule to generate",
    )
    parser.add_argument("players", type=Path, help="JSON file of player records")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible draws")
    parser.add_argument("--output", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def run(args: argparse.Namespace) -> int:
    """Run the requested schedule and write the JSON result."""
    try:
        records = load_records(args.players)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read player records: {e}")
        return 1

    if args.command == PLAYOFFS_COMMAND:
        result = ScheduleManager(SchedulerConfig(seed=args.seed)).playoffs(records)
    else:
        config = SchedulerConfig(format=COMMAND_FORMATS[args.command], seed=args.seed)
        result = ScheduleManager(config).schedule(records)

    payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info(f"Wrote {args.command} schedule to {args.output}")
    else:
        print(payload)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logger(__name__, level=logging.DEBUG)

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
