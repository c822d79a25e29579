"""Command line entry points for the fair dice game."""

import argparse
import logging
import sys
from typing import List, Optional

from dicegame.constants import HMAC_ALGORITHM_NAME, LOG_LEVELS
from dicegame.errors import ConfigurationError, RandomnessUnavailable
from dicegame.logging_config import configure_logging
from dicegame.services.dice_service import validate_dice_arguments
from dicegame.services.game_service import GameController
from dicegame.utils.commit_reveal import verify_digest

logger = logging.getLogger(__name__)

EXAMPLE_USAGE = "example: dicegame 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dicegame",
        description="Play a dice game whose first move is decided by a verifiable coin flip.",
        epilog=EXAMPLE_USAGE,
    )
    parser.add_argument("dice", nargs="*", help="Dice definition, comma-separated faces (at least 3 dice)")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Diagnostic log level (default from LOG_LEVEL)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run one game.

    Returns:
        0 when the game finished or the user exited, 1 on bad dice arguments,
        2 when no secure randomness is available
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        dice = validate_dice_arguments(args.dice)
    except ConfigurationError as e:
        print(f"{e}\n{EXAMPLE_USAGE}", file=sys.stderr)
        return 1

    try:
        GameController(dice).run()
    except RandomnessUnavailable as e:
        logger.critical("aborting game: %s", e)
        print(f"Cannot play fairly: {e}", file=sys.stderr)
        return 2
    return 0


def build_verify_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dicegame-verify",
        description=f"Check a revealed round against its published {HMAC_ALGORITHM_NAME} digest.",
    )
    parser.add_argument("--digest", required=True, help="HMAC shown before the guess")
    parser.add_argument("--key", required=True, help="KEY shown after the guess")
    parser.add_argument("--outcome", required=True, type=int, choices=(0, 1), help="Number the computer chose")
    return parser


def verify_main(argv: Optional[List[str]] = None) -> int:
    """Print OK and return 0 if the reveal opens the digest, MISMATCH and 1 otherwise."""
    args = build_verify_parser().parse_args(argv)
    if verify_digest(args.digest, args.key, args.outcome):
        print("OK")
        return 0
    print("MISMATCH")
    return 1


def run():
    sys.exit(main())


def run_verify():
    sys.exit(verify_main())


if __name__ == "__main__":
    run()
