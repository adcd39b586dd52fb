"""
Main entry point for the console Blackjack game.

Flow:
1. Parse command-line options, set up logging
2. Build and shuffle a fresh deck (seeded if --seed was given)
3. Play exactly one round
4. Exit

Run with: python -m src.game.main [--seed N] [--no-delay]
"""

import argparse
import random
import sys

from config import DEALER_DRAW_DELAY, LOG_LEVEL
from src.common.deck import Deck
from src.common.logging_utils import setup_logging, get_logger
from src.game.round import BlackjackRound
from src.game.ui import ConsoleUI

log = get_logger("game.main")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Play one round of Blackjack against the dealer."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the shuffle (same seed, same deck order)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEALER_DRAW_DELAY,
        help="Seconds to pause between dealer draws (default: %(default)s)",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Do not pause between dealer draws",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Diagnostic log level, written to stderr (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")
    return args


def main(argv=None):
    """Play one round. Returns the process exit status."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    rng = random.Random(args.seed) if args.seed is not None else None
    deck = Deck(rng=rng)
    log.info("New round (seed=%s)", args.seed)

    ui = ConsoleUI()
    game = BlackjackRound(deck, ui, delay=0 if args.no_delay else args.delay)

    try:
        game.play()
    except (EOFError, KeyboardInterrupt):
        log.warning("Input closed before the round finished")
        ui.show_goodbye()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
