import argparse
import logging
import random
import sys
from typing import Dict, List, Optional, Sequence

from .errors import GiftExchangeError, InvalidAssignmentError, UnsatisfiableConfigurationError
from .models.family_units import build_family_units
from .services.draw import generate
from .services.settings import LOG_LEVELS, load_draw_settings_from_env


DEFAULT_NAMES = [
    "Nick", "Trevor", "Amy", "Sam", "Nancy", "Matsuo-san", "Ingo", "Renato",
    "Judith", "Neal", "Teymour", "Ryan", "Selim", "Robert", "Claudia",
    "Kaj-Erik", "Hesham", "Michael Sr.", "Michael Jr.", "Allison", "Brad",
    "Hitesh", "Khaled",
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="giftexchange",
        description="Draw a family gift exchange: nobody gifts themself or their own family.",
    )
    parser.add_argument("--names", nargs="+", default=DEFAULT_NAMES, metavar="NAME",
                        help="Participant names (default: built-in list of 23 names).")
    parser.add_argument("--members", type=int, default=None, metavar="N",
                        help="Only use the first N names (default: all).")
    parser.add_argument("--couples", type=int, default=0, metavar="C",
                        help="Pair up the first 2*C members that are not in a --family.")
    parser.add_argument("--family", action="append", default=[], metavar="NAME,NAME,...",
                        help="Comma separated names forming one family unit. Repeatable.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a repeatable draw (overrides GIFT_EXCHANGE_SEED).")
    parser.add_argument("--verify-progress", action="store_true", default=None,
                        help="Validate the partial draw after every family unit.")
    parser.add_argument("--secret", action="store_true",
                        help="Do not print who gifts whom, only how many pairs were drawn.")
    parser.add_argument("--log-level", choices=sorted(LOG_LEVELS), default=None,
                        help="Logging level (overrides GIFT_EXCHANGE_LOG_LEVEL).")
    return parser


def format_pairs(assignment: Dict[int, int], names: Sequence[str]) -> List[str]:
    return [f"{names[giver]} gifts to {names[assignment[giver]]}" for giver in sorted(assignment)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        settings = load_draw_settings_from_env()
    except RuntimeError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    if args.seed is not None:
        settings.seed = args.seed
    if args.verify_progress:
        settings.verify_progress = True
    if args.log_level:
        settings.log_level = args.log_level
    logging.basicConfig(level=settings.numeric_log_level(), format="%(levelname)s %(name)s: %(message)s")

    families = [name.split(",") for name in args.family]
    try:
        units = build_family_units(args.names, members=args.members, couples=args.couples, families=families)
        assignment = generate(units, rng=random.Random(settings.seed), verify_progress=settings.verify_progress)
    except (UnsatisfiableConfigurationError, InvalidAssignmentError) as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return 1
    except (GiftExchangeError, ValueError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    if args.secret:
        print(f"Drew {len(assignment)} gift pairs. It's our little secret.")
    else:
        for line in format_pairs(assignment, [n.strip() for n in args.names]):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
