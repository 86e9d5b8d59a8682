"""
OOTV Arg Parser to determine what actions to take
"""

import argparse
import pathlib
import sys
from typing import List, Optional

from . import constants


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments from user to determine how to spawn up
    OOTV and complete the request.
    :param argv: Arguments to parse, defaults to sys.argv
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("ootv")
    parser.add_argument(
        "--pool-size",
        "-P",
        type=int,
        metavar="N",
        help="How many Oracle requests to run at once.",
    )

    actions = parser.add_subparsers(dest="action", metavar="ACTION")
    actions.required = True

    deck_parser = actions.add_parser(
        "deck", help="Resolve a decklist and print its statistics."
    )
    deck_parser.add_argument(
        "decklist",
        type=pathlib.Path,
        help='Decklist file, one "<count> <title>[ - <keywords>]" per line.',
    )
    deck_parser.add_argument(
        "--json-output",
        "-j",
        type=pathlib.Path,
        metavar="FILE",
        help="Also dump the resolved cards to this JSON file.",
    )
    deck_parser.add_argument(
        "--pretty",
        "-p",
        action="store_true",
        help="When dumping JSON files, prettify the contents instead of minifying them.",
    )

    dump_parser = actions.add_parser(
        "dump", help="Download every card of a legality to CSV."
    )
    dump_parser.add_argument(
        "--legality",
        "-l",
        default=constants.DEFAULT_LEGALITY,
        help=f'Legality to dump (default "{constants.DEFAULT_LEGALITY}").',
    )
    dump_parser.add_argument(
        "--csv-output",
        "-o",
        type=pathlib.Path,
        metavar="FILE",
        help="CSV file to write (default: <output>/<legality>.csv).",
    )
    dump_parser.add_argument(
        "--page-delay",
        type=float,
        metavar="SECONDS",
        help="Pause between search result pages.",
    )

    # Show help menu if no arguments are passed
    if not (argv if argv is not None else sys.argv[1:]):
        parser.print_help()
        parser.exit()

    return parser.parse_args(argv)
