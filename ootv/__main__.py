"""
OOTV Main Executor
"""
import gevent.monkey

gevent.monkey.patch_all()

# pylint: disable=wrong-import-position
import argparse
import logging
import sys
import traceback

import gevent.queue

from ootv import constants
from ootv.utils import init_logger

init_logger()
LOGGER: logging.Logger = logging.getLogger(__name__)


def build_deck(args: argparse.Namespace) -> None:
    """
    Resolve a decklist and print its statistics
    :param args: Parsed command line
    """
    from ootv.deck_builder import load_decklist, resolve_decklist
    from ootv.output_generator import build_deck_report, write_to_file

    failures: gevent.queue.Queue = gevent.queue.Queue()
    deck = resolve_decklist(
        load_decklist(args.decklist), pool_size=args.pool_size, failures=failures
    )

    print(build_deck_report(deck, [failures.get() for _ in range(failures.qsize())]))

    if args.json_output:
        write_to_file(args.json_output, [item for item in deck if item.card], args.pretty)


def dump_cards(args: argparse.Namespace) -> None:
    """
    Download every card of a legality to CSV
    :param args: Parsed command line
    """
    from ootv.output_generator import write_cards_csv
    from ootv.ootv_config import OotvConfig
    from ootv.providers import OracleProvider

    provider = OracleProvider(page_delay=args.page_delay, pool_size=args.pool_size)
    cards = provider.get_all_cards(args.legality)

    csv_output = args.csv_output or OotvConfig().output_path.joinpath(
        f"{args.legality.replace(' ', '')}.csv"
    )
    write_cards_csv(csv_output, cards)


def main() -> None:
    """
    OOTV safe main call
    """
    from ootv.arg_parser import parse_args
    from ootv.ootv_config import OotvConfig

    args = parse_args()
    LOGGER.info(
        f"Starting OOTV {OotvConfig().ootv_version} on {constants.OOTV_BUILD_DATE}"
    )

    try:
        if args.action == "deck":
            build_deck(args)
        else:
            dump_cards(args)
    except Exception as error:
        LOGGER.fatal(f"Exception caught: {error} {traceback.format_exc()}")
        sys.exit(1)


if __name__ == "__main__":
    main()
