"""
OOTV output generator to write out contents to file & accessory methods
"""
import csv
import json
import logging
import pathlib
from typing import Any, Iterable, List, Sequence

from . import constants
from .classes import DeckType, OotvCardObject, OotvDeckItemObject
from .deck_builder import DecklistFailure
from .statistics import (
    calculate_focus,
    calculate_force_gold_ratio,
    calculate_gold_costs,
    calculate_gold_production,
    count_keywords,
)
from .utils import format_ratio

LOGGER = logging.getLogger(__name__)


def write_to_file(file_path: pathlib.Path, file_contents: Any, pretty_print: bool) -> None:
    """
    Dump content to a JSON file
    :param file_path: File to dump to
    :param file_contents: Contents to dump
    :param pretty_print: Pretty or minimal
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8") as file:
        json.dump(
            obj=file_contents,
            fp=file,
            indent=(4 if pretty_print else None),
            ensure_ascii=False,
            default=lambda o: o.to_json(),
        )

    LOGGER.info(f"Wrote {file_path}")


def write_cards_csv(file_path: pathlib.Path, cards: Iterable[OotvCardObject]) -> None:
    """
    Dump a card summary table to CSV
    :param file_path: File to dump to
    :param cards: Cards to write, one row each
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8", newline="") as file:
        writer = csv.writer(file)
        writer.writerow(constants.CSV_HEADER.keys())
        for card in cards:
            writer.writerow(_csv_row(card))

    LOGGER.info(f"Wrote {file_path}")


def _csv_row(card: OotvCardObject) -> List[str]:
    row = []
    for attribute in constants.CSV_HEADER.values():
        value = getattr(card, attribute)
        if isinstance(value, DeckType):
            value = value.value
        elif isinstance(value, tuple):
            value = ",".join(value)
        row.append(str(value))
    return row


def _histogram(count: int) -> str:
    return "+" * count


def build_deck_report(
    deck: Sequence[OotvDeckItemObject], failures: Sequence[DecklistFailure] = ()
) -> str:
    """
    Render the deck statistics as a plain text report
    :param deck: Resolved deck
    :param failures: Queries that could not be resolved
    :return Report text
    """
    lines = []
    divider = "-----------"

    gold_production = calculate_gold_production(deck)
    lines.append(divider)
    lines.append("Gold Production Statistics:")
    lines.append(
        f"Total GP: {gold_production.total_gold_production}, "
        f"Normalized Cost: {format_ratio(gold_production.normalized_cost)}, "
        f"Total Holdings: {gold_production.total_holdings}"
    )
    lines.append(f"Force/Gold Ratio: {format_ratio(calculate_force_gold_ratio(deck))}")

    lines.append(divider)
    gold_costs = calculate_gold_costs(deck)
    for deck_type in sorted(gold_costs, key=lambda d: d.value):
        summary = gold_costs[deck_type]
        lines.append(f"Deck {deck_type.name.title()}")
        lines.append(f"Avg GC: {summary.average:.2f} Card Count: {summary.card_count}")
        for gold_cost in sorted(summary.distribution):
            lines.append(f"\t{gold_cost}: {_histogram(summary.distribution[gold_cost])}")

    focus = calculate_focus(deck)
    lines.append(divider)
    lines.append(f"Average Focus Value: {focus.average:.2f}")
    for focus_value, count in enumerate(focus.distribution):
        lines.append(f"{focus_value}: {_histogram(count)}")

    lines.append(divider)
    for keyword_count in count_keywords(deck):
        lines.append(f"{keyword_count.keyword}: {keyword_count.count}")

    if failures:
        lines.append(divider)
        lines.append("Unresolved:")
        for failure in failures:
            lines.append(f"{failure.query}: {failure.error}")

    return "\n".join(lines)
