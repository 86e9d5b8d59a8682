"""
Deck statistics over resolved decklist items

Items with a zero count (unresolved lines) never contribute.
Every summary is independent of item order, apart from the
keyword tie-break documented on count_keywords.
"""
import dataclasses
import logging
import math
from typing import Dict, Iterable, Iterator, List, NamedTuple, Tuple

from .classes import DeckType, OotvCardObject, OotvDeckItemObject

LOGGER = logging.getLogger(__name__)

FOCUS_VALUES = 6


class KeywordCount(NamedTuple):
    """
    Number of cards in a deck carrying a keyword
    """

    keyword: str
    count: int


class FocusDistribution(NamedTuple):
    """
    Weighted average focus value of the fate deck and
    the number of cards at each focus value 0-5
    """

    average: float
    distribution: List[int]


class GoldProduction(NamedTuple):
    """
    Gold produced by gold producing cards that have a cost,
    and what that production costs per gold
    """

    total_gold_production: int
    normalized_cost: float
    total_holdings: int


@dataclasses.dataclass
class DeckGoldCost:
    """
    Running gold cost summary for one deck.
    card_count counts every card; total_weight only
    the cards with a gold cost, which is what average
    and distribution are built from.
    """

    deck: DeckType
    average: float = 0.0
    card_count: int = 0
    total_weight: int = 0
    distribution: Dict[int, int] = dataclasses.field(default_factory=dict)


def weighted_running_average(
    average: float, current_weight: int, value: int, weight: int
) -> float:
    """
    Fold a weighted value into a running average
    :param average: Average so far
    :param current_weight: Total weight of the average so far
    :param value: New value
    :param weight: Weight of the new value
    :return Updated average
    """
    return (value * weight + current_weight * average) / (current_weight + weight)


def _resolved(
    deck: Iterable[OotvDeckItemObject],
) -> Iterator[Tuple[int, OotvCardObject]]:
    for item in deck:
        if item.count > 0 and item.card is not None:
            yield item.count, item.card


def count_keywords(deck: Iterable[OotvDeckItemObject]) -> List[KeywordCount]:
    """
    Count keywords across the deck, weighted by copies.
    Most common first; equal counts keep the order in
    which the keywords were first seen.
    :param deck: Resolved deck
    :return Keyword counts
    """
    keyword_counts: Dict[str, int] = {}
    for count, card in _resolved(deck):
        for keyword in card.keywords:
            keyword_counts[keyword] = keyword_counts.get(keyword, 0) + count

    return sorted(
        (KeywordCount(keyword, total) for keyword, total in keyword_counts.items()),
        key=lambda keyword_count: -keyword_count.count,
    )


def calculate_focus(deck: Iterable[OotvDeckItemObject]) -> FocusDistribution:
    """
    Average focus value and focus histogram of the fate deck
    :param deck: Resolved deck
    :return Focus summary
    """
    average = 0.0
    card_count = 0
    distribution = [0] * FOCUS_VALUES

    for count, card in _resolved(deck):
        if card.deck != DeckType.FATE:
            continue

        average = weighted_running_average(
            average, card_count, card.focus_value, count
        )
        card_count += count

        if 0 <= card.focus_value < FOCUS_VALUES:
            distribution[card.focus_value] += count
        else:
            LOGGER.warning(f"{card.title} has focus value {card.focus_value}")

    return FocusDistribution(average, distribution)


def calculate_gold_costs(
    deck: Iterable[OotvDeckItemObject],
) -> Dict[DeckType, DeckGoldCost]:
    """
    Gold cost summary per deck
    :param deck: Resolved deck
    :return Summary for every deck with at least one card
    """
    gold_costs: Dict[DeckType, DeckGoldCost] = {}

    for count, card in _resolved(deck):
        deck_gold_cost = gold_costs.setdefault(card.deck, DeckGoldCost(card.deck))

        deck_gold_cost.card_count += count
        if card.gold_cost <= 0:
            continue

        deck_gold_cost.average = weighted_running_average(
            deck_gold_cost.average,
            deck_gold_cost.total_weight,
            card.gold_cost,
            count,
        )
        deck_gold_cost.total_weight += count
        deck_gold_cost.distribution[card.gold_cost] = (
            deck_gold_cost.distribution.get(card.gold_cost, 0) + count
        )

    return gold_costs


def _ratio(numerator: int, denominator: int) -> float:
    if denominator == 0:
        return math.nan if numerator == 0 else math.inf
    return numerator / denominator


def calculate_gold_production(deck: Iterable[OotvDeckItemObject]) -> GoldProduction:
    """
    Gold production of cards that both cost and produce gold
    :param deck: Resolved deck
    :return Gold production summary; normalized_cost is NaN
            when no card qualifies
    """
    total_gold_production = 0
    total_gold_cost = 0
    total_holdings = 0

    for count, card in _resolved(deck):
        if card.gold_production > 0 and card.gold_cost > 0:
            total_gold_production += card.gold_production * count
            total_gold_cost += card.gold_cost * count
            total_holdings += count

    return GoldProduction(
        total_gold_production,
        _ratio(total_gold_cost, total_gold_production),
        total_holdings,
    )


def calculate_force_gold_ratio(deck: Iterable[OotvDeckItemObject]) -> float:
    """
    Force bought per gold spent, over cards with both force and cost
    :param deck: Resolved deck
    :return Force/gold ratio; NaN when no card qualifies
    """
    total_force = 0
    total_gold_cost = 0

    for count, card in _resolved(deck):
        if card.gold_cost > 0 and card.force > 0:
            total_force += card.force * count
            total_gold_cost += card.gold_cost * count

    return _ratio(total_force, total_gold_cost)
