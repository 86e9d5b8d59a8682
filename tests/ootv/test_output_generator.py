"""Tests for ootv.output_generator."""

import csv
import json

from ootv import output_generator
from ootv.classes import DeckType, OotvDeckItemObject
from ootv.deck_builder import DecklistFailure
from ootv.errors import CardNotFoundError
from tests.conftest import make_card, make_item


def test_write_to_file(tmp_path):
    deck = [
        make_item(2, card_id=1, title="Doji Hoturi", deck=DeckType.DYNASTY),
        OotvDeckItemObject(0, query="Nobody"),
    ]
    output_file = tmp_path.joinpath("out", "deck.json")

    output_generator.write_to_file(output_file, deck, pretty_print=True)

    contents = json.loads(output_file.read_text(encoding="utf-8"))
    assert contents[0]["count"] == 2
    assert contents[0]["card"]["title"] == "Doji Hoturi"
    assert contents[0]["card"]["deck"] == "DYNASTY"
    assert contents[1] == {"count": 0, "query": "Nobody"}


def test_write_cards_csv(tmp_path):
    cards = [
        make_card(
            1,
            title="Akodo Toturi",
            type="Personality",
            clan="Lion",
            deck=DeckType.DYNASTY,
            gold_cost=9,
            force=4,
            chi=3,
            keywords=("Unique", "Samurai"),
            card_text="Battle: Move home.",
        ),
    ]
    output_file = tmp_path.joinpath("cards.csv")

    output_generator.write_cards_csv(output_file, cards)

    with output_file.open(encoding="utf-8", newline="") as file:
        rows = list(csv.reader(file))

    assert rows[0][:4] == ["Type", "Clan", "Deck", "Title"]
    assert rows[1] == [
        "Personality",
        "Lion",
        "0",
        "Akodo Toturi",
        "9",
        "0",
        "4",
        "3",
        "0",
        "0",
        "0",
        "Unique,Samurai",
        "Battle: Move home.",
    ]


def test_build_deck_report():
    deck = [
        make_item(3, card_id=1, deck=DeckType.DYNASTY, gold_cost=2, keywords=("Samurai",)),
        make_item(2, card_id=2, deck=DeckType.FATE, focus_value=1, keywords=("Kiho",)),
        OotvDeckItemObject(0, query="Nobody"),
    ]
    failures = [DecklistFailure("Nobody", CardNotFoundError("Nobody"))]

    report = output_generator.build_deck_report(deck, failures)

    assert "Normalized Cost: n/a" in report
    assert "Force/Gold Ratio: n/a" in report
    assert "Deck Dynasty" in report
    assert "\t2: +++" in report
    assert "1: ++\n" in report
    assert "Samurai: 3" in report
    assert "Unresolved:" in report
    assert "Nobody: Card not found" in report
