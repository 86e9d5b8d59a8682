"""
OOTV Singular Card Object
"""
import dataclasses
import enum
from typing import Dict, Tuple

from .json_object import JsonObject


class DeckType(enum.Enum):
    """
    Which deck a card is played from.
    UNSPECIFIED covers card types the Oracle prints that
    do not belong to any deck.
    """

    UNSPECIFIED = -1
    DYNASTY = 0
    FATE = 1
    STARTS_IN_PLAY = 2
    TOKEN = 3


DECK_BY_TYPE: Dict[str, DeckType] = {
    "Strategy": DeckType.FATE,
    "Item": DeckType.FATE,
    "Spell": DeckType.FATE,
    "Ring": DeckType.FATE,
    "Follower": DeckType.FATE,
    "Holding": DeckType.DYNASTY,
    "Personality": DeckType.DYNASTY,
    "Event": DeckType.DYNASTY,
    "Stronghold": DeckType.STARTS_IN_PLAY,
    "Sensei": DeckType.STARTS_IN_PLAY,
}


@dataclasses.dataclass(frozen=True)
class OotvCardObject(JsonObject):
    """
    OOTV Singular Card Object
    """

    id: int
    card_number: int = 0
    title: str = ""
    type: str = ""
    deck: DeckType = DeckType.UNSPECIFIED
    keywords: Tuple[str, ...] = ()
    card_text: str = ""
    gold_cost: int = 0
    image_location: str = ""
    focus_value: int = 0
    set: Tuple[str, ...] = ()
    legality: Tuple[str, ...] = ()
    personal_honor: int = 0
    honor_requirement: int = 0
    flavor_text: str = ""
    artist: str = ""
    rarity: str = ""
    clan: str = ""
    force: int = 0
    chi: int = 0
    notes: str = ""
    storyline_credit: str = ""
    province_strength: int = 0
    gold_production: int = 0
    starting_family_honor: int = 0
    erratum: str = ""
    mrp: str = ""

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OotvCardObject):
            return NotImplemented
        return self.id == other.id
