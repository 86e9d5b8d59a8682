"""
OOTV Data Classes
"""
from .json_object import JsonObject
from .ootv_card import DECK_BY_TYPE, DeckType, OotvCardObject
from .ootv_deck_item import OotvDeckItemObject

__all__ = [
    "DECK_BY_TYPE",
    "DeckType",
    "JsonObject",
    "OotvCardObject",
    "OotvDeckItemObject",
]
