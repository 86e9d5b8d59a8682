"""
OOTV Decklist Entry Object
"""
from typing import Any, Iterable, Optional

from .json_object import JsonObject
from .ootv_card import OotvCardObject


class OotvDeckItemObject(JsonObject):
    """
    One resolved decklist line. A count of zero marks
    a line whose card could not be resolved.
    """

    count: int
    card: Optional[OotvCardObject]
    query: str

    def __init__(
        self, count: int = 0, card: Optional[OotvCardObject] = None, query: str = ""
    ):
        self.count = count
        self.card = card
        self.query = query

    @property
    def is_resolved(self) -> bool:
        """
        :return Did this line resolve to a card
        """
        return self.count > 0 and self.card is not None

    def build_keys_to_skip(self) -> Iterable[str]:
        return set() if self.card else {"card"}

    def __repr__(self) -> str:
        title: Any = self.card.title if self.card else None
        return f"OotvDeckItemObject(count={self.count}, title={title!r}, query={self.query!r})"
