"""
OOTV exception hierarchy
"""


class OotvError(Exception):
    """
    Base class for every error raised while talking to the Oracle
    """


class TransportError(OotvError):
    """
    The Oracle could not be reached, or answered with an error status
    """

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Unable to fetch {endpoint}: {reason}")


class CardNotFoundError(OotvError):
    """
    No search candidate had a title exactly matching the query
    """

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Card not found: {query!r}")


class SchemaDriftError(OotvError):
    """
    A card page carried a field label the card builder does not know.
    The label table in card_builder needs updating.
    """

    def __init__(self, label: str, card_id: int = 0):
        self.label = label
        self.card_id = card_id
        super().__init__(f"Unknown Oracle field {label!r} on card {card_id}")


class PaginationParseError(OotvError):
    """
    A search result page had no usable "of N" page marker
    """
