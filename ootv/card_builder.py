"""
Turn the label/value pairs of an Oracle card page into an OotvCardObject
"""
import logging
import re
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from . import constants
from .classes import DECK_BY_TYPE, DeckType, OotvCardObject
from .errors import SchemaDriftError
from .extractor import ShadowField, extract_table_cells
from .utils import parse_int

LOGGER = logging.getLogger(__name__)

GOLD_PRODUCTION_REGEX = re.compile(r"Produce (\d+) Gold\.")

HR_GC_PH_LABEL = (
    '<span title="Honor Requirement, Gold Cost, Personal Honor">'
    "Printed HR/GC/PH</span>"
)
PS_GP_SH_LABEL = (
    '<span title="Province Strength, Gold Production, Starting Family Honor">'
    "Printed PS/GP/SH</span>"
)

CardFields = Dict[str, Any]
FieldHandler = Callable[[CardFields, ShadowField], None]


def _verbatim(attribute: str) -> FieldHandler:
    def handler(fields: CardFields, field: ShadowField) -> None:
        fields[attribute] = field.value

    return handler


def _integer(attribute: str) -> FieldHandler:
    def handler(fields: CardFields, field: ShadowField) -> None:
        fields[attribute] = parse_int(field.value)

    return handler


def _separated(attribute: str) -> FieldHandler:
    def handler(fields: CardFields, field: ShadowField) -> None:
        fields[attribute] = split_list(field.value)

    return handler


def _packed(*attributes: str) -> FieldHandler:
    def handler(fields: CardFields, field: ShadowField) -> None:
        values = parse_packed_table(field.raw_value, len(attributes))
        if values is None:
            LOGGER.debug(f"Packed field {field.label!r} too short: {field.raw_value!r}")
            return
        fields.update(zip(attributes, values))

    return handler


def _printed_text(fields: CardFields, field: ShadowField) -> None:
    card_text = field.value.replace("\n", " ").replace("\r", " ")
    fields["card_text"] = card_text

    match = GOLD_PRODUCTION_REGEX.search(card_text)
    if match:
        fields["gold_production"] = int(match.group(1))


def _card_type(fields: CardFields, field: ShadowField) -> None:
    fields["type"] = field.value
    fields["deck"] = DECK_BY_TYPE.get(field.value, DeckType.UNSPECIFIED)


LABEL_HANDLERS: Dict[str, FieldHandler] = {
    "Printed Text": _printed_text,
    "Printed Focus Value": _integer("focus_value"),
    "Printed Gold Cost": _integer("gold_cost"),
    "Printed Card Title": _verbatim("title"),
    "Printed Card Type": _card_type,
    "Printed Keywords": _separated("keywords"),
    "Legality": _separated("legality"),
    "Set": _separated("set"),
    HR_GC_PH_LABEL: _packed("honor_requirement", "gold_cost", "personal_honor"),
    "Printed Force/Chi": _packed("force", "chi"),
    PS_GP_SH_LABEL: _packed(
        "province_strength", "gold_production", "starting_family_honor"
    ),
    "Printed Flavor Text": _verbatim("flavor_text"),
    "Printed Artist": _verbatim("artist"),
    "Notes": _verbatim("notes"),
    "Printed Storyline Credit": _verbatim("storyline_credit"),
    "Erratum": _verbatim("erratum"),
    "MRP": _verbatim("mrp"),
    "Rarity": _verbatim("rarity"),
    "Printed Clan": _verbatim("clan"),
    "Card Number": _integer("card_number"),
}


def split_list(value: str) -> Tuple[str, ...]:
    """
    Split an Oracle list field, keeping first-seen order
    and dropping blanks and repeats
    :param value: Plain text list
    :return Ordered entries
    """
    entries = (entry.strip() for entry in value.split(constants.LIST_SEPARATOR))
    return tuple(dict.fromkeys(entry for entry in entries if entry))


def parse_packed_table(raw_value: str, arity: int) -> Optional[Tuple[int, ...]]:
    """
    Read the first `arity` cells of a packed table as integers.
    Tables with fewer cells give None, so no field is half set.
    :param raw_value: Value markup holding the table
    :param arity: Number of cells to read
    :return Tuple of integers, or None
    """
    cells = extract_table_cells(raw_value)
    if len(cells) < arity:
        return None

    return tuple(parse_int(cell) for cell in cells[:arity])


def build_card(
    card_id: int, fields: Iterable[ShadowField], image_location: str = ""
) -> OotvCardObject:
    """
    Fold a card page's fields into a card
    :param card_id: Oracle card ID
    :param fields: Label/value pairs, in page order
    :param image_location: Card scan location, if any
    :return Built card
    """
    card_fields: CardFields = {"id": card_id, "image_location": image_location}

    for field in fields:
        handler = LABEL_HANDLERS.get(field.label)
        if handler is None:
            LOGGER.error(
                f"Card {card_id} has unknown field {field.label!r}; "
                "the Oracle page layout has changed"
            )
            raise SchemaDriftError(field.label, card_id)
        handler(card_fields, field)

    return OotvCardObject(**card_fields)
