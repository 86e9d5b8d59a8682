"""
Pull raw field data out of Oracle of the Void result pages

The Oracle renders each printed card field as two hidden
"shadowdatashadow" divs, the first holding the label and the
second holding the value markup. Everything here works on the
raw page text and performs no I/O.
"""
import html
import logging
import re
from typing import List, NamedTuple

import bs4

from .errors import PaginationParseError

LOGGER = logging.getLogger(__name__)

SHADOW_DATA_REGEX = re.compile(
    r'<div class="shadowdatashadow" style="display: none;">([^&].*?)</div>'
    r'.*?<div class="shadowdatashadow" style="display: none;">(.*?)</div>'
)
GOLD_ICON_REGEX = re.compile(
    r'<img class="inlinebutton" src="/oracle/resources/icon-cards-small/g_(\d+)\.png" />'
)
IMAGE_LOCATION_REGEX = re.compile(r'<img .*? src="(showimage\?.*?)">')
CARD_ID_REGEX = re.compile(r"cardid=(\d+)")
PAGE_COUNT_REGEX = re.compile(r"of (\d+)")


class ShadowField(NamedTuple):
    """
    One label/value pair from a card page
    """

    label: str
    raw_value: str
    value: str


def extract_fields(page: str) -> List[ShadowField]:
    """
    Find every label/value pair on a card page, in page order.
    A page without any pairs yields an empty list.
    :param page: Raw card page
    :return Label/value pairs
    """
    fields = []
    for raw_label, raw_value in SHADOW_DATA_REGEX.findall(page):
        label = html.unescape(raw_label.replace("&nbsp;", " "))
        raw_value = GOLD_ICON_REGEX.sub(r"\1", raw_value.replace("&nbsp;", " "))
        fields.append(ShadowField(label, raw_value, strip_markup(raw_value)))

    if not fields:
        LOGGER.debug("No shadow data found on page")

    return fields


def strip_markup(raw_value: str) -> str:
    """
    Drop all tags and unescape entities
    :param raw_value: Markup to flatten
    :return Plain text
    """
    return bs4.BeautifulSoup(raw_value, "html.parser").get_text()


def extract_table_cells(raw_value: str) -> List[str]:
    """
    Get the trimmed text of every table cell, in order
    :param raw_value: Value markup holding a packed table
    :return Cell contents
    """
    soup = bs4.BeautifulSoup(raw_value, "html.parser")
    return [cell.get_text().strip() for cell in soup.find_all("td")]


def extract_image_location(page: str) -> str:
    """
    Get the relative location of the card scan, if the page has one
    :param page: Raw card page
    :return Image location or empty string
    """
    match = IMAGE_LOCATION_REGEX.search(page)
    return match.group(1) if match else ""


def extract_card_ids(page: str) -> List[int]:
    """
    Get the card IDs linked from a search result page.
    Every result is linked twice in a row (thumbnail, then title),
    so only repeats of the immediately preceding ID are dropped.
    :param page: Raw search result page
    :return Card IDs in page order
    """
    card_ids: List[int] = []
    for match in CARD_ID_REGEX.finditer(page):
        card_id = int(match.group(1))
        if not card_ids or card_ids[-1] != card_id:
            card_ids.append(card_id)

    return card_ids


def extract_page_count(page: str) -> int:
    """
    Read the total page count from the "Page X of N" marker
    :param page: Raw search result page
    :return Number of result pages
    """
    match = PAGE_COUNT_REGEX.search(page)
    if not match:
        raise PaginationParseError("No page count marker found in search results")

    return int(match.group(1))
