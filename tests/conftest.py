"""Pytest configuration and fixtures for OOTV tests."""

import urllib.parse
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pytest
import requests
import responses

from ootv.classes import OotvCardObject, OotvDeckItemObject
from ootv.ootv_config import OotvConfig
from ootv.providers import OracleProvider

SHADOW_DIV = '<div class="shadowdatashadow" style="display: none;">{}</div>'
SPACER_DIV = SHADOW_DIV.format("&nbsp;")

HR_GC_PH = (
    '<span title="Honor Requirement, Gold Cost, Personal Honor">'
    "Printed HR/GC/PH</span>"
)
PS_GP_SH = (
    '<span title="Province Strength, Gold Production, Starting Family Honor">'
    "Printed PS/GP/SH</span>"
)


def gold_icon(value: int) -> str:
    """Inline gold cost icon, as the Oracle draws packed gold values."""
    return (
        '<img class="inlinebutton" '
        f'src="/oracle/resources/icon-cards-small/g_{value}.png" />'
    )


def packed_table(*cells: Any) -> str:
    """One row table, as used by the packed HR/GC/PH style fields."""
    return "<table><tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr></table>"


def card_page(fields: Sequence[Tuple[str, str]], image_location: str = "") -> str:
    """Build a card details page from (label, value markup) pairs."""
    lines = ["<html><body>", '<div id="card">']
    if image_location:
        lines.append(f'<img class="cardscan" src="{image_location}">')
    for label, value in fields:
        lines.append(SPACER_DIV)
        lines.append(SHADOW_DIV.format(label) + SHADOW_DIV.format(value))
    lines.append("</div></body></html>")
    return "\n".join(lines)


def search_page(card_ids: Iterable[int], page: int = 1, pages: int = 1) -> str:
    """Build a search results page; every result links its card twice."""
    lines = ["<html><body>", f"<div>Page {page} of {pages}</div>", "<table>"]
    for card_id in card_ids:
        lines.append(
            f'<tr><td><a href="docard?cardid={card_id}"><img src="thumb.png"></a></td>'
            f'<td><a href="docard?cardid={card_id}">Card</a></td></tr>'
        )
    lines.append("</table></body></html>")
    return "\n".join(lines)


def simple_card_page(title: str, card_type: str = "Strategy") -> str:
    """Minimal card page with just a title and a type."""
    return card_page([("Printed Card Title", title), ("Printed Card Type", card_type)])


def make_card(card_id: int = 1, **kwargs: Any) -> OotvCardObject:
    """Card with defaults for every field not given."""
    kwargs.setdefault("title", f"Card {card_id}")
    return OotvCardObject(id=card_id, **kwargs)


def make_item(count: int, **kwargs: Any) -> OotvDeckItemObject:
    """Resolved deck item for a freshly made card."""
    card = make_card(**kwargs)
    return OotvDeckItemObject(count, card, card.title)


class FakeOracle:
    """
    In-memory Oracle of the Void, answering the search and card
    forms through responses callbacks.
    """

    def __init__(self, rsps: responses.RequestsMock):
        self.card_pages: Dict[int, str] = {}
        self.title_results: Dict[str, List[int]] = {}
        self.legality_pages: List[List[int]] = []
        self.searches: List[Dict[str, List[str]]] = []
        self.card_requests: List[int] = []

        rsps.add_callback(
            responses.POST, OotvConfig().search_url, callback=self._search
        )
        rsps.add_callback(responses.POST, OotvConfig().card_url, callback=self._card)

    @staticmethod
    def _form(request: Any) -> Dict[str, List[str]]:
        body = request.body or ""
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        return urllib.parse.parse_qs(body)

    def _search(self, request: Any) -> Tuple[int, Dict[str, str], str]:
        form = self._form(request)
        self.searches.append(form)

        if "search_sel_10[]" in form:
            page = int(form.get("page", ["1"])[0])
            return (
                200,
                {},
                search_page(
                    self.legality_pages[page - 1], page, len(self.legality_pages)
                ),
            )

        title = form["search_13"][0]
        return 200, {}, search_page(self.title_results.get(title, []))

    def _card(self, request: Any) -> Tuple[int, Dict[str, str], str]:
        card_id = int(self._form(request)["cardid"][0])
        self.card_requests.append(card_id)
        if card_id not in self.card_pages:
            return 500, {}, "Internal Server Error"
        return 200, {}, self.card_pages[card_id]

    def add_card(self, card_id: int, page: str, search_title: Optional[str] = None) -> None:
        """Register a card page, optionally as a result for a title search."""
        self.card_pages[card_id] = page
        if search_title is not None:
            self.title_results.setdefault(search_title, []).append(card_id)


@pytest.fixture
def fake_oracle():
    """Mock the Oracle endpoints with an in-memory FakeOracle."""
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield FakeOracle(rsps)


@pytest.fixture
def provider(fake_oracle) -> OracleProvider:
    """Oracle provider on a plain session, with no paging delay."""
    return OracleProvider(session=requests.Session(), page_delay=0, pool_size=2)

