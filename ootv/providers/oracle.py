"""
Oracle of the Void (AEG card database) 3rd party provider
"""
import html
import logging
import re
import time
from typing import List, Mapping, Optional, Sequence

import requests

from .. import constants
from ..card_builder import build_card
from ..classes import OotvCardObject
from ..errors import CardNotFoundError, TransportError
from ..extractor import (
    extract_card_ids,
    extract_fields,
    extract_image_location,
    extract_page_count,
)
from ..ootv_config import OotvConfig
from ..parallel_call import parallel_call
from ..retryable_session import retryable_session
from .abstract_provider import AbstractProvider

LOGGER = logging.getLogger(__name__)

EXPERIENCED_REGEX = re.compile(r"exp(\d+)?")


class OracleProvider(AbstractProvider):
    """
    Oracle of the Void Container
    """

    search_url: str
    card_url: str
    page_delay: float
    pool_size: int

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        page_delay: Optional[float] = None,
        pool_size: Optional[int] = None,
    ) -> None:
        super().__init__(session or retryable_session())
        self.search_url = OotvConfig().search_url
        self.card_url = OotvConfig().card_url
        self.page_delay = OotvConfig().page_delay if page_delay is None else page_delay
        self.pool_size = pool_size or OotvConfig().pool_size

    def fetch_page(self, endpoint: str, form_fields: Mapping[str, Sequence[str]]) -> str:
        """
        Post a form to the Oracle and get the page back
        :param endpoint: Oracle URL
        :param form_fields: Form fields, each with one or more values
        :return Raw page body
        """
        try:
            response = self.session.post(endpoint, data=dict(form_fields))
        except requests.exceptions.RequestException as error:
            raise TransportError(endpoint, str(error)) from error

        self.log_download(response)
        if not response.ok:
            raise TransportError(endpoint, f"HTTP {response.status_code}")

        # Oracle pages are UTF-8 but do not always declare a charset
        return response.content.decode("utf-8", errors="replace")

    def get_card_data(self, card_id: int) -> OotvCardObject:
        """
        Download and build a single card
        :param card_id: Oracle card ID
        :return Card built from its Oracle page
        """
        page = self.fetch_page(self.card_url, {constants.CARD_FIELD_ID: [str(card_id)]})
        return build_card(card_id, extract_fields(page), extract_image_location(page))

    def get_card_ids(self, title: str, keywords: str = "") -> List[int]:
        """
        Search the Oracle for cards by title, optionally narrowed
        by keywords ("exp2" is understood as "Experienced 2")
        :param title: Card title to search for
        :param keywords: Keyword filter
        :return Candidate card IDs, in result order
        """
        form_fields = {constants.SEARCH_FIELD_TITLE: [html.escape(title)]}
        if keywords:
            form_fields[constants.SEARCH_FIELD_KEYWORDS] = [
                EXPERIENCED_REGEX.sub(r"Experienced \1", keywords)
            ]

        return extract_card_ids(self.fetch_page(self.search_url, form_fields))

    def get_card_by_exact_name(self, query: str) -> OotvCardObject:
        """
        Resolve a "Title" or "Title - Keywords" query to the first
        search candidate whose title matches exactly
        :param query: Decklist style card query
        :return Matching card
        """
        title, _, keywords = query.partition(constants.QUERY_SEPARATOR)
        keywords = keywords.split(constants.QUERY_SEPARATOR)[0]
        title = title.strip()

        for card_id in self.get_card_ids(title, keywords.strip()):
            card = self.get_card_data(card_id)
            if card.title.strip() == title:
                return card

        raise CardNotFoundError(query)

    def get_all_card_ids(self, legality: str) -> List[int]:
        """
        Walk every search result page for a legality
        :param legality: Legality (format) name, e.g. "Ivory Edition"
        :return Card IDs from every page, page by page
        """
        legality_field = {constants.SEARCH_FIELD_LEGALITY: [html.escape(legality)]}

        page = self.fetch_page(self.search_url, legality_field)
        pages = extract_page_count(page)
        LOGGER.info(f"{legality}: {pages} result pages")

        card_ids: List[int] = []
        for page_number in range(1, pages + 1):
            if page_number > 1:
                time.sleep(self.page_delay)
                page = self.fetch_page(
                    self.search_url,
                    {**legality_field, constants.SEARCH_FIELD_PAGE: [str(page_number)]},
                )

            page_card_ids = extract_card_ids(page)
            LOGGER.debug(f"Page {page_number}/{pages}: {len(page_card_ids)} cards")
            card_ids.extend(page_card_ids)

        return card_ids

    def get_all_cards(self, legality: str) -> List[OotvCardObject]:
        """
        Download every card legal in a given legality
        :param legality: Legality (format) name
        :return Cards that could be downloaded
        """
        card_ids = self.get_all_card_ids(legality)
        LOGGER.info(f"Downloading {len(card_ids)} {legality} cards")

        cards = parallel_call(self._get_card_or_none, card_ids, pool_size=self.pool_size)
        return [card for card in cards if card is not None]

    def _get_card_or_none(self, card_id: int) -> Optional[OotvCardObject]:
        try:
            return self.get_card_data(card_id)
        except TransportError as error:
            LOGGER.warning(f"Skipping card {card_id}: {error}")
            return None
