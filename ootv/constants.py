"""
OOTV Constants that cannot be changed and are hardcoded intentionally
"""

import datetime
import os
import pathlib
from typing import Dict

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("ootv").joinpath("resources")
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("ootv.properties")
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("OOTV_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)
OUTPUT_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("output")

LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("ootv_logs")

OOTV_BUILD_DATE: str = datetime.datetime.today().strftime("%Y-%m-%d")

ORACLE_SEARCH_URL: str = "http://ia.alderac.com/oracle/dosearch"
ORACLE_CARD_URL: str = "http://ia.alderac.com/oracle/docard"

# Oracle search form field names
SEARCH_FIELD_TITLE: str = "search_13"
SEARCH_FIELD_KEYWORDS: str = "search_7"
SEARCH_FIELD_LEGALITY: str = "search_sel_10[]"
SEARCH_FIELD_PAGE: str = "page"
CARD_FIELD_ID: str = "cardid"

DEFAULT_POOL_SIZE: int = 10
DEFAULT_PAGE_DELAY: float = 1.0
DEFAULT_REQUEST_TIMEOUT: float = 15.0
DEFAULT_RETRIES: int = 3

DEFAULT_LEGALITY: str = "Ivory Edition"

# Separator the Oracle uses between list entries (keywords, sets, legalities)
LIST_SEPARATOR: str = " • "

# Separator between a card title and its keyword filter in a decklist query
QUERY_SEPARATOR: str = " - "

CSV_HEADER: Dict[str, str] = {
    "Type": "type",
    "Clan": "clan",
    "Deck": "deck",
    "Title": "title",
    "GoldCost": "gold_cost",
    "GoldProduction": "gold_production",
    "Force": "force",
    "Chi": "chi",
    "FocusValue": "focus_value",
    "PersonalHonor": "personal_honor",
    "HonorRequirement": "honor_requirement",
    "Keywords": "keywords",
    "CardText": "card_text",
}
