"""
OOTV simple utilities
"""

import logging
import math
import os
import time

from . import constants

LOGGER = logging.getLogger(__name__)


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")

    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get("OOTV_DEBUG", "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"ootv_{start_time}.log")),
                encoding="utf-8",
            ),
        ],
    )
    logging.getLogger("urllib3").setLevel(logging.ERROR)


def to_camel_case(snake_str: str) -> str:
    """
    Convert "snake_case" => "camelCase"
    :param snake_str: Snake String
    :return: Camel String
    """
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def parse_int(value: str) -> int:
    """
    Parse a printed integer, treating blanks and placeholder
    glyphs ("-", "X", "*") as zero
    :param value: Printed value
    :return Integer value, or 0
    """
    try:
        return int(value.strip())
    except ValueError:
        LOGGER.debug(f"Non-numeric printed value {value!r}, using 0")
        return 0


def format_ratio(value: float) -> str:
    """
    Render a ratio for reports; undefined ratios are
    shown distinctly from a real zero
    :param value: Ratio to render
    :return Printable ratio
    """
    if math.isnan(value) or math.isinf(value):
        return "n/a"
    return f"{value:.3f}"
