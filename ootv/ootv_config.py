"""
OOTV Configuration Service
"""

import configparser
import logging
import pathlib

from singleton_decorator import singleton

from . import constants


@singleton
class OotvConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    ootv_version: str
    pool_size: int
    page_delay: float
    request_timeout: float
    retries: int
    search_url: str
    card_url: str
    output_path: pathlib.Path

    def __init__(self, config_path: pathlib.Path = constants.CONFIG_PATH):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()
        self.__load_config_from_local_file(config_path)

        self.ootv_version = self.get("OOTV", "version", "1.X.X")
        self.pool_size = self.get_int("OOTV", "pool_size", constants.DEFAULT_POOL_SIZE)
        self.page_delay = self.get_float(
            "OOTV", "page_delay", constants.DEFAULT_PAGE_DELAY
        )
        self.request_timeout = self.get_float(
            "OOTV", "request_timeout", constants.DEFAULT_REQUEST_TIMEOUT
        )
        self.retries = self.get_int("OOTV", "retries", constants.DEFAULT_RETRIES)
        self.search_url = self.get("Oracle", "search_url", constants.ORACLE_SEARCH_URL)
        self.card_url = self.get("Oracle", "card_url", constants.ORACLE_CARD_URL)
        self.output_path = constants.OUTPUT_PATH

    def __load_config_from_local_file(self, file_path: pathlib.Path) -> None:
        """
        Load local file from resources as OOTV configuration file
        :param file_path: Path to Configuration file
        """
        if not file_path.is_file():
            self.logger.warning(
                f"{file_path.name} was not found ({file_path}), using defaults"
            )
            return

        self.logger.info(f"Loading configuration from {file_path}")
        self.config_parser.read(str(file_path), encoding="utf-8")

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_int(self, section: str, option: str, fallback: int = 0) -> int:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as an Integer)
        """
        if self.has_option(section, option):
            return self.config_parser.getint(section, option, fallback=fallback)
        return fallback

    def get_float(self, section: str, option: str, fallback: float = 0.0) -> float:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Float)
        """
        if self.has_option(section, option):
            return self.config_parser.getfloat(section, option, fallback=fallback)
        return fallback

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
