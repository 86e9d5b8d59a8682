"""Tests for ootv.ootv_config."""

from ootv import constants
from ootv.ootv_config import OotvConfig


def test_config_from_file(tmp_path):
    config_file = tmp_path.joinpath("ootv.properties")
    config_file.write_text(
        "[OOTV]\nversion=9.9.9\npool_size=3\npage_delay=0.5\nretries=\n"
        "[Oracle]\nsearch_url=http://localhost/dosearch\n",
        encoding="utf-8",
    )

    config = OotvConfig.__wrapped__(config_file)

    assert config.ootv_version == "9.9.9"
    assert config.pool_size == 3
    assert config.page_delay == 0.5
    assert config.retries == constants.DEFAULT_RETRIES
    assert config.search_url == "http://localhost/dosearch"
    assert config.card_url == constants.ORACLE_CARD_URL


def test_config_missing_file_uses_defaults(tmp_path, caplog):
    config = OotvConfig.__wrapped__(tmp_path.joinpath("missing.properties"))

    assert config.pool_size == constants.DEFAULT_POOL_SIZE
    assert config.page_delay == constants.DEFAULT_PAGE_DELAY
    assert config.request_timeout == constants.DEFAULT_REQUEST_TIMEOUT
    assert config.search_url == constants.ORACLE_SEARCH_URL
    assert "missing.properties was not found" in caplog.text
