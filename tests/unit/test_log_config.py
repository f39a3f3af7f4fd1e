"""Unit tests for per-category logging levels."""

import logging

from case_library.config import get_settings
from case_library.infrastructure.logging.log_config import _parse_level, setup_logging


def test_parse_level_defaults_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("verbose") == logging.INFO


def test_setup_logging_applies_category_levels():
    settings = get_settings()

    setup_logging()

    assert logging.getLogger("case_library.infrastructure.store").level == _parse_level(
        settings.log_level_store
    )
    assert logging.getLogger("sqlalchemy.engine").level == _parse_level(settings.log_level_sql)
    assert logging.getLogger("httpx").level == _parse_level(settings.log_level_http)
