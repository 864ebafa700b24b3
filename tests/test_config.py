"""
Tests for settings validation.
"""

import pytest

from article_cache.config import Settings


def test_rest_url_strips_trailing_slash():
    settings = Settings(origin_url="https://project.supabase.co/")
    assert settings.rest_url == "https://project.supabase.co/rest/v1"


def test_invalid_timeout_rejected():
    with pytest.raises(ValueError):
        Settings(origin_timeout=0)


def test_invalid_log_format_rejected():
    with pytest.raises(ValueError):
        Settings(log_format="xml")


def test_empty_table_rejected():
    with pytest.raises(ValueError):
        Settings(articles_table="")
