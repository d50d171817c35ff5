"""Tests for configuration helpers"""
import pytest

import config
from config import RunnerSettings, get_bool_env, get_int_env, get_float_env, get_str_env


def test_get_int_env_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE_TEST", "five")
    assert get_int_env("PAGE_SIZE_TEST", 5) == 5

    monkeypatch.setenv("PAGE_SIZE_TEST", "7")
    assert get_int_env("PAGE_SIZE_TEST", 5) == 7


def test_get_float_env(monkeypatch):
    monkeypatch.setenv("PRICE_TEST", "11.99")
    assert get_float_env("PRICE_TEST") == 11.99
    assert get_float_env("PRICE_TEST_MISSING", 1.5) == 1.5


def test_get_bool_env(monkeypatch):
    monkeypatch.setenv("FLAG_TEST", "Yes")
    assert get_bool_env("FLAG_TEST") is True
    monkeypatch.setenv("FLAG_TEST", "off")
    assert get_bool_env("FLAG_TEST", True) is False


def test_get_str_env_treats_blank_as_unset(monkeypatch):
    monkeypatch.setenv("TITLE_TEST", "   ")
    assert get_str_env("TITLE_TEST") is None
    monkeypatch.setenv("TITLE_TEST", " Bad Book ")
    assert get_str_env("TITLE_TEST") == "Bad Book"


def test_default_settings_match_sample_catalog():
    settings = RunnerSettings()

    assert settings.genre == "Fiction"
    assert settings.after_year == 1950
    assert settings.author == "George Orwell"
    assert settings.title == "1984"
    assert settings.new_price == 11.99
    assert settings.in_stock_after_year == 2010
    assert settings.page_size == 5
    assert settings.delete_title is None


def test_settings_from_config(monkeypatch):
    monkeypatch.setattr(config, "DELETE_TITLE", "Bad Book")
    monkeypatch.setattr(config, "PAGE_SIZE", 3)

    settings = RunnerSettings.from_config()

    assert settings.delete_title == "Bad Book"
    assert settings.page_size == 3


def test_validate_config_collects_errors(monkeypatch):
    monkeypatch.setattr(config, "MONGODB_URI", "http://localhost")
    monkeypatch.setattr(config, "PAGE_SIZE", 0)

    with pytest.raises(ValueError) as excinfo:
        config.validate_config()

    assert "MONGODB_URI" in str(excinfo.value)
    assert "PAGE_SIZE" in str(excinfo.value)
