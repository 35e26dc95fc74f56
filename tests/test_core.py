"""Tests for configuration, logging and language identity."""
import json
import logging

import pytest
import structlog

from lexis.core.config import Settings, get_settings
from lexis.core.languages import LanguageID, compare_languages, resolve_language
from lexis.core.logging import (
    LoggerRegistry,
    bind_context,
    clear_context,
    configure_logging,
    feature_logger,
    get_logger,
)
from lexis.features import Feature, FeatureImporter, FeatureType


# === Settings ===

def test_settings_defaults():
    s = Settings()
    assert s.LOG_LEVEL == "INFO"
    assert s.LOG_JSON is False
    assert s.GREEK_ALTERNATE_ENCODING == "strippedVowelLength"
    assert s.GREEK_PRONOUN_FORMS_FILE is None


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LEXIS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LEXIS_LOG_JSON", "true")
    s = get_settings()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.LOG_JSON is True


def test_settings_cached():
    assert get_settings() is get_settings()


# === Logging ===

@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    clear_context()


def test_json_logs(restore_logging, capsys):
    configure_logging(level="DEBUG", json_logs=True)
    bind_context(request="r-1")
    get_logger("tests.json").info("feature_built", feature_type="case")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "feature_built"
    assert record["feature_type"] == "case"
    assert record["request"] == "r-1"
    assert record["service"] == "lexis"
    assert record["level"] == "info"


def test_log_level_filters(restore_logging, capsys):
    configure_logging(level="WARNING", json_logs=True)
    get_logger("tests.level").info("hidden")
    get_logger("tests.level").warning("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_domain_loggers_are_shared():
    assert feature_logger() is LoggerRegistry.get("feature")


# === Language identity ===

@pytest.mark.parametrize("code,expected", [
    ("grc", LanguageID.GREEK),
    ("lat", LanguageID.LATIN),
    ("la", LanguageID.LATIN),
    ("fa-IR", LanguageID.PERSIAN),
    ("zh-Hant", LanguageID.CHINESE),
    ("xx", LanguageID.UNDEFINED),
    (None, LanguageID.UNDEFINED),
])
def test_language_from_code(code, expected):
    assert LanguageID.from_code(code) is expected


def test_primary_code():
    assert LanguageID.ARABIC.code == "ara"
    assert LanguageID.ARABIC.has_code("ar")
    assert str(LanguageID.GREEK) == "greek"


def test_resolve_language():
    assert resolve_language(None) is None
    assert resolve_language(LanguageID.SYRIAC) is LanguageID.SYRIAC
    assert resolve_language("syc") is LanguageID.SYRIAC


@pytest.mark.parametrize("a,b,expected", [
    (LanguageID.GREEK, LanguageID.GREEK, True),
    (LanguageID.GREEK, "grc", True),
    ("la", "lat", True),
    (LanguageID.GREEK, LanguageID.LATIN, False),
    ("xx", "xx", True),
    ("xx", "yy", False),
    (None, None, False),
    (LanguageID.GREEK, None, False),
])
def test_compare_languages(a, b, expected):
    assert compare_languages(a, b) is expected


def test_unconfigured_logging_keeps_stdout_clean(capsys):
    structlog.reset_defaults()
    f = Feature(FeatureType.CASE, "genitive", LanguageID.LATIN)
    f.add_importer(FeatureImporter(return_unknown=True))
    f.add_from_importer("x")
    get_logger("tests.unconfigured").debug("not_shown")

    assert capsys.readouterr().out == ""
    assert f.values == ["genitive", "x"]
