"""Settings read from the environment."""

import pytest

from travel_recommender.config import DEFAULT_LOG_LEVEL, DEFAULT_MIN_CONFIDENCE, Settings
from travel_recommender.models import InvalidArgumentError


def test_defaults_when_unset():
    settings = Settings.from_env({})

    assert settings.min_confidence == DEFAULT_MIN_CONFIDENCE == 0.7
    assert settings.log_level == DEFAULT_LOG_LEVEL == "INFO"


def test_values_from_environment():
    settings = Settings.from_env({"TRAVEL_MIN_CONFIDENCE": " 0.85 ", "TRAVEL_LOG_LEVEL": "debug"})

    assert settings.min_confidence == 0.85
    assert settings.log_level == "DEBUG"


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("TRAVEL_MIN_CONFIDENCE", "0.5")
    monkeypatch.delenv("TRAVEL_LOG_LEVEL", raising=False)

    assert Settings.from_env().min_confidence == 0.5


@pytest.mark.parametrize("raw", ["high", "1.5", "-0.1"])
def test_bad_threshold_is_rejected(raw):
    with pytest.raises(InvalidArgumentError, match="TRAVEL_MIN_CONFIDENCE"):
        Settings.from_env({"TRAVEL_MIN_CONFIDENCE": raw})


def test_bad_log_level_is_rejected():
    with pytest.raises(InvalidArgumentError, match="TRAVEL_LOG_LEVEL"):
        Settings.from_env({"TRAVEL_LOG_LEVEL": "chatty"})
