import pytest
from pydantic import ValidationError

from practice_utils.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PRACTICE_UTILS_FETCH_DELAY_SECONDS", raising=False)

    s = Settings(_env_file=None)
    assert s.fetch_delay_seconds == 0.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PRACTICE_UTILS_FETCH_DELAY_SECONDS", "0.25")

    s = Settings(_env_file=None)
    assert s.fetch_delay_seconds == 0.25


def test_negative_delay_is_rejected(monkeypatch):
    monkeypatch.setenv("PRACTICE_UTILS_FETCH_DELAY_SECONDS", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
