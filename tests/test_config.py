"""Tests for settings, logging setup, and time helpers."""

import logging
from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from vocab_srs import config
from vocab_srs.config import Settings, configure_logging, utcnow
from vocab_srs.timeutil import (
    DAY,
    SECONDS_PER_DAY,
    as_naive_utc,
    days,
    from_timestamp,
    to_timestamp,
)

EPOCH_1_5B = datetime(2017, 7, 14, 2, 40)
PLUS_TWO = timezone(timedelta(hours=2))


class TestTimeutil:
    def test_to_timestamp(self) -> None:
        assert to_timestamp(EPOCH_1_5B) == 1_500_000_000

    def test_to_timestamp_aware_non_utc(self) -> None:
        assert to_timestamp(datetime(2017, 7, 14, 4, 40, tzinfo=PLUS_TWO)) == 1_500_000_000

    def test_to_timestamp_aware_utc(self) -> None:
        assert to_timestamp(EPOCH_1_5B.replace(tzinfo=UTC)) == 1_500_000_000

    def test_as_naive_utc_converts_offset(self) -> None:
        converted = as_naive_utc(datetime(2017, 7, 14, 4, 40, tzinfo=PLUS_TWO))
        assert converted == EPOCH_1_5B
        assert converted.tzinfo is None

    def test_as_naive_utc_keeps_naive(self) -> None:
        assert as_naive_utc(EPOCH_1_5B) is EPOCH_1_5B

    def test_from_timestamp(self) -> None:
        assert from_timestamp(1_500_000_000) == EPOCH_1_5B

    def test_from_timestamp_is_naive(self) -> None:
        assert from_timestamp(0).tzinfo is None
        assert from_timestamp(0) == datetime(1970, 1, 1)

    def test_day_length(self) -> None:
        assert SECONDS_PER_DAY == 86_400
        assert DAY == timedelta(days=1)
        assert days(28) == timedelta(seconds=28 * 86_400)
        assert days(0) == timedelta(0)

    def test_utcnow_is_naive(self) -> None:
        assert utcnow().tzinfo is None


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("DEBUG", "LOG_LEVEL", "SPEAK_LANG", "LEARN_LANG"):
            monkeypatch.delenv(f"VOCAB_SRS_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.app_name == "Vocab SRS"
        assert s.debug is False
        assert s.log_level == "INFO"
        assert s.speak_lang == "fr"
        assert s.learn_lang == "en"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOCAB_SRS_DEBUG", "true")
        monkeypatch.setenv("VOCAB_SRS_LEARN_LANG", "fr")
        s = Settings(_env_file=None)
        assert s.debug is True
        assert s.learn_lang == "fr"

    def test_unknown_language_rejected_on_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOCAB_SRS_SPEAK_LANG", "de")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestConfigureLogging:
    def setup_method(self) -> None:
        self.calls: list[dict] = []

    def _capture(self, **kwargs) -> None:
        self.calls.append(kwargs)

    def test_uses_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(logging, "basicConfig", self._capture)
        monkeypatch.setattr(config.settings, "debug", False)
        monkeypatch.setattr(config.settings, "log_level", "warning")
        configure_logging()
        assert self.calls == [{"level": "WARNING"}]

    def test_debug_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(logging, "basicConfig", self._capture)
        monkeypatch.setattr(config.settings, "debug", True)
        configure_logging()
        assert self.calls == [{"level": logging.DEBUG}]

    def test_explicit_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(logging, "basicConfig", self._capture)
        configure_logging(logging.ERROR)
        assert self.calls == [{"level": logging.ERROR}]
