"""Tests for AskConfig."""

import dataclasses

import pytest

from askwire.config import DEFAULT_CONFIG, AskConfig


class TestAskConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.reconvert is False
        assert DEFAULT_CONFIG.cleanup_errors == "log"
        assert DEFAULT_CONFIG.max_attempts is None

    @pytest.mark.parametrize("mode", ["raise", "log", "ignore"])
    def test_accepts_known_cleanup_modes(self, mode):
        assert AskConfig(cleanup_errors=mode).cleanup_errors == mode

    def test_rejects_unknown_cleanup_mode(self):
        with pytest.raises(ValueError, match="cleanup_errors"):
            AskConfig(cleanup_errors="panic")

    def test_rejects_non_positive_max_attempts(self):
        with pytest.raises(ValueError, match="max_attempts"):
            AskConfig(max_attempts=0)

    def test_is_frozen(self):
        config = AskConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.reconvert = True  # type: ignore[misc]
