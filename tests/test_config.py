"""Tests for configuration loading and validation."""

import pytest

from consignment_booking.config import (
    AppConfig,
    CapacityConfig,
    StorageConfig,
    _safe_int,
    _validate_config,
)


def _config_with(capacity=None, storage=None) -> AppConfig:
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "capacity", capacity or CapacityConfig())
    object.__setattr__(config, "storage", storage or StorageConfig())
    object.__setattr__(config, "business_name", "Test")
    object.__setattr__(config, "log_level", "INFO")
    return config


def _capacity(max_items: int, window: int) -> CapacityConfig:
    capacity = CapacityConfig.__new__(CapacityConfig)
    object.__setattr__(capacity, "max_items_per_day", max_items)
    object.__setattr__(capacity, "booking_window_days", window)
    return capacity


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        _validate_config(AppConfig())  # should not raise

    def test_defaults(self):
        config = AppConfig()
        assert config.capacity.max_items_per_day == 80
        assert config.capacity.booking_window_days == 6
        assert config.storage.key == "bookings"

    def test_invalid_max_items(self):
        with pytest.raises(ValueError, match="MAX_ITEMS_PER_DAY"):
            _validate_config(_config_with(capacity=_capacity(0, 6)))

    def test_invalid_window(self):
        with pytest.raises(ValueError, match="BOOKING_WINDOW_DAYS"):
            _validate_config(_config_with(capacity=_capacity(80, 0)))

    def test_empty_storage_key(self):
        storage = StorageConfig.__new__(StorageConfig)
        object.__setattr__(storage, "path", "bookings.json")
        object.__setattr__(storage, "key", "  ")
        with pytest.raises(ValueError, match="BOOKING_STORAGE_KEY"):
            _validate_config(_config_with(storage=storage))


class TestSafeInt:
    def test_default_used_when_unset(self):
        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_env_value_used(self, monkeypatch):
        monkeypatch.setenv("TEST_BOOKING_INT", "7")
        assert _safe_int("TEST_BOOKING_INT", "42") == 7

    def test_bad_value_names_variable(self, monkeypatch):
        monkeypatch.setenv("TEST_BOOKING_INT", "eighty")
        with pytest.raises(ValueError, match="TEST_BOOKING_INT"):
            _safe_int("TEST_BOOKING_INT", "42")
