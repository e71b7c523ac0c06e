"""Tests for config.settings — startup configuration validation."""

import pytest

from config.settings import load_settings
from src.sf_common.enums import EpochMode, SequenceBackend
from src.sf_common.errors import ConfigError


class TestMachineId:
    @pytest.mark.parametrize("machine_id", [0, 1, 1023])
    def test_accepts_10_bit_range(self, machine_id: int) -> None:
        assert load_settings(MACHINE_ID=machine_id).MACHINE_ID == machine_id

    @pytest.mark.parametrize("machine_id", [-1, 1024, 4096])
    def test_rejects_out_of_range(self, machine_id: int) -> None:
        with pytest.raises(ConfigError, match="MACHINE_ID"):
            load_settings(MACHINE_ID=machine_id)

    def test_missing_is_config_error(self, monkeypatch) -> None:
        monkeypatch.delenv("MACHINE_ID", raising=False)
        with pytest.raises(ConfigError):
            load_settings(_env_file=None)

    def test_read_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("MACHINE_ID", "42")
        assert load_settings(_env_file=None).MACHINE_ID == 42

    def test_non_numeric_is_config_error(self, monkeypatch) -> None:
        monkeypatch.setenv("MACHINE_ID", "machine-a")
        with pytest.raises(ConfigError):
            load_settings(_env_file=None)


class TestTimezone:
    def test_defaults_to_utc(self, monkeypatch) -> None:
        monkeypatch.delenv("TIMEZONE", raising=False)
        assert load_settings(_env_file=None).TIMEZONE is EpochMode.UTC

    def test_local(self) -> None:
        assert load_settings(TIMEZONE="Local").TIMEZONE is EpochMode.LOCAL

    def test_unknown_value_falls_back_to_utc(self, caplog) -> None:
        s = load_settings(TIMEZONE="Mars/Olympus")
        assert s.TIMEZONE is EpochMode.UTC
        assert "Defaulting to UTC" in caplog.text


class TestStoreSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("SEQUENCE_BACKEND", raising=False)
        s = load_settings(_env_file=None)
        assert s.SEQUENCE_BACKEND is SequenceBackend.REDIS
        assert s.SEQUENCE_TTL_MS == 1000
        assert s.STORE_TIMEOUT_SECONDS == 0.5

    @pytest.mark.parametrize(
        "field,value",
        [("SEQUENCE_TTL_MS", 0), ("STORE_TIMEOUT_SECONDS", 0), ("MAX_SEQUENCE_ATTEMPTS", 0)],
    )
    def test_rejects_non_positive(self, field: str, value: int) -> None:
        with pytest.raises(ConfigError):
            load_settings(**{field: value})

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ConfigError):
            load_settings(SEQUENCE_BACKEND="memcached")


def test_settings_are_immutable() -> None:
    s = load_settings(MACHINE_ID=1)
    with pytest.raises(Exception):
        s.MACHINE_ID = 2  # type: ignore[misc]
