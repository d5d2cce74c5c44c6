"""Tests for seating configuration."""

import json

import pytest

from exam_seating.config import SeatingConfig, load_config
from exam_seating.models import AllocationMode, SeatingType


class TestSeatingConfig:
    """Tests for SeatingConfig."""

    def test_defaults(self):
        config = SeatingConfig()
        assert config.placeholder_prefix == "SET"
        assert config.min_id_padding == 3
        assert config.mode is AllocationMode.CLASSIC
        assert config.seating_type is SeatingType.FAIR

    def test_parses_string_values(self):
        config = SeatingConfig(mode="advanced", seating_type="normal")
        assert config.mode is AllocationMode.CONSTRAINED
        assert config.seating_type is SeatingType.NORMAL

    def test_rejects_non_positive_padding(self):
        with pytest.raises(ValueError):
            SeatingConfig(min_id_padding=0)

    def test_from_dict_ignores_unknown_keys(self):
        config = SeatingConfig.from_dict({"min_id_padding": 4, "theme": "dark"})
        assert config.min_id_padding == 4

    def test_round_trip(self):
        config = SeatingConfig(placeholder_prefix="X", mode="constrained")
        assert SeatingConfig.from_dict(config.to_dict()) == config


class TestLoadConfig:
    """Tests for load_config."""

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"seating_type": "normal"}), encoding="utf-8")

        assert load_config(path).seating_type is SeatingType.NORMAL

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_default_file_in_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "seating-config.json").write_text(
            json.dumps({"placeholder_prefix": "GRP"}), encoding="utf-8"
        )

        assert load_config().placeholder_prefix == "GRP"

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config() == SeatingConfig()
