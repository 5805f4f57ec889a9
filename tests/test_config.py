"""Tests for globe configuration."""

import json
import logging
from datetime import datetime, timezone

import pytest

from flightglobe.config import (
    ConfigurationManager,
    GlobeConfig,
    LoadedConfiguration,
    SOLAR_TIME_SOURCES,
)
from flightglobe.config.settings import parse_time


class TestGlobeConfig:
    """Tests for the configuration dataclasses."""

    def test_defaults_valid(self):
        config = GlobeConfig()
        assert config.validate() == []
        assert config.flight.depart_name == "PVG"
        assert config.solar.time_source == "simulated"
        assert config.render.path_segments == 256

    def test_from_dict_partial(self):
        """Test missing keys fall back to defaults."""
        config = GlobeConfig.from_dict({
            "flight": {"time_scale_factor": 60.0},
            "solar": {"time_source": "fixed"},
        })
        assert config.flight.time_scale_factor == 60.0
        assert config.flight.depart_latitude == 31.0
        assert config.solar.time_source == "fixed"
        assert config.render.resolution == 512

    def test_from_empty(self):
        assert GlobeConfig.from_dict(None).to_dict() == GlobeConfig().to_dict()

    def test_times(self):
        config = GlobeConfig()
        assert config.depart_datetime() == datetime(2025, 6, 1, 2, 0, tzinfo=timezone.utc)
        assert config.arrive_datetime() == datetime(2025, 6, 1, 15, 25, tzinfo=timezone.utc)

    def test_json_round_trip(self, tmp_path):
        config = GlobeConfig.from_dict({"render": {"resolution": 128}})
        path = tmp_path / "globe.json"
        config.to_json(str(path))
        loaded = GlobeConfig.from_json(str(path))
        assert loaded.to_dict() == config.to_dict()

    def test_yaml_round_trip(self, tmp_path):
        config = GlobeConfig.from_dict({
            "flight": {"depart_name": "LHR", "depart_latitude": 51.5, "depart_longitude": -0.5},
            "render": {"camera_position": [0.0, 0.0, 4.0]},
        })
        path = tmp_path / "globe.yaml"
        config.to_yaml(str(path))
        loaded = GlobeConfig.from_yaml(str(path))
        assert loaded.flight.depart_name == "LHR"
        assert loaded.render.camera_position == [0.0, 0.0, 4.0]
        assert loaded.depart_datetime() == config.depart_datetime()
        assert loaded.validate() == []

    def test_yaml_unquoted_timestamp(self, tmp_path):
        """Test YAML timestamps parsed by the loader are accepted."""
        path = tmp_path / "globe.yaml"
        path.write_text(
            "flight:\n"
            "  depart_time: 2025-06-01T02:00:00Z\n"
            "  arrive_time: 2025-06-01T15:25:00Z\n"
        )
        config = GlobeConfig.from_yaml(str(path))
        assert config.validate() == []
        assert config.depart_datetime() == datetime(2025, 6, 1, 2, 0, tzinfo=timezone.utc)


class TestValidation:
    """Tests for configuration validation."""

    def test_latitude_range(self):
        config = GlobeConfig.from_dict({"flight": {"depart_latitude": 95.0}})
        errors = config.validate()
        assert any("depart_latitude" in e for e in errors)

    def test_longitude_range(self):
        config = GlobeConfig.from_dict({"flight": {"arrive_longitude": -200.0}})
        assert any("arrive_longitude" in e for e in config.validate())

    def test_arrival_before_departure(self):
        config = GlobeConfig.from_dict({"flight": {
            "depart_time": "2025-06-01T10:00:00Z",
            "arrive_time": "2025-06-01T09:00:00Z",
        }})
        assert any("arrive_time" in e for e in config.validate())

    def test_unparseable_time(self):
        config = GlobeConfig.from_dict({"flight": {"depart_time": "yesterday"}})
        assert any("invalid flight time" in e for e in config.validate())

    @pytest.mark.parametrize("factor", [0.0, -5.0, float("nan")])
    def test_time_scale_factor(self, factor):
        config = GlobeConfig.from_dict({"flight": {"time_scale_factor": factor}})
        assert any("time_scale_factor" in e for e in config.validate())

    def test_time_source(self):
        config = GlobeConfig.from_dict({"solar": {"time_source": "sundial"}})
        assert any("solar time source" in e for e in config.validate())
        assert "sundial" not in SOLAR_TIME_SOURCES

    def test_colors(self):
        config = GlobeConfig.from_dict({"atmosphere": {"day_color": "#zzzzzz"}})
        assert any("day_color" in e for e in config.validate())

    def test_render_settings(self):
        config = GlobeConfig.from_dict({"render": {
            "path_segments": 0,
            "resolution": 1,
            "camera_position": [0.5, 0.0, 0.0],
        }})
        errors = config.validate()
        assert any("path_segments" in e for e in errors)
        assert any("resolution" in e for e in errors)
        assert any("outside the globe" in e for e in errors)

    def test_camera_components(self):
        config = GlobeConfig.from_dict({"render": {"camera_position": [1.0, 2.0]}})
        assert any("three components" in e for e in config.validate())


class TestParseTime:
    """Tests for ISO-8601 parsing."""

    def test_zulu(self):
        assert parse_time("2025-06-01T02:00:00Z") == datetime(2025, 6, 1, 2, tzinfo=timezone.utc)

    def test_naive_is_utc(self):
        assert parse_time("2025-06-01T02:00:00").tzinfo is not None

    def test_offset(self):
        assert parse_time("2025-06-01T10:00:00+08:00").hour == 2

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_time("not a time")


class TestConfigurationManager:
    """Tests for configuration loading."""

    def test_load_dict(self):
        loaded = ConfigurationManager().load_config({"solar": {"time_source": "wall"}})
        assert isinstance(loaded, LoadedConfiguration)
        assert loaded.is_valid
        assert loaded.config.solar.time_source == "wall"

    def test_load_json(self, tmp_path):
        path = tmp_path / "globe.json"
        path.write_text(json.dumps({"render": {"resolution": 64}}))
        loaded = ConfigurationManager().load_config(str(path))
        assert loaded.is_valid
        assert loaded.config.render.resolution == 64

    def test_relative_path(self, tmp_path):
        (tmp_path / "globe.json").write_text("{}")
        loaded = ConfigurationManager(base_path=str(tmp_path)).load_config("globe.json")
        assert loaded.is_valid

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigurationManager().load_config(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "globe.txt"
        path.write_text("")
        with pytest.raises(ValueError):
            ConfigurationManager().load_config(path)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            ConfigurationManager().load_config(42)

    def test_invalid_config_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="flightglobe.config.manager"):
            loaded = ConfigurationManager().load_config({"render": {"resolution": 0}})
        assert not loaded.is_valid
        assert loaded.validation_errors
        assert "resolution" in caplog.text

    @pytest.mark.parametrize("name", ["example.yaml", "example.yml", "example.json"])
    def test_save_example_config(self, tmp_path, name):
        manager = ConfigurationManager(base_path=str(tmp_path))
        manager.save_example_config(f"nested/{name}")
        path = tmp_path / "nested" / name
        assert path.exists()
        loaded = manager.load_config(path)
        assert loaded.is_valid
        assert loaded.config.flight.arrive_name == "DFW"

    def test_example_config_is_valid(self):
        config = GlobeConfig.from_dict(ConfigurationManager.create_example_config())
        assert config.validate() == []
