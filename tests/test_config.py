"""Tests for the configuration system."""

import json
import tempfile
import unittest
from pathlib import Path

import yaml

from heatload.core.config import (
    SystemDesign,
    ComfortBounds,
    VentilationRates,
    DesignConfig,
    config_to_dict,
    create_design_config,
    create_system_design,
    get_default_config,
    load_config,
    save_config,
)


class TestConfigDataclasses(unittest.TestCase):
    """Test configuration dataclass creation and defaults."""

    def test_system_design_defaults(self):
        """Test SystemDesign default values."""
        config = SystemDesign()
        self.assertEqual(config.safety_factor, 10)
        self.assertEqual(config.bypass_factor, 0.10)
        self.assertEqual(config.adp, 55)
        self.assertEqual(config.fan_heat, 5)

    def test_system_design_custom_values(self):
        """Test SystemDesign with custom values."""
        config = SystemDesign(safety_factor=15.0, bypass_factor=0.05, adp=50.0, fan_heat=3.0)
        self.assertEqual(config.safety_factor, 15.0)
        self.assertEqual(config.bypass_factor, 0.05)
        self.assertEqual(config.adp, 50.0)
        self.assertEqual(config.fan_heat, 3.0)

    def test_comfort_bounds_defaults(self):
        """Test ComfortBounds default values."""
        config = ComfortBounds()
        self.assertEqual(config.db_min, 73)
        self.assertEqual(config.db_max, 79)
        self.assertEqual(config.rh_max, 60)

    def test_ventilation_rates_defaults(self):
        """Test VentilationRates default values."""
        config = VentilationRates()
        self.assertEqual(config.people_cfm, 5.0)
        self.assertEqual(config.area_cfm, 0.06)

    def test_design_config_defaults(self):
        """Test DesignConfig nests the default sections."""
        config = DesignConfig()
        self.assertEqual(config.system_design, SystemDesign())
        self.assertEqual(config.comfort, ComfortBounds())
        self.assertEqual(config.ventilation, VentilationRates())

    def test_config_is_immutable(self):
        """Test that config dataclasses are frozen."""
        config = SystemDesign()
        with self.assertRaises(AttributeError):
            config.adp = 50  # type: ignore


class TestConfigFromDict(unittest.TestCase):
    """Test building config dataclasses from dictionaries."""

    def test_create_system_design_partial(self):
        """Test that absent keys keep their defaults."""
        config = create_system_design({"safety_factor": 15})
        self.assertEqual(config.safety_factor, 15.0)
        self.assertEqual(config.bypass_factor, 0.10)
        self.assertEqual(config.adp, 55)

    def test_create_system_design_coerces_strings(self):
        """Test that numeric strings are read and garbage becomes 0."""
        config = create_system_design({"adp": "52.5", "fan_heat": "n/a"})
        self.assertEqual(config.adp, 52.5)
        self.assertEqual(config.fan_heat, 0.0)

    def test_create_system_design_ignores_unknown_keys(self):
        """Test that unknown keys are dropped."""
        config = create_system_design({"safety_factor": 12, "coil_rows": 6})
        self.assertEqual(config, SystemDesign(safety_factor=12.0))

    def test_create_system_design_none(self):
        """Test that None yields the defaults."""
        self.assertEqual(create_system_design(None), SystemDesign())

    def test_create_design_config(self):
        """Test building the full config from nested sections."""
        config = create_design_config(
            {
                "system_design": {"bypass_factor": 0.15},
                "comfort": {"db_max": 78},
                "ventilation": {"people_cfm": 7.5},
            }
        )
        self.assertIsInstance(config, DesignConfig)
        self.assertEqual(config.system_design.bypass_factor, 0.15)
        self.assertEqual(config.comfort.db_max, 78.0)
        self.assertEqual(config.comfort.db_min, 73)
        self.assertEqual(config.ventilation.people_cfm, 7.5)

    def test_config_to_dict(self):
        """Test converting a config to a dictionary."""
        data = config_to_dict(get_default_config())
        self.assertEqual(data["system_design"]["adp"], 55)
        self.assertEqual(data["ventilation"]["area_cfm"], 0.06)


class TestConfigLoadSave(unittest.TestCase):
    """Test configuration file loading and saving."""

    def test_load_json_config(self):
        """Test loading config from JSON file."""
        config_data = {
            "system_design": {"safety_factor": 12},
            "comfort": {"rh_max": 55},
        }
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump(config_data, f)
            f.flush()
            loaded = load_config(f.name)

        self.assertEqual(loaded["system_design"]["safety_factor"], 12)
        self.assertEqual(loaded["comfort"]["rh_max"], 55)

    def test_load_yaml_config(self):
        """Test loading config from YAML file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.safe_dump({"system_design": {"adp": 52}}, f)
            f.flush()
            loaded = load_config(f.name)

        self.assertEqual(loaded["system_design"]["adp"], 52)

    def test_load_empty_yaml_config(self):
        """Test that an empty YAML file loads as an empty dictionary."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
            f.flush()
            loaded = load_config(f.name)

        self.assertEqual(loaded, {})

    def test_save_json_config(self):
        """Test saving config to JSON file."""
        config = config_to_dict(get_default_config())

        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            save_config(config, f.name)
            with open(f.name) as rf:
                loaded = json.load(rf)

        self.assertEqual(loaded["system_design"]["fan_heat"], 5)

    def test_save_yaml_config(self):
        """Test saving and reloading config through YAML."""
        config = config_to_dict(DesignConfig(system_design=SystemDesign(adp=50.0)))

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "design.yaml"
            save_config(config, path)
            loaded = create_design_config(load_config(path))

        self.assertEqual(loaded.system_design.adp, 50.0)
        self.assertEqual(loaded.comfort, ComfortBounds())

    def test_load_missing_file(self):
        """Test loading non-existent file raises error."""
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/path/design.yaml")

    def test_load_unsupported_format(self):
        """Test loading unsupported format raises error."""
        with tempfile.NamedTemporaryFile(suffix=".txt", delete=False) as f:
            f.write(b"test")
            f.flush()
            with self.assertRaises(ValueError):
                load_config(f.name)

    def test_save_unsupported_format(self):
        """Test saving to an unsupported format raises error."""
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                save_config({"a": 1}, Path(tmp) / "design.ini")

    def test_get_default_config(self):
        """Test get_default_config returns valid DesignConfig."""
        config = get_default_config()
        self.assertIsInstance(config, DesignConfig)
        self.assertEqual(config, DesignConfig())


class TestDefaultConfigFile(unittest.TestCase):
    """Test the default_design.yaml file."""

    def test_default_config_loads(self):
        """Test that data/default_design.yaml matches the built-in defaults."""
        config_path = Path(__file__).parent.parent / "data" / "default_design.yaml"
        if config_path.exists():
            config = create_design_config(load_config(config_path))
            self.assertEqual(config, get_default_config())


if __name__ == "__main__":
    unittest.main()
