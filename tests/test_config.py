"""
Test cases for configuration loading.
"""
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import yaml

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from signchat.config import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, load_config


class TestLoadConfig(unittest.TestCase):
    """Test YAML configuration loading."""

    def setUp(self):
        self.env = patch.dict(os.environ, {}, clear=False)
        self.env.start()
        os.environ.pop(CONFIG_ENV_VAR, None)
        os.environ.pop("PORT", None)

    def tearDown(self):
        self.env.stop()

    def _write_config(self, data) -> str:
        handle = tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False)
        with handle:
            yaml.safe_dump(data, handle)
        self.addCleanup(os.unlink, handle.name)
        return handle.name

    def _default_data(self):
        with open(DEFAULT_CONFIG_PATH) as f:
            return yaml.safe_load(f)

    def test_defaults(self):
        cfg = load_config()
        self.assertEqual(cfg.mediapipe.max_num_hands, 2)
        self.assertEqual(cfg.recognition.detection_threshold, 0.7)
        self.assertEqual(cfg.recognition.emit_threshold, 0.7)
        self.assertEqual(cfg.recognition.repeat_confidence, 0.8)
        self.assertEqual(cfg.recognition.history_capacity, 5)
        self.assertEqual(cfg.recognition.symmetry_threshold, 0.1)
        self.assertEqual(cfg.server.port, 5000)
        self.assertEqual(len(cfg.templates), 6)

    def test_quoted_names_stay_strings(self):
        """YES and NO must not turn into YAML booleans."""
        names = {t.name for t in load_config().templates}
        self.assertIn("YES", names)
        self.assertIn("NO", names)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/signchat.yaml")

    def test_env_var_path(self):
        data = self._default_data()
        data["recognition"]["history_capacity"] = 7
        os.environ[CONFIG_ENV_VAR] = self._write_config(data)

        self.assertEqual(load_config().recognition.history_capacity, 7)

    def test_port_override(self):
        os.environ["PORT"] = "8123"
        self.assertEqual(load_config().server.port, 8123)

    def test_recognition_section_optional(self):
        data = self._default_data()
        del data["recognition"]
        cfg = load_config(self._write_config(data))
        self.assertEqual(cfg.recognition.history_capacity, 5)

    def test_invalid_capacity(self):
        data = self._default_data()
        data["recognition"]["history_capacity"] = 0
        with self.assertRaises(ValueError):
            load_config(self._write_config(data))

    def test_max_sessions(self):
        self.assertEqual(load_config().server.max_sessions, 256)

        data = self._default_data()
        data["server"]["max_sessions"] = 0
        with self.assertRaises(ValueError):
            load_config(self._write_config(data))

    def test_bad_template(self):
        data = self._default_data()
        data["templates"]["WAVE"] = {"right_hand": {"elbow_angle": {"min": 0, "max": 90}}}
        with self.assertRaises(ValueError):
            load_config(self._write_config(data))

    def test_missing_section(self):
        data = self._default_data()
        del data["templates"]
        with self.assertRaises(KeyError):
            load_config(self._write_config(data))


if __name__ == '__main__':
    unittest.main()
