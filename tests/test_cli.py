"""
Tests for the command line interface.
"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from colorvalue.core import CONFIG
from colorvalue.main import main


class TestCLI(unittest.TestCase):
    """Tests for the colorvalue subcommands."""

    def setUp(self):
        self.saved = dict(CONFIG)

    def tearDown(self):
        CONFIG.clear()
        CONFIG.update(self.saved)

    def run_cli(self, *argv):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status = main(list(argv))
        return status, stdout.getvalue().splitlines(), stderr.getvalue()

    def test_css(self):
        status, lines, _ = self.run_cli("css", "#1234", "white", "tacos")
        self.assertEqual(status, 0)
        self.assertEqual(lines, ["#11223344", "#ffffffff", "#00000000"])

    def test_strict_failure(self):
        status, lines, errors = self.run_cli("--strict", "css", "whte")
        self.assertEqual(status, 1)
        self.assertEqual(lines, [])
        self.assertIn("did you mean 'white'?", errors)

    def test_info(self):
        status, lines, _ = self.run_cli("info", "#ff0000")
        self.assertEqual(status, 0)
        self.assertIn("css: #ff0000ff", lines)
        self.assertIn("brightness: 0.2990", lines)
        self.assertIn("tone: dark", lines)
        self.assertIn("hsv: 0.0000, 1.0000, 1.0000", lines)
        self.assertIn("hsl: 0.0000, 1.0000, 0.5000", lines)

    def test_metrics(self):
        self.assertEqual(self.run_cli("contrast", "#fff", "#000")[1], ["21.0000"])
        self.assertEqual(self.run_cli("distance", "#000", "#fff")[1], ["1.0000"])

    def test_transforms(self):
        self.assertEqual(self.run_cli("mix", "#fff", "#000", "0.5")[1], ["#808080ff"])
        self.assertEqual(self.run_cli("brighten", "#c0804020", "0.5")[1], ["#e0c0a020"])
        self.assertEqual(self.run_cli("darken", "#c0804020", "0.5")[1], ["#60402020"])
        self.assertEqual(self.run_cli("hue-shift", "#ff000000", "-0.3333333333333333")[1], ["#0000ff00"])

    def test_infinite_hue_shift_fails(self):
        status, lines, errors = self.run_cli("hue-shift", "#ff0000", "inf")
        self.assertEqual(status, 1)
        self.assertEqual(lines, [])
        self.assertIn("must be finite", errors)

    def test_config_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "settings.json")
            with open(path, 'w', encoding='utf-8') as f:
                json.dump({"light_threshold": 0.2}, f)
            status, lines, _ = self.run_cli("--config", path, "info", "#ff0000")
        self.assertEqual(status, 0)
        self.assertIn("tone: light", lines)

    def test_missing_config_file(self):
        status, lines, errors = self.run_cli("--config", "/nonexistent/settings.json", "css", "white")
        self.assertEqual(status, 1)
        self.assertEqual(lines, [])
        self.assertIn("Command failed", errors)


if __name__ == "__main__":
    unittest.main()
