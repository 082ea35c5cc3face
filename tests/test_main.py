"""
Tests for the command-line interface.
"""

import contextlib
import io
import json
import logging
import os
import shutil
import tempfile
import unittest
import xml.etree.ElementTree as ET

from infrable_logo.config.default import COLOR_SCHEMES
from infrable_logo.main import build_config, main, parse_args

SVG = "{http://www.w3.org/2000/svg}"


class TestCLI(unittest.TestCase):
    """End-to-end tests for the logo command."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.output = os.path.join(self.temp_dir, "logo.svg")
        self.root_handlers = logging.getLogger().handlers[:]
        self.root_level = logging.getLogger().level

    def tearDown(self):
        """Restore the root logger and clean up."""
        root = logging.getLogger()
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in self.root_handlers:
            root.addHandler(handler)
        root.setLevel(self.root_level)
        shutil.rmtree(self.temp_dir)

    def _run(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def _parse_output(self):
        return ET.parse(self.output).getroot()

    def test_default_run(self):
        """Test the default logo: 500 wide, decorated, nothing on stdout."""
        code, stdout, _ = self._run("--output", self.output)

        self.assertEqual(code, 0)
        self.assertEqual(stdout, "")

        root = self._parse_output()
        self.assertEqual(root.get("width"), "500")
        self.assertEqual(len(root.findall(f"{SVG}polygon")), 2)
        self.assertEqual(len(root.findall(f"{SVG}circle")), 12)

    def test_size_option(self):
        """Test that --size scales the canvas and stroke."""
        code, _, _ = self._run("-s", "300", "-o", self.output)

        self.assertEqual(code, 0)
        root = self._parse_output()
        self.assertEqual(root.get("height"), "300")
        self.assertEqual(root.find(f"{SVG}polygon").get("stroke-width"), "10")

    def test_invert(self):
        """Test the inverted two-tone colour scheme."""
        code, _, _ = self._run("--invert", "--no-decorations", "-o", self.output)

        self.assertEqual(code, 0)
        root = self._parse_output()
        self.assertEqual(root.find(f"{SVG}rect").get("fill"), "#000000")
        self.assertEqual(root.find(f"{SVG}polygon").get("fill"), "#ffffff")
        self.assertEqual(root.findall(f"{SVG}circle"), [])

    def test_zero_size(self):
        """Test that a zero size gives a well-formed degenerate logo."""
        code, _, _ = self._run("--size", "0", "--validate", "-o", self.output)

        self.assertEqual(code, 0)
        root = self._parse_output()
        for polygon in root.findall(f"{SVG}polygon"):
            self.assertEqual(set(polygon.get("points").split(", ")), {"0,0"})

    def test_negative_size(self):
        """Test that a negative size is a usage error."""
        code, _, stderr = self._run("--size", "-5", "-o", self.output)

        self.assertEqual(code, 1)
        self.assertIn("must not be negative", stderr)
        self.assertFalse(os.path.exists(self.output))

    def test_help(self):
        """Test that --help exits successfully."""
        code, stdout, _ = self._run("--help")

        self.assertEqual(code, 0)
        self.assertIn("--size", stdout)

    def test_unknown_scheme(self):
        """Test that an unknown scheme fails with a diagnostic."""
        code, _, stderr = self._run("--scheme", "neon", "-o", self.output)

        self.assertEqual(code, 1)
        self.assertIn("Unknown colour scheme", stderr)
        self.assertFalse(os.path.exists(self.output))

    def test_write_error(self):
        """Test that an unwritable destination fails with exit code 1."""
        blocker = os.path.join(self.temp_dir, "blocker")
        with open(blocker, "w") as f:
            f.write("")

        code, stdout, stderr = self._run("-o", os.path.join(blocker, "logo.svg"))

        self.assertEqual(code, 1)
        self.assertEqual(stdout, "")
        self.assertIn("FileWriteError", stderr)

    def test_config_file(self):
        """Test that a configuration file is applied under the options."""
        config_path = os.path.join(self.temp_dir, "config.json")
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump({"size": 120, "scheme": "light", "decorations": False}, f)

        code, _, _ = self._run("--config", config_path, "--size", "240", "-o", self.output)

        self.assertEqual(code, 0)
        root = self._parse_output()
        self.assertEqual(root.get("width"), "240")
        self.assertEqual(root.findall(f"{SVG}circle"), [])

    def test_missing_config_file(self):
        """Test that a missing configuration file fails."""
        code, _, _ = self._run("--config", os.path.join(self.temp_dir, "nope.json"),
                               "-o", self.output)

        self.assertEqual(code, 1)

    def _run_with_config(self, config, *argv):
        config_path = os.path.join(self.temp_dir, "config.json")
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f)
        return self._run("--config", config_path, "-o", self.output, *argv)

    def test_malformed_config_values(self):
        """Test that badly typed configuration values fail with one diagnostic."""
        cases = [
            ({"scheme": ["dark"]}, "scheme"),
            ({"schemes": ["x"]}, "Colour schemes"),
            ({"schemes": {"mono": "#000000"}, "scheme": "mono"}, "mono"),
            ({"schemes": {"mono": dict(COLOR_SCHEMES["light"], accent=5)},
              "scheme": "mono"}, "accent"),
            ({"max_svg_size": "big"}, "max_svg_size"),
            ({"png_size": 0}, "png_size"),
            ({"output": 42}, "output"),
            ({"decorations": "no"}, "decorations"),
            ({"size": "large"}, "Size"),
            ({"stroke_divisor": 0}, "Stroke divisor"),
        ]
        for config, fragment in cases:
            with self.subTest(config=config):
                code, stdout, stderr = self._run_with_config(config, "--validate")

                self.assertEqual(code, 1)
                self.assertEqual(stdout, "")
                self.assertIn("ConfigError", stderr)
                self.assertIn(fragment, stderr)
                self.assertNotIn("Traceback", stderr)
                self.assertFalse(os.path.exists(self.output))

    def test_log_json(self):
        """Test that --log-json writes diagnostics as JSON records."""
        code, _, stderr = self._run("--scheme", "neon", "--log-json", "-o", self.output)

        self.assertEqual(code, 1)
        records = [json.loads(line) for line in stderr.splitlines()]
        self.assertEqual(records[-1]["level"], "ERROR")
        self.assertIn("Unknown colour scheme", records[-1]["message"])


class TestBuildConfig(unittest.TestCase):
    """Tests for option handling."""

    def test_defaults(self):
        """Test that unset options keep the defaults."""
        config = build_config(parse_args([]))

        self.assertEqual(config["size"], 500)
        self.assertEqual(config["scheme"], "infrable")
        self.assertTrue(config["decorations"])
        self.assertFalse(config["validate"])

    def test_invert_wins(self):
        """Test that --invert selects the dark scheme."""
        config = build_config(parse_args(["--scheme", "light", "--invert"]))

        self.assertEqual(config["scheme"], "dark")


if __name__ == "__main__":
    unittest.main()
