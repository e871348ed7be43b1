"""End-to-end tests for the command line host."""
import json
import os
import shutil
import tempfile
from unittest.mock import patch

import pytest
import yaml

from pattern_catalog.cli.main import (
    EXIT_CONFIGURATION,
    EXIT_EXECUTION,
    EXIT_INVALID,
    EXIT_NOT_FOUND,
    EXIT_OK,
    main,
)


class TestCLIIntegration:
    """Test complete CLI scenarios."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.temp_dir, "test_config.json")

    def teardown_method(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def create_config_file(self, config_data):
        """Create a temporary configuration file."""
        with open(self.config_path, 'w') as f:
            json.dump(config_data, f, indent=2)
        return self.config_path

    def test_list_json(self, capsys):
        assert main(["list"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert [p["name"] for p in data["patterns"]] == [
            "Builder", "Delegation", "DependencyInjection"
        ]

    def test_list_by_category(self, capsys):
        assert main(["list", "--category", "Creational"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data == {"patterns": [{
            "name": "Builder",
            "category": "Creational",
            "description": data["patterns"][0]["description"],
        }]}

    def test_show_yaml(self, capsys):
        assert main(["--format", "yaml", "show", "Delegation"]) == EXIT_OK
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["pattern"]["category"] == "Structural"

    def test_list_table(self, capsys):
        assert main(["--format", "table", "list"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "DependencyInjection" in out
        assert "Category" in out

    def test_run_builder(self, capsys):
        code = main(["run", "Builder", "--input", '{"patties": 2, "cheese": true}'])
        assert code == EXIT_OK

        output = json.loads(capsys.readouterr().out)["output"]
        assert output["value"] == {
            "name": "Hamburger",
            "patties": 2,
            "bacon": False,
            "cheese": True,
            "pickles": True,
            "mustard": True,
            "tomato": False,
        }
        assert output["text"].startswith("Building a Hamburger with 2 patties")

    def test_run_list_format(self, capsys):
        assert main(["--format", "list", "run", "Delegation"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("Pattern: Delegation")
        assert "Without delegate: NO_DELEGATE, NO_DELEGATE" in out

    def test_unknown_pattern(self, capsys):
        assert main(["show", "Observer"]) == EXIT_NOT_FOUND
        assert "Observer" in capsys.readouterr().err

    def test_invalid_input_json(self, capsys):
        assert main(["run", "Builder", "--input", "{patties"]) == EXIT_INVALID
        assert "not valid JSON" in capsys.readouterr().err

    def test_input_must_be_object(self, capsys):
        assert main(["run", "Builder", "--input", "[1]"]) == EXIT_INVALID

    def test_example_failure(self, capsys):
        assert main(["run", "Builder", "--input", '{"patties": -2}']) == EXIT_EXECUTION
        assert "Example 'Builder' failed" in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert main([]) == EXIT_INVALID

    def test_bad_category_argument(self):
        with pytest.raises(SystemExit) as exc:
            main(["list", "--category", "Architectural"])
        assert exc.value.code == 2

    def test_config_restricts_catalog_and_format(self, capsys):
        path = self.create_config_file({
            "catalog": {"enabled_patterns": ["Builder"]},
            "cli": {"output_format": "yaml"},
        })
        assert main(["--config", path, "list"]) == EXIT_OK
        data = yaml.safe_load(capsys.readouterr().out)
        assert [p["name"] for p in data["patterns"]] == ["Builder"]

    def test_invalid_config(self, capsys):
        path = self.create_config_file({"catalog": {"enabled_patterns": ["Observer"]}})
        assert main(["--config", path, "list"]) == EXIT_CONFIGURATION
        assert "Configuration error" in capsys.readouterr().err

    def test_env_override_into_null_config_section(self, capsys):
        path = self.create_config_file({"logging": None})
        with patch.dict(os.environ, {"PATTERN_CATALOG_LOG_LEVEL": "DEBUG"}):
            assert main(["--config", path, "list"]) == EXIT_CONFIGURATION
        assert "Configuration error" in capsys.readouterr().err

    def test_unwritable_log_file(self, capsys):
        # A regular file where the log directory should be
        blocker = os.path.join(self.temp_dir, "not_a_dir")
        with open(blocker, 'w') as f:
            f.write("")
        path = self.create_config_file({
            "logging": {
                "destination": "file",
                "file": {"path": os.path.join(blocker, "catalog.log")},
            },
        })
        assert main(["--config", path, "list"]) == EXIT_CONFIGURATION
        assert "Cannot open log file" in capsys.readouterr().err

    def test_log_level_override(self, capsys):
        assert main(["--log-level", "DEBUG", "list"]) == EXIT_OK
        # Logs go to stderr so stdout stays parseable
        json.loads(capsys.readouterr().out)
