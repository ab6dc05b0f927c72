"""
Tests for the command-line interface.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from cogshift.cli.main import main, build_parser, resolve_config

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def _run_module(*args):
    """Run the CLI module in a fresh interpreter."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "cogshift.cli.main", *args],
        capture_output=True,
        text=True,
        env=env,
    )


class TestCLIEntryPoints:
    """Test that the console script target is importable."""

    def test_entry_point_importable(self):
        assert callable(main)

    def test_entry_point_via_subprocess(self):
        result = _run_module("--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_default_run_via_subprocess(self):
        result = _run_module()
        assert result.returncode == 0
        assert result.stdout.splitlines()[0] == "Front: 30, Rear: 19, Ratio 1.579"


class TestResolveConfig:

    def test_defaults(self):
        config = resolve_config(build_parser().parse_args([]))
        assert config.front_cogs == [38, 30]
        assert config.rear_cogs == [28, 23, 19, 16]
        assert config.target_ratio == 1.6
        assert config.initial_combination is None

    def test_overrides_file(self, temp_json_file):
        args = build_parser().parse_args([str(temp_json_file), "--ratio", "1.4", "--rear", "28", "19"])
        config = resolve_config(args)
        assert config.front_cogs == [38, 30]
        assert config.rear_cogs == [28, 19]
        assert config.target_ratio == 1.4
        assert config.initial_combination == (38, 23)

    def test_initial_override(self):
        config = resolve_config(build_parser().parse_args(["--initial", "30", "16"]))
        assert config.initial_combination == (30, 16)


class TestCLIRun:

    def test_summary(self, capsys):
        assert main([]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Front: 30, Rear: 19, Ratio 1.579",
            "1 - F:38 R:28 Ratio 1.357",
            "2 - F:30 R:28 Ratio 1.071",
            "3 - F:30 R:23 Ratio 1.304",
            "4 - F:30 R:19 Ratio 1.579",
        ]

    def test_already_closest(self, capsys):
        assert main(["--ratio", "1.4"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Front: 38, Rear: 28, Ratio 1.357",
            "1 - F:38 R:28 Ratio 1.357",
        ]

    def test_from_file(self, capsys, temp_json_file):
        assert main([str(temp_json_file)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Front: 30, Rear: 23, Ratio 1.304",
            "1 - F:38 R:23 Ratio 1.652",
            "2 - F:30 R:28 Ratio 1.071",
            "3 - F:30 R:23 Ratio 1.304",
        ]

    def test_json_format(self, capsys):
        assert main(["--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["closest"]["front_cog"] == 30
        assert data["validation"]["valid"] is True

    def test_markdown_to_file(self, capsys, tmp_path):
        out = tmp_path / "plan.md"
        assert main(["--format", "markdown", "-o", str(out)]) == 0
        assert out.read_text().startswith("# Gear Shift Plan")
        assert "Saved markdown output" in capsys.readouterr().out

    def test_save_config(self, tmp_path):
        out = tmp_path / "drivetrain.json"
        assert main(["--front", "50", "34", "--rear", "28", "24", "21", "--save-config", str(out)]) == 0
        data = json.loads(out.read_text())
        assert data["front_cogs"] == [50, 34]
        assert data["initial_combination"] == [50, 28]

    def test_invalid_initial(self, capsys):
        assert main(["--initial", "50", "28"]) == 1
        captured = capsys.readouterr()
        assert "No shift gear!" in captured.out
        assert "F:50 R:28" in captured.err

    def test_empty_cogs_from_file(self, capsys, tmp_path):
        path = tmp_path / "d.json"
        path.write_text(json.dumps({"front_cogs": [], "rear_cogs": [28]}))
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["Front: 0, Rear: 0, Ratio 0.000", "No shift gear!"]
        assert "No front cogs" in captured.err

    def test_missing_file(self, capsys, tmp_path):
        assert main([str(tmp_path / "nonexistent.json")]) == 1
        assert "Error loading drivetrain" in capsys.readouterr().err

    def test_invalid_json(self, capsys, tmp_path):
        path = tmp_path / "invalid.json"
        path.write_text("not valid json {")
        assert main([str(path)]) == 1

    def test_non_positive_cog(self, capsys):
        assert main(["--rear", "28", "0"]) == 1
        assert "positive" in capsys.readouterr().err

    @pytest.mark.parametrize("ratio", ["nan", "inf"])
    def test_non_finite_ratio(self, capsys, ratio):
        assert main(["--ratio", ratio]) == 1
        assert "finite" in capsys.readouterr().err

    def test_non_finite_ratio_from_file(self, capsys, tmp_path):
        path = tmp_path / "d.json"
        path.write_text('{"front_cogs": [38, 30], "rear_cogs": [28, 23], "target_ratio": NaN}')
        assert main([str(path)]) == 1
        assert "finite" in capsys.readouterr().err

    def test_bad_arguments(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--initial", "38"])
        assert excinfo.value.code == 2
