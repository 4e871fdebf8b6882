"""CLI integration tests for demotour."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from demotour.cli import app


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty directory so no stray config is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestVersionCommand:
    """Tests for --version and --help."""

    def test_version_shows_version(self, runner: CliRunner) -> None:
        """--version should display version string."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "demotour 0.1.0" in result.stdout

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        """--help should list all available commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("init", "list", "show", "play", "classify"):
            assert command in result.stdout


class TestListCommand:
    """Tests for demotour list."""

    def test_lists_builtin_steps(self, runner: CliRunner) -> None:
        """list prints the numbered built-in steps."""
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "1. Local Development" in result.stdout
        assert "5. Add Another Database" in result.stdout

    def test_json(self, runner: CliRunner) -> None:
        """--json list emits one object per step."""
        result = runner.invoke(app, ["--json", "list"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 5
        assert data[1] == {
            "step_number": 2,
            "title": "Move to Cloud Storage",
            "code_title": "opendata.toml",
        }

    def test_custom_catalog(self, runner: CliRunner, catalog_file: Path) -> None:
        """--catalog replaces the built-in steps."""
        result = runner.invoke(app, ["--json", "list", "--catalog", str(catalog_file)])
        assert result.exit_code == 0
        assert [entry["title"] for entry in json.loads(result.stdout)] == ["Hello", "Config"]

    def test_missing_catalog(self, runner: CliRunner, tmp_path: Path) -> None:
        """A missing catalog file exits 1 with an error."""
        result = runner.invoke(app, ["list", "--catalog", str(tmp_path / "nope.toml")])
        assert result.exit_code == 1
        assert "Catalog not found" in result.stdout


class TestShowCommand:
    """Tests for demotour show."""

    def test_show_step(self, runner: CliRunner) -> None:
        """show N prints the Nth step's description and transcript."""
        result = runner.invoke(app, ["show", "4", "--no-animate"])
        assert result.exit_code == 0
        assert "Writers:" in result.stdout
        assert "Add read replicas" in result.stdout

    def test_show_json(self, runner: CliRunner) -> None:
        """--json show dumps the view model with classified lines."""
        result = runner.invoke(app, ["--json", "show", "2"])
        assert result.exit_code == 0
        view = json.loads(result.stdout)
        assert view["active_index"] == 1
        assert view["code_title"] == "opendata.toml"
        assert view["lines"][1]["segments"] == [
            {"text": "[storage]", "style": "section_header"}
        ]
        assert [line["reveal_index"] for line in view["lines"]] == list(range(len(view["lines"])))

    @pytest.mark.parametrize("n", ["0", "6"])
    def test_unknown_step(self, runner: CliRunner, n: str) -> None:
        """Step numbers outside 1..5 exit 1."""
        result = runner.invoke(app, ["show", n])
        assert result.exit_code == 1
        assert f"Step {n} not found" in result.stdout

    def test_unknown_step_json(self, runner: CliRunner) -> None:
        """In json mode the error lists the available step numbers."""
        result = runner.invoke(app, ["--json", "show", "9"])
        assert result.exit_code == 1
        assert json.loads(result.stdout)["available"] == [1, 2, 3, 4, 5]

    def test_catalog_with_broken_description(self, runner: CliRunner, tmp_path: Path) -> None:
        """A catalog description with a stray closing tag is an error, not a crash."""
        catalog = tmp_path / "steps.toml"
        catalog.write_text(
            "[[steps]]\ntitle = \"t\"\ndescription = 'close [/bold] tag'\n"
            "code_title = \"terminal\"\ncode = \"$ ls\"\n"
        )
        result = runner.invoke(app, ["show", "1", "--no-animate", "--catalog", str(catalog)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Invalid catalog" in result.stdout


class TestPlayCommand:
    """Tests for demotour play."""

    def test_play_json_visits_every_step(self, runner: CliRunner) -> None:
        """--json play emits one view per step in order."""
        result = runner.invoke(app, ["--json", "play"])
        assert result.exit_code == 0
        views = json.loads(result.stdout)
        assert [view["active_index"] for view in views] == [0, 1, 2, 3, 4]

    def test_play_prints_every_step(self, runner: CliRunner) -> None:
        """play shows every step's code panel."""
        result = runner.invoke(app, ["play", "--no-animate"])
        assert result.exit_code == 0
        for code_title in ("opendata.toml", "docker-compose.yml"):
            assert code_title in result.stdout
        assert "opendata/timeseries:latest" in result.stdout


class TestClassifyCommand:
    """Tests for demotour classify."""

    def test_classify_argument_json(self, runner: CliRunner) -> None:
        """classify LINE emits the line's segments."""
        result = runner.invoke(app, ["--json", "classify", "$ curl http://x"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {
                "line": 0,
                "segments": [
                    {"text": "$", "style": "prompt_marker"},
                    {"text": " curl http://x", "style": "prompt_body"},
                ],
            }
        ]

    def test_classify_stdin_json(self, runner: CliRunner) -> None:
        """Without an argument classify reads lines from stdin."""
        result = runner.invoke(app, ["--json", "classify"], input="a = 1\n# note\n")
        assert result.exit_code == 0
        lines = json.loads(result.stdout)
        assert len(lines) == 2
        assert lines[0]["segments"][1] == {"text": "a", "style": "key_name"}
        assert lines[1]["segments"] == [{"text": "# note", "style": "comment"}]

    def test_classify_styled(self, runner: CliRunner) -> None:
        """Styled output keeps the line text, brackets included."""
        result = runner.invoke(app, ["--no-color", "classify", "[storage]"])
        assert result.exit_code == 0
        assert "[storage]" in result.stdout


class TestInitCommand:
    """Tests for demotour init and config loading."""

    def test_init_writes_template(self, runner: CliRunner, isolated_cwd: Path) -> None:
        """init creates .demotour/config.toml."""
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (isolated_cwd / ".demotour" / "config.toml").exists()

    def test_init_refuses_overwrite(self, runner: CliRunner) -> None:
        """init will not replace an existing config."""
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 1
        assert "Config already exists" in result.stdout

    def test_config_drives_catalog(
        self, runner: CliRunner, isolated_cwd: Path, catalog_file: Path
    ) -> None:
        """A catalog path in the config is used by commands."""
        config_dir = isolated_cwd / ".demotour"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text(f"[catalog]\npath = '{catalog_file}'\n")

        result = runner.invoke(app, ["--json", "list"])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)) == 2

    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """A malformed --config file exits 1 with an error."""
        bad = tmp_path / "bad.toml"
        bad.write_text("[display\n")
        result = runner.invoke(app, ["--config", str(bad), "list"])
        assert result.exit_code == 1
        assert "Cannot read" in result.stdout
