"""End-to-end tests for the versions-check command line."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from versions_check.cli import cli

pytestmark = pytest.mark.integration


@pytest.fixture
def runner(clean_plugins) -> CliRunner:
    return CliRunner()


def _invoke(runner: CliRunner, root: Path, *args: str):
    return runner.invoke(cli, ["--root", str(root), *args])


class TestCheckCommands:
    """Tests for check, check-unused-pins and check-bom-conflicts."""

    def test_check_passes(self, runner, gradle_build):
        result = _invoke(runner, gradle_build, "check")

        assert result.exit_code == 0, result.output
        assert "no-unused-pin: passed" in result.output
        assert "no-bom-conflict: passed" in result.output

    def test_unused_pin_fails(self, runner, gradle_build):
        with open(gradle_build / "versions.props", "a") as f:
            f.write("org.example:unused = 1.0\n")

        result = _invoke(runner, gradle_build, "check-unused-pins")

        assert result.exit_code == 1
        assert "org.example:unused" in result.output

    def test_disabled_pin_is_ignored(self, runner, gradle_build):
        with open(gradle_build / "versions.props", "a") as f:
            f.write("# linter:OFF\norg.example:unused = 1.0\n# linter:ON\n")

        result = _invoke(runner, gradle_build, "check")

        assert result.exit_code == 0, result.output

    def test_only_selects_check(self, runner, gradle_build):
        result = _invoke(runner, gradle_build, "check", "--only", "no-bom-conflict")

        assert result.exit_code == 0, result.output
        assert "no-unused-pin" not in result.output

    def test_unknown_check_rejected(self, runner, gradle_build):
        result = _invoke(runner, gradle_build, "check", "--only", "no-such-check")

        assert result.exit_code == 2

    def test_unknown_resolver(self, runner, gradle_build):
        result = _invoke(runner, gradle_build, "check-unused-pins", "--resolver", "maven")

        assert result.exit_code == 1
        assert "Unknown resolver" in result.output

    def test_malformed_lockfile(self, runner, gradle_build):
        (gradle_build / "service" / "gradle.lockfile").write_text("org.slf4j:slf4j-api=runtimeClasspath\n")

        result = _invoke(runner, gradle_build, "check")

        assert result.exit_code == 1
        assert "':service'" in result.output

    def test_missing_versions_props_created(self, runner, tmp_path):
        result = _invoke(runner, tmp_path, "check")

        assert result.exit_code == 0, result.output
        assert (tmp_path / "versions.props").is_file()


class TestListCommands:
    """Tests for list-pins and list-resolvers."""

    def test_list_pins(self, runner, gradle_build):
        result = _invoke(runner, gradle_build, "list-pins")

        assert result.exit_code == 0, result.output
        assert "com.google.guava:guava" in result.output
        assert "2.0.7" in result.output

    def test_list_pins_without_file(self, runner, tmp_path):
        result = _invoke(runner, tmp_path, "list-pins")

        assert result.exit_code == 1
        assert "No" in result.output
        assert not (tmp_path / "versions.props").exists()

    def test_list_pins_empty_file(self, runner, tmp_path):
        (tmp_path / "versions.props").write_text("# nothing pinned yet\n")

        result = _invoke(runner, tmp_path, "list-pins")

        assert result.exit_code == 0
        assert "No pins in" in result.output

    def test_list_resolvers(self, runner, tmp_path):
        result = _invoke(runner, tmp_path, "list-resolvers")

        assert result.exit_code == 0, result.output
        assert "gradle-lockfile" in result.output
        assert "cyclonedx" in result.output


class TestInitCommand:
    """Tests for init."""

    def test_creates_file(self, runner, tmp_path):
        result = _invoke(runner, tmp_path, "init")

        assert result.exit_code == 0
        assert "Created" in result.output
        assert (tmp_path / "versions.props").read_text() == ""

    def test_existing_file(self, runner, gradle_build):
        before = (gradle_build / "versions.props").read_text()

        result = _invoke(runner, gradle_build, "init")

        assert result.exit_code == 0
        assert "already" in result.output
        assert (gradle_build / "versions.props").read_text() == before

    def test_degraded(self, runner, tmp_path):
        (tmp_path / "versions-check.toml").write_text('[versions-check]\nversions-props = "missing/versions.props"\n')

        result = _invoke(runner, tmp_path, "init")

        assert result.exit_code == 1
        assert "Could not create" in result.output


class TestGlobalOptions:
    """Tests for options shared by every command."""

    def test_verbosity_flags_are_exclusive(self, runner, tmp_path):
        result = runner.invoke(cli, ["-v", "-q", "--root", str(tmp_path), "list-resolvers"])

        assert result.exit_code == 2
        assert "mutually exclusive" in result.output

    def test_invalid_settings_file(self, runner, tmp_path):
        (tmp_path / "versions-check.toml").write_text("[versions-check\n")

        result = _invoke(runner, tmp_path, "check")

        assert result.exit_code == 1
        assert "Invalid settings file" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "versions-check" in result.output
