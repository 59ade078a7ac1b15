"""Tests for the 'revise check' command."""

from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from revise.cli.commands.check import check
from revise.lib.ui.colors import ANSIColors

VALID_SET = "Animals\n\nhund - dog\nkatze - cat\n"


class TestCheckCommand:
    """Tests for the check command."""

    def test_valid_set(
        self, cli_runner: CliRunner, write_set: Callable[..., Path]
    ) -> None:
        """Test a valid set is summarized and exits 0."""
        path = write_set(VALID_SET)

        result = cli_runner.invoke(check, [str(path), "--no-color"])

        assert result.exit_code == 0
        assert f"ok {path}: Animals (2 cards)" in result.output

    def test_quiet_hides_summary(
        self, cli_runner: CliRunner, write_set: Callable[..., Path]
    ) -> None:
        """Test --quiet prints nothing for valid sets."""
        path = write_set(VALID_SET)

        result = cli_runner.invoke(check, [str(path), "--quiet"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_invalid_set(
        self, cli_runner: CliRunner, write_set: Callable[..., Path]
    ) -> None:
        """Test problems are reported with their location and exit 1."""
        path = write_set("Animals\n\na  ,  b ,, c - x\n")

        result = cli_runner.invoke(check, [str(path), "--no-color"])

        assert result.exit_code == 1
        assert "error: empty option" in result.output
        assert f"--> {path}:3:9" in result.output
        assert "error: aborting due to previous error" in result.output

    def test_every_file_is_checked(
        self, cli_runner: CliRunner, write_set: Callable[..., Path]
    ) -> None:
        """Test a bad file does not stop later files from being checked."""
        bad = write_set("Broken\n", name="broken.set")
        good = write_set(VALID_SET, name="good.set")

        result = cli_runner.invoke(check, [str(bad), str(good), "--no-color"])

        assert result.exit_code == 1
        assert "expected one or more cards in the set" in result.output
        assert f"ok {good}: Animals (2 cards)" in result.output

    def test_max_reports(
        self, cli_runner: CliRunner, write_set: Callable[..., Path]
    ) -> None:
        """Test --max-reports limits the printed diagnostics."""
        path = write_set("")

        result = cli_runner.invoke(
            check, [str(path), "--no-color", "--max-reports", "1"]
        )

        assert result.exit_code == 1
        assert "set does not have a title" in result.output
        assert "... and 1 more diagnostic" in result.output

    def test_unexpected_extension_warns(
        self, cli_runner: CliRunner, write_set: Callable[..., Path]
    ) -> None:
        """Test files without the configured extension get a warning."""
        path = write_set(VALID_SET, name="animals.txt")

        result = cli_runner.invoke(check, [str(path), "--no-color"])

        assert result.exit_code == 0
        assert "recommended to have a file extension of `.set`" in result.output

    def test_missing_file(self, cli_runner: CliRunner, temp_dir: Path) -> None:
        """Test unreadable files are reported and exit 1."""
        result = cli_runner.invoke(
            check, [str(temp_dir / "missing.set"), "--no-color"]
        )

        assert result.exit_code == 1
        assert result.output.count("Couldn't read") == 1

    def test_color(
        self, cli_runner: CliRunner, write_set: Callable[..., Path]
    ) -> None:
        """Test --color forces ANSI codes."""
        path = write_set("Broken\n")

        result = cli_runner.invoke(check, [str(path), "--color"])

        assert ANSIColors.RED in result.output

    def test_no_color(
        self, cli_runner: CliRunner, write_set: Callable[..., Path]
    ) -> None:
        """Test --no-color keeps reports plain."""
        path = write_set("Broken\n")

        result = cli_runner.invoke(check, [str(path), "--no-color"])

        assert "\033[" not in result.output

    def test_color_summary(
        self, cli_runner: CliRunner, write_set: Callable[..., Path]
    ) -> None:
        """Test --color also colors the summary of valid sets."""
        path = write_set(VALID_SET)

        result = cli_runner.invoke(check, [str(path), "--color"])

        assert f"{ANSIColors.GREEN}ok{ANSIColors.RESET} {path}" in result.output

    def test_project_config_is_used(
        self,
        cli_runner: CliRunner,
        write_set: Callable[..., Path],
        isolated_config: Path,
    ) -> None:
        """Test settings from revise.yml in the working directory apply."""
        (isolated_config / "revise.yml").write_text("extension: txt\n")
        path = write_set(VALID_SET, name="animals.txt")

        result = cli_runner.invoke(check, [str(path), "--no-color"])

        assert result.exit_code == 0
        assert "recommended" not in result.output

    def test_invalid_config_exits_2(
        self,
        cli_runner: CliRunner,
        write_set: Callable[..., Path],
        isolated_config: Path,
    ) -> None:
        """Test configuration errors exit with status 2."""
        (isolated_config / "revise.yml").write_text("max_reports: 0\n")
        path = write_set(VALID_SET)

        result = cli_runner.invoke(check, [str(path)])

        assert result.exit_code == 2
        assert "Configuration Error" in result.output

    def test_requires_a_file(self, cli_runner: CliRunner) -> None:
        """Test at least one set file must be given."""
        result = cli_runner.invoke(check, [])

        assert result.exit_code == 2
