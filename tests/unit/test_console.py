"""Tests for console module."""

from io import StringIO

from rich.console import Console

from versions_check.console import console, error, failure_panel, success, warning


class TestConsole:
    """Test console instance and helpers."""

    def test_console_is_rich_console(self):
        assert isinstance(console, Console)

    def test_error_prints_message(self):
        output = StringIO()
        error("Test error message", console=Console(file=output, force_terminal=True))
        assert "Test error message" in output.getvalue()

    def test_success_prints_message(self):
        output = StringIO()
        success("Test success message", console=Console(file=output, force_terminal=True))
        assert "Test success message" in output.getvalue()

    def test_warning_prints_message(self):
        output = StringIO()
        warning("Test warning message", console=Console(file=output, force_terminal=True))
        assert "Test warning message" in output.getvalue()


class TestFailurePanel:
    """Test the failed-check panel."""

    def test_lists_every_entry(self):
        output = StringIO()
        failure_panel("no-unused-pin", ["foo:bar", "baz:*"], console=Console(file=output, width=80))

        result = output.getvalue()
        assert "no-unused-pin" in result
        assert "foo:bar" in result
        assert "baz:*" in result

    def test_entries_are_not_markup(self):
        output = StringIO()
        failure_panel("check", ["[bold]foo:bar[/bold] = 1.0"], console=Console(file=output, width=80))

        assert "[bold]foo:bar[/bold]" in output.getvalue()
