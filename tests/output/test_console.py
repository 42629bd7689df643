"""Tests for Rich Console factory and theme."""

from io import StringIO

from schemagraph.domain.types import NodeColor
from schemagraph.output.console import SG_THEME, create_console, get_output, style_for_color


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestStyleForColor:
    def test_every_node_color_has_a_style(self) -> None:
        for color in NodeColor:
            assert style_for_color(color) in SG_THEME.styles

    def test_empty_color(self) -> None:
        assert style_for_color("") == ""
