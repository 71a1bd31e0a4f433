"""Tests for the Rich Console factory and theme."""

from __future__ import annotations

from io import StringIO

from warungctl.output.console import WARUNG_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[warung.money]Rp 25.000[/warung.money]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "Rp 25.000" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80


class TestTheme:
    def test_has_required_styles(self) -> None:
        for name in ("ok", "error", "warning", "op", "key", "path", "money", "label", "url"):
            assert f"warung.{name}" in WARUNG_THEME.styles
