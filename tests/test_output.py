"""Tests for pkg_templates_yo.output."""

from __future__ import annotations

import json
import logging

from pkg_templates_yo import output


class TestHumanPrimitives:
    def test_success_contains_checkmark(self, capsys):
        output.success("done")
        out = capsys.readouterr().out
        assert "✓" in out
        assert "done" in out

    def test_warning_contains_symbol(self, capsys):
        output.warning("careful")
        assert "⚠" in capsys.readouterr().out

    def test_error_contains_symbol(self, capsys):
        output.error("bad")
        assert "✗" in capsys.readouterr().out

    def test_action_and_bullet(self, capsys):
        output.action("Generating")
        output.bullet("README.md")
        out = capsys.readouterr().out
        assert "→ Generating" in out
        assert "   • README.md" in out

    def test_heading(self, capsys):
        output.heading("Plugins")
        assert "Plugins" in capsys.readouterr().out

    def test_messages_printed_literally(self, capsys):
        output.error("Invalid host 'http://[::1'")
        output.bullet("[bold]docs[/bold]")
        out = capsys.readouterr().out
        assert "Invalid host 'http://[::1'" in out
        assert "[bold]docs[/bold]" in out

    def test_print_text_without_markup(self, capsys):
        output.print_text("[not markup]", markup=False)
        assert "[not markup]" in capsys.readouterr().out

    def test_no_color(self, capsys, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        output._reset_console()
        output.success("plain")
        assert "\x1b[" not in capsys.readouterr().out


class TestJson:
    def test_deterministic(self, capsys):
        output.emit_json({"b": 1, "a": "é"})
        out = capsys.readouterr().out
        assert out == '{\n  "a": "é",\n  "b": 1\n}\n'
        assert json.loads(out) == {"a": "é", "b": 1}


class TestLogging:
    def test_setup_levels(self):
        output.setup_logging()
        logger = logging.getLogger("pkg_templates_yo")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert logger.propagate is False
        output.setup_logging(debug=True)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_warnings_reach_stderr(self, capsys):
        output.setup_logging()
        logging.getLogger("pkg_templates_yo.template").warning("duplicate plugins")
        assert "duplicate plugins" in capsys.readouterr().err
