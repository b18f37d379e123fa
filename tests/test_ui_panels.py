"""Tests for the Qt panels, run on the offscreen platform."""

from __future__ import annotations

import logging
import os
from datetime import datetime

import pytest
from PyQt6.QtWidgets import QApplication

from ui.console_panel import ConsolePanel, format_entry
from ui.main_window import DigitizerWindow
from ui.tools_panel import ActionsPanel


@pytest.fixture(scope="module")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance() or QApplication([])
    yield app


class TestActionsPanel:
    def test_initial_state(self, qapp) -> None:
        panel = ActionsPanel()
        assert not panel.export_btn.isEnabled()
        assert not panel.print_btn.isEnabled()
        assert panel.clear_btn.isEnabled()

    def test_points_gate_export_and_print_only(self, qapp) -> None:
        panel = ActionsPanel()
        panel.set_has_points(True)
        assert panel.export_btn.isEnabled()
        assert panel.print_btn.isEnabled()

        panel.set_has_points(False)
        assert not panel.export_btn.isEnabled()
        assert not panel.print_btn.isEnabled()
        assert panel.clear_btn.isEnabled()


class TestClearBeforeTracing:
    def test_clear_removes_calibration_points(self, qapp) -> None:
        window = DigitizerWindow()
        session = window.session
        session.begin_calibration()
        session.click(100, 100)
        window._refresh_controls()

        assert not session.has_points
        assert window.actions_panel.clear_btn.isEnabled()

        window.actions_panel.clear_btn.click()

        assert session.pattern.calibration.points == []
        assert not session.pattern.calibration.active


class TestConsolePanel:
    def test_entry_format(self) -> None:
        stamp = datetime(2024, 5, 1, 9, 8, 7)
        assert format_entry("Pattern cleared.", logging.INFO, stamp) == (
            "[09:08:07] Pattern cleared."
        )
        assert format_entry("No points", logging.WARNING, stamp) == "[09:08:07] ⚠ No points"
        assert format_entry("Bad file", logging.ERROR, stamp) == "[09:08:07] ❌ Bad file"

    def test_warnings_counted_and_reset(self, qapp) -> None:
        panel = ConsolePanel()
        panel.append("Image loaded")
        panel.append("Please add some points", logging.WARNING)

        text = panel.console.toPlainText()
        assert "Image loaded" in text
        assert "⚠ Please add some points" in text
        assert panel.warning_count == 1

        panel.clear()
        assert panel.console.toPlainText() == ""
        assert panel.warning_count == 0
