"""Tests for the printable HTML report."""

from __future__ import annotations

import base64
from datetime import datetime

import pytest

from digitizing import calibration
from errors import EmptyPatternError
from exporting.print_report import export_print_report, report_info_line
from models import CalibrationPoint, Pattern

GENERATED_AT = datetime(2024, 3, 9, 14, 5, 30)
SNAPSHOT = b"\x89PNG\r\n\x1a\nfake-image-bytes"


def _calibrate(pattern: Pattern) -> None:
    calibration.set_known_distance(pattern.calibration, 2)
    calibration.begin_calibration(pattern.calibration)
    calibration.add_calibration_point(pattern, CalibrationPoint(0, 0))
    calibration.add_calibration_point(pattern, CalibrationPoint(100, 0))


class TestInfoLine:
    def test_uncalibrated_has_no_scale(self, mixed_pattern: Pattern) -> None:
        line = report_info_line(mixed_pattern, GENERATED_AT)
        assert line == (
            "Generated: 2024-03-09 at 14:05:30 | Total Points: 5 | "
            "Trace Points: 3 | Notches: 2"
        )

    def test_calibrated_includes_scale(self, mixed_pattern: Pattern) -> None:
        _calibrate(mixed_pattern)
        line = report_info_line(mixed_pattern, GENERATED_AT)
        assert "Scale: 50.0 px/inch" in line
        assert line.index("Generated") < line.index("Scale") < line.index("Total")

    def test_scale_survives_clear(self, mixed_pattern: Pattern) -> None:
        _calibrate(mixed_pattern)
        mixed_pattern.calibration.points.clear()
        assert "Scale: 50.0 px/inch" in report_info_line(mixed_pattern, GENERATED_AT)

    def test_unit_name(self, mixed_pattern: Pattern) -> None:
        _calibrate(mixed_pattern)
        line = report_info_line(mixed_pattern, GENERATED_AT, unit="cm")
        assert "Scale: 50.0 px/cm" in line


class TestReportDocument:
    def test_embeds_snapshot(self, mixed_pattern: Pattern) -> None:
        document = export_print_report(mixed_pattern, SNAPSHOT, GENERATED_AT)
        encoded = base64.b64encode(SNAPSHOT).decode("ascii")
        assert f"data:image/png;base64,{encoded}" in document.html
        assert document.image_png == SNAPSHOT
        assert document.generated_at == GENERATED_AT

    def test_header_and_counts(self, mixed_pattern: Pattern) -> None:
        document = export_print_report(mixed_pattern, SNAPSHOT, GENERATED_AT)
        assert document.title == "Sleeve"
        assert "<title>Sleeve</title>" in document.html
        assert "<h1>Sleeve</h1>" in document.html
        assert "Total Points: 5" in document.html
        assert "Trace Points: 3" in document.html
        assert "Notches: 2" in document.html

    def test_print_runs_after_load(self, mixed_pattern: Pattern) -> None:
        html = export_print_report(mixed_pattern, SNAPSHOT, GENERATED_AT).html
        assert 'addEventListener("load"' in html
        assert "window.print()" in html
        assert "setTimeout" not in html

    def test_name_is_escaped(self, mixed_pattern: Pattern) -> None:
        mixed_pattern.name = "Skirt <A&B>"
        html = export_print_report(mixed_pattern, SNAPSHOT, GENERATED_AT).html
        assert "<h1>Skirt &lt;A&amp;B&gt;</h1>" in html
        assert "Skirt <A&B>" not in html

    def test_defaults_to_now(self, mixed_pattern: Pattern) -> None:
        before = datetime.now()
        document = export_print_report(mixed_pattern, SNAPSHOT)
        assert before <= document.generated_at <= datetime.now()

    def test_empty_pattern_rejected(self, pattern: Pattern) -> None:
        with pytest.raises(EmptyPatternError):
            export_print_report(pattern, SNAPSHOT, GENERATED_AT)
