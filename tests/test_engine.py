"""Tests for the export boundary and its injected collaborators."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PIL import Image

from errors import (
    EmptyPatternError,
    ExportSerializationError,
    ImageDecodeError,
    PopupBlockedError,
)
from exporting import (
    BrowserPrintPresenter,
    DirectoryFileExporter,
    ExportEngine,
    PillowImageDecoder,
    PrintDocument,
)
from models import Pattern

SNAPSHOT = b"\x89PNG\r\n\x1a\nsnapshot"


class RecordingExporter:
    def __init__(self, result: Path | None = Path("out.svg")):
        self.result = result
        self.calls: list[tuple[str, bytes, str]] = []

    def save(self, filename: str, content: bytes, media_type: str) -> Path | None:
        self.calls.append((filename, content, media_type))
        return self.result


class FailingExporter:
    def save(self, filename: str, content: bytes, media_type: str) -> Path | None:
        raise RuntimeError("disk on fire")


class RecordingPresenter:
    def __init__(self, opened: bool = True):
        self.opened = opened
        self.documents: list[PrintDocument] = []

    def present(self, document: PrintDocument) -> bool:
        self.documents.append(document)
        return self.opened


class Notices:
    def __init__(self) -> None:
        self.items: list[tuple[int, str]] = []

    def __call__(self, level: int, message: str) -> None:
        self.items.append((level, message))


@pytest.fixture
def notices() -> Notices:
    return Notices()


def _engine(exporter=None, presenter=None, notices=None) -> ExportEngine:
    return ExportEngine(
        exporter or RecordingExporter(),
        presenter or RecordingPresenter(),
        notify=notices,
    )


class TestSaveVector:
    def test_writes_file_through_exporter(
        self, mixed_pattern: Pattern, tmp_path: Path, notices: Notices
    ) -> None:
        engine = _engine(DirectoryFileExporter(tmp_path), notices=notices)
        saved = engine.save_vector(mixed_pattern)

        assert saved == tmp_path / "Sleeve.svg"
        content = saved.read_text(encoding="utf-8")
        assert "<svg" in content
        assert "trace-path" in content
        assert engine.last_error is None
        assert notices.items == [(logging.INFO, "✓ Exported SVG: Sleeve.svg")]

    def test_passes_filename_and_media_type(self, mixed_pattern: Pattern) -> None:
        exporter = RecordingExporter()
        _engine(exporter).save_vector(mixed_pattern)
        ((filename, content, media_type),) = exporter.calls
        assert filename == "Sleeve.svg"
        assert media_type == "image/svg+xml"
        assert content.startswith(b"<svg")

    def test_empty_pattern_produces_notice_and_no_file(
        self, pattern: Pattern, tmp_path: Path, notices: Notices
    ) -> None:
        engine = _engine(DirectoryFileExporter(tmp_path), notices=notices)
        assert engine.save_vector(pattern) is None

        assert list(tmp_path.iterdir()) == []
        assert isinstance(engine.last_error, EmptyPatternError)
        assert notices.items == [
            (logging.WARNING, "Please add some points to the pattern before exporting")
        ]
        assert pattern.points == []
        assert pattern.scale == 1.0

    def test_cancelled_save_is_silent(
        self, mixed_pattern: Pattern, notices: Notices
    ) -> None:
        engine = _engine(RecordingExporter(result=None), notices=notices)
        assert engine.save_vector(mixed_pattern) is None
        assert engine.last_error is None
        assert notices.items == []

    def test_unexpected_failure_becomes_serialization_error(
        self, mixed_pattern: Pattern, notices: Notices, caplog
    ) -> None:
        before = list(mixed_pattern.points)
        engine = _engine(FailingExporter(), notices=notices)

        with caplog.at_level(logging.ERROR):
            assert engine.save_vector(mixed_pattern) is None

        assert isinstance(engine.last_error, ExportSerializationError)
        assert isinstance(engine.last_error.__cause__, RuntimeError)
        assert notices.items == [(logging.WARNING, ExportSerializationError.notice)]
        assert any(record.exc_info for record in caplog.records)
        assert mixed_pattern.points == before

    def test_default_notifier_logs(self, pattern: Pattern, caplog) -> None:
        engine = ExportEngine(RecordingExporter(), RecordingPresenter())
        with caplog.at_level(logging.WARNING):
            engine.save_vector(pattern)
        assert EmptyPatternError.notice in caplog.text


class TestPrintReport:
    def test_presents_document(self, mixed_pattern: Pattern, notices: Notices) -> None:
        presenter = RecordingPresenter()
        engine = _engine(presenter=presenter, notices=notices)

        assert engine.print_report(mixed_pattern, SNAPSHOT) is True
        (document,) = presenter.documents
        assert document.title == "Sleeve"
        assert document.image_png == SNAPSHOT
        assert notices.items[-1][0] == logging.INFO

    def test_blocked_presenter(self, mixed_pattern: Pattern, notices: Notices) -> None:
        engine = _engine(presenter=RecordingPresenter(opened=False), notices=notices)
        assert engine.print_report(mixed_pattern, SNAPSHOT) is False
        assert isinstance(engine.last_error, PopupBlockedError)
        assert notices.items == [(logging.WARNING, PopupBlockedError.notice)]

    def test_empty_pattern_not_presented(
        self, pattern: Pattern, notices: Notices
    ) -> None:
        presenter = RecordingPresenter()
        engine = _engine(presenter=presenter, notices=notices)
        assert engine.print_report(pattern, SNAPSHOT) is False
        assert presenter.documents == []
        assert isinstance(engine.last_error, EmptyPatternError)


class TestBrowserPrintPresenter:
    def test_writes_report_and_opens_uri(
        self, mixed_pattern: Pattern, tmp_path: Path
    ) -> None:
        opened: list[str] = []

        def opener(uri: str) -> bool:
            opened.append(uri)
            return True

        engine = _engine(presenter=BrowserPrintPresenter(opener, directory=tmp_path))
        assert engine.print_report(mixed_pattern, SNAPSHOT)

        (report,) = tmp_path.glob("patto_report_*.html")
        assert opened == [report.as_uri()]
        assert "<h1>Sleeve</h1>" in report.read_text(encoding="utf-8")

    def test_reports_share_one_temporary_directory(
        self, mixed_pattern: Pattern
    ) -> None:
        opened: list[str] = []
        presenter = BrowserPrintPresenter(lambda uri: opened.append(uri) or True)
        engine = _engine(presenter=presenter)

        assert engine.print_report(mixed_pattern, SNAPSHOT)
        assert engine.print_report(mixed_pattern, SNAPSHOT)

        report_dir = presenter.report_directory()
        reports = sorted(report_dir.glob("patto_report_*.html"))
        assert len(reports) == 2
        assert sorted(opened) == sorted(r.as_uri() for r in reports)

        presenter.close()
        assert not report_dir.exists()

    def test_close_keeps_explicit_directory(
        self, mixed_pattern: Pattern, tmp_path: Path
    ) -> None:
        presenter = BrowserPrintPresenter(lambda uri: True, directory=tmp_path)
        _engine(presenter=presenter).print_report(mixed_pattern, SNAPSHOT)
        presenter.close()
        assert len(list(tmp_path.glob("patto_report_*.html"))) == 1

    def test_close_without_reports(self) -> None:
        BrowserPrintPresenter(lambda uri: True).close()

    def test_opener_failure_is_popup_blocked(
        self, mixed_pattern: Pattern, tmp_path: Path
    ) -> None:
        presenter = BrowserPrintPresenter(lambda uri: False, directory=tmp_path)
        engine = _engine(presenter=presenter)
        assert engine.print_report(mixed_pattern, SNAPSHOT) is False
        assert isinstance(engine.last_error, PopupBlockedError)


class TestPillowImageDecoder:
    def test_decodes_to_rgba(self, tmp_path: Path) -> None:
        path = tmp_path / "piece.png"
        Image.new("RGB", (32, 16), (10, 20, 30)).save(path)

        image = PillowImageDecoder().decode(path)
        assert image.mode == "RGBA"
        assert image.size == (32, 16)
        assert image.getpixel((0, 0)) == (10, 20, 30, 255)

    def test_jpeg(self, tmp_path: Path) -> None:
        path = tmp_path / "piece.jpg"
        Image.new("RGB", (20, 20), (255, 255, 255)).save(path, format="JPEG")
        assert PillowImageDecoder().decode(str(path)).size == (20, 20)

    def test_garbage_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "not_an_image.png"
        path.write_bytes(b"definitely not a png")
        with pytest.raises(ImageDecodeError):
            PillowImageDecoder().decode(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ImageDecodeError):
            PillowImageDecoder().decode(tmp_path / "missing.png")
