"""Export boundary: runs the serializers and turns failures into notices.

AIDEV-NOTE: Nothing here mutates the Pattern. Every error raised below this
boundary is logged and reported through the notifier; callers only see the
return value (None/False on failure).
"""

import logging
from pathlib import Path
from typing import Callable

from errors import DigitizerError, ExportSerializationError, PopupBlockedError
from models import Pattern

from .interfaces import FileExporter, PrintPresenter
from .print_report import PrintDocument, export_print_report
from .svg_export import VectorDocument, export_vector

logger = logging.getLogger(__name__)

# Called with a logging level and a user-facing message
Notifier = Callable[[int, str], None]


def _log_notice(level: int, message: str) -> None:
    logger.log(level, message)


class ExportEngine:
    """Runs SVG and print exports against injected collaborators."""

    def __init__(
        self,
        file_exporter: FileExporter,
        print_presenter: PrintPresenter,
        notify: Notifier | None = None,
        unit: str = "inch",
    ):
        self.file_exporter = file_exporter
        self.print_presenter = print_presenter
        self.notify = notify or _log_notice
        self.unit = unit
        self.last_error: DigitizerError | None = None

    def save_vector(self, pattern: Pattern) -> Path | None:
        """Export the pattern as SVG through the FileExporter.

        Returns:
            Path of the written file, or None if export failed or was cancelled
        """
        self.last_error = None
        try:
            document: VectorDocument = self._run(export_vector, pattern)
            saved = self._run(
                self.file_exporter.save,
                document.filename,
                document.content.encode("utf-8"),
                document.media_type,
            )
        except DigitizerError as e:
            self._report(e)
            return None

        if saved is None:
            logger.info("SVG export cancelled")
            return None

        self.notify(logging.INFO, f"✓ Exported SVG: {Path(saved).name}")
        return saved

    def print_report(self, pattern: Pattern, snapshot: bytes) -> bool:
        """Build the print report and hand it to the PrintPresenter.

        Args:
            pattern: Pattern to report on
            snapshot: PNG bytes of the fully rendered canvas

        Returns:
            True if the report was presented
        """
        self.last_error = None
        try:
            document: PrintDocument = self._run(
                export_print_report, pattern, snapshot, None, self.unit
            )
            presented = self._run(self.print_presenter.present, document)
            if not presented:
                raise PopupBlockedError("Print presenter could not open a window")
        except DigitizerError as e:
            self._report(e)
            return False

        self.notify(logging.INFO, f"🖨 Print report opened for {pattern.name}")
        return True

    # === Internal ===

    def _run(self, func, *args):
        """Call func, wrapping unexpected failures in ExportSerializationError."""
        try:
            return func(*args)
        except DigitizerError:
            raise
        except Exception as e:
            logger.exception("Export failed in %s", getattr(func, "__name__", func))
            raise ExportSerializationError(str(e)) from e

    def _report(self, error: DigitizerError) -> None:
        self.last_error = error
        logger.warning("%s: %s", type(error).__name__, error)
        self.notify(logging.WARNING, error.notice)
