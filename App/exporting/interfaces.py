"""Narrow external collaborators used by the digitizer.

AIDEV-NOTE: Decoding, saving and presenting are injected behind these
protocols so tests (and the Qt shell) can swap them out.
"""

import logging
import tempfile
import webbrowser
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Protocol

from PIL import Image

from errors import ImageDecodeError

if TYPE_CHECKING:
    from .print_report import PrintDocument

logger = logging.getLogger(__name__)


class ImageDecoder(Protocol):
    def decode(self, file_path: str | Path) -> Image.Image: ...


class FileExporter(Protocol):
    def save(self, filename: str, content: bytes, media_type: str) -> Path | None:
        """Persist an exported file; None means the user cancelled."""
        ...


class PrintPresenter(Protocol):
    def present(self, document: "PrintDocument") -> bool:
        """Show the document for printing; False if no surface was available."""
        ...


class PillowImageDecoder:
    """Decode raster files (PNG, JPEG, ...) with Pillow."""

    def decode(self, file_path: str | Path) -> Image.Image:
        """Load and validate an image file.

        Args:
            file_path: Path to image file

        Returns:
            PIL Image in RGBA mode

        Raises:
            ImageDecodeError: If the file cannot be read or decoded
        """
        try:
            with Image.open(file_path) as image:
                image.load()
                # AIDEV-NOTE: Always convert to RGBA for consistent rendering
                return image.convert("RGBA")
        except (OSError, Image.DecompressionBombError) as e:
            raise ImageDecodeError(f"Failed to load image: {e}") from e


class DirectoryFileExporter:
    """Write exported files into a fixed directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def save(self, filename: str, content: bytes, media_type: str) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / filename
        target.write_bytes(content)
        logger.info("Wrote %s (%s, %d bytes)", target, media_type, len(content))
        return target


class BrowserPrintPresenter:
    """Open the report in the system web browser, which runs the print dialog.

    AIDEV-NOTE: Without an explicit directory, reports go into one temporary
    directory per presenter. close() removes it; the browser only needs the
    file while the session is running.
    """

    def __init__(
        self,
        opener: Callable[[str], bool] = webbrowser.open,
        directory: str | Path | None = None,
    ):
        self.opener = opener
        self.directory = directory
        self._session_dir: tempfile.TemporaryDirectory | None = None

    def report_directory(self) -> Path:
        """Directory new reports are written to."""
        if self.directory is not None:
            return Path(self.directory)
        if self._session_dir is None:
            self._session_dir = tempfile.TemporaryDirectory(prefix="patto_reports_")
        return Path(self._session_dir.name)

    def close(self) -> None:
        """Delete the temporary report directory, if one was created."""
        if self._session_dir is not None:
            self._session_dir.cleanup()
            logger.debug("Removed print report directory %s", self._session_dir.name)
            self._session_dir = None

    def present(self, document: "PrintDocument") -> bool:
        with tempfile.NamedTemporaryFile(
            "w",
            suffix=".html",
            prefix="patto_report_",
            dir=self.report_directory(),
            delete=False,
            encoding="utf-8",
        ) as handle:
            handle.write(document.html)
            report_path = Path(handle.name)

        opened = bool(self.opener(report_path.as_uri()))
        if opened:
            logger.info("Opened print report %s", report_path)
        else:
            logger.warning("No browser accepted print report %s", report_path)
        return opened
