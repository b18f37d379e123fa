"""Export engine for digitized patterns.

AIDEV-NOTE: Two independent serializers plus the boundary that owns the
external collaborators:
- svg_export: vector document (trace path + notch markers)
- print_report: HTML report embedding the rendered canvas
- interfaces: ImageDecoder / FileExporter / PrintPresenter protocols
- engine: ExportEngine, converts failures into user notices
"""

from .engine import ExportEngine
from .interfaces import (
    BrowserPrintPresenter,
    DirectoryFileExporter,
    FileExporter,
    ImageDecoder,
    PillowImageDecoder,
    PrintPresenter,
)
from .print_report import PrintDocument, export_print_report
from .svg_export import VectorDocument, export_vector, sanitize_filename

__all__ = [
    "ExportEngine",
    "BrowserPrintPresenter",
    "DirectoryFileExporter",
    "FileExporter",
    "ImageDecoder",
    "PillowImageDecoder",
    "PrintPresenter",
    "PrintDocument",
    "export_print_report",
    "VectorDocument",
    "export_vector",
    "sanitize_filename",
]
