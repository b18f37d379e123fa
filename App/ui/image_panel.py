"""Source image import panel."""

from __future__ import annotations

from pathlib import Path

from PIL import Image
from PyQt6.QtCore import Qt, QThread, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from exporting.interfaces import ImageDecoder, PillowImageDecoder
from ui.canvas import frame_to_qimage
from ui.styles import SIZES

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp);;All Files (*)"


class DecodeThread(QThread):
    """Background thread for image decoding to avoid blocking UI."""

    finished = pyqtSignal(object)  # PIL Image
    error = pyqtSignal(str)  # Error message

    def __init__(self, file_path: str, decoder: ImageDecoder):
        super().__init__()
        self.file_path = file_path
        self.decoder = decoder

    def run(self):
        """Decode the selected file in background."""
        try:
            self.finished.emit(self.decoder.decode(self.file_path))
        except Exception as e:
            self.error.emit(str(e))


class ImagePanel(QGroupBox):
    """Panel for choosing the photo or scan to digitize."""

    image_loaded = pyqtSignal(object)  # PIL Image
    load_failed = pyqtSignal(str)  # Error message

    def __init__(
        self,
        decoder: ImageDecoder | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__("Upload Pattern Image", parent)
        self.decoder = decoder or PillowImageDecoder()
        self.current_image_path: str | None = None
        self.decode_thread: DecodeThread | None = None

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        file_layout = QHBoxLayout()
        self.file_path_label = QLabel("No image selected")
        self.file_path_label.setWordWrap(True)
        file_layout.addWidget(self.file_path_label, stretch=1)

        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.setToolTip("Select an image file (PNG, JPG, etc.)")
        file_layout.addWidget(self.browse_btn)
        layout.addLayout(file_layout)

        self.preview_label = QLabel()
        self.preview_label.setMinimumSize(*SIZES.PREVIEW_MIN_SIZE)
        self.preview_label.setMaximumSize(*SIZES.PREVIEW_MAX_SIZE)
        self.preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.preview_label.setStyleSheet(
            "border: 1px dashed #cbd5e1; background-color: #f8fafc;"
        )
        self.preview_label.setText("Image preview will appear here")
        layout.addWidget(self.preview_label)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.setLayout(layout)

    def _connect_signals(self):
        """Connect internal signals."""
        self.browse_btn.clicked.connect(self._browse_image)

    def _browse_image(self):
        """Open file dialog to select an image."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Select Image", "", IMAGE_FILTER
        )
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path: str):
        """Start decoding a file in the background."""
        if self.decode_thread is not None and self.decode_thread.isRunning():
            self.status_label.setText("Still loading the previous image...")
            return

        self.current_image_path = file_path
        self.file_path_label.setText(Path(file_path).name)
        self.status_label.setText("Loading image...")
        self.browse_btn.setEnabled(False)

        self.decode_thread = DecodeThread(file_path, self.decoder)
        self.decode_thread.finished.connect(self._on_decode_finished)
        self.decode_thread.error.connect(self._on_decode_error)
        self.decode_thread.start()

    def _on_decode_finished(self, image: Image.Image):
        """Show the thumbnail and hand the image to the session."""
        self.browse_btn.setEnabled(True)

        thumbnail = image.copy()
        thumbnail.thumbnail(SIZES.PREVIEW_MAX_SIZE)
        self.preview_label.setPixmap(QPixmap.fromImage(frame_to_qimage(thumbnail)))
        self.status_label.setText(f"Loaded {image.width}x{image.height} image.")
        self.image_loaded.emit(image)

    def _on_decode_error(self, error_msg: str):
        """Keep the previous image and report the failure."""
        self.browse_btn.setEnabled(True)
        self.status_label.setText(f"Error: {error_msg}")
        self.load_failed.emit(error_msg)
