"""Drawing surface widget that displays the rendered pattern frame."""

from PIL import Image
from PyQt6 import QtWidgets
from PyQt6.QtCore import QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QImage, QPainter, QPen

from digitizing.coordinates import SurfaceBounds, fit_bounds, map_to_surface
from models import SURFACE_HEIGHT, SURFACE_WIDTH
from ui.styles import COLORS, SIZES


def frame_to_qimage(frame: Image.Image) -> QImage:
    """Convert an RGBA Pillow frame to a QImage that owns its pixels."""
    rgba = frame if frame.mode == "RGBA" else frame.convert("RGBA")
    data = rgba.tobytes("raw", "RGBA")
    image = QImage(
        data, rgba.width, rgba.height, rgba.width * 4, QImage.Format.Format_RGBA8888
    )
    # QImage borrows `data`; copy so the bytes can be released
    return image.copy()


class PatternCanvas(QtWidgets.QWidget):
    """Shows the latest frame and reports clicks in surface coordinates.

    AIDEV-NOTE: The widget never draws pattern content itself. The session
    renders the full scene into a fixed 800x600 frame; this widget only
    scales it into the largest centered box that fits and converts mouse
    positions back through map_to_surface.
    """

    surface_clicked = pyqtSignal(float, float)  # x, y in surface pixels

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumSize(*SIZES.CANVAS_MIN_SIZE)
        self.setCursor(Qt.CursorShape.CrossCursor)
        self.surface_size = (SURFACE_WIDTH, SURFACE_HEIGHT)
        self._image: QImage | None = None

    def set_frame(self, frame: Image.Image):
        """Display a newly rendered frame."""
        self.surface_size = frame.size
        self._image = frame_to_qimage(frame)
        self.update()

    def display_bounds(self) -> SurfaceBounds:
        """Widget-space rectangle the frame is drawn into."""
        return fit_bounds(self.width(), self.height(), self.surface_size)

    def paintEvent(self, event):
        """Paint the frame letterboxed inside the widget."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        painter.fillRect(self.rect(), COLORS.CANVAS_BACKGROUND)

        bounds = self.display_bounds()
        target = QRectF(bounds.left, bounds.top, bounds.width, bounds.height)
        if self._image is not None:
            painter.drawImage(target, self._image)

        painter.setPen(QPen(COLORS.CANVAS_BORDER, 2))
        painter.drawRect(target)
        painter.end()

    def mousePressEvent(self, event):
        """Translate a left click on the frame into surface coordinates."""
        if event.button() != Qt.MouseButton.LeftButton:
            return

        bounds = self.display_bounds()
        pos = event.position()
        if bounds.width <= 0 or not bounds.contains(pos.x(), pos.y()):
            return

        x, y = map_to_surface(pos.x(), pos.y(), bounds, self.surface_size)
        self.surface_clicked.emit(x, y)
