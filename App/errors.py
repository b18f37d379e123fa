"""Exception types raised by the digitizer core.

AIDEV-NOTE: Export errors carry a user-facing ``notice``. The export
boundary shows that text; the exception message itself is for logs.
"""


class DigitizerError(Exception):
    """Base class for all digitizer errors."""

    notice = "Something went wrong. Check the console for details."


class EmptyPatternError(DigitizerError):
    """Export requested while the pattern has no recorded points."""

    notice = "Please add some points to the pattern before exporting"


class PopupBlockedError(DigitizerError):
    """The print/report presentation surface could not be acquired."""

    notice = (
        "Could not open the print preview. Make sure a web browser is "
        "available and allowed to open new windows."
    )


class ExportSerializationError(DigitizerError):
    """Unexpected failure while building a vector or print document."""

    notice = "Error exporting pattern. Check console for details."


class CalibrationError(DigitizerError):
    """A calibration step was attempted in an invalid state."""


class InvalidDistanceError(CalibrationError, ValueError):
    """Known reference distance is not a finite number greater than zero."""


class ImageDecodeError(DigitizerError):
    """Source image could not be read or decoded."""

    notice = "Could not load the selected image. Choose a PNG or JPEG file."
