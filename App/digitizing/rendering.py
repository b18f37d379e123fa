"""Render pipeline: draws the full digitizing scene onto a surface image.

AIDEV-NOTE: render() is a pure function of its inputs. The session calls it
after every mutation and redraws the whole scene; there is no incremental
update. Drawing order matters: background, calibration overlay, trace
polyline, then point markers on top.
"""

import io
from functools import lru_cache

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from models import CalibrationPoint, Pattern, PointKind, RenderConfig

from .point_store import filter_by_kind, notch_labels


def new_surface(config: RenderConfig | None = None) -> Image.Image:
    """Create an empty drawing surface at the fixed internal resolution."""
    config = config or RenderConfig()
    return Image.new("RGBA", (config.width, config.height), (0, 0, 0, 0))


def render(
    surface: Image.Image,
    pattern: Pattern,
    source_image: Image.Image | None = None,
    config: RenderConfig | None = None,
) -> Image.Image:
    """Redraw the complete scene for the current pattern state.

    Args:
        surface: RGBA image to draw into (cleared first)
        pattern: Pattern holding points and calibration state
        source_image: Decoded pattern photo, or None for the placeholder grid
        config: Colors and sizes, defaults to RenderConfig()

    Returns:
        The same surface, for chaining
    """
    config = config or RenderConfig()
    size = surface.size

    # 1. Clear
    surface.paste((0, 0, 0, 0), (0, 0, size[0], size[1]))

    # 2. Background
    if source_image is not None:
        background = source_image.convert("RGBA").resize(
            size, Image.Resampling.LANCZOS
        )
    else:
        background = placeholder_background(
            size,
            config.gradient_start,
            config.gradient_end,
            config.grid_pitch,
            config.grid_color,
            config.grid_dash,
        )
    surface.paste(background, (0, 0))

    draw = ImageDraw.Draw(surface)

    # 3. Calibration reference line and distance badge
    calibration = pattern.calibration
    if len(calibration.points) == 2:
        _draw_calibration(
            draw, calibration.points[0], calibration.points[1],
            calibration.known_distance, config,
        )

    # 4. Trace polyline
    trace = [(p.x, p.y) for p in filter_by_kind(pattern.points, PointKind.TRACE)]
    if len(trace) > 1:
        draw.line(
            trace, fill=config.trace_color, width=config.trace_line_width, joint="curve"
        )

    # 5. Point markers
    for point in filter_by_kind(pattern.points, PointKind.TRACE):
        _draw_marker(
            draw, point.x, point.y, config.trace_radius, config.trace_color,
            config.outline_color, 2,
        )
    for point, label in notch_labels(pattern.points):
        _draw_marker(
            draw, point.x, point.y, config.notch_radius, config.notch_color,
            config.outline_color, 3,
        )
        _draw_notch_label(draw, point.x, point.y, label, config)

    return surface


def render_frame(
    pattern: Pattern,
    source_image: Image.Image | None = None,
    config: RenderConfig | None = None,
) -> Image.Image:
    """Render onto a fresh surface."""
    return render(new_surface(config), pattern, source_image, config)


def snapshot_png(frame: Image.Image) -> bytes:
    """Encode a rendered frame as PNG bytes for the print report."""
    buffer = io.BytesIO()
    frame.save(buffer, format="PNG")
    return buffer.getvalue()


def format_distance(distance: float) -> str:
    """Short display form of a known distance (``2`` not ``2.0``)."""
    return f"{distance:g}"


# === Background ===


@lru_cache(maxsize=4)
def placeholder_background(
    size: "tuple[int, int]",
    gradient_start: "tuple[int, int, int]",
    gradient_end: "tuple[int, int, int]",
    grid_pitch: int,
    grid_color: "tuple[int, int, int]",
    grid_dash: "tuple[int, int]",
) -> Image.Image:
    """Diagonal gradient with a dashed reference grid.

    AIDEV-NOTE: Cached because it only depends on config values; callers
    paste it and never draw into it.
    """
    width, height = size

    # Gradient from top-left to bottom-right corner
    xs = np.arange(width, dtype=np.float64)[np.newaxis, :]
    ys = np.arange(height, dtype=np.float64)[:, np.newaxis]
    t = (xs * width + ys * height) / float(width**2 + height**2)
    start = np.array(gradient_start, dtype=np.float64)
    end = np.array(gradient_end, dtype=np.float64)
    pixels = start + (end - start) * t[..., np.newaxis]
    image = Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8), "RGB").convert(
        "RGBA"
    )

    draw = ImageDraw.Draw(image)
    for x in range(0, width + 1, grid_pitch):
        _draw_dashed_line(draw, (x, 0), (x, height), grid_color, grid_dash)
    for y in range(0, height + 1, grid_pitch):
        _draw_dashed_line(draw, (0, y), (width, y), grid_color, grid_dash)

    return image


def _draw_dashed_line(
    draw: ImageDraw.ImageDraw,
    start: "tuple[int, int]",
    end: "tuple[int, int]",
    color: "tuple[int, int, int]",
    dash: "tuple[int, int]",
) -> None:
    """Draw an axis-aligned dashed line."""
    dash_len, gap_len = dash
    (x0, y0), (x1, y1) = start, end
    horizontal = y0 == y1
    length = (x1 - x0) if horizontal else (y1 - y0)

    offset = 0
    while offset < length:
        seg_end = min(offset + dash_len, length)
        if horizontal:
            draw.line([(x0 + offset, y0), (x0 + seg_end, y0)], fill=color, width=1)
        else:
            draw.line([(x0, y0 + offset), (x0, y0 + seg_end)], fill=color, width=1)
        offset += dash_len + gap_len


# === Overlays ===


@lru_cache(maxsize=8)
def _font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    return ImageFont.load_default(size=size)


def _draw_centered_text(
    draw: ImageDraw.ImageDraw,
    box: "tuple[float, float, float, float]",
    text: str,
    color: "tuple[int, int, int]",
    font_size: int,
) -> None:
    """Draw text centered inside a box."""
    font = _font(font_size)
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    box_x0, box_y0, box_x1, box_y1 = box
    x = (box_x0 + box_x1) / 2 - (right - left) / 2 - left
    y = (box_y0 + box_y1) / 2 - (bottom - top) / 2 - top
    draw.text((x, y), text, fill=color, font=font)


def _draw_calibration(
    draw: ImageDraw.ImageDraw,
    p1: CalibrationPoint,
    p2: CalibrationPoint,
    known_distance: float,
    config: RenderConfig,
) -> None:
    draw.line(
        [(p1.x, p1.y), (p2.x, p2.y)],
        fill=config.calibration_color,
        width=config.calibration_line_width,
    )

    mid_x = (p1.x + p2.x) / 2
    mid_y = (p1.y + p2.y) / 2
    badge_w, badge_h = config.badge_size
    box = (mid_x - badge_w / 2, mid_y - badge_h, mid_x + badge_w / 2, mid_y)
    draw.rectangle(box, fill=config.outline_color, outline=config.calibration_color, width=2)
    _draw_centered_text(
        draw, box, f'{format_distance(known_distance)}"',
        config.calibration_color, config.badge_font_size,
    )


def _draw_marker(
    draw: ImageDraw.ImageDraw,
    x: float,
    y: float,
    radius: int,
    fill: "tuple[int, int, int]",
    outline: "tuple[int, int, int]",
    outline_width: int,
) -> None:
    draw.ellipse(
        (x - radius, y - radius, x + radius, y + radius),
        fill=fill,
        outline=outline,
        width=outline_width,
    )


def _draw_notch_label(
    draw: ImageDraw.ImageDraw, x: float, y: float, label: str, config: RenderConfig
) -> None:
    """Boxed ``N{i}`` label up and to the right of a notch marker."""
    label_w, label_h = config.label_size
    box = (x + 12, y - 20, x + 12 + label_w, y - 20 + label_h)
    draw.rectangle(box, fill=config.outline_color, outline=config.notch_color, width=1)
    _draw_centered_text(draw, box, label, config.notch_color, config.label_font_size)
