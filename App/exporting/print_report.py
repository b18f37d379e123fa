"""Print-ready HTML report: pattern header plus the rendered canvas.

AIDEV-NOTE: The report calls window.print() from the window "load" event,
which only fires once the embedded PNG has decoded. No fixed delay.
"""

import base64
import html
from dataclasses import dataclass
from datetime import datetime

from digitizing.point_store import point_counts
from errors import EmptyPatternError
from models import Pattern

REPORT_TEMPLATE = """<!DOCTYPE html>
<html>
    <head>
        <title>{title}</title>
        <meta charset="utf-8">
        <style>
            * {{ box-sizing: border-box; margin: 0; padding: 0; }}
            body {{ font-family: Arial, sans-serif; padding: 20px; background: white; }}
            .header {{
                text-align: center;
                margin-bottom: 20px;
                border-bottom: 2px solid #ccc;
                padding-bottom: 15px;
            }}
            .header h1 {{ color: #333; margin-bottom: 10px; }}
            .info {{ font-size: 14px; color: #666; }}
            .pattern-container {{ text-align: center; margin-top: 20px; }}
            .pattern-image {{
                max-width: 100%;
                height: auto;
                border: 1px solid #ddd;
                box-shadow: 0 2px 8px rgba(0,0,0,0.1);
            }}
            @media print {{
                body {{ padding: 10px; }}
                .header {{ page-break-inside: avoid; }}
            }}
        </style>
    </head>
    <body>
        <div class="header">
            <h1>{title}</h1>
            <div class="info">{info}</div>
        </div>
        <div class="pattern-container">
            <img src="data:image/png;base64,{image}" alt="{title}" class="pattern-image" />
        </div>
        <script>
            window.addEventListener("load", function () {{ window.print(); }});
        </script>
    </body>
</html>
"""


@dataclass(frozen=True)
class PrintDocument:
    """Self-contained report handed to a PrintPresenter."""

    title: str
    html: str
    image_png: bytes
    generated_at: datetime


def report_info_line(
    pattern: Pattern, generated_at: datetime, unit: str = "inch"
) -> str:
    """Metadata line shown under the report title."""
    counts = point_counts(pattern)
    parts = [
        f"Generated: {generated_at:%Y-%m-%d} at {generated_at:%H:%M:%S}",
    ]
    if pattern.calibrated:
        parts.append(f"Scale: {pattern.scale:.1f} px/{unit}")
    parts.extend(
        [
            f"Total Points: {counts.total}",
            f"Trace Points: {counts.trace}",
            f"Notches: {counts.notch}",
        ]
    )
    return " | ".join(parts)


def export_print_report(
    pattern: Pattern,
    snapshot: bytes,
    generated_at: datetime | None = None,
    unit: str = "inch",
) -> PrintDocument:
    """Compose the print report for the current pattern.

    Args:
        pattern: Pattern to report on (not modified)
        snapshot: PNG bytes of the current rendered surface
        generated_at: Report timestamp, defaults to now
        unit: Real-world unit name for the scale line

    Returns:
        PrintDocument with standalone HTML

    Raises:
        EmptyPatternError: If the pattern has no points
    """
    if not pattern.points:
        raise EmptyPatternError(f"Pattern {pattern.name!r} has no points")

    generated_at = generated_at or datetime.now()
    content = REPORT_TEMPLATE.format(
        title=html.escape(pattern.name),
        info=html.escape(report_info_line(pattern, generated_at, unit)),
        image=base64.b64encode(snapshot).decode("ascii"),
    )

    return PrintDocument(
        title=pattern.name,
        html=content,
        image_png=snapshot,
        generated_at=generated_at,
    )
