"""Renderers that turn color records into CSV, JSON or XML documents."""

from __future__ import annotations

import csv
import io
import json
from typing import Callable, Dict, List, Sequence, TextIO
from xml.sax.saxutils import escape as xml_escape

from .errors import FormatError
from .models import Color

CSV_HEADER = "name,red,green,blue"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _csv_line(color: Color, escape: bool) -> str:
    fields = [color.name, color.red, color.green, color.blue]
    if not escape:
        return ",".join(str(field) for field in fields)
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="").writerow(fields)
    return buffer.getvalue()


def render_csv(colors: Sequence[Color], escape: bool = False) -> str:
    """Render a header line followed by one comma-joined line per color."""
    lines = [CSV_HEADER]
    lines.extend(_csv_line(color, escape) for color in colors)
    return "\n".join(lines) + "\n"


def render_json(colors: Sequence[Color], escape: bool = False) -> str:
    """Render a JSON array with one object per line."""
    entries: List[str] = []
    for color in colors:
        name = json.dumps(color.name, ensure_ascii=False) if escape else f'"{color.name}"'
        entries.append(
            f'  {{"name":{name},"red":{color.red},'
            f'"green":{color.green},"blue":{color.blue}}}'
        )
    lines = ["["]
    if entries:
        lines.append(",\n".join(entries))
    lines.append("]")
    return "\n".join(lines) + "\n"


def render_xml(colors: Sequence[Color], escape: bool = False) -> str:
    """Render a ``<colors>`` document with a self-closing element per color."""
    lines = [XML_DECLARATION, "<colors>"]
    for color in colors:
        name = xml_escape(color.name, {'"': "&quot;"}) if escape else color.name
        lines.append(
            f'  <color name="{name}" red="{color.red}" '
            f'green="{color.green}" blue="{color.blue}" />'
        )
    lines.append("</colors>")
    return "\n".join(lines) + "\n"


RENDERERS: Dict[str, Callable[..., str]] = {
    "csv": render_csv,
    "json": render_json,
    "xml": render_xml,
}


def render(colors: Sequence[Color], output_format: str, escape: bool = False) -> str:
    """Render colors in the named output format."""
    renderer = RENDERERS.get(output_format)
    if renderer is None:
        raise FormatError(f"Unsupported output format {output_format!r}")
    return renderer(colors, escape=escape)


def write_output(text: str, stream: TextIO) -> None:
    """Write a rendered document to a stream and flush it."""
    try:
        stream.write(text)
        stream.flush()
    except OSError as exc:
        raise FormatError(f"Failed to write output: {exc}") from exc
