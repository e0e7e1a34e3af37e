"""Filled-form PDF export using PyMuPDF."""

import re
from datetime import datetime
from typing import Any

from formgen.schema.models import FieldType, FormSpec

try:
    import fitz  # PyMuPDF
except ImportError:
    fitz = None

PAGE_WIDTH = 595  # A4 in points
PAGE_HEIGHT = 842
MARGIN = 56
FOOTER_HEIGHT = 42

FONT = "helv"
FONT_BOLD = "hebo"
FONT_ITALIC = "heit"


def filled_pdf_filename(form: FormSpec) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "-", str(form.title)) + "-filled.pdf"


def answer_text(field_type: FieldType | None, value: Any) -> str:
    """Printable answer for one field."""
    if field_type == FieldType.CHECKBOX:
        return "Yes" if value else "No"
    if value is None or value == "" or value == []:
        return "Not selected" if field_type == FieldType.SELECT else "Not provided"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def wrap_text(text: str, width: float, fontname: str = FONT, fontsize: float = 11) -> list[str]:
    """Split text into lines no wider than ``width`` points (long words kept whole)."""
    lines: list[str] = []
    for paragraph in str(text).splitlines() or [""]:
        current = ""
        for word in paragraph.split():
            trial = f"{current} {word}" if current else word
            if current and fitz.get_text_length(trial, fontname=fontname, fontsize=fontsize) > width:
                lines.append(current)
                current = word
            else:
                current = trial
        lines.append(current)
    return lines


class _Writer:
    """Top-down text cursor that adds pages as it runs out of room."""

    def __init__(self, doc) -> None:
        self.doc = doc
        self.page = doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
        self.y = MARGIN

    def ensure_room(self, height: float) -> None:
        if self.y + height > PAGE_HEIGHT - FOOTER_HEIGHT:
            self.page = self.doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
            self.y = MARGIN

    def lines(self, lines: list[str], fontname: str, fontsize: float, leading: float) -> None:
        for line in lines:
            self.ensure_room(leading)
            self.y += leading
            self.page.insert_text((MARGIN, self.y), line, fontname=fontname, fontsize=fontsize)


def generate_filled_pdf(form: FormSpec, answers: dict[str, Any] | None = None) -> bytes:
    """
    Render a form and its answers as PDF bytes.

    Title and description head the first page, then each field label (with
    " *" when required) followed by its answer. Every page gets a
    "Generated on" footer.

    Raises:
        ImportError: If PyMuPDF is not installed.
    """
    if fitz is None:
        raise ImportError("PyMuPDF (pymupdf) is required. Install with: pip install pymupdf")

    answers = answers or {}
    text_width = PAGE_WIDTH - 2 * MARGIN
    doc = fitz.open()
    try:
        w = _Writer(doc)
        w.lines(wrap_text(form.title, text_width, FONT_BOLD, 20), FONT_BOLD, 20, 24)
        if form.description:
            w.y += 4
            w.lines(wrap_text(form.description, text_width, FONT, 12), FONT, 12, 16)

        w.y += 12
        w.page.draw_line((MARGIN, w.y), (PAGE_WIDTH - MARGIN, w.y), width=0.5)
        w.y += 10

        for field in form.fields:
            label = f"{field.label}{' *' if field.required else ''}"
            w.ensure_room(40)
            w.lines(wrap_text(label, text_width, FONT_BOLD, 11), FONT_BOLD, 11, 16)
            answer = answer_text(field.kind, answers.get(field.id))
            w.lines(wrap_text(answer, text_width, FONT, 11), FONT, 11, 15)
            w.y += 10

        timestamp = f"Generated on {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"
        for page in doc:
            page.insert_text((MARGIN, PAGE_HEIGHT - 28), timestamp, fontname=FONT_ITALIC, fontsize=9)
        return doc.tobytes()
    finally:
        doc.close()
