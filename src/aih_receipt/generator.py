"""Receipt PDF generation using FPDF2.

One A4 page carries two identical copies of the receipt, one per half,
separated by a dashed cut line.
"""

import logging
import re
from datetime import datetime, timezone

from fpdf import FPDF
from fpdf.errors import FPDFException

from aih_receipt.canvas import WHITE, PageCanvas
from aih_receipt.constants import (
    CHECKBOX_SIZE,
    CONTENT_WIDTH,
    COPY_HEIGHT,
    CUT_LINE_CAPTION,
    CUT_LINE_DASH,
    FILENAME_PREFIX,
    HEADER_LINES,
    HEADER_PITCH,
    HEADER_TOP,
    INFO_COLUMN,
    ITABUNA_LABEL,
    LOGO_GUTTER,
    LOGO_HEIGHT,
    LOWER_COPY_LABEL,
    M_PACTUADO_LABEL,
    MARGIN,
    MAX_PROCEDURE_LINES,
    NOTES,
    NOTES_FONT_SIZE,
    NOTES_GAP,
    NOTES_PITCH,
    NOTES_Y,
    ORIGIN_COLUMN,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    PROCEDURE_PITCH,
    SIGNATURE_CAPTIONS,
    SIGNATURE_WIDTH,
    SIGNATURE_Y,
    TITLE,
    UPPER_COPY_LABEL,
    Gray,
)
from aih_receipt.images import EmbeddedLogo, decode_logo
from aih_receipt.models import DocumentConfig, Patient
from aih_receipt.text import wrap_paragraphs, wrap_text

log = logging.getLogger(__name__)


class RenderError(Exception):
    """The receipt could not be produced; no document was returned."""


def generate_receipt(patient: Patient, config: DocumentConfig, logo: str | None = None) -> bytes:
    """Render the two-copy delivery receipt and return the PDF bytes."""
    embedded = decode_logo(logo)

    try:
        pdf = _new_document(patient, config)
        canvas = PageCanvas(pdf)

        draw_copy(canvas, patient, config, COPY_HEIGHT, UPPER_COPY_LABEL, embedded)
        _draw_cut_line(canvas)
        draw_copy(canvas, patient, config, 0, LOWER_COPY_LABEL, embedded)

        data = bytes(pdf.output())
    except FPDFException as e:
        log.error("[RENDER] Receipt for %s failed: %s", patient.id or patient.name, e)
        raise RenderError(str(e)) from e

    log.info("[RENDER] Receipt for %s rendered (%d bytes)", patient.id or patient.name, len(data))
    return data


def receipt_filename(patient: Patient) -> str:
    """Download name for a patient's receipt."""
    slug = re.sub(r"[\s/\\]+", "-", patient.name.lower())
    return f"{FILENAME_PREFIX}{slug}.pdf"


def _new_document(patient: Patient, config: DocumentConfig) -> FPDF:
    pdf = FPDF(orientation="P", unit="pt", format=(PAGE_WIDTH, PAGE_HEIGHT))
    pdf.set_auto_page_break(auto=False)
    pdf.set_margins(0, 0, 0)
    # Creation date comes from the receipt, never from the clock
    printed_at = datetime.strptime(f"{config.delivery_date.isoformat()} {config.print_time}", "%Y-%m-%d %H:%M")
    pdf.set_creation_date(printed_at.replace(tzinfo=timezone.utc))
    pdf.set_title(f"{TITLE} - {patient.name.upper()}")
    pdf.add_page()
    return pdf


def _draw_cut_line(canvas: PageCanvas):
    canvas.line(0, COPY_HEIGHT, canvas.width, COPY_HEIGHT, thickness=0.5, color=Gray.CUT_LINE, dash=CUT_LINE_DASH)
    size = 6
    width = canvas.regular.width_of_text_at_size(CUT_LINE_CAPTION, size)
    canvas.text((canvas.width - width) / 2, COPY_HEIGHT - 5, CUT_LINE_CAPTION, canvas.regular, size, Gray.CUT_CAPTION)


def draw_copy(
    canvas: PageCanvas,
    patient: Patient,
    config: DocumentConfig,
    y_offset: float,
    label: str,
    logo: EmbeddedLogo | None = None,
):
    """Draw one complete copy of the receipt in the half starting at y_offset."""
    page_width = canvas.width
    regular, bold = canvas.regular, canvas.bold
    start_y = y_offset + HEADER_TOP

    # Border
    canvas.rect(
        MARGIN - 10,
        y_offset + 15,
        CONTENT_WIDTH + 20,
        COPY_HEIGHT - 30,
        border_width=0.5,
        border_color=Gray.BORDER,
    )

    # Header, with the logo on the left when there is one
    text_x = None
    if logo:
        logo_width = logo.scaled_width(LOGO_HEIGHT)
        canvas.image(logo.image, MARGIN, start_y - 10, logo_width, LOGO_HEIGHT)
        text_x = MARGIN + logo_width + LOGO_GUTTER

    header_y = start_y + 25
    for idx, line in enumerate(HEADER_LINES):
        font, size = (bold, 10) if idx == 0 else (regular, 8)
        x = text_x if text_x is not None else (page_width - font.width_of_text_at_size(line, size)) / 2
        canvas.text(x, header_y, line, font, size)
        header_y -= HEADER_PITCH

    _draw_centered(canvas, TITLE, start_y - 35, bold, 12)

    # Patient
    data_y = start_y - 65
    canvas.text(MARGIN, data_y, "DADOS DO PACIENTE:", bold, 9)
    canvas.text(MARGIN, data_y - 14, f"NOME: {patient.name.upper()}", regular, 10)
    canvas.text(MARGIN, data_y - 28, f"Nº CADSUS: {patient.cad_sus}", regular, 10)
    canvas.text(MARGIN + INFO_COLUMN, data_y - 28, f"TELEFONE: {patient.phone}", regular, 10)

    # Procedure
    proc_y = data_y - 50
    canvas.text(MARGIN, proc_y, "PROCEDIMENTO:", bold, 9)
    proc_lines = wrap_paragraphs(config.procedimento.upper(), CONTENT_WIDTH, 9, regular)
    line_y = proc_y - 14
    for line in proc_lines[:MAX_PROCEDURE_LINES]:
        if line:
            canvas.text(MARGIN, line_y, line, regular, 9)
        line_y -= PROCEDURE_PITCH

    # Origin
    cb_y = data_y - 105
    _draw_checkbox(canvas, MARGIN, cb_y, ITABUNA_LABEL, config.is_itabuna)
    _draw_checkbox(canvas, MARGIN + ORIGIN_COLUMN, cb_y, M_PACTUADO_LABEL, config.is_m_pactuado)

    canvas.text(MARGIN + INFO_COLUMN, cb_y + 1, f"DATA DA ENTREGA: {config.delivery_date_display}", bold, 10)
    canvas.text(MARGIN + INFO_COLUMN, cb_y - 14, f"HORÁRIO: {config.print_time}", regular, 9)

    # Signature
    sig_y = y_offset + SIGNATURE_Y
    sig_x = (page_width - SIGNATURE_WIDTH) / 2
    canvas.line(sig_x, sig_y, sig_x + SIGNATURE_WIDTH, sig_y, thickness=0.5)
    _draw_centered(canvas, SIGNATURE_CAPTIONS[0], sig_y - 12, bold, 9)
    _draw_centered(canvas, SIGNATURE_CAPTIONS[1], sig_y - 24, regular, 8)

    # Footnotes
    note_y = y_offset + NOTES_Y
    for note in NOTES:
        for line in wrap_text(note, CONTENT_WIDTH, NOTES_FONT_SIZE, regular):
            canvas.text(MARGIN, note_y, line, regular, NOTES_FONT_SIZE)
            note_y -= NOTES_PITCH
        note_y -= NOTES_GAP

    label_width = regular.width_of_text_at_size(label, 7)
    canvas.text(MARGIN + CONTENT_WIDTH - label_width, start_y + 15, label, regular, 7, Gray.COPY_LABEL)


def _draw_centered(canvas: PageCanvas, text: str, y: float, font, size: float):
    width = font.width_of_text_at_size(text, size)
    canvas.text((canvas.width - width) / 2, y, text, font, size)


def _draw_checkbox(canvas: PageCanvas, x: float, y: float, label: str, checked: bool):
    canvas.rect(x, y, CHECKBOX_SIZE, CHECKBOX_SIZE, border_width=0.5, fill_color=WHITE)
    if checked:
        canvas.text(x + 2, y + 2, "X", canvas.bold, 8)
    canvas.text(x + 15, y + 1, label, canvas.regular, 10)
