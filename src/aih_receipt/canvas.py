"""Bottom-left origin drawing surface over an FPDF page.

FPDF measures y downwards from the top edge of the page. Receipt layout is
expressed with the origin at the bottom-left corner and y growing upwards,
so every placement goes through PageCanvas which flips the axis.
"""

from dataclasses import dataclass

from fpdf import FPDF

from aih_receipt.constants import FONT_FAMILY, PAGE_HEIGHT, PAGE_WIDTH

BLACK = 0
WHITE = 255


@dataclass(frozen=True)
class Font:
    """A core font face bound to the document that measures it."""

    pdf: FPDF
    family: str
    style: str = ""

    def width_of_text_at_size(self, text: str, size: float) -> float:
        self.pdf.set_font(self.family, self.style, size)
        return self.pdf.get_string_width(text)


class PageCanvas:
    """Single A4 page addressed in points from the bottom-left corner."""

    def __init__(self, pdf: FPDF, width: float = PAGE_WIDTH, height: float = PAGE_HEIGHT):
        self.pdf = pdf
        self.width = width
        self.height = height
        self.regular = Font(pdf, FONT_FAMILY)
        self.bold = Font(pdf, FONT_FAMILY, "B")

    def _top(self, y: float) -> float:
        return self.height - y

    def text(self, x: float, y: float, text: str, font: Font, size: float, color: int = BLACK):
        """Draw text with its baseline at y."""
        self.pdf.set_font(font.family, font.style, size)
        self.pdf.set_text_color(color)
        self.pdf.text(x, self._top(y), text)

    def rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        border_width: float,
        border_color: int = BLACK,
        fill_color: int | None = None,
    ):
        """Draw a rectangle whose bottom-left corner is at (x, y)."""
        self.pdf.set_line_width(border_width)
        self.pdf.set_draw_color(border_color)
        style = "D"
        if fill_color is not None:
            self.pdf.set_fill_color(fill_color)
            style = "DF"
        self.pdf.rect(x, self._top(y + height), width, height, style=style)

    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        thickness: float,
        color: int = BLACK,
        dash: float = 0,
    ):
        """Draw a straight line, dashed when dash is non-zero."""
        self.pdf.set_line_width(thickness)
        self.pdf.set_draw_color(color)
        if dash:
            self.pdf.set_dash_pattern(dash=dash, gap=dash)
        self.pdf.line(x1, self._top(y1), x2, self._top(y2))
        if dash:
            self.pdf.set_dash_pattern()

    def image(self, image, x: float, y: float, width: float, height: float):
        """Place an image whose bottom-left corner is at (x, y)."""
        self.pdf.image(image, x=x, y=self._top(y + height), w=width, h=height)
