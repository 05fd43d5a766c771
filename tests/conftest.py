"""Shared fixtures for aih-receipt tests."""

import base64
import struct
import zlib
from datetime import date
from io import BytesIO

import pytest
from PIL import Image

from aih_receipt.models import DocumentConfig, Patient


class MonoFont:
    """Fixed-advance font: every character is half the font size wide."""

    def __init__(self, style: str = ""):
        self.style = style

    def width_of_text_at_size(self, text: str, size: float) -> float:
        return len(text) * size * 0.5


class RecordingCanvas:
    """Canvas double that records every drawing call in order."""

    def __init__(self, width: float = 595.28, height: float = 841.89):
        self.width = width
        self.height = height
        self.regular = MonoFont()
        self.bold = MonoFont("B")
        self.ops = []

    def text(self, x, y, text, font, size, color=0):
        self.ops.append(("text", x, y, text, font.style, size, color))

    def rect(self, x, y, width, height, border_width, border_color=0, fill_color=None):
        self.ops.append(("rect", x, y, width, height, border_width, border_color, fill_color))

    def line(self, x1, y1, x2, y2, thickness, color=0, dash=0):
        self.ops.append(("line", x1, y1, x2, y2, thickness, color, dash))

    def image(self, image, x, y, width, height):
        self.ops.append(("image", x, y, width, height))

    def texts(self):
        return [op[3] for op in self.ops if op[0] == "text"]


def _data_url(fmt: str, mime: str, size=(120, 60)) -> str:
    buf = BytesIO()
    Image.new("RGB", size, (20, 80, 160)).save(buf, format=fmt)
    return f"data:{mime};base64,{base64.b64encode(buf.getvalue()).decode('ascii')}"


@pytest.fixture
def patient():
    return Patient(
        id="p-0001",
        name="Maria Souza",
        phone="(73) 99999-0000",
        cad_sus="700000000000000",
    )


@pytest.fixture
def config():
    return DocumentConfig(
        procedimento="Colecistectomia",
        is_itabuna=True,
        is_m_pactuado=False,
        delivery_date=date(2024, 5, 10),
        print_time="09:30",
    )


@pytest.fixture
def recording_canvas():
    return RecordingCanvas()


@pytest.fixture
def png_logo():
    """120x60 PNG logo as a data URL."""
    return _data_url("PNG", "image/png")


@pytest.fixture
def jpeg_logo():
    """120x60 JPEG logo as a data URL."""
    return _data_url("JPEG", "image/jpeg")


@pytest.fixture
def mono_font():
    return MonoFont()


@pytest.fixture
def make_canvas():
    """Factory for extra recording canvases within one test."""
    return RecordingCanvas


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


@pytest.fixture
def oversized_logo():
    """PNG whose header declares 30000x30000 pixels, far above Pillow's limit."""
    ihdr = struct.pack(">IIBBBBB", 30000, 30000, 8, 2, 0, 0, 0)
    png = b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", ihdr) + _png_chunk(b"IEND", b"")
    return f"data:image/png;base64,{base64.b64encode(png).decode('ascii')}"


@pytest.fixture
def wrapped_png_logo(png_logo):
    """PNG data URL with its payload folded at 76 columns."""
    header, payload = png_logo.split(",", 1)
    lines = [payload[i:i + 76] for i in range(0, len(payload), 76)]
    return f"{header},\n" + "\n".join(lines) + "\n"
