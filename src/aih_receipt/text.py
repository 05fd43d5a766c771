"""Text measurement and greedy line wrapping."""

from typing import Protocol


class FontMetrics(Protocol):
    def width_of_text_at_size(self, text: str, size: float) -> float: ...


def wrap_text(text: str, max_width: float, font_size: float, font: FontMetrics) -> list[str]:
    """Greedily wrap text into lines narrower than max_width.

    Words are never broken: a word wider than max_width ends up alone on
    its own line.
    """
    words = text.split()
    if not words:
        return [""]

    lines = []
    current = words[0]
    for word in words[1:]:
        candidate = f"{current} {word}"
        if font.width_of_text_at_size(candidate, font_size) < max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines


def wrap_paragraphs(text: str, max_width: float, font_size: float, font: FontMetrics) -> list[str]:
    """Wrap each line-break separated paragraph independently."""
    lines = []
    for paragraph in text.splitlines() or [""]:
        lines.extend(wrap_text(paragraph, max_width, font_size, font))
    return lines
