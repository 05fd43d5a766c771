"""Logo decoding for the receipt header."""

import base64
import logging
import mimetypes
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from PIL import Image

log = logging.getLogger(__name__)


@dataclass
class EmbeddedLogo:
    """Decoded logo with its intrinsic pixel size."""

    image: Image.Image
    width: int
    height: int

    def scaled_width(self, height: float) -> float:
        """Width that keeps the aspect ratio at the given render height."""
        return height * self.width / self.height


def decode_logo(data_url: str | None) -> EmbeddedLogo | None:
    """Decode a base64 data URL into an EmbeddedLogo.

    Never raises: a malformed or unsupported logo is logged and treated
    as no logo at all.
    """
    if not data_url:
        return None

    try:
        header, payload = data_url.split(",", 1)
        fmt = "PNG" if "image/png" in header else "JPEG"
        raw = base64.b64decode("".join(payload.split()), validate=True)
        image = Image.open(BytesIO(raw), formats=[fmt])
        image.load()
    except (ValueError, OSError, Image.DecompressionBombError) as e:
        log.warning("[LOGO] Could not decode logo: %s", e)
        return None

    width, height = image.size
    if not width or not height:
        log.warning("[LOGO] Logo has empty dimensions %dx%d", width, height)
        return None

    log.info("[LOGO] Decoded %s logo %dx%d", fmt, width, height)
    return EmbeddedLogo(image=image, width=width, height=height)


def logo_data_url(path: Path) -> str:
    """Build a base64 data URL from an image file."""
    mime, _ = mimetypes.guess_type(path.name)
    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime or 'image/jpeg'};base64,{payload}"
