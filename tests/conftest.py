import pytest
from PIL import ImageFont

from ttfart.fonts import Backend
from ttfart.model import FontUnavailable

MISSING_FONT = "No Such Font"


class BundledFontBackend(Backend):
    """
    Serves Pillow's built-in FreeType font for every family so rendering
    does not depend on the fonts installed on the host.
    """

    def __init__(self):
        super().__init__(ImageFont.Layout.BASIC)

    def load_font(self, name, size, style):
        if name == MISSING_FONT:
            raise FontUnavailable(name, style, "not installed")
        return ImageFont.load_default(size=size)


@pytest.fixture
def backend():
    return BundledFontBackend()
