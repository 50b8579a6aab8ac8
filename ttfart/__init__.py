from .fonts import Backend
from .model import FontStyle, FontUnavailable, RenderRequest
from .ttf import ttf_to_ascii

VERSION = "1.0.0"

__all__ = [
    "Backend",
    "FontStyle",
    "FontUnavailable",
    "RenderRequest",
    "VERSION",
    "render",
    "ttf_to_ascii",
]


def render(text, backend=None, **options):
    """
    Renders text as ASCII art. See RenderRequest for the options.
    """
    return ttf_to_ascii(RenderRequest(text, **options), backend=backend)
