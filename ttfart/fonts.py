import logging
import os
from functools import lru_cache
from shutil import which
from subprocess import DEVNULL, CalledProcessError, check_output

from PIL import ImageFont, features

from .model import FontUnavailable

LOG = logging.getLogger(__name__)


class Backend:
    """
    Process-wide rendering state: which Pillow layout engine to shape text
    with and how to turn a family name into a font file. Create one with
    Backend.detect() and hand it to the rasterizer.
    """

    def __init__(self, layout_engine, fc_match=None):
        self.layout_engine = layout_engine
        self.fc_match = fc_match

    @classmethod
    def detect(cls):
        return _default_backend()

    def load_font(self, name, size, style):
        """
        Returns a FreeTypeFont for the given family (or font file) and style.
        Raises FontUnavailable instead of substituting another font.
        """
        if os.path.isfile(name):
            path = name
        elif self.fc_match:
            path = self._resolve_with_fontconfig(name, style)
        else:
            # Pillow searches the system font directories by file name
            path = name
        LOG.debug("loading font %s (size=%d, style=%s)", path, size, style.name)
        try:
            font = ImageFont.truetype(path, size, layout_engine=self.layout_engine)
        except (OSError, ValueError) as exc:
            raise FontUnavailable(name, style, str(exc)) from exc
        # font files and Pillow's lookup hand out whatever face they hold
        family, face_style = font.getname()
        if not _face_matches(style.face, _split_names(face_style or "")):
            LOG.debug("refusing %s face of %s for %s", face_style, family, style.name)
            raise FontUnavailable(name, style, "style not installed")
        return font

    def _resolve_with_fontconfig(self, name, style):
        pattern = "{}:style={}".format(name, style.face)
        try:
            output = check_output(
                [self.fc_match, "--format=%{family}\n%{style}\n%{file}", pattern],
                stderr=DEVNULL,
                universal_newlines=True,
            )
        except (CalledProcessError, OSError) as exc:
            raise FontUnavailable(name, style, str(exc)) from exc
        families, face_styles, path = (output.split("\n", 2) + ["", ""])[:3]
        LOG.debug("fc-match %r -> %r (%s, %s)", pattern, path, families, face_styles)
        # fontconfig always answers with *something*
        if name.strip().lower() not in _split_names(families):
            raise FontUnavailable(name, style, "not installed")
        if not _face_matches(style.face, _split_names(face_styles)):
            raise FontUnavailable(name, style, "style not installed")
        if not path:
            raise FontUnavailable(name, style, "no font file")
        return path


def _split_names(value):
    return [name.strip().lower() for name in value.split(",")]


def _face_matches(face, face_styles):
    is_bold = any("bold" in s for s in face_styles)
    is_italic = any("italic" in s or "oblique" in s for s in face_styles)
    return is_bold == (face == "Bold") and is_italic == (face == "Italic")


@lru_cache(maxsize=None)
def _default_backend():
    if features.check("raqm"):
        layout_engine = ImageFont.Layout.RAQM
    else:
        layout_engine = ImageFont.Layout.BASIC
    backend = Backend(layout_engine, which("fc-match"))
    LOG.debug(
        "rendering backend: layout_engine=%s fc-match=%s",
        layout_engine,
        backend.fc_match,
    )
    return backend
