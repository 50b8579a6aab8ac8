from collections import namedtuple
from enum import Enum

DEFAULT_FONT = "Lucida Sans Typewriter"
DEFAULT_FONT_SIZE = 16
DEFAULT_FILL = "@"
DEFAULT_REFERENCE_CHAR = "W"


class FontStyle(Enum):
    Bold = "bold"
    Regular = "regular"
    Italic = "italic"
    Strikeout = "strikeout"
    Underline = "underline"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        for style in cls:
            if style.value == value.strip().lower():
                return style
        raise ValueError("Unknown font style '{}'".format(value))

    @property
    def face(self):
        """
        Returns the fontconfig style name of the face to load. Decorations
        are drawn on top of the regular face.
        """
        if self in (FontStyle.Bold, FontStyle.Italic):
            return self.name
        return FontStyle.Regular.name

    @property
    def is_decoration(self):
        return self in (FontStyle.Strikeout, FontStyle.Underline)


class FontUnavailable(RuntimeError):
    def __init__(self, font_name, font_style, reason=None):
        self.font_name = font_name
        self.font_style = font_style
        message = "Could not load font '{}' ({})".format(font_name, font_style.name)
        if reason:
            message += ": {}".format(reason)
        super().__init__(message)


_RenderRequest = namedtuple(
    "_RenderRequest",
    (
        "text",
        "font_name",
        "font_size",
        "font_style",
        "fill",
        "margin_left",
        "margin_right",
        "margin_top",
        "margin_bottom",
        "kerning",
        "reference_char",
    ),
)


class RenderRequest(_RenderRequest):
    """
    Everything needed to turn one piece of text into ASCII art. Values are
    expected to be validated by the caller already.
    """

    __slots__ = ()

    def __new__(
        cls,
        text,
        font_name=DEFAULT_FONT,
        font_size=DEFAULT_FONT_SIZE,
        font_style=FontStyle.Regular,
        fill=DEFAULT_FILL,
        margin_left=0,
        margin_right=0,
        margin_top=0,
        margin_bottom=0,
        kerning=True,
        reference_char=DEFAULT_REFERENCE_CHAR,
    ):
        return super().__new__(
            cls,
            text,
            font_name,
            font_size,
            FontStyle.parse(font_style),
            fill,
            margin_left,
            margin_right,
            margin_top,
            margin_bottom,
            kerning,
            reference_char,
        )

    @property
    def margins(self):
        return (self.margin_left, self.margin_right, self.margin_top, self.margin_bottom)
