# metadata.py
"""
Default decoder for binary token metadata as produced by TextMate tokenizers.

Layout of the 32-bit value (least significant bit first):

    bits  0-7   language id
    bits  8-10  token type
    bits 11-13  font style (italic=1, bold=2, underline=4)
    bits 14-22  foreground color index
    bits 23-31  background color index
"""

from enum import IntFlag
from typing import List

LANGUAGEID_MASK = 0b00000000000000000000000011111111
TOKEN_TYPE_MASK = 0b00000000000000000000011100000000
FONT_STYLE_MASK = 0b00000000000000000011100000000000
FOREGROUND_MASK = 0b00000000011111111100000000000000
BACKGROUND_MASK = 0b11111111100000000000000000000000

LANGUAGEID_OFFSET = 0
TOKEN_TYPE_OFFSET = 8
FONT_STYLE_OFFSET = 11
FOREGROUND_OFFSET = 14
BACKGROUND_OFFSET = 23

class FontStyle(IntFlag):
    NONE = 0
    ITALIC = 1
    BOLD = 2
    UNDERLINE = 4

# Flag order matches the class name order emitted by the decoder
FONT_STYLE_CLASS_NAMES = (
    (FontStyle.ITALIC, 'mtki'),
    (FontStyle.BOLD, 'mtkb'),
    (FontStyle.UNDERLINE, 'mtku'),
)

def get_language_id(metadata: int) -> int:
    return (metadata & LANGUAGEID_MASK) >> LANGUAGEID_OFFSET

def get_token_type(metadata: int) -> int:
    return (metadata & TOKEN_TYPE_MASK) >> TOKEN_TYPE_OFFSET

def get_font_style(metadata: int) -> FontStyle:
    return FontStyle((metadata & FONT_STYLE_MASK) >> FONT_STYLE_OFFSET)

def get_foreground(metadata: int) -> int:
    return (metadata & FOREGROUND_MASK) >> FOREGROUND_OFFSET

def get_background(metadata: int) -> int:
    return (metadata & BACKGROUND_MASK) >> BACKGROUND_OFFSET

def build_metadata(foreground: int = 0, font_style: int = FontStyle.NONE, background: int = 0,
                   language_id: int = 0, token_type: int = 0) -> int:
    """Pack token attributes into a metadata value."""
    return (
        ((language_id << LANGUAGEID_OFFSET) & LANGUAGEID_MASK)
        | ((token_type << TOKEN_TYPE_OFFSET) & TOKEN_TYPE_MASK)
        | ((int(font_style) << FONT_STYLE_OFFSET) & FONT_STYLE_MASK)
        | ((foreground << FOREGROUND_OFFSET) & FOREGROUND_MASK)
        | ((background << BACKGROUND_OFFSET) & BACKGROUND_MASK)
    )

def get_class_names_from_metadata(metadata: int) -> List[str]:
    """Return the canonical class names of a token: its color, then style flags."""
    font_style = get_font_style(metadata)
    class_names = [f'mtk{get_foreground(metadata)}']
    class_names.extend(name for flag, name in FONT_STYLE_CLASS_NAMES if font_style & flag)
    return class_names
