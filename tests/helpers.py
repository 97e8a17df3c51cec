# helpers.py

from themeline.metadata import build_metadata, FontStyle
from themeline.tokens import (ConditionalTheme, Line, RegisteredNodeData, ThemeCondition,
                              ThemeTokenization, Token)

LIGHT = ConditionalTheme('light', conditions=[ThemeCondition('default')])
DARK = ConditionalTheme('dark', conditions=[ThemeCondition('matchMedia', '(prefers-color-scheme: dark)')])

LIGHT_COLORS = ['', '#000000', '#0000ff', '#a31515']
DARK_COLORS = ['', '#d4d4d4', '#569cd6', '#ce9178']

def meta(foreground, font_style=FontStyle.NONE):
    return build_metadata(foreground=foreground, font_style=font_style)

def tokenization(theme, color_map, lines, settings=None):
    return ThemeTokenization(
        theme=theme,
        color_map=color_map,
        settings=settings if settings is not None else {'foreground': color_map[1]},
        lines=[[Token(*t) for t in line] for line in lines],
    )

def node_data(texts, *tokenizations, possible_themes=None):
    return RegisteredNodeData(
        lines=[Line(t) for t in texts],
        tokenization_results=list(tokenizations),
        is_tokenized=bool(tokenizations),
        possible_themes=possible_themes if possible_themes is not None
        else [t.theme for t in tokenizations],
    )
