# preview.py

from io import StringIO
from typing import Dict, List

from rich.color import Color, ColorParseError
from rich.console import Console
from rich.style import Style
from rich.text import Text

from .tokens import ThemedClassNames

class ThemePreview:
    """
    Renders registered nodes in a terminal using one theme's token styles.
    """
    def __init__(self, registry, theme_identifier: str, logger=None):
        self.registry = registry
        self.theme_identifier = theme_identifier
        self.logger = logger
        self.styles: Dict[str, Style] = {
            rule.class_name: self._to_style(rule.css)
            for rule in registry.get_token_styles_for_theme(theme_identifier)
        }

    def _to_style(self, css) -> Style:
        attrs = {}
        for d in css:
            if d.property == 'color':
                color = self._parse_color(d.value)
                if color is not None:
                    attrs['color'] = color
            elif d.property == 'font-weight' and d.value == 'bold':
                attrs['bold'] = True
            elif d.property == 'font-style' and d.value == 'italic':
                attrs['italic'] = True
            elif d.property == 'text-decoration' and d.value == 'underline':
                attrs['underline'] = True
        return Style(**attrs)

    def _parse_color(self, value: str):
        # Alpha channel is not representable in a terminal
        if value and value.startswith('#') and len(value) == 9:
            value = value[:7]
        try:
            return Color.parse(value)
        except ColorParseError:
            if self.logger:
                self.logger.warning(f"Skipping unparsable color '{value}' in theme '{self.theme_identifier}'")
            return None

    def style_for(self, themed: List[ThemedClassNames]) -> Style:
        """Combine the styles of this theme's class names within one group."""
        style = Style()
        for entry in themed:
            if entry.theme.identifier != self.theme_identifier:
                continue
            for class_name in entry.class_names:
                style += self.styles.get(class_name, Style())
        return style

    def render_line(self, node, line_index: int) -> Text:
        text = Text()
        parts = self.registry.map_tokens(
            node, line_index,
            lambda content, themed: (content, self.style_for(themed)),
            lambda content: (content, Style()),
        )
        for content, style in parts:
            text.append(content, style=style)
        return text

    def render_node(self, node) -> Text:
        lines = self.registry.map_lines(node, lambda line: line)
        return Text("\n").join(self.render_line(node, i) for i in range(len(lines)))

    def render_ansi(self, node, color_system: str = "truecolor") -> str:
        """Render a node to a string of ANSI escape sequences."""
        console = Console(
            force_terminal=True,
            color_system=color_system,
            file=StringIO(),
            highlight=False,
            width=10_000
        )
        console.print(self.render_node(node), end="", soft_wrap=True)
        return console.file.getvalue()
