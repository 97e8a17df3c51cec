# html.py

from html import escape
from typing import List, Optional

from .definitions import RegistryDefinitions
from .tokens import ThemedClassNames

def span(class_names: List[str], content: str) -> str:
    if not class_names:
        return content
    return f'<span class="{escape(" ".join(class_names))}">{content}</span>'

def token_span(text: str, themed: List[ThemedClassNames]) -> str:
    """Render one aligned group with the class names of every theme."""
    class_names = []
    for entry in themed:
        for name in entry.class_names:
            if name not in class_names:
                class_names.append(name)
    return span(class_names, escape(text))

def render_line_html(registry, node, line_index: int) -> str:
    return ''.join(registry.map_tokens(node, line_index, token_span, escape))

def render_node_html(registry, node, definitions: Optional[RegistryDefinitions] = None) -> str:
    """Render every line of a registered node, one wrapper span per line."""
    definitions = definitions or registry.definitions
    line_count = len(registry.map_lines(node, lambda line: line))
    return '\n'.join(
        span([definitions.line_class_name()], render_line_html(registry, node, i))
        for i in range(line_count)
    )
