# registry/projector.py

from typing import Dict, List, Optional

from ..css import CssRule, declaration
from ..definitions import RegistryDefinitions
from ..errors import InvalidClassName
from ..themes import CANONICAL_PREFIX

def get_color_from_color_map(color_map: List[str], canonical_class_name: str) -> str:
    """Resolve ``mtk{n}`` to ``color_map[n]``."""
    if not canonical_class_name.startswith(CANONICAL_PREFIX):
        raise InvalidClassName(canonical_class_name)
    suffix = canonical_class_name[len(CANONICAL_PREFIX):]
    if not (suffix.isascii() and suffix.isdigit()):
        raise InvalidClassName(canonical_class_name)
    index = int(suffix)
    if index >= len(color_map):
        raise InvalidClassName(
            canonical_class_name,
            f"Color table has only {len(color_map)} entries."
        )
    return color_map[index]


class ThemeStyleProjector:
    """Turns one theme's class name map into ordered CSS rules."""
    def __init__(self, definitions: RegistryDefinitions):
        self.definitions = definitions

    def project(self, class_name_map: Optional[Dict[str, str]], color_map: List[str]) -> List[CssRule]:
        """
        Style flag rules come first, in discovery order, so that they are
        never outranked by a color rule; color rules follow in discovery
        order.
        """
        if not class_name_map:
            return []

        flags: List[CssRule] = []
        colors: List[CssRule] = []
        for canonical, class_name in class_name_map.items():
            if self.definitions.is_style_flag(canonical):
                css = [declaration(p, v) for p, v in self.definitions.style_flags[canonical]]
                flags.append(CssRule(class_name, css))
            else:
                color = get_color_from_color_map(color_map, canonical)
                colors.append(CssRule(class_name, [declaration('color', color)]))
        return flags + colors
