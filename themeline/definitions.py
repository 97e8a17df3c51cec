# definitions.py

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

CLASS_PREFIX = 'tl-'

# Reserved canonical class names and the declarations they project to
STYLE_FLAGS = {
    'mtkb': [('font-weight', 'bold')],
    'mtki': [('font-style', 'italic')],
    'mtku': [('text-decoration', 'underline'), ('text-underline-position', 'under')],
}

@dataclass
class RegistryDefinitions:
    """Configuration shared by the registry and its renderers."""
    class_prefix: str = CLASS_PREFIX
    style_flags: Dict[str, List[Tuple[str, str]]] = field(
        default_factory=lambda: {k: list(v) for k, v in STYLE_FLAGS.items()}
    )

    def __post_init__(self):
        if not self.class_prefix:
            raise ValueError("class_prefix must be a non-empty string")

    def is_style_flag(self, canonical_class_name: str) -> bool:
        return canonical_class_name in self.style_flags

    def line_class_name(self) -> str:
        return f"{self.class_prefix}line"

DEFAULT_DEFINITIONS = RegistryDefinitions()
