# __init__.py

from .logger import Logger
from .errors import (ThemelineError, InvalidClassName, NotRegistered,
                     TokenizationMismatch, UnknownTheme, RegistrationClosed)
from .tokens import (Token, ThemeCondition, ConditionalTheme, ThemeTokenization, Line,
                     RegisteredNodeData, ThemedClassNames, PossibleTheme)
from .definitions import RegistryDefinitions, DEFAULT_DEFINITIONS
from .zipper import zip_line_tokens
from .registry import NodeRegistry, create_node_registry, get_color_from_color_map

__all__ = [
    "create_node_registry", "NodeRegistry", "zip_line_tokens", "get_color_from_color_map",
    "Token", "ThemeCondition", "ConditionalTheme", "ThemeTokenization", "Line",
    "RegisteredNodeData", "ThemedClassNames", "PossibleTheme",
    "RegistryDefinitions", "DEFAULT_DEFINITIONS", "Logger",
    "ThemelineError", "InvalidClassName", "NotRegistered", "TokenizationMismatch", "UnknownTheme",
    "RegistrationClosed",
]
