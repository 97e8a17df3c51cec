# tokens.py

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

@dataclass(frozen=True)
class Token:
    """
    A contiguous character range of one line, tagged with opaque style metadata.

    Tokens of one (theme, line) pair are sorted by ``start``, contiguous and
    together cover ``[0, len(line))``.
    """
    start: int
    end: int
    metadata: Any

    def clip(self, start: int, end: int) -> 'Token':
        """Return a token over ``[start, end)`` carrying this token's metadata."""
        return Token(start, end, self.metadata)


@dataclass(frozen=True)
class ThemeCondition:
    """When a theme applies: 'default', 'matchMedia' or 'parentSelector'."""
    condition: str
    value: Optional[str] = None


@dataclass
class ConditionalTheme:
    """A theme together with the conditions under which it is active."""
    identifier: str
    path: Optional[str] = None
    conditions: List[ThemeCondition] = field(default_factory=list)


@dataclass
class ThemeTokenization:
    """One theme's tokenization of a node: one token list per line."""
    theme: ConditionalTheme
    color_map: List[str]
    settings: Dict[str, Any] = field(default_factory=dict)
    lines: List[List[Token]] = field(default_factory=list)

    @property
    def theme_identifier(self) -> str:
        return self.theme.identifier


@dataclass
class Line:
    text: str


@dataclass
class RegisteredNodeData:
    """Everything a node contributes to the registry."""
    lines: List[Line]
    tokenization_results: List[ThemeTokenization] = field(default_factory=list)
    is_tokenized: bool = False
    possible_themes: List[ConditionalTheme] = field(default_factory=list)


@dataclass
class ThemedClassNames:
    """Export class names of one token under one theme."""
    class_names: List[str]
    theme: ConditionalTheme


@dataclass
class PossibleTheme:
    theme: ConditionalTheme
    settings: Dict[str, Any]
