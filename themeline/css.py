# css.py

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

@dataclass(frozen=True)
class Declaration:
    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value};"


@dataclass
class CssRule:
    """CSS declarations attached to one class name."""
    class_name: str
    css: List[Declaration]


def declaration(property: str, value: str) -> Declaration:
    return Declaration(property, value)

def rule(selectors: Union[str, Sequence[str]], declarations: Iterable[Declaration], indent: str = '') -> str:
    """Render a rule block; empty declaration lists render nothing."""
    declarations = list(declarations)
    if not declarations:
        return ''
    if isinstance(selectors, str):
        selectors = [selectors]
    body = '\n'.join(f"{indent}  {d}" for d in declarations)
    return f"{indent}{', '.join(selectors)} {{\n{body}\n{indent}}}"

def media(query: str, rules: Iterable[str]) -> str:
    rules = [r for r in rules if r]
    if not rules:
        return ''
    return f"@media {query} {{\n" + '\n'.join(rules) + "\n}"

def render_theme_styles(registry, theme) -> str:
    """
    Render one theme's token rules, scoped by each of its conditions.

    'default' rules use the bare class selector, 'parentSelector' rules are
    nested under the condition value and 'matchMedia' rules are wrapped in an
    @media block.
    """
    token_rules = registry.get_token_styles_for_theme(theme.identifier)
    blocks = []
    for condition in theme.conditions:
        if condition.condition == 'default':
            blocks.extend(rule(f".{r.class_name}", r.css) for r in token_rules)
        elif condition.condition == 'parentSelector':
            blocks.extend(rule(f"{condition.value} .{r.class_name}", r.css) for r in token_rules)
        elif condition.condition == 'matchMedia':
            blocks.append(media(condition.value, (rule(f".{r.class_name}", r.css, indent='  ')
                                                  for r in token_rules)))
        else:
            raise ValueError(f"Unknown theme condition: {condition.condition}")
    return '\n'.join(b for b in blocks if b)

def render_stylesheet(registry) -> str:
    """Render token rules for every active theme."""
    sheets = [render_theme_styles(registry, p.theme) for p in registry.get_all_possible_themes()]
    return '\n'.join(s for s in sheets if s)
