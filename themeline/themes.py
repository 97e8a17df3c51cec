# themes.py

import hashlib
from dataclasses import replace
from typing import Iterable, List, Optional

from .tokens import ConditionalTheme

CANONICAL_PREFIX = 'mtk'

def concat_conditional_themes(existing: Optional[List[ConditionalTheme]],
                              new_themes: Iterable[ConditionalTheme]) -> List[ConditionalTheme]:
    """
    Merge candidate themes into a theme set.

    Themes are matched by identifier. A theme already in the set gains the
    new theme's conditions it did not have; unknown themes are appended.
    Neither input is mutated.
    """
    merged = [replace(theme, conditions=list(theme.conditions)) for theme in existing or []]
    by_identifier = {theme.identifier: theme for theme in merged}
    for theme in new_themes:
        current = by_identifier.get(theme.identifier)
        if current is None:
            current = replace(theme, conditions=[])
            merged.append(current)
            by_identifier[theme.identifier] = current
        for condition in theme.conditions:
            if condition not in current.conditions:
                current.conditions.append(condition)
    return merged

def get_theme_prefixed_token_class_name(canonical_class_name: str, theme_identifier: str,
                                        prefix: str = 'tl-') -> str:
    """Qualify a canonical class name so it only addresses one theme."""
    digest = hashlib.md5(theme_identifier.encode('utf-8')).hexdigest()[:7]
    suffix = canonical_class_name
    if suffix.startswith(CANONICAL_PREFIX):
        suffix = suffix[len(CANONICAL_PREFIX):]
    return f"{prefix}t{digest}-{suffix}"
