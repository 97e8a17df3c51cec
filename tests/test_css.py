# test_css.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from themeline import create_node_registry
from themeline.css import declaration, media, render_stylesheet, render_theme_styles, rule
from themeline.themes import get_theme_prefixed_token_class_name
from themeline.tokens import ConditionalTheme, ThemeCondition
from tests.helpers import DARK, DARK_COLORS, LIGHT, LIGHT_COLORS, meta, node_data, tokenization


class TestCssText:

    def test_declaration_text(self):
        assert str(declaration('color', '#fff')) == 'color: #fff;'

    def test_rule_block(self):
        text = rule(['.a', '.b'], [declaration('color', 'red'), declaration('font-weight', 'bold')])
        assert text == '.a, .b {\n  color: red;\n  font-weight: bold;\n}'

    def test_empty_rule(self):
        assert rule('.a', []) == ''
        assert media('(min-width: 1px)', ['']) == ''

    def test_media_wraps_rules(self):
        assert media('print', ['.a {\n}']) == '@media print {\n.a {\n}\n}'


class TestStylesheet:
    """Condition scoping of per-theme rules."""

    def setup_method(self):
        self.registry = create_node_registry()
        self.registry.register(object(), node_data(
            ['ab'],
            tokenization(LIGHT, LIGHT_COLORS, [[(0, 2, meta(1))]]),
            tokenization(DARK, DARK_COLORS, [[(0, 2, meta(2))]]),
        ))

    def test_default_condition_uses_bare_selector(self):
        name = get_theme_prefixed_token_class_name('mtk1', 'light')
        assert render_theme_styles(self.registry, LIGHT) == f'.{name} {{\n  color: #000000;\n}}'

    def test_media_condition(self):
        name = get_theme_prefixed_token_class_name('mtk2', 'dark')
        assert render_theme_styles(self.registry, DARK) == (
            '@media (prefers-color-scheme: dark) {\n'
            f'  .{name} {{\n    color: #569cd6;\n  }}\n'
            '}'
        )

    def test_parent_selector_condition(self):
        theme = ConditionalTheme('light', conditions=[ThemeCondition('parentSelector', 'body.light')])
        name = get_theme_prefixed_token_class_name('mtk1', 'light')
        assert render_theme_styles(self.registry, theme).startswith(f'body.light .{name} {{')

    def test_unknown_condition(self):
        theme = ConditionalTheme('light', conditions=[ThemeCondition('sometimes')])
        with pytest.raises(ValueError):
            render_theme_styles(self.registry, theme)

    def test_whole_stylesheet(self):
        sheet = render_stylesheet(self.registry)
        assert sheet.index('#000000') < sheet.index('@media')
        assert '#569cd6' in sheet
