# test_html.py

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from themeline import create_node_registry
from themeline.html import render_line_html, render_node_html, token_span
from themeline.metadata import FontStyle
from themeline.themes import get_theme_prefixed_token_class_name as qualified
from themeline.tokens import ThemedClassNames
from tests.helpers import DARK, DARK_COLORS, LIGHT, LIGHT_COLORS, meta, node_data, tokenization


class TestHtml:
    """HTML rendering on top of map_tokens."""

    def test_token_span_unions_class_names(self):
        themed = [ThemedClassNames(['a', 'b'], LIGHT), ThemedClassNames(['b', 'c'], DARK)]
        assert token_span('<x>', themed) == '<span class="a b c">&lt;x&gt;</span>'

    def test_single_theme_line(self):
        registry = create_node_registry()
        node = object()
        registry.register(node, node_data(
            ['a<b'], tokenization(LIGHT, LIGHT_COLORS, [[(0, 1, meta(1)), (1, 3, meta(2, FontStyle.BOLD))]])))
        assert render_line_html(registry, node, 0) == (
            '<span class="mtk1">a</span><span class="mtk2 mtkb">&lt;b</span>'
        )

    def test_multi_theme_node(self):
        registry = create_node_registry()
        node = object()
        registry.register(node, node_data(
            ['ab', ''],
            tokenization(LIGHT, LIGHT_COLORS, [[(0, 2, meta(1))], [(0, 0, meta(1))]]),
            tokenization(DARK, DARK_COLORS, [[(0, 1, meta(1)), (1, 2, meta(3))], [(0, 0, meta(1))]]),
        ))
        l1, d1, d3 = qualified('mtk1', 'light'), qualified('mtk1', 'dark'), qualified('mtk3', 'dark')
        assert render_node_html(registry, node) == (
            f'<span class="tl-line"><span class="{l1} {d1}">a</span>'
            f'<span class="{l1} {d3}">b</span></span>\n'
            '<span class="tl-line"></span>'
        )

    def test_plain_node_is_escaped(self):
        registry = create_node_registry()
        node = object()
        registry.register(node, node_data(['x & y']))
        assert render_node_html(registry, node) == '<span class="tl-line">x &amp; y</span>'
