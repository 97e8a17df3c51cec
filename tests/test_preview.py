# test_preview.py

from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rich.color import Color

from themeline import create_node_registry
from themeline.metadata import FontStyle
from themeline.preview import ThemePreview
from tests.helpers import DARK, DARK_COLORS, LIGHT, LIGHT_COLORS, meta, node_data, tokenization


class TestThemePreview:
    """Terminal rendering of one theme."""

    def setup_method(self):
        self.registry = create_node_registry()
        self.node = object()
        self.registry.register(self.node, node_data(
            ['if x', 'y'],
            tokenization(LIGHT, LIGHT_COLORS, [[(0, 2, meta(2, FontStyle.BOLD)), (2, 4, meta(1))],
                                               [(0, 1, meta(1))]]),
            tokenization(DARK, DARK_COLORS, [[(0, 4, meta(1))], [(0, 1, meta(3))]]),
        ))

    def test_render_line_styles_by_theme(self):
        text = ThemePreview(self.registry, 'light').render_line(self.node, 0)
        assert text.plain == 'if x'
        first = text.spans[0]
        assert (first.start, first.end) == (0, 2)
        assert first.style.bold
        assert first.style.color == Color.parse('#0000ff')

    def test_other_theme_colors(self):
        text = ThemePreview(self.registry, 'dark').render_line(self.node, 1)
        assert text.spans[0].style.color == Color.parse('#ce9178')

    def test_render_node_joins_lines(self):
        assert ThemePreview(self.registry, 'dark').render_node(self.node).plain == 'if x\ny'

    def test_render_ansi(self):
        output = ThemePreview(self.registry, 'light').render_ansi(self.node)
        assert '\x1b[' in output
        assert 'if' in output and 'y' in output

    def test_alpha_colors_are_truncated(self):
        registry = create_node_registry()
        node = object()
        registry.register(node, node_data(['a'], tokenization(LIGHT, ['', '#11223344'], [[(0, 1, meta(1))]])))
        text = ThemePreview(registry, 'light').render_line(node, 0)
        assert text.spans[0].style.color == Color.parse('#112233')

    def test_unparsable_color_is_skipped(self):
        registry = create_node_registry()
        node = object()
        registry.register(node, node_data(['a'], tokenization(LIGHT, ['', 'not-a-color'], [[(0, 1, meta(1))]])))
        logger = Mock()
        preview = ThemePreview(registry, 'light', logger=logger)
        assert preview.render_line(node, 0).plain == 'a'
        logger.warning.assert_called_once()

    def test_plain_node(self):
        node = object()
        self.registry.register(node, node_data(['plain']))
        assert ThemePreview(self.registry, 'light').render_line(node, 0).plain == 'plain'
