# registry/__init__.py

from typing import Any, Callable, Dict, List, Optional

from ..definitions import DEFAULT_DEFINITIONS, RegistryDefinitions
from ..errors import NotRegistered, RegistrationClosed, UnknownTheme
from ..logger import Logger
from ..metadata import get_class_names_from_metadata
from ..themes import concat_conditional_themes
from ..tokens import ConditionalTheme, Line, PossibleTheme, RegisteredNodeData, ThemedClassNames
from ..css import CssRule
from .allocator import ClassNameAllocator
from .projector import ThemeStyleProjector, get_color_from_color_map

class NodeRegistry:
    """
    Collects per-node tokenizations for one render pass and answers queries.

    Registration happens first; the first query then zips every tokenized
    node and allocates class names, after which results stay fixed for the
    registry's lifetime.

    Component Hierarchy:
    NodeRegistry → ClassNameAllocator → zip_line_tokens
                 → ThemeStyleProjector
    """
    def __init__(self, definitions: Optional[RegistryDefinitions] = None,
                 decoder: Optional[Callable[[Any], List[str]]] = None,
                 concat_themes: Optional[Callable] = None,
                 logger=None):
        self.definitions = definitions or DEFAULT_DEFINITIONS
        self.logger = logger
        self._decoder = decoder or get_class_names_from_metadata
        self._concat_themes = concat_themes or concat_conditional_themes

        # Nodes are referenced here so their ids stay unique while registered
        self._nodes: List[Any] = []
        self._data: List[RegisteredNodeData] = []
        self._handles: Dict[int, int] = {}
        self._themes: List[ConditionalTheme] = []
        self._theme_colors: Dict[str, Dict[str, Any]] = {}

        self._allocator = ClassNameAllocator(self._decoder, self.definitions, logger=logger)
        self._projector = ThemeStyleProjector(self.definitions)

    def register(self, node, data: RegisteredNodeData) -> int:
        """Store a node's data and return its handle."""
        if self._allocator.computed:
            raise RegistrationClosed(
                f"Cannot register {node!r}: class names were already computed for this registry"
            )
        handle = self._handles.get(id(node))
        if handle is None:
            handle = len(self._nodes)
            self._handles[id(node)] = handle
            self._nodes.append(node)
            self._data.append(data)
        else:
            self._data[handle] = data

        self._themes = self._concat_themes(self._themes, data.possible_themes)
        for result in data.tokenization_results:
            self._theme_colors[result.theme_identifier] = {
                'color_map': result.color_map,
                'settings': result.settings,
            }
        if self.logger:
            self.logger.debug(
                f"Registered node {handle}: {len(data.lines)} lines, "
                f"{len(data.tokenization_results)} themes, tokenized={data.is_tokenized}"
            )
        return handle

    def handle_for(self, node) -> int:
        handle = self._handles.get(id(node))
        if handle is None:
            raise NotRegistered(node)
        return handle

    def get_data(self, node) -> RegisteredNodeData:
        return self._data[self.handle_for(node)]

    def map_lines(self, node, mapper: Callable[[Line], Any]) -> List[Any]:
        return [mapper(line) for line in self.get_data(node).lines]

    def map_tokens(self, node, line_index: int,
                   token_mapper: Callable[[str, List[ThemedClassNames]], Any],
                   plain_line_mapper: Callable[[str], Any]) -> List[Any]:
        """
        Map each aligned group of a line through ``token_mapper``.

        ``token_mapper`` receives the group's text and, per theme, the export
        class names of the token. Untokenized nodes yield a single
        ``plain_line_mapper(line_text)`` result.
        """
        handle = self.handle_for(node)
        data = self._data[handle]
        line = data.lines[line_index]
        if not data.is_tokenized:
            return [plain_line_mapper(line.text)]

        self.generate_class_names()
        zipped = self._allocator.zipped_lines[handle][line_index]
        results = []
        for tokens in zipped:
            themed = []
            for theme_index, token in enumerate(tokens):
                theme = data.tokenization_results[theme_index].theme
                class_names = self._allocator.theme_class_names[theme.identifier]
                themed.append(ThemedClassNames(
                    [class_names[c] for c in self._decoder(token.metadata)],
                    theme
                ))
            results.append(token_mapper(line.text[tokens[0].start:tokens[0].end], themed))
        return results

    def for_each_node(self, visitor: Callable[[Any, RegisteredNodeData], None]) -> None:
        for node, data in zip(self._nodes, self._data):
            visitor(node, data)

    def get_all_possible_themes(self) -> List[PossibleTheme]:
        return [
            PossibleTheme(theme, self._theme_colors.get(theme.identifier, {}).get('settings', {}))
            for theme in self._themes
        ]

    def get_class_name_map(self, theme_identifier: str) -> Dict[str, str]:
        """Return a copy of a theme's canonical to export class name map."""
        self.generate_class_names()
        return dict(self._allocator.theme_class_names.get(theme_identifier, {}))

    def get_token_styles_for_theme(self, theme_identifier: str) -> List[CssRule]:
        self.generate_class_names()
        class_name_map = self._allocator.theme_class_names.get(theme_identifier)
        if not class_name_map:
            if self.logger:
                self.logger.debug(f"No class names allocated for theme '{theme_identifier}'")
            return []
        colors = self._theme_colors.get(theme_identifier)
        if colors is None:
            raise UnknownTheme(theme_identifier)
        return self._projector.project(class_name_map, colors['color_map'])

    def get_color(self, theme_identifier: str, canonical_class_name: str) -> str:
        colors = self._theme_colors.get(theme_identifier)
        if colors is None:
            raise UnknownTheme(theme_identifier)
        return get_color_from_color_map(colors['color_map'], canonical_class_name)

    def generate_class_names(self) -> None:
        """Zip every tokenized node and allocate class names, once."""
        if self._allocator.computed:
            return
        self._allocator.compute(zip(range(len(self._data)), self._data))

    @property
    def is_computed(self) -> bool:
        return self._allocator.computed


def create_node_registry(definitions: Optional[RegistryDefinitions] = None,
                         decoder: Optional[Callable[[Any], List[str]]] = None,
                         concat_themes: Optional[Callable] = None,
                         logger=None,
                         logging_enabled: bool = False,
                         log_file: Optional[str] = None) -> NodeRegistry:
    """
    Build a registry for one render pass.

    Args:
        logger: Logger-like object; when omitted a Logger is built from
            logging_enabled and log_file ("-" for stdout).
    """
    if logger is None:
        logger = Logger(__name__, logging_enabled, log_file)
    return NodeRegistry(definitions=definitions, decoder=decoder,
                        concat_themes=concat_themes, logger=logger)

__all__ = ['NodeRegistry', 'create_node_registry', 'ClassNameAllocator',
           'ThemeStyleProjector', 'get_color_from_color_map']
