# registry/allocator.py

from typing import Callable, Dict, Iterable, List, Tuple

from ..definitions import RegistryDefinitions
from ..errors import ThemelineError, TokenizationMismatch
from ..themes import get_theme_prefixed_token_class_name
from ..tokens import RegisteredNodeData, Token
from ..zipper import zip_line_tokens

AlignedLine = List[List[Token]]

class ClassNameAllocator:
    """
    Assigns export class names to every (theme, canonical class name) pair.

    A class name stays canonical where its token is the only one rendered at
    that position; where several themes are rendered together, each theme
    gets its own qualified name so selectors can address it alone. The
    computation runs once; later calls are no-ops.
    """
    def __init__(self, decoder: Callable[[object], List[str]],
                 definitions: RegistryDefinitions, logger=None):
        self.decoder = decoder
        self.definitions = definitions
        self.logger = logger
        self.computed = False
        self.theme_class_names: Dict[str, Dict[str, str]] = {}
        self.zipped_lines: Dict[int, List[AlignedLine]] = {}

    def compute(self, nodes: Iterable[Tuple[int, RegisteredNodeData]]) -> None:
        """Zip and allocate class names for every tokenized node."""
        if self.computed:
            return

        theme_class_names: Dict[str, Dict[str, str]] = {}
        zipped_lines: Dict[int, List[AlignedLine]] = {}
        try:
            for handle, data in nodes:
                if not data.is_tokenized:
                    continue
                zipped_lines[handle] = self._zip_node(handle, data)
                for aligned in zipped_lines[handle]:
                    for tokens_at_position in aligned:
                        self._allocate(data, tokens_at_position, theme_class_names)
        except ThemelineError as e:
            if self.logger:
                self.logger.error(f"Class name computation failed: {e}")
            raise

        # Committed only after a complete pass
        self.theme_class_names = theme_class_names
        self.zipped_lines = zipped_lines
        self.computed = True
        if self.logger:
            counts = {k: len(v) for k, v in theme_class_names.items()}
            self.logger.debug(f"Zipped {len(zipped_lines)} nodes, class names per theme: {counts}")

    def _zip_node(self, handle: int, data: RegisteredNodeData) -> List[AlignedLine]:
        zipped = []
        for line_index in range(len(data.lines)):
            line_token_sets = []
            for result in data.tokenization_results:
                if line_index >= len(result.lines):
                    raise TokenizationMismatch(
                        f"Theme '{result.theme_identifier}' has no tokens for line {line_index} of node {handle}"
                    )
                line_token_sets.append(result.lines[line_index])
            zipped.append(zip_line_tokens(line_token_sets, len(data.lines[line_index].text)))
        return zipped

    def _allocate(self, data: RegisteredNodeData, tokens_at_position: List[Token],
                  theme_class_names: Dict[str, Dict[str, str]]) -> None:
        shared = len(tokens_at_position) > 1
        for theme_index, token in enumerate(tokens_at_position):
            theme_identifier = data.tokenization_results[theme_index].theme_identifier
            class_names = theme_class_names.setdefault(theme_identifier, {})
            for canonical in self.decoder(token.metadata):
                if shared:
                    class_names[canonical] = get_theme_prefixed_token_class_name(
                        canonical, theme_identifier, self.definitions.class_prefix)
                else:
                    # A qualified name is never downgraded by a later single-theme group
                    class_names.setdefault(canonical, canonical)
