# zipper.py

from collections import deque
from typing import List, Optional, Sequence

from .errors import TokenizationMismatch
from .tokens import Token

def zip_line_tokens(line_token_sets: Sequence[Sequence[Token]],
                    line_length: Optional[int] = None) -> List[List[Token]]:
    """
    Align several tokenizations of the same line on their common boundaries.

    Every returned group holds one token per input list, all sharing the same
    ``[start, end)``. Tokens that span a boundary of another list are split,
    keeping their metadata in every fragment.

    Example:
        zip_line_tokens([
            [Token(0, 10, X)],
            [Token(0, 5, Y), Token(5, 10, Z)],
        ])
        # [[Token(0, 5, X), Token(0, 5, Y)],
        #  [Token(5, 10, X), Token(5, 10, Z)]]

    Raises:
        TokenizationMismatch: the lists cover different lengths, stop short
            of ``line_length``, or a list leaves a gap or overlap between two
            tokens.
    """
    if not line_token_sets:
        return []

    # Zero-width tokens (empty lines) never bound a group
    queues = [deque(t for t in tokens if t.end > t.start) for tokens in line_token_sets]
    _check_coverage(queues, line_length)

    result: List[List[Token]] = []
    start = 0
    while True:
        end = min(queue[0].end if queue else 0 for queue in queues)
        if start >= end:
            break

        tokens_at_position = []
        for queue in queues:
            token = queue.popleft()
            if token.start == start and token.end == end:
                tokens_at_position.append(token)
            else:
                tokens_at_position.append(token.clip(start, end))
                # Only the consumed prefix was emitted
                queue.appendleft(token)
        result.append(tokens_at_position)
        start = end

    return result


def _check_coverage(token_sets: Sequence[Sequence[Token]], line_length: Optional[int]) -> None:
    for index, tokens in enumerate(token_sets):
        position = 0
        for token in tokens:
            if token.start != position:
                kind = 'gap' if token.start > position else 'overlap'
                raise TokenizationMismatch(
                    f"Tokenization {index} has a {kind} at {min(position, token.start)}"
                )
            position = token.end

    ends = [tokens[-1].end if tokens else 0 for tokens in token_sets]
    if len(set(ends)) > 1:
        raise TokenizationMismatch(
            f"Tokenizations of one line cover different lengths: {ends}"
        )
    if line_length is not None and ends[0] != line_length:
        raise TokenizationMismatch(
            f"Tokens cover {ends[0]} characters of a {line_length} character line"
        )
