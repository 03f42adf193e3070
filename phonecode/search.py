"""Depth-first search for every word/digit segmentation of a number."""

from typing import Iterator

from .dictionary import DictionaryIndex
from .models import Candidate, LiteralDigit, Parse, WordSpan


def segment(digits: str, index: DictionaryIndex) -> Iterator[Parse]:
    """Yield every complete segmentation of a digit sequence.

    Candidates are kept on an explicit stack and explored last-in first-out;
    the yield order is this traversal order. From each position every
    dictionary key starting there is tried, not only the longest one. A
    literal digit is allowed only where no word starts and the previous
    segment is not itself a literal digit.

    Args:
        digits: Digit characters of the number (already filtered)
        index: Dictionary index to match spans against

    Yields:
        Parse objects whose segments cover ``digits`` exactly once
    """
    length = len(digits)
    if length == 0:
        return

    stack = [Candidate()]
    while stack:
        candidate = stack.pop()
        start = candidate.position
        found_word = False

        for end in range(start + 1, length + 1):
            if index.lookup(digits[start:end]) is None:
                continue
            found_word = True
            extended = candidate.extend(WordSpan(start, end), end)
            if end == length:
                yield Parse(extended.segments)
            else:
                stack.append(extended)

        if not found_word and not candidate.last_was_literal:
            extended = candidate.extend(LiteralDigit(start, int(digits[start])), start + 1)
            if start + 1 == length:
                yield Parse(extended.segments)
            else:
                stack.append(extended)

