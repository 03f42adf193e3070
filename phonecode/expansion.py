"""Expand a segmentation into every concrete output line."""

from typing import Iterator, Sequence

from .dictionary import DictionaryIndex, WordGroup
from .models import LiteralDigit, Parse

DEFAULT_SEPARATOR = ": "


def odometer(radices: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Count through every index combination of a mixed-radix number.

    Starts at all zeros and increments the rightmost position; a position
    that reaches its radix resets to zero and carries into its left
    neighbour. Stops once the carry leaves the leftmost position.

    Args:
        radices: Size of each choice group, all positive

    Yields:
        One index tuple per combination, rightmost position varying fastest
    """
    if any(radix < 1 for radix in radices):
        raise ValueError(f"Radices must be positive: {list(radices)}")
    if not radices:
        return

    counter = [0] * len(radices)
    while True:
        yield tuple(counter)

        position = len(counter) - 1
        while position >= 0:
            counter[position] += 1
            if counter[position] < radices[position]:
                break
            counter[position] = 0
            position -= 1

        if position < 0:
            return


def resolve_groups(parse: Parse, digits: str, index: DictionaryIndex) -> list[WordGroup]:
    """Map each segment of a parse to the words it can be rendered as."""
    groups = []
    for seg in parse:
        if isinstance(seg, LiteralDigit):
            groups.append((str(seg.value),))
        else:
            group = index.lookup(digits[seg.start:seg.end])
            if group is None:
                raise KeyError(f"No words for span {seg.start}:{seg.end} of {digits!r}")
            groups.append(group)
    return groups


def expand(
    number: str,
    parse: Parse,
    digits: str,
    index: DictionaryIndex,
    separator: str = DEFAULT_SEPARATOR,
) -> Iterator[str]:
    """Render every word combination of a parse as an output line.

    Args:
        number: Original input line, echoed as the line prefix
        parse: Segmentation of ``digits``
        digits: Digit characters extracted from ``number``
        index: Dictionary index the parse was built against
        separator: Text between the prefix and the words

    Yields:
        Lines of the form ``"<number>: word word ..."`` without newline
    """
    groups = resolve_groups(parse, digits, index)
    for choice in odometer([len(group) for group in groups]):
        words = " ".join(group[i] for group, i in zip(groups, choice))
        yield f"{number}{separator}{words}"
