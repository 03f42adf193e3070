"""Dictionary index: digit key -> words sharing that key."""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .encoding import encode
from .exceptions import InputUnavailableError

logger = logging.getLogger(__name__)

WordGroup = tuple[str, ...]


def read_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a text file into a list of lines without line terminators.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        Lines of the file, in order

    Raises:
        InputUnavailableError: If the file cannot be opened or decoded
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding) as f:
            return [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailableError(path, str(e)) from e


class DictionaryIndex:
    """Read-only lookup from digit keys to ordered word groups.

    Words are grouped by their encoded key. Within a group the words keep
    the order in which they appeared in the source list, which fixes the
    order of the generated output lines.
    """

    def __init__(self, groups: Mapping[str, WordGroup]):
        """Wrap an already grouped mapping.

        Args:
            groups: Mapping of digit key to non-empty word tuple
        """
        self._groups = MappingProxyType(dict(groups))
        self._word_count = sum(len(words) for words in self._groups.values())

    @classmethod
    def build(cls, words: Iterable[str]) -> "DictionaryIndex":
        """Build an index from words in source order.

        Words without any mapped letter are skipped.
        """
        grouped: dict[str, list[str]] = {}
        skipped = 0
        for word in words:
            key = encode(word)
            if not key:
                skipped += 1
                logger.debug(f"Skipping word without letters: {word!r}")
                continue
            grouped.setdefault(key, []).append(word)

        index = cls({key: tuple(group) for key, group in grouped.items()})
        logger.debug(
            f"Indexed {index.word_count} words into {len(index)} keys "
            f"({skipped} skipped)"
        )
        return index

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> "DictionaryIndex":
        """Build an index from a word list file, one word per line.

        Lines are kept verbatim for output, including surrounding
        whitespace; blank lines have no letters and are skipped by ``build``.
        """
        index = cls.build(read_lines(path, encoding=encoding))
        logger.info(f"Loaded {index.word_count} words ({len(index)} keys) from {path}")
        return index

    def lookup(self, key: str) -> Optional[WordGroup]:
        """Return the word group for a digit key, or None."""
        return self._groups.get(key)

    @property
    def word_count(self) -> int:
        """Total number of indexed words."""
        return self._word_count

    def __reduce__(self):
        # mappingproxy cannot be pickled; rebuild from a plain dict in workers
        return (self.__class__, (dict(self._groups),))

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(keys={len(self)}, words={self.word_count})"
