"""Data models for the phonecode search."""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class WordSpan:
    """Digits ``[start, end)`` covered by one dictionary word group."""

    start: int
    end: int


@dataclass(frozen=True)
class LiteralDigit:
    """A single digit kept as-is because no word starts at its position."""

    position: int
    value: int


Segment = Union[WordSpan, LiteralDigit]


@dataclass(frozen=True)
class Candidate:
    """Partial segmentation: next unconsumed digit and the segments so far."""

    position: int = 0
    segments: tuple[Segment, ...] = ()

    @property
    def last_was_literal(self) -> bool:
        return bool(self.segments) and isinstance(self.segments[-1], LiteralDigit)

    def extend(self, segment: Segment, position: int) -> "Candidate":
        return Candidate(position=position, segments=self.segments + (segment,))


@dataclass(frozen=True)
class Parse:
    """Complete segmentation of one digit sequence."""

    segments: tuple[Segment, ...]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)


@dataclass
class PipelineStats:
    """Counters collected over one pipeline run."""

    numbers_read: int = 0
    numbers_skipped: int = 0  # no digit characters
    numbers_unmatched: int = 0  # digits but no decomposition
    parses: int = 0
    lines_written: int = 0
    elapsed_seconds: float = field(default=0.0, compare=False)

    def merge(self, other: "PipelineStats") -> None:
        """Add the counters of another run into this one."""
        self.numbers_read += other.numbers_read
        self.numbers_skipped += other.numbers_skipped
        self.numbers_unmatched += other.numbers_unmatched
        self.parses += other.parses
        self.lines_written += other.lines_written
