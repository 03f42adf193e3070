"""Main phonecode pipeline."""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from typing import IO, Iterator, Optional

from tqdm import tqdm

from .config import Config
from .dictionary import DictionaryIndex, read_lines
from .encoding import extract_digits
from .expansion import DEFAULT_SEPARATOR, expand
from .models import PipelineStats
from .search import segment
from .writer import LineWriter

logger = logging.getLogger(__name__)

# Set once per worker process by _init_worker
_worker_index: Optional[DictionaryIndex] = None


def expand_number(
    number: str,
    index: DictionaryIndex,
    stats: PipelineStats,
    separator: str = DEFAULT_SEPARATOR,
) -> Iterator[str]:
    """Yield every output line for one input number.

    Lines come out in search order, then word-combination order. Numbers
    without digits, or without any decomposition, yield nothing.

    Args:
        number: Input line as read (without newline)
        index: Dictionary index
        stats: Counters updated while lines are produced
        separator: Text between the number and its words
    """
    stats.numbers_read += 1
    digits = extract_digits(number)
    if not digits:
        stats.numbers_skipped += 1
        return

    found = False
    for parse in segment(digits, index):
        found = True
        stats.parses += 1
        for line in expand(number, parse, digits, index, separator=separator):
            stats.lines_written += 1
            yield line

    if not found:
        stats.numbers_unmatched += 1
        logger.debug(f"No decomposition for {number!r}")


def _init_worker(index: DictionaryIndex) -> None:
    """Store the shared index in a worker process."""
    global _worker_index
    _worker_index = index


def _process_number_worker(args: tuple[str, str]) -> tuple[list[str], PipelineStats]:
    """Worker for parallel processing. Must be module-level for pickling.

    Args:
        args: (number, separator)

    Returns:
        (output lines, counters for this number)
    """
    number, separator = args
    stats = PipelineStats()
    lines = list(expand_number(number, _worker_index, stats, separator=separator))
    return lines, stats


class PhoneCodePipeline:
    """Pipeline that encodes every number of a list into dictionary words."""

    def __init__(self, config: Config, stream: Optional[IO[str]] = None):
        """Initialize the pipeline.

        Args:
            config: Pipeline configuration
            stream: Output stream used when no output file is configured
                (default: stdout)
        """
        self.config = config
        self.stream = stream

    def _progress(self, iterable, total: int):
        if not self.config.processing.show_progress:
            return iterable
        workers = self.config.processing.workers
        desc = "Encoding numbers"
        if workers > 1:
            desc += f" ({workers} workers)"
        return tqdm(iterable, total=total, desc=desc, unit="number")

    def _process_sequential(
        self, index: DictionaryIndex, numbers: list[str], writer: LineWriter
    ) -> PipelineStats:
        """Process numbers one by one, streaming lines to the writer."""
        stats = PipelineStats()
        separator = self.config.output.separator
        for number in self._progress(numbers, total=len(numbers)):
            writer.write_lines(expand_number(number, index, stats, separator=separator))
        return stats

    def _process_parallel(
        self, index: DictionaryIndex, numbers: list[str], writer: LineWriter
    ) -> PipelineStats:
        """Process numbers in worker processes, writing results in input order."""
        workers = self.config.processing.workers
        separator = self.config.output.separator
        tasks = [(number, separator) for number in numbers]
        stats = PipelineStats()

        with ProcessPoolExecutor(
            max_workers=workers, initializer=_init_worker, initargs=(index,)
        ) as executor:
            results = executor.map(_process_number_worker, tasks)
            for lines, number_stats in self._progress(results, total=len(tasks)):
                writer.write_lines(lines)
                stats.merge(number_stats)

        return stats

    def run(self) -> PipelineStats:
        """Run the pipeline.

        Both input files are read before any output is written.

        Returns:
            Counters for the run

        Raises:
            ValueError: If an input file is not configured
            InputUnavailableError: If an input file cannot be read
            OutputWriteError: If the output cannot be written
        """
        input_config = self.config.input
        if not input_config.words_file:
            raise ValueError("Words file not specified in configuration")
        if not input_config.numbers_file:
            raise ValueError("Numbers file not specified in configuration")

        start = time.monotonic()
        index = DictionaryIndex.from_file(input_config.words_file, encoding=input_config.encoding)
        numbers = read_lines(input_config.numbers_file, encoding=input_config.encoding)
        logger.info(f"Read {len(numbers)} numbers from {input_config.numbers_file}")

        with LineWriter(
            self.config.output.output_file, stream=self.stream, encoding=input_config.encoding
        ) as writer:
            if self.config.processing.workers <= 1:
                stats = self._process_sequential(index, numbers, writer)
            else:
                stats = self._process_parallel(index, numbers, writer)

        stats.elapsed_seconds = time.monotonic() - start
        logger.info(
            f"Wrote {stats.lines_written} lines from {stats.parses} parses "
            f"({stats.numbers_read} numbers, {stats.numbers_skipped} without digits, "
            f"{stats.numbers_unmatched} without decomposition) "
            f"in {stats.elapsed_seconds:.2f}s"
        )
        return stats
