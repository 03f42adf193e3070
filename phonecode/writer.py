"""Line writer for expansion output."""

import sys
from pathlib import Path
from typing import IO, Iterable, Optional, Union

from .exceptions import OutputWriteError


class LineWriter:
    """
    Writes output lines to a file or to stdout.

    Can be used as a context manager; a file opened by the writer is
    closed on exit, a stream passed in is only flushed.
    """

    def __init__(
        self,
        output_path: Optional[Union[str, Path]] = None,
        stream: Optional[IO[str]] = None,
        encoding: str = "utf-8",
    ):
        """
        Initialize the line writer.

        Args:
            output_path: File to write to. Overrides ``stream`` when given.
            stream: Text stream to write to (default: stdout).
            encoding: Encoding of the output file.
        """
        self.output_path = Path(output_path) if output_path else None
        self._owns_stream = self.output_path is not None
        self._count = 0

        if self.output_path is not None:
            try:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)
                self._stream = open(self.output_path, "w", encoding=encoding)
            except OSError as e:
                raise OutputWriteError(f"Cannot open output file {self.output_path}: {e}") from e
        else:
            self._stream = stream if stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        """
        Write a single newline-terminated line.

        Args:
            line: Line text without trailing newline.

        Raises:
            OutputWriteError: If the underlying stream rejects the write.
        """
        try:
            self._stream.write(line)
            self._stream.write("\n")
        except (OSError, UnicodeEncodeError) as e:
            raise OutputWriteError(f"Failed to write output: {e}") from e
        self._count += 1

    def write_lines(self, lines: Iterable[str]) -> int:
        """
        Write multiple lines.

        Args:
            lines: Iterable of lines without trailing newline.

        Returns:
            Number of lines written by this call.
        """
        before = self._count
        for line in lines:
            self.write_line(line)
        return self._count - before

    def flush(self) -> None:
        """Flush the underlying stream."""
        try:
            self._stream.flush()
        except OSError as e:
            raise OutputWriteError(f"Failed to flush output: {e}") from e

    def close(self) -> None:
        """Flush, and close the stream if the writer opened it."""
        try:
            self.flush()
        finally:
            if self._owns_stream:
                self._stream.close()

    def __enter__(self) -> "LineWriter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - flush and close."""
        self.close()

    @property
    def count(self) -> int:
        """Return the number of lines written so far."""
        return self._count
