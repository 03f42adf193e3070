"""Command-line interface for the phonecode pipeline."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .config import Config
from .exceptions import InputUnavailableError, OutputWriteError
from .pipeline import PhoneCodePipeline


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Encode phone numbers as sequences of dictionary words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print every encoding to stdout
  phonecode dictionary.txt input.txt

  # Write to a file using 4 worker processes
  phonecode dictionary.txt input.txt --output encodings.txt --workers 4

  # Using a config file
  phonecode --config config.yaml
        """,
    )

    parser.add_argument(
        "words",
        type=Path,
        nargs="?",
        help="Path to word list (one word per line)",
    )
    parser.add_argument(
        "numbers",
        type=Path,
        nargs="?",
        help="Path to number list (one number per line)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write encodings to this file instead of stdout",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of worker processes (default: 1)",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        help="Text encoding of the input files (default: utf-8)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    if args.config:
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # Override with command-line arguments
    if args.words:
        config.input.words_file = args.words
    if args.numbers:
        config.input.numbers_file = args.numbers
    if args.encoding:
        config.input.encoding = args.encoding
    if args.output:
        config.output.output_file = args.output
    if args.workers is not None:
        if args.workers < 1:
            raise ValueError("--workers must be at least 1")
        config.processing.workers = args.workers
    if args.progress:
        config.processing.show_progress = True

    return config


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input.words_file or not config.input.numbers_file:
        print("Error: Words and numbers files are required", file=sys.stderr)
        return 1

    try:
        PhoneCodePipeline(config).run()
        return 0
    except InputUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OutputWriteError as e:
        logging.debug("Output failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
