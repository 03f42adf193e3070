"""Shared fixtures for phonecode tests."""

from pathlib import Path

import pytest

from phonecode.dictionary import DictionaryIndex

SAMPLE_WORDS = [
    "an", "blau", 'Bo"', "Boot", 'bo"s', "da", "Fee", "fern", "Fest", "fort",
    "je", "jemand", "mir", "Mix", "Mixer", "Name", "neu", 'o"d', "Ort", "so",
    "Tor", "Torf", "Wasser",
]

SAMPLE_NUMBERS = [
    "112",
    "5624-82",
    "4824",
    "0721/608-4067",
    "10/783--5",
    "1078-913-5",
    "381482",
    "04824",
]

SAMPLE_OUTPUT = [
    "5624-82: mir Tor",
    "5624-82: Mix Tor",
    "4824: fort",
    "4824: Torf",
    "4824: Tor 4",
    '10/783--5: neu o"d 5',
    '10/783--5: je bo"s 5',
    '10/783--5: je Bo" da',
    "381482: so 1 Tor",
    "04824: 0 fort",
    "04824: 0 Torf",
    "04824: 0 Tor 4",
]


def write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


@pytest.fixture
def sample_index() -> DictionaryIndex:
    return DictionaryIndex.build(SAMPLE_WORDS)


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    return write_lines(tmp_path / "dictionary.txt", SAMPLE_WORDS)


@pytest.fixture
def numbers_file(tmp_path: Path) -> Path:
    return write_lines(tmp_path / "input.txt", SAMPLE_NUMBERS)


@pytest.fixture
def sample_output() -> list[str]:
    return list(SAMPLE_OUTPUT)


@pytest.fixture
def make_file(tmp_path: Path):
    """Factory writing a list of lines to a file under tmp_path."""

    def _make(name: str, lines: list[str]) -> Path:
        return write_lines(tmp_path / name, lines)

    return _make
