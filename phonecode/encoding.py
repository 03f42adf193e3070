"""Letter to digit encoding for dictionary words and number lines."""

# Keypad buckets, one entry per digit
KEYPAD_GROUPS = {
    "0": "e",
    "1": "jnq",
    "2": "rwx",
    "3": "dsy",
    "4": "ft",
    "5": "am",
    "6": "civ",
    "7": "bku",
    "8": "lop",
    "9": "ghz",
}

# Flattened lookup: letter (both cases) -> digit character
LETTER_TO_DIGIT = {
    letter: digit
    for digit, letters in KEYPAD_GROUPS.items()
    for letter in letters + letters.upper()
}

DIGITS = frozenset("0123456789")


def encode(text: str) -> str:
    """Encode the letters of a word into its digit key.

    Characters outside the keypad table (digits, punctuation, quotes,
    accented letters) are dropped. The key is a string of digit characters,
    so keys of different lengths never compare equal.

    Args:
        text: Word as read from the word list

    Returns:
        Digit key, empty if the word has no mapped letters
    """
    return "".join(LETTER_TO_DIGIT[ch] for ch in text if ch in LETTER_TO_DIGIT)


def extract_digits(text: str) -> str:
    """Keep only the ASCII digit characters of a number line."""
    return "".join(ch for ch in text if ch in DIGITS)
