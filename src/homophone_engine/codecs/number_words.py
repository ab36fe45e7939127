"""English number-word codec over the closed range 0-9999."""

from __future__ import annotations

import re

MIN_VALUE = 0
MAX_VALUE = 9999

ONES = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)
TENS = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}
ONES_VALUES = {word: value for value, word in enumerate(ONES)}
TENS_WORDS = {value: word for word, value in TENS.items()}

FILLER_WORDS = {"and"}
HUNDRED = "hundred"
THOUSAND = "thousand"

HYPHEN_RE = re.compile(r"\s*-\s*")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_number_text(text: str | None) -> str:
    """Canonicalize number text before parsing.

    Trims, lowercases, removes commas, tightens spaces around hyphens, and
    collapses whitespace: ``" Twenty - Five,"`` -> ``"twenty-five"``.
    """

    text = (text or "").strip().lower().replace(",", "")
    text = HYPHEN_RE.sub("-", text)
    return WHITESPACE_RE.sub(" ", text).strip()


def _hyphenated_pair(text: str) -> int | None:
    """Resolve a lone ``tens-ones`` pair such as ``twenty-five``."""

    parts = text.split("-")
    if len(parts) != 2:
        return None
    tens, ones = parts
    if tens in TENS and ones in ONES_VALUES and 0 < ONES_VALUES[ones] < 10:
        return TENS[tens] + ONES_VALUES[ones]
    return None


def word_to_int(word: str | None) -> int | None:
    """Parse an English number phrase into an integer.

    Tokens accumulate into a running subtotal: ones, teens and tens add to it,
    ``hundred`` multiplies it, and ``thousand`` flushes it into the total.
    Scale words without a preceding nonzero subtotal, unknown tokens, and
    values above 9999 all fail.

    Args:
        word: Phrase such as ``"two thousand and five"`` or ``"forty-two"``.

    Returns:
        Parsed value, or ``None`` when the phrase is not a number.
    """

    text = normalize_number_text(word)
    if not text:
        return None

    pair = _hyphenated_pair(text)
    if pair is not None:
        return pair

    total = 0
    current = 0
    for token in text.replace("-", " ").split():
        if token in FILLER_WORDS:
            continue
        if token in ONES_VALUES:
            current += ONES_VALUES[token]
        elif token in TENS:
            current += TENS[token]
        elif token == HUNDRED:
            if current == 0:
                return None
            current *= 100
        elif token == THOUSAND:
            if current == 0:
                return None
            total += current * 1000
            current = 0
        else:
            return None

    value = total + current
    if value > MAX_VALUE:
        return None
    return value


def int_to_word(n: int) -> str | None:
    """Spell an integer in English words.

    Args:
        n: Integer in the range 0-9999.

    Returns:
        Words such as ``"one thousand two hundred thirty-four"``, or ``None``
        outside the supported range.
    """

    if n < MIN_VALUE or n > MAX_VALUE:
        return None
    if n < 20:
        return ONES[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        word = TENS_WORDS[tens * 10]
        return f"{word}-{ONES[ones]}" if ones else word

    scale, unit = (THOUSAND, 1000) if n >= 1000 else (HUNDRED, 100)
    head, rest = divmod(n, unit)
    words = f"{ONES[head]} {scale}"
    if rest:
        words = f"{words} {int_to_word(rest)}"
    return words
