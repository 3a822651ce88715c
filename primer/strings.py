"""Basic string operations: length, reversal, joining and letter counts."""

from __future__ import annotations

from string import ascii_lowercase

VOWELS = frozenset("aeiou")


def length(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def reverse(text: str) -> str:
    """``text`` with its characters in reverse order."""
    return text[::-1]


def concatenate(first: str, second: str) -> str:
    """``second`` appended to ``first``."""
    return first + second


def copy(text: str) -> str:
    """A string equal to ``text``."""
    return str(text)


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same backwards; one trailing newline is ignored."""
    if text.endswith("\n"):
        text = text[:-1]
    return text == text[::-1]


def count_vowels_consonants(text: str) -> tuple[int, int]:
    """Counts of ASCII vowels and consonants, ignoring case and other characters."""
    vowels = consonants = 0
    for char in text.lower():
        if char in ascii_lowercase:
            if char in VOWELS:
                vowels += 1
            else:
                consonants += 1
    return vowels, consonants