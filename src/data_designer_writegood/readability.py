"""Flesch readability scores.

Syllables are estimated from vowel groups, which is close enough for
comparing drafts of the same text but not a dictionary-grade count.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_WORD_RE = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)*")
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")


@dataclass(frozen=True)
class TextStatistics:
    words: int
    sentences: int
    syllables: int


def count_syllables(word: str) -> int:
    letters = re.sub(r"[^a-z]", "", word.lower())
    if not letters:
        return 0
    count = len(_VOWEL_GROUP_RE.findall(letters))
    # silent trailing e ("make"), but not "-le" ("table") or "-ee" ("agree")
    if count > 1 and letters.endswith("e") and not letters.endswith(("le", "ee")):
        count -= 1
    return max(1, count)


def text_statistics(text: str) -> TextStatistics:
    words = _WORD_RE.findall(text)
    sentences = len(_SENTENCE_END_RE.findall(text))
    if words and sentences == 0:
        sentences = 1
    return TextStatistics(
        words=len(words),
        sentences=sentences,
        syllables=sum(count_syllables(w) for w in words),
    )


def reading_ease(text: str) -> float | None:
    """Flesch reading ease; higher is easier. ``None`` when there are no words."""
    stats = text_statistics(text)
    if stats.words == 0:
        return None
    return round(
        206.835 - 1.015 * (stats.words / stats.sentences) - 84.6 * (stats.syllables / stats.words),
        2,
    )


def grade_level(text: str) -> float | None:
    """Flesch-Kincaid grade level. ``None`` when there are no words."""
    stats = text_statistics(text)
    if stats.words == 0:
        return None
    return round(
        0.39 * (stats.words / stats.sentences) + 11.8 * (stats.syllables / stats.words) - 15.59,
        2,
    )
