# Writing-style linter for weasel words, passive voice and duplicated words.
#
# Word lists are regex fragments joined into a single alternation per checker.
# Matching is plain pattern matching: no tagging, no parsing, false positives
# (participles used adjectivally) are accepted.

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

from data_designer_writegood.readability import grade_level, reading_ease

# ---------------------------------------------------------------------------
# Word lists
# ---------------------------------------------------------------------------

WEASEL_WORDS: tuple[str, ...] = (
    "many", "various", "very", "fairly", "several", "extremely",
    "exceedingly", "quite", "remarkably", "few", "surprisingly",
    "mostly", "largely", "huge", "tiny", "are a number", "is a number",
    "excellent", "interestingly", "significantly", "substantially",
    "clearly", "vast", "relatively", "completely", "literally",
    "not rocket science", "outside the box",
)

PASSIVE_VERBS: tuple[str, ...] = (
    "am", "are", "were", "being", "is", "been", "was", "be",
)

PASSIVE_IRREGULARS: tuple[str, ...] = (
    "awoken", "been", "born", "beat", "become", "begun", "bent", "beset",
    "bet", "bid", "bidden", "bound", "bitten", "bled", "blown", "broken",
    "bred", "brought", "broadcast", "built", "burnt", "burst", "bought",
    "cast", "caught", "chosen", "clung", "come", "cost", "crept", "cut",
    "dealt", "dug", "dived", "done", "drawn", "dreamt", "driven", "drunk",
    "eaten", "fallen", "fed", "felt", "fought", "found", "fit", "fled",
    "flung", "flown", "forbidden", "forecast", "foregone", "foreseen",
    "foretold", "forgotten", "forgiven", "forsaken", "frozen", "gotten",
    "given", "gone", "ground", "grown", "hung", "heard", "hidden", "hit",
    "held", "hurt", "kept", "knelt", "knit", "known", "laid", "led",
    "leapt", "learnt", "left", "lent", "let", "lain", "lighted", "lost",
    "made", "meant", "met", "misspelt", "mistaken", "mown", "overcome",
    "overdone", "overtaken", "overthrown", "paid", "pled", "proven", "put",
    "quit", "read", "rid", "ridden", "rung", "risen", "run", "sawn", "said",
    "seen", "sought", "sold", "sent", "set", "sewn", "shaken", "shaven",
    "shorn", "shed", "shone", "shod", "shot", "shown", "shrunk", "shut",
    "sung", "sunk", "sat", "slept", "slain", "slid", "slung", "slit",
    "smitten", "sown", "spoken", "sped", "spent", "spilt", "spun", "spit",
    "split", "spread", "sprung", "stood", "stolen", "stuck", "stung",
    "stunk", "stridden", "struck", "strung", "striven", "sworn", "swept",
    "swollen", "swum", "swung", "taken", "taught", "torn", "told",
    "thought", "thrived", "thrown", "thrust", "trodden", "understood",
    "upheld", "upset", "woken", "worn", "woven", "wed", "wept", "wound",
    "won", "withheld", "withstood", "wrung", "written",
)

# Characters allowed between a to-be verb and its participle, and between two
# duplicated words: whitespace and quotation marks. Intervening words are not
# allowed, so "was very clearly written" is not reported as passive.
SEPARATOR_CHARS = "\\s\"'`\u201c\u201d\u2018\u2019"
PASSIVE_SEPARATOR = f"[{SEPARATOR_CHARS}]+"

REGULAR_PARTICIPLE = r"\w+ed"

WEASEL = "weasel"
PASSIVE = "passive"
DUPLICATE = "duplicate"
CATEGORIES: tuple[str, ...] = (WEASEL, PASSIVE, DUPLICATE)

_WORD_OR_PUNCT_RE = re.compile(rf"(\w+)|([^\w{SEPARATOR_CHARS}]+)")
_WORD_CHAR_RE = re.compile(r"\w")

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Style:
    """Visual style of an inline annotation."""

    color: str
    underline: str = "wave"
    bold: bool = False


@dataclass(frozen=True)
class Settings:
    """User-overridable word lists, tooltips and styles.

    All patterns are compiled on construction, so a list entry that the regex
    engine rejects raises ``re.error`` here rather than during a scan.
    """

    weasel_words: tuple[str, ...] = WEASEL_WORDS
    passive_verbs: tuple[str, ...] = PASSIVE_VERBS
    passive_participles: tuple[str, ...] = PASSIVE_IRREGULARS
    match_regular_participles: bool = False
    duplicate_punctuation_resets: bool = True

    weasel_tooltip: str = "Weasel word: vague or hedging term"
    passive_tooltip: str = "Passive voice"
    duplicate_tooltip: str = "Duplicate word"

    weasel_style: Style = field(default_factory=lambda: Style(color="DarkOrange"))
    passive_style: Style = field(default_factory=lambda: Style(color="LightBlue"))
    duplicate_style: Style = field(default_factory=lambda: Style(color="DeepPink", bold=True))

    def __post_init__(self) -> None:
        compile_pattern(weasel_pattern(self.weasel_words))
        compile_pattern(passive_pattern(self.passive_verbs, self.passive_participles, self.match_regular_participles))
        compile_pattern(duplicate_pattern(), ignore_case=True)

    def tooltip(self, category: str) -> str:
        return {WEASEL: self.weasel_tooltip, PASSIVE: self.passive_tooltip, DUPLICATE: self.duplicate_tooltip}[category]

    def style(self, category: str) -> Style:
        return {WEASEL: self.weasel_style, PASSIVE: self.passive_style, DUPLICATE: self.duplicate_style}[category]

    def pattern(self, category: str) -> str:
        if category == WEASEL:
            return weasel_pattern(self.weasel_words)
        if category == PASSIVE:
            return passive_pattern(self.passive_verbs, self.passive_participles, self.match_regular_participles)
        if category == DUPLICATE:
            return duplicate_pattern()
        raise KeyError(category)


# ---------------------------------------------------------------------------
# Matches
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Match:
    start: int
    end: int
    text: str
    category: str

    def to_payload(self) -> dict[str, object]:
        return {
            "type": "Match",
            "category": self.category,
            "text": self.text,
            "start": self.start,
            "end": self.end,
        }


# ---------------------------------------------------------------------------
# Pattern builders
# ---------------------------------------------------------------------------


def _alternation(words: tuple[str, ...] | list[str]) -> str:
    # An empty list must never match, not match the empty string everywhere.
    return "|".join(words) or "(?!)"


def weasel_pattern(words: tuple[str, ...] | list[str]) -> str:
    return r"\b(" + _alternation(words) + r")\b"


def passive_pattern(
    verbs: tuple[str, ...] | list[str],
    participles: tuple[str, ...] | list[str],
    regular_participles: bool = False,
) -> str:
    alternatives = _alternation(participles)
    if regular_participles:
        alternatives = REGULAR_PARTICIPLE + "|" + alternatives
    return r"\b(" + _alternation(verbs) + r")" + PASSIVE_SEPARATOR + r"(" + alternatives + r")\b"


def duplicate_pattern() -> str:
    return r"\b(\w+)" + PASSIVE_SEPARATOR + r"\1\b"


def compile_pattern(source: str, ignore_case: bool = False) -> re.Pattern[str]:
    """Compile ``source`` through the ``re`` module cache, keyed on the pattern text."""
    return re.compile(source, re.IGNORECASE if ignore_case else 0)


DEFAULT_SETTINGS = Settings()


# ---------------------------------------------------------------------------
# Scanners
# ---------------------------------------------------------------------------


def _bounds(text: str, start: int, end: int | None) -> tuple[int, int]:
    end = len(text) if end is None else end
    return max(0, min(start, len(text))), max(0, min(end, len(text)))


def _scan(pattern: re.Pattern[str], text: str, start: int, end: int | None, category: str) -> list[Match]:
    start, end = _bounds(text, start, end)
    return [Match(m.start(), m.end(), m.group(0), category) for m in pattern.finditer(text, start, end)]


def find_weasels(
    text: str,
    settings: Settings | None = None,
    start: int = 0,
    end: int | None = None,
    ignore_case: bool = False,
) -> list[Match]:
    """Return every weasel word in ``text[start:end]``, leftmost-first."""
    settings = settings or DEFAULT_SETTINGS
    pattern = compile_pattern(settings.pattern(WEASEL), ignore_case)
    return _scan(pattern, text, start, end, WEASEL)


def find_passive(
    text: str,
    settings: Settings | None = None,
    start: int = 0,
    end: int | None = None,
    ignore_case: bool = False,
) -> list[Match]:
    """Return every to-be verb directly followed by a listed past participle."""
    settings = settings or DEFAULT_SETTINGS
    pattern = compile_pattern(settings.pattern(PASSIVE), ignore_case)
    return _scan(pattern, text, start, end, PASSIVE)


def find_duplicates(text: str, start: int = 0, end: int | None = None) -> list[Match]:
    """Single-pattern backreference scan for adjacent duplicates, case-insensitive.

    Each match consumes both words, so a run of three identical words yields
    one match here; ``scan_duplicate_words`` reports every adjacent pair.
    """
    pattern = compile_pattern(duplicate_pattern(), ignore_case=True)
    return _scan(pattern, text, start, end, DUPLICATE)


def scan_duplicate_words(
    text: str,
    start: int = 0,
    end: int | None = None,
    punctuation_resets: bool = True,
) -> Iterator[Match]:
    """Stream adjacent duplicate words in document order.

    Every word is compared to the previous one, case-insensitively, and the
    previous-word pointer advances after each comparison. A punctuation token
    clears the previous word when ``punctuation_resets`` is set.
    A word cut by the start of the range is skipped, as a word-boundary anchor would.
    """
    start, end = _bounds(text, start, end)
    previous: re.Match[str] | None = None
    for token in _WORD_OR_PUNCT_RE.finditer(text, start, end):
        if token.group(1) and token.start() == start > 0 and _WORD_CHAR_RE.match(text, start - 1):
            # range starts inside a word; its tail is not a word of its own
            continue
        if token.group(1) is None:
            if punctuation_resets:
                previous = None
            continue
        if previous is not None and previous.group(1).lower() == token.group(1).lower():
            yield Match(previous.start(), token.end(), text[previous.start() : token.end()], DUPLICATE)
        previous = token


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def _word_count(text: str) -> int:
    return len(text.split())


def analyze_text(text: str, settings: Settings | None = None, ignore_case: bool = True) -> dict:
    """Run all three checkers over ``text``.

    Args:
        text: The prose to analyze.
        settings: Optional word list overrides. Uses the built-in lists if omitted.
        ignore_case: Case folding for the weasel and passive checkers.
            Duplicates are always compared case-insensitively.

    Returns:
        Dict with keys: issue_count, counts, issues, word_count,
        reading_ease, grade_level.
    """
    settings = settings or DEFAULT_SETTINGS
    issues = (
        find_weasels(text, settings, ignore_case=ignore_case)
        + find_passive(text, settings, ignore_case=ignore_case)
        + list(scan_duplicate_words(text, punctuation_resets=settings.duplicate_punctuation_resets))
    )
    issues.sort(key=lambda m: (m.start, m.end))
    counts = {category: 0 for category in CATEGORIES}
    for issue in issues:
        counts[issue.category] += 1

    return {
        "issue_count": len(issues),
        "counts": counts,
        "issues": [m.to_payload() for m in issues],
        "word_count": _word_count(text),
        "reading_ease": reading_ease(text),
        "grade_level": grade_level(text),
    }
