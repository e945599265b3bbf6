from __future__ import annotations

import logging
from dataclasses import dataclass, field

from data_designer_writegood import readability
from data_designer_writegood.buffer import TextBuffer
from data_designer_writegood.core import (
    DEFAULT_SETTINGS,
    DUPLICATE,
    PASSIVE,
    WEASEL,
    Match,
    Settings,
    compile_pattern,
    scan_duplicate_words,
)

logger = logging.getLogger(__name__)

DUPLICATES_DONE_NOTICE = "Duplicate word scan complete"


@dataclass(frozen=True)
class ReportEntry:
    buffer_name: str
    line: int
    match: Match
    message: str

    def format(self) -> str:
        return f"{self.buffer_name}:{self.line}: {self.message}"


@dataclass
class Report:
    buffer_name: str
    category: str
    entries: list[ReportEntry] = field(default_factory=list)
    notice: str | None = None

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def matches(self) -> list[Match]:
        return [e.match for e in self.entries]

    def lines(self) -> list[str]:
        out = [e.format() for e in self.entries]
        if self.notice:
            out.append(self.notice)
        return out


def resolve_range(buffer: TextBuffer, start: int | None, end: int | None) -> tuple[int, int]:
    """Clamp an explicit range to the buffer; absent or empty ranges mean ``buffer.region()``.

    When only one end is given the other defaults to the buffer edge.
    """
    if start is None and end is None:
        return buffer.region()
    start = 0 if start is None else start
    end = len(buffer) if end is None else end
    start, end = sorted((max(0, min(start, len(buffer))), max(0, min(end, len(buffer)))))
    if start == end:
        return buffer.region()
    return start, end


def _entry(buffer: TextBuffer, match: Match, message: str) -> ReportEntry:
    entry = ReportEntry(buffer.name, buffer.line_number_at(match.start), match, message)
    logger.debug(entry.format())
    return entry


def _pattern_report(buffer: TextBuffer, category: str, start: int | None, end: int | None, settings: Settings | None) -> Report:
    settings = settings or DEFAULT_SETTINGS
    start, end = resolve_range(buffer, start, end)
    report = Report(buffer.name, category)
    for m in buffer.search(settings.pattern(category), start, end):
        match = Match(m.start(), m.end(), m.group(0), category)
        report.entries.append(_entry(buffer, match, f"{match.text}: {buffer.line_at(m.start())}"))
    logger.info(f"{buffer.name}: {len(report)} {category} match(es) in [{start}, {end})")
    return report


def check_weasel(buffer: TextBuffer, start: int | None = None, end: int | None = None, settings: Settings | None = None) -> Report:
    """Report every weasel word in the range, one entry per occurrence."""
    return _pattern_report(buffer, WEASEL, start, end, settings)


def check_passive(buffer: TextBuffer, start: int | None = None, end: int | None = None, settings: Settings | None = None) -> Report:
    """Report every to-be verb followed by a listed past participle."""
    return _pattern_report(buffer, PASSIVE, start, end, settings)


def check_duplicates(buffer: TextBuffer, start: int | None = None, end: int | None = None, settings: Settings | None = None) -> Report:
    """Walk the range word by word and report each adjacent duplicate.

    Ends with a scan-complete notice, even when nothing was found.
    """
    settings = settings or DEFAULT_SETTINGS
    start, end = resolve_range(buffer, start, end)
    report = Report(buffer.name, DUPLICATE)
    duplicates = scan_duplicate_words(
        buffer.text, start, end, punctuation_resets=settings.duplicate_punctuation_resets
    )
    word_re = compile_pattern(r"\w+")
    for match in duplicates:
        word = word_re.findall(match.text)[-1]
        report.entries.append(_entry(buffer, match, word))
    report.notice = DUPLICATES_DONE_NOTICE
    logger.info(f"{buffer.name}: {len(report)} duplicate(s); {DUPLICATES_DONE_NOTICE.lower()}")
    return report


def reading_ease(buffer: TextBuffer, start: int | None = None, end: int | None = None) -> float | None:
    start, end = resolve_range(buffer, start, end)
    score = readability.reading_ease(buffer.text[start:end])
    logger.info(f"{buffer.name}: Flesch reading ease {score}")
    return score


def grade_level(buffer: TextBuffer, start: int | None = None, end: int | None = None) -> float | None:
    start, end = resolve_range(buffer, start, end)
    score = readability.grade_level(buffer.text[start:end])
    logger.info(f"{buffer.name}: Flesch-Kincaid grade level {score}")
    return score
