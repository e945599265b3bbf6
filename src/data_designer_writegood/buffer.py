"""In-process model of the editor the linter runs inside.

A ``TextBuffer`` is a mutable string with an optional selection, a
case-folding search and a set of annotation rules. Rules are re-evaluated
against the current text every time annotations are requested, so the
highlights follow the user's edits.
"""

from __future__ import annotations

import bisect
import itertools
import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterator

from data_designer_writegood.core import Style, compile_pattern

logger = logging.getLogger(__name__)

_handle_ids = itertools.count(1)


@dataclass(frozen=True)
class AnnotationRule:
    category: str
    pattern: re.Pattern[str]
    style: Style
    tooltip: str


@dataclass(frozen=True)
class RuleHandle:
    """Opaque token returned by ``TextBuffer.add_rule``."""

    id: int
    category: str


@dataclass(frozen=True)
class Annotation:
    start: int
    end: int
    category: str
    style: Style
    tooltip: str


class TextBuffer:
    def __init__(self, name: str, text: str = "", kind: str = "text", case_fold_search: bool = True) -> None:
        self.name = name
        self.kind = kind
        self.case_fold_search = case_fold_search
        self._text = text
        self._selection: tuple[int, int] | None = None
        self._rules: dict[RuleHandle, AnnotationRule] = {}

    def __repr__(self) -> str:
        return f"TextBuffer({self.name!r}, kind={self.kind!r}, size={len(self._text)})"

    def __len__(self) -> int:
        return len(self._text)

    @property
    def text(self) -> str:
        return self._text

    # -- editing ------------------------------------------------------------

    def _check_position(self, pos: int) -> None:
        if not 0 <= pos <= len(self._text):
            raise IndexError(f"position {pos} outside buffer {self.name!r} (size {len(self._text)})")

    def insert(self, pos: int, text: str) -> None:
        self._check_position(pos)
        self._text = self._text[:pos] + text + self._text[pos:]
        self._selection = None

    def delete(self, start: int, end: int) -> None:
        self._check_position(start)
        self._check_position(end)
        start, end = sorted((start, end))
        self._text = self._text[:start] + self._text[end:]
        self._selection = None

    def replace(self, text: str) -> None:
        self._text = text
        self._selection = None

    # -- selection ----------------------------------------------------------

    def select(self, start: int, end: int) -> None:
        self._check_position(start)
        self._check_position(end)
        self._selection = tuple(sorted((start, end)))

    def deselect(self) -> None:
        self._selection = None

    @property
    def selection(self) -> tuple[int, int] | None:
        return self._selection

    def region(self) -> tuple[int, int]:
        """Active selection, or the whole buffer when nothing (or nothing non-empty) is selected."""
        if self._selection and self._selection[0] != self._selection[1]:
            return self._selection
        return 0, len(self._text)

    def line_number_at(self, pos: int) -> int:
        """1-based line number of ``pos``."""
        pos = max(0, min(pos, len(self._text)))
        return self._text.count("\n", 0, pos) + 1

    def line_starts(self) -> list[int]:
        return [0] + [m.end() for m in re.finditer("\n", self._text)]

    def line_at(self, pos: int) -> str:
        starts = self.line_starts()
        idx = bisect.bisect_right(starts, pos) - 1
        end = self._text.find("\n", starts[idx])
        return self._text[starts[idx] : end if end != -1 else len(self._text)]

    # -- search -------------------------------------------------------------

    def search(
        self,
        source: str,
        start: int = 0,
        end: int | None = None,
        ignore_case: bool | None = None,
    ) -> Iterator[re.Match[str]]:
        """Iterate matches of ``source`` in ``[start, end)``.

        Case folding follows ``case_fold_search`` unless ``ignore_case`` is given.
        """
        fold = self.case_fold_search if ignore_case is None else ignore_case
        end = len(self._text) if end is None else end
        return compile_pattern(source, fold).finditer(self._text, start, end)

    # -- annotations --------------------------------------------------------

    def add_rule(self, rule: AnnotationRule) -> RuleHandle:
        handle = RuleHandle(next(_handle_ids), rule.category)
        self._rules[handle] = rule
        logger.debug(f"{self.name}: added {rule.category} rule {handle.id}")
        return handle

    def remove_rule(self, handle: RuleHandle) -> bool:
        if self._rules.pop(handle, None) is None:
            return False
        logger.debug(f"{self.name}: removed {handle.category} rule {handle.id}")
        return True

    @property
    def rules(self) -> tuple[AnnotationRule, ...]:
        return tuple(self._rules.values())

    @property
    def handles(self) -> tuple[RuleHandle, ...]:
        return tuple(self._rules)

    def annotations(self) -> list[Annotation]:
        found = []
        for rule in self._rules.values():
            for m in rule.pattern.finditer(self._text):
                found.append(Annotation(m.start(), m.end(), rule.category, rule.style, rule.tooltip))
        found.sort(key=lambda a: (a.start, a.end))
        return found


BufferHook = Callable[[TextBuffer], None]


class Editor:
    """Owns buffers and notifies hooks whenever one is created."""

    def __init__(self) -> None:
        self._buffers: list[TextBuffer] = []
        self._hooks: list[BufferHook] = []

    @property
    def buffers(self) -> tuple[TextBuffer, ...]:
        return tuple(self._buffers)

    def add_hook(self, hook: BufferHook) -> None:
        if hook not in self._hooks:
            self._hooks.append(hook)

    def remove_hook(self, hook: BufferHook) -> None:
        if hook in self._hooks:
            self._hooks.remove(hook)

    def create_buffer(self, name: str, text: str = "", kind: str = "text", case_fold_search: bool = True) -> TextBuffer:
        buffer = TextBuffer(name, text, kind=kind, case_fold_search=case_fold_search)
        self._buffers.append(buffer)
        for hook in list(self._hooks):
            hook(buffer)
        return buffer

    def kill_buffer(self, buffer: TextBuffer) -> None:
        self._buffers.remove(buffer)
