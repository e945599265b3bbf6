"""Live inline highlighting of weasel words, passive voice and duplicates."""

from __future__ import annotations

import logging
import weakref

from data_designer_writegood.buffer import AnnotationRule, Editor, RuleHandle, TextBuffer
from data_designer_writegood.core import CATEGORIES, DEFAULT_SETTINGS, DUPLICATE, Settings, compile_pattern

logger = logging.getLogger(__name__)


class LiveHighlighter:
    """Per-buffer highlight mode.

    Tracks, for each buffer with the mode on, the handle of every rule it
    registered, so disabling removes exactly those rules and leaves any other
    annotations on the buffer alone.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self._handles: weakref.WeakKeyDictionary[TextBuffer, dict[str, RuleHandle]] = weakref.WeakKeyDictionary()

    def _rule(self, buffer: TextBuffer, category: str) -> AnnotationRule:
        ignore_case = True if category == DUPLICATE else buffer.case_fold_search
        return AnnotationRule(
            category=category,
            pattern=compile_pattern(self.settings.pattern(category), ignore_case),
            style=self.settings.style(category),
            tooltip=self.settings.tooltip(category),
        )

    def is_enabled(self, buffer: TextBuffer) -> bool:
        return buffer in self._handles

    def enable(self, buffer: TextBuffer) -> None:
        if buffer in self._handles:
            return
        self._handles[buffer] = {category: buffer.add_rule(self._rule(buffer, category)) for category in CATEGORIES}
        logger.debug(f"{buffer.name}: live highlighting enabled")

    def disable(self, buffer: TextBuffer) -> None:
        handles = self._handles.pop(buffer, None)
        if handles is None:
            return
        for handle in handles.values():
            buffer.remove_rule(handle)
        logger.debug(f"{buffer.name}: live highlighting disabled")

    def toggle(self, buffer: TextBuffer) -> bool:
        """Flip the mode for ``buffer`` and return the new state."""
        if self.is_enabled(buffer):
            self.disable(buffer)
            return False
        self.enable(buffer)
        return True

    def handles(self, buffer: TextBuffer) -> dict[str, RuleHandle]:
        return dict(self._handles.get(buffer, {}))


class GlobalLiveHighlight:
    """Turns ``LiveHighlighter`` on for every compatible buffer of an editor.

    Switching off only affects buffers this mode turned on; buffers the user
    enabled by hand keep their highlighting.
    """

    def __init__(
        self,
        editor: Editor,
        highlighter: LiveHighlighter | None = None,
        kinds: frozenset[str] = frozenset({"text"}),
    ) -> None:
        self.editor = editor
        self.highlighter = highlighter or LiveHighlighter()
        self.kinds = kinds
        self.enabled = False
        self._enabled_here: weakref.WeakSet[TextBuffer] = weakref.WeakSet()

    def _on_buffer_created(self, buffer: TextBuffer) -> None:
        if buffer.kind in self.kinds and not self.highlighter.is_enabled(buffer):
            self.highlighter.enable(buffer)
            self._enabled_here.add(buffer)

    def enable(self) -> None:
        if self.enabled:
            return
        self.enabled = True
        self.editor.add_hook(self._on_buffer_created)
        for buffer in self.editor.buffers:
            self._on_buffer_created(buffer)
        logger.info(f"Global live highlighting enabled for kinds {sorted(self.kinds)}")

    def disable(self) -> None:
        if not self.enabled:
            return
        self.enabled = False
        self.editor.remove_hook(self._on_buffer_created)
        for buffer in list(self._enabled_here):
            self.highlighter.disable(buffer)
        self._enabled_here.clear()
        logger.info("Global live highlighting disabled")

    def toggle(self) -> bool:
        if self.enabled:
            self.disable()
        else:
            self.enable()
        return self.enabled
