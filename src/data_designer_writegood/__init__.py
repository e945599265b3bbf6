# SPDX-License-Identifier: Apache-2.0
"""Writing-style linter: weasel words, passive voice and duplicated words.

Checks prose with plain regular expressions, either as a batch report, as
live inline annotations on an editor buffer, or as a ``writegood`` column
type for NeMo Data Designer.

Usage::

    from data_designer_writegood import TextBuffer, check_weasel

    buffer = TextBuffer("draft.txt", "This was very clearly written.")
    for line in check_weasel(buffer).lines():
        print(line)
"""

from data_designer_writegood.buffer import Editor, TextBuffer
from data_designer_writegood.commands import check_duplicates, check_passive, check_weasel
from data_designer_writegood.core import Settings, analyze_text
from data_designer_writegood.highlight import GlobalLiveHighlight, LiveHighlighter

__all__ = [
    "Editor",
    "GlobalLiveHighlight",
    "LiveHighlighter",
    "Settings",
    "TextBuffer",
    "analyze_text",
    "check_duplicates",
    "check_passive",
    "check_weasel",
]
