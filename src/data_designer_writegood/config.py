from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class WritegoodColumnConfig(SingleColumnConfig):
    """Flag weasel words, passive voice and duplicated words in text columns.

    Each row's text is checked with the same patterns as the ``writegood``
    command-line tool and reported as per-category issue counts.

    Attributes:
        target_columns: Columns whose text content will be concatenated and checked.
        max_issues: Largest total issue count for which ``is_valid=True``.
        include_issues: Include each issue (category, text, offsets) in output.
        include_readability: Include Flesch reading ease and grade level.
        ignore_case: Case folding for the weasel and passive checks.
    """

    target_columns: list[str]
    max_issues: int = Field(default=0, ge=0, description="Maximum issue count for is_valid=True")
    include_issues: bool = Field(default=False, description="Include raw issue details in output")
    include_readability: bool = Field(default=True, description="Include readability scores in output")
    ignore_case: bool = Field(default=True, description="Match weasel words and passive voice case-insensitively")
    column_type: Literal["writegood"] = "writegood"

    @staticmethod
    def get_column_emoji() -> str:
        return "\u270d\ufe0f"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
