from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_writegood.config import WritegoodColumnConfig
from data_designer_writegood.core import analyze_text

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def row_result(text: str, config: WritegoodColumnConfig) -> dict:
    analysis = analyze_text(text, ignore_case=config.ignore_case)
    output: dict = {
        "is_valid": analysis["issue_count"] <= config.max_issues,
        "issue_count": analysis["issue_count"],
        "issue_counts": analysis["counts"],
        "word_count": analysis["word_count"],
    }
    if config.include_readability:
        output["reading_ease"] = analysis["reading_ease"]
        output["grade_level"] = analysis["grade_level"]
    if config.include_issues:
        output["issues"] = analysis["issues"]
    return output


class WritegoodColumnGenerator(ColumnGeneratorFullColumn[WritegoodColumnConfig]):
    """Column generator that checks text for weasel words, passive voice and duplicates."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\u270d\ufe0f Checking column {self.config.name!r} for weasel words, passive voice and duplicates")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_issues: {self.config.max_issues}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            results.append(row_result(text, self.config))

        data = data.copy()
        data[self.config.name] = results
        return data
