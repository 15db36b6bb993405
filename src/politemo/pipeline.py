"""
End-to-end statement emotion pipeline.

Loads reference data once, runs load → normalize → tokenize → filter → join,
and builds the standard set of aggregates for the report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from politemo.analysis import AggregateTable, GroupKey, aggregate, explode_subjects
from politemo.config import Config
from politemo.dataset import load_statements, normalize_ids
from politemo.lexicon import EmotionLexicon, join_lexicon, load_lexicon
from politemo.preprocessing import StopwordSet, filter_stopwords, load_stopwords, unnest_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceData:
    """Stopwords and lexicon, loaded once and shared by every run."""

    stopwords: StopwordSet
    lexicon: EmotionLexicon


@dataclass(frozen=True)
class PipelineResult:
    """Every intermediate table of a pipeline run."""

    statements: pd.DataFrame
    tokens: pd.DataFrame
    filtered: pd.DataFrame
    joined: pd.DataFrame

    def summary(self) -> dict[str, int]:
        """Row counts per stage."""
        return {
            "statements": len(self.statements),
            "tokens": len(self.tokens),
            "filtered_tokens": len(self.filtered),
            "category_rows": len(self.joined),
        }


def load_reference_data(
    config: Config,
    stopwords_path: str | Path | None = None,
    lexicon_path: str | Path | None = None,
) -> ReferenceData:
    """Load stopwords and lexicon from configured or explicit paths.

    Args:
        config: Configuration with default reference data paths.
        stopwords_path: Overrides config.data.stopwords_path.
        lexicon_path: Overrides config.data.lexicon_path.

    Returns:
        ReferenceData instance.

    Raises:
        MissingReferenceDataError: If a reference file is absent or unreadable.
    """
    stopwords_path = stopwords_path or config.data.stopwords_path
    lexicon_path = lexicon_path or config.data.lexicon_path

    if stopwords_path:
        stopwords = load_stopwords(stopwords_path)
    else:
        stopwords = StopwordSet.from_spacy()
        logger.info(f"Using spaCy English stopwords ({len(stopwords)} words)")

    return ReferenceData(stopwords=stopwords, lexicon=load_lexicon(lexicon_path))


def process_statements(
    statements: pd.DataFrame,
    reference: ReferenceData,
    config: Config,
) -> PipelineResult:
    """Run the text stages over an already loaded statements table.

    Args:
        statements: Statements table with the fixed schema.
        reference: Stopwords and lexicon to apply.
        config: Configuration for normalization and tokenization.

    Returns:
        PipelineResult with all intermediate tables.
    """
    normalized = normalize_ids(statements, suffix=config.text.id_suffix)
    tokens = unnest_tokens(
        normalized,
        config.text.text_field,
        show_progress=config.text.show_progress,
    )
    filtered = filter_stopwords(tokens, reference.stopwords)
    joined = join_lexicon(filtered, reference.lexicon)

    return PipelineResult(
        statements=normalized,
        tokens=tokens,
        filtered=filtered,
        joined=joined,
    )


def run_pipeline(
    config: Config,
    statements_path: str | Path | None = None,
    reference: ReferenceData | None = None,
) -> PipelineResult:
    """Load the statements file and run every stage.

    Args:
        config: Pipeline configuration.
        statements_path: Overrides config.data.statements_path.
        reference: Preloaded reference data. Loaded from config if None.

    Returns:
        PipelineResult with all intermediate tables.

    Raises:
        FileNotFoundError: If the statements file does not exist.
        FormatError: If a row has the wrong number of fields.
        ParseError: If a label or historical count is invalid.
        MissingReferenceDataError: If reference data cannot be loaded.
    """
    if reference is None:
        reference = load_reference_data(config)

    statements = load_statements(
        statements_path or config.data.statements_path,
        delimiter=config.data.delimiter,
        encoding=config.data.encoding,
    )
    result = process_statements(statements, reference, config)

    logger.info(f"Pipeline complete: {result.summary()}")
    return result


def build_report(result: PipelineResult, config: Config) -> dict[str, AggregateTable]:
    """Build the standard aggregates for the statements report.

    Args:
        result: Output of run_pipeline.
        config: Configuration with rounding and top-N settings.

    Returns:
        Mapping of report section name to AggregateTable.
    """
    options = {
        "decimals": config.report.frequency_decimals,
        "rounding": config.report.rounding,
    }
    statements = result.statements
    joined = result.joined

    report = {
        "label_distribution": aggregate(
            statements, GroupKey.LABEL, include_empty=True, **options
        ),
        "party_distribution": aggregate(statements, GroupKey.PARTY, **options),
        "label_by_party": aggregate(
            statements,
            [GroupKey.PARTY, GroupKey.LABEL],
            parent=GroupKey.PARTY,
            **options,
        ),
        "top_subjects": aggregate(
            explode_subjects(statements), GroupKey.SUBJECT, **options
        ).top(config.report.top_subjects),
        "category_distribution": aggregate(
            joined, GroupKey.CATEGORY, include_empty=True, **options
        ),
        "category_by_label": aggregate(
            joined,
            [GroupKey.LABEL, GroupKey.CATEGORY],
            parent=GroupKey.LABEL,
            **options,
        ),
        "category_by_party": aggregate(
            joined,
            [GroupKey.PARTY, GroupKey.CATEGORY],
            parent=GroupKey.PARTY,
            **options,
        ),
    }

    logger.info(f"Built {len(report)} report tables")
    return report
