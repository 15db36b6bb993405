"""
Configuration management for politemo.

Provides YAML-based configuration loading with environment variable
override support and validation.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "config.yaml"

VALID_ROUNDING_MODES = {"half_up", "half_even"}


@dataclass
class DataConfig:
    """Input dataset and reference data locations."""

    statements_path: Path = field(default_factory=lambda: Path("data/raw/train.csv"))
    stopwords_path: Path | None = None  # None uses spaCy's English stop words
    lexicon_path: Path = field(
        default_factory=lambda: Path("data/reference/NRC-Emotion-Lexicon-Wordlevel-v0.92.txt")
    )
    delimiter: str = ","
    encoding: str = "utf-8"


@dataclass
class TextConfig:
    """Text normalization and tokenization configuration."""

    text_field: str = "statement_text"
    id_suffix: str = ".json"
    show_progress: bool = False


@dataclass
class ReportConfig:
    """Aggregation and chart output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("reports/figures"))
    frequency_decimals: int = 2
    rounding: str = "half_up"  # half_up, half_even
    top_subjects: int = 15
    top_words: int = 100
    make_charts: bool = True
    figure_format: str = "png"
    wordcloud_width: int = 800
    wordcloud_height: int = 400


@dataclass
class Config:
    """Main configuration container."""

    data: DataConfig = field(default_factory=DataConfig)
    text: TextConfig = field(default_factory=TextConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides to configuration.

    Environment variables follow the pattern: POLITEMO_SECTION_KEY
    For example: POLITEMO_DATA_LEXICON_PATH
    """
    env_mappings = {
        "POLITEMO_DATA_STATEMENTS_PATH": ("data", "statements_path"),
        "POLITEMO_DATA_STOPWORDS_PATH": ("data", "stopwords_path"),
        "POLITEMO_DATA_LEXICON_PATH": ("data", "lexicon_path"),
        "POLITEMO_REPORT_OUTPUT_DIR": ("report", "output_dir"),
        "POLITEMO_LOG_LEVEL": ("log_level",),
    }

    for env_var, path in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            if len(path) == 1:
                config_dict[path[0]] = value
            elif len(path) == 2:
                if path[0] not in config_dict or config_dict[path[0]] is None:
                    config_dict[path[0]] = {}
                config_dict[path[0]][path[1]] = value
            logger.debug(f"Applied environment override: {env_var}")

    return config_dict


def _dict_to_config(config_dict: dict[str, Any]) -> Config:
    """Convert a dictionary to a Config object."""
    data_dict = config_dict.get("data") or {}
    stopwords_path = data_dict.get("stopwords_path")
    data = DataConfig(
        statements_path=Path(data_dict.get("statements_path", "data/raw/train.csv")),
        stopwords_path=Path(stopwords_path) if stopwords_path else None,
        lexicon_path=Path(
            data_dict.get(
                "lexicon_path", "data/reference/NRC-Emotion-Lexicon-Wordlevel-v0.92.txt"
            )
        ),
        delimiter=data_dict.get("delimiter", ","),
        encoding=data_dict.get("encoding", "utf-8"),
    )

    text_dict = config_dict.get("text") or {}
    text = TextConfig(
        text_field=text_dict.get("text_field", "statement_text"),
        id_suffix=text_dict.get("id_suffix", ".json"),
        show_progress=text_dict.get("show_progress", False),
    )

    report_dict = config_dict.get("report") or {}
    report = ReportConfig(
        output_dir=Path(report_dict.get("output_dir", "reports/figures")),
        frequency_decimals=int(report_dict.get("frequency_decimals", 2)),
        rounding=report_dict.get("rounding", "half_up"),
        top_subjects=int(report_dict.get("top_subjects", 15)),
        top_words=int(report_dict.get("top_words", 100)),
        make_charts=report_dict.get("make_charts", True),
        figure_format=report_dict.get("figure_format", "png"),
        wordcloud_width=int(report_dict.get("wordcloud_width", 800)),
        wordcloud_height=int(report_dict.get("wordcloud_height", 400)),
    )

    log_file = config_dict.get("log_file")

    return Config(
        data=data,
        text=text,
        report=report,
        log_level=config_dict.get("log_level", "INFO"),
        log_file=Path(log_file) if log_file else None,
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file with environment variable overrides.

    Args:
        config_path: Path to config.yaml file. Defaults to configs/config.yaml.

    Returns:
        Config object with all settings loaded.

    Raises:
        yaml.YAMLError: If config file is invalid YAML.
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    config_dict: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            config_dict = yaml.safe_load(f) or {}
        logger.info(f"Loaded configuration from {config_path}")
    else:
        logger.warning(f"Config file not found: {config_path}, using defaults")

    config_dict = _apply_env_overrides(config_dict)

    config = _dict_to_config(config_dict)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=str(config.log_file) if config.log_file else None,
    )

    return config


def validate_settings(config: Config) -> list[str]:
    """Check settings that do not depend on files being present.

    Args:
        config: Config object to validate.

    Returns:
        List of error messages. Empty list if valid.
    """
    issues: list[str] = []

    if len(config.data.delimiter) != 1:
        issues.append(f"Delimiter must be a single character, got {config.data.delimiter!r}")

    if config.report.rounding not in VALID_ROUNDING_MODES:
        issues.append(
            f"Invalid rounding mode: {config.report.rounding}. "
            f"Must be one of {sorted(VALID_ROUNDING_MODES)}"
        )

    if config.report.frequency_decimals < 0:
        issues.append("report.frequency_decimals must be non-negative")

    return issues


def validate_config(config: Config) -> list[str]:
    """Validate configuration and return list of warnings/errors.

    Args:
        config: Config object to validate.

    Returns:
        List of warning/error messages. Empty list if valid.
    """
    issues: list[str] = []

    if not config.data.statements_path.exists():
        issues.append(f"Statements file does not exist: {config.data.statements_path}")

    if config.data.stopwords_path is not None and not config.data.stopwords_path.exists():
        issues.append(f"Stopwords file does not exist: {config.data.stopwords_path}")

    if not config.data.lexicon_path.exists():
        issues.append(f"Lexicon file does not exist: {config.data.lexicon_path}")

    issues.extend(validate_settings(config))
    return issues
