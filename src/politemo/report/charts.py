"""
Chart rendering for statement report aggregates.

Renders aggregate tables as bar charts and token frequencies as word clouds.
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from wordcloud import WordCloud  # noqa: E402

from politemo.analysis import AggregateTable, word_frequencies  # noqa: E402
from politemo.config import ReportConfig  # noqa: E402
from politemo.pipeline import PipelineResult  # noqa: E402

logger = logging.getLogger(__name__)


def plot_bar(
    table: AggregateTable,
    path: str | Path,
    title: str = "",
    value: str = "count",
) -> Path | None:
    """Save a bar chart of an aggregate table.

    Single-key tables become a simple bar chart. Two-key tables become a
    grouped bar chart with the first key on the x axis and one bar per value
    of the last key.

    Args:
        table: Aggregate table to plot.
        path: Output image path.
        title: Chart title.
        value: Column to plot, "count" or "frequency".

    Returns:
        Path to the written image, or None if the table was empty.
    """
    if value not in ("count", "frequency"):
        raise ValueError(f"Unknown value column: {value}")

    if not len(table):
        logger.warning(f"No data to plot for {title or path}")
        return None

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = table.to_frame()
    keys = [key.value for key in table.group_by]

    fig, ax = plt.subplots(figsize=(10, 6))
    if len(keys) == 1:
        ax.bar(df[keys[0]].astype(str), df[value], color="steelblue", edgecolor="black")
        ax.set_xlabel(keys[0])
    else:
        pivot = df.pivot_table(
            index=keys[0], columns=keys[-1], values=value, aggfunc="sum", sort=False
        ).fillna(0)
        pivot.plot(kind="bar", ax=ax, width=0.8)
        ax.set_xlabel(keys[0])
        ax.legend(title=keys[-1], fontsize=8)

    ax.set_ylabel(value)
    ax.set_title(title)
    ax.tick_params(axis="x", labelrotation=45)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)

    logger.info(f"Saved bar chart: {path}")
    return path


def plot_wordcloud(
    frequencies: dict[str, int],
    path: str | Path,
    title: str = "",
    width: int = 800,
    height: int = 400,
) -> Path | None:
    """Save a word cloud of token frequencies.

    Args:
        frequencies: Mapping of word to count.
        path: Output image path.
        title: Chart title.
        width: Word cloud width in pixels.
        height: Word cloud height in pixels.

    Returns:
        Path to the written image, or None if there were no words.
    """
    if not frequencies:
        logger.warning(f"No words for word cloud {title or path}")
        return None

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    cloud = WordCloud(
        width=width,
        height=height,
        background_color="white",
        colormap="viridis",
        max_words=len(frequencies),
    ).generate_from_frequencies(frequencies)

    fig, ax = plt.subplots(figsize=(width / 80, height / 80))
    ax.imshow(cloud, interpolation="bilinear")
    ax.axis("off")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)

    logger.info(f"Saved word cloud: {path}")
    return path


def render_report(
    report: dict[str, AggregateTable],
    result: PipelineResult,
    config: ReportConfig,
) -> list[Path]:
    """Write one chart per report table plus a word cloud of filtered tokens.

    Args:
        report: Output of build_report.
        result: Pipeline result the report was built from.
        config: Report output settings.

    Returns:
        Paths of the images written.
    """
    output_dir = Path(config.output_dir)
    written = []

    for name, table in report.items():
        value = "frequency" if table.parent else "count"
        path = plot_bar(
            table,
            output_dir / f"{name}.{config.figure_format}",
            title=name.replace("_", " ").capitalize(),
            value=value,
        )
        if path:
            written.append(path)

    cloud = plot_wordcloud(
        word_frequencies(result.filtered, top_n=config.top_words),
        output_dir / f"wordcloud.{config.figure_format}",
        title=f"Top {config.top_words} words",
        width=config.wordcloud_width,
        height=config.wordcloud_height,
    )
    if cloud:
        written.append(cloud)

    logger.info(f"Rendered {len(written)} charts to {output_dir}")
    return written
