"""
Report CLI for politemo.

Runs the statement emotion pipeline and prints or renders the report.
"""

from __future__ import annotations

import logging
import sys

import click

from politemo.analysis import AggregateTable
from politemo.config import load_config, validate_config, validate_settings
from politemo.pipeline import build_report, load_reference_data, run_pipeline

logger = logging.getLogger(__name__)


def _echo_table(name: str, table: AggregateTable) -> None:
    """Print an aggregate table as aligned text."""
    click.echo(f"\n{name.replace('_', ' ').capitalize()}:")
    if not len(table):
        click.echo("  (no data)")
        return
    for row in table:
        key = " / ".join(row.key)
        click.echo(f"  {key:<40} {row.count:>8} {row.frequency:>6.2f}")


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Politemo report tool.

    Tag political statements with lexicon emotions and summarize them.
    """
    ctx.ensure_object(dict)

    ctx.obj["config"] = load_config(config_path=config) if config else load_config()

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--stopwords",
    "-s",
    type=click.Path(),
    help="Stopword list (default: from config, else spaCy English stop words)",
)
@click.option(
    "--lexicon",
    "-l",
    type=click.Path(),
    help="Emotion lexicon file (default: from config)",
)
@click.pass_context
def run(
    ctx: click.Context,
    input_file: str,
    stopwords: str | None,
    lexicon: str | None,
) -> None:
    """Run the pipeline over a statements file and print the report.

    Example:
        politemo-report run data/raw/train.csv -l data/reference/nrc.txt
    """
    config = ctx.obj["config"]

    issues = validate_settings(config)
    if issues:
        for issue in issues:
            click.echo(f"Error: {issue}", err=True)
        sys.exit(1)

    click.echo(f"Loading statements from: {input_file}")

    try:
        reference = load_reference_data(
            config, stopwords_path=stopwords, lexicon_path=lexicon
        )
        result = run_pipeline(config, statements_path=input_file, reference=reference)

        click.echo(f"\n{'='*50}")
        for stage, count in result.summary().items():
            click.echo(f"  {stage}: {count}")

        report = build_report(result, config)
        for name, table in report.items():
            _echo_table(name, table)

        if config.report.make_charts:
            from politemo.report import render_report

            written = render_report(report, result, config.report)
            click.echo(f"\nSaved {len(written)} charts to: {config.report.output_dir}")

        click.echo(f"{'='*50}")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        logger.exception("Report failed")
        sys.exit(1)


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Check configured paths and settings."""
    issues = validate_config(ctx.obj["config"])

    if not issues:
        click.echo("Configuration OK")
        return

    for issue in issues:
        click.echo(f"  - {issue}", err=True)
    sys.exit(1)


def main() -> None:
    """Main entry point for the report CLI."""
    cli()


if __name__ == "__main__":
    main()
