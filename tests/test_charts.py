"""Tests for chart rendering."""

import pandas as pd

from politemo.analysis import GroupKey, aggregate
from politemo.config import ReportConfig, load_config
from politemo.pipeline import build_report, run_pipeline
from politemo.report import plot_bar, plot_wordcloud, render_report


class TestPlotBar:
    """Tests for plot_bar."""

    def test_single_key(self, tmp_path):
        """Test a simple bar chart is written."""
        df = pd.DataFrame({"label": ["true", "false", "false"]})
        table = aggregate(df, GroupKey.LABEL)

        path = plot_bar(table, tmp_path / "labels.png", title="Labels")

        assert path.exists()
        assert path.stat().st_size > 0

    def test_two_keys(self, tmp_path):
        """Test a grouped bar chart is written."""
        df = pd.DataFrame({
            "party": ["democrat", "democrat", "republican"],
            "category": ["joy", "anger", "anger"],
        })
        table = aggregate(df, [GroupKey.PARTY, GroupKey.CATEGORY], parent=GroupKey.PARTY)

        path = plot_bar(table, tmp_path / "nested" / "party.png", value="frequency")

        assert path.exists()

    def test_empty_table_skipped(self, tmp_path):
        """Test that an empty table writes nothing."""
        table = aggregate(pd.DataFrame({"party": []}), GroupKey.PARTY)

        assert plot_bar(table, tmp_path / "empty.png") is None
        assert not (tmp_path / "empty.png").exists()


class TestPlotWordcloud:
    """Tests for plot_wordcloud."""

    def test_writes_image(self, tmp_path):
        """Test a word cloud is written."""
        path = plot_wordcloud(
            {"taxes": 5, "war": 3, "jobs": 1},
            tmp_path / "cloud.png",
            width=200,
            height=100,
        )

        assert path.exists()

    def test_no_words_skipped(self, tmp_path):
        """Test that empty frequencies write nothing."""
        assert plot_wordcloud({}, tmp_path / "cloud.png") is None


class TestRenderReport:
    """Tests for render_report."""

    def test_renders_all_sections(self, sample_config_file, tmp_path):
        """Test that every report table and the word cloud are rendered."""
        config = load_config(config_path=sample_config_file)
        result = run_pipeline(config)
        report = build_report(result, config)
        report_config = ReportConfig(
            output_dir=tmp_path / "figures",
            wordcloud_width=200,
            wordcloud_height=100,
        )

        written = render_report(report, result, report_config)

        assert len(written) == len(report) + 1
        assert (tmp_path / "figures" / "wordcloud.png").exists()
        assert (tmp_path / "figures" / "category_by_label.png").exists()
