"""
Report rendering for politemo.

Provides bar chart and word cloud output for report aggregates.
"""

from politemo.report.charts import plot_bar, plot_wordcloud, render_report

__all__ = [
    "plot_bar",
    "plot_wordcloud",
    "render_report",
]
