"""
ASCII terminal formatters for audit reports.

All formatters accept a ``Report`` (or pieces of one) and return plain
multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Metric cards
------------
Each ``MetricScore`` renders as a small card with a progress bar::

  Images & ALT                                          70
  [##############      ]
    total: 12  missing_alt: 2

The bar is never drawn below 6% so a zero score still shows a sliver.
"""

from __future__ import annotations

from freeseo.models.audit import LinkEntry
from freeseo.models.report import MetricScore, Recommendation, Report
from freeseo.utils.time_utils import format_report_timestamp

BAR_WIDTH = 20
CARD_WIDTH = 60
_BAR_MIN_PCT = 6


def format_progress_bar(score: int, width: int = BAR_WIDTH) -> str:
    """Return ``[####    ]`` filled proportionally to ``score`` (0-100)."""
    pct = max(_BAR_MIN_PCT, min(100, score))
    filled = round(width * pct / 100)
    return "[" + "#" * filled + " " * (width - filled) + "]"


def format_metric_card(metric: MetricScore) -> str:
    """Render one metric as a card: name + score, bar, detail fields.

    Only the ``MetricScore`` is read, so cards can be drawn for any
    metric source.
    """
    score_str = str(metric.score)
    lines = [
        f"  {metric.name:<{CARD_WIDTH - len(score_str) - 2}}{score_str}",
        f"  {format_progress_bar(metric.score)}",
    ]
    detail_parts = [f"{k}: {_detail_value(v)}" for k, v in metric.detail.items()]
    if detail_parts:
        lines.append("    " + "  ".join(detail_parts))
    return "\n".join(lines)


def format_score_cards(scores: tuple[MetricScore, ...] | list[MetricScore]) -> str:
    return "\n\n".join(format_metric_card(m) for m in scores)


def format_recommendations(recommendations: tuple[Recommendation, ...]) -> str:
    """Numbered recommendation list, or a clean-bill line when empty."""
    if not recommendations:
        return "  (no issues found)"
    return "\n".join(
        f"  {i:>2}. {rec.text}" for i, rec in enumerate(recommendations, start=1)
    )


def format_link_sample(links: tuple[LinkEntry, ...]) -> str:
    """Numbered link list; links without a probe status show ``OK``."""
    if not links:
        return "  (no links)"
    return "\n".join(
        f"  {i:>2}. {link.href} -- {link.status or 'OK'}"
        for i, link in enumerate(links, start=1)
    )


def format_report_text(report: Report, title: str = "FreeSEO Audit Report") -> str:
    """Full terminal rendering of a report.

    Sections: header, summary, metric cards, recommendations, link sample.
    """
    s = report.summary
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== {title} ===")
    lines.append(f"  URL:       {report.url}")
    lines.append(f"  Generated: {format_report_timestamp(report.generated_at)}")
    lines.append(f"  Overall:   {report.overall_score}/100")

    lines.append("")
    lines.append("--- Summary ---")
    lines.append(f"  Title:       {s.title_text or ''} ({s.title_length} chars)")
    lines.append(f"  Meta:        {s.meta_text or ''} ({s.meta_length} chars)")
    lines.append(f"  H1 count:    {s.h1_count}")
    lines.append(f"  Images:      {s.images_total} ({s.images_missing_alt} missing alt)")
    lines.append(f"  Words:       {s.word_count}")
    lines.append(f"  Links:       {s.links_total} (broken: {s.links_broken})")
    lines.append(f"  Readability: grade {s.readability_grade:.1f}")

    lines.append("")
    lines.append("--- Scores ---")
    lines.append(format_score_cards(report.scores))

    lines.append("")
    lines.append("--- Top Issues & Recommendations ---")
    lines.append(format_recommendations(report.recommendations))

    lines.append("")
    lines.append(f"--- Links (first {len(report.link_sample)}) ---")
    lines.append(format_link_sample(report.link_sample))
    return "\n".join(lines)


def _detail_value(v: object) -> str:
    if v is None:
        return "-"
    if isinstance(v, bool):
        return "yes" if v else "no"
    if isinstance(v, float):
        return f"{v:.1f}"
    if isinstance(v, (list, tuple)):
        text = ", ".join(
            f"{item[0]} ({item[1]})" if isinstance(item, (list, tuple)) and len(item) == 2
            else str(item)
            for item in v
        )
        return text[:80] or "-"
    return str(v)
