"""
Printable HTML rendering of an audit report.

``build_printable_report()`` returns a self-contained HTML document (inline
CSS, no scripts, no external assets) ready for a browser's "Save as PDF".

Every string that originates from the audited page or the collector (title,
meta text, URLs, link statuses) and every recommendation text is passed
through ``html.escape``.  The viewport recommendation contains a literal
``<meta>`` tag, which must print as text, not be parsed as markup.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path

from freeseo.models.report import Report
from freeseo.utils.time_utils import format_report_timestamp

logger = logging.getLogger(__name__)

_CSS = (
    "body{font-family:Arial,Helvetica,sans-serif;padding:20px;color:#111}"
    "h1{color:#6b46c1}"
    "table{border-collapse:collapse}"
    "td,th{padding:4px 10px;border-bottom:1px solid #ddd;text-align:left}"
)


def _e(value: object) -> str:
    return html.escape("" if value is None else str(value), quote=True)


def build_printable_report(report: Report, title: str = "FreeSEO Audit Report") -> str:
    """Render ``report`` as a standalone HTML document.

    Sections: heading, URL + generation time, summary bullets, score table,
    numbered recommendations, numbered link sample with status.

    Args:
        report: Synthesized report.
        title:  Document heading and ``<title>``.

    Returns:
        Complete ``<!doctype html>`` document as a string.
    """
    s = report.summary
    rows: list[str] = []
    rows.append(f"<h1>{_e(title)}</h1>")
    rows.append(
        f"<p><strong>URL:</strong> {_e(report.url)} — "
        f"<strong>Date:</strong> {_e(format_report_timestamp(report.generated_at))}</p>"
    )

    rows.append("<h2>Summary</h2>")
    rows.append(
        "<ul>"
        f"<li>Title: {_e(s.title_text)} ({s.title_length} chars)</li>"
        f"<li>Meta: {_e(s.meta_text)} ({s.meta_length} chars)</li>"
        f"<li>H1 count: {s.h1_count}</li>"
        f"<li>Images: {s.images_total} ({s.images_missing_alt} missing alt)</li>"
        f"<li>Words: {s.word_count}</li>"
        f"<li>Links: {s.links_total} (broken: {s.links_broken})</li>"
        f"<li>Readability grade: {s.readability_grade:.1f}</li>"
        "</ul>"
    )

    rows.append("<h2>Scores</h2>")
    rows.append("<table><tr><th>Metric</th><th>Score</th></tr>")
    for metric in report.scores:
        rows.append(f"<tr><td>{_e(metric.name)}</td><td>{metric.score}</td></tr>")
    rows.append(
        f"<tr><th>Overall</th><th>{report.overall_score}</th></tr></table>"
    )

    rows.append("<h2>Top Issues &amp; Recommendations</h2>")
    rows.append(
        "<ol>" + "".join(f"<li>{_e(r.text)}</li>" for r in report.recommendations) + "</ol>"
    )

    rows.append(f"<h2>Links (first {len(report.link_sample)})</h2><ol>")
    for link in report.link_sample:
        rows.append(f"<li>{_e(link.href)} — {_e(link.status or 'OK')}</li>")
    rows.append("</ol>")

    return (
        '<!doctype html><html><head><meta charset="utf-8">'
        f"<title>{_e(title)}</title><style>{_CSS}</style></head>"
        f"<body>{''.join(rows)}</body></html>"
    )


def write_printable_report(
    report: Report,
    path: Path,
    title: str = "FreeSEO Audit Report",
) -> Path:
    """Write the printable HTML document to ``path`` (parent dirs created).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_printable_report(report, title=title), encoding="utf-8")
    logger.info("Printable report written: %s", path)
    return path
