"""
Machine-readable export of audit reports.

``report_to_dict()`` is the canonical JSON shape of a ``Report``: the model
dump plus ``overall_score``, with ``generated_at`` as an ISO-8601 string.

CSV exports are flat (one row per metric) so several audits can be stacked
and compared in a spreadsheet or pandas without any pre-processing step.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from freeseo.models.report import Report

SCORE_CSV_FIELDS = ["url", "generated_at", "metric_key", "metric_name", "score"]


def report_to_dict(report: Report) -> dict:
    """Return a JSON-safe dict for ``report``."""
    data = report.model_dump(mode="json")
    data["overall_score"] = report.overall_score
    return data


def report_to_json(report: Report) -> str:
    return json.dumps(report_to_dict(report), indent=2, ensure_ascii=False)


def flatten_scores_for_export(report: Report) -> list[dict]:
    """One flat row per metric: url, generated_at, key, name, score."""
    generated_at = report.generated_at.isoformat()
    return [
        {
            "url":          report.url,
            "generated_at": generated_at,
            "metric_key":   m.key,
            "metric_name":  m.name,
            "score":        m.score,
        }
        for m in report.scores
    ]


def export_to_json(report: Report, path: Path) -> Path:
    """Write ``report`` as pretty-printed JSON (parent dirs created).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report_to_json(report), encoding="utf-8")
    return path


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    Row dicts, e.g. from ``flatten_scores_for_export()``.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path
