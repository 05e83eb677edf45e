"""Tests for freeseo.reporting.formatters."""

from __future__ import annotations

import pytest

from freeseo.models.audit import LinkEntry
from freeseo.models.report import MetricScore, Recommendation
from freeseo.pipeline.audit import run_audit
from freeseo.reporting.formatters import (
    BAR_WIDTH,
    format_link_sample,
    format_metric_card,
    format_progress_bar,
    format_recommendations,
    format_report_text,
)


# ── format_progress_bar ───────────────────────────────────────────────────────


def test_progress_bar_full() -> None:
    assert format_progress_bar(100) == "[" + "#" * BAR_WIDTH + "]"


def test_progress_bar_half() -> None:
    bar = format_progress_bar(50)
    assert bar.count("#") == BAR_WIDTH // 2
    assert len(bar) == BAR_WIDTH + 2


def test_progress_bar_zero_keeps_sliver() -> None:
    """A zero score still draws the 6% minimum."""
    assert format_progress_bar(0).count("#") == 1


# ── format_metric_card ────────────────────────────────────────────────────────


def test_metric_card_shows_name_score_and_detail() -> None:
    card = format_metric_card(
        MetricScore(key="images", name="Images & ALT", score=70,
                    detail={"total": 12, "missing_alt": 2})
    )
    first = card.splitlines()[0]
    assert first.strip().startswith("Images & ALT")
    assert first.rstrip().endswith("70")
    assert "missing_alt: 2" in card


def test_metric_card_formats_bool_and_none() -> None:
    card = format_metric_card(
        MetricScore(key="mobile", name="Mobile / Viewport", score=20,
                    detail={"viewport": False, "note": None})
    )
    assert "viewport: no" in card
    assert "note: -" in card


def test_metric_card_without_detail_has_two_lines() -> None:
    card = format_metric_card(MetricScore(key="title", name="Page Title", score=90))
    assert len(card.splitlines()) == 2


# ── format_recommendations / format_link_sample ──────────────────────────────


def test_recommendations_numbered() -> None:
    text = format_recommendations(
        (Recommendation(rule="title", text="Fix title"),
         Recommendation(rule="links", text="Fix links"))
    )
    lines = text.splitlines()
    assert lines[0].strip() == "1. Fix title"
    assert lines[1].strip() == "2. Fix links"


def test_recommendations_empty() -> None:
    assert "no issues" in format_recommendations(())


def test_link_sample_missing_status_shows_ok() -> None:
    text = format_link_sample(
        (LinkEntry(href="https://a.example", status="404"),
         LinkEntry(href="https://b.example"))
    )
    assert "https://a.example -- 404" in text
    assert "https://b.example -- OK" in text


def test_link_sample_empty() -> None:
    assert "(no links)" in format_link_sample(())


# ── format_report_text ────────────────────────────────────────────────────────


@pytest.fixture
def report(make_audit, fixed_time):
    return run_audit(
        make_audit(title={"ok": False, "value": "Short"}, readability={"score": 8.0}),
        generated_at=fixed_time,
    )


def test_report_text_sections(report) -> None:
    text = format_report_text(report)
    assert "=== FreeSEO Audit Report ===" in text
    assert "URL:       https://example.com/page" in text
    assert "2026-03-14 09:30:00 UTC" in text
    assert "--- Summary ---" in text
    assert "Readability: grade 8.0" in text
    assert "--- Top Issues & Recommendations ---" in text
    assert "--- Links (first 5) ---" in text


def test_report_text_lists_every_metric(report) -> None:
    text = format_report_text(report)
    for metric in report.scores:
        assert metric.name in text


def test_report_text_custom_title(report) -> None:
    assert "=== Acme Audit ===" in format_report_text(report, title="Acme Audit")
