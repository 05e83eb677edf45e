"""Tests for MetricScore, Recommendation, and Report models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from freeseo.models.report import (
    METRIC_KEYS,
    METRIC_ORDER,
    AuditSummary,
    MetricScore,
    Report,
)
from freeseo.pipeline.audit import run_audit
from tests.factories import FIXED_TIME


class TestMetricScore:
    def test_valid_construction(self):
        m = MetricScore(key="h1", name="H1 Tag", score=90, detail={"count": 1})
        assert m.score == 90
        assert m.detail == {"count": 1}

    def test_score_above_100_raises(self):
        with pytest.raises(ValidationError, match="score"):
            MetricScore(key="h1", name="H1 Tag", score=101)

    def test_negative_score_raises(self):
        with pytest.raises(ValidationError, match="score"):
            MetricScore(key="speed", name="Page Speed", score=-1)

    def test_detail_is_read_only(self):
        m = MetricScore(key="words", name="Word Count", score=90, detail={"top": [["seo", 3]]})
        with pytest.raises(TypeError):
            m.detail["top"] = []
        assert m.detail["top"] == (("seo", 3),)

    def test_detail_dumps_as_plain_containers(self):
        m = MetricScore(key="words", name="Word Count", score=90, detail={"top": [["seo", 3]]})
        assert m.model_dump()["detail"] == {"top": [["seo", 3]]}
        assert m.model_dump(mode="json")["detail"] == {"top": [["seo", 3]]}

    def test_detail_defaults_to_empty(self):
        assert dict(MetricScore(key="h1", name="H1 Tag", score=20).detail) == {}

    def test_unknown_key_raises(self):
        with pytest.raises(ValidationError, match="Unknown metric key"):
            MetricScore(key="favicon", name="Favicon", score=50)

    def test_canonical_order(self):
        assert METRIC_KEYS == (
            "title", "meta", "h1", "images", "mobile",
            "words", "links", "readability", "speed",
        )
        assert METRIC_ORDER[3] == ("images", "Images & ALT")


class TestReport:
    def test_overall_score_is_mean(self, clean_audit, fixed_time):
        report = run_audit(clean_audit, generated_at=fixed_time)
        assert report.overall_score == 86  # 771 / 9

    def test_overall_score_rounds_half_up(self):
        report = Report(
            url="https://example.com",
            generated_at=FIXED_TIME,
            scores=(
                MetricScore(key="title", name="Page Title", score=90),
                MetricScore(key="meta", name="Meta Description", score=35),
            ),
            summary=_summary(),
        )
        assert report.overall_score == 63

    def test_stored_report_detail_cannot_be_edited(self, clean_audit, fixed_time):
        report = run_audit(clean_audit, generated_at=fixed_time)
        with pytest.raises(TypeError):
            report.scores[0].detail["value"] = "tampered"
        assert report.scores[0].detail["value"] == clean_audit.title.value

    def test_score_for_lookup(self, clean_audit, fixed_time):
        report = run_audit(clean_audit, generated_at=fixed_time)
        assert report.score_for("mobile").score == 95

    def test_score_for_unknown_raises(self, clean_audit, fixed_time):
        report = run_audit(clean_audit, generated_at=fixed_time)
        with pytest.raises(KeyError):
            report.score_for("favicon")

    def test_report_is_frozen(self, clean_audit, fixed_time):
        report = run_audit(clean_audit, generated_at=fixed_time)
        with pytest.raises(ValidationError):
            report.url = "https://elsewhere.example"


def _summary() -> AuditSummary:
    return AuditSummary(
        title_length=0,
        meta_length=0,
        h1_count=1,
        images_total=0,
        images_missing_alt=0,
        word_count=0,
        links_total=0,
        links_broken=0,
        readability_grade=0.0,
    )
