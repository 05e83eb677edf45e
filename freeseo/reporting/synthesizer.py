"""
Report synthesis: assembles the immutable ``Report`` for one audit.

``synthesize_report()`` is pure apart from reading the clock when no
``generated_at`` is supplied.  Pass an explicit timestamp for byte-identical
output across calls.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from freeseo.models.audit import RawAudit
from freeseo.models.report import METRIC_KEYS, AuditSummary, MetricScore, Report
from freeseo.recommendations.rules import build_recommendations
from freeseo.utils.time_utils import utcnow

logger = logging.getLogger(__name__)

DEFAULT_LINK_SAMPLE_SIZE = 30


def synthesize_report(
    audit: RawAudit,
    scores: Sequence[MetricScore],
    generated_at: datetime | None = None,
    link_sample_size: int = DEFAULT_LINK_SAMPLE_SIZE,
) -> Report:
    """Build the report document for one audit.

    Args:
        audit:            Validated raw audit.
        scores:           Output of ``compute_scores(audit)``.
        generated_at:     Report timestamp.  Defaults to the current UTC time.
        link_sample_size: Number of leading links to keep, in input order.

    Returns:
        Frozen ``Report``.

    Raises:
        ValueError: If ``scores`` is not the nine metrics in canonical order,
            or ``link_sample_size`` is negative.
    """
    keys = tuple(s.key for s in scores)
    if keys != METRIC_KEYS:
        raise ValueError(
            f"scores must cover {list(METRIC_KEYS)} in order, got {list(keys)}."
        )
    if link_sample_size < 0:
        raise ValueError(f"link_sample_size must be >= 0, got {link_sample_size}.")

    recommendations = build_recommendations(audit)
    logger.debug(
        "synthesize_report: %s -> %d recommendation(s)",
        audit.url, len(recommendations),
    )

    return Report(
        url=audit.url,
        generated_at=generated_at or utcnow(),
        scores=tuple(scores),
        recommendations=tuple(recommendations),
        link_sample=audit.links.entries[:link_sample_size],
        summary=summarize_audit(audit),
    )


def summarize_audit(audit: RawAudit) -> AuditSummary:
    """Copy the facts the printable summary restates out of the raw audit."""
    return AuditSummary(
        title_text=audit.title.value,
        title_length=audit.title.length,
        meta_text=audit.meta.value,
        meta_length=audit.meta.length,
        h1_count=audit.h1.count,
        images_total=audit.images.total,
        images_missing_alt=audit.images.missing_alt,
        word_count=audit.words.count,
        links_total=audit.links.total,
        links_broken=audit.links.broken,
        readability_grade=audit.readability.score,
    )
