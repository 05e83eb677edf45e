"""
Audit pipeline: RawAudit -> scores -> Report, plus session-aware service.

``run_audit()`` is the pure composition of the scoring engine and the report
synthesizer.  ``AuditService`` adds the stateful parts a host application
needs: collector calls, per-session bookkeeping, and export rendering.

Usage::

    service = AuditService(config, ReportSessionStore())
    service.analyze_url("session-abc", "https://example.com")
    html_doc = service.export("session-abc", "html")
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Literal, Optional

from freeseo.config import AppConfig
from freeseo.ingestion.collector_client import AuditCollectorClient
from freeseo.models.audit import RawAudit
from freeseo.models.report import Report
from freeseo.pipeline.session import ReportSessionStore
from freeseo.reporting.export import report_to_json
from freeseo.reporting.formatters import format_report_text
from freeseo.reporting.printable import build_printable_report
from freeseo.reporting.synthesizer import DEFAULT_LINK_SAMPLE_SIZE, synthesize_report
from freeseo.scoring.engine import compute_scores

logger = logging.getLogger(__name__)

ExportFormat = Literal["text", "json", "html"]
EXPORT_FORMATS: tuple[str, ...] = ("text", "json", "html")


def run_audit(
    audit: RawAudit,
    generated_at: datetime | None = None,
    link_sample_size: int = DEFAULT_LINK_SAMPLE_SIZE,
) -> Report:
    """Score ``audit`` and synthesize its report.

    Args:
        audit:            Validated raw audit.
        generated_at:     Report timestamp; defaults to the current UTC time.
        link_sample_size: Leading links kept in the report.

    Returns:
        Frozen ``Report``.
    """
    scores = compute_scores(audit)
    report = synthesize_report(
        audit,
        scores,
        generated_at=generated_at,
        link_sample_size=link_sample_size,
    )
    logger.info(
        "Audited %s: overall %d, %d recommendation(s)",
        report.url, report.overall_score, len(report.recommendations),
        extra={"url": report.url},
    )
    return report


def render_report(
    report: Report,
    fmt: str,
    title: str = "FreeSEO Audit Report",
) -> str:
    """Render ``report`` as terminal text, JSON, or printable HTML.

    Raises:
        ValueError: If ``fmt`` is not one of ``EXPORT_FORMATS``.
    """
    if fmt == "text":
        return format_report_text(report, title=title)
    if fmt == "json":
        return report_to_json(report)
    if fmt == "html":
        return build_printable_report(report, title=title)
    raise ValueError(f"Unknown export format '{fmt}'. Expected one of {list(EXPORT_FORMATS)}.")


class AuditService:
    """Session-aware front door for hosting applications.

    Each ``analyze*`` call stores the new report as the session's latest;
    ``export`` only ever reads that session's report.

    Attributes:
        config: Application configuration.
        store:  Per-session latest-report store.
    """

    def __init__(
        self,
        config: AppConfig,
        store: ReportSessionStore,
        client: Optional[AuditCollectorClient] = None,
    ) -> None:
        self.config = config
        self.store = store
        self._client = client

    @property
    def client(self) -> AuditCollectorClient:
        if self._client is None:
            self._client = AuditCollectorClient(self.config.collector)
        return self._client

    def analyze(
        self,
        session_id: str,
        audit: RawAudit,
        generated_at: datetime | None = None,
    ) -> Report:
        """Run the pipeline on an already-collected audit and remember it."""
        report = run_audit(
            audit,
            generated_at=generated_at,
            link_sample_size=self.config.report.link_sample_size,
        )
        self.store.remember(session_id, report)
        logger.debug("Stored report for session %s", session_id, extra={"session_id": session_id})
        return report

    def analyze_url(self, session_id: str, url: str) -> Report:
        """Collect ``url`` via the collector, then analyze.

        A failed collection leaves the session's previous report untouched.
        """
        return self.analyze(session_id, self.client.analyze_url(url))

    def analyze_html(self, session_id: str, html: str) -> Report:
        return self.analyze(session_id, self.client.analyze_html(html))

    def export(self, session_id: str, fmt: ExportFormat = "html") -> str:
        """Render the session's latest report.

        Raises:
            NoReportError: If the session has no completed analysis.
            ValueError: If ``fmt`` is unknown.
        """
        report = self.store.require(session_id)
        return render_report(report, fmt, title=self.config.report.title)

    def close(self) -> None:
        """Release the collector client if one was created."""
        if self._client is not None:
            self._client.close()
