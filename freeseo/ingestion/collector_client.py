"""
Audit collector client — HTTP access to the page-analysis backend.

The collector does the network and DOM work (fetching a URL or parsing pasted
HTML) and answers with a raw audit JSON object.  Two endpoints:

  GET  {base_url}/api/analyze?url=<url>
  POST {base_url}/api/analyze-html      body: {"html": "<...>"}

Both responses normalize to the same ``RawAudit`` shape, so scoring never
needs to know which one produced an audit.

Configuration (config/default.toml ``[collector]`` or .env)::

  FREESEO_COLLECTOR_URL=http://localhost:3000
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

import httpx

from freeseo.config import CollectorConfig
from freeseo.errors import CollectorError
from freeseo.ingestion.loader import parse_raw_audit
from freeseo.models.audit import RawAudit

logger = logging.getLogger(__name__)


class AuditCollectorClient:
    """Client for the audit collector backend.

    Usage::

        client = AuditCollectorClient(config.collector)
        audit = client.analyze_url("https://example.com")

    Pass ``http_client`` to reuse a connection pool or to inject an
    ``httpx.MockTransport`` in tests.

    Attributes:
        base_url: Collector root URL without trailing slash.
        timeout_seconds: Per-request timeout.
    """

    ANALYZE_URL_PATH: ClassVar[str] = "/api/analyze"
    ANALYZE_HTML_PATH: ClassVar[str] = "/api/analyze-html"

    def __init__(
        self,
        config: Optional[CollectorConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        config = config or CollectorConfig()
        self.base_url = config.base_url
        self.timeout_seconds = config.timeout_seconds
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=config.timeout_seconds,
            headers={"User-Agent": config.user_agent},
        )

    def __enter__(self) -> "AuditCollectorClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    # ── Endpoints ─────────────────────────────────────────────────────────────

    def analyze_url(self, url: str) -> RawAudit:
        """Ask the collector to fetch and audit ``url``.

        Raises:
            ValueError: If ``url`` is blank.
            CollectorError: On transport failure or a non-2xx response.
            InvalidAuditError: If the collector's JSON is not a valid audit.
        """
        url = url.strip()
        if not url:
            raise ValueError("Please enter a URL.")
        payload = self._request("GET", self.ANALYZE_URL_PATH, params={"url": url})
        return parse_raw_audit(payload)

    def analyze_html(self, html: str) -> RawAudit:
        """Ask the collector to audit pasted HTML markup.

        Raises:
            ValueError: If ``html`` is blank.
            CollectorError: On transport failure or a non-2xx response.
            InvalidAuditError: If the collector's JSON is not a valid audit.
        """
        html = html.strip()
        if not html:
            raise ValueError("Paste HTML first.")
        payload = self._request("POST", self.ANALYZE_HTML_PATH, json={"html": html})
        return parse_raw_audit(payload)

    # ── Transport ─────────────────────────────────────────────────────────────

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        target = f"{self.base_url}{path}"
        try:
            resp = self._client.request(
                method, target, timeout=self.timeout_seconds, **kwargs
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("Collector %s %s returned %d", method, path, status)
            raise CollectorError(f"Server error: {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.warning("Collector %s %s failed: %s", method, path, exc)
            raise CollectorError(f"Collector unreachable at {target}: {exc}") from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise CollectorError(f"Collector returned non-JSON body from {path}.") from exc
