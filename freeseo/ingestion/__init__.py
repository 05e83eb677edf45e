"""
Ingestion layer — raw audit loading and the collector HTTP client.

Submodules:
  loader           — JSON file / dict -> validated ``RawAudit``
  collector_client — httpx client for the URL-fetch and HTML-parse backend

Configuration (.env, gitignored):
  FREESEO_COLLECTOR_URL      — collector base URL (default: http://localhost:3000)
"""
