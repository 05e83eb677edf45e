"""
Audit pipeline composition and session bookkeeping.

Modules:
  audit   — ``run_audit()``, ``render_report()``, ``AuditService``.
  session — ``ReportSessionStore`` (per-session latest report).
"""
