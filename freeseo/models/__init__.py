"""
Pydantic domain models.

Modules:
  audit  — ``RawAudit`` and its nested fact models (collector input).
  report — ``MetricScore``, ``Recommendation``, ``AuditSummary``, ``Report``.
"""
