"""
Derived audit output models: metric scores, recommendations, and the report.

``MetricScore`` is one normalized 0-100 judgement about one audited dimension.
``Recommendation`` is a remediation suggestion keyed by the rule that fired.
``Report`` is the immutable, renderer-agnostic document for one audit.

All models are frozen.  A ``Report`` is a value: it is built once by
``synthesize_report()`` and never mutated.  Renderers read only the report;
the raw facts they restate are copied into ``Report.summary``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from freeseo.models.audit import LinkEntry
from freeseo.utils.numeric import round_half_up

# Canonical metric order: (key, display name).  Display/report contract.
METRIC_ORDER: tuple[tuple[str, str], ...] = (
    ("title",       "Page Title"),
    ("meta",        "Meta Description"),
    ("h1",          "H1 Tag"),
    ("images",      "Images & ALT"),
    ("mobile",      "Mobile / Viewport"),
    ("words",       "Word Count"),
    ("links",       "Links"),
    ("readability", "Readability"),
    ("speed",       "Page Speed"),
)

METRIC_KEYS: tuple[str, ...] = tuple(key for key, _ in METRIC_ORDER)
METRIC_NAMES: dict[str, str] = dict(METRIC_ORDER)


class MetricScore(BaseModel):
    """A single normalized judgement about one audited dimension.

    Attributes:
        key: Stable metric slug, one of ``METRIC_KEYS``.
        name: Display name, e.g. ``"Images & ALT"``.
        score: Integer in [0, 100].
        detail: Raw facts needed to display this metric.  Stored read-only
            (nested lists become tuples); dumped back to plain dicts and lists.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    score: int
    detail: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if v not in METRIC_NAMES:
            raise ValueError(f"Unknown metric key '{v}'. Expected one of {list(METRIC_KEYS)}.")
        return v

    @field_validator("score")
    @classmethod
    def validate_score_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"score must be in [0, 100], got {v}.")
        return v

    @field_validator("detail")
    @classmethod
    def freeze_detail(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze(v)

    @field_serializer("detail")
    def serialize_detail(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return _thaw(v)


class Recommendation(BaseModel):
    """A remediation suggestion.

    Attributes:
        rule: Slug of the trigger that produced it (``"title"``, ``"h1"``...).
        text: Human-readable suggestion.
    """

    model_config = ConfigDict(frozen=True)

    rule: str
    text: str


class AuditSummary(BaseModel):
    """Raw facts restated in the printable summary block."""

    model_config = ConfigDict(frozen=True)

    title_text: Optional[str] = None
    title_length: int
    meta_text: Optional[str] = None
    meta_length: int
    h1_count: int
    images_total: int
    images_missing_alt: int
    word_count: int
    links_total: int
    links_broken: int
    readability_grade: float


class Report(BaseModel):
    """The immutable document summarizing one audit.

    Attributes:
        url: Audited URL.
        generated_at: UTC timestamp the report was synthesized.
        scores: The nine ``MetricScore`` values in canonical order.
        recommendations: Triggered recommendations in fixed priority order.
        link_sample: Prefix of the audit's link list (at most 30 by default).
        summary: Raw facts for the printable summary.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    generated_at: datetime
    scores: tuple[MetricScore, ...]
    recommendations: tuple[Recommendation, ...] = ()
    link_sample: tuple[LinkEntry, ...] = ()
    summary: AuditSummary

    @property
    def overall_score(self) -> int:
        """Mean of all metric scores rounded half-up (0 when there are none)."""
        if not self.scores:
            return 0
        return round_half_up(sum(s.score for s in self.scores) / len(self.scores))

    def score_for(self, key: str) -> MetricScore:
        """Return the ``MetricScore`` with the given key.

        Raises:
            KeyError: If no score with that key is present.
        """
        for s in self.scores:
            if s.key == key:
                return s
        raise KeyError(key)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value
