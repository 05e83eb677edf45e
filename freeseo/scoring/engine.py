"""
Metric scoring: converts a ``RawAudit`` into nine normalized 0-100 scores.

Formulas (all results clamped with ``max(lo, min(hi, raw))``)
--------------------------------------------------------------
    Page Title        90 if title.ok else 40
    Meta Description  90 if meta.ok  else 35
    H1 Tag            90 if count == 1, 60 if count > 1, 20 if count == 0
    Images & ALT      90 if missing_alt == 0 else max(30, 90 - missing_alt * 10)
    Mobile / Viewport 95 if viewport else 20
    Word Count        90 if count > 300 else max(25, round(count / 300 * 90))
    Links             total > 0: max(30, min(90, 90 - broken * 8)); else 40
    Readability       max(10, min(100, round(100 - grade * 8)))
    Page Speed        max(0, min(100, round(100 - timing_ms / 1000)))

Rounding is half-up (2.5 -> 3), not Python's banker's rounding, so a grade
of 4.5625 and a 1500 ms page score the same as they always have.

Page Speed historically had no lower bound.  It is floored at 0 here so every
``MetricScore`` satisfies the [0, 100] range; pages slower than 100 s all
score 0.  Readability and Page Speed clamp before rounding, so any finite
input scores without overflow.

Every function is pure: no I/O, no shared state, safe to call concurrently.
"""

from __future__ import annotations

from freeseo.models.audit import RawAudit
from freeseo.models.report import METRIC_NAMES, MetricScore
from freeseo.utils.numeric import round_half_up

SCORE_MIN = 0
SCORE_MAX = 100
WORD_COUNT_TARGET = 300


def score_title(audit: RawAudit) -> MetricScore:
    title = audit.title
    return _metric(
        "title",
        90 if title.ok else 40,
        value=title.value,
        length=title.length,
        ok=title.ok,
    )


def score_meta(audit: RawAudit) -> MetricScore:
    meta = audit.meta
    return _metric(
        "meta",
        90 if meta.ok else 35,
        value=meta.value,
        length=meta.length,
        ok=meta.ok,
    )


def score_h1(audit: RawAudit) -> MetricScore:
    """Exactly one H1 is ideal; several is a partial pass; none fails."""
    count = audit.h1.count
    if count == 1:
        raw = 90
    elif count > 1:
        raw = 60
    else:
        raw = 20
    return _metric("h1", raw, count=count, text=audit.h1.text)


def score_images(audit: RawAudit) -> MetricScore:
    """Linear 10-point penalty per image missing ALT text, floor 30.

    Pages with no images at all are not penalized.
    """
    missing = audit.images.missing_alt
    raw = 90 if missing == 0 else max(30, 90 - missing * 10)
    return _metric("images", raw, total=audit.images.total, missing_alt=missing)


def score_mobile(audit: RawAudit) -> MetricScore:
    viewport = audit.mobile.viewport
    return _metric("mobile", 95 if viewport else 20, viewport=viewport)


def score_words(audit: RawAudit) -> MetricScore:
    """Linear ramp up to ``WORD_COUNT_TARGET`` words, floor 25."""
    count = audit.words.count
    if count > WORD_COUNT_TARGET:
        raw = 90
    else:
        raw = max(25, round_half_up(count / WORD_COUNT_TARGET * 90))
    return _metric(
        "words",
        raw,
        count=count,
        top=[[term, freq] for term, freq in audit.words.top],
    )


def score_links(audit: RawAudit) -> MetricScore:
    """8-point penalty per broken link within [30, 90].

    A page with no links scores a flat 40 whatever ``broken`` says.
    """
    links = audit.links
    if links.total > 0:
        raw = max(30, min(90, 90 - links.broken * 8))
    else:
        raw = 40
    return _metric(
        "links",
        raw,
        total=links.total,
        internal=links.internal,
        external=links.external,
        broken=links.broken,
    )


def score_readability(audit: RawAudit) -> MetricScore:
    """Inverted grade level: each grade costs 8 points, within [10, 100]."""
    grade = audit.readability.score
    # Clamp before rounding: a very large grade overflows to -inf.
    raw = round_half_up(_clamp(100 - grade * 8, 10, 100))
    return _metric("readability", raw, grade=grade)


def score_speed(audit: RawAudit) -> MetricScore:
    """One point lost per second of server round-trip time."""
    timing = audit.speed.timing
    raw = round_half_up(_clamp(100 - timing / 1000, SCORE_MIN, SCORE_MAX))
    return _metric("speed", raw, timing_ms=timing, size_bytes=audit.speed.size)


_SCORERS = (
    score_title,
    score_meta,
    score_h1,
    score_images,
    score_mobile,
    score_words,
    score_links,
    score_readability,
    score_speed,
)


def compute_scores(audit: RawAudit) -> list[MetricScore]:
    """Score every metric for one audit.

    Args:
        audit: Validated raw audit.

    Returns:
        Nine ``MetricScore`` objects in canonical order (Title, Meta, H1,
        Images, Mobile, Words, Links, Readability, Speed).
    """
    return [scorer(audit) for scorer in _SCORERS]


# ── Helpers ───────────────────────────────────────────────────────────────────

def _metric(key: str, raw: int, **detail) -> MetricScore:
    return MetricScore(
        key=key,
        name=METRIC_NAMES[key],
        score=_clamp(raw, SCORE_MIN, SCORE_MAX),
        detail=detail,
    )


def _clamp(value: float, lo: int, hi: int) -> float:
    return max(lo, min(hi, value))
