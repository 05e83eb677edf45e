"""
Recommendation rules: independent boolean triggers over the raw audit.

Rules read ``RawAudit`` facts, never metric scores, so scoring and
recommending stay two independent views of the same page.

Emission order (each rule fires at most once)
---------------------------------------------
    1. title    : not title.ok
    2. meta     : not meta.ok
    3. h1       : h1.count != 1
    4. images   : images.missing_alt > 0
    5. viewport : not mobile.viewport
    6. links    : links.broken > 0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from freeseo.models.audit import RawAudit
from freeseo.models.report import Recommendation


@dataclass(frozen=True)
class RecommendationRule:
    """A named trigger and the text it emits.

    Attributes:
        rule:      Stable slug stored on the emitted ``Recommendation``.
        text:      Suggestion text.
        triggered: Predicate over the raw audit.
    """

    rule: str
    text: str
    triggered: Callable[[RawAudit], bool]


RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        rule="title",
        text="Improve title length (50–60 chars) and include primary keyword near start.",
        triggered=lambda a: not a.title.ok,
    ),
    RecommendationRule(
        rule="meta",
        text="Add or improve meta description (120–160 chars).",
        triggered=lambda a: not a.meta.ok,
    ),
    RecommendationRule(
        rule="h1",
        text="Ensure exactly one H1 per page with relevant keyword.",
        triggered=lambda a: a.h1.count != 1,
    ),
    RecommendationRule(
        rule="images",
        text="Add descriptive alt text to images.",
        triggered=lambda a: a.images.missing_alt > 0,
    ),
    RecommendationRule(
        rule="viewport",
        text=(
            'Add <meta name="viewport" content="width=device-width, '
            'initial-scale=1"> for mobile.'
        ),
        triggered=lambda a: not a.mobile.viewport,
    ),
    RecommendationRule(
        rule="links",
        text="Fix or remove broken links.",
        triggered=lambda a: a.links.broken > 0,
    ),
)


def build_recommendations(audit: RawAudit) -> list[Recommendation]:
    """Evaluate every rule against ``audit`` in priority order.

    Returns:
        Recommendations for the rules that fired; empty for a clean page.
    """
    return [
        Recommendation(rule=r.rule, text=r.text)
        for r in RULES
        if r.triggered(audit)
    ]
