"""
Raw page-audit model: the facts a collector gathered about one page.

``RawAudit`` is the only input to scoring and report synthesis. It is produced
by an external collector (URL fetch or pasted-HTML parse) and arrives as JSON
in the collector's camelCase wire shape, e.g. ``images.missingAlt``.

Python attributes are snake_case; wire aliases are accepted on input and
emitted by ``model_dump(by_alias=True)``.  All models are frozen.

Invariants enforced on construction (``pydantic.ValidationError`` otherwise):
  - every count is a non-negative integer (JSON booleans are not counts)
  - ``images.missing_alt <= images.total``
  - ``links.broken <= links.total``
  - ``readability.score`` is finite and ``>= 0``
  - ``speed.timing <= MAX_TIMING_MS``
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    field_validator,
    model_validator,
)

# One day.  Longer round trips are collector faults, not slow pages.
MAX_TIMING_MS = 86_400_000


def _check_non_negative(v: int, name: str) -> int:
    if v < 0:
        raise ValueError(f"{name} must be non-negative, got {v}.")
    return v


class TextFacts(BaseModel):
    """Title or meta-description facts.

    Attributes:
        value: Raw text, or ``None`` when the tag is absent.
        length: Character count as measured by the collector.
        ok: Collector's verdict on whether the length is acceptable.
    """

    model_config = ConfigDict(frozen=True)

    value: Optional[str] = None
    length: StrictInt
    ok: bool

    @field_validator("length")
    @classmethod
    def validate_length(cls, v: int) -> int:
        return _check_non_negative(v, "length")


class HeadingFacts(BaseModel):
    """H1 count plus the text of the first H1 (if any)."""

    model_config = ConfigDict(frozen=True)

    count: StrictInt
    text: Optional[str] = None

    @field_validator("count")
    @classmethod
    def validate_count(cls, v: int) -> int:
        return _check_non_negative(v, "h1.count")


class ImageFacts(BaseModel):
    """Image inventory: total ``<img>`` tags and how many lack ALT text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: StrictInt
    missing_alt: StrictInt = Field(alias="missingAlt")

    @field_validator("total", "missing_alt")
    @classmethod
    def validate_counts(cls, v: int) -> int:
        return _check_non_negative(v, "image count")

    @model_validator(mode="after")
    def validate_missing_within_total(self) -> "ImageFacts":
        if self.missing_alt > self.total:
            raise ValueError(
                f"images.missingAlt ({self.missing_alt}) must be <= "
                f"images.total ({self.total})."
            )
        return self


class MobileFacts(BaseModel):
    model_config = ConfigDict(frozen=True)

    viewport: bool


class WordFacts(BaseModel):
    """Body word count and the most frequent terms.

    ``top`` is normalized to ``(term, frequency)`` tuples.  Collectors send
    either ``["seo", 12]`` pairs or ``{"term": "seo", "count": 12}`` objects.
    """

    model_config = ConfigDict(frozen=True)

    count: StrictInt
    top: tuple[tuple[str, int], ...] = ()

    @field_validator("count")
    @classmethod
    def validate_count(cls, v: int) -> int:
        return _check_non_negative(v, "words.count")

    @field_validator("top", mode="before")
    @classmethod
    def normalize_top_terms(cls, v: Any) -> Any:
        if v is None:
            return ()
        normalized = []
        for entry in v:
            if isinstance(entry, dict):
                term = entry.get("term", entry.get("word"))
                freq = entry.get("count", entry.get("frequency", 0))
                normalized.append((term, freq))
            else:
                normalized.append(entry)
        return normalized


class LinkEntry(BaseModel):
    """One outgoing link as listed by the collector.

    ``status`` is a free-form collector label (``"200"``, ``"404"``,
    ``"broken"``...) or ``None`` when the link was not probed.
    """

    model_config = ConfigDict(frozen=True)

    href: str
    status: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v: Any) -> Any:
        # HTTP status codes arrive as bare integers from some collectors.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class LinkFacts(BaseModel):
    """Link inventory.  ``entries`` is the wire field ``list``, order preserved."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: StrictInt
    internal: StrictInt = 0
    external: StrictInt = 0
    broken: StrictInt = 0
    entries: tuple[LinkEntry, ...] = Field(default=(), alias="list")

    @field_validator("total", "internal", "external", "broken")
    @classmethod
    def validate_counts(cls, v: int) -> int:
        return _check_non_negative(v, "link count")

    @model_validator(mode="after")
    def validate_broken_within_total(self) -> "LinkFacts":
        if self.broken > self.total:
            raise ValueError(
                f"links.broken ({self.broken}) must be <= links.total ({self.total})."
            )
        return self


class ReadabilityFacts(BaseModel):
    """Flesch-Kincaid grade level; lower is easier to read."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(allow_inf_nan=False)

    @field_validator("score")
    @classmethod
    def validate_score(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"readability.score must be non-negative, got {v}.")
        return v


class SpeedFacts(BaseModel):
    """Server round-trip time (ms) and HTML payload size (bytes)."""

    model_config = ConfigDict(frozen=True)

    timing: StrictInt
    size: StrictInt

    @field_validator("timing", "size")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        return _check_non_negative(v, "speed value")

    @field_validator("timing")
    @classmethod
    def validate_timing_bound(cls, v: int) -> int:
        if v > MAX_TIMING_MS:
            raise ValueError(f"speed.timing must be <= {MAX_TIMING_MS} ms, got {v}.")
        return v


class RawAudit(BaseModel):
    """Everything a collector gathered about one page, prior to scoring.

    Attributes:
        url: Audited page URL (or a placeholder for pasted HTML).
        title: ``<title>`` facts.
        meta: ``<meta name="description">`` facts.
        h1: H1 heading facts.
        images: Image / ALT inventory.
        mobile: Viewport meta-tag presence.
        words: Word count and top terms.
        links: Link totals and the ordered link list.
        readability: Flesch-Kincaid grade.
        speed: Round-trip timing and HTML size.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    title: TextFacts
    meta: TextFacts
    h1: HeadingFacts
    images: ImageFacts
    mobile: MobileFacts
    words: WordFacts
    links: LinkFacts
    readability: ReadabilityFacts
    speed: SpeedFacts
