"""
Raw audit loading: JSON file or parsed dict -> validated ``RawAudit``.

This is the boundary where malformed collector output is rejected.  Both
helpers raise ``InvalidAuditError`` (a ``ValueError``) instead of letting a
partially-populated audit reach the scorer.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from freeseo.errors import InvalidAuditError
from freeseo.models.audit import RawAudit

logger = logging.getLogger(__name__)


def parse_raw_audit(data: Any) -> RawAudit:
    """Validate a decoded collector payload.

    Args:
        data: Dict in the collector wire shape (camelCase ``missingAlt``,
            ``links.list``).

    Returns:
        Frozen ``RawAudit``.

    Raises:
        InvalidAuditError: If a required field is missing, a value has the
            wrong type, or a count invariant is violated.
    """
    if not isinstance(data, dict):
        raise InvalidAuditError(
            f"Raw audit must be a JSON object, got {type(data).__name__}."
        )
    try:
        return RawAudit.model_validate(data)
    except ValidationError as exc:
        raise InvalidAuditError(f"Invalid raw audit: {exc}") from exc


def load_raw_audit(path: Path) -> RawAudit:
    """Read and validate a raw audit JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InvalidAuditError: If the file is not valid JSON or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Raw audit file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidAuditError(f"{path} is not valid JSON: {exc}") from exc
    audit = parse_raw_audit(data)
    logger.debug("Loaded raw audit for %s from %s", audit.url, path)
    return audit
