"""
Shared pytest fixtures for the FreeSEO test suite.

Provides:
  - ``make_audit``: factory returning a validated ``RawAudit`` built from
    ``tests.factories.audit_data()`` with per-section overrides.
  - ``clean_audit``: an audit that triggers no recommendations.
  - ``fixed_time``: a deterministic report timestamp.
  - ``restore_root_logger``: undoes root-logger changes made by a test.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable

import pytest

from freeseo.models.audit import RawAudit
from tests.factories import FIXED_TIME, audit_data


@pytest.fixture
def make_audit() -> Callable[..., RawAudit]:
    """Factory: ``make_audit(h1={"count": 0})`` -> validated ``RawAudit``."""

    def _make(**sections: Any) -> RawAudit:
        return RawAudit.model_validate(audit_data(**sections))

    return _make


@pytest.fixture
def clean_audit(make_audit) -> RawAudit:
    """An audit that passes every recommendation rule."""
    return make_audit()


@pytest.fixture
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture
def restore_root_logger():
    """Undo ``configure_logging()`` side effects on the root logger."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
