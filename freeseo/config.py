"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local secrets and env overrides (gitignored)
  4. Environment variables        — ``FREESEO_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The CLI and ``AuditService`` receive an ``AppConfig`` instance; scoring and
report synthesis take plain arguments and never read configuration.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class CollectorConfig(BaseModel):
    """Audit collector service (URL fetch / HTML parse backend)."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "http://localhost:3000"
    timeout_seconds: float = 30.0
    user_agent: str = "freeseo/0.1"

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {v}.")
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class ReportConfig(BaseModel):
    """Report synthesis and output settings."""

    model_config = ConfigDict(frozen=True)

    title: str = "FreeSEO Audit Report"
    link_sample_size: int = 30
    output_dir: str = "data/reports"

    @field_validator("link_sample_size")
    @classmethod
    def validate_link_sample_size(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"link_sample_size must be >= 0, got {v}.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    collector: CollectorConfig = CollectorConfig()
    report: ReportConfig = ReportConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply FREESEO_* environment variable overrides
    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply FREESEO_* env vars to the raw config dict.

    Supported overrides:
      FREESEO_LOG_LEVEL      → raw["logging"]["level"]
      FREESEO_COLLECTOR_URL  → raw["collector"]["base_url"]
      FREESEO_OUTPUT_DIR     → raw["report"]["output_dir"]
      FREESEO_DEBUG          → raw["debug"]
    """
    if log_level := os.environ.get("FREESEO_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if collector_url := os.environ.get("FREESEO_COLLECTOR_URL"):
        raw.setdefault("collector", {})["base_url"] = collector_url

    if output_dir := os.environ.get("FREESEO_OUTPUT_DIR"):
        raw.setdefault("report", {})["output_dir"] = output_dir

    if debug := os.environ.get("FREESEO_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        collector=CollectorConfig(**raw.get("collector", {})),
        report=ReportConfig(**raw.get("report", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
