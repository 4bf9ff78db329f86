"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      - committed static defaults
  2. ``config/local.toml``        - optional local overrides (gitignored)
  3. ``.env``                     - local secrets and env overrides (gitignored)
  4. Environment variables        - ``TOOLSCOUT_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The scoring functions themselves take plain arguments (``limit``,
``click_range`` ...); only the CLI reads ``AppConfig`` and passes the
relevant values down.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from toolscout.clicks.windows import ClickRange

MAX_HOST_LABEL = 63

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: Optional[str] = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()

    @field_validator("log_file")
    @classmethod
    def empty_log_file_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class QuizConfig(BaseModel):
    """Quiz matcher settings."""

    model_config = ConfigDict(frozen=True)

    max_results: int = 3

    @field_validator("max_results")
    @classmethod
    def validate_max_results(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_results must be >= 1, got {v}.")
        return v


class RelatedConfig(BaseModel):
    """Related-post ranker settings."""

    model_config = ConfigDict(frozen=True)

    limit: int = 3

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"limit must be >= 1, got {v}.")
        return v


class ClicksConfig(BaseModel):
    """Click dashboard settings."""

    model_config = ConfigDict(frozen=True)

    default_range: ClickRange = ClickRange.ALL
    top_entities_limit: int = 3

    @field_validator("top_entities_limit")
    @classmethod
    def validate_top_entities_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"top_entities_limit must be >= 1, got {v}.")
        return v


class SubscriptionConfig(BaseModel):
    """Quiz submission endpoint."""

    model_config = ConfigDict(frozen=True)

    endpoint_url: Optional[str] = None
    timeout_s: float = 5.0

    @field_validator("endpoint_url")
    @classmethod
    def validate_endpoint(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"endpoint_url must be an http(s) URL, got '{v}'.")
        try:
            url = httpx.URL(v)
        except (httpx.InvalidURL, UnicodeError) as exc:
            raise ValueError(f"endpoint_url is not a valid URL: {exc}") from exc
        if not url.host:
            raise ValueError(f"endpoint_url has no host, got '{v}'.")
        # DNS labels are capped at 63 octets; longer ones fail at connect time
        if any(len(label) > MAX_HOST_LABEL for label in url.host.split(".")):
            raise ValueError(f"endpoint_url host has a label over {MAX_HOST_LABEL} characters.")
        return v

    @field_validator("timeout_s")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_s must be > 0, got {v}.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration, built by ``load_config()``."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    quiz: QuizConfig = QuizConfig()
    related: RelatedConfig = RelatedConfig()
    clicks: ClicksConfig = ClicksConfig()
    subscription: SubscriptionConfig = SubscriptionConfig()
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

    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

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
    """Apply TOOLSCOUT_* env vars to the raw config dict.

    Supported overrides:
      TOOLSCOUT_LOG_LEVEL      → raw["logging"]["level"]
      TOOLSCOUT_SUBSCRIBE_URL  → raw["subscription"]["endpoint_url"]
      TOOLSCOUT_DEBUG          → raw["debug"]
    """
    if log_level := os.environ.get("TOOLSCOUT_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if subscribe_url := os.environ.get("TOOLSCOUT_SUBSCRIBE_URL"):
        raw.setdefault("subscription", {})["endpoint_url"] = subscribe_url

    if debug := os.environ.get("TOOLSCOUT_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        quiz=QuizConfig(**raw.get("quiz", {})),
        related=RelatedConfig(**raw.get("related", {})),
        clicks=ClicksConfig(**raw.get("clicks", {})),
        subscription=SubscriptionConfig(**raw.get("subscription", {})),
        debug=raw.get("debug", False),
    )
