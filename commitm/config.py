from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_BASE_URL = "http://commit-m.minamijoyo.com"
DEFAULT_TIMEOUT = 30
COLOR_CHOICES = ("auto", "always", "never")


@dataclass(frozen=True)
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT
    color: str = "auto"


def load_app_config(config_path: str | Path | None = None) -> AppConfig:
    if config_path is None:
        return _apply_env(AppConfig())

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping")

    return _apply_env(
        AppConfig(
            base_url=_parse_base_url(data.get("base_url", DEFAULT_BASE_URL)),
            timeout=_parse_timeout(data.get("timeout", DEFAULT_TIMEOUT)),
            color=_parse_color(data.get("color", "auto")),
        )
    )


def _apply_env(config: AppConfig) -> AppConfig:
    base_url = os.getenv("COMMITM_BASE_URL")
    timeout = os.getenv("COMMITM_TIMEOUT")
    return AppConfig(
        base_url=_parse_base_url(base_url) if base_url else config.base_url,
        timeout=_parse_timeout(timeout) if timeout else config.timeout,
        color=config.color,
    )


def _parse_base_url(value: Any) -> str:
    base_url = str(value or "").strip().rstrip("/")
    if not base_url.startswith(("http://", "https://")):
        raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
    return base_url


def _parse_timeout(value: Any) -> int:
    try:
        timeout = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"timeout must be a positive integer, got {value!r}") from None
    if timeout <= 0:
        raise ValueError(f"timeout must be a positive integer, got {value!r}")
    return timeout


def _parse_color(value: Any) -> str:
    color = str(value).strip().lower()
    if color not in COLOR_CHOICES:
        raise ValueError(
            f"color must be one of: {', '.join(COLOR_CHOICES)}; got {value!r}"
        )
    return color
