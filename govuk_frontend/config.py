"""
Configuration for page-level defaults and logging.

Why: The page template needs an asset path, theme colour and language that
usually differ per deployment, while individual renders should not have to
repeat them. Values come from environment variables with permissive
defaults; explicit template parameters always win.

Environment:
- GOVUK_ASSET_PATH: Path or absolute URL for favicons and manifest (default: /assets).
- GOVUK_ASSET_URL: Absolute origin for assets that need a full URL (Open Graph image).
- GOVUK_THEME_COLOR: Hex colour for the browser toolbar (default: #0b0c0c).
- GOVUK_HTML_LANG: Document language (default: en).
- GOVUK_LOG_LEVEL: Level used by ``configure_logging`` (default: WARNING).
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

from .errors import ConfigurationError

_HEX_COLOUR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Hardcoded value of $govuk-black
DEFAULT_THEME_COLOR = "#0b0c0c"
DEFAULT_ASSET_PATH = "/assets"
DEFAULT_HTML_LANG = "en"


@dataclass(frozen=True)
class Settings:
    asset_path: str = DEFAULT_ASSET_PATH
    asset_url: Optional[str] = None
    theme_color: str = DEFAULT_THEME_COLOR
    html_lang: str = DEFAULT_HTML_LANG
    log_level: str = "WARNING"


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = (os.getenv(key) or "").strip()
    return value or default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings from the environment once; call ``cache_clear()`` to reload."""
    asset_url = _env("GOVUK_ASSET_URL")
    return Settings(
        asset_path=_env("GOVUK_ASSET_PATH", DEFAULT_ASSET_PATH) or DEFAULT_ASSET_PATH,
        asset_url=asset_url.rstrip("/") if asset_url else None,
        theme_color=_env("GOVUK_THEME_COLOR", DEFAULT_THEME_COLOR) or DEFAULT_THEME_COLOR,
        html_lang=_env("GOVUK_HTML_LANG", DEFAULT_HTML_LANG) or DEFAULT_HTML_LANG,
        log_level=(_env("GOVUK_LOG_LEVEL", "WARNING") or "WARNING").upper(),
    )


def _is_absolute_url(value: str) -> bool:
    return value.startswith("https://") or value.startswith("http://")


def validate_settings(settings: Optional[Settings] = None) -> Settings:
    """Fail fast on settings that would produce broken pages.

    Checks:
    - Asset path must be absolute (``/assets``) or an absolute http(s) URL.
    - Asset URL, when set, must be an absolute http(s) URL (Open Graph
      images are only picked up with a full URL).
    - Theme colour must be a 3 or 6 digit hex colour.
    """
    settings = settings or get_settings()

    if not (settings.asset_path.startswith("/") or _is_absolute_url(settings.asset_path)):
        raise ConfigurationError(
            f"GOVUK_ASSET_PATH must be absolute or an http(s) URL, got {settings.asset_path!r}"
        )
    if settings.asset_url is not None and not _is_absolute_url(settings.asset_url):
        raise ConfigurationError(
            f"GOVUK_ASSET_URL must be an absolute http(s) URL, got {settings.asset_url!r}"
        )
    if not _HEX_COLOUR.match(settings.theme_color):
        raise ConfigurationError(
            f"GOVUK_THEME_COLOR must be a hex colour like #0b0c0c, got {settings.theme_color!r}"
        )
    if logging.getLevelName(settings.log_level) == f"Level {settings.log_level}":
        raise ConfigurationError(f"GOVUK_LOG_LEVEL is not a logging level: {settings.log_level!r}")
    return settings


def configure_logging(level: Union[int, str, None] = None) -> None:
    """Install a basic stderr handler for command line use.

    Library code never calls this; applications embedding the components
    keep control over their own logging setup.
    """
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
