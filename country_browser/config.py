from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from country_browser.core.exceptions import ConfigError

DEFAULT_API_URL = "https://api.sampleapis.com/countries/countries"
DEFAULT_TITLE = "Countries Info"
DEFAULT_IMAGE_OFFSET_PX = 1300
DEFAULT_PORT = 8051


@dataclass(frozen=True)
class AppSettings:
    """
    Runtime settings for the country browser.

    - api_url: countries endpoint (one GET per refresh)
    - timeout_seconds: transport timeout; None keeps the httpx default
    - ui_title: page heading and browser title
    - image_offset_px: how close (px) an image cell must get to the viewport
      before its image is requested
    - port / debug: Dash server options used by app.py
    """

    api_url: str = DEFAULT_API_URL
    timeout_seconds: Optional[float] = None
    ui_title: str = DEFAULT_TITLE
    image_offset_px: int = DEFAULT_IMAGE_OFFSET_PX
    port: int = DEFAULT_PORT
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AppSettings:
        """
        Build settings from environment variables.

        Selection order per field:
            1) COUNTRY_BROWSER_* variable (PORT / DEBUG for server options)
            2) built-in default

        :raises ConfigError: if a numeric variable is malformed or negative
        """
        env = os.environ if environ is None else environ

        timeout_raw = env.get("COUNTRY_BROWSER_TIMEOUT")
        timeout = None
        if timeout_raw not in (None, ""):
            timeout = _non_negative(float, "COUNTRY_BROWSER_TIMEOUT", timeout_raw)

        return cls(
            api_url=env.get("COUNTRY_BROWSER_API_URL") or DEFAULT_API_URL,
            timeout_seconds=timeout,
            ui_title=env.get("COUNTRY_BROWSER_TITLE") or DEFAULT_TITLE,
            image_offset_px=_non_negative(
                int,
                "COUNTRY_BROWSER_IMAGE_OFFSET",
                env.get("COUNTRY_BROWSER_IMAGE_OFFSET", str(DEFAULT_IMAGE_OFFSET_PX)),
            ),
            port=_non_negative(int, "PORT", env.get("PORT", str(DEFAULT_PORT))),
            debug=env.get("DEBUG", "0") == "1",
        )


def _non_negative(kind, name: str, raw: str):
    try:
        value = kind(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {raw!r}")
    return value
