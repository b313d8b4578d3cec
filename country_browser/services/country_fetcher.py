from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import httpx

from country_browser.config import DEFAULT_API_URL
from country_browser.core.country import Country
from country_browser.core.exceptions import FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of a single fetch: either the full country list or the error.
    Never both, and never a partial list.
    """

    countries: Tuple[Country, ...] = ()
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, countries: Tuple[Country, ...]) -> FetchResult:
        return cls(countries=tuple(countries))

    @classmethod
    def failure(cls, error: FetchError) -> FetchResult:
        return cls(error=error)


class CountryFetcher:
    """
    Loads the full country list from the countries API.

    - GET-only, one request per fetch()
    - no retries; the caller decides when to try again
    - does not touch any shared state
    """

    def __init__(
        self,
        *,
        url: str = DEFAULT_API_URL,
        timeout_seconds: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_seconds
        self._client = client

    def fetch(self) -> FetchResult:
        logger.info("fetch_start", extra={"url": self._url})
        try:
            countries = self._fetch_countries()
        except FetchError as e:
            logger.warning("fetch_failed", extra={"url": self._url, "error": str(e)})
            return FetchResult.failure(e)

        logger.info(
            "fetch_succeeded",
            extra={"url": self._url, "n_countries": len(countries)},
        )
        return FetchResult.success(countries)

    def _fetch_countries(self) -> Tuple[Country, ...]:
        try:
            resp = self._get()
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Request failed with status code {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Request error: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise FetchError("Failed to parse JSON") from e

        if not isinstance(payload, list):
            raise FetchError(
                f"Expected a JSON array of countries, got {type(payload).__name__}"
            )

        try:
            return tuple(Country.from_api(item) for item in payload)
        except ValueError as e:
            raise FetchError(f"Invalid country record: {e}") from e

    def _get(self) -> httpx.Response:
        if self._client is not None:
            return self._client.get(self._url)

        kwargs = {"follow_redirects": True}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        return httpx.get(self._url, **kwargs)
