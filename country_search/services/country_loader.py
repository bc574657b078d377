"""Country repository loader: one GET, one strict decode, one result."""

import logging
from dataclasses import dataclass

import httpx
from pydantic import TypeAdapter, ValidationError

from country_search.config import settings
from country_search.models.country import Country
from country_search.utils.http_client import get_client

logger = logging.getLogger(__name__)

_COUNTRY_LIST = TypeAdapter(list[Country])


class CountryLoadError(Exception):
    """Base class for failures reported by :class:`CountryLoader`."""

    kind = "load"

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(message)


class TransportError(CountryLoadError):
    kind = "transport"

    def __init__(self, message: str, url: str = "", status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message, url)


class DecodeError(CountryLoadError):
    kind = "decode"


@dataclass(frozen=True)
class LoadResult:
    countries: tuple[Country, ...] | None = None
    error: CountryLoadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, countries) -> "LoadResult":
        return cls(countries=tuple(countries))

    @classmethod
    def failure(cls, error: CountryLoadError) -> "LoadResult":
        return cls(error=error)


def decode_countries(payload: bytes | str) -> list[Country]:
    """Decode a JSON array of country objects, all or nothing."""
    try:
        return _COUNTRY_LIST.validate_json(payload)
    except ValidationError as e:
        raise DecodeError(f"Invalid country document: {e.error_count()} error(s): {e}") from e


class CountryLoader:
    def __init__(self, url: str | None = None, client: httpx.AsyncClient | None = None):
        self.url = url or settings.countries_url
        self._client = client

    async def load(self) -> LoadResult:
        """Fetch and decode the country list.

        Transport and decode problems are returned as a failed
        :class:`LoadResult`; nothing is raised to the caller.
        """
        client = self._client or get_client()
        try:
            response = await client.get(self.url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Country fetch failed for %s: %s", self.url, e)
            return LoadResult.failure(TransportError(f"Request failed: {e}", url=self.url))

        if not response.is_success:
            logger.error("Country fetch error %s: %.200s", response.status_code, response.text)
            return LoadResult.failure(
                TransportError(
                    f"Unexpected status {response.status_code}",
                    url=self.url,
                    status_code=response.status_code,
                )
            )

        try:
            countries = decode_countries(response.content)
        except DecodeError as e:
            e.url = self.url
            logger.error("Country decode failed for %s: %s", self.url, e)
            return LoadResult.failure(e)

        logger.info("Loaded %d countries from %s", len(countries), self.url)
        return LoadResult.success(countries)
