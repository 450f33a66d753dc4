"""
Async client for the Agent Domain Service HTTP API.

Usage:
    async with DomainServiceClient() as client:
        result = await client.check_domain("example.com")
"""

import logging
from dataclasses import replace
from typing import Any
from urllib.parse import quote

import httpx

from . import __version__
from .config import load_settings
from .errors import (
    InvalidArgumentError,
    MissingArgumentError,
    ResponseDecodeError,
    ServiceRequestError,
)
from .formatting import format_number
from .models import (
    AnalyzeResult,
    BrainstormResult,
    CategoriesResult,
    ExploreResult,
    LookupResult,
    SearchResult,
)

logger = logging.getLogger(__name__)

USER_AGENT = f"AgentDomainService-MCP/{__version__}"

# Brainstorm suggestion count
DEFAULT_BRAINSTORM_COUNT = 10
MAX_BRAINSTORM_COUNT = 20

# Search result limit
MAX_SEARCH_LIMIT = 100

SORT_OPTIONS = ("price_asc", "price_desc", "newest")


def _segment(value: str) -> str:
    """Percent-encode a single path segment."""
    return quote(value, safe="")


def _require(value: str | None, argument: str) -> str:
    if value is None or not str(value).strip():
        raise MissingArgumentError(argument)
    return str(value).strip()


def clamp_count(count: int | float | None) -> int:
    """Default a missing/zero count to 10 and keep it within 1..20."""
    if not count:
        return DEFAULT_BRAINSTORM_COUNT
    return max(1, min(int(count), MAX_BRAINSTORM_COUNT))


def clamp_limit(limit: int | float) -> int:
    """Keep a search limit within 1..100."""
    return max(1, min(int(limit), MAX_SEARCH_LIMIT))


def build_search_params(
    category: str | None = None,
    max_price: float | None = None,
    min_price: float | None = None,
    tlds: list[str] | None = None,
    sort: str | None = None,
    limit: int | None = None,
) -> dict[str, str]:
    """
    Build the search query from the filters that were actually supplied.

    Absent filters are left out entirely rather than sent empty.
    """
    params: dict[str, str] = {}

    if category and category.strip():
        params["category"] = category.strip()
    if max_price is not None:
        params["max_price"] = format_number(max_price)
    if min_price is not None:
        params["min_price"] = format_number(min_price)
    if tlds:
        cleaned = [t.strip().lstrip(".").lower() for t in tlds]
        cleaned = [t for t in cleaned if t]
        if cleaned:
            params["tlds"] = ",".join(cleaned)
    if sort:
        if sort not in SORT_OPTIONS:
            raise InvalidArgumentError(
                f"Invalid sort '{sort}'. Use one of: {', '.join(SORT_OPTIONS)}"
            )
        params["sort"] = sort
    if limit is not None:
        params["limit"] = str(clamp_limit(limit))

    return params


class DomainServiceClient:
    """
    Thin async wrapper around the domain service endpoints.

    Each operation returns a decoded result record or raises a
    DomainServiceError subclass.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if base_url is None or timeout is None:
            settings = load_settings()
            base_url = base_url if base_url is not None else settings.base_url
            timeout = timeout if timeout is not None else settings.timeout
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "DomainServiceClient":
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers={
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            },
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        action: str,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Issue a request and return the decoded JSON body."""
        if self._client is None:
            raise RuntimeError("DomainServiceClient must be used as an async context manager")

        logger.debug("%s %s params=%s", method, path, params or {})

        try:
            response = await self._client.request(method, path, params=params, json=body)
        except httpx.TimeoutException as e:
            logger.warning("Timed out trying to %s: %s", action, e)
            raise ServiceRequestError(
                f"Failed to {action}: request timed out after {format_number(self._timeout)}s"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Request failed trying to %s: %s", action, e)
            raise ServiceRequestError(f"Failed to {action}: {e}") from e

        if not response.is_success:
            status_text = response.reason_phrase or f"HTTP {response.status_code}"
            logger.warning("Domain service returned %s for %s %s", response.status_code, method, path)
            raise ServiceRequestError(
                f"Failed to {action}: {status_text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(f"Invalid JSON: {e}") from e

    # =========================================================================
    # Operations
    # =========================================================================

    async def check_domain(self, domain: str | None) -> LookupResult:
        """Check a single domain's availability and pricing."""
        domain = _require(domain, "domain")
        data = await self._request("check domain", "GET", f"/api/v1/lookup/{_segment(domain)}")
        return LookupResult.from_dict(data)

    async def explore_name(self, name: str | None) -> ExploreResult:
        """Check a base name across the service's standard TLDs."""
        name = _require(name, "name")
        data = await self._request("explore name", "GET", f"/api/v1/explore/{_segment(name)}")
        return ExploreResult.from_dict(data)

    async def brainstorm_domains(
        self,
        description: str | None,
        count: int | float | None = None,
    ) -> BrainstormResult:
        """Generate domain ideas for a project description."""
        description = _require(description, "description")
        body = {"prompt": description, "count": clamp_count(count)}
        data = await self._request("brainstorm", "POST", "/api/v1/brainstorm", body=body)
        return BrainstormResult.from_dict(data)

    async def analyze_domain(self, domain: str | None) -> AnalyzeResult:
        """Score a domain name on memorability, brandability, etc."""
        domain = _require(domain, "domain")
        data = await self._request(
            "analyze domain", "POST", "/api/v1/analyze-domain", body={"domain": domain}
        )
        return AnalyzeResult.from_dict(data)

    async def search_domains(
        self,
        category: str | None = None,
        max_price: float | None = None,
        min_price: float | None = None,
        tlds: list[str] | None = None,
        sort: str | None = None,
        limit: int | None = None,
    ) -> SearchResult:
        """Search listed domains by category, price range and TLD."""
        params = build_search_params(
            category=category,
            max_price=max_price,
            min_price=min_price,
            tlds=tlds,
            sort=sort,
            limit=limit,
        )
        data = await self._request("search domains", "GET", "/api/v1/domains/search", params=params)
        return replace(SearchResult.from_dict(data), filters=params)

    async def list_categories(self) -> CategoriesResult:
        """List the catalogue's domain categories."""
        data = await self._request("list categories", "GET", "/api/v1/domains/categories")
        return CategoriesResult.from_dict(data)
