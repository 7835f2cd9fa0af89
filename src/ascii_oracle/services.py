"""External collaborators consumed by the command pipeline.

Every collaborator here reports failure through its result model instead of
raising, so a slow or broken backend never takes the terminal session down.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ascii_oracle.art import ArtRepository

DEFAULT_TIMEOUT_SECONDS = 10.0
USER_AGENT = "ascii-oracle/1.0"
MATH_SOLVE_PATH = "/api/math/solve"
SEARCH_WEB_PATH = "/api/search/web"


class ComputationResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    result: str | None = None
    error: str | None = None


class SearchHit(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    title: str | None = None
    art: str | None = None
    snippet: str | None = None
    url: str | None = None
    source: str | None = None

    @property
    def label(self) -> str:
        return self.name or self.title or "(untitled)"


class SearchSource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = "(untitled)"
    url: str | None = None


class SearchResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    success: bool = False
    query: str = ""
    ai_powered: bool = Field(default=False, alias="aiPowered")
    response: str | None = None
    ascii_art: str | None = Field(default=None, alias="asciiArt")
    results: list[SearchHit] = Field(default_factory=list)
    sources: list[SearchSource] = Field(default_factory=list)
    message: str | None = None
    error: str | None = None
    offline: bool = False


class ComputationEngine(Protocol):
    async def evaluate(self, expression: str) -> ComputationResult: ...


class SearchBridge(Protocol):
    async def search(self, query: str) -> SearchResponse: ...


def _coerce_result(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


class _HttpCollaborator:
    def __init__(
        self,
        api_base: str,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_base = api_base.rstrip("/")
        self._timeout = httpx.Timeout(timeout_seconds)
        self._client = client

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """Send one request and return the decoded JSON object.

        Raises:
            httpx.HTTPError: On timeouts, transport failures, and non-2xx replies.
            ValueError: If the body is not a JSON object.
        """
        url = f"{self._api_base}{path}"
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        if self._client is not None:
            response = await self._client.request(method, url, headers=headers, timeout=self._timeout, **kwargs)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(method, url, headers=headers, **kwargs)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        return data


def _describe_failure(exc: Exception) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return "request timed out"
    if isinstance(exc, httpx.HTTPStatusError):
        return f"http {exc.response.status_code}"
    if isinstance(exc, httpx.HTTPError):
        return f"connection failed: {exc!s}" if str(exc) else "connection failed"
    return f"invalid response: {exc!s}"


class HttpComputationEngine(_HttpCollaborator):
    """Math solver reached over the backend's JSON API."""

    async def evaluate(self, expression: str) -> ComputationResult:
        try:
            data = await self._request("POST", MATH_SOLVE_PATH, json={"expression": expression})
        except (httpx.HTTPError, ValueError) as exc:
            reason = _describe_failure(exc)
            logger.warning("computation.failed expression={!r} reason={}", expression, reason)
            return ComputationResult(success=False, error=reason)

        success = bool(data.get("success", "result" in data and "error" not in data))
        return ComputationResult(
            success=success and data.get("result") is not None,
            result=_coerce_result(data.get("result")),
            error=_coerce_result(data.get("error")),
        )


class HttpSearchBridge(_HttpCollaborator):
    """AI-backed art search reached over the backend's JSON API."""

    async def search(self, query: str) -> SearchResponse:
        try:
            data = await self._request("GET", SEARCH_WEB_PATH, params={"q": query})
            return SearchResponse.model_validate({"query": query, **data})
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            reason = _describe_failure(exc)
            logger.warning("search.failed query={!r} reason={}", query, reason)
            return SearchResponse(success=False, query=query, error=reason, offline=True)


class LocalSearchBridge:
    """Name search over the bundled art library."""

    def __init__(self, art: ArtRepository) -> None:
        self._art = art

    async def search(self, query: str) -> SearchResponse:
        names = self._art.search(query)
        if not names:
            return SearchResponse(success=False, query=query, error=f'no local art matches "{query}"')
        return SearchResponse(
            success=True,
            query=query,
            results=[SearchHit(name=name, source="local") for name in names],
            message="Found in local ASCII art collection",
        )


class FallbackSearchBridge:
    """Ask the primary bridge first and fall back when it fails."""

    def __init__(self, primary: SearchBridge, fallback: SearchBridge) -> None:
        self._primary = primary
        self._fallback = fallback

    async def search(self, query: str) -> SearchResponse:
        answer = await self._primary.search(query)
        if answer.success:
            return answer

        logger.info("search.fallback query={!r} reason={}", query, answer.error)
        local = await self._fallback.search(query)
        if local.success:
            return local.model_copy(update={"message": f"{answer.error or 'search offline'}; local results only"})
        return local.model_copy(update={"error": answer.error or local.error, "offline": answer.offline})
