"""Keyword search against the Semantic Scholar paper search endpoint.

``search`` is the whole pipeline: encode the query, issue one GET, parse the
JSON body, keep only complete paper records, and map them to
``SearchResult``. ``run_search`` wraps it for the presentation layer and
turns every ``SearchError`` into a user-facing message on the state.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from lookup import state as st
from lookup.config import get_s2_key, get_timeout
from lookup.models import (
    UNKNOWN_AUTHORS,
    InvalidEndpoint,
    InvalidQuery,
    NetworkFailure,
    SearchError,
    SearchResult,
    UnparsableResponse,
)

logger = logging.getLogger(__name__)

S2_BASE = "https://api.semanticscholar.org/graph/v1"
SEARCH_FIELDS = "title,url,citationCount,authors,abstract"
OFFSET = 0
LIMIT = 10
MIN_CITATION_COUNT = 5

REQUIRED_FIELDS = ("title", "url", "abstract")


def _headers() -> dict[str, str]:
    key = get_s2_key()
    if key:
        return {"x-api-key": key}
    return {}


async def _get(url: str, **kwargs) -> httpx.Response:
    async with httpx.AsyncClient() as client:
        return await client.get(url, **kwargs)


def encode_query(query: str) -> str:
    """Percent-encode ``query`` for use as a single query-string value."""
    if not query:
        raise InvalidQuery("Invalid search query.")
    try:
        return quote(query, safe="")
    except UnicodeEncodeError:
        raise InvalidQuery("Invalid search query.") from None


def build_search_url(encoded_query: str) -> str:
    url = (
        f"{S2_BASE}/paper/search?query={encoded_query}"
        f"&fields={SEARCH_FIELDS}&offset={OFFSET}&limit={LIMIT}"
        f"&minCitationCount={MIN_CITATION_COUNT}"
    )
    try:
        httpx.URL(url)
    except httpx.InvalidURL:
        raise InvalidEndpoint("Invalid URL.") from None
    return url


def _format_authors(paper: dict) -> str:
    authors = paper.get("authors")
    if not isinstance(authors, list):
        return UNKNOWN_AUTHORS
    names = [
        a["name"] for a in authors
        if isinstance(a, dict) and isinstance(a.get("name"), str)
    ]
    return ", ".join(names)


def _citation_count(paper: dict) -> int:
    count = paper.get("citationCount")
    # bool is an int subclass but never a citation count
    if isinstance(count, int) and not isinstance(count, bool):
        return count
    return 0


def has_required_fields(paper: Any) -> bool:
    """True if ``paper`` carries a string title, url and abstract."""
    if not isinstance(paper, dict):
        return False
    return all(isinstance(paper.get(name), str) for name in REQUIRED_FIELDS)


def paper_to_result(paper: dict) -> SearchResult:
    return SearchResult(
        title=paper["title"],
        url=paper["url"],
        summary=paper["abstract"],
        authors=_format_authors(paper),
        citation_count=_citation_count(paper),
    )


def parse_papers(papers: list) -> list[SearchResult]:
    """Map paper records to results, dropping incomplete ones.

    Order is preserved. Dropped records are not an error.
    """
    results = []
    for i, paper in enumerate(papers):
        if not has_required_fields(paper):
            logger.debug("Dropping paper #%d: missing title, url or abstract", i)
            continue
        results.append(paper_to_result(paper))
    return results


def parse_response(resp: httpx.Response) -> list:
    """Return the ``data`` list of a search response body."""
    try:
        payload = resp.json()
    except ValueError:
        raise UnparsableResponse("Could not parse response.") from None
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise UnparsableResponse("Could not parse response.")
    return payload["data"]


async def search(query: str, *, timeout: Optional[float] = None) -> list[SearchResult]:
    """Search papers by keyword.

    ``timeout`` defaults to the configured ``LOOKUP_TIMEOUT``. Raises one of
    ``InvalidQuery``, ``InvalidEndpoint``, ``NetworkFailure`` or
    ``UnparsableResponse``. Nothing is retried.

    The status code is not checked: an error reply without a ``data`` list
    fails as ``UnparsableResponse``.
    """
    url = build_search_url(encode_query(query))
    if timeout is None:
        timeout = get_timeout()
    logger.debug("GET %s", url)

    try:
        resp = await _get(url, headers=_headers(), timeout=timeout)
    except httpx.HTTPError as e:
        logger.warning("Search request failed: %s", e)
        raise NetworkFailure(e) from e

    if resp.is_error:
        logger.warning("Search returned HTTP %d", resp.status_code)

    papers = parse_response(resp)
    results = parse_papers(papers)
    logger.debug("Kept %d of %d papers", len(results), len(papers))
    return results


async def run_search(state: st.LookupState, query: str) -> st.LookupState:
    """Run ``search`` from ``state`` and return the settled state.

    The returned state is always Idle, holding either the results or the
    error message.
    """
    state = st.begin(state, query)
    try:
        timeout = get_timeout()
    except ValueError as e:
        logger.warning("Bad timeout setting: %s", e)
        return st.fail(state, str(e))

    try:
        results = await search(query, timeout=timeout)
    except SearchError as e:
        logger.warning("Search for %r failed (%s)", query, e.kind.value)
        return st.fail(state, e.message)
    return st.succeed(state, results)
