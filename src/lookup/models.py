"""Data models for paper lookups."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field

UNKNOWN_AUTHORS = "Unknown Authors"


@dataclass
class SearchResult:
    """A single displayable paper from a Semantic Scholar search."""

    title: str
    url: str
    summary: str
    authors: str = UNKNOWN_AUTHORS
    citation_count: int = 0
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def details(self) -> str:
        return (
            f"Authors: {self.authors}\n"
            f"Citations: {self.citation_count}\n"
            f"URL: {self.url}"
        )


class ErrorKind(enum.Enum):
    INVALID_QUERY = "InvalidQuery"
    INVALID_ENDPOINT = "InvalidEndpoint"
    NETWORK_FAILURE = "NetworkFailure"
    UNPARSABLE_RESPONSE = "UnparsableResponse"


class SearchError(Exception):
    """Base class for a failed search. ``message`` is meant for the user."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidQuery(SearchError):
    kind = ErrorKind.INVALID_QUERY


class InvalidEndpoint(SearchError):
    kind = ErrorKind.INVALID_ENDPOINT


class NetworkFailure(SearchError):
    kind = ErrorKind.NETWORK_FAILURE

    def __init__(self, cause: Exception):
        super().__init__(f"Error fetching data: {cause}")
        self.cause = cause


class UnparsableResponse(SearchError):
    kind = ErrorKind.UNPARSABLE_RESPONSE
