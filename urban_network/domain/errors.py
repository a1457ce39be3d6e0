"""Typed domain errors for the urban network planner.

Precondition violations (unknown ids, duplicate ids) are raised to the
caller instead of being turned into empty results. Normal conditions
such as missing traffic data, unreachable targets or a disconnected
network are not errors and never raise.

All errors inherit from UrbanNetworkError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Optional


@dataclass
class UrbanNetworkError(Exception):
    """Base error for the urban network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownNodeError(UrbanNetworkError):
    """A node id is not present in the graph.

    Raised when an edge references a missing endpoint and when a path
    query names a source or target the graph does not contain.

    Attributes:
        node_id: The id that was not found
    """

    node_id: Optional[int] = None


@dataclass
class UnknownSetError(UrbanNetworkError):
    """An element was queried in a disjoint-set before make_set.

    Attributes:
        element: The element with no set
    """

    element: Optional[Hashable] = None


@dataclass
class DuplicateIdError(UrbanNetworkError):
    """A node id was inserted twice into the same graph.

    Attributes:
        node_id: The duplicated id
    """

    node_id: Optional[int] = None


@dataclass
class GraphLoadError(UrbanNetworkError):
    """Network data could not be read or parsed.

    Attributes:
        file_path: Path to the offending data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class RenderingError(UrbanNetworkError):
    """Network map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
