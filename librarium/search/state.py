"""
Search state variants exposed to the presentation layer.

A search box is always in exactly one of three states:

- ``Idle``: nothing typed (or reset); no results.
- ``Searching``: a query has been dispatched and has not resolved yet.
- ``Completed``: the latest dispatch for the current input resolved,
  possibly with degraded (local fallback) or empty results.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Union

from librarium.models import Book


@dataclass(frozen=True)
class Idle:
    status: ClassVar[str] = "idle"
    query: ClassVar[str] = ""
    results: ClassVar[tuple] = ()


@dataclass(frozen=True)
class Searching:
    query: str
    status: ClassVar[str] = "searching"
    results: ClassVar[tuple] = ()


@dataclass(frozen=True)
class Completed:
    query: str
    results: tuple[Book, ...] = field(default_factory=tuple)
    status: ClassVar[str] = "completed"

    def __post_init__(self):
        object.__setattr__(self, "results", tuple(self.results))


SearchState = Union[Idle, Searching, Completed]

IDLE = Idle()
