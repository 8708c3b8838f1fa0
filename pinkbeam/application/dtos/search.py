"""DTOs for full-text search (no dependency on ORM)."""

from dataclasses import dataclass, field
from typing import Any

from pinkbeam.domain.enums import SearchResultType


@dataclass(frozen=True)
class SearchResult:
    """Single search hit, shaped for display (read-model)."""

    id: str
    type: SearchResultType
    title: str
    snippet: str
    url: str
    meta: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GlobalSearchResults:
    """Hits grouped by entity type. Each group is ordered by rank, best first."""

    projects: list[SearchResult] = field(default_factory=list)
    clients: list[SearchResult] = field(default_factory=list)
    tickets: list[SearchResult] = field(default_factory=list)
    blog: list[SearchResult] = field(default_factory=list)

    def groups(self) -> dict[str, list[SearchResult]]:
        return {
            "projects": self.projects,
            "clients": self.clients,
            "tickets": self.tickets,
            "blog": self.blog,
        }


@dataclass(frozen=True)
class IndexableRow:
    """Row fetched for indexing: primary key plus its text fields in index order."""

    id: str
    texts: tuple[str | None, ...]
