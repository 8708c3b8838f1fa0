"""Search API schemas."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class SearchResultResponse(BaseModel):
    """Single search hit."""

    id: str
    type: Literal["project", "client", "ticket", "blog"]
    title: str
    snippet: str
    url: str
    meta: dict[str, Any] = Field(default_factory=dict)


class SearchGroupsResponse(BaseModel):
    projects: list[SearchResultResponse] = Field(default_factory=list)
    clients: list[SearchResultResponse] = Field(default_factory=list)
    tickets: list[SearchResultResponse] = Field(default_factory=list)
    blog: list[SearchResultResponse] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """Grouped search response. error is set only on failure."""

    success: bool
    results: SearchGroupsResponse = Field(default_factory=SearchGroupsResponse)
    query: str = ""
    total: int = 0
    error: str | None = None
