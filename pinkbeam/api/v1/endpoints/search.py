"""Search API: ranked full-text search across projects, clients, tickets, blog."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from pinkbeam.api.v1.dependencies import get_search_service
from pinkbeam.application.dtos.search import SearchResult
from pinkbeam.application.use_cases.search import DEFAULT_LIMIT, SearchService
from pinkbeam.core.limiter import limit_search
from pinkbeam.schemas.search import (
    SearchGroupsResponse,
    SearchResponse,
    SearchResultResponse,
)

router = APIRouter()

MISSING_QUERY_ERROR = 'Query parameter "q" is required'

# Accepted ?type= values -> result group. Unknown values keep every group.
_TYPE_GROUPS: dict[str, str] = {
    "project": "projects",
    "projects": "projects",
    "client": "clients",
    "clients": "clients",
    "ticket": "tickets",
    "tickets": "tickets",
    "blog": "blog",
}


def _to_response(r: SearchResult) -> SearchResultResponse:
    return SearchResultResponse(
        id=r.id,
        type=r.type.value,
        title=r.title,
        snippet=r.snippet,
        url=r.url,
        meta=r.meta,
    )


@router.get(
    "",
    response_model=SearchResponse,
    responses={400: {"model": SearchResponse, "description": "Missing query"}},
)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", max_length=500),
    type: str | None = Query(None, description="project | client | ticket | blog"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=50, description="Results per type"),
):
    """Search every entity type; ?type= narrows the response to one group."""
    if not q.strip():
        return JSONResponse(
            status_code=400,
            content=SearchResponse(success=False, error=MISSING_QUERY_ERROR).model_dump(),
        )

    results = await search_svc.global_search(q, limit_per_type=limit)
    groups = {
        name: [_to_response(r) for r in hits] for name, hits in results.groups().items()
    }
    selected = _TYPE_GROUPS.get(type.lower()) if type else None
    if selected is not None:
        groups = {selected: groups[selected]}

    body = SearchGroupsResponse(**groups)
    return SearchResponse(
        success=True,
        results=body,
        query=q.strip(),
        total=sum(len(hits) for hits in groups.values()),
    )
