"""scripts.index_search: exit codes and pool disposal."""

from unittest.mock import AsyncMock

import pytest

from scripts import index_search


def test_main_returns_zero_on_success(monkeypatch) -> None:
    async def run():
        return {"projects": 2, "clients": 1, "tickets": 0, "blog_posts": 3}

    monkeypatch.setattr(index_search, "run", run)
    assert index_search.main() == 0


def test_main_returns_one_on_failure(monkeypatch) -> None:
    async def run():
        raise RuntimeError("database unreachable")

    monkeypatch.setattr(index_search, "run", run)
    assert index_search.main() == 1


async def test_run_disposes_engine_even_on_failure(monkeypatch) -> None:
    dispose = AsyncMock()
    indexer = AsyncMock()
    indexer.index_all.side_effect = RuntimeError("boom")
    monkeypatch.setattr(index_search, "get_session_factory", lambda: object())
    monkeypatch.setattr(index_search, "SearchIndexRepository", lambda factory: object())
    monkeypatch.setattr(index_search, "SearchIndexer", lambda repo: indexer)
    monkeypatch.setattr(index_search, "dispose_engine", dispose)
    with pytest.raises(RuntimeError):
        await index_search.run()
    dispose.assert_awaited_once()


async def test_run_returns_counts(monkeypatch) -> None:
    indexer = AsyncMock()
    indexer.index_all.return_value = {"projects": 1, "clients": 0, "tickets": 0, "blog_posts": 0}
    monkeypatch.setattr(index_search, "get_session_factory", lambda: object())
    monkeypatch.setattr(index_search, "SearchIndexRepository", lambda factory: object())
    monkeypatch.setattr(index_search, "SearchIndexer", lambda repo: indexer)
    monkeypatch.setattr(index_search, "dispose_engine", AsyncMock())
    assert (await index_search.run())["projects"] == 1
