"""Elasticsearch integration test fixtures."""

from collections.abc import AsyncIterator

import pytest
from async_es_client import (
    ElasticsearchConfig,
    ElasticsearchError,
    ElasticsearchErrorCodes,
    HttpElasticsearchClient,
)


@pytest.fixture(scope="session")
def es_config() -> ElasticsearchConfig:
    return ElasticsearchConfig.from_env()


@pytest.fixture
async def es_client(es_config: ElasticsearchConfig) -> AsyncIterator[HttpElasticsearchClient]:
    """Client against a cluster emptied of user indices. Skips if Elasticsearch is down."""
    client = HttpElasticsearchClient(es_config)
    try:
        indices = await client.cat_indices()
    except ElasticsearchError as exc:
        if exc.code == ElasticsearchErrorCodes.CONNECTION_ERROR:
            pytest.skip(f"Elasticsearch is not reachable at {es_config.base_url}")
        raise
    for row in indices:
        # system indices cannot be deleted
        if not row["index"].startswith("."):
            await client.delete_index(row["index"])
    yield client
