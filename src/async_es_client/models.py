"""Elasticsearch client data models."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum

DEFAULT_ES_URL = "http://127.0.0.1:9200"


class StatsMetric(StrEnum):
    """Index stats metric groups."""

    ALL = "_all"
    COMPLETION = "completion"
    DOCS = "docs"
    FIELDDATA = "fielddata"
    FLUSH = "flush"
    GET = "get"
    INDEXING = "indexing"
    MERGE = "merge"
    QUERY_CACHE = "query_cache"
    REFRESH = "refresh"
    SEARCH = "search"
    SEGMENTS = "segments"
    STORE = "store"
    TRANSLOG = "translog"
    WARMER = "warmer"


@dataclass
class ElasticsearchConfig:
    """Elasticsearch client configuration."""

    base_url: str = DEFAULT_ES_URL
    timeout_seconds: float = 10.0
    api_key: str = ""
    username: str = ""
    password: str = ""
    verify_certs: bool = True

    @classmethod
    def from_env(cls) -> ElasticsearchConfig:
        """Build a config from ES_* environment variables."""
        return cls(
            base_url=os.environ.get("ES_URL") or DEFAULT_ES_URL,
            timeout_seconds=float(os.environ.get("ES_TIMEOUT_SECONDS") or 10.0),
            api_key=os.environ.get("ES_API_KEY", ""),
            username=os.environ.get("ES_USERNAME", ""),
            password=os.environ.get("ES_PASSWORD", ""),
        )
