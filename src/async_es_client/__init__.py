"""Asynchronous Elasticsearch REST client library."""

from .client import ElasticsearchClient
from .config import ElasticsearchSection, LogSection, Settings, load_config
from .exceptions import (
    ConfigError,
    ConfigErrorCodes,
    ElasticsearchError,
    ElasticsearchErrorCodes,
)
from .http_client import HttpElasticsearchClient
from .logger import new_logger
from .models import DEFAULT_ES_URL, ElasticsearchConfig, StatsMetric

__all__ = [
    "DEFAULT_ES_URL",
    "ConfigError",
    "ConfigErrorCodes",
    "ElasticsearchClient",
    "ElasticsearchConfig",
    "ElasticsearchError",
    "ElasticsearchErrorCodes",
    "ElasticsearchSection",
    "HttpElasticsearchClient",
    "LogSection",
    "Settings",
    "StatsMetric",
    "load_config",
    "new_logger",
]
