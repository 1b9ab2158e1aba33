"""Elasticsearch HTTP REST client implementation."""

from __future__ import annotations

import json
import time
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from .client import ElasticsearchClient, Options
from .exceptions import ElasticsearchError, ElasticsearchErrorCodes
from .models import ElasticsearchConfig

logger = structlog.get_logger(__name__)

NDJSON_CONTENT_TYPE = "application/x-ndjson"


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_encode_value(v) for v in value)
    return str(value)


def _encode_params(options: Options | None = None, **extra: Any) -> dict[str, str]:
    """Merge extra parameters with caller options into query-string values."""
    params: dict[str, str] = {}
    for source in (extra, options or {}):
        for key, value in source.items():
            if value is None:
                continue
            params[key] = _encode_value(value)
    return params


def _id(value: str) -> str:
    return quote(value, safe="")


def _indices(value: str | Sequence[str]) -> str:
    # "," and "*" are index-expression syntax and stay unescaped.
    if isinstance(value, str):
        expression = quote(value, safe=",*")
    else:
        expression = ",".join(quote(v, safe="*") for v in value if v)
    if not expression:
        raise ValueError("index name must not be empty")
    return expression


def _error_reason(body: Any) -> str | None:
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict):
        return error.get("reason") or error.get("type")
    if isinstance(error, str):
        return error
    return None


class HttpElasticsearchClient(ElasticsearchClient):
    """Elasticsearch REST client built on httpx."""

    def __init__(self, config: ElasticsearchConfig) -> None:
        self._config = config
        headers: dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if config.api_key:
            headers["Authorization"] = f"ApiKey {config.api_key}"
        self._headers = headers

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def _make_client(self) -> httpx.AsyncClient:
        auth = (
            (self._config.username, self._config.password)
            if self._config.username
            else None
        )
        return httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=self._headers,
            timeout=self._config.timeout_seconds,
            auth=auth,
            verify=self._config.verify_certs,
        )

    def _handle_error(self, resp: httpx.Response, context: str) -> None:
        if resp.status_code < 400:
            return
        body: Any
        try:
            body = resp.json()
        except ValueError:
            body = resp.text or None
        reason = _error_reason(body) or resp.text or resp.reason_phrase
        code = ElasticsearchErrorCodes.from_status(resp.status_code)
        logger.warning(
            "Elasticsearch request rejected",
            context=context,
            status=resp.status_code,
            code=code,
            reason=reason,
        )
        raise ElasticsearchError(
            code=code,
            message=f"{context}: HTTP {resp.status_code}: {reason}",
            status_code=resp.status_code,
            body=body,
        )

    def _decode(self, resp: httpx.Response, context: str) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise ElasticsearchError(
                code=ElasticsearchErrorCodes.INVALID_RESPONSE,
                message=f"{context}: response body is not valid JSON",
                status_code=resp.status_code,
                body=resp.text,
                cause=e,
            ) from e

    async def _request(
        self,
        method: str,
        path: str,
        context: str,
        *,
        params: dict[str, str] | None = None,
        json_body: Any = None,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        started = time.perf_counter()
        try:
            async with self._make_client() as client:
                resp = await client.request(
                    method,
                    path,
                    params=params,
                    json=json_body,
                    content=content,
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.error(
                "Elasticsearch request failed",
                context=context,
                method=method,
                path=path,
                error=str(e),
            )
            raise ElasticsearchError(
                code=ElasticsearchErrorCodes.CONNECTION_ERROR,
                message=f"{context}: {e}",
                cause=e,
            ) from e
        logger.debug(
            "Elasticsearch request",
            method=method,
            path=path,
            status=resp.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        self._handle_error(resp, context)
        return self._decode(resp, context)

    # --- indices ---

    async def create_index(
        self, index: str, body: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self._request(
            "PUT", f"/{_indices(index)}", f"create_index({index})", json_body=body
        )

    async def exists_index(self, index: str) -> None:
        await self._request("HEAD", f"/{_indices(index)}", f"exists_index({index})")

    async def get_index(self, index: str) -> dict[str, Any]:
        return await self._request("GET", f"/{_indices(index)}", f"get_index({index})")

    async def delete_index(self, index: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/{_indices(index)}", f"delete_index({index})")

    async def stats_index(
        self, index: str, metric: str = "_all", options: Options | None = None
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"/{_indices(index)}/_stats/{_id(str(metric))}",
            f"stats_index({index}, {metric})",
            params=_encode_params(options),
        )

    async def refresh(
        self, indices: str | Sequence[str] | None = None, options: Options | None = None
    ) -> dict[str, Any]:
        path = f"/{_indices(indices)}/_refresh" if indices else "/_refresh"
        return await self._request(
            "POST", path, "refresh", params=_encode_params(options)
        )

    # --- documents ---

    async def index_document(
        self,
        index: str,
        id: str,
        body: Mapping[str, Any],
        options: Options | None = None,
        type: str = "_doc",
    ) -> dict[str, Any]:
        if id:
            method, path = "PUT", f"/{_indices(index)}/{_id(type)}/{_id(id)}"
        else:
            method, path = "POST", f"/{_indices(index)}/{_id(type)}"
        return await self._request(
            method,
            path,
            f"index_document({index}, {id!r})",
            params=_encode_params(options),
            json_body=dict(body),
        )

    async def exists_document(self, index: str, id: str, type: str = "_doc") -> None:
        await self._request(
            "HEAD",
            f"/{_indices(index)}/{_id(type)}/{_id(id)}",
            f"exists_document({index}, {id})",
        )

    async def get_document(
        self,
        index: str,
        id: str,
        options: Options | None = None,
        type: str = "_doc",
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"/{_indices(index)}/{_id(type)}/{_id(id)}",
            f"get_document({index}, {id})",
            params=_encode_params(options),
        )

    async def update_document(
        self,
        index: str,
        id: str,
        body: Mapping[str, Any],
        options: Options | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            f"/{_indices(index)}/_update/{_id(id)}",
            f"update_document({index}, {id})",
            params=_encode_params(options),
            json_body=dict(body),
        )

    async def delete_document(
        self,
        index: str,
        id: str,
        options: Options | None = None,
        type: str = "_doc",
    ) -> dict[str, Any]:
        return await self._request(
            "DELETE",
            f"/{_indices(index)}/{_id(type)}/{_id(id)}",
            f"delete_document({index}, {id})",
            params=_encode_params(options),
        )

    async def bulk(
        self,
        body: Sequence[Mapping[str, Any]],
        index: str | None = None,
        options: Options | None = None,
    ) -> dict[str, Any]:
        path = f"/{_indices(index)}/_bulk" if index else "/_bulk"
        # NDJSON requires a trailing newline after the last line.
        payload = "".join(json.dumps(line) + "\n" for line in body)
        return await self._request(
            "POST",
            path,
            "bulk",
            params=_encode_params(options),
            content=payload,
            headers={"Content-Type": NDJSON_CONTENT_TYPE},
        )

    # --- search ---

    async def uri_search_one_index(
        self, index: str, query: str, options: Options | None = None
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"/{_indices(index)}/_search",
            f"uri_search_one_index({index})",
            params=_encode_params(options, q=query),
        )

    async def uri_search_many_indices(
        self, indices: Sequence[str], query: str, options: Options | None = None
    ) -> dict[str, Any]:
        # an empty list searches every index
        target = _indices(indices) if any(indices) else "_all"
        return await self._request(
            "GET",
            f"/{target}/_search",
            f"uri_search_many_indices({target})",
            params=_encode_params(options, q=query),
        )

    async def uri_search_all_indices(
        self, query: str, options: Options | None = None
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            "/_all/_search",
            "uri_search_all_indices",
            params=_encode_params(options, q=query),
        )

    async def search(
        self,
        query: Mapping[str, Any],
        indices: str | Sequence[str] | None = None,
        options: Options | None = None,
    ) -> dict[str, Any]:
        path = f"/{_indices(indices)}/_search" if indices else "/_search"
        return await self._request(
            "POST", path, "search", params=_encode_params(options), json_body=dict(query)
        )

    async def count(
        self,
        index: str,
        options: Options | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        path = f"/{_indices(index)}/_count"
        if query is None:
            return await self._request(
                "GET", path, f"count({index})", params=_encode_params(options)
            )
        return await self._request(
            "POST",
            path,
            f"count({index})",
            params=_encode_params(options),
            json_body=dict(query),
        )

    # --- cat ---

    async def cat_indices(
        self, index: str | None = None, options: Options | None = None
    ) -> list[dict[str, Any]]:
        path = f"/_cat/indices/{_indices(index)}" if index else "/_cat/indices"
        return await self._request(
            "GET", path, "cat_indices", params=_encode_params(options, format="json")
        )

    async def cat_health(self, options: Options | None = None) -> list[dict[str, Any]]:
        return await self._request(
            "GET", "/_cat/health", "cat_health", params=_encode_params(options, format="json")
        )

    # --- cluster ---

    async def info(self) -> dict[str, Any]:
        return await self._request("GET", "/", "info")
