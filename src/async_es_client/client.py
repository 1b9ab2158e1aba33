"""ElasticsearchClient abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

Options = Mapping[str, Any]


class ElasticsearchClient(ABC):
    """Abstract async Elasticsearch client.

    Every method performs one REST call and returns the decoded JSON body,
    or ``None`` when Elasticsearch answers with an empty body.
    """

    # --- indices ---

    @abstractmethod
    async def create_index(
        self, index: str, body: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Create an index, optionally with settings and mappings."""
        ...

    @abstractmethod
    async def exists_index(self, index: str) -> None:
        """Return None if the index exists, raise a 404 error otherwise."""
        ...

    @abstractmethod
    async def get_index(self, index: str) -> dict[str, Any]:
        """Fetch the index settings, mappings and aliases."""
        ...

    @abstractmethod
    async def delete_index(self, index: str) -> dict[str, Any]:
        """Delete an index."""
        ...

    @abstractmethod
    async def stats_index(
        self, index: str, metric: str = "_all", options: Options | None = None
    ) -> dict[str, Any]:
        """Fetch index statistics for a metric group."""
        ...

    @abstractmethod
    async def refresh(
        self, indices: str | Sequence[str] | None = None, options: Options | None = None
    ) -> dict[str, Any]:
        """Refresh the given indices, or every index when none are given."""
        ...

    # --- documents ---

    @abstractmethod
    async def index_document(
        self,
        index: str,
        id: str,
        body: Mapping[str, Any],
        options: Options | None = None,
        type: str = "_doc",
    ) -> dict[str, Any]:
        """Index a document. An empty id lets Elasticsearch generate one."""
        ...

    @abstractmethod
    async def exists_document(self, index: str, id: str, type: str = "_doc") -> None:
        """Return None if the document exists, raise a 404 error otherwise."""
        ...

    @abstractmethod
    async def get_document(
        self,
        index: str,
        id: str,
        options: Options | None = None,
        type: str = "_doc",
    ) -> dict[str, Any]:
        """Fetch a document. ``type="_source"`` returns only its source."""
        ...

    @abstractmethod
    async def update_document(
        self,
        index: str,
        id: str,
        body: Mapping[str, Any],
        options: Options | None = None,
    ) -> dict[str, Any]:
        """Apply a partial document or script update."""
        ...

    @abstractmethod
    async def delete_document(
        self,
        index: str,
        id: str,
        options: Options | None = None,
        type: str = "_doc",
    ) -> dict[str, Any]:
        """Delete a document by id."""
        ...

    @abstractmethod
    async def bulk(
        self,
        body: Sequence[Mapping[str, Any]],
        index: str | None = None,
        options: Options | None = None,
    ) -> dict[str, Any]:
        """Send action/source lines to the _bulk endpoint."""
        ...

    # --- search ---

    @abstractmethod
    async def uri_search_one_index(
        self, index: str, query: str, options: Options | None = None
    ) -> dict[str, Any]:
        """Run a query-string search against one index."""
        ...

    @abstractmethod
    async def uri_search_many_indices(
        self, indices: Sequence[str], query: str, options: Options | None = None
    ) -> dict[str, Any]:
        """Run a query-string search against several indices. An empty list searches all."""
        ...

    @abstractmethod
    async def uri_search_all_indices(
        self, query: str, options: Options | None = None
    ) -> dict[str, Any]:
        """Run a query-string search against every index."""
        ...

    @abstractmethod
    async def search(
        self,
        query: Mapping[str, Any],
        indices: str | Sequence[str] | None = None,
        options: Options | None = None,
    ) -> dict[str, Any]:
        """Run a Query DSL search."""
        ...

    @abstractmethod
    async def count(
        self,
        index: str,
        options: Options | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Count matching documents, optionally with a Query DSL body."""
        ...

    # --- cat ---

    @abstractmethod
    async def cat_indices(
        self, index: str | None = None, options: Options | None = None
    ) -> list[dict[str, Any]]:
        """List indices as JSON rows, optionally narrowed to one index."""
        ...

    @abstractmethod
    async def cat_health(self, options: Options | None = None) -> list[dict[str, Any]]:
        """Return cluster health as JSON rows."""
        ...

    # --- cluster ---

    @abstractmethod
    async def info(self) -> dict[str, Any]:
        """Return cluster name and version information."""
        ...
