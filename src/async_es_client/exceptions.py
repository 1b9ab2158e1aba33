"""Elasticsearch client exceptions."""

from __future__ import annotations

from typing import Any


class ElasticsearchError(Exception):
    """Error raised by the Elasticsearch client.

    ``status_code`` carries the HTTP status returned by Elasticsearch, or
    ``None`` when the request never produced a response.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        body: Any = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.body = body
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ElasticsearchErrorCodes:
    """ElasticsearchError code constants."""

    NOT_FOUND: str = "NOT_FOUND"
    UNAUTHORIZED: str = "UNAUTHORIZED"
    CONFLICT: str = "CONFLICT"
    HTTP_ERROR: str = "HTTP_ERROR"
    CONNECTION_ERROR: str = "CONNECTION_ERROR"
    INVALID_RESPONSE: str = "INVALID_RESPONSE"

    @classmethod
    def from_status(cls, status_code: int) -> str:
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code in (401, 403):
            return cls.UNAUTHORIZED
        if status_code == 409:
            return cls.CONFLICT
        return cls.HTTP_ERROR


class ConfigError(Exception):
    """Configuration loading error."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ConfigErrorCodes:
    """ConfigError code constants."""

    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"
