"""
Remote operation executors.

``OperationExecutor`` is the seam every workflow talks to; ``GraphQLExecutor``
is the default implementation that posts GraphQL documents over HTTP.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

import httpx
import structlog

from ..config import settings
from ..errors import GraphQLError, TransportError, UnexpectedResponseError
from .operations import OperationSpec


logger = structlog.stdlib.get_logger("graphql")


class OperationExecutor(ABC):
    """Executes a named operation against an endpoint and returns its data."""

    @abstractmethod
    async def execute(
        self,
        endpoint: str,
        operation: OperationSpec,
        variables: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """Return the response ``data`` mapping or raise ``TransportError``."""
        pass

    async def close(self) -> None:
        pass


class GraphQLExecutor(OperationExecutor):
    """
    Async GraphQL-over-HTTP executor.

    Example usage:
        executor = GraphQLExecutor(timeout=10)
        data = await executor.execute(endpoint, LOGIN, {"appId": "...", "initData": "..."})
        await executor.close()
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout or settings.request_timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "content-type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GraphQLExecutor":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def execute(
        self,
        endpoint: str,
        operation: OperationSpec,
        variables: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        client = await self._get_client()
        start = time.perf_counter()
        status_code: Optional[int] = None
        failed = True

        try:
            response = await client.post(
                endpoint,
                json={
                    "query": operation.document,
                    "operationName": operation.name,
                    "variables": dict(variables),
                },
                headers=dict(headers or {}),
            )
            status_code = response.status_code
            response.raise_for_status()
            body = response.json()

            if not isinstance(body, dict):
                raise UnexpectedResponseError(
                    f"{operation.name} returned a non-object body", status_code=status_code
                )

            errors = body.get("errors")
            if errors:
                raise GraphQLError(errors, status_code=status_code)

            data = body.get("data")
            if not isinstance(data, dict):
                raise UnexpectedResponseError(
                    f"{operation.name} response has no data", status_code=status_code
                )
            failed = False
            return data
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"{operation.name} failed: HTTP {e.response.status_code} {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"{operation.name} request failed: {e}") from e
        except ValueError as e:
            raise UnexpectedResponseError(
                f"{operation.name} returned a non-JSON body", status_code=status_code
            ) from e
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 1)
            log = logger.warning if failed else logger.info
            log(
                "graphql_request",
                operation=operation.name,
                endpoint=endpoint,
                status=status_code,
                duration_ms=duration_ms,
            )
