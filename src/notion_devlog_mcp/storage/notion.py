"""Notion-backed record store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Protocol

from notion_client import APIResponseError, AsyncClient
from notion_client.errors import RequestTimeoutError

logger = logging.getLogger(__name__)


class NotionStoreError(RuntimeError):
    """Raised when Notion rejects or fails a page creation."""


class PagesEndpointProtocol(Protocol):
    """Minimal slice of the Notion ``pages`` endpoint used here."""

    def create(self, **kwargs: Any) -> Awaitable[dict[str, Any]]:
        ...


class ClientProtocol(Protocol):
    pages: PagesEndpointProtocol


@dataclass(slots=True)
class CreatedRecord:
    """Identifier and locator of a newly created page."""

    id: str
    url: str | None


class NotionStore:
    """Create session pages in a Notion database."""

    def __init__(
        self,
        api_key: str,
        database_id: str,
        *,
        client_factory: Callable[[], ClientProtocol] | None = None,
    ) -> None:
        self._api_key = api_key
        self._database_id = database_id
        self._client_factory = client_factory or self._default_client_factory
        self._client: ClientProtocol | None = None

    def _default_client_factory(self) -> ClientProtocol:
        return AsyncClient(auth=self._api_key)

    def _ensure_client(self) -> ClientProtocol:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    @property
    def database_id(self) -> str:
        return self._database_id

    async def create_record(self, properties: dict[str, Any]) -> CreatedRecord:
        """Create one page under the configured database."""

        client = self._ensure_client()
        try:
            response = await client.pages.create(
                parent={"database_id": self._database_id},
                properties=properties,
            )
        except APIResponseError as exc:
            logger.error(
                "Notion API rejected page creation",
                extra={"status": exc.status, "code": str(exc.code)},
            )
            raise NotionStoreError(str(exc)) from exc
        except RequestTimeoutError as exc:
            raise NotionStoreError(str(exc) or "Request to Notion API timed out") from exc

        page_id = response.get("id")
        if not page_id:
            raise NotionStoreError("Notion response did not include a page id")
        return CreatedRecord(id=page_id, url=response.get("url"))


__all__ = ["ClientProtocol", "CreatedRecord", "NotionStore", "NotionStoreError"]
