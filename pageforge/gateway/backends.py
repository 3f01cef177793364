"""Persistence backends for landing pages and the media lookups.

The store is an external collaborator. The gateway only needs four
table-level operations, so a backend is a thin adapter:

- InMemoryBackend: dict-backed store for tests and local development
- SupabaseBackend: PostgREST tables of the hosted database, over httpx
"""

import copy
import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

import httpx

from pageforge.config import settings
from pageforge.errors import GatewayError

logger = logging.getLogger(__name__)


class PersistenceBackend(ABC):
    """Table-level operations the gateway and media directory rely on."""

    @abstractmethod
    async def select(
        self,
        table: str,
        filters: Mapping[str, Any] | None = None,
        order: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return rows whose columns equal all `filters` values."""

    async def select_one(
        self, table: str, filters: Mapping[str, Any]
    ) -> Optional[dict[str, Any]]:
        """Return the first matching row or None."""
        rows = await self.select(table, filters, limit=1)
        return rows[0] if rows else None

    @abstractmethod
    async def insert(self, table: str, record: Mapping[str, Any]) -> dict[str, Any]:
        """Insert a row and return it including the assigned `id`."""

    @abstractmethod
    async def update(
        self, table: str, record_id: str, changes: Mapping[str, Any]
    ) -> Optional[dict[str, Any]]:
        """Update the row with `id == record_id`; None if no row matched."""

    async def aclose(self) -> None:
        """Release network resources."""


class InMemoryBackend(PersistenceBackend):
    """
    Dict-backed store.

    Rows are deep-copied on the way in and out, like a real store would
    serialize them. Unique constraints can be declared per table.
    """

    DEFAULT_UNIQUE: dict[str, tuple[str, ...]] = {
        settings.PAGES_TABLE: ("album_id",),
    }

    def __init__(self, unique: Mapping[str, tuple[str, ...]] | None = None):
        self._tables: dict[str, dict[str, dict[str, Any]]] = {}
        self._unique = dict(self.DEFAULT_UNIQUE if unique is None else unique)

    def seed(self, table: str, rows: list[Mapping[str, Any]]) -> None:
        """Put rows into a table as-is (ids generated where missing)."""
        target = self._tables.setdefault(table, {})
        for row in rows:
            row = copy.deepcopy(dict(row))
            row.setdefault("id", str(uuid.uuid4()))
            target[str(row["id"])] = row

    def rows(self, table: str) -> list[dict[str, Any]]:
        """All rows of a table (copies)."""
        return [copy.deepcopy(row) for row in self._tables.get(table, {}).values()]

    @staticmethod
    def _matches(row: Mapping[str, Any], filters: Mapping[str, Any]) -> bool:
        return all(row.get(key) == value for key, value in filters.items())

    async def select(self, table, filters=None, order=None, limit=None):
        rows = [
            copy.deepcopy(row)
            for row in self._tables.get(table, {}).values()
            if self._matches(row, filters or {})
        ]
        if order:
            column, _, direction = order.partition(".")
            rows.sort(key=lambda r: (r.get(column) is None, r.get(column)), reverse=direction == "desc")
        if limit is not None:
            rows = rows[:limit]
        return rows

    def _check_unique(self, table: str, row: Mapping[str, Any]) -> None:
        for column in self._unique.get(table, ()):
            for other in self._tables.get(table, {}).values():
                if other["id"] != row["id"] and other.get(column) == row.get(column):
                    raise GatewayError(
                        f"Duplicate key value violates unique constraint on {table}.{column}"
                    )

    async def insert(self, table, record):
        row = copy.deepcopy(dict(record))
        if row.get("id") is None:
            row["id"] = str(uuid.uuid4())
        target = self._tables.setdefault(table, {})
        if row["id"] in target:
            raise GatewayError(f"Duplicate key value violates primary key of {table}")
        self._check_unique(table, row)
        target[row["id"]] = row
        return copy.deepcopy(row)

    async def update(self, table, record_id, changes):
        row = self._tables.get(table, {}).get(record_id)
        if row is None:
            return None
        updated = {**row, **copy.deepcopy(dict(changes)), "id": record_id}
        self._check_unique(table, updated)
        self._tables[table][record_id] = updated
        return copy.deepcopy(updated)


def _pg_value(value: Any) -> str:
    """Format a filter value for a PostgREST `eq.` operator."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class SupabaseBackend(PersistenceBackend):
    """
    Backend talking to the hosted database's PostgREST endpoint.

    Args:
        url: Project URL, e.g. https://xyz.supabase.co
        key: API key (sent as `apikey` and bearer token)
        timeout: Request timeout in seconds
        client: Preconfigured httpx.AsyncClient (tests use a MockTransport)
    """

    def __init__(
        self,
        url: str,
        key: str,
        timeout: float = settings.REQUEST_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ):
        self._client = client or httpx.AsyncClient(
            base_url=f"{url.rstrip('/')}/rest/v1",
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

    async def _request(
        self,
        method: str,
        table: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        prefer: str | None = None,
    ) -> list[dict[str, Any]]:
        headers = {"Prefer": prefer} if prefer else None
        logger.debug(f"{method} {table} params={dict(params or {})}")
        try:
            response = await self._client.request(
                method, f"/{table}", params=params, json=json, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GatewayError(
                f"{method} {table} failed with status {e.response.status_code}: "
                f"{e.response.text[:200]}"
            ) from e
        except httpx.HTTPError as e:
            raise GatewayError(f"{method} {table} failed: {e}") from e

        if not response.content:
            return []
        try:
            data = response.json()
        except ValueError as e:
            raise GatewayError(f"{method} {table} returned invalid JSON") from e
        return data if isinstance(data, list) else [data]

    @staticmethod
    def _filter_params(filters: Mapping[str, Any] | None) -> dict[str, str]:
        return {key: f"eq.{_pg_value(value)}" for key, value in (filters or {}).items()}

    async def select(self, table, filters=None, order=None, limit=None):
        params = {"select": "*", **self._filter_params(filters)}
        if order:
            params["order"] = order
        if limit is not None:
            params["limit"] = str(limit)
        return await self._request("GET", table, params=params)

    async def insert(self, table, record):
        rows = await self._request(
            "POST", table, json=dict(record), prefer="return=representation"
        )
        if not rows:
            raise GatewayError(f"Insert into {table} returned no row")
        return rows[0]

    async def update(self, table, record_id, changes):
        rows = await self._request(
            "PATCH",
            table,
            params={"id": f"eq.{record_id}"},
            json=dict(changes),
            prefer="return=representation",
        )
        return rows[0] if rows else None

    async def aclose(self) -> None:
        await self._client.aclose()


def create_backend() -> PersistenceBackend:
    """Create the backend selected by settings."""
    if settings.SUPABASE_URL:
        logger.info(f"Using hosted store at {settings.SUPABASE_URL}")
        return SupabaseBackend(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    logger.info("PAGEFORGE_SUPABASE_URL not set, using in-memory store")
    return InMemoryBackend()
