"""Flat-file persistence — one JSON array per record collection.

Layout:
    <data_dir>/users.json
    <data_dir>/clients.json
    <data_dir>/recommendations.json
    <data_dir>/subscriptions.json
    <data_dir>/access_requests.json

Every collection is read and written as a whole. Writers hold a per-collection
lock for the full read-modify-write so concurrent mutations cannot lose each
other's updates.
"""

import asyncio
import json
import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from advisordesk.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonCollectionStore:
    """Owns the data directory and one lock per collection file."""

    def __init__(self, data_dir: str | Path):
        self._data_dir = Path(data_dir)
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, name: str) -> Path:
        return self._data_dir / f"{name}.json"

    def lock_for(self, name: str) -> asyncio.Lock:
        if name not in self._locks:
            self._locks[name] = asyncio.Lock()
        return self._locks[name]

    def read(self, name: str) -> list[dict[str, Any]]:
        """Raw records of a collection; an unreadable file counts as empty."""
        path = self.path_for(name)
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Could not read %s — treating collection as empty", path)
            return []
        if not isinstance(data, list):
            logger.warning("%s does not hold a JSON array — treating collection as empty", path)
            return []
        return data

    def write(self, name: str, records: list[dict[str, Any]]) -> None:
        """Replace a collection file; the old file stays intact if writing fails."""
        path = self.path_for(name)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(records, indent=2), encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            raise PersistenceError(name) from e


class JsonCollection(Generic[T]):
    """Typed view of one collection — validates records in and out."""

    def __init__(self, store: JsonCollectionStore, name: str, entity_type: type[T]):
        self._store = store
        self._name = name
        self._adapter: TypeAdapter[T] = TypeAdapter(entity_type)

    @property
    def name(self) -> str:
        return self._name

    async def load(self) -> list[T]:
        """Snapshot read; files are replaced atomically so no lock is needed."""
        return self._decode(self._store.read(self._name))

    @asynccontextmanager
    async def mutate(self) -> AsyncIterator[list[T]]:
        """Yield the loaded records under the collection lock and save them on exit.

        Nothing is written if the body raises.
        """
        async with self._store.lock_for(self._name):
            records = self._decode(self._store.read(self._name))
            yield records
            self._store.write(self._name, [self._adapter.dump_python(r, mode="json") for r in records])

    def _decode(self, raw_records: list[dict[str, Any]]) -> list[T]:
        entities: list[T] = []
        for index, raw in enumerate(raw_records):
            try:
                entities.append(self._adapter.validate_python(raw))
            except ValidationError as e:
                logger.warning(
                    "Skipping malformed record %d in %s: %d error(s)",
                    index,
                    self._name,
                    e.error_count(),
                )
        return entities
