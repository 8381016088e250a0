"""Generic async Firestore repository for shared top-level collections."""

from __future__ import annotations

import logging
from typing import Generic, Type, TypeVar

from pydantic import ValidationError

from aeroestimate.contracts.common import FirestoreModel
from aeroestimate.persistence.errors import CacheEntryCorruptError
from aeroestimate.persistence.firestore_client import get_firestore_client

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=FirestoreModel)


class BaseRepository(Generic[T]):
    """Key-value access to a Firestore collection ``/{collection_name}/``.

    Serialization relies entirely on the contract's ``to_firestore()``
    and ``from_firestore()`` methods, with no extra mapping layer. Documents
    are addressed by caller-supplied IDs; nothing is ever auto-generated
    or deleted.
    """

    def __init__(self, model_class: Type[T], collection_name: str):
        self._model_class = model_class
        self._collection_name = collection_name

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _collection_ref(self):
        db = get_firestore_client()
        return db.collection(self._collection_name)

    def _hydrate(self, doc_id: str, data: dict) -> T:
        try:
            return self._model_class.from_firestore(data)
        except ValidationError as exc:
            raise CacheEntryCorruptError(self._collection_name, doc_id) from exc

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get(self, doc_id: str) -> T | None:
        """Fetch a single document by ID. Returns *None* if missing."""
        doc = await self._collection_ref().document(doc_id).get()
        if not doc.exists:
            return None
        return self._hydrate(doc.id, doc.to_dict())

    async def list_all(self) -> list[T]:
        """Stream every document in the collection.

        Documents that no longer validate are logged and skipped so that
        one bad record cannot poison a bulk load.
        """
        results: list[T] = []
        async for doc in self._collection_ref().stream():
            try:
                results.append(self._hydrate(doc.id, doc.to_dict()))
            except CacheEntryCorruptError as exc:
                logger.warning("Skipping unreadable document: %s", exc)
        return results

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def put(self, doc_id: str, entity: T) -> None:
        """Create or wholesale replace a document."""
        await self._collection_ref().document(doc_id).set(entity.to_firestore())
