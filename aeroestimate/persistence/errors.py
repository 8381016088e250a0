"""Persistence-specific exceptions."""


class PersistenceError(Exception):
    """Base exception for all persistence errors."""


class CacheEntryCorruptError(PersistenceError):
    """Raised when a stored cache document no longer validates."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"{collection}/{doc_id} does not match the cache entry schema")
