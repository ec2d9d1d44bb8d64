from .document_cache import DocumentCache
from .document_store import DocumentStore

__all__ = [
    "DocumentCache",
    "DocumentStore",
]
