"""Persistence for landing page documents."""

from .backends import InMemoryBackend, PersistenceBackend, SupabaseBackend, create_backend
from .documents import DocumentGateway

__all__ = [
    "DocumentGateway",
    "InMemoryBackend",
    "PersistenceBackend",
    "SupabaseBackend",
    "create_backend",
]
