"""
Handles all the persistence for the application.
Currently has two implementations: in-memory and
tortoise-backed databases.
"""

from .database import DatabaseStore
from .memory import MemoryStore
from .store import ToolStore

STORES = {
    "memory": MemoryStore,
    "database": DatabaseStore,
}


def get_store(backend: str) -> ToolStore:
    """
    Creates the store for the given backend name.

    :raises ValueError: If there is no store with that name.
    """
    try:
        return STORES[backend]()
    except KeyError:
        raise ValueError(f"Unknown store backend {backend!r} (expected one of {', '.join(STORES)}).")
