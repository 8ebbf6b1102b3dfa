"""
Provides a simple in-memory implementation of the tool store,
for testing and mocking purposes.

.. versionadded:: 1.0.0
"""

from .store import MemoryStore
