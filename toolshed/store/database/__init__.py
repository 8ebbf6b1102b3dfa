"""
Provides the tortoise-backed implementation of the tool store.
"""

from .models import ToolModel
from .store import DatabaseStore
