"""
This module hosts the abstract base class for all tool stores.
This class is used to define the "contract" that all storage backends
must adhere to. Any class that implements this interface is assumed to
provide a persistent store of tools.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from toolshed.models import Tool


class ToolStore(ABC):
    """The abstract store interface."""

    @abstractmethod
    async def find_all(self) -> List[Tool]:
        """Gets all the tools, in the order the store keeps them."""

    @abstractmethod
    async def find_by_id(self, tool_id: int) -> Optional[Tool]:
        """Gets a single tool, or None if there is no tool with that id."""

    @abstractmethod
    async def exists_by_id(self, tool_id: int) -> bool:
        """Checks whether a tool with the given id exists."""

    @abstractmethod
    async def save(self, tool: Tool) -> Tool:
        """
        Saves a tool, returning the stored copy.

        A tool without an id is inserted and assigned a new one. A tool
        with an id overwrites whatever is stored under that id.
        """

    @abstractmethod
    async def delete_by_id(self, tool_id: int):
        """Deletes the tool with the given id, if there is one."""

    @abstractmethod
    async def delete_all(self):
        """Deletes every tool."""

    @abstractmethod
    async def count(self) -> int:
        """Counts the stored tools."""
