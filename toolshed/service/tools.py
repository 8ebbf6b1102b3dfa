"""
Tools
=====

Validates tools and applies the naming rules before handing
them to the store. Rule violations are raised as subclasses
of :class:`ToolError` for the views to translate.
"""
from typing import List

from toolshed import logger
from toolshed.models import Tool
from toolshed.store import ToolStore


class ToolError(Exception):
    pass


class InvalidToolError(ToolError):
    """Raised when a tool is missing a required field."""


class ToolExistsError(ToolError):
    """Raised when a new tool's name clashes with an existing one."""


class ToolNotFoundError(ToolError):
    """Raised when there is no tool to act on."""


def is_blank(value) -> bool:
    return value is None or not value.strip()


def names_collide(first: str, second: str) -> bool:
    """Checks whether either name is a case-insensitive prefix of the other."""
    first, second = first.lower(), second.lower()
    return first.startswith(second) or second.startswith(first)


class ToolService:

    def __init__(self, store: ToolStore):
        self.store = store

    async def get_by_id(self, tool_id: int) -> Tool:
        """
        Gets a single tool.

        :raises ToolNotFoundError: If there is no tool with the given id.
        """
        tool = await self.store.find_by_id(tool_id)
        if tool is None:
            raise ToolNotFoundError(f"Tool {tool_id} not found.")
        return tool

    async def add(self, tool: Tool) -> Tool:
        """
        Adds a new tool, ignoring any id it was given.

        A tool is rejected
        if its name and any existing name are prefixes of one another,
        ignoring case. Adding "Hamm" when "Hammer" exists fails, as does
        adding "Hammers".

        :raises InvalidToolError: If the name is missing or blank.
        :raises ToolExistsError: If the name collides with an existing tool.
        """
        validate_name(tool)

        for existing in await self.store.find_all():
            if names_collide(existing.name, tool.name):
                logger.info("Rejected tool %r, clashes with tool %s (%r)", tool.name, existing.id, existing.name)
                raise ToolExistsError(f"Tool name {tool.name!r} clashes with existing tool {existing.name!r}.")

        tool = await self.store.save(Tool(tool.name, tool.description or ""))
        logger.info("Added tool %s (%r)", tool.id, tool.name)
        return tool

    async def delete_by_id(self, tool_id: int):
        """
        Deletes a single tool.

        :raises ToolNotFoundError: If there is no tool with the given id.
        """
        if not await self.store.exists_by_id(tool_id):
            raise ToolNotFoundError(f"Tool {tool_id} not found.")

        await self.store.delete_by_id(tool_id)
        logger.info("Deleted tool %s", tool_id)

    async def update(self, tool_id: int, tool: Tool) -> Tool:
        """
        Overwrites the name and description of an existing tool.

        :raises InvalidToolError: If the new name is missing or blank.
        :raises ToolNotFoundError: If there is no tool with the given id.
        """
        validate_name(tool)
        existing = await self.get_by_id(tool_id)
        existing.name = tool.name
        existing.description = tool.description or ""
        existing = await self.store.save(existing)
        logger.info("Updated tool %s (%r)", existing.id, existing.name)
        return existing

    async def get_all(self) -> List[Tool]:
        return await self.store.find_all()

    async def count(self) -> int:
        return await self.store.count()

    async def delete_all(self):
        """
        Deletes every tool.

        :raises ToolNotFoundError: If there are no tools to delete.
        """
        count = await self.count()
        if count == 0:
            raise ToolNotFoundError("No tools to delete.")

        await self.store.delete_all()
        logger.info("Deleted all %s tools", count)


def validate_name(tool: Tool):
    if is_blank(tool.name):
        raise InvalidToolError("Tool name cannot be null or blank.")
