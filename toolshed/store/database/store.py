from typing import List, Optional

from toolshed.models import Tool
from toolshed.store.database.models import ToolModel
from toolshed.store.store import ToolStore


class DatabaseStore(ToolStore):
    """
    Stores the tools in whichever database tortoise has been initialized with.
    """

    async def find_all(self) -> List[Tool]:
        return [row.to_tool() for row in await ToolModel.all().order_by("id")]

    async def find_by_id(self, tool_id: int) -> Optional[Tool]:
        row = await ToolModel.filter(id=tool_id).first()
        return row.to_tool() if row is not None else None

    async def exists_by_id(self, tool_id: int) -> bool:
        return await ToolModel.filter(id=tool_id).exists()

    async def save(self, tool: Tool) -> Tool:
        description = tool.description if tool.description is not None else ""

        if tool.id is None:
            row = await ToolModel.create(name=tool.name, description=description)
            return row.to_tool()

        row = await ToolModel.filter(id=tool.id).first()
        if row is None:
            row = await ToolModel.create(id=tool.id, name=tool.name, description=description)
        else:
            row.name = tool.name
            row.description = description
            await row.save()

        return row.to_tool()

    async def delete_by_id(self, tool_id: int):
        await ToolModel.filter(id=tool_id).delete()

    async def delete_all(self):
        await ToolModel.all().delete()

    async def count(self) -> int:
        return await ToolModel.all().count()
