from typing import Dict, List, Optional

import attr

from toolshed.models import Tool
from toolshed.store.store import ToolStore


class MemoryStore(ToolStore):
    """
    Emulates a database by doing all the operations in memory.
    """

    def __init__(self):
        self.tools: Dict[int, Tool] = {}

    async def find_all(self) -> List[Tool]:
        return [attr.evolve(tool) for tool in self.tools.values()]

    async def find_by_id(self, tool_id: int) -> Optional[Tool]:
        tool = self.tools.get(tool_id)
        return attr.evolve(tool) if tool is not None else None

    async def exists_by_id(self, tool_id: int) -> bool:
        return tool_id in self.tools

    async def save(self, tool: Tool) -> Tool:
        if tool.id is None:
            next_key = max(self.tools.keys()) + 1 if self.tools else 1
            tool = attr.evolve(tool, id=next_key)
        else:
            tool = attr.evolve(tool)

        self.tools[tool.id] = tool
        return attr.evolve(tool)

    async def delete_by_id(self, tool_id: int):
        self.tools.pop(tool_id, None)

    async def delete_all(self):
        self.tools.clear()

    async def count(self) -> int:
        return len(self.tools)
