"""
Tool
---------------------------

The single resource managed by the server. A tool is a flat record that
is handed between the views, the service, and the stores. Stores always
hand out copies, so changing a tool has no effect until it is saved.
"""
from typing import Any, Dict, Optional

from attr import dataclass


@dataclass
class Tool:

    name: Optional[str] = ""
    description: Optional[str] = ""
    id: Optional[int] = None

    def serialize(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description
        }
