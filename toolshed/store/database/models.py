"""
Database Models
---------------------------

The tortoise models backing the :class:`~toolshed.store.database.DatabaseStore`.
"""

from tortoise import Model, fields

from toolshed.models import Tool


class ToolModel(Model):
    id = fields.BigIntField(pk=True)
    name = fields.CharField(255)
    description = fields.TextField(default="")

    class Meta:
        table = "tool"

    def to_tool(self) -> Tool:
        """Converts the row into a detached :class:`~toolshed.models.Tool`."""
        return Tool(self.name, self.description, id=self.id)
