"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema
from marshmallow.fields import Integer, String


class ToolSchema(Schema):
    """The schema corresponding to the :class:`~toolshed.models.tool.Tool` model."""

    id = Integer(allow_none=True)
    name = String(allow_none=True)
    description = String(allow_none=True, load_default="")
