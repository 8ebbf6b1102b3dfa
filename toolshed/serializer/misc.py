"""
Miscellaneous Serializers
-------------------------

Schemas for responses that don't correspond to a model.
"""

from marshmallow import Schema
from marshmallow.fields import Integer


class ToolCountSchema(Schema):
    count = Integer(required=True)
