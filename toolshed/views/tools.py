"""
Tool Related Views
-------------------------

Handles all the tool CRUD
"""
from http import HTTPStatus
from typing import Any, Dict

from aiohttp_apispec import docs

from toolshed.models import Tool
from toolshed.serializer import JSendSchema, JSendStatus
from toolshed.serializer.decorators import returns, expects
from toolshed.serializer.misc import ToolCountSchema
from toolshed.serializer.models import ToolSchema
from toolshed.service import ToolError, ToolNotFoundError, InvalidToolError, ToolExistsError
from toolshed.views.base import BaseView
from toolshed.views.decorators import match_params

TOOL_IDENTIFIER_REGEX = "(?!(?:all|add|count)$)[^{}/]+"


def failure(error: ToolError) -> Dict[str, Any]:
    return {
        "status": JSendStatus.FAIL,
        "data": {
            "message": str(error),
            "errors": error.args
        }
    }


class ToolsView(BaseView):
    """
    Gets or deletes all the tools.
    """
    url = "/tools/all"
    name = "tools"

    @docs(summary="Get All Tools")
    @returns(ToolSchema(many=True))
    async def get(self):
        return [tool.serialize() for tool in await self.tool_service.get_all()]

    @docs(summary="Delete All Tools")
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        deleted=(None, HTTPStatus.OK)
    )
    async def delete(self):
        try:
            await self.tool_service.delete_all()
        except ToolNotFoundError as error:
            return "missing", failure(error)
        else:
            return "deleted", None


class ToolCountView(BaseView):
    """
    Counts the tools.
    """
    url = "/tools/count"

    @docs(summary="Count Tools")
    @returns(ToolCountSchema())
    async def get(self):
        return {"count": await self.tool_service.count()}


class AddToolView(BaseView):
    """
    Adds a new tool.
    """
    url = "/tools/add"

    @docs(summary="Add A Tool")
    @expects(ToolSchema())
    @returns(
        invalid=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        added=ToolSchema()
    )
    async def post(self):
        """
        Tool names are loosely unique: a tool can't be added if its name
        and the name of any existing tool are prefixes of one another,
        ignoring case.
        """
        data = self.request["data"]
        try:
            tool = await self.tool_service.add(Tool(data.get("name"), data.get("description")))
        except (InvalidToolError, ToolExistsError) as error:
            return "invalid", failure(error)
        else:
            return "added", tool.serialize()


class ToolView(BaseView):
    """
    Gets a single tool.
    """
    url = f"/tools/{{id:{TOOL_IDENTIFIER_REGEX}}}"
    name = "tool"

    @match_params(tool_id="id")
    @docs(summary="Get A Tool")
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        found=ToolSchema()
    )
    async def get(self, tool_id: int):
        try:
            tool = await self.tool_service.get_by_id(tool_id)
        except ToolNotFoundError as error:
            return "missing", failure(error)
        else:
            return "found", tool.serialize()


class UpdateToolView(BaseView):
    """
    Updates a single tool.
    """
    url = "/tools/update/{id}"

    @match_params(tool_id="id")
    @docs(summary="Update A Tool")
    @expects(ToolSchema())
    @returns(
        invalid=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        updated=ToolSchema()
    )
    async def put(self, tool_id: int):
        """Overwrites the name and description of the tool. Any id in the body is ignored."""
        data = self.request["data"]
        try:
            tool = await self.tool_service.update(tool_id, Tool(data.get("name"), data.get("description")))
        except InvalidToolError as error:
            return "invalid", failure(error)
        except ToolNotFoundError as error:
            return "missing", failure(error)
        else:
            return "updated", tool.serialize()


class DeleteToolView(BaseView):
    """
    Deletes a single tool.
    """
    url = "/tools/delete/{id}"

    @match_params(tool_id="id")
    @docs(summary="Delete A Tool")
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        deleted=(None, HTTPStatus.OK)
    )
    async def delete(self, tool_id: int):
        try:
            await self.tool_service.delete_by_id(tool_id)
        except ToolNotFoundError as error:
            return "missing", failure(error)
        else:
            return "deleted", None
