"""
.. autoclasstree:: toolshed.views

This package contains the server API for listing,
adding, updating, and deleting tools.

API Conventions
---------------

* Accept and return JSON with snake_case key naming
* Successful requests return the tool (or list of tools) as-is
* Failed requests return a JSend_ ``fail`` with a user-friendly message
* Errors on our side return a JSend ``error`` with a 500
* Successful DELETE requests respond with a 200 and an empty body

.. _JSend: https://github.com/omniti-labs/jsend
"""

import aiohttp_cors
from aiohttp.abc import Application

from toolshed import logger
from .tools import ToolsView, ToolCountView, AddToolView, ToolView, UpdateToolView, DeleteToolView

views = [
    ToolsView, ToolCountView, AddToolView, ToolView, UpdateToolView, DeleteToolView
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    cors = aiohttp_cors.setup(app, defaults={
        "*": aiohttp_cors.ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    })

    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)
        view.enable_cors(cors)
