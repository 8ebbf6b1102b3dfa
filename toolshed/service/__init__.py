"""
.. autoclasstree:: toolshed.service

The service layer for the system. Acts as the internal API.
Each interface (currently only the REST API) should use the
service layer to implement its logic.

The service layer implements the use cases for the system, such
that they may be reused by any program that needs to access it.
It is designed to represent the business logic.
"""

from .tools import ToolService, ToolError, InvalidToolError, ToolExistsError, ToolNotFoundError
