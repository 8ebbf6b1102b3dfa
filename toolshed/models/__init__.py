"""
The models package contains the domain models used on the server.

.. autoclasstree:: toolshed.models
"""

from .tool import Tool
