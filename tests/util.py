from aiohttp import web

from toolshed.config import api_root
from toolshed.middleware import error_middleware
from toolshed.views import register_views


def build_test_app(tool_service) -> web.Application:
    """Builds an app around the given service, without the database signals."""
    app = web.Application(middlewares=[error_middleware])
    app['tool_service'] = tool_service
    register_views(app, api_root)
    return app
