"""
App
-----
"""

import sentry_sdk
from aiohttp import web
from aiohttp_apispec import setup_aiohttp_apispec
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from toolshed import logger
from toolshed.config import api_root, database_url, server_mode, sentry_dsn, store_backend
from toolshed.middleware import error_middleware
from toolshed.service import ToolService
from toolshed.signals import register_signals
from toolshed.store import DatabaseStore, ToolStore, get_store
from toolshed.version import __version__, name
from toolshed.views import register_views


def build_app(db_uri=None, store: ToolStore = None):
    """
    Sets up the app.

    :param db_uri: The database to connect to, if the store is a :class:`~toolshed.store.DatabaseStore`.
    :param store: The store to keep tools in. Defaults to the configured backend.
    """
    app = web.Application(middlewares=[error_middleware])

    if store is None:
        store = get_store(store_backend)

    app['database_uri'] = db_uri if db_uri is not None else database_url
    app['tool_service'] = ToolService(store)
    logger.info("Storing tools in %s", type(store).__name__)

    # only the database store needs connections managed
    register_signals(app, init_database=isinstance(store, DatabaseStore))

    register_views(app, api_root)

    setup_aiohttp_apispec(app=app, title=name, version=__version__, url=f"{api_root}/docs")

    # set up sentry exception tracking
    if server_mode != "development" and sentry_dsn is not None:
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=server_mode,
            release=f"{name}@{__version__}",
            integrations=[AioHttpIntegration()]
        )

    return app
