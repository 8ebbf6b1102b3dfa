"""
Signals
-------

Defines a number of signals that the aiohttp server uses
to set up and tear down the database connections.

Each signal must accept the ``app`` argument.
"""

from aiohttp.abc import Application
from tortoise import Tortoise

from toolshed import logger

DATABASE_MODELS = ['toolshed.store.database.models']
"""The modules tortoise should discover models in."""


async def initialize_database(app: Application):
    """Initializes and generates the schema for our database."""
    logger.info("Connecting to database")
    await Tortoise.init(
        db_url=app['database_uri'],
        modules={'models': DATABASE_MODELS}
    )
    await Tortoise.generate_schemas(safe=True)


async def close_database_connections(app: Application):
    """Closes the open database connections."""
    await Tortoise.close_connections()


def register_signals(app: Application, init_database=True):
    """Registers all the signals at the appropriate hooks."""
    if init_database:
        app.on_startup.append(initialize_database)
        app.on_cleanup.append(close_database_connections)
