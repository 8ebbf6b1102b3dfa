"""
The primary entry point to the application.
"""
import asyncio

import aiomonitor
import uvloop
from aiohttp import web

from toolshed import logger
from toolshed.app import build_app
from toolshed.config import port
from toolshed.version import __version__, name

if __name__ == '__main__':
    logger.info(f'Starting {name} %s!', __version__)
    uvloop.install()
    app = build_app()

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    with aiomonitor.start_monitor(loop=loop, locals={"app": app}):
        web.run_app(app, port=port, loop=loop)
