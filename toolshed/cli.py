"""
The entry point for the CLI tool
"""

import uvloop
from aiohttp import web

from toolshed.app import build_app
from toolshed.config import port


def run():
    """Builds the app from the environment and runs it."""
    uvloop.install()
    web.run_app(build_app(), port=port)


if __name__ == '__main__':
    run()
