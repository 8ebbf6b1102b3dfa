"""
Middleware
----------
"""

from http import HTTPStatus

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_middlewares import middleware

from toolshed import logger
from toolshed.serializer import JSendStatus, JSendSchema

response_schema = JSendSchema()


@middleware
async def error_middleware(request: Request, handler):
    """
    Turns any exception that escapes a view into a JSend error,
    so that the client always gets JSON back. HTTP exceptions
    raised deliberately by the views are passed through.
    """

    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception as error:
        logger.exception("Unhandled error on %s %s", request.method, request.rel_url)
        return web.json_response(response_schema.dump({
            "status": JSendStatus.ERROR,
            "message": "Something went wrong on our side.",
            "data": {"errors": [str(error)]},
            "code": HTTPStatus.INTERNAL_SERVER_ERROR
        }), status=HTTPStatus.INTERNAL_SERVER_ERROR)
