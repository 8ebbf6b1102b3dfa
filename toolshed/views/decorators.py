"""
Decorators
-------------------------
"""
from functools import wraps
from typing import Any, Dict, Tuple, Union

from aiohttp import web
from aiohttp.web_request import Request
from aiohttp.web_urldispatcher import View

from toolshed.serializer import JSendStatus, JSendSchema

INT64_MIN, INT64_MAX = -2 ** 63, 2 ** 63 - 1


def int64(value) -> int:
    """Converts a url parameter to an integer that fits in a signed 64-bit column."""
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError(f"{number} is out of range.")
    return number


def flatten(error):
    errors = []
    for sub_error in error.args:
        if isinstance(sub_error, Exception):
            errors += flatten(sub_error)
        else:
            errors.append(sub_error)
    return errors


def resolve_match_map(request: Request, match_map) -> Dict[str, Any]:
    resolved_matches = {}
    errors = []

    for key, value in match_map.items():

        if isinstance(value, str):
            value = (value, int64)

        if not isinstance(value, tuple):
            raise TypeError(f"match_params incorrectly configured (doesn't support {type(value)})")

        param = request.match_info.get(value[0])
        try:
            resolved_matches[key] = value[1](param)
        except (ValueError, TypeError):
            errors.append(ValueError(
                f'Could not convert url parameter "{param}" to expected type {value[1].__name__}.'))

    if errors:
        raise ValueError(*errors)
    return resolved_matches


def match_params(**match_map: Union[str, Tuple[str, type]]):
    """
    Converts the url variables and passes them into the route,
    or 400's if any of them can't be converted.

    .. code-block:: python

        # example usage
        @match_params(tool_id="id")
        async def get(self, tool_id: int)
            ...

    :param match_map: Associates a kwarg on the route to a url variable,
     either by name (converted with :func:`int64`) or as a tuple of name and type.
    :return: A decorator that passes the converted url variables into the route.
    """

    def attach_params(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                params = resolve_match_map(self.request, match_map)
            except ValueError as error:
                response = {
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": "Errors with your request.",
                        "errors": flatten(error)
                    }
                }
                raise web.HTTPBadRequest(text=JSendSchema().dumps(response), content_type='application/json')

            return await original_function(self, **kwargs, **params)

        return new_func

    return attach_params
