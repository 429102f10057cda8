import json
from typing import TYPE_CHECKING

from aiohttp import web
from aiohttp.web_exceptions import HTTPException
from aiohttp.web_request import Request
from loguru import logger
from marshmallow import ValidationError

from players_api.players.exceptions import PlayerError
from players_api.web.utils import error_json_response

if TYPE_CHECKING:
    from players_api.web.app import Application

HTTP_ERROR_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    500: "internal_server_error",
}


@web.middleware
async def error_handling_middleware(request: Request, handler):
    try:
        return await handler(request)
    except PlayerError as e:
        logger.warning("{} {} rejected: {}", request.method, request.path, e.message)
        return error_json_response(http_status=e.http_status, status=e.status,
                                   message=e.message, data=e.data)
    except ValidationError as e:
        logger.warning("{} {} rejected: {}", request.method, request.path, e.messages)
        return error_json_response(http_status=400, status=HTTP_ERROR_CODES[400],
                                   message="Invalid request payload", data=e.messages)
    except json.JSONDecodeError as e:
        return error_json_response(http_status=400, status=HTTP_ERROR_CODES[400], message=e.msg)
    except HTTPException as e:
        return error_json_response(http_status=e.status,
                                   status=HTTP_ERROR_CODES.get(e.status, "error"),
                                   message=e.reason)
    except Exception as e:
        logger.exception("Unhandled error on {} {}", request.method, request.path)
        return error_json_response(http_status=500, status=HTTP_ERROR_CODES[500], message=str(e))


def setup_middlewares(app: "Application") -> None:
    app.middlewares.append(error_handling_middleware)
