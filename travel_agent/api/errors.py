from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from travel_agent.models.errors import MethodError, TravelAgentError


async def travel_agent_error_handler(request: Request, exc: TravelAgentError, headers=None):
    return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return await travel_agent_error_handler(request, MethodError(), headers=exc.headers)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)
