import logging

import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from travel_agent.config.settings import API_TITLE, HOST, get_port, init_logging
from travel_agent.api.endpoints import router
from travel_agent.api.errors import (
    http_exception_handler,
    travel_agent_error_handler,
)
from travel_agent.models.errors import TravelAgentError


log = logging.getLogger("api")


def create_app() -> FastAPI:
    init_logging()
    app = FastAPI(title=API_TITLE, docs_url=None, redoc_url=None, openapi_url=None)

    # Errors go back as plain text
    app.add_exception_handler(TravelAgentError, travel_agent_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(router)

    return app


app = create_app()


def run():
    port = get_port()
    log.info(f"Starting travel agent server on port {port}")
    uvicorn.run(app, host=HOST, port=port)


if __name__ == "__main__":
    run()
