"""Application assembly and the server entry point."""

from __future__ import annotations

from collections.abc import Sequence

import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import Mount

from lwebapi.config import get_config
from lwebapi.database import init_database
from lwebapi.log import print_basic_info
from lwebapi.middleware import RequestLogMiddleware
from lwebapi.models import AppState
from lwebapi.users import user_routes


def create_app(state: AppState) -> Starlette:
    """Build the web application with its routes, logging and shared state."""
    app = Starlette(
        routes=[Mount("/users", routes=user_routes())],
        middleware=[Middleware(RequestLogMiddleware)],
    )
    app.state.app_state = state
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Load configuration, connect the databases and serve until stopped."""
    config = get_config(argv)
    print_basic_info(config)
    db_map = init_database(config)
    app = create_app(AppState(db_map=db_map))
    uvicorn.run(app, host=config.host, port=config.port, access_log=False)