"""User service, controller and routes."""

from __future__ import annotations

from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

_SAMPLE_USERS = (
    {"id": 1, "name": "Alice"},
    {"id": 2, "name": "Bob"},
)


async def get_all_users() -> list[dict[str, Any]]:
    """Return every user (sample data standing in for the database)."""
    return [dict(user) for user in _SAMPLE_USERS]


async def list_users(request: Request) -> JSONResponse:
    """Respond with all users wrapped in the standard envelope."""
    users = await get_all_users()
    return JSONResponse({"code": 0, "data": users})


def user_routes() -> list[Route]:
    """Routes mounted under /users."""
    return [Route("/list", list_users, methods=["GET"])]