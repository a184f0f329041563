"""Request logging middleware."""

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from termcolor import colored

from lwebapi.log import logline

_METHOD_BACKGROUNDS = {
    "GET": "on_green",
    "POST": "on_yellow",
    "PUT": "on_blue",
    "DELETE": "on_red",
}


def method_label(method: str) -> str:
    """Coloured label for an HTTP method."""
    background = _METHOD_BACKGROUNDS.get(method)
    if background is None:
        return colored(method, on_color="on_white")
    return colored(f" {method} ", on_color=background)


def status_label(status: int) -> str:
    """Coloured label for a response status code."""
    text = f" {status} "
    if 200 <= status < 300:
        return colored(text, on_color="on_green")
    if 300 <= status < 400:
        return colored(text, on_color="on_yellow")
    if 400 <= status < 500:
        return colored(text, on_color="on_red")
    return colored(text, on_color="on_white")


def duration_label(millis: int) -> str:
    """Coloured label for a request duration in milliseconds."""
    text = f" {millis} "
    if millis <= 500:
        return colored(text, "green")
    if millis <= 1000:
        return colored(text, "blue")
    if millis <= 10 * 1000:
        return colored(text, "yellow")
    return colored(text, on_color="on_red")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs each request on the way in and its status and duration on the way out."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"
        logline(
            f"--> {method_label(request.method)} "
            f"{colored(uri, 'light_green', attrs=['underline'])}"
        )

        response = await call_next(request)

        millis = int((time.perf_counter() - start) * 1000)
        logline(f"<-- {status_label(response.status_code)} ({duration_label(millis)} ms)")
        print()
        return response