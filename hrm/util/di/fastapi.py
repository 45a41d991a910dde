"""FastAPI integration that enters Scope.UOW per request."""

from dishka import AsyncContainer
from fastapi import FastAPI
from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from hrm.util.di.scope import Scope as HRMScope


class ContainerMiddleware:
    """Open a UOW child container for every HTTP request.

    Stands in for dishka's starlette middleware, which would enter
    dishka.Scope.REQUEST. The request is registered as context so
    providers can read headers from it. HRM serves no websockets, so
    only ``http`` scopes get a container.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        request = Request(scope, receive=receive, send=send)
        async with request.app.state.dishka_container(
            {Request: request},
            scope=HRMScope.UOW,
        ) as request_container:
            request.state.dishka_container = request_container
            return await self.app(scope, receive, send)


def setup_dishka(container: AsyncContainer, app: FastAPI) -> None:
    """Install the UOW container middleware and attach the root container."""
    app.add_middleware(ContainerMiddleware)
    app.state.dishka_container = container
