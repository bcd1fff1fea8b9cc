"""Handler protocol and Next type alias.

A handler is anything that turns a request into a response::

    async def hello(request: Request) -> Response: ...

No base class required. ``SiteRedirect`` holds one as its ``next`` and is
itself one, so filters compose by wrapping.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from siteredirect.http.request import Request
from siteredirect.http.response import Response

# The next handler in the chain
Next: TypeAlias = Callable[[Request], Awaitable[Response]]


class Handler(Protocol):
    """Protocol for request handlers.

    Accepts both functions and callable objects::

        # Function handler
        async def hello(request: Request) -> Response:
            return Response("hello")

        # Class handler
        class Maintenance:
            async def __call__(self, request: Request) -> Response:
                ...
    """

    async def __call__(self, request: Request) -> Response: ...
