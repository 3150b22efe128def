"""API request log middleware."""

import logfire
from dishka import AsyncContainer
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from checkin.domain.service import ApiLogService
from checkin.domain.service.api_log_service import UNKNOWN_ROUTE


def resolve_route(request: Request) -> str:
    """Return the path template of the route that handled ``request``.

    Routing stores the matched route in the request scope, so this is only
    meaningful once the request has been dispatched.

    Returns:
        Template such as ``/statuses/{status_id}/tags``, ``unknown`` if no
        route matched
    """
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNKNOWN_ROUTE


class ApiLogMiddleware(BaseHTTPMiddleware):
    """Records every API request through ``ApiLogService``.

    The log runs in its own DI request scope, so its rows are committed even
    when the handler's transaction is rolled back. A failure to commit the
    log is reported and never replaces the response.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        container: AsyncContainer = request.app.state.dishka_container
        failure: Exception | None = None
        response: Response | None = None
        served = False

        try:
            async with container() as request_container:
                api_logs = await request_container.get(ApiLogService)
                async with api_logs.track(
                    method=request.method,
                    route=None,
                    user_agent=request.headers.get("user-agent"),
                ) as entry:
                    try:
                        response = await call_next(request)
                        entry.status_code = response.status_code
                    except Exception as e:
                        # Keep the failure out of the log's own scope so it commits
                        entry.status_code = 500
                        failure = e
                    served = True
                    entry.route = resolve_route(request)
        except Exception:
            if not served:
                raise
            logfire.exception(
                "Failed to commit API log",
                method=request.method,
                path=request.url.path,
            )

        if failure is not None:
            raise failure
        return response
