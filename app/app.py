"""Flask application class running views through the interceptor chain."""

from typing import TYPE_CHECKING, Any

from flask import Flask, g, request

from app.interceptors import InterceptorExecutor, RequestContext, normalize_path

if TYPE_CHECKING:
    from app.services.container import ServiceContainer


class App(Flask):
    """Flask application with a service container and request interceptors."""

    container: "ServiceContainer"
    interceptor_executor: InterceptorExecutor | None = None

    def dispatch_request(self) -> Any:
        """Dispatch the matched view through the interceptor executor.

        Routing errors are raised before any interceptor runs. When a
        before-hook stops the request, the response it left on the context is
        returned, or an empty 200 if it left none.
        """
        if request.routing_exception is not None:
            self.raise_routing_exception(request)  # type: ignore[arg-type]

        executor = self.interceptor_executor
        if executor is None:
            return super().dispatch_request()

        context = RequestContext(
            path=normalize_path(request.path),
            method=request.method,
            handler_ref=request.endpoint,
        )
        g.interceptor_context = context

        result = executor.execute(context, super().dispatch_request)
        if context.aborted:
            if context.response is not None:
                return context.response
            return self.response_class(status=200)
        return result
