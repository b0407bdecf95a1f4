"""Base types for the request interceptor pipeline."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from app.interceptors.path_matcher import PathMatcher


@dataclass
class RequestContext:
    """Per-request state threaded through the interceptor phases.

    A before-hook that stops the chain may set ``response``; it is sent in
    place of the handler's result.
    """

    path: str
    method: str = "GET"
    handler_ref: Any = None
    aborted: bool = False
    response: Any = None
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RequestOutcome:
    """Terminal outcome passed to completion hooks."""

    result: Any = None
    error: Exception | None = None
    aborted: bool = False

    @property
    def succeeded(self) -> bool:
        return self.error is None and not self.aborted


class HandlerInterceptor:
    """Interceptor with before, after and completion hooks.

    Subclasses override the hooks they need; the defaults are no-ops.
    """

    def pre_handle(self, context: RequestContext) -> bool:
        """Called before the handler.

        Returns:
            True to continue the chain, False to stop it and skip the handler
        """
        return True

    def post_handle(self, context: RequestContext, result: Any) -> None:
        """Called after the handler returned, in reverse interceptor order."""
        return None

    def after_completion(self, context: RequestContext, outcome: RequestOutcome) -> None:
        """Called once the request is finished, only if pre_handle continued."""
        return None


BeforeHook = Callable[[RequestContext], bool | None]
AfterHook = Callable[[RequestContext, Any], None]
CompletionHook = Callable[[RequestContext, RequestOutcome], None]


@dataclass(frozen=True)
class InterceptorEntry:
    """Registered interceptor: optional hooks plus path scope and priority."""

    name: str
    before: BeforeHook | None = None
    after: AfterHook | None = None
    completion: CompletionHook | None = None
    path_pattern: str | None = None
    priority: int = 0
    matcher: PathMatcher = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "matcher", PathMatcher.compile(self.path_pattern))

    @classmethod
    def of(
        cls,
        interceptor: HandlerInterceptor,
        path_pattern: str | None = None,
        priority: int = 0,
    ) -> "InterceptorEntry":
        """Build an entry from an object implementing the interceptor hooks."""
        return cls(
            name=interceptor.__class__.__name__,
            before=getattr(interceptor, "pre_handle", None),
            after=getattr(interceptor, "post_handle", None),
            completion=getattr(interceptor, "after_completion", None),
            path_pattern=path_pattern,
            priority=priority,
        )

    def applies_to(self, path: str) -> bool:
        return self.matcher.matches(path)
