"""Drives the before/handle/after/completion lifecycle for one request."""

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from app.interceptors.base import InterceptorEntry, RequestContext, RequestOutcome
from app.interceptors.registry import InterceptorRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InterceptorExecutor:
    """Runs a request handler through the interceptors resolved for its path.

    Phase order:
      1. before-hooks, ascending priority; a hook returning False aborts
      2. the handler, exactly once, unless aborted
      3. after-hooks, reverse order, unless aborted
      4. completion hooks, reverse order, for every interceptor whose
         before-hook continued; runs on success, abort and failure alike

    A fault in a before-hook, the handler or an after-hook ends its phase and
    is re-raised after the completion phase. Faults in completion hooks are
    logged and do not stop the remaining completion hooks.
    """

    def __init__(self, registry: InterceptorRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> InterceptorRegistry:
        return self._registry

    def execute(self, context: RequestContext, handler: Callable[[], T]) -> T | None:
        """
        Execute a handler for one request.

        Args:
            context: Request context; ``aborted`` is set if a before-hook stops
            handler: Zero-argument callable producing the response

        Returns:
            The handler's result, or None when the chain was aborted

        Raises:
            Exception: Whatever a before-hook, the handler or an after-hook raised
        """
        chain = self._registry.resolve(context.path)
        completed: list[InterceptorEntry] = []

        try:
            for entry in chain:
                if entry.before is not None and entry.before(context) is False:
                    context.aborted = True
                    logger.debug(f"Interceptor {entry.name} stopped request {context.method} {context.path}")
                    break
                completed.append(entry)

            if context.aborted:
                self._trigger_completion(completed, context, RequestOutcome(aborted=True))
                return None

            result = handler()

            for entry in reversed(chain):
                if entry.after is not None:
                    entry.after(context, result)

        except Exception as e:
            self._trigger_completion(completed, context, RequestOutcome(error=e))
            raise

        self._trigger_completion(completed, context, RequestOutcome(result=result))
        return result

    def _trigger_completion(
        self,
        completed: Sequence[InterceptorEntry],
        context: RequestContext,
        outcome: RequestOutcome,
    ) -> None:
        for entry in reversed(completed):
            if entry.completion is None:
                continue
            try:
                entry.completion(context, outcome)
            except Exception:
                logger.exception(f"Completion hook of interceptor {entry.name} failed for {context.path}")
