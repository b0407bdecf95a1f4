"""Sample interceptors that log each lifecycle step of a request."""

import logging
from typing import Any

from app.interceptors.base import HandlerInterceptor, RequestContext, RequestOutcome

logger = logging.getLogger(__name__)


class GreetingInterceptor(HandlerInterceptor):
    """Applies to every request."""

    def pre_handle(self, context: RequestContext) -> bool:
        logger.info(f"preHandle 1 {context.method} {context.path} -> {context.handler_ref}")
        return True

    def post_handle(self, context: RequestContext, result: Any) -> None:
        logger.info(f"postHandle 1 {context.method} {context.path}")

    def after_completion(self, context: RequestContext, outcome: RequestOutcome) -> None:
        if outcome.error is not None:
            logger.info(f"afterCompletion 1 {context.method} {context.path} failed: {outcome.error}")
        else:
            logger.info(f"afterCompletion 1 {context.method} {context.path}")


class AnotherInterceptor(HandlerInterceptor):
    """Registered for the /hello* paths ahead of GreetingInterceptor."""

    def pre_handle(self, context: RequestContext) -> bool:
        logger.info(f"preHandle 2 {context.method} {context.path} -> {context.handler_ref}")
        return True

    def post_handle(self, context: RequestContext, result: Any) -> None:
        logger.info(f"postHandle 2 {context.method} {context.path}")

    def after_completion(self, context: RequestContext, outcome: RequestOutcome) -> None:
        logger.info(f"afterCompletion 2 {context.method} {context.path}")
