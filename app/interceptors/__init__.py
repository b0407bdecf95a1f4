"""Request interceptor pipeline."""

from .base import (
    HandlerInterceptor,
    InterceptorEntry,
    RequestContext,
    RequestOutcome,
)
from .executor import InterceptorExecutor
from .greeting import AnotherInterceptor, GreetingInterceptor
from .metrics import RequestMetricsInterceptor
from .path_matcher import PathMatcher, normalize_path
from .registry import InterceptorRegistry

__all__ = [
    'AnotherInterceptor',
    'GreetingInterceptor',
    'HandlerInterceptor',
    'InterceptorEntry',
    'InterceptorExecutor',
    'InterceptorRegistry',
    'PathMatcher',
    'RequestContext',
    'RequestMetricsInterceptor',
    'RequestOutcome',
    'normalize_path',
]
