"""Dependency injection container for services."""

from dependency_injector import containers, providers
from sqlalchemy.orm import sessionmaker

from app.config import Settings
from app.interceptors import (
    AnotherInterceptor,
    GreetingInterceptor,
    InterceptorExecutor,
    InterceptorRegistry,
    RequestMetricsInterceptor,
)
from app.services.metrics_service import MetricsService
from app.services.person_service import PersonService
from app.utils.message_converters import MessageConverterRegistry


class ServiceContainer(containers.DeclarativeContainer):
    """Container for service dependency injection."""

    # Configuration and database session providers
    config = providers.Dependency(instance_of=Settings)
    session_maker = providers.Dependency(instance_of=sessionmaker)
    db_session = providers.ContextLocalSingleton(
        session_maker.provided.call()
    )

    # Service providers - Factory creates new instances for each request
    person_service = providers.Factory(PersonService, db=db_session)

    # Metrics service - Singleton so all requests share the same collectors
    metrics_service = providers.Singleton(MetricsService)

    # Interceptor pipeline - registry is filled and frozen at startup
    interceptor_registry = providers.Singleton(InterceptorRegistry)
    interceptor_executor = providers.Singleton(
        InterceptorExecutor,
        registry=interceptor_registry,
    )
    greeting_interceptor = providers.Factory(GreetingInterceptor)
    another_interceptor = providers.Factory(AnotherInterceptor)
    request_metrics_interceptor = providers.Factory(
        RequestMetricsInterceptor,
        metrics_service=metrics_service,
    )

    # Request/response body converters
    message_converters = providers.Singleton(MessageConverterRegistry)
