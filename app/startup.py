"""Startup hooks for the web sample application.

These functions are called once by create_app() and contain the explicit web
configuration: interceptors, blueprints, resource handlers and view
controllers. Nothing here runs per request.

Hook points called by create_app():
  - create_container()
  - register_interceptors()
  - register_blueprints()
  - register_resource_handlers()
  - register_view_controllers()

Hook point called by the load-test-data CLI handler:
  - load_test_data_hook()
"""

from __future__ import annotations

import logging

from flask import Blueprint, Flask

from app.config import Settings
from app.interceptors import InterceptorRegistry
from app.models.person import Person
from app.services.container import ServiceContainer
from app.utils.resources import ResourceHandlerRegistry, add_view_controller

logger = logging.getLogger(__name__)

# Request metrics wrap every other interceptor
METRICS_INTERCEPTOR_ORDER = -100

SAMPLE_PERSON_NAMES = ["jonghak", "keesun", "whiteship"]


def create_container() -> ServiceContainer:
    """Create the application's service container."""
    return ServiceContainer()


def register_interceptors(container: ServiceContainer) -> InterceptorRegistry:
    """Register the application's interceptors and freeze the registry.

    AnotherInterceptor is scoped to /hello paths with order 0, so on those
    paths it runs before GreetingInterceptor (order 1) and completes after it.

    Args:
        container: Service container providing the registry and interceptors

    Returns:
        The frozen registry
    """
    registry = container.interceptor_registry()

    registry.add_interceptor(
        container.request_metrics_interceptor(),
        order=METRICS_INTERCEPTOR_ORDER,
    )
    registry.add_interceptor(container.greeting_interceptor(), order=1)
    registry.add_interceptor(container.another_interceptor(), path_pattern="/hello*", order=0)

    registry.freeze()
    return registry


def register_blueprints(api_bp: Blueprint, app: Flask) -> None:
    """Register all blueprints.

    Resource blueprints are registered on api_bp (under /api prefix). The
    sample endpoints live at the root and are registered on the app itself.

    Flask does not allow modifying a blueprint after its first registration,
    so child blueprints on api_bp are only registered once.

    Args:
        api_bp: The main API blueprint (url_prefix="/api")
        app: The Flask application instance
    """
    # Child blueprints on api_bp can only be registered before api_bp's
    # first registration on an app. Guard against repeated create_app() calls
    # in test suites where api_bp is a module-level singleton.
    if not api_bp._got_registered_once:  # type: ignore[attr-defined]
        from app.api.health import health_bp
        from app.api.metrics import metrics_bp
        from app.api.persons import persons_bp

        api_bp.register_blueprint(health_bp)  # type: ignore[attr-defined]
        api_bp.register_blueprint(metrics_bp)  # type: ignore[attr-defined]
        api_bp.register_blueprint(persons_bp)  # type: ignore[attr-defined]

    app.register_blueprint(api_bp)

    from app.api.sample import sample_bp

    app.register_blueprint(sample_bp)


def register_resource_handlers(app: Flask, settings: Settings) -> ResourceHandlerRegistry:
    """Serve the configured resource location under its URL prefix."""
    registry = ResourceHandlerRegistry(app)
    registry.add_resource_handler(
        settings.STATIC_RESOURCE_URL_PREFIX,
        settings.STATIC_RESOURCE_LOCATION,
        cache_max_age=settings.STATIC_RESOURCE_CACHE_SECONDS,
        resource_chain=settings.STATIC_RESOURCE_CHAIN,
    )
    return registry


def register_view_controllers(app: Flask, settings: Settings) -> None:
    """Map each configured URL straight to its template."""
    for url_path, view_name in settings.VIEW_CONTROLLERS.items():
        add_view_controller(app, url_path, view_name)


def load_test_data_hook(app: Flask) -> int:
    """Load the sample persons into a freshly created database.

    Called by the load-test-data CLI handler after the tables have been
    recreated. Failures propagate to the CLI handler which exits with code 1.

    Args:
        app: The Flask application instance (with container attached)

    Returns:
        Number of persons stored
    """
    session = app.container.session_maker()()
    try:
        for name in SAMPLE_PERSON_NAMES:
            session.add(Person(name=name))
        session.commit()

        count = session.query(Person).count()
        logger.info(f"Loaded {count} sample persons")
        return count
    finally:
        session.close()
