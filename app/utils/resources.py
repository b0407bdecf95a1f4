"""Static resource handlers and view controllers registered at startup."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from flask import Flask, render_template, send_file
from werkzeug.exceptions import NotFound
from werkzeug.security import safe_join

logger = logging.getLogger(__name__)


@dataclass
class ResourceHandler:
    """Serves files under ``url_prefix`` from ``location``."""

    url_prefix: str
    location: Path
    cache_max_age: int | None = None
    resource_chain: bool = False
    _resolved: dict[str, Path] = field(default_factory=dict, repr=False)

    def resolve(self, filename: str) -> Path:
        """
        Resolve a requested file inside the handler location.

        With the resource chain on, resolved paths are remembered so repeat
        requests skip the filesystem lookup.

        Raises:
            NotFound: If the file escapes the location or does not exist
        """
        if self.resource_chain:
            cached = self._resolved.get(filename)
            if cached is not None:
                return cached

        joined = safe_join(str(self.location), filename)
        if joined is None:
            raise NotFound()

        path = Path(joined)
        if not path.is_file():
            raise NotFound()

        if self.resource_chain:
            self._resolved[filename] = path
        return path

    def serve(self, filename: str) -> Any:
        return send_file(self.resolve(filename), max_age=self.cache_max_age)


class ResourceHandlerRegistry:
    """Registers resource handlers as URL rules on a Flask app."""

    def __init__(self, app: Flask) -> None:
        self.app = app
        self.handlers: list[ResourceHandler] = []

    def add_resource_handler(
        self,
        url_prefix: str,
        location: str | Path,
        cache_max_age: int | None = None,
        resource_chain: bool = False,
    ) -> ResourceHandler:
        """
        Register a resource handler.

        Args:
            url_prefix: URL prefix such as ``/mobile``
            location: Backing directory; relative paths resolve against the app root
            cache_max_age: Cache-Control max-age in seconds, None for no header
            resource_chain: Whether to cache resolved resource paths

        Returns:
            The registered handler
        """
        location_path = Path(location)
        if not location_path.is_absolute():
            location_path = Path(self.app.root_path) / location_path

        prefix = "/" + url_prefix.strip("/")
        handler = ResourceHandler(
            url_prefix=prefix,
            location=location_path,
            cache_max_age=cache_max_age,
            resource_chain=resource_chain,
        )

        endpoint = f"resources{prefix.replace('/', '_')}"
        self.app.add_url_rule(
            f"{prefix}/<path:filename>",
            endpoint=endpoint,
            view_func=handler.serve,
            methods=["GET"],
        )
        self.handlers.append(handler)

        logger.info(
            f"Registered resource handler {prefix}/** -> {location_path} "
            f"(max_age={cache_max_age}, resource_chain={resource_chain})"
        )
        return handler


def add_view_controller(app: Flask, url_path: str, view_name: str, status_code: int = 200) -> None:
    """Map a URL straight to a template without a dedicated view function."""

    def render_view() -> Any:
        return render_template(view_name), status_code

    endpoint = f"view_controller{url_path.replace('/', '_')}"
    app.add_url_rule(url_path, endpoint=endpoint, view_func=render_view, methods=["GET"])
    logger.debug(f"Registered view controller {url_path} -> {view_name}")
