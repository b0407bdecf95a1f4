"""Tests for static resources, resource handlers and view controllers."""

from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient
from werkzeug.exceptions import NotFound

from app.utils.resources import ResourceHandler, ResourceHandlerRegistry, add_view_controller


class TestStaticResources:
    """Resources served by the application."""

    def test_index_from_default_static_location(self, client: FlaskClient):
        response = client.get("/index.html")

        assert response.status_code == 200
        assert "hello index" in response.get_data(as_text=True)

    def test_mobile_resource_with_cache_header(self, client: FlaskClient):
        response = client.get("/mobile/index.html")

        assert response.status_code == 200
        assert "hello mobile" in response.get_data(as_text=True)
        assert "max-age=600" in response.headers["Cache-Control"]

    def test_missing_mobile_resource(self, client: FlaskClient):
        response = client.get("/mobile/missing.html")

        assert response.status_code == 404

    def test_mobile_path_traversal_blocked(self, client: FlaskClient):
        response = client.get("/mobile/../config.py")

        assert response.status_code == 404

    def test_view_controller_renders_template(self, client: FlaskClient):
        response = client.get("/hi")

        assert response.status_code == 200
        assert "<h1>hi</h1>" in response.get_data(as_text=True)


class TestResourceHandler:
    """Test ResourceHandler resolution."""

    @pytest.fixture
    def location(self, tmp_path: Path) -> Path:
        (tmp_path / "index.html").write_text("hello")
        return tmp_path

    def test_resolve_existing_file(self, location: Path):
        handler = ResourceHandler(url_prefix="/mobile", location=location)

        assert handler.resolve("index.html") == location / "index.html"

    def test_resolve_missing_file(self, location: Path):
        handler = ResourceHandler(url_prefix="/mobile", location=location)

        with pytest.raises(NotFound):
            handler.resolve("nope.html")

    def test_resolve_outside_location(self, location: Path):
        handler = ResourceHandler(url_prefix="/mobile", location=location)

        with pytest.raises(NotFound):
            handler.resolve("../secret.txt")

    def test_resource_chain_remembers_resolved_paths(self, location: Path):
        handler = ResourceHandler(url_prefix="/mobile", location=location, resource_chain=True)

        first = handler.resolve("index.html")
        (location / "index.html").unlink()

        assert handler.resolve("index.html") == first

    def test_without_resource_chain_every_lookup_hits_disk(self, location: Path):
        handler = ResourceHandler(url_prefix="/mobile", location=location, resource_chain=False)

        handler.resolve("index.html")
        (location / "index.html").unlink()

        with pytest.raises(NotFound):
            handler.resolve("index.html")


class TestResourceHandlerRegistry:
    """Test registering handlers and view controllers on a bare Flask app."""

    def test_add_resource_handler(self, tmp_path: Path):
        (tmp_path / "app.js").write_text("console.log('hi');")
        app = Flask(__name__)
        registry = ResourceHandlerRegistry(app)

        handler = registry.add_resource_handler("/assets/", tmp_path, cache_max_age=60)

        assert handler.url_prefix == "/assets"
        response = app.test_client().get("/assets/app.js")
        assert response.status_code == 200
        assert "max-age=60" in response.headers["Cache-Control"]
        response.close()

    def test_relative_location_resolves_against_app_root(self):
        app = Flask(__name__)

        handler = ResourceHandlerRegistry(app).add_resource_handler("/files", "data")

        assert handler.location == Path(app.root_path) / "data"

    def test_add_view_controller(self, tmp_path: Path):
        (tmp_path / "hello.html").write_text("<p>hello view</p>")
        app = Flask(__name__, template_folder=str(tmp_path))

        add_view_controller(app, "/greeting", "hello.html")

        response = app.test_client().get("/greeting")
        assert response.get_data(as_text=True) == "<p>hello view</p>"
