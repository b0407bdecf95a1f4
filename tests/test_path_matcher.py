"""Tests for interceptor path patterns."""

import pytest

from app.interceptors import PathMatcher, normalize_path


class TestNormalizePath:
    """Test request path normalization."""

    def test_adds_leading_slash(self):
        assert normalize_path("hello/x") == "/hello/x"

    def test_collapses_duplicate_slashes(self):
        assert normalize_path("//hello///x") == "/hello/x"

    def test_leaves_clean_path_alone(self):
        assert normalize_path("/hello/x") == "/hello/x"


class TestPathMatcher:
    """Test PathMatcher compilation and matching."""

    def test_no_pattern_matches_everything(self):
        matcher = PathMatcher.compile(None)

        assert matcher.matches("/")
        assert matcher.matches("/hello/x")
        assert matcher.matches("/other")

    def test_trailing_wildcard_is_prefix_match(self):
        matcher = PathMatcher.compile("/hello*")

        assert matcher.is_prefix
        assert matcher.matches("/hello")
        assert matcher.matches("/hello/x")
        assert matcher.matches("/hellojpa")
        assert not matcher.matches("/other")
        assert not matcher.matches("/api/hello")

    def test_double_trailing_wildcard_is_prefix_match(self):
        matcher = PathMatcher.compile("/mobile/**")

        assert matcher.matches("/mobile/index.html")
        assert matcher.matches("/mobile/css/site.css")
        assert not matcher.matches("/mobile")

    def test_pattern_without_wildcard_is_exact_match(self):
        matcher = PathMatcher.compile("/hello")

        assert not matcher.is_prefix
        assert matcher.matches("/hello")
        assert not matcher.matches("/hello/x")

    def test_pattern_is_normalized(self):
        matcher = PathMatcher.compile("//hello*")

        assert matcher.prefix == "/hello"

    def test_relative_pattern_rejected(self):
        with pytest.raises(ValueError, match="must start with"):
            PathMatcher.compile("hello*")

    def test_inner_wildcard_rejected(self):
        with pytest.raises(ValueError, match="trailing wildcard"):
            PathMatcher.compile("/he*llo")
