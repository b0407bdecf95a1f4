"""Prefix-style path patterns for scoping interceptors."""

import re
from dataclasses import dataclass

_DUPLICATE_SLASHES = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Normalize a request path for pattern matching.

    Ensures a leading slash and collapses runs of slashes.
    """
    if not path.startswith("/"):
        path = "/" + path
    return _DUPLICATE_SLASHES.sub("/", path)


@dataclass(frozen=True)
class PathMatcher:
    """Precompiled path pattern.

    ``None`` matches every path, ``/prefix*`` (or ``/prefix**``) matches every
    path starting with ``/prefix`` and anything else is an exact match.
    """

    pattern: str | None
    prefix: str
    is_prefix: bool

    @classmethod
    def compile(cls, pattern: str | None) -> "PathMatcher":
        """Compile a pattern string into a matcher.

        Raises:
            ValueError: If the pattern is empty, relative, or has a wildcard
                anywhere but at the end
        """
        if pattern is None:
            return cls(pattern=None, prefix="/", is_prefix=True)

        if not pattern.startswith("/"):
            raise ValueError(f"Path pattern must start with '/': {pattern!r}")

        prefix = pattern.rstrip("*")
        if "*" in prefix:
            raise ValueError(f"Only a trailing wildcard is supported: {pattern!r}")

        return cls(
            pattern=pattern,
            prefix=normalize_path(prefix),
            is_prefix=prefix != pattern,
        )

    def matches(self, path: str) -> bool:
        if self.is_prefix:
            return path.startswith(self.prefix)
        return path == self.prefix
