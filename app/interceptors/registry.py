"""Registry for request interceptors."""

import logging
from operator import attrgetter

from app.exceptions import InvalidOperationException
from app.interceptors.base import HandlerInterceptor, InterceptorEntry

logger = logging.getLogger(__name__)

_by_priority = attrgetter("priority")


class InterceptorRegistry:
    """Ordered collection of interceptor entries.

    Entries are registered once during startup, after which the registry is
    frozen. A frozen registry is never mutated, so concurrent ``resolve``
    calls need no locking.
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._entries: list[InterceptorEntry] = []
        self._ordered: tuple[InterceptorEntry, ...] | None = None

    @property
    def frozen(self) -> bool:
        return self._ordered is not None

    @property
    def entries(self) -> tuple[InterceptorEntry, ...]:
        """Registered entries in registration order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, entry: InterceptorEntry) -> None:
        """
        Register an interceptor entry.

        Args:
            entry: Entry to append; duplicates are allowed

        Raises:
            ValueError: If no entry is given
            InvalidOperationException: If the registry is already frozen
        """
        if entry is None:
            raise ValueError("An interceptor entry is required")
        if self.frozen:
            raise InvalidOperationException(
                f"register interceptor {entry.name}", "the interceptor registry is frozen"
            )

        self._entries.append(entry)
        logger.debug(
            f"Registered interceptor: {entry.name} "
            f"(pattern={entry.path_pattern}, priority={entry.priority})"
        )

    def add_interceptor(
        self,
        interceptor: HandlerInterceptor,
        path_pattern: str | None = None,
        order: int = 0,
    ) -> InterceptorEntry:
        """
        Wrap an interceptor object in an entry and register it.

        Args:
            interceptor: Object implementing the interceptor hooks
            path_pattern: Optional path pattern such as ``/hello*``
            order: Priority, lower runs earlier

        Returns:
            The registered entry
        """
        entry = InterceptorEntry.of(interceptor, path_pattern=path_pattern, priority=order)
        self.register(entry)
        return entry

    def freeze(self) -> None:
        """Make the registry read-only and pre-sort its entries."""
        if self.frozen:
            return
        # sorted() is stable, so insertion order breaks priority ties
        self._ordered = tuple(sorted(self._entries, key=_by_priority))
        logger.info(f"Interceptor registry frozen with {len(self._ordered)} interceptor(s)")

    def resolve(self, path: str) -> tuple[InterceptorEntry, ...]:
        """
        Resolve the interceptors applying to a request path.

        Args:
            path: Normalized request path

        Returns:
            Matching entries, ascending by priority
        """
        if self._ordered is not None:
            candidates = self._ordered
        else:
            candidates = tuple(sorted(self._entries, key=_by_priority))

        return tuple(entry for entry in candidates if entry.applies_to(path))
