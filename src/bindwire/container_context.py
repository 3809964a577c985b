from __future__ import annotations

import logging
import threading

from bindwire.container import Container

logger = logging.getLogger(__name__)


class ContainerContext:
    """Hold the process-wide default container.

    The binding is shared by every thread and task that uses this
    ``ContainerContext`` instance. Nothing is created at import time: the
    first ``get_current`` call without a container set creates one, under a
    lock so concurrent first calls observe the same container.
    """

    def __init__(self) -> None:
        self._container: Container | None = None
        self._lock = threading.Lock()

    def get_current(self) -> Container:
        """Return the default container, creating an empty one if none is set."""
        container = self._container
        if container is not None:
            return container
        with self._lock:
            if self._container is None:
                logger.debug("Creating default container")
                self._container = Container()
            return self._container

    def set_current(self, container: Container | None) -> Container | None:
        """Replace the default container, or clear it with ``None``.

        Returns:
            The container now set.

        """
        with self._lock:
            self._container = container
        return container

    def is_set(self) -> bool:
        return self._container is not None


container_context = ContainerContext()

__all__ = ["ContainerContext", "container_context"]
