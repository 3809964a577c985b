from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for container access.

    The container keeps its binding tables and its build/override stacks as
    plain instance state. ``NONE`` assumes one logical thread of control, or a
    container that is configured at startup and only read afterwards.

    Choose ``THREAD`` when one container is shared by several threads that may
    bind and resolve concurrently. Every public entry point then runs under a
    single re-entrant lock, so nested resolution keeps working while concurrent
    callers are serialized.
    """

    THREAD = "thread"
    """Guard every container entry point with one ``threading.RLock``."""

    NONE = "none"
    """Disable locking."""
