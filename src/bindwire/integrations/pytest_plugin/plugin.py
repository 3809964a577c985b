from __future__ import annotations

from collections.abc import Iterator

import pytest

from bindwire.container import Container
from bindwire.container_context import container_context


@pytest.fixture()
def bindwire_container() -> Container:
    """Create a fresh container for one test.

    The fixture is function-scoped, so bindings never leak between tests
    unless the fixture scope is overridden.

    Returns:
        A new ``Container`` instance.

    """
    return Container()


@pytest.fixture()
def bindwire_context(bindwire_container: Container) -> Iterator[Container]:
    """Install ``bindwire_container`` as the process-wide default container.

    The previous default container is restored after the test, including the
    "no container set" state.

    Yields:
        The container set as default for the duration of the test.

    """
    previous = container_context.get_current() if container_context.is_set() else None
    container_context.set_current(bindwire_container)
    try:
        yield bindwire_container
    finally:
        container_context.set_current(previous)
