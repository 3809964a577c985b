"""Shared pytest fixtures for bindwire tests."""

import pytest

from bindwire.container import Container
from bindwire.dependencies import DependenciesExtractor

pytest_plugins = ["bindwire.integrations.pytest_plugin"]


@pytest.fixture()
def container() -> Container:
    """Empty container without locking."""
    return Container()


@pytest.fixture()
def dependencies_extractor() -> DependenciesExtractor:
    """DependenciesExtractor instance."""
    return DependenciesExtractor()
