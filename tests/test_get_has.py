import pytest

from bindwire.container import Container
from bindwire.exceptions import (
    BindwireEntryNotFoundError,
    BindwireError,
    BindwireNotInstantiableError,
    BindwireUnresolvablePrimitiveError,
)


class _Settings:
    def __init__(self, dsn: str) -> None:
        self.dsn = dsn


class _Standalone:
    pass


def test_get_returns_bound_entry(container: Container) -> None:
    container.instance("config", {"debug": True})

    assert container.get("config") == {"debug": True}


def test_get_builds_unbound_class(container: Container) -> None:
    assert isinstance(container.get(_Standalone), _Standalone)


def test_get_unknown_entry_raises_not_found(container: Container) -> None:
    with pytest.raises(BindwireEntryNotFoundError) as exc_info:
        container.get("missing")

    assert str(exc_info.value) == "No entry was found for [missing]."
    assert exc_info.value.entry_id == "missing"
    assert isinstance(exc_info.value.__cause__, BindwireNotInstantiableError)
    assert isinstance(exc_info.value, LookupError)
    assert isinstance(exc_info.value, BindwireError)


def test_get_unbound_class_failure_raises_not_found(container: Container) -> None:
    with pytest.raises(BindwireEntryNotFoundError):
        container.get(_Settings)


def test_get_bound_entry_failure_is_rethrown(container: Container) -> None:
    container.bind("settings", _Settings)

    with pytest.raises(BindwireUnresolvablePrimitiveError):
        container.get("settings")


def test_has_reports_bindings_only(container: Container) -> None:
    container.bind("settings", _Settings)

    assert container.has("settings")
    assert not container.has(_Standalone)
