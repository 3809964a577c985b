from abc import ABC, abstractmethod
from typing import Protocol

import pytest

from bindwire.container import Container
from bindwire.exceptions import (
    BindwireBindingResolutionError,
    BindwireNotInstantiableError,
    BindwireUnresolvablePrimitiveError,
)


class _Repository(ABC):
    @abstractmethod
    def find(self, key: str) -> str: ...


class _MemoryRepository(_Repository):
    def find(self, key: str) -> str:
        return key


class _Logger:
    pass


class _Service:
    def __init__(self, repository: _Repository, logger: _Logger) -> None:
        self.repository = repository
        self.logger = logger


class _Controller:
    def __init__(self, service: _Service) -> None:
        self.service = service


class _Report:
    def __init__(self, title: str, pages: int = 10) -> None:
        self.title = title
        self.pages = pages


class _Paginator:
    def __init__(self, logger: _Logger, per_page: int = 15) -> None:
        self.logger = logger
        self.per_page = per_page


class _Notifier(Protocol):
    def notify(self) -> None: ...


class _Alerts:
    def __init__(self, notifier: _Notifier | None = None) -> None:
        self.notifier = notifier


class _RequiresNotifier:
    def __init__(self, notifier: _Notifier) -> None:
        self.notifier = notifier


class _Consumer:
    def __init__(self, repository: _Repository) -> None:
        self.repository = repository


class _KeywordOnly:
    def __init__(self, logger: _Logger, *, retries: int = 3) -> None:
        self.logger = logger
        self.retries = retries


def test_make_builds_class_without_bindings(container: Container) -> None:
    logger = container.make(_Logger)

    assert isinstance(logger, _Logger)
    assert logger is not container.make(_Logger)


def test_make_resolves_transitive_dependencies(container: Container) -> None:
    container.bind(_Repository, _MemoryRepository)

    controller = container.make(_Controller)

    assert isinstance(controller.service, _Service)
    assert isinstance(controller.service.repository, _MemoryRepository)
    assert isinstance(controller.service.logger, _Logger)


def test_singleton_identity_and_overrides_bypass_cache(container: Container) -> None:
    container.singleton(_Paginator)

    first = container.make(_Paginator)
    second = container.make(_Paginator)
    overridden = container.make(_Paginator, {"per_page": 50})

    assert first is second
    assert overridden is not first
    assert overridden.per_page == 50
    assert container.make(_Paginator) is first


def test_overrides_are_not_cached_when_resolved_first(container: Container) -> None:
    container.singleton(_Paginator)

    overridden = container.make_with(_Paginator, {"per_page": 50})
    plain = container.make(_Paginator)

    assert overridden is not plain
    assert plain.per_page == 15
    assert container.make(_Paginator) is plain


def test_defaults_and_overrides(container: Container) -> None:
    report = container.make(_Report, {"title": "Quarterly"})

    assert report.title == "Quarterly"
    assert report.pages == 10


def test_overrides_apply_only_to_top_level_constructor(container: Container) -> None:
    container.bind(_Repository, _MemoryRepository)

    instance = container.make(_Controller, {"logger": "not-used"})

    assert isinstance(instance.service.logger, _Logger)


def test_overrides_forwarded_through_named_binding(container: Container) -> None:
    container.bind("paginator", _Paginator)

    paginator = container.make("paginator", {"per_page": 5})

    assert paginator.per_page == 5


def test_unresolvable_primitive(container: Container) -> None:
    with pytest.raises(BindwireUnresolvablePrimitiveError) as exc_info:
        container.make(_Report)

    assert str(exc_info.value) == "Unresolvable dependency resolving [title] in class _Report"
    assert exc_info.value.parameter == "title"
    assert exc_info.value.declaring_class is _Report


def test_abstract_class_is_not_instantiable(container: Container) -> None:
    with pytest.raises(BindwireNotInstantiableError) as exc_info:
        container.make(_Repository)

    assert str(exc_info.value) == "Target [_Repository] is not instantiable."
    assert exc_info.value.build_stack == ()


def test_not_instantiable_reports_build_stack(container: Container) -> None:
    with pytest.raises(BindwireNotInstantiableError) as exc_info:
        container.make(_Controller)

    assert str(exc_info.value) == (
        "Target [_Repository] is not instantiable while building [_Controller, _Service]."
    )
    assert exc_info.value.build_stack == (_Controller, _Service)


def test_unknown_string_abstract_is_not_instantiable(container: Container) -> None:
    with pytest.raises(BindwireNotInstantiableError, match=r"Target \[missing\]"):
        container.make("missing")


def test_protocol_is_not_instantiable(container: Container) -> None:
    with pytest.raises(BindwireNotInstantiableError):
        container.make(_RequiresNotifier)


def test_optional_class_dependency_falls_back_to_default(container: Container) -> None:
    alerts = container.make(_Alerts)

    assert alerts.notifier is None


def test_stacks_are_clean_after_failure(container: Container) -> None:
    with pytest.raises(BindwireBindingResolutionError):
        container.make(_Controller, {"extra": 1})

    assert container._build_stack == []
    assert container._with == []

    container.bind(_Repository, _MemoryRepository)
    assert isinstance(container.make(_Controller).service.repository, _MemoryRepository)


def test_contextual_rules_do_not_leak_after_failure(container: Container) -> None:
    container.when(_Consumer).needs(_Repository).give(_MemoryRepository)

    with pytest.raises(BindwireUnresolvablePrimitiveError):
        container.make(_Report)

    with pytest.raises(BindwireNotInstantiableError):
        container.make(_Repository)


def test_keyword_only_parameters(container: Container) -> None:
    instance = container.make(_KeywordOnly, {"retries": 7})

    assert isinstance(instance.logger, _Logger)
    assert instance.retries == 7


def test_build_ignores_bindings_for_target(container: Container) -> None:
    container.bind(_Logger, lambda: "bound")

    assert isinstance(container.build(_Logger), _Logger)
    assert container.make(_Logger) == "bound"


def test_build_calls_factories(container: Container) -> None:
    assert container.build(lambda container: container) is container


def test_factory_returns_thunk(container: Container) -> None:
    container.bind(_Repository, _MemoryRepository)

    make_repository = container.factory(_Repository)

    assert isinstance(make_repository(), _MemoryRepository)
    assert make_repository() is not make_repository()
