from __future__ import annotations

import pytest

from bindwire.container import Container
from bindwire.exceptions import BindwireBindingResolutionError, BindwireDependencyExtractionError


class _Repository:
    pass


class _Service:
    def __init__(self, repository: _Repository) -> None:
        self.repository = repository


def test_postponed_annotations_on_module_level_classes(container: Container) -> None:
    assert isinstance(container.make(_Service).repository, _Repository)


def test_unresolvable_postponed_annotation_raises_extraction_error(container: Container) -> None:
    class _LocalRepository:
        pass

    class _LocalService:
        def __init__(self, repository: _LocalRepository) -> None:
            self.repository = repository

    with pytest.raises(BindwireDependencyExtractionError) as exc_info:
        container.make(_LocalService)

    assert exc_info.value.target is _LocalService
    assert isinstance(exc_info.value.error, NameError)
    assert isinstance(exc_info.value.__cause__, NameError)
    assert isinstance(exc_info.value, BindwireBindingResolutionError)


def test_optional_parameter_does_not_hide_extraction_error(container: Container) -> None:
    class _LocalRepository:
        pass

    class _LocalConsumer:
        def __init__(self, repository: _LocalRepository | None = None) -> None:
            self.repository = repository

    with pytest.raises(BindwireDependencyExtractionError, match="_LocalConsumer"):
        container.make(_LocalConsumer)


def test_call_reports_extraction_error(container: Container) -> None:
    class _LocalRepository:
        pass

    def handler(repository: _LocalRepository) -> _LocalRepository:
        return repository

    with pytest.raises(BindwireDependencyExtractionError):
        container.call(handler)
