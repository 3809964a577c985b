import inspect
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional, Protocol

from bindwire.dependencies import DependenciesExtractor, invoke_factory


class _Engine:
    pass


class _Color(Enum):
    RED = "red"


class _Abstract(ABC):
    @abstractmethod
    def run(self) -> None: ...


class _Port(Protocol):
    def open(self) -> None: ...


class _Car:
    def __init__(
        self,
        engine: _Engine,
        spare: Optional[_Engine] = None,
        tagged: Annotated[_Engine, "meta"] = None,
        name: str = "car",
        *args: object,
        color: _Color = _Color.RED,
        built: datetime | None = None,
        path: Path | None = None,
        untyped=1,
        **kwargs: object,
    ) -> None:
        pass


class _NoInit:
    pass


def test_describe_classifies_parameters(dependencies_extractor: DependenciesExtractor) -> None:
    parameters = {info.name: info for info in dependencies_extractor.describe(_Car)}

    assert list(parameters) == [
        "engine",
        "spare",
        "tagged",
        "name",
        "color",
        "built",
        "path",
        "untyped",
    ]
    assert parameters["engine"].dependency is _Engine
    assert not parameters["engine"].has_default
    assert not parameters["engine"].is_optional
    assert parameters["spare"].dependency is _Engine
    assert parameters["spare"].is_optional
    assert parameters["tagged"].dependency is _Engine
    assert parameters["name"].dependency is None
    assert parameters["name"].default == "car"
    assert parameters["color"].dependency is None
    assert parameters["color"].kind is inspect.Parameter.KEYWORD_ONLY
    assert not parameters["color"].is_positional
    assert parameters["built"].dependency is None
    assert parameters["path"].dependency is None
    assert parameters["untyped"].dependency is None


def test_describe_is_cached(dependencies_extractor: DependenciesExtractor) -> None:
    assert dependencies_extractor.describe(_Car) is dependencies_extractor.describe(_Car)


def test_describe_class_without_init(dependencies_extractor: DependenciesExtractor) -> None:
    assert dependencies_extractor.describe(_NoInit) == ()


def test_describe_function(dependencies_extractor: DependenciesExtractor) -> None:
    def handler(engine: _Engine, count: int) -> None:
        pass

    parameters = dependencies_extractor.describe(handler)

    assert [info.dependency for info in parameters] == [_Engine, None]


def test_accepts_var_keyword(dependencies_extractor: DependenciesExtractor) -> None:
    def with_kwargs(**kwargs: object) -> None:
        pass

    def without_kwargs(value: int) -> None:
        pass

    assert dependencies_extractor.accepts_var_keyword(with_kwargs)
    assert not dependencies_extractor.accepts_var_keyword(without_kwargs)


def test_is_instantiable(dependencies_extractor: DependenciesExtractor) -> None:
    assert dependencies_extractor.is_instantiable(_Engine)
    assert not dependencies_extractor.is_instantiable(_Abstract)
    assert not dependencies_extractor.is_instantiable(_Port)
    assert not dependencies_extractor.is_instantiable("engine")
    assert not dependencies_extractor.is_instantiable(list[int])


def test_invoke_factory_passes_accepted_arguments() -> None:
    assert invoke_factory(lambda: "none", "a", "b") == "none"
    assert invoke_factory(lambda first: first, "a", "b") == "a"
    assert invoke_factory(lambda first, second: (first, second), "a", "b") == ("a", "b")
    assert invoke_factory(lambda *args: args, "a", "b") == ("a", "b")
