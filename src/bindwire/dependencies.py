from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass
from types import FunctionType, MethodType
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from bindwire._internal.primitives import ClassDependencyPolicy
from bindwire._internal.type_checks import is_protocol_class, is_runtime_class
from bindwire.exceptions import BindwireDependencyExtractionError

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_VARIADIC_KINDS = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
)


@dataclass(frozen=True, slots=True)
class ParameterInfo:
    """Information about a constructor/function parameter."""

    name: str
    dependency: type[Any] | None
    """Class to resolve through the container, or ``None`` for primitives."""
    has_default: bool
    default: Any
    kind: inspect._ParameterKind = inspect.Parameter.POSITIONAL_OR_KEYWORD

    @property
    def is_optional(self) -> bool:
        """Return true when a failed class dependency may fall back to the default."""
        return self.has_default

    @property
    def is_positional(self) -> bool:
        return self.kind in _POSITIONAL_KINDS


class DependenciesExtractor:
    """Describe the parameters of classes and callables for injection.

    The resolver only consumes the ordered ``ParameterInfo`` tuples returned by
    ``describe``, so it stays independent of how annotations are read.
    """

    def __init__(self, policy: ClassDependencyPolicy | None = None) -> None:
        self._policy = policy or ClassDependencyPolicy()
        self._describe_cache: dict[Any, tuple[ParameterInfo, ...]] = {}

    def describe(self, target: Any) -> tuple[ParameterInfo, ...]:
        """Return the injectable parameters of ``target`` in declaration order.

        ``self``/``cls``, ``*args`` and ``**kwargs`` are skipped. Annotations are
        read with ``get_type_hints``; ``Annotated`` metadata is stripped and
        ``X | None`` narrows to ``X``.
        """
        cacheable = isinstance(target, type | FunctionType)
        if cacheable and target in self._describe_cache:
            return self._describe_cache[target]

        signature = self._signature(target)
        if signature is None:
            return ()
        type_hints = self._type_hints(target)

        result = tuple(
            ParameterInfo(
                name=parameter.name,
                dependency=self._class_dependency(
                    type_hints.get(parameter.name, parameter.annotation),
                ),
                has_default=parameter.default is not inspect.Parameter.empty,
                default=(
                    None if parameter.default is inspect.Parameter.empty else parameter.default
                ),
                kind=parameter.kind,
            )
            for parameter in signature.parameters.values()
            if parameter.kind not in _VARIADIC_KINDS
        )
        if cacheable:
            self._describe_cache[target] = result
        return result

    def accepts_var_keyword(self, target: Any) -> bool:
        signature = self._signature(target)
        if signature is None:
            return False
        return any(
            parameter.kind is inspect.Parameter.VAR_KEYWORD
            for parameter in signature.parameters.values()
        )

    def is_instantiable(self, target: Any) -> bool:
        """Return whether ``target`` is a class that can be constructed directly."""
        if not is_runtime_class(target):
            return False
        if inspect.isabstract(target):
            return False
        return not is_protocol_class(target)

    def _signature(self, target: Any) -> inspect.Signature | None:
        try:
            return inspect.signature(target)
        except (ValueError, TypeError):
            return None

    def _type_hints(self, target: Any) -> dict[str, Any]:
        init_func = self._get_init_func(target)
        if init_func is None:
            return {}
        try:
            return get_type_hints(init_func, include_extras=True)
        except (NameError, TypeError) as error:
            raise BindwireDependencyExtractionError(target, error) from error

    def _class_dependency(self, annotation: Any) -> type[Any] | None:
        annotation = self._strip_annotated(annotation)
        annotation = self._strip_optional(annotation)
        if self._policy.is_class_dependency(annotation):
            return annotation
        return None

    def _strip_annotated(self, annotation: Any) -> Any:
        if get_origin(annotation) is Annotated:
            return get_args(annotation)[0]
        return annotation

    def _strip_optional(self, annotation: Any) -> Any:
        if get_origin(annotation) not in (Union, types.UnionType):
            return annotation
        members = [member for member in get_args(annotation) if member is not type(None)]
        if len(members) == 1:
            return self._strip_annotated(members[0])
        return annotation

    def _get_init_func(self, target: Any) -> Any:
        if isinstance(target, FunctionType | MethodType):
            return target
        if is_runtime_class(target):
            return target.__init__
        # Partials and callable instances: annotations come from inspect.signature.
        return None


def invoke_factory(factory: Callable[..., Any], *arguments: Any) -> Any:
    """Call ``factory`` with as many leading ``arguments`` as it accepts positionally.

    Factories are called as ``factory(container, overrides)``; a factory that
    declares one positional parameter receives only the container, and one
    that declares none is called without arguments.
    """
    try:
        signature = inspect.signature(factory)
    except (ValueError, TypeError):
        return factory(*arguments)

    positional = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return factory(*arguments)
        if parameter.kind in _POSITIONAL_KINDS:
            positional += 1
    return factory(*arguments[:positional])


__all__ = ["DependenciesExtractor", "ParameterInfo", "invoke_factory"]
