from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bindwire._internal.type_checks import is_runtime_class
from bindwire.dependencies import DependenciesExtractor, ParameterInfo
from bindwire.exceptions import (
    BindwireBindingResolutionError,
    BindwireInvalidRegistrationError,
    BindwireUnresolvablePrimitiveError,
)

if TYPE_CHECKING:
    from bindwire.container import Container

METHOD_SEPARATOR = "@"


def method_binding_key(target: Any, method_name: str) -> str:
    """Build the ``"Class@method"`` key used by method bindings."""
    if isinstance(target, str):
        return f"{target}{METHOD_SEPARATOR}{method_name}"
    owner = target if is_runtime_class(target) else type(target)
    return f"{owner.__qualname__}{METHOD_SEPARATOR}{method_name}"


@dataclass(slots=True)
class BoundMethodCaller:
    """Call functions and methods, resolving parameters the caller did not supply.

    Accepted callbacks:

    * any callable;
    * ``"key@method"`` strings, where ``key`` is made through the container;
    * ``(instance_or_key, "method")`` pairs;
    * a class or key together with ``default_method``.

    A method binding registered for ``"Class@method"`` replaces the call.
    """

    dependencies_extractor: DependenciesExtractor

    def call(
        self,
        container: Container,
        callback: Any,
        parameters: Mapping[str, Any] | None = None,
        default_method: str | None = None,
    ) -> Any:
        parameters = dict(parameters or {})
        if self._is_callable_with_at_sign(callback) or (
            default_method is not None and not isinstance(callback, tuple)
        ):
            return self._call_class(container, callback, parameters, default_method)

        if isinstance(callback, tuple):
            target, method_name = callback
            if is_runtime_class(target) or isinstance(target, str):
                target = container.make(target)
            key = method_binding_key(target, method_name)
            if container.has_method_binding(key):
                return container.call_method_binding(key, target)
            callback = getattr(target, method_name)

        return self._call_callable(container, callback, parameters)

    def _is_callable_with_at_sign(self, callback: Any) -> bool:
        return isinstance(callback, str) and METHOD_SEPARATOR in callback

    def _call_class(
        self,
        container: Container,
        target: Any,
        parameters: dict[str, Any],
        default_method: str | None,
    ) -> Any:
        method_name = default_method
        if isinstance(target, str) and METHOD_SEPARATOR in target:
            target, method_name = target.split(METHOD_SEPARATOR, 1)
        if not method_name:
            msg = f"Method not provided for [{target}]."
            raise BindwireInvalidRegistrationError(msg)
        return self.call(container, (container.make(target), method_name), parameters)

    def _call_callable(
        self,
        container: Container,
        callback: Callable[..., Any],
        parameters: dict[str, Any],
    ) -> Any:
        if not callable(callback):
            msg = f"call() target {callback!r} is not callable."
            raise BindwireInvalidRegistrationError(msg)

        arguments: list[Any] = []
        keyword_arguments: dict[str, Any] = {}
        for dependency in self.dependencies_extractor.describe(callback):
            value = self._resolve_parameter(container, callback, dependency, parameters)
            if dependency.is_positional:
                arguments.append(value)
            else:
                keyword_arguments[dependency.name] = value

        if parameters and self.dependencies_extractor.accepts_var_keyword(callback):
            keyword_arguments.update(parameters)
        return callback(*arguments, **keyword_arguments)

    def _resolve_parameter(
        self,
        container: Container,
        callback: Callable[..., Any],
        dependency: ParameterInfo,
        parameters: dict[str, Any],
    ) -> Any:
        if dependency.name in parameters:
            return parameters.pop(dependency.name)
        if dependency.dependency is not None:
            try:
                return container.make(dependency.dependency)
            except BindwireBindingResolutionError:
                if dependency.is_optional:
                    return dependency.default
                raise
        if dependency.has_default:
            return dependency.default

        callback_name = getattr(callback, "__qualname__", repr(callback))
        msg = f"Unable to resolve dependency [{dependency.name}] in callable [{callback_name}]"
        raise BindwireUnresolvablePrimitiveError(
            msg,
            parameter=dependency.name,
            declaring_class=callback,
        )


__all__ = ["METHOD_SEPARATOR", "BoundMethodCaller", "method_binding_key"]
