from __future__ import annotations

from typing import Any


class BindwireError(Exception):
    """Represent a base class for all bindwire-specific failures.

    Catch this type when you want to handle any bindwire error path without
    matching each concrete exception class individually.
    """


class BindwireInvalidRegistrationError(BindwireError):
    """Signal invalid registration arguments.

    Raised by registration APIs such as ``Container.extend``,
    ``Container.rebinding``, ``Container.resolving`` and
    ``Container.bind_method`` when a callback argument is not callable.
    """


class BindwireBindingResolutionError(BindwireError):
    """Signal that a dependency graph could not be resolved.

    This is the umbrella failure raised by ``make``/``build`` and every nested
    resolution frame. Constructor parameters that declare a default value
    recover from it locally; every other frame lets it propagate unchanged.

    Typical fixes include binding an implementation for an abstract class or
    protocol, giving a contextual value for a primitive parameter, or passing
    the value explicitly as an override.
    """

    def __init__(self, message: str, *, target: Any = None) -> None:
        super().__init__(message)
        self.target = target


class BindwireNotInstantiableError(BindwireBindingResolutionError):
    """Signal that the resolved concrete cannot be instantiated.

    Raised when the concrete is an abstract class, a protocol, or a name that
    refers to nothing the container knows about. ``build_stack`` holds the
    chain of concretes that were under construction when the failure happened.
    """

    def __init__(self, message: str, *, target: Any, build_stack: tuple[Any, ...]) -> None:
        super().__init__(message, target=target)
        self.build_stack = build_stack


class BindwireUnresolvablePrimitiveError(BindwireBindingResolutionError):
    """Signal that a primitive constructor parameter has no value source.

    A primitive parameter (untyped, or typed with a builtin/value type) can only
    be filled from a parameter override, a contextual binding keyed
    ``"$<name>"``, or its default value.
    """

    def __init__(self, message: str, *, parameter: str, declaring_class: Any) -> None:
        super().__init__(message, target=declaring_class)
        self.parameter = parameter
        self.declaring_class = declaring_class


class BindwireDependencyExtractionError(BindwireBindingResolutionError):
    """Signal that the parameter annotations of a target could not be evaluated.

    Raised when ``typing.get_type_hints`` fails on a constructor or callable,
    most often because a postponed (string) annotation names a class that is
    not reachable from the module globals, such as a class defined inside a
    function. Move the class to module level or drop the postponed
    annotation. ``error`` holds the original exception.
    """

    def __init__(self, target: Any, error: Exception) -> None:
        name = getattr(target, "__qualname__", repr(target))
        super().__init__(
            f"Unable to read parameter annotations of [{name}]: {error}",
            target=target,
        )
        self.error = error


class BindwireEntryNotFoundError(BindwireError, LookupError):
    """Signal that ``Container.get`` was asked for an id nothing is bound to.

    Distinguishes "nothing registered" from "registered but construction
    failed": in the latter case ``get`` re-raises the underlying error.
    """

    def __init__(self, entry_id: Any) -> None:
        super().__init__(f"No entry was found for [{entry_id}].")
        self.entry_id = entry_id


class BindwireSelfAliasError(BindwireError):
    """Signal an abstract name that is aliased to itself.

    This is a configuration bug, not a runtime condition: it is deliberately not
    a ``BindwireBindingResolutionError`` so optional-parameter fallbacks never
    swallow it.
    """

    def __init__(self, abstract: Any) -> None:
        super().__init__(f"[{abstract}] is aliased to itself.")
        self.abstract = abstract
