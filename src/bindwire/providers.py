from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, TypeAlias

from bindwire._internal.type_checks import is_runtime_class
from bindwire.exceptions import BindwireInvalidRegistrationError

Abstract: TypeAlias = Hashable
"""A key the container resolves: a class, a protocol, or an arbitrary string."""

PRIMITIVE_PREFIX = "$"
"""Prefix of the synthetic contextual key used for primitive parameters."""


@dataclass(frozen=True, slots=True)
class SelfBuild:
    """Construct ``target`` itself by introspecting its constructor."""

    target: Any


@dataclass(frozen=True, slots=True)
class FactoryConcrete:
    """Produce the instance by calling ``factory(container, overrides)``.

    The factory may accept fewer positional arguments; extra ones are dropped.
    """

    factory: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class NamedConcrete:
    """Delegate to another abstract name, forwarding the current overrides."""

    name: Abstract


Concrete: TypeAlias = SelfBuild | FactoryConcrete | NamedConcrete
"""Construction strategy stored in a binding."""


@dataclass(frozen=True, slots=True)
class LiteralImplementation:
    """Contextual implementation handed out verbatim."""

    value: Any


@dataclass(frozen=True, slots=True)
class FactoryImplementation:
    """Contextual implementation produced by a factory callable."""

    factory: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class NamedImplementation:
    """Contextual implementation resolved by making another abstract name."""

    name: Abstract


Implementation: TypeAlias = LiteralImplementation | FactoryImplementation | NamedImplementation
"""Value stored in the contextual binding table."""


@dataclass(frozen=True, slots=True)
class Binding:
    """The registered construction strategy for one abstract."""

    concrete: Concrete
    shared: bool = False


def is_factory_callable(candidate: object) -> bool:
    """Return whether ``candidate`` is a callable that is not itself a class."""
    return callable(candidate) and not is_runtime_class(candidate)


def normalize_concrete(abstract: Abstract, concrete: Any) -> Concrete:
    """Turn the ``concrete`` argument of ``bind`` into a construction strategy.

    Args:
        abstract: Abstract key being bound.
        concrete: ``None`` (build the abstract itself), a class or name to
            delegate to, a factory callable, or an explicit strategy.

    Raises:
        BindwireInvalidRegistrationError: If ``concrete`` is a prebuilt object.

    """
    if isinstance(concrete, SelfBuild | FactoryConcrete | NamedConcrete):
        return concrete
    if concrete is None or concrete == abstract:
        return SelfBuild(abstract)
    if is_runtime_class(concrete) or isinstance(concrete, str):
        return NamedConcrete(concrete)
    if callable(concrete):
        return FactoryConcrete(concrete)
    msg = (
        f"bind() concrete for [{abstract}] must be a class, a name, or a factory callable, "
        f"got {type(concrete).__name__}. Use instance() to register a prebuilt object."
    )
    raise BindwireInvalidRegistrationError(msg)


def normalize_implementation(abstract: Abstract, implementation: Any) -> Implementation:
    """Classify the value given to a contextual binding.

    Non-class callables are factories. For primitive keys (``"$name"``) every
    other value is a literal. For class keys, classes and strings name another
    abstract to make, and anything else is a literal.
    """
    if isinstance(
        implementation,
        LiteralImplementation | FactoryImplementation | NamedImplementation,
    ):
        return implementation
    if is_factory_callable(implementation):
        return FactoryImplementation(implementation)
    if isinstance(abstract, str) and abstract.startswith(PRIMITIVE_PREFIX):
        return LiteralImplementation(implementation)
    if is_runtime_class(implementation) or isinstance(implementation, str):
        return NamedImplementation(implementation)
    return LiteralImplementation(implementation)


__all__ = [
    "PRIMITIVE_PREFIX",
    "Abstract",
    "Binding",
    "Concrete",
    "FactoryConcrete",
    "FactoryImplementation",
    "Implementation",
    "LiteralImplementation",
    "NamedConcrete",
    "NamedImplementation",
    "SelfBuild",
    "is_factory_callable",
    "normalize_concrete",
    "normalize_implementation",
]
