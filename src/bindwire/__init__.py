from bindwire.container import Container
from bindwire.container_context import ContainerContext, container_context
from bindwire.contextual import ContextualBindingBuilder
from bindwire.exceptions import (
    BindwireBindingResolutionError,
    BindwireDependencyExtractionError,
    BindwireEntryNotFoundError,
    BindwireError,
    BindwireInvalidRegistrationError,
    BindwireNotInstantiableError,
    BindwireSelfAliasError,
    BindwireUnresolvablePrimitiveError,
)
from bindwire.lock_mode import LockMode
from bindwire.providers import (
    Binding,
    FactoryConcrete,
    FactoryImplementation,
    LiteralImplementation,
    NamedConcrete,
    NamedImplementation,
    SelfBuild,
)

__all__ = [
    "Binding",
    "BindwireBindingResolutionError",
    "BindwireDependencyExtractionError",
    "BindwireEntryNotFoundError",
    "BindwireError",
    "BindwireInvalidRegistrationError",
    "BindwireNotInstantiableError",
    "BindwireSelfAliasError",
    "BindwireUnresolvablePrimitiveError",
    "Container",
    "ContainerContext",
    "ContextualBindingBuilder",
    "FactoryConcrete",
    "FactoryImplementation",
    "LiteralImplementation",
    "LockMode",
    "NamedConcrete",
    "NamedImplementation",
    "SelfBuild",
    "container_context",
]
