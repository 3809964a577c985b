from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Generator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, NoReturn, TypeAlias, TypeVar, cast, overload

from bindwire._internal.type_checks import is_protocol_class, is_runtime_class
from bindwire.contextual import ContextualBindingBuilder
from bindwire.dependencies import DependenciesExtractor, ParameterInfo, invoke_factory
from bindwire.exceptions import (
    BindwireBindingResolutionError,
    BindwireEntryNotFoundError,
    BindwireInvalidRegistrationError,
    BindwireNotInstantiableError,
    BindwireSelfAliasError,
    BindwireUnresolvablePrimitiveError,
)
from bindwire.injection import BoundMethodCaller, method_binding_key
from bindwire.integrations.pydantic_settings import is_pydantic_settings_subclass
from bindwire.lock_mode import LockMode
from bindwire.providers import (
    PRIMITIVE_PREFIX,
    Abstract,
    Binding,
    Concrete,
    FactoryConcrete,
    FactoryImplementation,
    Implementation,
    LiteralImplementation,
    NamedConcrete,
    NamedImplementation,
    SelfBuild,
    is_factory_callable,
    normalize_concrete,
    normalize_implementation,
)

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

Extender: TypeAlias = Callable[[Any, "Container"], Any]
"""Decorator receiving ``(instance, container)`` and returning the instance to use."""

ResolvingCallback: TypeAlias = Callable[[Any, "Container"], Any]
"""Callback receiving ``(instance, container)`` after an instance was produced."""

ReboundCallback: TypeAlias = Callable[["Container", Any], Any]
"""Callback receiving ``(container, instance)`` whenever an abstract is rebound."""

logger = logging.getLogger(__name__)


def _synchronized(method: F) -> F:
    @functools.wraps(method)
    def _locked(self: Container, *args: Any, **kwargs: Any) -> Any:
        lock = self._lock
        if lock is None:
            return method(self, *args, **kwargs)
        with lock:
            return method(self, *args, **kwargs)

    return cast("F", _locked)


def _display_name(value: Any) -> str:
    if is_runtime_class(value):
        return value.__qualname__
    return str(value)


def _wrap(value: Any) -> list[Any]:
    if isinstance(value, list | tuple):
        return list(value)
    return [value]


class Container:
    """Register bindings and resolve object graphs by walking constructor signatures.

    Abstract keys are classes, protocols, or arbitrary strings. A key with no
    binding is treated as constructible: the container introspects the class
    constructor and recursively makes every class-typed parameter. Primitive
    parameters are filled from explicit overrides, ``"$name"`` contextual
    bindings, or their defaults.

    Resolution is re-entrant. While a class is being built, it sits on top of the
    build stack, which is what contextual bindings (``when(...).needs(...)``) are
    matched against. Explicit overrides passed to ``make`` live on a separate
    override stack and apply to the constructor of that one ``make`` call only.
    Both stacks are popped on every exit path, including failures.
    """

    def __init__(self, *, lock_mode: LockMode = LockMode.NONE) -> None:
        """Initialize an empty container.

        Args:
            lock_mode: ``LockMode.THREAD`` serializes every public entry point
                with one re-entrant lock. ``LockMode.NONE`` (default) assumes a
                single logical thread of control.

        Examples:
            .. code-block:: python

                container = Container()
                shared_container = Container(lock_mode=LockMode.THREAD)

        """
        self._lock_mode = lock_mode
        self._lock: threading.RLock | None = (
            threading.RLock() if lock_mode is LockMode.THREAD else None
        )
        self._dependencies_extractor = DependenciesExtractor()
        self._bound_method_caller = BoundMethodCaller(self._dependencies_extractor)

        self._resolved: set[Abstract] = set()
        self._bindings: dict[Abstract, Binding] = {}
        self._method_bindings: dict[str, Callable[[Any, Container], Any]] = {}
        self._instances: dict[Abstract, Any] = {}
        self._aliases: dict[Abstract, Abstract] = {}
        self._abstract_aliases: dict[Abstract, list[Abstract]] = {}
        self._extenders: dict[Abstract, list[Extender]] = {}
        self._tags: dict[str, list[Abstract]] = {}
        self._build_stack: list[Any] = []
        self._with: list[dict[str, Any]] = []
        self._contextual: dict[Abstract, dict[Abstract, Implementation]] = {}
        self._rebound_callbacks: dict[Abstract, list[ReboundCallback]] = {}
        self._global_resolving_callbacks: list[ResolvingCallback] = []
        self._global_after_resolving_callbacks: list[ResolvingCallback] = []
        self._resolving_callbacks: dict[Abstract, list[ResolvingCallback]] = {}
        self._after_resolving_callbacks: dict[Abstract, list[ResolvingCallback]] = {}

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    # region Registration Methods
    @_synchronized
    def bind(
        self,
        abstract: Abstract,
        concrete: Any = None,
        *,
        shared: bool = False,
    ) -> None:
        """Register how ``abstract`` is produced.

        Re-binding an abstract that was already resolved notifies its
        ``rebinding`` listeners with a freshly made instance.

        Args:
            abstract: Key to bind.
            concrete: ``None`` to construct ``abstract`` itself, another class
                or key to delegate to, or a factory callable receiving
                ``(container, overrides)``.
            shared: Cache the first instance made without overrides.

        Raises:
            BindwireInvalidRegistrationError: If ``concrete`` is a prebuilt
                object instead of a class, key, or factory.

        """
        strategy = normalize_concrete(abstract, concrete)
        self._drop_stale_instances(abstract)
        self._bindings[abstract] = Binding(concrete=strategy, shared=shared)
        logger.debug("Bound %s to %r (shared=%s)", _display_name(abstract), strategy, shared)

        if self.resolved(abstract):
            self._rebound(abstract)

    @_synchronized
    def bind_if(
        self,
        abstract: Abstract,
        concrete: Any = None,
        *,
        shared: bool = False,
    ) -> None:
        """Register a binding only when ``abstract`` is not bound yet."""
        if not self.bound(abstract):
            self.bind(abstract, concrete, shared=shared)

    def singleton(self, abstract: Abstract, concrete: Any = None) -> None:
        """Register a shared binding. See ``bind``."""
        self.bind(abstract, concrete, shared=True)

    @_synchronized
    def instance(self, abstract: Abstract, instance: T) -> T:
        """Register an existing object as the shared instance of ``abstract``.

        If ``abstract`` was bound or resolved before, ``rebinding`` listeners are
        notified.

        Returns:
            The registered object.

        """
        self._remove_abstract_alias(abstract)
        is_bound = self.bound(abstract) or self.resolved(abstract)
        self._aliases.pop(abstract, None)

        self._instances[abstract] = instance
        logger.debug("Registered instance for %s", _display_name(abstract))

        if is_bound:
            self._rebound(abstract)
        return instance

    @_synchronized
    def extend(self, abstract: Abstract, extender: Extender) -> None:
        """Decorate every instance produced for ``abstract``.

        Extenders run in registration order as ``extender(instance, container)``.
        An already cached shared instance is decorated immediately and replaced,
        and ``rebinding`` listeners are notified.

        Raises:
            BindwireInvalidRegistrationError: If ``extender`` is not callable.

        """
        if not callable(extender):
            msg = "extend() parameter 'extender' must be callable."
            raise BindwireInvalidRegistrationError(msg)

        abstract = self.get_alias(abstract)
        if abstract in self._instances:
            self._instances[abstract] = extender(self._instances[abstract], self)
            logger.debug("Extended cached instance of %s", _display_name(abstract))
            self._rebound(abstract)
            return

        self._extenders.setdefault(abstract, []).append(extender)
        if self.resolved(abstract):
            self._rebound(abstract)

    @_synchronized
    def forget_extenders(self, abstract: Abstract) -> None:
        self._extenders.pop(self.get_alias(abstract), None)

    @_synchronized
    def bind_method(
        self,
        method: str | tuple[Any, str],
        callback: Callable[[Any, Container], Any],
    ) -> None:
        """Replace ``call`` of ``"Class@method"`` with ``callback(instance, container)``."""
        if not callable(callback):
            msg = "bind_method() parameter 'callback' must be callable."
            raise BindwireInvalidRegistrationError(msg)
        self._method_bindings[self._parse_bind_method(method)] = callback

    def has_method_binding(self, method: str | tuple[Any, str]) -> bool:
        return self._parse_bind_method(method) in self._method_bindings

    def call_method_binding(self, method: str | tuple[Any, str], instance: Any) -> Any:
        return self._method_bindings[self._parse_bind_method(method)](instance, self)

    def _parse_bind_method(self, method: str | tuple[Any, str]) -> str:
        if isinstance(method, tuple):
            return method_binding_key(method[0], method[1])
        return method

    # endregion Registration Methods

    # region Contextual Bindings
    def when(self, concrete: Abstract | Sequence[Abstract]) -> ContextualBindingBuilder:
        """Start a contextual binding for one or more concretes.

        Examples:
            .. code-block:: python

                container.when(ReportMailer).needs(Transport).give(SmtpTransport)

        """
        return ContextualBindingBuilder(
            self,
            [self.get_alias(item) for item in _wrap(concrete)],
        )

    @_synchronized
    def add_contextual_binding(
        self,
        concrete: Abstract,
        abstract: Abstract,
        implementation: Any,
    ) -> None:
        """Use ``implementation`` for ``abstract`` while ``concrete`` is being built."""
        abstract = self.get_alias(abstract)
        self._contextual.setdefault(concrete, {})[abstract] = normalize_implementation(
            abstract,
            implementation,
        )

    # endregion Contextual Bindings

    # region Aliases and Tags
    @_synchronized
    def alias(self, abstract: Abstract, alias: Abstract) -> None:
        """Make ``alias`` resolve to ``abstract``."""
        self._aliases[alias] = abstract
        self._abstract_aliases.setdefault(abstract, []).append(alias)
        logger.debug("Aliased %s to %s", _display_name(alias), _display_name(abstract))

    def is_alias(self, name: Abstract) -> bool:
        return name in self._aliases

    def get_alias(self, abstract: Abstract) -> Abstract:
        """Follow the alias chain of ``abstract`` to its canonical name.

        Raises:
            BindwireSelfAliasError: If the chain leads back to a name already
                visited.

        """
        seen = {abstract}
        while abstract in self._aliases:
            target = self._aliases[abstract]
            if target in seen:
                raise BindwireSelfAliasError(abstract)
            seen.add(target)
            abstract = target
        return abstract

    def _remove_abstract_alias(self, searched: Abstract) -> None:
        if searched not in self._aliases:
            return

        for aliases in self._abstract_aliases.values():
            aliases[:] = [alias for alias in aliases if alias != searched]

    @_synchronized
    def tag(self, abstracts: Abstract | Sequence[Abstract], *tags: Any) -> None:
        """Attach one or more tags to one or more abstracts.

        Tags may be passed as separate arguments or as a single list.
        """
        if len(tags) == 1 and isinstance(tags[0], list | tuple):
            tags = tuple(tags[0])
        for tag in tags:
            members = self._tags.setdefault(tag, [])
            members.extend(_wrap(abstracts))

    @_synchronized
    def tagged(self, tag: str) -> list[Any]:
        """Make every abstract tagged ``tag``, in tagging order."""
        return [self.make(abstract) for abstract in self._tags.get(tag, [])]

    # endregion Aliases and Tags

    # region Callbacks
    @_synchronized
    def rebinding(self, abstract: Abstract, callback: ReboundCallback) -> Any | None:
        """Register ``callback(container, instance)`` for future rebinds of ``abstract``.

        Returns:
            The current instance when ``abstract`` is already bound, so callers
            can prime themselves with it; otherwise ``None``.

        """
        if not callable(callback):
            msg = "rebinding() parameter 'callback' must be callable."
            raise BindwireInvalidRegistrationError(msg)

        abstract = self.get_alias(abstract)
        self._rebound_callbacks.setdefault(abstract, []).append(callback)
        if self.bound(abstract):
            return self.make(abstract)
        return None

    def refresh(self, abstract: Abstract, target: Any, method: str) -> Any | None:
        """Call ``target.<method>(instance)`` whenever ``abstract`` is rebound."""

        def _refresh(_container: Container, instance: Any) -> None:
            getattr(target, method)(instance)

        return self.rebinding(abstract, _refresh)

    def _rebound(self, abstract: Abstract) -> None:
        instance = self.make(abstract)
        callbacks = list(self._rebound_callbacks.get(abstract, []))
        logger.debug(
            "Rebound %s, notifying %d listener(s)",
            _display_name(abstract),
            len(callbacks),
        )
        for callback in callbacks:
            callback(self, instance)

    @_synchronized
    def resolving(
        self,
        abstract: Abstract | ResolvingCallback,
        callback: ResolvingCallback | None = None,
    ) -> None:
        """Register a callback fired when an instance is produced.

        A lone callback fires for every resolution. A ``(key, callback)`` pair
        fires when the resolved abstract equals ``key`` or the instance is an
        instance of the class ``key``. Callbacks receive ``(instance, container)``.
        """
        self._register_resolution_callback(
            abstract,
            callback,
            global_callbacks=self._global_resolving_callbacks,
            callbacks_per_type=self._resolving_callbacks,
            method_name="resolving",
        )

    @_synchronized
    def after_resolving(
        self,
        abstract: Abstract | ResolvingCallback,
        callback: ResolvingCallback | None = None,
    ) -> None:
        """Register a callback fired after all ``resolving`` callbacks ran."""
        self._register_resolution_callback(
            abstract,
            callback,
            global_callbacks=self._global_after_resolving_callbacks,
            callbacks_per_type=self._after_resolving_callbacks,
            method_name="after_resolving",
        )

    def _register_resolution_callback(
        self,
        abstract: Any,
        callback: ResolvingCallback | None,
        *,
        global_callbacks: list[ResolvingCallback],
        callbacks_per_type: dict[Abstract, list[ResolvingCallback]],
        method_name: str,
    ) -> None:
        if callback is None and is_factory_callable(abstract):
            global_callbacks.append(abstract)
            return
        if not callable(callback):
            msg = f"{method_name}() requires a callback."
            raise BindwireInvalidRegistrationError(msg)

        callbacks_per_type.setdefault(self.get_alias(abstract), []).append(callback)

    def _fire_resolving_callbacks(self, abstract: Abstract, instance: Any) -> None:
        self._fire_callback_array(instance, self._global_resolving_callbacks)
        self._fire_callback_array(
            instance,
            self._get_callbacks_for_type(abstract, instance, self._resolving_callbacks),
        )
        self._fire_after_resolving_callbacks(abstract, instance)

    def _fire_after_resolving_callbacks(self, abstract: Abstract, instance: Any) -> None:
        self._fire_callback_array(instance, self._global_after_resolving_callbacks)
        self._fire_callback_array(
            instance,
            self._get_callbacks_for_type(abstract, instance, self._after_resolving_callbacks),
        )

    def _get_callbacks_for_type(
        self,
        abstract: Abstract,
        instance: Any,
        callbacks_per_type: dict[Abstract, list[ResolvingCallback]],
    ) -> list[ResolvingCallback]:
        # Every key is checked: a callback registered for a base class fires for
        # subclasses resolved under a different abstract.
        results: list[ResolvingCallback] = []
        for key, callbacks in list(callbacks_per_type.items()):
            if key == abstract or self._is_instance_of(instance, key):
                results.extend(callbacks)
        return results

    def _is_instance_of(self, instance: Any, key: Abstract) -> bool:
        if not is_runtime_class(key):
            return False
        if is_protocol_class(key) and not getattr(key, "_is_runtime_protocol", False):
            return False
        return isinstance(instance, key)

    def _fire_callback_array(self, instance: Any, callbacks: list[ResolvingCallback]) -> None:
        for callback in list(callbacks):
            callback(instance, self)

    # endregion Callbacks

    # region Resolution
    @overload
    def make(self, abstract: type[T], overrides: Mapping[str, Any] | None = None) -> T: ...

    @overload
    def make(self, abstract: Any, overrides: Mapping[str, Any] | None = None) -> Any: ...

    @_synchronized
    def make(self, abstract: Any, overrides: Mapping[str, Any] | None = None) -> Any:
        """Resolve ``abstract`` into an instance.

        Args:
            abstract: Class, protocol, alias, or string key to resolve.
            overrides: Constructor arguments by parameter name. Non-empty
                overrides always build a fresh instance and never touch the
                shared instance cache.

        Returns:
            The resolved instance, after extenders and callbacks ran.

        Raises:
            BindwireNotInstantiableError: If the effective concrete is an
                abstract class, a protocol, or an unknown name.
            BindwireUnresolvablePrimitiveError: If a primitive constructor
                parameter has no override, contextual value, or default.
            BindwireSelfAliasError: If ``abstract`` is aliased to itself.

        """
        return self._resolve(abstract, overrides)

    def make_with(self, abstract: Any, overrides: Mapping[str, Any]) -> Any:
        """Alias of ``make`` taking overrides positionally."""
        return self.make(abstract, overrides)

    @_synchronized
    def get(self, entry_id: Any) -> Any:
        """Resolve ``entry_id`` as a generic lookup.

        Raises:
            BindwireEntryNotFoundError: If resolution failed and nothing is
                bound under ``entry_id``.
            BindwireBindingResolutionError: If ``entry_id`` is bound but its
                construction failed.

        """
        try:
            return self._resolve(entry_id)
        except BindwireBindingResolutionError as error:
            if self.has(entry_id):
                raise
            raise BindwireEntryNotFoundError(entry_id) from error

    def factory(self, abstract: Any) -> Callable[[], Any]:
        """Return a thunk that makes ``abstract`` each time it is called."""

        def _factory() -> Any:
            return self.make(abstract)

        return _factory

    def _resolve(self, abstract: Any, parameters: Mapping[str, Any] | None = None) -> Any:
        abstract = self.get_alias(abstract)
        self._ensure_settings_binding(abstract)

        needs_contextual_build = bool(parameters) or (
            self._get_contextual_concrete(abstract) is not None
        )

        if abstract in self._instances and not needs_contextual_build:
            return self._instances[abstract]

        with self._parameter_overrides(parameters):
            concrete = self._get_concrete(abstract)

            if isinstance(concrete, LiteralImplementation):
                instance = concrete.value
            elif isinstance(concrete, NamedImplementation):
                instance = self.make(concrete.name)
            else:
                instance = self.build(concrete)

            for extender in self._get_extenders(abstract):
                instance = extender(instance, self)

            if self.is_shared(abstract) and not needs_contextual_build:
                self._instances[abstract] = instance

            self._fire_resolving_callbacks(abstract, instance)
            self._resolved.add(abstract)

        return instance

    def _get_concrete(self, abstract: Abstract) -> Concrete | Implementation | Abstract:
        contextual = self._get_contextual_concrete(abstract)
        if contextual is not None:
            if isinstance(contextual, NamedImplementation) and contextual.name == abstract:
                return abstract
            return contextual

        binding = self._bindings.get(abstract)
        if binding is not None:
            return binding.concrete

        return abstract

    def _get_contextual_concrete(self, abstract: Abstract) -> Implementation | None:
        binding = self._find_in_contextual_bindings(abstract)
        if binding is not None:
            return binding

        for alias in self._abstract_aliases.get(abstract, []):
            binding = self._find_in_contextual_bindings(alias)
            if binding is not None:
                return binding
        return None

    def _find_in_contextual_bindings(self, abstract: Abstract) -> Implementation | None:
        if not self._build_stack:
            return None
        return self._contextual.get(self._build_stack[-1], {}).get(abstract)

    @overload
    def build(self, concrete: type[T]) -> T: ...

    @overload
    def build(self, concrete: Any) -> Any: ...

    @_synchronized
    def build(self, concrete: Any) -> Any:
        """Instantiate ``concrete`` without consulting bindings for it.

        Factories (plain callables or ``FactoryConcrete``) are called with
        ``(container, overrides)`` and their result is returned verbatim.
        Classes are constructed by resolving each constructor parameter.

        Raises:
            BindwireNotInstantiableError: If ``concrete`` cannot be constructed.
            BindwireUnresolvablePrimitiveError: If a primitive parameter has no
                value source.

        """
        if isinstance(concrete, FactoryConcrete | FactoryImplementation):
            return invoke_factory(concrete.factory, self, self._get_last_parameter_override())
        if is_factory_callable(concrete):
            return invoke_factory(concrete, self, self._get_last_parameter_override())
        if isinstance(concrete, NamedConcrete):
            return self.make(concrete.name, self._get_last_parameter_override())
        if isinstance(concrete, SelfBuild):
            concrete = concrete.target

        if not self._dependencies_extractor.is_instantiable(concrete):
            self._not_instantiable(concrete)

        with self._building(concrete):
            arguments, keyword_arguments = self._resolve_dependencies(
                concrete,
                self._dependencies_extractor.describe(concrete),
            )

        return concrete(*arguments, **keyword_arguments)

    def _resolve_dependencies(
        self,
        concrete: type[Any],
        dependencies: tuple[ParameterInfo, ...],
    ) -> tuple[list[Any], dict[str, Any]]:
        arguments: list[Any] = []
        keyword_arguments: dict[str, Any] = {}

        for dependency in dependencies:
            if self._has_parameter_override(dependency):
                value = self._get_parameter_override(dependency)
            elif dependency.dependency is None:
                value = self._resolve_primitive(concrete, dependency)
            else:
                value = self._resolve_class(dependency)

            if dependency.is_positional:
                arguments.append(value)
            else:
                keyword_arguments[dependency.name] = value

        return arguments, keyword_arguments

    def _has_parameter_override(self, dependency: ParameterInfo) -> bool:
        return dependency.name in self._get_last_parameter_override()

    def _get_parameter_override(self, dependency: ParameterInfo) -> Any:
        return self._get_last_parameter_override()[dependency.name]

    def _get_last_parameter_override(self) -> dict[str, Any]:
        if self._with:
            return self._with[-1]
        return {}

    def _resolve_primitive(self, concrete: type[Any], parameter: ParameterInfo) -> Any:
        implementation = self._get_contextual_concrete(f"{PRIMITIVE_PREFIX}{parameter.name}")
        if isinstance(implementation, FactoryImplementation):
            return invoke_factory(implementation.factory, self)
        if isinstance(implementation, LiteralImplementation):
            return implementation.value
        if isinstance(implementation, NamedImplementation):
            return self.make(implementation.name)

        if parameter.has_default:
            return parameter.default

        self._unresolvable_primitive(concrete, parameter)

    def _resolve_class(self, parameter: ParameterInfo) -> Any:
        try:
            return self.make(parameter.dependency)
        except BindwireBindingResolutionError:
            if parameter.is_optional:
                return parameter.default
            raise

    def _not_instantiable(self, concrete: Any) -> NoReturn:
        if self._build_stack:
            previous = ", ".join(_display_name(item) for item in self._build_stack)
            msg = f"Target [{_display_name(concrete)}] is not instantiable while building [{previous}]."
        else:
            msg = f"Target [{_display_name(concrete)}] is not instantiable."
        raise BindwireNotInstantiableError(
            msg,
            target=concrete,
            build_stack=tuple(self._build_stack),
        )

    def _unresolvable_primitive(self, concrete: type[Any], parameter: ParameterInfo) -> NoReturn:
        msg = (
            f"Unresolvable dependency resolving [{parameter.name}] "
            f"in class {_display_name(concrete)}"
        )
        raise BindwireUnresolvablePrimitiveError(
            msg,
            parameter=parameter.name,
            declaring_class=concrete,
        )

    @contextmanager
    def _parameter_overrides(
        self,
        parameters: Mapping[str, Any] | None,
    ) -> Generator[None, None, None]:
        self._with.append(dict(parameters or {}))
        try:
            yield
        finally:
            self._with.pop()

    @contextmanager
    def _building(self, concrete: Any) -> Generator[None, None, None]:
        self._build_stack.append(concrete)
        try:
            yield
        finally:
            self._build_stack.pop()

    def _ensure_settings_binding(self, abstract: Abstract) -> None:
        if abstract in self._bindings or abstract in self._instances:
            return
        if not is_pydantic_settings_subclass(abstract):
            return

        settings_type = cast("type[Any]", abstract)

        def _load_settings(_container: Container, overrides: Mapping[str, Any]) -> Any:
            return settings_type(**overrides)

        logger.debug("Binding settings class %s as shared", _display_name(settings_type))
        self.singleton(settings_type, _load_settings)

    # endregion Resolution

    # region Introspection and Invocation
    def bound(self, abstract: Abstract) -> bool:
        """Return whether ``abstract`` has a binding, an instance, or is an alias."""
        return abstract in self._bindings or abstract in self._instances or self.is_alias(abstract)

    def has(self, entry_id: Abstract) -> bool:
        return self.bound(entry_id)

    def resolved(self, abstract: Abstract) -> bool:
        """Return whether ``abstract`` was resolved or has a shared instance."""
        if self.is_alias(abstract):
            abstract = self.get_alias(abstract)
        return abstract in self._resolved or abstract in self._instances

    def is_shared(self, abstract: Abstract) -> bool:
        if abstract in self._instances:
            return True
        binding = self._bindings.get(abstract)
        return binding is not None and binding.shared

    def get_bindings(self) -> dict[Abstract, Binding]:
        return dict(self._bindings)

    @_synchronized
    def call(
        self,
        callback: Any,
        parameters: Mapping[str, Any] | None = None,
        default_method: str | None = None,
    ) -> Any:
        """Call ``callback``, resolving every parameter not given in ``parameters``.

        Args:
            callback: A callable, a ``"key@method"`` string, an
                ``(instance_or_key, "method")`` pair, or a class/key used with
                ``default_method``.
            parameters: Arguments by parameter name.
            default_method: Method name used when ``callback`` names no method.

        """
        return self._bound_method_caller.call(self, callback, parameters, default_method)

    def wrap(
        self,
        callback: Any,
        parameters: Mapping[str, Any] | None = None,
    ) -> Callable[[], Any]:
        """Return a thunk that calls ``callback`` through ``call``."""

        def _wrapped() -> Any:
            return self.call(callback, parameters)

        return _wrapped

    # endregion Introspection and Invocation

    # region Lifecycle
    def _get_extenders(self, abstract: Abstract) -> list[Extender]:
        return list(self._extenders.get(self.get_alias(abstract), []))

    def _drop_stale_instances(self, abstract: Abstract) -> None:
        # The reverse alias index keeps its entries for ``abstract``.
        self._instances.pop(abstract, None)
        self._aliases.pop(abstract, None)

    @_synchronized
    def forget_instance(self, abstract: Abstract) -> None:
        self._instances.pop(abstract, None)

    @_synchronized
    def forget_instances(self) -> None:
        self._instances.clear()

    @_synchronized
    def flush(self) -> None:
        """Drop bindings, instances, aliases and resolved flags.

        Extenders, tags, contextual bindings and callbacks are kept.
        """
        self._aliases.clear()
        self._resolved.clear()
        self._bindings.clear()
        self._instances.clear()
        self._abstract_aliases.clear()

    @classmethod
    def get_instance(cls) -> Container:
        """Return the process-wide default container, creating it on first access.

        Prefer passing containers explicitly; this accessor is meant for
        top-level bootstrap code.
        """
        from bindwire.container_context import container_context  # noqa: PLC0415

        return container_context.get_current()

    @classmethod
    def set_instance(cls, container: Container | None = None) -> Container | None:
        """Replace (or clear, with ``None``) the process-wide default container."""
        from bindwire.container_context import container_context  # noqa: PLC0415

        return container_context.set_current(container)

    # endregion Lifecycle


__all__ = ["Container", "Extender", "ReboundCallback", "ResolvingCallback"]
