from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from bindwire.providers import Abstract, FactoryImplementation, LiteralImplementation

if TYPE_CHECKING:
    from typing_extensions import Self

    from bindwire.container import Container


class ContextualBindingBuilder:
    """Fluent builder for "when building X, and X needs Y, give Z" rules.

    Obtained from ``Container.when``. The builder only remembers the pending
    concrete names and the targeted dependency; ``give`` writes one entry per
    concrete into the container's contextual table.

    Examples:
        .. code-block:: python

            container.when(ReportMailer).needs(Transport).give(SmtpTransport)
            container.when([Importer, Exporter]).needs("$chunk_size").give(500)

    """

    def __init__(self, container: Container, concrete: Sequence[Abstract]) -> None:
        self._container = container
        self._concrete = tuple(concrete)
        self._needs: Abstract | None = None

    def needs(self, abstract: Abstract) -> Self:
        """Define the dependency the rule targets.

        Args:
            abstract: Class or key of the dependency, or ``"$<parameter>"`` for
                a primitive constructor parameter.

        """
        self._needs = abstract
        return self

    def give(self, implementation: Any) -> None:
        """Define the implementation used for the targeted dependency.

        Calling ``give`` again writes the entries again, replacing the previous
        implementation.

        Args:
            implementation: A class or key to make, a factory callable receiving
                ``(container, overrides)``, or a plain value.

        """
        for concrete in self._concrete:
            self._container.add_contextual_binding(concrete, self._needs, implementation)

    def give_value(self, value: Any) -> None:
        """Give ``value`` verbatim, even when it is a class or a callable."""
        self.give(LiteralImplementation(value))

    def give_tagged(self, tag: str) -> None:
        """Give the list of every abstract tagged ``tag``, resolved on each build."""
        self.give(FactoryImplementation(lambda container: container.tagged(tag)))

    @property
    def concrete(self) -> tuple[Abstract, ...]:
        return self._concrete


__all__ = ["ContextualBindingBuilder"]
