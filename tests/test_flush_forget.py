import pytest

from bindwire.container import Container
from bindwire.exceptions import BindwireNotInstantiableError


class _Queue:
    pass


class _Worker:
    def __init__(self, queue: _Queue) -> None:
        self.queue = queue


def test_forget_instance_rebuilds_shared_binding(container: Container) -> None:
    container.singleton(_Queue)
    first = container.make(_Queue)

    container.forget_instance(_Queue)

    assert container.make(_Queue) is not first
    assert container.bound(_Queue)


def test_forget_instances(container: Container) -> None:
    container.instance("a", object())
    container.instance("b", object())

    container.forget_instances()

    assert container._instances == {}
    assert not container.bound("a")


def test_flush_clears_bindings_and_state(container: Container) -> None:
    container.bind(_Queue)
    container.alias(_Queue, "queue")
    container.instance("config", {})
    container.make(_Queue)

    container.flush()

    assert container.get_bindings() == {}
    assert not container.bound("config")
    assert not container.is_alias("queue")
    assert not container.resolved(_Queue)
    assert container._abstract_aliases == {}


def test_flush_keeps_extenders_and_contextual_rules(container: Container) -> None:
    container.extend(_Queue, lambda instance, container: ("extended", instance))
    container.when(_Worker).needs(_Queue).give(lambda: "contextual")

    container.flush()

    assert container.make(_Queue)[0] == "extended"
    assert container.make(_Worker).queue == ("extended", "contextual")


def test_flush_keeps_callbacks(container: Container) -> None:
    events: list[object] = []
    container.resolving(_Queue, lambda instance, container: events.append(instance))

    container.flush()
    queue = container.make(_Queue)

    assert events == [queue]


def test_flush_forgets_string_bindings(container: Container) -> None:
    container.bind("queue", _Queue)
    container.flush()

    with pytest.raises(BindwireNotInstantiableError):
        container.make("queue")
