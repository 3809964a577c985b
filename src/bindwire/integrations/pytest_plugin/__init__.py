from bindwire.integrations.pytest_plugin.plugin import bindwire_container, bindwire_context

__all__ = ["bindwire_container", "bindwire_context"]
