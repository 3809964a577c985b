from __future__ import annotations

import importlib
import warnings
from typing import Any

_PYDANTIC_V1_MODULES = ("pydantic.v1", "pydantic")
_PYDANTIC_V1_WARNING = (
    r"Core Pydantic V1 functionality isn't compatible with Python 3\.14 or greater\."
)


def _import_settings_base(module_name: str) -> type[Any] | None:
    try:
        module = importlib.import_module(module_name)
        base = getattr(module, "BaseSettings", None)
    except ImportError:
        return None
    return base if isinstance(base, type) else None


def _import_pydantic_v1_settings_base() -> type[Any] | None:
    # pydantic 2 exposes v1 under ``pydantic.v1``; pydantic 1 at the top level.
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=_PYDANTIC_V1_WARNING, category=UserWarning)
        for module_name in _PYDANTIC_V1_MODULES:
            base = _import_settings_base(module_name)
            if base is not None:
                return base
    return None


def _collect_settings_bases() -> tuple[type[Any], ...]:
    bases: list[type[Any]] = []
    for base in (_import_settings_base("pydantic_settings"), _import_pydantic_v1_settings_base()):
        if base is not None and base not in bases:
            bases.append(base)
    return tuple(bases)


SETTINGS_BASES: tuple[type[Any], ...] = _collect_settings_bases()
"""``BaseSettings`` classes found in the installed pydantic distributions."""


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return true when candidate is a concrete settings class the container may load."""
    if not isinstance(candidate, type) or candidate in SETTINGS_BASES:
        return False
    return any(issubclass(candidate, base) for base in SETTINGS_BASES)


__all__ = ["SETTINGS_BASES", "is_pydantic_settings_subclass"]
