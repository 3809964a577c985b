from __future__ import annotations

import datetime
import decimal
import enum
import inspect
import pathlib
import uuid
from dataclasses import dataclass
from typing import Any, TypeGuard

from bindwire._internal.type_checks import is_runtime_class


@dataclass(frozen=True, slots=True)
class ClassDependencyPolicy:
    """Internal policy deciding which annotations name injectable classes.

    Everything else (builtins, value types, enums, unions, generic aliases and
    missing annotations) is a primitive: it is filled from overrides,
    ``"$name"`` contextual bindings, or the parameter default.
    """

    value_base_types: tuple[type[Any], ...] = (
        pathlib.PurePath,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        decimal.Decimal,
        enum.Enum,
    )

    def is_class_dependency(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when a parameter annotation should be resolved through ``make``.

        Args:
            candidate: Annotation with ``Annotated`` and ``Optional`` already stripped.

        """
        if candidate is inspect.Parameter.empty:
            return False
        if not is_runtime_class(candidate):
            return False
        if candidate.__module__ == "builtins":
            return False
        if issubclass(candidate, type):
            return False
        return not issubclass(candidate, self.value_base_types)


__all__ = ["ClassDependencyPolicy"]
