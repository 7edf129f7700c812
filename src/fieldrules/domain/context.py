"""Validation contexts: read-only lookup of sibling field values.

Bounded rules configured with field names resolve their bounds through
:meth:`ValidationContext.resolve_field` at evaluation time. The rules
depend only on that capability; how a field is found (attribute access,
dict lookup, a generated accessor table) is up to the context.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldLookup:
    """Result of resolving a field name."""

    value: Any
    found: bool


MISSING = FieldLookup(value=None, found=False)


class ValidationContext(ABC):
    """Read-only view of the object a validated value belongs to."""

    @property
    @abstractmethod
    def instance(self) -> object:
        """The object (or record) that owns the validated value."""
        ...

    @property
    def object_type(self) -> type:
        return type(self.instance)

    @abstractmethod
    def resolve_field(self, name: str) -> FieldLookup:
        """Look up the value of field *name* on the owning object."""
        ...


class ObjectValidationContext(ValidationContext):
    """Resolves fields as public attributes of an object instance.

    Properties and plain attributes are both visible. Names starting with
    an underscore and bound methods are treated as absent; an attribute that
    merely holds a function or class is a field like any other.
    """

    def __init__(self, instance: object) -> None:
        if instance is None:
            msg = "instance must not be None"
            raise ValueError(msg)
        self._instance = instance

    @property
    def instance(self) -> object:
        return self._instance

    def resolve_field(self, name: str) -> FieldLookup:
        if not name or name.startswith("_"):
            return MISSING
        sentinel = object()
        value = getattr(self._instance, name, sentinel)
        if value is sentinel or inspect.ismethod(value):
            return MISSING
        return FieldLookup(value=value, found=True)


class MappingValidationContext(ValidationContext):
    """Resolves fields as keys of a mapping record (JSON/TOML data)."""

    def __init__(self, record: Mapping[str, Any]) -> None:
        if record is None:
            msg = "record must not be None"
            raise ValueError(msg)
        self._record = record

    @property
    def instance(self) -> Mapping[str, Any]:
        return self._record

    def resolve_field(self, name: str) -> FieldLookup:
        if name not in self._record:
            return MISSING
        return FieldLookup(value=self._record[name], found=True)
