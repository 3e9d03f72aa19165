"""
External (JSON property) names for enum members.

An enum's code identifiers and the names it is published under often
differ.  `json_property` records the published name of selected members
when the enum is defined; `external_name` reads it back and falls back to
the member's own name for everything else::

    @json_property(IN_PROGRESS="in_progress")
    class Status(Enum):
        Active = 1
        IN_PROGRESS = 2

    external_name(Status.IN_PROGRESS)  # "in_progress"
    external_name(Status.Active)       # "Active"
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Callable, TypeVar

from custom_extensions.exceptions import NotFoundError

__all__ = ["json_property", "external_name", "from_external_name"]

E = TypeVar("E", bound=type[Enum])

# Class attribute holding the member-name → external-name table
_TABLE_ATTR = "__json_property_names__"


def json_property(**overrides: str) -> Callable[[E], E]:
    """
    Class decorator attaching external names to enum members.

    Raises:
        ValueError: a key is not the name of a canonical member of the
            decorated enum (aliases are rejected too).
    """
    def decorate(enum_cls: E) -> E:
        # aliases excluded: they share the canonical member's name
        unknown = sorted(set(overrides) - {m.name for m in enum_cls})
        if unknown:
            raise ValueError(
                f"{enum_cls.__name__} has no canonical member(s): {', '.join(unknown)}"
            )
        table = dict(getattr(enum_cls, _TABLE_ATTR, None) or {})
        table.update(overrides)
        setattr(enum_cls, _TABLE_ATTR, table)
        return enum_cls

    return decorate


def external_name(enum_value: Enum) -> str:
    """
    The member's external name, or its literal name when none is recorded.

    A missing table, a missing entry, and an empty or non-string entry all
    resolve to `enum_value.name`.
    """
    table = getattr(type(enum_value), _TABLE_ATTR, None)
    if isinstance(table, Mapping):
        name = table.get(enum_value.name)
        if isinstance(name, str) and name:
            return name
    return enum_value.name


def from_external_name(enum_type: type[Enum], name: str) -> Enum:
    """
    Member of `enum_type` whose external name is `name`.

    Raises:
        NotFoundError: no member maps to `name`.
    """
    for member in enum_type:
        if external_name(member) == name:
            return member
    raise NotFoundError(f"{enum_type.__name__} has no member named {name!r}")
