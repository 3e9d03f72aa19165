"""
Data models for the editor module.

Key concepts
────────────
BindingFlags      — visibility/lifetime filter applied to declared members
MemberDescriptor  — (name, declared type, visibility, lifetime) of ONE member
FieldInfo         — one field of a dumped class, type kept as its dumped name
ClassInfo         — one dumped class; a container that cannot be introspected live
UnresolvedAnnotation — annotation text the host could not evaluate
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag
from typing import Any

from custom_extensions.exceptions import StructureFormatError

__all__ = [
    "BindingFlags",
    "MemberDescriptor",
    "FieldInfo",
    "ClassInfo",
    "UnresolvedAnnotation",
]


class BindingFlags(Flag):
    """
    Selects which declared members a scan sees.

    A member is visible when both its visibility bit (PUBLIC / NON_PUBLIC)
    and its lifetime bit (INSTANCE / STATIC) are present in the flags.
    Values mirror the .NET BindingFlags enum.
    """
    INSTANCE   = 4
    STATIC     = 8
    PUBLIC     = 16
    NON_PUBLIC = 32

    DEFAULT    = NON_PUBLIC | INSTANCE


@dataclass(frozen=True)
class MemberDescriptor:
    """
    One declared storage member of a container.

    `declared_type` is a type object for live classes (or an
    UnresolvedAnnotation when its text cannot be evaluated) and the dumped
    type-name string for ClassInfo containers.
    """
    name:          str
    declared_type: Any
    is_public:     bool = False
    is_static:     bool = False

    def visible_under(self, flags: BindingFlags) -> bool:
        visibility = BindingFlags.PUBLIC if self.is_public else BindingFlags.NON_PUBLIC
        lifetime   = BindingFlags.STATIC if self.is_static else BindingFlags.INSTANCE
        return bool(flags & visibility) and bool(flags & lifetime)


@dataclass(frozen=True)
class UnresolvedAnnotation:
    """
    A string annotation that could not be evaluated in the class's module.

    Happens for types local to a function when the defining module uses
    postponed evaluation.  Matched against a target by type name only.
    """
    text:  str
    error: Exception | None = field(default=None, compare=False, repr=False)


# ── Dumped structures ─────────────────────────────────────────────────────────

@dataclass
class FieldInfo:
    name:      str
    type:      str     # "int" | "float" | "string" | "List<Item>" | ...
    offset:    str = ""    # hex string e.g. "0x58", or "" if unknown
    is_static: bool = False
    is_public: bool = False

    def to_dict(self) -> dict:
        d = {"name": self.name, "type": self.type, "offset": self.offset}
        if self.is_static:
            d["static"] = True
        if self.is_public:
            d["public"] = True
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "FieldInfo":
        _require(data, ("name", "type"), "field")
        return cls(
            name=str(data["name"]),
            type=str(data["type"]),
            offset=str(data.get("offset", "")),
            is_static=bool(data.get("static", False)),
            is_public=bool(data.get("public", False)),
        )

    def to_member(self) -> MemberDescriptor:
        return MemberDescriptor(
            name=self.name,
            declared_type=self.type,
            is_public=self.is_public,
            is_static=self.is_static,
        )


@dataclass
class ClassInfo:
    name:         str
    namespace:    str = ""
    fields:       list[FieldInfo] = field(default_factory=list)
    parent_class: str | None = None

    def to_dict(self) -> dict:
        d: dict = {"name": self.name, "namespace": self.namespace}
        if self.parent_class:
            d["parent"] = self.parent_class
        d["fields"] = [f.to_dict() for f in self.fields]
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "ClassInfo":
        _require(data, ("name",), "class")
        raw_fields = data.get("fields", [])
        if not isinstance(raw_fields, list):
            raise StructureFormatError(
                f"class {data['name']!r}: 'fields' must be a list, "
                f"got {type(raw_fields).__name__}"
            )
        return cls(
            name=str(data["name"]),
            namespace=str(data.get("namespace", "")),
            fields=[FieldInfo.from_dict(f) for f in raw_fields],
            parent_class=data.get("parent") or None,
        )

    @property
    def full_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name


def _require(data: Any, keys: tuple[str, ...], what: str) -> None:
    if not isinstance(data, dict):
        raise StructureFormatError(f"{what} must be an object, got {type(data).__name__}")
    missing = [k for k in keys if k not in data]
    if missing:
        raise StructureFormatError(f"{what} is missing required key(s): {', '.join(missing)}")
