"""
Declared-member enumeration for containers.

Two container shapes are understood:

  • a live Python class — members are its OWN annotations, in declaration
    order.  Names starting with "_" are non-public; ClassVar[T] members are
    static with declared type T.  String annotations are evaluated one by
    one in the class's module; those that fail stay UnresolvedAnnotation.
  • a dumped ClassInfo — members are its `fields`, in dump order, with the
    visibility/lifetime recorded by the dumper.
"""

from __future__ import annotations

import inspect
import re
import sys
import typing
from typing import Any, ClassVar

from custom_extensions.exceptions import ReflectionError

from .models import BindingFlags, ClassInfo, MemberDescriptor, UnresolvedAnnotation

__all__ = ["declared_members"]

_CLASS_VAR_RE = re.compile(r"^\s*(?:typing\.)?ClassVar(?:\[(?P<inner>.*)\])?\s*$")


def declared_members(
    container: type | ClassInfo,
    binding_flags: BindingFlags = BindingFlags.DEFAULT,
) -> list[MemberDescriptor]:
    """
    Return the container's declared members visible under `binding_flags`.

    Raises:
        TypeError: `container` is neither a class nor a ClassInfo.
        ReflectionError: the class's annotations cannot be read at all.
    """
    if isinstance(container, ClassInfo):
        members = [f.to_member() for f in container.fields]
    elif isinstance(container, type):
        members = _class_members(container)
    else:
        raise TypeError(
            f"container must be a class or ClassInfo, got {type(container).__name__}"
        )
    return [m for m in members if m.visible_under(binding_flags)]


def _class_members(cls: type) -> list[MemberDescriptor]:
    try:
        annotations = inspect.get_annotations(cls)
    except Exception as exc:
        raise ReflectionError(
            f"Cannot read annotations of {cls.__qualname__}: {exc}"
        ) from exc

    module = sys.modules.get(cls.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = dict(vars(cls))

    members: list[MemberDescriptor] = []
    for name, hint in annotations.items():
        if isinstance(hint, str):
            declared, is_static = _evaluate(hint, globalns, localns)
        else:
            declared, is_static = _unwrap_class_var(hint)
        members.append(MemberDescriptor(
            name=name,
            declared_type=declared,
            is_public=not name.startswith("_"),
            is_static=is_static,
        ))
    return members


def _evaluate(text: str, globalns: dict, localns: dict) -> tuple[Any, bool]:
    try:
        hint = eval(text, globalns, localns)  # noqa: S307
    except Exception as exc:
        m = _CLASS_VAR_RE.match(text)
        if m:
            inner = m.group("inner")
            if not inner:
                return Any, True
            declared, _ = _evaluate(inner, globalns, localns)
            return declared, True
        return UnresolvedAnnotation(text.strip(), exc), False
    return _unwrap_class_var(hint)


def _unwrap_class_var(hint: Any) -> tuple[Any, bool]:
    if hint is ClassVar:
        return Any, True
    if typing.get_origin(hint) is ClassVar:
        args = typing.get_args(hint)
        return (args[0] if args else Any), True
    return hint, False
