"""
Field lookup by declared type.

Editor code often has to bind to a field it only knows by its data type
(an unnamed private backing list, the single component reference of a
given type).  These helpers scan a container's declared members and return
the name of the FIRST one whose declared type matches exactly.

Callers are expected to search for a type the container declares at most
once under the given binding flags; with several candidates the first in
declaration order wins.
"""

from __future__ import annotations

import logging
import typing
from typing import Any, Callable

from custom_extensions.exceptions import NotFoundError, ReflectionError

from .introspection import declared_members
from .models import BindingFlags, ClassInfo, UnresolvedAnnotation

__all__ = ["resolve_field_name", "resolve_list_field_name", "list_type_name"]

logger = logging.getLogger(__name__)

# How a list annotation may be spelled when it stays unevaluated
_LIST_SPELLINGS = ("list", "List", "typing.List")


def list_type_name(element_type: str) -> str:
    """Dumped type name of a list of `element_type`, e.g. "List<Item>"."""
    return f"List<{element_type}>"


def resolve_field_name(
    container_type: type | ClassInfo,
    target_type: Any,
    binding_flags: BindingFlags = BindingFlags.DEFAULT,
) -> str:
    """
    Name of the first declared member whose type is exactly `target_type`.

    Args:
        container_type: Class to scan, or a dumped ClassInfo.
        target_type:    Type object (live class) or dumped type name (ClassInfo).
        binding_flags:  Member filter; defaults to non-public instance members.

    Raises:
        NotFoundError: no visible member has that declared type.
        ReflectionError: nothing matched and some annotations could not
            be evaluated, so absence cannot be confirmed.
    """
    _check_dumped_key(container_type, target_type)
    names = _type_names(target_type)
    return _first_match(
        container_type,
        binding_flags,
        lambda declared: (
            declared.text in names
            if isinstance(declared, UnresolvedAnnotation)
            else declared == target_type
        ),
        _type_label(target_type),
    )


def resolve_list_field_name(
    container_type: type | ClassInfo,
    element_type: Any,
    binding_flags: BindingFlags = BindingFlags.DEFAULT,
) -> str:
    """
    Name of the first declared member typed as a list of `element_type`.

    For live classes `list[E]` and `typing.List[E]` both qualify; sequences,
    bare `list` and lists of any other element type do not.  For ClassInfo
    the dumped type must read "List<E>".  Annotations that cannot be evaluated
    (types local to a function) match on the type's name instead.

    Raises:
        NotFoundError: no visible member is a list of that element type.
        ReflectionError: nothing matched and some annotations could not
            be evaluated.
    """
    _check_dumped_key(container_type, element_type)
    if isinstance(container_type, ClassInfo):
        expected = list_type_name(element_type)
        return _first_match(
            container_type,
            binding_flags,
            lambda declared: declared == expected,
            expected,
        )
    return _first_match(
        container_type,
        binding_flags,
        lambda declared: _is_list_of(declared, element_type),
        f"list[{_type_label(element_type)}]",
    )


# ── Internal helpers ──────────────────────────────────────────────────────────

def _first_match(
    container: type | ClassInfo,
    binding_flags: BindingFlags,
    predicate: Callable[[Any], bool],
    wanted: str,
) -> str:
    unresolved = []
    for member in declared_members(container, binding_flags):
        if predicate(member.declared_type):
            logger.debug("Resolved %s field of %s → %s",
                         wanted, _container_label(container), member.name)
            return member.name
        if isinstance(member.declared_type, UnresolvedAnnotation):
            unresolved.append(member)

    if unresolved:
        first = unresolved[0]
        raise ReflectionError(
            f"{_container_label(container)} declares no {wanted} field; cannot "
            f"evaluate annotation(s) of {', '.join(m.name for m in unresolved)}: "
            f"{first.declared_type.error}"
        ) from first.declared_type.error

    raise NotFoundError(
        f"{_container_label(container)} declares no {wanted} field "
        f"visible under {binding_flags}"
    )


def _is_list_of(declared: Any, element_type: Any) -> bool:
    if isinstance(declared, UnresolvedAnnotation):
        return declared.text in {
            f"{origin}[{name}]"
            for origin in _LIST_SPELLINGS
            for name in _type_names(element_type)
        }
    return (
        typing.get_origin(declared) is list
        and typing.get_args(declared) == (element_type,)
    )


def _check_dumped_key(container: Any, key: Any) -> None:
    if isinstance(container, ClassInfo) and not isinstance(key, str):
        raise TypeError(
            f"ClassInfo fields are matched by dumped type name; "
            f"expected str, got {type(key).__name__}"
        )


def _container_label(container: type | ClassInfo) -> str:
    if isinstance(container, ClassInfo):
        return container.full_name
    return getattr(container, "__qualname__", repr(container))


def _type_label(t: Any) -> str:
    if isinstance(t, type):
        return t.__name__
    return str(t)


def _type_names(t: Any) -> set[str]:
    if isinstance(t, type):
        return {t.__name__, t.__qualname__}
    return set()
