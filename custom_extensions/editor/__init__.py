"""
editor — helpers consumed by editor tooling.

Field lookup by declared type, the dumped-structure models it can scan,
and recursive asset-folder creation.
"""

from .folders import create_folder_recursive
from .introspection import declared_members
from .models import BindingFlags, ClassInfo, FieldInfo, MemberDescriptor, UnresolvedAnnotation
from .reflection import list_type_name, resolve_field_name, resolve_list_field_name

__all__ = [
    "create_folder_recursive",
    "declared_members",
    "BindingFlags",
    "ClassInfo",
    "FieldInfo",
    "MemberDescriptor",
    "UnresolvedAnnotation",
    "list_type_name",
    "resolve_field_name",
    "resolve_list_field_name",
]
