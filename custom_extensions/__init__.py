"""
custom_extensions — small extension utilities for game-engine tooling.

Public API
──────────
resolve_field_name / resolve_list_field_name  — field lookup by declared type
json_property / external_name                 — external names for enum members
editor                                        — reflection, dumped structures, asset folders
runtime                                       — enum names, canvas toggles, string helpers
"""

from custom_extensions.editor.reflection import resolve_field_name, resolve_list_field_name
from custom_extensions.exceptions import NotFoundError
from custom_extensions.runtime.json_names import external_name, json_property

__version__ = "0.1.0"

__all__ = [
    "resolve_field_name",
    "resolve_list_field_name",
    "external_name",
    "json_property",
    "NotFoundError",
]
