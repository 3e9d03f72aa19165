"""
Project-wide custom exception hierarchy.
All modules raise subclasses of ExtensionsBaseError — never bare Exception.
"""

__all__ = [
    "ExtensionsBaseError",
    "ReflectionError",
    "NotFoundError",
    "StructureFormatError",
    "AssetFolderError",
]


class ExtensionsBaseError(Exception):
    """Root exception for all custom-extensions errors."""


# ── Reflection ────────────────────────────────────────────────────────────────

class ReflectionError(ExtensionsBaseError):
    """Raised when a container's declared members cannot be enumerated."""


class NotFoundError(ReflectionError, LookupError):
    """Raised when no declared member (or enum member) matches the lookup key."""


# ── Dumped structures ─────────────────────────────────────────────────────────

class StructureFormatError(ExtensionsBaseError):
    """Raised when a dumped class or field record is missing keys or malformed."""


# ── Asset folders ─────────────────────────────────────────────────────────────

class AssetFolderError(ExtensionsBaseError):
    """Raised when an asset folder path is invalid or blocked by a file."""
