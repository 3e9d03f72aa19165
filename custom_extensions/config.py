"""Runtime configuration for the editor-side helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

__all__ = ["ExtensionsConfig"]

_ENV_PROJECT_ROOT = "CUSTOM_EXT_PROJECT_ROOT"
_ENV_ASSETS_ROOT  = "CUSTOM_EXT_ASSETS_ROOT"


@dataclass
class ExtensionsConfig:
    """
    Where the project's asset tree lives.

    project_root  — directory that contains the assets folder
    assets_root   — name of the top-level asset folder ("Assets" in Unity)
    """
    project_root: str = "."
    assets_root:  str = "Assets"

    @classmethod
    def from_env(cls) -> "ExtensionsConfig":
        """Build a config, letting CUSTOM_EXT_* env vars override the defaults."""
        defaults = cls()
        return cls(
            project_root=os.environ.get(_ENV_PROJECT_ROOT) or defaults.project_root,
            assets_root=os.environ.get(_ENV_ASSETS_ROOT) or defaults.assets_root,
        )

    @property
    def project_path(self) -> Path:
        return Path(self.project_root).expanduser()
