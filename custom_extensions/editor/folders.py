"""
Recursive folder creation inside the project's asset tree.

Asset paths are written the way the engine's asset database writes them:
forward slashes, rooted at the assets folder, e.g. "Assets/Art/Textures".
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Optional

from custom_extensions.config import ExtensionsConfig
from custom_extensions.exceptions import AssetFolderError

__all__ = ["create_folder_recursive"]

logger = logging.getLogger(__name__)


def create_folder_recursive(
    asset_path: str,
    config: Optional[ExtensionsConfig] = None,
) -> Path:
    """
    Create every missing folder along `asset_path` and return the last one.

    Existing folders are left untouched, so calling this twice is harmless.

    Raises:
        AssetFolderError: the path is empty, escapes the asset tree, does
            not start with the assets root, or a segment is an existing file.
    """
    config = config or ExtensionsConfig.from_env()
    parts = _split_asset_path(asset_path, config.assets_root)

    current = config.project_path
    for part in parts:
        current = current / part
        if current.is_dir():
            continue
        try:
            # exist_ok: another caller may create the same folder concurrently
            current.mkdir(exist_ok=True)
        except FileExistsError as exc:
            raise AssetFolderError(
                f"Cannot create folder, a file is in the way: {current}"
            ) from exc
        except OSError as exc:
            raise AssetFolderError(f"Cannot create folder {current}: {exc}") from exc
        logger.info("Created asset folder: %s", current)

    return current


def _split_asset_path(asset_path: str, assets_root: str) -> tuple[str, ...]:
    normalised = asset_path.replace("\\", "/").strip()
    if not normalised.strip("/"):
        raise AssetFolderError("Asset path is empty")
    if normalised.startswith("/") or ":" in normalised:
        raise AssetFolderError(f"Asset path must be relative to the project: {asset_path!r}")

    parts = PurePosixPath(normalised).parts
    if any(p in (".", "..") for p in parts):
        raise AssetFolderError(f"Asset path must not contain '.' or '..': {asset_path!r}")
    if parts[0] != assets_root:
        raise AssetFolderError(
            f"Asset path must start with {assets_root!r}: {asset_path!r}"
        )
    return parts
