"""Show/hide toggles for canvas groups (alpha + interaction + raycast blocking)."""

from dataclasses import dataclass
from typing import Protocol

__all__ = ["CanvasGroupLike", "CanvasGroup", "hide", "show"]


class CanvasGroupLike(Protocol):
    alpha:           float
    interactable:    bool
    blocks_raycasts: bool


@dataclass
class CanvasGroup:
    """Plain in-memory canvas group state."""
    alpha:           float = 1.0
    interactable:    bool  = True
    blocks_raycasts: bool  = True


def hide(group: CanvasGroupLike) -> None:
    """Make the group invisible and let input pass through it."""
    group.alpha = 0.0
    group.interactable = False
    group.blocks_raycasts = False


def show(group: CanvasGroupLike) -> None:
    """Make the group fully opaque and interactive."""
    group.alpha = 1.0
    group.interactable = True
    group.blocks_raycasts = True
