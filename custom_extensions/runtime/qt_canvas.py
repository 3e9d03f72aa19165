"""
QtCanvasGroup — canvas-group view of a PyQt6 widget.

Lets `canvas.hide` / `canvas.show` drive Qt tool windows:

    alpha            → opacity of a QGraphicsOpacityEffect on the widget
    interactable     → QWidget.setEnabled
    blocks_raycasts  → NOT WA_TransparentForMouseEvents

Imported explicitly (not re-exported by the package) so that the rest of
custom_extensions works without a Qt installation.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QGraphicsOpacityEffect, QWidget

__all__ = ["QtCanvasGroup"]


class QtCanvasGroup:
    """Adapter exposing alpha / interactable / blocks_raycasts on a QWidget."""

    def __init__(self, widget: QWidget) -> None:
        self._widget = widget
        effect = widget.graphicsEffect()
        if not isinstance(effect, QGraphicsOpacityEffect):
            effect = QGraphicsOpacityEffect(widget)
            effect.setOpacity(1.0)
            widget.setGraphicsEffect(effect)
        self._effect = effect

    @property
    def widget(self) -> QWidget:
        return self._widget

    @property
    def alpha(self) -> float:
        return self._effect.opacity()

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._effect.setOpacity(max(0.0, min(1.0, float(value))))

    @property
    def interactable(self) -> bool:
        return self._widget.isEnabled()

    @interactable.setter
    def interactable(self, value: bool) -> None:
        self._widget.setEnabled(bool(value))

    @property
    def blocks_raycasts(self) -> bool:
        return not self._widget.testAttribute(
            Qt.WidgetAttribute.WA_TransparentForMouseEvents
        )

    @blocks_raycasts.setter
    def blocks_raycasts(self, value: bool) -> None:
        self._widget.setAttribute(
            Qt.WidgetAttribute.WA_TransparentForMouseEvents, not value
        )
