"""Value receptors written by the menu and read by hosts."""

from skillring.ui.nodes import (
    CanvasGroup,
    CanvasReceptor,
    ImageNode,
    ImageReceptor,
    LabelReceptor,
    RectNode,
    TextLabel,
    TransformReceptor,
)

__all__ = [
    "TransformReceptor",
    "CanvasReceptor",
    "LabelReceptor",
    "ImageReceptor",
    "RectNode",
    "CanvasGroup",
    "TextLabel",
    "ImageNode",
]
