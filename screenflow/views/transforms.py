"""
Visual property holders shared between views, animations and the renderer.
"""

from dataclasses import dataclass
from typing import Tuple

Vector2 = Tuple[float, float]
Vector3 = Tuple[float, float, float]


@dataclass(eq=False)
class CanvasGroup:
    """Opacity and input flags of a view."""
    alpha: float = 1.0
    interactable: bool = True
    blocks_input: bool = True


@dataclass(eq=False)
class RectTransform:
    """
    Placement of a view relative to its parent.

    ``size`` is written by the layout/host layer and only read by the runtime.
    """
    anchor_min: Vector2 = (0.0, 0.0)
    anchor_max: Vector2 = (1.0, 1.0)
    anchored_position: Vector2 = (0.0, 0.0)
    local_position: Vector3 = (0.0, 0.0, 0.0)
    local_scale: Vector3 = (1.0, 1.0, 1.0)
    offset_min: Vector2 = (0.0, 0.0)
    offset_max: Vector2 = (0.0, 0.0)
    size: Vector2 = (0.0, 0.0)

    def reset_to_full_rect(self) -> None:
        """
        Stretch to the anchors: zero position and offsets, unit scale.

        The anchors themselves are preserved.
        """
        anchor_min, anchor_max = self.anchor_min, self.anchor_max
        self.anchored_position = (0.0, 0.0)
        self.local_scale = (1.0, 1.0, 1.0)
        self.local_position = (0.0, 0.0, 0.0)
        self.anchor_min, self.anchor_max = anchor_min, anchor_max
        self.offset_min = (0.0, 0.0)
        self.offset_max = (0.0, 0.0)
