"""Delivery of recognized shapes to the host's shape store.

The emitter performs no geometry. It applies the default styling and hands
the shape to the store exactly once.
"""

from typing import Protocol

from shapesnap.config import StyleConfig
from shapesnap.domain import ShapeDescriptor, StyledShape


class ShapeStore(Protocol):
    """Host collaborator that owns rendering, selection and persistence."""

    def add_shape(self, shape: StyledShape) -> None: ...


class InMemoryShapeStore:
    """Shape store that keeps emitted shapes in a list."""

    def __init__(self) -> None:
        self.shapes: list[StyledShape] = []

    def add_shape(self, shape: StyledShape) -> None:
        self.shapes.append(shape)

    def clear(self) -> None:
        self.shapes.clear()

    def __len__(self) -> int:
        return len(self.shapes)


class ShapeEmitter:
    """Styles shapes and delivers them to a store."""

    def __init__(self, store: ShapeStore, style: StyleConfig | None = None) -> None:
        """Initialize the emitter.

        Args:
            store: Destination for emitted shapes
            style: Default styling (defaults when omitted)
        """
        self.store = store
        self.style = style or StyleConfig()

    def emit(self, shape: ShapeDescriptor) -> StyledShape:
        """Apply default styling and deliver the shape.

        Args:
            shape: Recognized shape or polyline fallback

        Returns:
            The styled shape handed to the store
        """
        styled = StyledShape(
            shape=shape,
            stroke=self.style.stroke,
            fill=self.style.fill,
            stroke_width=self.style.stroke_width,
        )
        self.store.add_shape(styled)
        return styled
