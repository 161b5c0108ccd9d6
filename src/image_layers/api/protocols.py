"""
Protocol definitions for type hints to avoid circular imports.

:py:class:`LayerProtocol` is the capability contract every layer fulfills:
render itself to a PIL image, report its bounds, and carry a horizontal and a
vertical alignment preference. :py:class:`GroupProtocol` adds the container
interface of layers that hold children.
"""

from typing import Iterator, Optional, Protocol, Union, runtime_checkable

from PIL import Image

from image_layers.constants import Alignment, VerticalAlignment
from image_layers.geometry import Rectangle


@runtime_checkable
class LayerProtocol(Protocol):
    """
    Protocol defining the Layer interface for type checking.

    Anything that implements these members can be placed inside a group and
    passed to the output functions in :py:mod:`image_layers.api.pil_io`.
    """

    def render(self) -> Image.Image:
        """Render the layer to an RGBA image of the layer's own size."""
        ...

    @property
    def rect(self) -> Rectangle:
        """Bounds of the layer in its parent's coordinate space."""
        ...

    @property
    def alignment(self) -> Alignment:
        """Horizontal alignment preference."""
        ...

    @alignment.setter
    def alignment(self, value: Union[Alignment, int, str]) -> None: ...

    @property
    def vertical_alignment(self) -> VerticalAlignment:
        """Vertical alignment preference."""
        ...

    @vertical_alignment.setter
    def vertical_alignment(
        self, value: Union[VerticalAlignment, int, str]
    ) -> None: ...


class GroupProtocol(LayerProtocol, Protocol):
    """
    Protocol defining the interface of layers with children.
    """

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[LayerProtocol]: ...

    def __getitem__(self, key: int) -> LayerProtocol: ...

    def __contains__(self, item: object) -> bool: ...

    def index(self, layer: LayerProtocol) -> int: ...

    def remove(self, layer: LayerProtocol) -> "GroupProtocol": ...

    @property
    def parent(self) -> Optional["GroupProtocol"]:
        """Parent of this group, or None at the root."""
        ...
