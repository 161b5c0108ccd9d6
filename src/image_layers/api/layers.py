"""
Layer module.

This module implements the layer types that make up a composition tree.

Key classes:

- :py:class:`Layer`: Base class holding position, alignment and visibility
- :py:class:`ColorLayer`: Layer filled with a single color
- :py:class:`ImageLayer`: Layer backed by a PIL image
- :py:class:`Group`: Layer that composes its children

Every layer has an ``alignment`` and a ``vertical_alignment``. When a group
renders, each child is placed with :py:func:`~image_layers.align.compute_rect`
using the group's bounds as the parent and the child's bounds as the source.
Children are drawn in insertion order, so the last child ends up on top.

Example usage::

    from image_layers import Alignment, ColorLayer, Group, VerticalAlignment

    root = Group((200, 200), background=(255, 255, 255, 255))
    box = ColorLayer((50, 50), color=(255, 0, 0, 255))
    box.alignment = Alignment.CENTER
    box.vertical_alignment = VerticalAlignment.MIDDLE
    root.append(box)

    image = root.render()
    image.save("box.png")
"""

import logging
import os
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    Optional,
    Sequence,
    TypeVar,
    Union,
)

try:
    from typing import Self  # type: ignore[attr-defined]
except ImportError:
    from typing_extensions import Self

import numpy as np
from PIL import Image

from image_layers.api import composer
from image_layers.api.protocols import LayerProtocol
from image_layers.constants import Alignment, VerticalAlignment
from image_layers.geometry import Point, Rectangle, Size

logger = logging.getLogger(__name__)

PointLike = Union[Point, Sequence[int]]
SizeLike = Union[Size, Sequence[int]]
ColorLike = Union[str, int, tuple[int, ...]]

E = TypeVar("E", Alignment, VerticalAlignment)


def _to_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected a pair of integers, got {len(value)} elements")
    return Point(*value)


def _to_size(value: SizeLike) -> Size:
    if isinstance(value, Size):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected a pair of integers, got {len(value)} elements")
    return Size(*value)


def _to_enum(enum_type: type[E], value: Union[E, int, str]) -> E:
    if isinstance(value, str):
        try:
            return enum_type[value.upper()]
        except KeyError:
            raise ValueError(
                f"{value!r} is not a valid {enum_type.__name__} name"
            ) from None
    return enum_type(value)


class Layer(LayerProtocol):
    """
    Base class of all layers.

    A layer is positioned by its ``offset`` in the parent's coordinate space,
    which only matters for the ``DEFAULT`` alignments; any other alignment
    replaces the offset on that axis when the parent composes its children.
    """

    def __init__(
        self,
        offset: PointLike = Point(0, 0),
        name: str = "Layer",
        alignment: Union[Alignment, int, str] = Alignment.DEFAULT,
        vertical_alignment: Union[VerticalAlignment, int, str] = (
            VerticalAlignment.DEFAULT
        ),
        visible: bool = True,
    ):
        self._parent: Optional["Group"] = None
        self._offset = _to_point(offset)
        self._name = str(name)
        self._alignment = _to_enum(Alignment, alignment)
        self._vertical_alignment = _to_enum(VerticalAlignment, vertical_alignment)
        self._visible = bool(visible)

    @property
    def name(self) -> str:
        """
        Layer name. Writable.

        :return: `str`
        """
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = str(value)

    @property
    def kind(self) -> str:
        """
        Kind of this layer, such as group, color, or image. Class name
        without `layer` suffix.

        :return: `str`
        """
        return self.__class__.__name__.lower().replace("layer", "")

    @property
    def parent(self) -> Optional["Group"]:
        """Parent of this layer."""
        return self._parent

    @property
    def visible(self) -> bool:
        """
        Layer visibility. Doesn't take group visibility in account. Writable.

        :return: `bool`
        """
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = bool(value)

    def is_visible(self) -> bool:
        """
        Layer visibility. Takes group visibility in account.

        :return: `bool`
        """
        if not self.visible:
            return False
        elif self.parent is not None:
            return self.parent.is_visible()
        return True

    def is_group(self) -> bool:
        """
        Return True if the layer is a group.

        :return: `bool`
        """
        return False

    @property
    def alignment(self) -> Alignment:
        """
        Horizontal alignment inside the parent. Writable; accepts an
        :py:class:`~image_layers.constants.Alignment`, its integer value or
        its name.

        :return: :py:class:`~image_layers.constants.Alignment`
        """
        return self._alignment

    @alignment.setter
    def alignment(self, value: Union[Alignment, int, str]) -> None:
        self._alignment = _to_enum(Alignment, value)

    @property
    def vertical_alignment(self) -> VerticalAlignment:
        """
        Vertical alignment inside the parent. Writable; accepts a
        :py:class:`~image_layers.constants.VerticalAlignment`, its integer
        value or its name.

        :return: :py:class:`~image_layers.constants.VerticalAlignment`
        """
        return self._vertical_alignment

    @vertical_alignment.setter
    def vertical_alignment(self, value: Union[VerticalAlignment, int, str]) -> None:
        self._vertical_alignment = _to_enum(VerticalAlignment, value)

    @property
    def size(self) -> Size:
        """
        (width, height) of the layer.

        :return: :py:class:`~image_layers.geometry.Size`
        """
        raise NotImplementedError

    @property
    def offset(self) -> Point:
        """
        (left, top) of the layer in the parent's coordinates. Writable.

        :return: :py:class:`~image_layers.geometry.Point`
        """
        return self._offset

    @offset.setter
    def offset(self, value: PointLike) -> None:
        self._offset = _to_point(value)

    @property
    def rect(self) -> Rectangle:
        """
        Bounds of the layer in the parent's coordinate space.

        :return: :py:class:`~image_layers.geometry.Rectangle`
        """
        return Rectangle.from_size(self.size, self._offset)

    @property
    def left(self) -> int:
        """
        Left coordinate. Writable.

        :return: int
        """
        return self._offset.x

    @left.setter
    def left(self, value: int) -> None:
        self._offset = Point(value, self._offset.y)

    @property
    def top(self) -> int:
        """
        Top coordinate. Writable.

        :return: int
        """
        return self._offset.y

    @top.setter
    def top(self, value: int) -> None:
        self._offset = Point(self._offset.x, value)

    @property
    def right(self) -> int:
        """Right coordinate."""
        return self.rect.right

    @property
    def bottom(self) -> int:
        """Bottom coordinate."""
        return self.rect.bottom

    @property
    def width(self) -> int:
        """Width of the layer."""
        return self.size.width

    @property
    def height(self) -> int:
        """Height of the layer."""
        return self.size.height

    @property
    def bbox(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple."""
        return self.rect.bbox

    def render(self) -> Image.Image:
        """
        Render the layer.

        :return: :py:class:`PIL.Image.Image` in RGBA mode with the layer's size.
        """
        raise NotImplementedError

    def numpy(self, channel: Optional[str] = None) -> np.ndarray:
        """
        Get NumPy array of the rendered layer.

        :param channel: Which channel to return, can be 'color', 'alpha', or
            None for 'color+alpha'.
        :return: :py:class:`numpy.ndarray` of shape (height, width, channels)
            in [0.0, 1.0] range.
        """
        from image_layers.api import numpy_io

        return numpy_io.get_array(self, channel)

    def _repr_extra(self) -> str:
        return ""

    def __repr__(self) -> str:
        has_size = self.width > 0 and self.height > 0
        return "%s(%r%s%s%s%s%s)" % (
            self.__class__.__name__,
            self.name,
            " size=%dx%d" % (self.width, self.height) if has_size else "",
            " offset=%d,%d" % (self.left, self.top) if self._offset != Point() else "",
            " align=%s,%s"
            % (self.alignment.name.lower(), self.vertical_alignment.name.lower())
            if self.alignment or self.vertical_alignment
            else "",
            self._repr_extra(),
            " invisible" if not self.visible else "",
        )


class ColorLayer(Layer):
    """
    Layer uniformly filled with a single color.

    Example::

        layer = ColorLayer((64, 32), color=(0, 128, 255, 255))
        assert layer.kind == "color"
    """

    def __init__(
        self,
        size: SizeLike,
        color: ColorLike = (0, 0, 0, 255),
        offset: PointLike = Point(0, 0),
        name: str = "Color",
        **kwargs: Any,
    ):
        super().__init__(offset=offset, name=name, **kwargs)
        self._size = _to_size(size)
        self._color = color

    @property
    def size(self) -> Size:
        """(width, height) of the layer. Writable."""
        return self._size

    @size.setter
    def size(self, value: SizeLike) -> None:
        self._size = _to_size(value)

    @property
    def color(self) -> ColorLike:
        """
        Fill color, as accepted by :py:func:`PIL.Image.new` in RGBA mode.
        Writable.
        """
        return self._color

    @color.setter
    def color(self, value: ColorLike) -> None:
        self._color = value

    def render(self) -> Image.Image:
        return Image.new(
            "RGBA", (max(self.width, 0), max(self.height, 0)), color=self._color
        )


class ImageLayer(Layer):
    """
    Layer backed by a :py:class:`PIL.Image.Image`. The layer size is the
    image size.

    Example::

        layer = ImageLayer.open("logo.png", alignment="right")
        assert layer.kind == "image"
    """

    def __init__(
        self,
        image: Image.Image,
        offset: PointLike = Point(0, 0),
        name: str = "Image",
        **kwargs: Any,
    ):
        super().__init__(offset=offset, name=name, **kwargs)
        self.image = image

    @classmethod
    def open(
        cls, fp: Union[str, bytes, "os.PathLike[str]", Any], **kwargs: Any
    ) -> "ImageLayer":
        """
        Create a layer from an image file.

        :param fp: filename or file-like object.
        :param kwargs: passed to :py:class:`ImageLayer`.
        :return: :py:class:`ImageLayer`
        """
        with Image.open(fp) as image:
            image.load()
            if "name" not in kwargs and isinstance(fp, (str, os.PathLike)):
                kwargs["name"] = os.path.basename(os.fspath(fp))
            return cls(image.copy(), **kwargs)

    @property
    def image(self) -> Image.Image:
        """Source image. Writable."""
        return self._image

    @image.setter
    def image(self, value: Image.Image) -> None:
        if not isinstance(value, Image.Image):
            raise TypeError(f"Expected PIL Image, got {type(value).__name__}")
        self._image = value

    @property
    def size(self) -> Size:
        return Size(*self._image.size)

    def render(self) -> Image.Image:
        if self._image.mode == "RGBA":
            return self._image.copy()
        return self._image.convert("RGBA")


class Group(Layer):
    """
    Layer that composes a list of children.

    The group has an explicit size; children are positioned inside it by
    their alignment and clipped to its bounds. The container API follows
    :py:class:`list`::

        group = Group((320, 240))
        group.append(ColorLayer((320, 240), color="white"))
        group.extend([title, logo])
        for layer in group:
            print(layer)
    """

    def __init__(
        self,
        size: SizeLike,
        layers: Iterable[Layer] = (),
        offset: PointLike = Point(0, 0),
        name: str = "Group",
        background: Optional[ColorLike] = None,
        **kwargs: Any,
    ):
        super().__init__(offset=offset, name=name, **kwargs)
        self._size = _to_size(size)
        self._background = background
        self._layers: list[Layer] = []
        self.extend(layers)

    @property
    def size(self) -> Size:
        """(width, height) of the group. Writable."""
        return self._size

    @size.setter
    def size(self, value: SizeLike) -> None:
        self._size = _to_size(value)

    @property
    def background(self) -> Optional[ColorLike]:
        """Canvas fill color, or None for transparent. Writable."""
        return self._background

    @background.setter
    def background(self, value: Optional[ColorLike]) -> None:
        self._background = value

    def is_group(self) -> bool:
        return True

    def __len__(self) -> int:
        return self._layers.__len__()

    def __iter__(self) -> Iterator[Layer]:
        return self._layers.__iter__()

    def __reversed__(self) -> Iterator[Layer]:
        return self._layers.__reversed__()

    def __contains__(self, item: object) -> bool:
        return item in self._layers

    def __getitem__(self, key: int) -> Layer:
        return self._layers.__getitem__(key)

    def __delitem__(self, key: int) -> None:
        self.remove(self._layers[key])

    def append(self, layer: Layer) -> None:
        """
        Add a layer to the end (top) of the group.

        A layer that already belongs to a group is moved.

        :param layer: The layer to add.
        :raises TypeError: If the provided object is not a Layer instance.
        :raises ValueError: If attempting to add a group to itself.
        """
        self.extend([layer])

    def extend(self, layers: Iterable[Layer]) -> None:
        """
        Add a list of layers to the end (top) of the group.

        :param layers: The layers to add.
        :raises TypeError: If the provided object is not a Layer instance.
        :raises ValueError: If attempting to add a group to itself.
        """
        layers = list(layers)
        self._check_insertion(layers)
        for layer in layers:
            self._detach(layer)
            self._layers.append(layer)
            layer._parent = self

    def insert(self, index: int, layer: Layer) -> None:
        """
        Insert the given layer at the specified index.

        :param index: The index to insert the layer at.
        :param layer: The layer to insert.
        :raises TypeError: If the provided object is not a Layer instance.
        :raises ValueError: If attempting to add a group to itself.
        """
        self._check_insertion([layer])
        self._detach(layer)
        self._layers.insert(index, layer)
        layer._parent = self

    def remove(self, layer: Layer) -> Self:
        """
        Removes the specified layer from the group.

        :param layer: The layer to remove.
        :raises ValueError: If the layer is not found in the group.
        :return: self
        """
        if layer not in self:
            raise ValueError(f"Layer {layer} not found in group {self}")
        self._layers.remove(layer)
        layer._parent = None
        return self

    def pop(self, index: int = -1) -> Layer:
        """
        Removes the specified layer from the list and returns it.

        :param index: The index of the layer to remove. Default is -1 (the last layer).
        :raises IndexError: If the index is out of range.
        :return: The removed layer.
        """
        layer = self[index]
        self.remove(layer)
        return layer

    def clear(self) -> None:
        """Removes all the layers from the group."""
        for layer in self._layers:
            layer._parent = None
        self._layers.clear()

    def index(self, layer: Layer) -> int:
        """
        Returns the index of the specified layer in the group.

        :param layer: The layer to find.
        """
        return self._layers.index(layer)

    def descendants(self) -> Iterator[Layer]:
        """
        Return a generator to iterate over all descendant layers, depth first.

        Example::

            for layer in root.descendants():
                print(layer)
        """
        for layer in self:
            yield layer
            if isinstance(layer, Group):
                yield from layer.descendants()

    def find(self, name: str) -> Optional[Layer]:
        """
        Returns the first descendant layer with the given name.

        :param name: name of the layer to find.
        :return: :py:class:`Layer` or None.
        """
        for layer in self.descendants():
            if layer.name == name:
                return layer
        return None

    def _detach(self, layer: Layer) -> None:
        if layer.parent is not None and layer in layer.parent:
            layer.parent._layers.remove(layer)

    def _check_insertion(self, layers: Iterable[Layer]) -> None:
        for layer in layers:
            if not isinstance(layer, Layer):
                raise TypeError(f"Expected Layer instance, got {type(layer).__name__}")
            if layer is self:
                raise ValueError(f"Cannot add the group {self} to itself")
            if isinstance(layer, Group) and self in list(layer.descendants()):
                raise ValueError(
                    "This operation would create a reference loop "
                    f"within the group between {self} and {layer}"
                )

    def render(
        self, layer_filter: Optional[Callable[[LayerProtocol], bool]] = None
    ) -> Image.Image:
        """
        Compose the children into an RGBA image of the group's size.

        :param layer_filter: Callable that takes a layer and returns whether
            it is composed. Default keeps visible layers.
        :return: :py:class:`PIL.Image.Image`
        """
        return composer.compose(
            self.rect, self._layers, self._background, layer_filter=layer_filter
        )

    def _repr_extra(self) -> str:
        return " layers=%d" % len(self) if len(self) else ""

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text(self.__repr__())
            return

        def _pretty(layer: Layer, p: Any) -> None:
            p.text(layer.__repr__())
            if isinstance(layer, Group):
                with p.indent(2):
                    for idx, child in enumerate(layer):
                        p.break_()
                        p.text("[%d] " % idx)
                        _pretty(child, p)

        _pretty(self, p)
