"""
Layout documents.

A layout document is a JSON-compatible dict describing a layer tree::

    {
        "type": "group",
        "name": "card",
        "size": [200, 200],
        "background": [255, 255, 255, 255],
        "children": [
            {"type": "color", "size": [50, 50], "color": [255, 0, 0, 255],
             "alignment": "center", "vertical_alignment": "middle"},
            {"type": "image", "path": "logo.png", "offset": [10, 10]}
        ]
    }

Recognized keys are ``type``, ``name``, ``size``, ``offset``, ``color``,
``background``, ``path``, ``alignment``, ``vertical_alignment``, ``visible``
and ``children``. Relative image paths are resolved against ``base_dir``,
which :py:func:`open_layout` sets to the document's directory.
"""

import json
import logging
import os
from typing import Any, Callable, Optional, Union

from image_layers.api.layers import ColorLayer, Group, ImageLayer, Layer
from image_layers.registry import new_registry

logger = logging.getLogger(__name__)

LAYER_TYPES, register = new_registry(attribute="layout_type")

_COMMON_KEYS = ("name", "offset", "alignment", "vertical_alignment", "visible")


def _require(data: dict, key: str) -> Any:
    if key not in data:
        raise ValueError(
            f"Missing required key {key!r} in {data.get('type', 'layer')} layout"
        )
    return data[key]


def _color(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    return value


def _common(data: dict) -> dict:
    return {key: data[key] for key in _COMMON_KEYS if key in data}


@register("color")
def _load_color(data: dict, base_dir: str) -> ColorLayer:
    kwargs = _common(data)
    if "color" in data:
        kwargs["color"] = _color(data["color"])
    return ColorLayer(_require(data, "size"), **kwargs)


@register("image")
def _load_image(data: dict, base_dir: str) -> ImageLayer:
    path = _require(data, "path")
    if not os.path.isabs(path):
        path = os.path.join(base_dir, path)
    return ImageLayer.open(path, **_common(data))


@register("group")
def _load_group(data: dict, base_dir: str) -> Group:
    children = [load_layout(child, base_dir) for child in data.get("children", [])]
    return Group(
        _require(data, "size"),
        children,
        background=_color(data.get("background")),
        **_common(data),
    )


def load_layout(data: dict, base_dir: Optional[str] = None) -> Layer:
    """
    Build a layer tree from a layout dict.

    :param data: layout document.
    :param base_dir: directory for relative image paths. Default is the
        current working directory.
    :return: the root :py:class:`~image_layers.api.layers.Layer`.
    :raises ValueError: If a layer type is unknown or a required key is missing.
    """
    if not isinstance(data, dict):
        raise TypeError(f"Expected dict, got {type(data).__name__}")
    kind = data.get("type", "group" if "children" in data else None)
    loader: Optional[Callable[[dict, str], Layer]] = LAYER_TYPES.get(kind)
    if loader is None:
        raise ValueError(
            f"Unknown layer type {kind!r}, expected one of {sorted(LAYER_TYPES)}"
        )
    layer = loader(data, base_dir if base_dir is not None else os.getcwd())
    logger.debug("Loaded %r", layer)
    return layer


def open_layout(fp: Union[str, "os.PathLike[str]"]) -> Layer:
    """
    Read a layout document from a JSON file.

    :param fp: filename of the JSON document.
    :return: the root :py:class:`~image_layers.api.layers.Layer`.
    """
    with open(fp, "r", encoding="utf-8") as f:
        data = json.load(f)
    return load_layout(data, os.path.dirname(os.path.abspath(fp)))
