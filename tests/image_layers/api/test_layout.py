import json
import logging
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from image_layers.api.layers import ColorLayer, Group, ImageLayer
from image_layers.api.layout import LAYER_TYPES, load_layout, open_layout
from image_layers.constants import Alignment, VerticalAlignment
from image_layers.geometry import Point, Size

from ..utils import RED, WHITE, painted_bbox, pixel

logger = logging.getLogger(__name__)


@pytest.fixture
def document() -> dict[str, Any]:
    return {
        "type": "group",
        "name": "card",
        "size": [200, 200],
        "background": [255, 255, 255, 255],
        "children": [
            {
                "type": "color",
                "name": "box",
                "size": [50, 50],
                "color": [255, 0, 0, 255],
                "alignment": "center",
                "vertical_alignment": "middle",
            },
            {
                "type": "color",
                "name": "hidden",
                "size": [10, 10],
                "offset": [5, 5],
                "visible": False,
            },
        ],
    }


def test_layer_types() -> None:
    assert sorted(LAYER_TYPES) == ["color", "group", "image"]


def test_load_layout(document: dict[str, Any]) -> None:
    root = load_layout(document)
    assert isinstance(root, Group)
    assert root.name == "card"
    assert root.size == Size(200, 200)
    assert root.background == WHITE
    box, hidden = root
    assert isinstance(box, ColorLayer)
    assert box.color == RED
    assert box.alignment is Alignment.CENTER
    assert box.vertical_alignment is VerticalAlignment.MIDDLE
    assert hidden.offset == Point(5, 5)
    assert hidden.visible is False

    image = root.render()
    assert pixel(image, 100, 100) == RED
    assert pixel(image, 7, 7) == WHITE


def test_load_layout_infers_group() -> None:
    root = load_layout({"size": [10, 10], "children": []})
    assert isinstance(root, Group)
    assert len(root) == 0


def test_load_image_layer(gradient_image: Image.Image, tmp_path: Path) -> None:
    gradient_image.save(tmp_path / "gradient.png")
    data = {
        "size": [100, 100],
        "children": [
            {"type": "image", "path": "gradient.png", "alignment": "right"},
            {"type": "image", "path": str(tmp_path / "gradient.png"), "name": "abs"},
        ],
    }
    root = load_layout(data, base_dir=str(tmp_path))
    relative, absolute = root
    assert isinstance(relative, ImageLayer)
    assert relative.name == "gradient.png"
    assert absolute.name == "abs"
    assert relative.size == Size(40, 30)


def test_open_layout(
    document: dict[str, Any], gradient_image: Image.Image, tmp_path: Path
) -> None:
    gradient_image.save(tmp_path / "logo.png")
    document["children"].append(
        {"type": "image", "path": "logo.png", "alignment": "left", "vertical_alignment": "top"}
    )
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    root = open_layout(path)
    assert len(root) == 3  # type: ignore[arg-type]
    assert painted_bbox(root.render()) == (0, 0, 200, 200)
    assert root.render().crop((0, 0, 40, 30)).tobytes() == gradient_image.tobytes()


@pytest.mark.parametrize(
    "data",
    [
        {"type": "circle", "size": [1, 1]},
        {"name": "no type"},
        {"type": "color"},
        {"type": "group"},
        {"type": "image"},
        {"type": "color", "size": [1, 1], "alignment": "middle"},
    ],
)
def test_load_layout_errors(data: dict[str, Any]) -> None:
    with pytest.raises(ValueError):
        load_layout(data)


def test_load_layout_type_error() -> None:
    with pytest.raises(TypeError):
        load_layout([])  # type: ignore[arg-type]


def test_open_layout_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        open_layout(tmp_path / "missing.json")
