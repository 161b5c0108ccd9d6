"""
High-level API for building and rendering layer trees.

Key modules:

- :py:mod:`image_layers.api.layers`: Layer types (ColorLayer, ImageLayer, Group)
- :py:mod:`image_layers.api.protocols`: The layer capability contract
- :py:mod:`image_layers.api.composer`: Positioning and blitting of children
- :py:mod:`image_layers.api.pil_io`: PNG and JPEG output
- :py:mod:`image_layers.api.numpy_io`: NumPy array access to rendered pixels
- :py:mod:`image_layers.api.layout`: Layer trees from JSON layout documents

Example usage::

    from image_layers.api.layers import ColorLayer, Group
    from image_layers.api.pil_io import write_to_png

    root = Group((200, 200))
    root.append(ColorLayer((50, 50), alignment="center", vertical_alignment="middle"))
    write_to_png(root, "out.png")
"""
