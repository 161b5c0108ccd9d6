"""
Registry helper used to map output formats to encoder functions.

Usage example::

    from image_layers.registry import new_registry

    ENCODERS, register = new_registry(attribute="format")

    @register("PNG")
    def write_png(image, fp):
        image.save(fp, format="PNG")

    # ENCODERS == {"PNG": write_png}, write_png.format == "PNG"
"""

from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


def new_registry(attribute: Optional[str] = None) -> tuple[dict, Callable]:
    """
    Returns an empty dict and a @register decorator.

    :param attribute: Optional attribute name to set on registered objects.
        The key will be stored as this attribute on the object.
    :return: Tuple of (registry_dict, register_decorator)
    """
    registry: dict = {}

    def register(key: Any) -> Callable[[Callable[..., T]], Callable[..., T]]:
        def decorator(func: Callable[..., T]) -> Callable[..., T]:
            registry[key] = func
            if attribute:
                setattr(func, attribute, key)
            return func

        return decorator

    return registry, register
