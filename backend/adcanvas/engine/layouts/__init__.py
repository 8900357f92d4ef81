"""Built-in layout variants. Importing this package registers them."""

from adcanvas.engine.layouts import split, stacked

__all__ = ["split", "stacked"]
