from .errors import LoaderError
from .layout_loader import LayoutFileSpec, load_layout, load_layouts

__all__ = ["load_layout", "load_layouts", "LayoutFileSpec", "LoaderError"]
