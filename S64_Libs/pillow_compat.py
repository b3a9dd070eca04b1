"""
Compatibility wrapper to import Pillow (which provides the `PIL` namespace)
and expose the symbols Skin64 uses from a single place.

This module loads the Pillow-provided module via importlib and re-exports
`Image` and `UnidentifiedImageError`. Importing from `pillow_compat` keeps
the Pillow dependency check in one spot for the whole library.
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil = _import("PIL")
_pil_image = _import("PIL.Image")

if _pil is None or _pil_image is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

Image = _pil_image

# Raised by Image.open() for files Pillow cannot decode
UnidentifiedImageError = _pil.UnidentifiedImageError
