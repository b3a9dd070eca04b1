"""
Skin data models for Skin64.

This module defines the core data structures used by the region transforms
and the layout algorithms.

Classes:
    Region: Fixed rectangle in canvas coordinates
    ModelVariant: Classic/slim limb width flags for cap and side panels
    SkinCanvas: Mutable RGBA pixel grid backed by a Pillow image
    UnsupportedSkinSizeError: Raised for images that are neither 64x32 nor 64x64

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from S64_Libs.constants import CANVAS_MODE, TRANSPARENT
from S64_Libs.pillow_compat import Image

RgbaColor = Tuple[int, int, int, int]


class UnsupportedSkinSizeError(ValueError):
    """Raised when a canvas is neither the legacy nor the modern layout size."""

    def __init__(self, size: Tuple[int, int]):
        self.size = size
        super().__init__(f"Unsupported skin size: {size[0]}x{size[1]}")


@dataclass(frozen=True)
class Region:
    """Rectangle (x, y, width, height) in canvas coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Pillow crop box (left, upper, right, lower)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True)
class ModelVariant:
    """Limb width flags, detected separately for the arm cap and side panels.

    Attributes:
        is_slim_top: Arm cap is 3px wide (slim) instead of 4px (classic)
        is_slim_body: Arm side panels are 3px wide (slim) instead of 4px (classic)
    """

    is_slim_top: bool = False
    is_slim_body: bool = False


class SkinCanvas:
    """
    In-memory RGBA pixel grid with fixed width and height.

    The canvas wraps a Pillow image in RGBA mode (straight alpha). Images in
    other modes are converted on construction; an RGBA image is wrapped
    as-is, so mutations are visible through the original image object.

    Example:
        >>> canvas = SkinCanvas.blank(64, 64)
        >>> canvas.set_pixel(0, 0, (255, 0, 0, 255))
        >>> canvas.get_pixel(0, 0)
        (255, 0, 0, 255)
    """

    def __init__(self, image: 'Image.Image'):
        if image.mode != CANVAS_MODE:
            image = image.convert(CANVAS_MODE)
        self._image = image
        self._pixels = image.load()

    @classmethod
    def blank(cls, width: int, height: int) -> "SkinCanvas":
        """Allocate a fully transparent canvas."""
        return cls(Image.new(CANVAS_MODE, (width, height), TRANSPARENT))

    @classmethod
    def from_image(cls, image: 'Image.Image') -> "SkinCanvas":
        return cls(image)

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def image(self) -> 'Image.Image':
        """The backing Pillow image (shared, not copied)."""
        return self._image

    def _check_point(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas"
            )

    def check_region(self, region: Region) -> None:
        """
        Validate that a region lies entirely within the canvas.

        Raises:
            IndexError: If any part of the region falls outside the canvas
        """
        if (
            region.width < 0
            or region.height < 0
            or region.x < 0
            or region.y < 0
            or region.x + region.width > self.width
            or region.y + region.height > self.height
        ):
            raise IndexError(
                f"Region {region} outside {self.width}x{self.height} canvas"
            )

    def get_pixel(self, x: int, y: int) -> RgbaColor:
        self._check_point(x, y)
        return self._pixels[x, y]

    def set_pixel(self, x: int, y: int, color: RgbaColor) -> None:
        self._check_point(x, y)
        self._pixels[x, y] = tuple(color)

    def crop(self, region: Region) -> 'Image.Image':
        """Return an independent copy of the region's pixels."""
        self.check_region(region)
        return self._image.crop(region.box)

    def paste(self, patch: 'Image.Image', region: Region) -> None:
        """Overwrite the region (all four channels) with a patch of the same size."""
        self.check_region(region)
        if patch.size != region.size:
            raise ValueError(
                f"Patch size {patch.size} does not match region size {region.size}"
            )
        self._image.paste(patch, region.origin)

    def alpha(self, region: Region) -> np.ndarray:
        """Alpha channel of a region as a (height, width) uint8 array."""
        return np.asarray(self.crop(region))[:, :, 3]

    def copy(self) -> "SkinCanvas":
        return SkinCanvas(self._image.copy())

    def to_image(self) -> 'Image.Image':
        """Return a copy of the backing image for encoding."""
        return self._image.copy()

    def to_array(self) -> np.ndarray:
        """Pixel data as a (height, width, 4) uint8 array."""
        return np.array(self._image)

    def __repr__(self) -> str:
        return f"SkinCanvas({self.width}x{self.height})"
