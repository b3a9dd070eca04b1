"""
Primitive rectangle transforms on skin canvases.

Every operation reads its source pixels into an independent Pillow image
(crop) before writing anything, so source and destination may be the same
canvas and may overlap. Regions outside the canvas raise IndexError.

Functions:
    copy_region: Copy a region pixel-for-pixel
    mirror_copy_region: Copy a region flipped horizontally
    mirror_in_place: Flip a region horizontally in place
    swap_mirror_regions: Exchange two regions, flipping both
    is_fully_transparent: Check that no pixel in a region is opaque
    count_transparent_from_right: Length of the transparent column run at a region's right edge
"""

from S64_Libs.constants import ALPHA_THRESHOLD
from S64_Libs.pillow_compat import Image
from S64_Libs.SkinEditingLib.skin_models import Region, SkinCanvas


def _check_same_size(first: Region, second: Region) -> None:
    if first.size != second.size:
        raise ValueError(
            f"Region sizes differ: {first.size} vs {second.size}"
        )


def _flipped(patch: 'Image.Image') -> 'Image.Image':
    return patch.transpose(Image.Transpose.FLIP_LEFT_RIGHT)


def copy_region(
    src: SkinCanvas,
    src_region: Region,
    dst: SkinCanvas,
    dst_region: Region,
) -> None:
    """
    Copy pixels from one region to another of the same size.

    Args:
        src: Canvas to read from
        src_region: Region to read
        dst: Canvas to write to (may be src)
        dst_region: Region to write

    Raises:
        ValueError: If the regions differ in size
        IndexError: If either region falls outside its canvas
    """
    _check_same_size(src_region, dst_region)
    dst.paste(src.crop(src_region), dst_region)


def mirror_copy_region(
    src: SkinCanvas,
    src_region: Region,
    dst: SkinCanvas,
    dst_region: Region,
) -> None:
    """
    Copy a region flipped horizontally.

    Destination column x receives source column (width - 1 - x) of the
    same row.

    Raises:
        ValueError: If the regions differ in size
        IndexError: If either region falls outside its canvas
    """
    _check_same_size(src_region, dst_region)
    dst.paste(_flipped(src.crop(src_region)), dst_region)


def mirror_in_place(canvas: SkinCanvas, region: Region) -> None:
    """Flip a region horizontally in place. The center column of an odd-width region is unchanged."""
    canvas.paste(_flipped(canvas.crop(region)), region)


def swap_mirror_regions(canvas: SkinCanvas, region_a: Region, region_b: Region) -> None:
    """
    Exchange two same-sized regions, flipping each horizontally.

    Both regions are snapshotted before either is written, so adjacent or
    overlapping regions are handled correctly. Region B receives the mirror
    of A's original pixels, then region A receives the mirror of B's.

    Raises:
        ValueError: If the regions differ in size
        IndexError: If either region falls outside the canvas
    """
    _check_same_size(region_a, region_b)
    snapshot_a = canvas.crop(region_a)
    snapshot_b = canvas.crop(region_b)
    canvas.paste(_flipped(snapshot_a), region_b)
    canvas.paste(_flipped(snapshot_b), region_a)


def is_fully_transparent(
    canvas: SkinCanvas,
    region: Region,
    alpha_threshold: int = ALPHA_THRESHOLD,
) -> bool:
    """Return True iff every pixel in the region has alpha <= alpha_threshold."""
    return not (canvas.alpha(region) > alpha_threshold).any()


def count_transparent_from_right(
    canvas: SkinCanvas,
    region: Region,
    alpha_threshold: int = ALPHA_THRESHOLD,
) -> int:
    """
    Count the fully transparent columns at the right edge of a region.

    Columns are scanned right to left; counting stops at the first column
    holding any pixel with alpha above the threshold.

    Returns:
        Length of the trailing transparent run (0 to region.width)
    """
    clear_columns = (canvas.alpha(region) <= alpha_threshold).all(axis=0)
    count = 0
    for is_clear in clear_columns[::-1]:
        if not is_clear:
            break
        count += 1
    return count
