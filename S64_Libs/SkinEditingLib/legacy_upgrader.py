"""
Legacy (64x32) to modern (64x64) skin upgrade.

The legacy layout has no left limb art; the modern layout expects the
left arm and leg in rows 48-63. The left limbs are rebuilt from the right
ones: the blocks are copied across, then each face is mirrored so the
limb reads correctly from the other side of the body.

Functions:
    rebuild_left_limbs: Fill the modern left limb blocks from right limb art
    upgrade_legacy_skin: Build a 64x64 canvas from a 64x32 one
"""

import logging

from S64_Libs.constants import LEGACY_SIZE, MODERN_SIZE
from S64_Libs.SkinEditingLib.model_detector import detect_variant
from S64_Libs.SkinEditingLib.region_ops import (
    copy_region,
    mirror_copy_region,
    mirror_in_place,
    swap_mirror_regions,
)
from S64_Libs.SkinEditingLib.skin_layout import (
    LEFT_ARM_BACK,
    LEFT_ARM_BLOCK,
    LEFT_ARM_BOTTOM,
    LEFT_ARM_FRONT,
    LEFT_ARM_LEFT_FACE,
    LEFT_ARM_RIGHT_FACE,
    LEFT_ARM_TOP,
    LEFT_LEG_BACK,
    LEFT_LEG_BLOCK,
    LEFT_LEG_BOTTOM,
    LEFT_LEG_FRONT,
    LEFT_LEG_LEFT_FACE,
    LEFT_LEG_RIGHT_FACE,
    LEFT_LEG_TOP,
    LEGACY_AREA,
    RIGHT_ARM_BLOCK,
    RIGHT_LEG_BLOCK,
    SLIM_LEFT_ARM_BACK,
    SLIM_LEFT_ARM_BOTTOM,
    SLIM_LEFT_ARM_FRONT,
    SLIM_LEFT_ARM_TOP,
    SLIM_RIGHT_ARM_BACK,
    SLIM_RIGHT_ARM_BOTTOM,
    SLIM_RIGHT_ARM_FRONT,
    SLIM_RIGHT_ARM_TOP,
)
from S64_Libs.SkinEditingLib.skin_models import (
    ModelVariant,
    SkinCanvas,
    UnsupportedSkinSizeError,
)

logger = logging.getLogger(__name__)


def rebuild_left_limbs(
    source: SkinCanvas,
    target: SkinCanvas,
    variant: ModelVariant,
) -> None:
    """
    Fill the modern left arm and left leg blocks of target from the right
    limb art in rows 16-31 of source.

    source and target may be the same canvas: every read from source
    touches rows 16-31 only, and every write lands in rows 48-63.

    Args:
        source: Canvas holding the right limb art (64x32 or 64x64)
        target: 64x64 canvas to write the left limbs into
        variant: Arm widths detected on source
    """
    copy_region(source, RIGHT_ARM_BLOCK, target, LEFT_ARM_BLOCK)
    copy_region(source, RIGHT_LEG_BLOCK, target, LEFT_LEG_BLOCK)

    swap_mirror_regions(target, LEFT_ARM_LEFT_FACE, LEFT_ARM_RIGHT_FACE)

    if variant.is_slim_body:
        mirror_copy_region(source, SLIM_RIGHT_ARM_FRONT, target, SLIM_LEFT_ARM_FRONT)
        mirror_copy_region(source, SLIM_RIGHT_ARM_BACK, target, SLIM_LEFT_ARM_BACK)
    else:
        mirror_in_place(target, LEFT_ARM_BACK)
        mirror_in_place(target, LEFT_ARM_FRONT)

    if variant.is_slim_top:
        mirror_copy_region(source, SLIM_RIGHT_ARM_TOP, target, SLIM_LEFT_ARM_TOP)
        mirror_copy_region(source, SLIM_RIGHT_ARM_BOTTOM, target, SLIM_LEFT_ARM_BOTTOM)
    else:
        mirror_in_place(target, LEFT_ARM_TOP)
        mirror_in_place(target, LEFT_ARM_BOTTOM)

    # Legs have no slim variant
    swap_mirror_regions(target, LEFT_LEG_LEFT_FACE, LEFT_LEG_RIGHT_FACE)
    mirror_in_place(target, LEFT_LEG_FRONT)
    mirror_in_place(target, LEFT_LEG_BACK)
    mirror_in_place(target, LEFT_LEG_TOP)
    mirror_in_place(target, LEFT_LEG_BOTTOM)


def upgrade_legacy_skin(legacy: SkinCanvas) -> SkinCanvas:
    """
    Build a modern 64x64 skin from a legacy 64x32 skin.

    Rows 0-31 are copied unchanged; the left limbs are rebuilt from the
    right limbs. The input canvas is not modified.

    Args:
        legacy: A 64x32 skin canvas

    Returns:
        A new, fully populated 64x64 canvas

    Raises:
        UnsupportedSkinSizeError: If legacy is not 64x32
    """
    if legacy.size != LEGACY_SIZE:
        raise UnsupportedSkinSizeError(legacy.size)

    modern = SkinCanvas.blank(*MODERN_SIZE)
    copy_region(legacy, LEGACY_AREA, modern, LEGACY_AREA)

    variant = detect_variant(legacy)
    rebuild_left_limbs(legacy, modern, variant)

    logger.debug(f"Upgraded legacy skin ({variant})")
    return modern
