"""
In-place backfill of a missing left arm and left leg on 64x64 skins.

Some modern skins only draw the right limbs and leave rows 48-63 empty.
Those are repaired by rebuilding the left limbs from the right ones, but
only when the left side is clearly undrawn. Anything ambiguous rejects
the whole repair and leaves the canvas untouched.

Functions:
    check_repair_gate: Explain why a canvas may not be repaired (None if it may)
    repair_limb_mirror: Validate and repair a canvas in place
"""

import logging
from typing import Optional, Tuple

from S64_Libs.constants import ALPHA_THRESHOLD, MAX_ARM_PANEL_NOTCH, MODERN_SIZE
from S64_Libs.SkinEditingLib.legacy_upgrader import rebuild_left_limbs
from S64_Libs.SkinEditingLib.model_detector import detect_variant
from S64_Libs.SkinEditingLib.region_ops import (
    count_transparent_from_right,
    is_fully_transparent,
)
from S64_Libs.SkinEditingLib.skin_layout import (
    LEFT_ARM_CAPS,
    LEFT_ARM_PANELS,
    LEFT_LEG_CAPS,
    LEFT_LEG_PANELS,
    LEFT_LIMB_BLOCKS,
)
from S64_Libs.SkinEditingLib.skin_models import SkinCanvas

logger = logging.getLogger(__name__)


def check_repair_gate(canvas: SkinCanvas) -> Optional[str]:
    """
    Evaluate the repair preconditions in order.

    Args:
        canvas: Skin canvas of any size

    Returns:
        None if the canvas may be repaired, otherwise a short reason
        naming the first failed check
    """
    if canvas.size != MODERN_SIZE:
        return f"canvas is {canvas.width}x{canvas.height}, not 64x64"

    for region in LEFT_LIMB_BLOCKS:
        if not is_fully_transparent(canvas, region, ALPHA_THRESHOLD):
            return f"left limb block {region} is not empty"

    for region in LEFT_LEG_PANELS + LEFT_LEG_CAPS:
        if not is_fully_transparent(canvas, region, ALPHA_THRESHOLD):
            return f"left leg face {region} is not empty"

    for region in LEFT_ARM_PANELS:
        if is_fully_transparent(canvas, region, ALPHA_THRESHOLD):
            continue
        notch = count_transparent_from_right(canvas, region, ALPHA_THRESHOLD)
        if notch > MAX_ARM_PANEL_NOTCH:
            return f"left arm panel {region} is partially drawn ({notch} clear columns)"

    for region in LEFT_ARM_CAPS:
        if not is_fully_transparent(canvas, region, ALPHA_THRESHOLD):
            return f"left arm cap {region} is not empty"

    return None


def repair_limb_mirror(canvas: SkinCanvas) -> Tuple[SkinCanvas, bool]:
    """
    Rebuild the left limbs of a 64x64 skin from its right limbs, in place.

    A rejected canvas is returned unmodified with success False; rejection
    is a normal outcome, not an error.

    Args:
        canvas: Skin canvas to repair

    Returns:
        Tuple of (canvas, success)
    """
    reason = check_repair_gate(canvas)
    if reason is not None:
        logger.debug(f"Limb mirror repair rejected: {reason}")
        return canvas, False

    variant = detect_variant(canvas)
    rebuild_left_limbs(canvas, canvas, variant)

    logger.debug(f"Repaired left limbs ({variant})")
    return canvas, True
