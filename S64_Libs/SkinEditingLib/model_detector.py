"""
Classic/slim model detection by transparency probing.

Slim skins draw 3px wide arms inside the 4px classic slots, which leaves
a narrow fully transparent notch at the right edge of the right arm.
The cap and the side panels are probed independently and may disagree.
"""

import logging

from S64_Libs.constants import ALPHA_THRESHOLD, SLIM_NOTCH_MAX, SLIM_NOTCH_MIN
from S64_Libs.SkinEditingLib.region_ops import count_transparent_from_right
from S64_Libs.SkinEditingLib.skin_layout import ARM_LAYER_PROBE, SLEEVE_PROBE
from S64_Libs.SkinEditingLib.skin_models import ModelVariant, Region, SkinCanvas

logger = logging.getLogger(__name__)


def _is_slim_notch(canvas: SkinCanvas, probe: Region) -> bool:
    notch = count_transparent_from_right(canvas, probe, ALPHA_THRESHOLD)
    return SLIM_NOTCH_MIN <= notch <= SLIM_NOTCH_MAX


def detect_variant(canvas: SkinCanvas) -> ModelVariant:
    """
    Classify the right arm's cap and side panels as classic or slim.

    Args:
        canvas: A 64x32 or 64x64 skin canvas

    Returns:
        ModelVariant with independent is_slim_top / is_slim_body flags
    """
    variant = ModelVariant(
        is_slim_top=_is_slim_notch(canvas, SLEEVE_PROBE),
        is_slim_body=_is_slim_notch(canvas, ARM_LAYER_PROBE),
    )
    logger.debug(f"Detected model variant: {variant}")
    return variant
